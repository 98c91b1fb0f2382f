import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from genderlator.api.endpoints import translate
from genderlator.core.config import settings


def configure_logging(level: str = "info"):
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # httpx пишет полный URL запроса, а в нём ?key=...
    logging.getLogger("httpx").setLevel(logging.WARNING)


configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Нет ни аутентификации, ни лимитов: только для доверенной сети
    logger.warning(
        "Relay has no authentication or rate limiting; deploy only on a trusted network"
    )
    if not settings.GOOGLE_AI_API_KEY and settings.TRANSLATOR_BACKEND == "gemini":
        logger.warning("GOOGLE_AI_API_KEY is not set; /api/translate will return 500")
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# Мобильный клиент ходит с произвольных адресов
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роуты
app.include_router(translate.router, prefix=settings.API_PREFIX, tags=["translate"])


@app.exception_handler(RequestValidationError)
async def translate_validation_handler(request: Request, exc: RequestValidationError):
    # Битый JSON или не-объект в теле: тот же 400, что и для пустого текста
    if request.url.path == f"{settings.API_PREFIX}/translate":
        return JSONResponse(
            status_code=400, content={"error": 'Missing or invalid "text" field'}
        )
    return await request_validation_exception_handler(request, exc)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("genderlator.main:app", host=settings.HOST, port=settings.PORT, reload=True)
