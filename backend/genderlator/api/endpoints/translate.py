import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from genderlator.core.deps import TranslatorDep
from genderlator.core.errors import TranslationError
from genderlator.models.domain import (
    ErrorResponse,
    HealthResponse,
    TranslateRequest,
    TranslateResponse,
    TranslationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/translate",
    response_model=TranslateResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def translate(
    translator: TranslatorDep, request: Optional[TranslateRequest] = Body(None)
):
    # Пустое тело доходит сюда как None и получает наш 400
    text = request.text if request is not None else None
    mode = request.mode if request is not None else None
    try:
        translation_request = TranslationRequest.create(text, mode)
        result = await translator.translate(translation_request)
    except TranslationError as e:
        logger.warning("Translation failed (%s): %s", type(e).__name__, e.message)
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
    except Exception as e:
        logger.exception("Translation error")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(e)},
        )

    return TranslateResponse.from_result(result)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok", timestamp=datetime.now(timezone.utc).isoformat()
    )
