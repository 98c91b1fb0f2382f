import logging
import os
import uvicorn
from dotenv import load_dotenv

load_dotenv()

from genderlator.core.config import settings  # noqa: E402  (после .env)
from genderlator.main import configure_logging  # noqa: E402

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("genderlator.run")


def apply_proxy(proxy_url):
    # Исходящие вызовы к Gemini через прокси, если он задан
    if not proxy_url:
        logger.info("No proxy configured, calling the provider directly")
        return
    logger.info("Using proxy for outbound calls: %s", proxy_url)
    os.environ["http_proxy"] = proxy_url
    os.environ["https_proxy"] = proxy_url


if __name__ == "__main__":
    apply_proxy(settings.PROXY_URL)
    logger.info(
        "Relay listening on %s:%s, endpoint POST %s/translate",
        settings.HOST,
        settings.PORT,
        settings.API_PREFIX,
    )
    uvicorn.run(
        "genderlator.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=True,
        log_level=settings.LOG_LEVEL,
    )
