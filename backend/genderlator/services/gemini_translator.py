import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from genderlator.core.errors import (
    ConfigurationError,
    EmptyResponse,
    ProviderError,
    TransportError,
)
from genderlator.models.domain import TranslationRequest, TranslationResult
from genderlator.services.prompts import GenerationConfig, build_request_body
from genderlator.services.translator import Translator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


@dataclass(frozen=True)
class ProviderConfig:
    api_key: Optional[str] = None
    model: str = "gemini-flash-latest"
    base_url: str = DEFAULT_BASE_URL
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings) -> "ProviderConfig":
        return cls(
            api_key=settings.GOOGLE_AI_API_KEY,
            model=settings.GOOGLE_AI_MODEL,
            base_url=settings.GOOGLE_AI_BASE_URL,
            generation=settings.generation_config(),
            timeout=settings.REQUEST_TIMEOUT_SECONDS,
        )


def extract_text(data: Any) -> Optional[str]:
    """candidates[0].content.parts[0].text, либо None если чего-то нет."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(text, str):
        return None
    return text.strip() or None


class GeminiTranslator(Translator):
    """Прямой вызов Gemini generateContent. Один запрос на вызов, без повторов."""

    name = "gemini"

    def __init__(
        self,
        config: ProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._transport = transport
        logger.debug("--- INIT MODEL: %s ---", config.model)

    @property
    def endpoint(self) -> str:
        base = self.config.base_url.rstrip("/")
        return f"{base}/models/{self.config.model}:generateContent"

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        request = TranslationRequest.create(request.text, request.direction)

        api_key = self.config.api_key
        if not api_key or not api_key.strip():
            raise ConfigurationError()

        body = build_request_body(
            request.direction, request.text, self.config.generation
        )

        logger.info(
            "[TRANSLATE] Sending request to AI (mode=%s, model=%s)",
            request.direction.value,
            self.config.model,
        )
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": api_key.strip()},
                    json=body,
                )
        except httpx.TimeoutException as e:
            logger.error("!!! [TRANSLATE] Timeout after %ss: %s", self.config.timeout, e)
            raise TransportError(
                f"Request timed out after {self.config.timeout}s", timed_out=True
            )
        except httpx.HTTPError as e:
            logger.error("!!! [TRANSLATE] Transport error: %s", e)
            raise TransportError(f"Network error: {e}")

        if not response.is_success:
            logger.error(
                "Google AI API Error (%s): %s", response.status_code, response.text
            )
            raise ProviderError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("!!! [TRANSLATE] Malformed response body: %s", e)
            raise TransportError("Malformed response from translation service")

        translation = extract_text(data)
        if translation is None:
            logger.warning("[TRANSLATE] Empty response: %s", response.text)
            raise EmptyResponse()

        logger.debug("[TRANSLATE] Raw AI Response: %s", translation)
        return TranslationResult(
            translated_text=translation,
            direction=request.direction,
            original_text=request.text,
        )
