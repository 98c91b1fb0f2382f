import logging
from typing import Optional

import httpx

from genderlator.core.errors import (
    EmptyResponse,
    InvalidInput,
    ProviderError,
    TransportError,
)
from genderlator.models.domain import (
    TranslationDirection,
    TranslationRequest,
    TranslationResult,
)
from genderlator.services.translator import Translator

logger = logging.getLogger(__name__)


class RelayTranslator(Translator):
    """
    Клиент relay-сервиса. Ключ провайдера хранится только на сервере,
    клиент знает лишь адрес relay.
    """

    name = "relay"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        request = TranslationRequest.create(request.text, request.direction)
        payload = {"text": request.text, "mode": request.direction.value}

        try:
            async with self._client() as client:
                response = await client.post("/api/translate", json=payload)
        except httpx.TimeoutException as e:
            logger.error("Relay timeout: %s", e)
            raise TransportError(
                f"Request timed out after {self.timeout}s", timed_out=True
            )
        except httpx.HTTPError as e:
            logger.error("Relay unreachable: %s", e)
            raise TransportError(f"Network error: {e}")

        if response.status_code == 400:
            raise InvalidInput(self._error_message(response))

        if not response.is_success:
            logger.error("Relay error (%s): %s", response.status_code, response.text)
            raise ProviderError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError:
            raise TransportError("Malformed response from relay")

        translation = data.get("translation") if isinstance(data, dict) else None
        if not isinstance(translation, str) or not translation.strip():
            raise EmptyResponse()

        # Кривые поля ответа relay не должны выглядеть как ошибка вызывающего
        try:
            direction = TranslationDirection(data.get("mode"))
        except (ValueError, TypeError):
            direction = request.direction
        original_text = data.get("originalText")
        if not isinstance(original_text, str):
            original_text = request.text

        return TranslationResult(
            translated_text=translation.strip(),
            direction=direction,
            original_text=original_text,
        )

    async def health(self) -> bool:
        try:
            async with self._client() as client:
                response = await client.get("/api/health")
            data = response.json() if response.is_success else None
            return isinstance(data, dict) and data.get("status") == "ok"
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Relay health check failed: %s", e)
            return False

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("error") or "Invalid request"
        except (ValueError, AttributeError):
            return "Invalid request"
