import logging
from typing import Optional

from genderlator.core.errors import TranslationInProgress
from genderlator.models.domain import (
    TranslationDirection,
    TranslationRequest,
    TranslationResult,
)
from genderlator.services.state_store import LocalStateStore
from genderlator.services.translator import Translator

logger = logging.getLogger(__name__)


class TranslatorSession:
    """
    Состояние экрана переводчика: текущее направление, последний успешный
    результат и один запрос в полёте.
    """

    def __init__(
        self,
        translator: Translator,
        store: LocalStateStore,
        direction: TranslationDirection = TranslationDirection.FEMALE_TO_MALE,
    ):
        self.translator = translator
        self.store = store
        self.direction = direction
        self.last_result: Optional[TranslationResult] = None
        self._busy = False
        self._token = 0

    @property
    def busy(self) -> bool:
        return self._busy

    async def translate(self, text: str) -> Optional[TranslationResult]:
        if not isinstance(text, str) or not text.strip():
            return None
        if self._busy:
            raise TranslationInProgress("Translation already in progress")

        self._token += 1
        token = self._token
        request = TranslationRequest.create(text, self.direction)

        self._busy = True
        try:
            result = await self.translator.translate(request)
        except Exception as e:
            # Ошибка отменённого запроса пользователю не показывается
            if token != self._token:
                logger.info("Discarding stale failure for %r: %s", text, e)
                return None
            raise
        finally:
            self._busy = False

        # Направление сменили, пока ждали ответ: результат устарел
        if token != self._token:
            logger.info("Discarding stale translation for %r", text)
            return None

        self.last_result = result
        self.store.add(result.direction, result.original_text, result.translated_text)
        return result

    def toggle_direction(self) -> TranslationDirection:
        self.direction = self.direction.toggled()
        self.last_result = None
        self._token += 1
        return self.direction

    @staticmethod
    def user_message(error: Exception) -> str:
        message = getattr(error, "message", None) or str(error) or "Wystąpił nieznany błąd"
        return f"Nie udało się przetłumaczyć tekstu: {message}"
