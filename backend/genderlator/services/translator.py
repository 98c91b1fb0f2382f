from abc import ABC, abstractmethod

from genderlator.models.domain import TranslationRequest, TranslationResult


class Translator(ABC):
    """
    Общий интерфейс перевода. Выбор реализации (прямой вызов Gemini,
    relay или статическая таблица) - это решение при развёртывании.
    """

    name: str = "translator"

    @abstractmethod
    async def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Raises:
            InvalidInput, ConfigurationError, ProviderError,
            EmptyResponse, TransportError
        """
