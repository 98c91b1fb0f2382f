from typing import Any, Dict, Optional


class TranslationError(Exception):
    """Базовая ошибка перевода. status_code используется relay-сервисом."""

    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.public_message}


class InvalidInput(TranslationError):
    status_code = 400
    public_message = "Invalid request"

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(TranslationError):
    status_code = 500
    public_message = "API key not configured"


class ProviderError(TranslationError):
    """Провайдер ответил не-2xx. Тело ответа только для диагностики."""

    public_message = "Translation service error"

    def __init__(self, status: int, body: str = ""):
        super().__init__(f"Translation service error: {status}")
        self.status = status
        self.body = body
        # 3xx и прочие странные коды наружу не пробрасываем
        self.status_code = status if status >= 400 else 502

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.public_message, "details": self.body}


class EmptyResponse(TranslationError):
    status_code = 500
    public_message = "No translation received from AI"


class TransportError(TranslationError):
    status_code = 502
    public_message = "Translation service unreachable"

    def __init__(self, message: Optional[str] = None, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out
        if timed_out:
            self.status_code = 504

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.public_message, "message": self.message}


class TranslationInProgress(Exception):
    """Повторный вызов, пока предыдущий перевод ещё не завершён."""
