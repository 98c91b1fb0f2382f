from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel

from genderlator.core.errors import InvalidInput


class TranslationDirection(str, Enum):
    FEMALE_TO_MALE = "female-to-male"
    MALE_TO_FEMALE = "male-to-female"

    @classmethod
    def parse(cls, value: Any) -> "TranslationDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidInput(
                'Invalid "mode" field. Must be "female-to-male" or "male-to-female"'
            )

    def toggled(self) -> "TranslationDirection":
        if self is TranslationDirection.FEMALE_TO_MALE:
            return TranslationDirection.MALE_TO_FEMALE
        return TranslationDirection.FEMALE_TO_MALE


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class TranslationRequest:
    text: str
    direction: TranslationDirection

    @classmethod
    def create(cls, text: Any, direction: Any) -> "TranslationRequest":
        """Проверка входа до любого сетевого вызова."""
        if not isinstance(text, str) or not text.strip():
            raise InvalidInput('Missing or invalid "text" field')
        return cls(text=text, direction=TranslationDirection.parse(direction))


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    direction: TranslationDirection
    original_text: str


class TranslationLogEntry(BaseModel):
    # Ключи совпадают с форматом истории мобильного клиента
    id: str
    mode: TranslationDirection
    original: str
    translated: str
    timestamp: int

    model_config = {"frozen": True}


# --- Схемы HTTP API ---


class TranslateRequest(BaseModel):
    # Типы намеренно свободные: проверку делает TranslationRequest.create,
    # чтобы ответ был {"error": ...} с кодом 400, а не 422 от FastAPI
    text: Any = None
    mode: Any = None


class TranslateResponse(BaseModel):
    translation: str
    mode: TranslationDirection
    originalText: str

    @classmethod
    def from_result(cls, result: TranslationResult) -> "TranslateResponse":
        return cls(
            translation=result.translated_text,
            mode=result.direction,
            originalText=result.original_text,
        )


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
