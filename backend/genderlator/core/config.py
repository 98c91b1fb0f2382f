from typing import List, Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from genderlator.services.prompts import GenerationConfig


class Settings(BaseSettings):
    # Базовые настройки
    PROJECT_NAME: str = "GenderLator Relay"
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "info"

    # Настройки CORS (мобильный клиент стучится с любого адреса)
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # Ключ API. Не обязателен при старте: без него /api/translate отвечает 500
    GOOGLE_AI_API_KEY: Optional[str] = None
    GOOGLE_AI_MODEL: str = "gemini-flash-latest"
    GOOGLE_AI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GOOGLE_AI_TEMPERATURE: float = 0.7
    GOOGLE_AI_MAX_OUTPUT_TOKENS: int = 256
    GOOGLE_AI_TOP_P: float = 0.95
    REQUEST_TIMEOUT_SECONDS: float = 30.0

    # "gemini" или "phrasebook" (статическая таблица, только явно)
    TRANSLATOR_BACKEND: Literal["gemini", "phrasebook"] = "gemini"

    # Клиентская сторона: адрес relay и файл локального состояния
    RELAY_URL: str = "http://localhost:3001"
    STATE_FILE: str = "genderlator_state.json"

    PROXY_URL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    def generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            temperature=self.GOOGLE_AI_TEMPERATURE,
            max_output_tokens=self.GOOGLE_AI_MAX_OUTPUT_TOKENS,
            top_p=self.GOOGLE_AI_TOP_P,
        )


# Создаем единственный экземпляр настроек для импорта в других файлах
settings = Settings()
