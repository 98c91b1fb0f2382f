from functools import lru_cache
from typing import Annotated
from fastapi import Depends
from genderlator.core.config import Settings, settings
from genderlator.services.gemini_translator import GeminiTranslator, ProviderConfig
from genderlator.services.phrasebook import PhrasebookTranslator
from genderlator.services.relay_client import RelayTranslator
from genderlator.services.session import TranslatorSession
from genderlator.services.state_store import LocalStateStore
from genderlator.services.translator import Translator


@lru_cache
def get_settings() -> Settings:
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]


def build_translator(config: Settings) -> Translator:
    if config.TRANSLATOR_BACKEND == "phrasebook":
        return PhrasebookTranslator()
    if config.TRANSLATOR_BACKEND == "gemini":
        return GeminiTranslator(ProviderConfig.from_settings(config))
    raise ValueError(
        f"Unknown TRANSLATOR_BACKEND: {config.TRANSLATOR_BACKEND}. "
        "Supported: gemini, phrasebook"
    )


def get_translator(config: SettingsDep) -> Translator:
    # Новый экземпляр на каждый запрос: обработчик без общего состояния
    return build_translator(config)


TranslatorDep = Annotated[Translator, Depends(get_translator)]


def build_session(config: Settings) -> TranslatorSession:
    """Клиентская сторона: сессия через relay с локальной историей."""
    translator = RelayTranslator(config.RELAY_URL, timeout=config.REQUEST_TIMEOUT_SECONDS)
    return TranslatorSession(translator, LocalStateStore(config.STATE_FILE))
