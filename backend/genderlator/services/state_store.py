import json
import logging
import os
import time
import uuid
from typing import List

from pydantic import ValidationError

from genderlator.models.domain import Theme, TranslationDirection, TranslationLogEntry

logger = logging.getLogger(__name__)

TRANSLATIONS_KEY = "translations"
THEME_KEY = "theme"


class LocalStateStore:
    """
    Локальное состояние клиента: история переводов (новые сверху) и тема.
    Читается один раз при создании, пишется на диск при каждом изменении.
    """

    def __init__(self, path: str = "genderlator_state.json"):
        self.path = path
        self._entries: List[TranslationLogEntry] = []
        self._theme = Theme.LIGHT
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error loading saved data: %s", e)
            return
        if not isinstance(data, dict):
            logger.error("Error loading saved data: unexpected %s", type(data).__name__)
            return

        items = data.get(TRANSLATIONS_KEY) or []
        if not isinstance(items, list):
            logger.error("Saved translations are not a list, ignoring them")
            items = []
        # Битая запись пропускается, остальная история сохраняется
        for item in items:
            try:
                self._entries.append(TranslationLogEntry.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid history entry %r: %s", item, e)

        if data.get(THEME_KEY):
            try:
                self._theme = Theme(data[THEME_KEY])
            except (ValueError, TypeError):
                logger.warning("Unknown theme %r, using %s", data[THEME_KEY], self._theme.value)

    def _save(self):
        data = {
            TRANSLATIONS_KEY: [entry.model_dump(mode="json") for entry in self._entries],
            THEME_KEY: self._theme.value,
        }
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error("Error saving state to %s: %s", self.path, e)

    @property
    def entries(self) -> List[TranslationLogEntry]:
        return list(self._entries)

    def add(
        self, direction: TranslationDirection, original: str, translated: str
    ) -> TranslationLogEntry:
        now = int(time.time() * 1000)
        entry = TranslationLogEntry(
            id=uuid.uuid4().hex,
            mode=direction,
            original=original,
            translated=translated,
            timestamp=now,
        )
        self._entries.insert(0, entry)
        self._save()
        return entry

    def clear(self):
        self._entries = []
        self._save()

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme) -> Theme:
        self._theme = Theme(theme)
        self._save()
        return self._theme
