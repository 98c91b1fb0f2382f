from typing import Dict

from genderlator.models.domain import (
    TranslationDirection,
    TranslationRequest,
    TranslationResult,
)
from genderlator.services.translator import Translator

PHRASEBOOK: Dict[TranslationDirection, Dict[str, str]] = {
    TranslationDirection.FEMALE_TO_MALE: {
        "Nic mi nie jest": "Mam poważny problem i czekam, aż sam się domyślisz",
        "Rób jak uważasz": "Jeśli zrobisz to źle, będziesz o tym słyszał przez miesiąc",
        "Musimy porozmawiać": "Przygotuj się na godzinną analizę naszego związku",
        "Nie jestem zła": "Jestem wściekła, ale sprawdzam czy zauważysz",
        "To nic takiego": "To dla mnie bardzo ważne i powinieneś to wiedzieć",
    },
    TranslationDirection.MALE_TO_FEMALE: {
        "Dobra": "Nie słucham już od 5 minut",
        "Zaraz przyjdę": "Przyjdę za pół godziny lub później",
        "Nie wiem": "Nie myślałem o tym wcześniej i nie zamierzam teraz",
        "To skomplikowane": "Nie chcę o tym rozmawiać",
        "Jak chcesz": "Zróbmy to po twojemu, a potem po mojemu",
    },
}

DEFAULT_TRANSLATION = "To zdanie ma ukryte znaczenie, ale tłumacz offline go nie zna."


def _normalize(phrase: str) -> str:
    return " ".join(phrase.split()).casefold()


class PhrasebookTranslator(Translator):
    """
    Заглушка без сети: пять фраз на направление и ответ по умолчанию.
    Включается только явно (TRANSLATOR_BACKEND=phrasebook).
    """

    name = "phrasebook"

    def __init__(self):
        self._table = {
            direction: {_normalize(k): v for k, v in pairs.items()}
            for direction, pairs in PHRASEBOOK.items()
        }

    async def translate(self, request: TranslationRequest) -> TranslationResult:
        request = TranslationRequest.create(request.text, request.direction)
        translated = self._table[request.direction].get(
            _normalize(request.text), DEFAULT_TRANSLATION
        )
        return TranslationResult(
            translated_text=translated,
            direction=request.direction,
            original_text=request.text,
        )
