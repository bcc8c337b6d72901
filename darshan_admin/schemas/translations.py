"""
Fixed per-language container over the closed language set
"""
from typing import Any, Generic, Iterator, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict

from darshan_admin.models.enums import Language

T = TypeVar("T", bound=BaseModel)


class TranslationSet(BaseModel, Generic[T]):
    """
    One text block per supported language. Unknown language keys are
    rejected, so a set can never hold a language outside ``Language``.
    """
    model_config = ConfigDict(extra="forbid")

    en: T
    hi: T
    kn: T
    ml: T
    ta: T

    def items(self) -> Iterator[Tuple[Language, T]]:
        """(language, text) pairs in enumeration order"""
        for language in Language:
            yield language, getattr(self, language.value)

    def get(self, language: Language) -> T:
        return getattr(self, Language(language).value)


def fill_missing_languages(value: Any) -> Any:
    """Before-validator for drafts: absent or null languages become empty text."""
    if value is None:
        value = {}
    if not isinstance(value, dict):
        return value
    filled = dict(value)
    for language in Language:
        if filled.get(language.value) is None:
            filled[language.value] = {}
    return filled
