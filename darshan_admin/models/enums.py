"""
Closed enumerations shared by the ORM models and the draft schemas.
"""
import enum

from sqlalchemy import Enum as SQLEnum

from darshan_admin.core.exceptions import UnsupportedLanguageError


class Language(str, enum.Enum):
    """Supported content languages, in the order translations are written"""
    EN = "en"
    HI = "hi"
    KN = "kn"
    ML = "ml"
    TA = "ta"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise UnsupportedLanguageError(code, [lang.value for lang in cls]) from None


class Deity(str, enum.Enum):
    SHIVA = "Shiva"
    VISHNU = "Vishnu"
    DEVI = "Devi"
    GANESHA = "Ganesha"
    MURUGAN = "Murugan"
    HANUMAN = "Hanuman"
    KRISHNA = "Krishna"
    RAMA = "Rama"
    AYYAPPA = "Ayyappa"
    SURYA = "Surya"


class Sampradaya(str, enum.Enum):
    VAISHNAVA = "Vaishnava"
    SHAIVA = "Shaiva"
    SHAKTA = "Shakta"
    SMARTA = "Smarta"
    GANAPATYA = "Ganapatya"
    KAUMARAM = "Kaumaram"
    SAURA = "Saura"


def enum_column(enum_cls: type[enum.Enum]) -> SQLEnum:
    """Enum column stored by value as plain text."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
    )
