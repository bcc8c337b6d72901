"""
Draft validation.

``validate_draft`` turns a raw form draft into its normalized record or
raises ``DraftValidationError`` mapping dotted field paths to messages.
It has no side effects and keeps no state between calls.
"""
from typing import Annotated, Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import AfterValidator, AnyUrl, BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from darshan_admin.core.exceptions import DraftValidationError

R = TypeVar("R", bound=BaseModel)

_url_adapter = TypeAdapter(AnyUrl)

# Messages for list fields that must not be empty
_MIN_ITEMS_MESSAGES = {
    "images": "At least one image is required",
}


def _ensure_url(value: str) -> str:
    """Check that ``value`` parses as an absolute URL; return it unchanged."""
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError("Must be a valid URL") from None
    return value


RequiredText = Annotated[str, Field(min_length=1)]
UrlText = Annotated[str, AfterValidator(_ensure_url)]


def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def _message(error: Mapping[str, Any]) -> str:
    names = [part for part in error["loc"] if isinstance(part, str)]
    field = names[-1] if names else "value"
    kind = error["type"]

    if kind in ("missing", "string_too_short"):
        return f"{_label(field)} is required"
    if kind == "string_type" and error.get("input") is None:
        return f"{_label(field)} is required"
    if kind == "too_short" and field in _MIN_ITEMS_MESSAGES:
        return _MIN_ITEMS_MESSAGES[field]
    if kind == "value_error":
        return str(error["ctx"]["error"])
    return error["msg"]


def format_field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    """
    Flatten pydantic errors into ``{"translations.hi.name": "Name is required"}``.

    The first error reported for a path wins.
    """
    field_errors: Dict[str, str] = {}
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"])
        field_errors.setdefault(path, _message(error))
    return field_errors


def validate_draft(record_type: Type[R], draft: Union[BaseModel, Mapping[str, Any]]) -> R:
    """
    Validate a draft against ``record_type``.

    Args:
        record_type: Normalized record model (e.g. DestinationRecord)
        draft: Draft model or plain mapping of form values

    Returns:
        The normalized record

    Raises:
        DraftValidationError: with every failing field path
    """
    data = draft.model_dump() if isinstance(draft, BaseModel) else dict(draft)
    try:
        return record_type.model_validate(data)
    except PydanticValidationError as exc:
        raise DraftValidationError(format_field_errors(exc)) from None
