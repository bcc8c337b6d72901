"""
Custom exceptions for the Darshan Admin backend.

Validation failures are recoverable and field specific. Store failures are
reported as a single message and may leave earlier save steps committed.
"""

from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Draft errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_LANGUAGE = "UNSUPPORTED_LANGUAGE"

    # Store errors
    STORE_ERROR = "STORE_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # Save workflow errors
    SAVE_FAILED = "SAVE_FAILED"
    SAVE_IN_PROGRESS = "SAVE_IN_PROGRESS"

    # Routing and generic errors
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class DarshanAdminException(Exception):
    """Base exception for the admin backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class DraftValidationError(DarshanAdminException):
    """Raised when a draft fails validation. No store call has been made."""

    def __init__(self, field_errors: Dict[str, str]):
        super().__init__(
            message="Please fill in all required fields correctly",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"field_errors": field_errors},
            status_code=422
        )
        self.field_errors = field_errors


class StoreError(DarshanAdminException):
    """Raised when a call to the backing row store fails."""

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        operation: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.STORE_ERROR,
        status_code: int = 502,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = {"collection": collection, "operation": operation}
        merged.update(details or {})
        super().__init__(
            message=message,
            error_code=error_code,
            details=merged,
            status_code=status_code
        )
        self.collection = collection
        self.operation = operation


class EntityNotFoundError(StoreError):
    """Raised when the addressed parent row does not exist."""

    def __init__(self, collection: str, entity_id: str, operation: Optional[str] = None):
        super().__init__(
            message=f"No row with id '{entity_id}' in {collection}",
            collection=collection,
            operation=operation,
            error_code=ErrorCode.NOT_FOUND,
            status_code=404,
            details={"entity_id": entity_id},
        )
        self.entity_id = entity_id


class TranslationWriteError(StoreError):
    """Raised when writing one language of a translation set fails."""

    def __init__(self, language: str, cause: StoreError):
        super().__init__(
            message=f"Failed to write '{language}' translation: {cause.message}",
            collection=cause.collection,
            operation=cause.operation,
            details={"language": language},
        )
        self.language = language
        self.cause = cause


class DependentWriteError(StoreError):
    """Raised when writing one item of a dependent collection fails."""

    def __init__(self, index: int, item: Any, cause: StoreError):
        super().__init__(
            message=f"Failed to write item {index} ({item}): {cause.message}",
            collection=cause.collection,
            operation=cause.operation,
            details={"index": index, "item": item},
        )
        self.index = index
        self.item = item
        self.cause = cause


class SaveFailedError(DarshanAdminException):
    """
    Raised when a save stops at a store failure.

    Steps listed in ``committed_steps`` (and, for translation failures, the
    languages before ``language``) are already committed and are not rolled
    back. Resubmitting the draft in edit mode overwrites and completes them.
    """

    def __init__(
        self,
        step: str,
        cause: StoreError,
        entity_id: Optional[str] = None,
        committed_steps: Optional[List[str]] = None,
    ):
        language = getattr(cause, "language", None)
        where = f"{step} ({language})" if language else step
        details = {
            "step": step,
            "entity_id": entity_id,
            "language": language,
            "committed_steps": committed_steps or [],
            "store_error": cause.details,
        }
        super().__init__(
            message=f"Save failed while {where}: {cause.message}",
            error_code=ErrorCode.SAVE_FAILED,
            details=details,
            status_code=cause.status_code if cause.status_code == 404 else 502
        )
        self.step = step
        self.cause = cause
        self.entity_id = entity_id
        self.language = language
        self.committed_steps = committed_steps or []


class SaveInProgressError(DarshanAdminException):
    """Raised when a second save is submitted while one is still pending."""

    def __init__(self, kind: str):
        super().__init__(
            message=f"A {kind} save is already in progress",
            error_code=ErrorCode.SAVE_IN_PROGRESS,
            details={"kind": kind},
            status_code=409
        )


class UnsupportedLanguageError(DarshanAdminException):
    """Raised when a language code outside the supported set is used."""

    def __init__(self, language: str, supported_languages: Optional[list] = None):
        details = {"requested_language": language}
        if supported_languages:
            details["supported_languages"] = supported_languages

        super().__init__(
            message=f"Language '{language}' is not supported",
            error_code=ErrorCode.UNSUPPORTED_LANGUAGE,
            details=details,
            status_code=400
        )
