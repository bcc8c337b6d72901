"""
Exception handlers: every failure leaves the API as a StandardErrorResponse.

Draft validation failures carry ``details.field_errors`` so the form can mark
each field. Store and save failures carry one message plus the step and
language that failed.
"""
import logging
import time
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Optional, Union

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from darshan_admin.core.exceptions import DarshanAdminException, ErrorCode
from darshan_admin.schemas.base import StandardErrorResponse

logger = logging.getLogger(__name__)

# Plain HTTP errors raised by routing rather than by the services
_STATUS_ERROR_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    409: ErrorCode.SAVE_IN_PROGRESS,
    422: ErrorCode.VALIDATION_ERROR,
}

RECENT_WINDOW_SECONDS = 3600


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class ErrorHandler:
    """Builds error responses and keeps per-code counters for /health"""

    def __init__(self):
        self.counts: Counter = Counter()
        self.last_seen: Dict[str, float] = {}

    def respond(
        self,
        request: Request,
        status_code: int,
        error_code: Union[ErrorCode, str],
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> JSONResponse:
        code = error_code.value if isinstance(error_code, ErrorCode) else error_code
        self.record(code)
        body = StandardErrorResponse(
            error_code=code,
            message=message,
            details=details,
            request_id=_request_id(request),
            timestamp=datetime.utcnow(),
        )
        return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

    async def handle_admin_exception(self, request: Request, exc: DarshanAdminException) -> JSONResponse:
        """Draft, store and save failures raised by the services"""
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "request_id": _request_id(request),
                "error_code": exc.error_code.value,
                "details": exc.details,
            },
        )
        return self.respond(request, exc.status_code, exc.error_code, exc.message, exc.details)

    async def handle_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        """Bodies or query parameters that do not parse into the expected shape"""
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Malformed request to {request.url.path}: {len(errors)} errors",
            extra={"request_id": _request_id(request), "validation_errors": errors},
        )
        return self.respond(
            request,
            422,
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            {"validation_errors": errors},
        )

    async def handle_http_exception(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error_code = _STATUS_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}",
            extra={"request_id": _request_id(request)},
        )
        return self.respond(request, exc.status_code, error_code, str(exc.detail))

    async def handle_generic_exception(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
            extra={"request_id": _request_id(request)},
        )
        return self.respond(
            request, 500, ErrorCode.INTERNAL_SERVER_ERROR, "An internal server error occurred"
        )

    def record(self, error_code: str) -> None:
        self.counts[error_code] += 1
        self.last_seen[error_code] = time.time()

    def get_error_statistics(self) -> Dict[str, Any]:
        cutoff = time.time() - RECENT_WINDOW_SECONDS
        return {
            "error_counts": dict(self.counts),
            "recent_errors": {
                code: count for code, count in self.counts.items()
                if self.last_seen[code] >= cutoff
            },
            "total_errors": sum(self.counts.values()),
        }


error_handler = ErrorHandler()


def setup_error_handlers(app) -> None:
    """Register the handlers on ``app``; the most specific exception class wins."""
    app.add_exception_handler(DarshanAdminException, error_handler.handle_admin_exception)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    app.add_exception_handler(Exception, error_handler.handle_generic_exception)
