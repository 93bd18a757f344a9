"""Error types raised for failed database requests."""

from __future__ import annotations

from typing import Any

import httpx

_HTTP_NOT_FOUND = 404
_HTTP_CONFLICT = 409
_HTTP_PRECONDITION_FAILED = 412
_HTTP_BAD_REQUEST = 400


class CouchError(Exception):
    """Base exception for error responses from the database server."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error: str | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error = error
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "error": self.error,
            "reason": self.reason,
        }


class DocumentNotFoundError(CouchError):
    """The document or database does not exist (HTTP 404)."""


class RevisionConflictError(CouchError):
    """The supplied revision is not the current one (HTTP 409 or 412)."""


def _error_body(response: httpx.Response) -> tuple[str | None, str | None]:
    try:
        payload = response.json()
    except ValueError:
        return None, None
    if not isinstance(payload, dict):
        return None, None
    return payload.get("error"), payload.get("reason")


def raise_for_couch_status(response: httpx.Response) -> None:
    """Raise the matching ``CouchError`` for a 4xx/5xx response."""
    if response.status_code < _HTTP_BAD_REQUEST:
        return

    error, reason = _error_body(response)
    message = (
        f"{response.request.method} {response.request.url.path} failed with "
        f"{response.status_code}: {reason or response.reason_phrase}"
    )

    exc_class: type[CouchError] = CouchError
    if response.status_code == _HTTP_NOT_FOUND:
        exc_class = DocumentNotFoundError
    elif response.status_code in (_HTTP_CONFLICT, _HTTP_PRECONDITION_FAILED):
        exc_class = RevisionConflictError

    raise exc_class(
        message,
        status_code=response.status_code,
        error=error,
        reason=reason,
    )
