from __future__ import annotations

import logging
from typing import Any

from storefront.services.http_client import HttpResult


log = logging.getLogger(__name__)


class StorefrontError(Exception):
    pass


class ListingApiError(StorefrontError):
    """A listing endpoint call that did not return 2xx (or never got a response)."""

    def __init__(self, result: HttpResult, *, operation: str = "request"):
        self.result = result
        self.operation = operation
        super().__init__(f"{operation} failed: {result.error_code or 'UNKNOWN'} {result.error_message or ''}".strip())


class ListingLoadError(StorefrontError):
    def __init__(self, message: str, *, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class DraftLockedError(StorefrontError):
    """Raised when a draft is edited while its submission is in flight."""


class UnknownFieldError(StorefrontError, KeyError):
    def __init__(self, category: str, field: str):
        self.category = category
        self.field = field
        super().__init__(f"Unknown field for category={category}: {field}")


_STATUS_MESSAGES = {
    400: "Some details were rejected by the server. Please check and try again.",
    401: "Your session has expired. Please log in again.",
    403: "You are not allowed to modify this listing.",
    404: "This listing no longer exists.",
    409: "This listing was changed elsewhere. Please reload and try again.",
    429: "Too many requests. Please wait a moment and try again.",
}


def _server_message(detail: dict[str, Any] | None) -> str | None:
    if not detail:
        return None
    for key in ("message", "error", "detail"):
        v = detail.get(key)
        if isinstance(v, str) and v.strip():
            return v.strip()
    return None


def translate_error(error: BaseException, default_message: str) -> str:
    """
    Turn a failed call into a string fit for an alert.

    Server-provided messages win; then well-known transport and status
    failures; everything else falls back to `default_message`.
    """
    if not isinstance(error, ListingApiError):
        log.debug("untranslated error type: %s", type(error).__name__)
        return default_message

    result = error.result
    if result.error_code == "TIMEOUT":
        return "The request timed out. Please check your connection and try again."
    if result.error_code == "REQUEST_ERROR":
        return "Unable to reach the server. Please check your connection."

    msg = _server_message(result.detail)
    if msg and result.status_code is not None and result.status_code < 500:
        return msg

    if result.status_code in _STATUS_MESSAGES:
        return _STATUS_MESSAGES[result.status_code]
    if result.status_code is not None and result.status_code >= 500:
        return "Server error. Please try again later."
    return default_message
