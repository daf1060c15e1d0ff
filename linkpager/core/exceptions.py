"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any

from ..config import NOT_MODIFIED_STATUS


class PagingError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(PagingError):
    """Error from the remote collection endpoint."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotModifiedError(TransportError):
    """Collection unchanged since the last conditional request (HTTP 304)."""

    def __init__(self, message: str = "Not modified") -> None:
        super().__init__(message, status_code=NOT_MODIFIED_STATUS)


class NavigationError(PagingError):
    """No navigation link is known for the requested page.

    Raised before any request is issued. Fetch a neighbouring page first so
    the link of the wanted page becomes known.
    """

    MESSAGE = "No known link to requested page"

    def __init__(self, page_key: Any = None, page_number: int | None = None) -> None:
        super().__init__(self.MESSAGE)
        self.page_key = page_key
        self.page_number = page_number


def is_not_modified(error: BaseException) -> bool:
    """Check whether a transport failure signals "not modified".

    Accepts ``status_code`` (this library's errors) and ``status``
    (``aiohttp.ClientResponseError``) attributes.
    """
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(error, "status", None)
    return status == NOT_MODIFIED_STATUS
