"""Core components."""

from .enums import PageRelation
from .exceptions import (
    NavigationError,
    NotModifiedError,
    PagingError,
    TransportError,
    is_not_modified,
)

__all__ = [
    "PageRelation",
    "PagingError",
    "TransportError",
    "NotModifiedError",
    "NavigationError",
    "is_not_modified",
]
