"""linkpager - client-side pagination over Link-header collections."""

from .config import DEFAULT_MAX_ITEMS
from .core import (
    NavigationError,
    NotModifiedError,
    PageRelation,
    PagingError,
    TransportError,
    is_not_modified,
)
from .models import CachedPage, PageInfo, PageParams, PageResponse
from .paging import (
    IdentityProjection,
    PageCache,
    PagedResource,
    count_pages,
    parse_page_parameters,
    parse_relations,
)
from .runtime import HTTPClient, PageTransport, RESTTransport

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_ITEMS",
    # Navigation
    "PagedResource",
    "PageRelation",
    "PageCache",
    "IdentityProjection",
    # Link parsing
    "parse_relations",
    "parse_page_parameters",
    "count_pages",
    # Models
    "PageInfo",
    "PageParams",
    "PageResponse",
    "CachedPage",
    # Transport
    "PageTransport",
    "RESTTransport",
    "HTTPClient",
    # Exceptions
    "PagingError",
    "TransportError",
    "NotModifiedError",
    "NavigationError",
    "is_not_modified",
]
