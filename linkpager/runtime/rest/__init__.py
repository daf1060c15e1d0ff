"""REST runtime abstractions."""

from .http_client import HTTPClient
from .transport import PageTransport, RESTTransport, build_query

__all__ = [
    "HTTPClient",
    "PageTransport",
    "RESTTransport",
    "build_query",
]
