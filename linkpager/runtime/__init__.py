"""Runtime transports."""

from .rest import HTTPClient, PageTransport, RESTTransport

__all__ = ["HTTPClient", "PageTransport", "RESTTransport"]
