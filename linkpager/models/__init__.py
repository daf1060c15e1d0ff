"""Data models for paged collections.

Architecture:
    Request and response values (PageParams, PageResponse) are immutable
    pydantic v2 models passed between the resource and its transport.
    PageInfo is validated on assignment and owned by the resource.
    CachedPage is a plain mutable record updated in place by the cache.

Model Categories:
    - Navigation: PageInfo, PageParams
    - Transport: PageResponse
    - Cache: CachedPage
"""

from .page import CachedPage, PageInfo, PageParams, PageResponse

__all__ = [
    "CachedPage",
    "PageInfo",
    "PageParams",
    "PageResponse",
]
