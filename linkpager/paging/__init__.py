"""Paged collection navigation."""

from .cache import PageCache
from .identity import IdentityProjection
from .links import count_pages, parse_page_parameters, parse_relations
from .resource import PagedResource

__all__ = [
    "PagedResource",
    "PageCache",
    "IdentityProjection",
    "parse_relations",
    "parse_page_parameters",
    "count_pages",
]
