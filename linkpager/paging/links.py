"""Link header and page link parsing.

Navigation metadata is advisory: malformed headers and URLs degrade to empty
results instead of raising.

Link header format:
    <https://host/items?maxItems=10&skipCount=0>; rel="first",
    <https://host/items?maxItems=10&skipCount=30>; rel="last"
"""

from __future__ import annotations

import logging
import re

from ..config import MAX_ITEMS_PARAM, SKIP_COUNT_PARAM
from ..models import PageParams

logger = logging.getLogger(__name__)

# <url> followed, within the same segment or later, by rel="name"
RELATION_PATTERN = re.compile(r'<([^>]+?)>.+?rel="([^"]+?)"')

# key=value pairs anywhere in a URL, values are not URL-decoded
QUERY_PARAM_PATTERN = re.compile(r"([_\w]+)=([\w]+)")


def parse_relations(link_header: str | None) -> dict[str, str]:
    """Parse a Link header into a relation name to URL mapping.

    Args:
        link_header: Raw header value, may be None or empty

    Returns:
        Mapping of relation name to URL. Later duplicates overwrite earlier ones.

    Examples:
        >>> parse_relations('<http://api/x?maxItems=10&skipCount=0>; rel="first"')
        {'first': 'http://api/x?maxItems=10&skipCount=0'}
        >>> parse_relations(None)
        {}
    """
    if not link_header:
        return {}
    relations: dict[str, str] = {}
    for match in RELATION_PATTERN.finditer(link_header):
        relations[match.group(2)] = match.group(1)
    return relations


def parse_page_parameters(url: str | None) -> PageParams:
    """Extract page size and offset from a page link.

    Args:
        url: Link URL carrying ``maxItems`` and ``skipCount`` query keys

    Returns:
        PageParams with ``0`` for any missing or non-numeric key
    """
    if not url:
        return PageParams()
    values = dict(QUERY_PARAM_PATTERN.findall(url))
    return PageParams(
        limit=_to_count(values.get(MAX_ITEMS_PARAM)),
        offset=_to_count(values.get(SKIP_COUNT_PARAM)),
    )


def count_pages(params: PageParams) -> int:
    """Number of pages implied by the parameters of the last page's link.

    Returns 0 when the page size is unknown.
    """
    if params.limit <= 0:
        logger.warning("Cannot count pages without a page size", extra={"offset": params.offset})
        return 0
    return params.offset // params.limit + 1


def _to_count(value: str | None) -> int:
    if value is None or not (value.isascii() and value.isdecimal()):
        return 0
    return int(value)
