"""Shared paging constants.

This module centralizes the query keys, header names and defaults used by
the link parser, the REST transport and the paged resource.
"""

from __future__ import annotations

# Page size used when a first page is fetched without an explicit limit
DEFAULT_MAX_ITEMS = 30

# Query keys carrying page size and offset, both in request URLs and in
# the URLs of Link header relations
MAX_ITEMS_PARAM = "maxItems"
SKIP_COUNT_PARAM = "skipCount"

# HTTP headers
LINK_HEADER = "Link"
ETAG_HEADER = "ETag"
IF_NONE_MATCH_HEADER = "If-None-Match"

NOT_MODIFIED_STATUS = 304

# REST transport defaults
DEFAULT_TIMEOUT = 30.0
MAX_ETAG_CACHE_SIZE = 1000
