"""Core enumerations for navigation relations.

Architecture:
    Relation names are the exact strings servers put in the ``rel`` attribute
    of a ``Link`` header. Page keys accepted by ``PagedResource.fetch_page``
    are either one of these relations or a literal page number.

Key Types:
    - PageRelation: first/prev/next/last link relations

See Also:
    - parse_relations: Produces a mapping keyed by these values
    - PagedResource: Resolves relations to page numbers
"""

from enum import Enum
from typing import Optional

# Spellings accepted for a relation in addition to its wire value
_ALIASES = {
    "previous": "prev",
}


class PageRelation(str, Enum):
    """Named navigation relation of a paged collection response."""

    FIRST = "first"
    PREVIOUS = "prev"
    NEXT = "next"
    LAST = "last"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @classmethod
    def from_str(cls, key: str) -> Optional["PageRelation"]:
        """Get relation from a page key. Returns None if the key is not a relation."""
        normalized = key.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            return None
