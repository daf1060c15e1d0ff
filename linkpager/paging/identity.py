"""Identity projection of page items through an external store.

When a resource is configured with an object key and an identity store,
pages hold bare keys and full objects live once in the store, shared by
every page (and every resource) that references them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

logger = logging.getLogger(__name__)


class IdentityProjection:
    """Store items by key and resolve keys back to current store values."""

    def __init__(self, object_key: str, store: MutableMapping[str, Any]) -> None:
        self.object_key = object_key
        self.store = store

    def project(self, items: Iterable[Any]) -> list[Any]:
        """Replace items by their keys, writing changed items to the store.

        Items without the object key keep their slot as None.
        """
        keys: list[Any] = []
        for item in items:
            if not isinstance(item, Mapping) or self.object_key not in item:
                logger.warning(
                    "Item without object key",
                    extra={"object_key": self.object_key},
                )
                keys.append(None)
                continue
            key = item[self.object_key]
            keys.append(key)
            if self.store.get(key) != item:
                self.store[key] = item
        return keys

    def resolve(self, keys: Iterable[Any]) -> list[Any]:
        """Look up the current store value of every key."""
        return [None if key is None else self.store.get(key) for key in keys]
