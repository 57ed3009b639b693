"""
In-memory byte store.

Simple dict-based store for tests and for embedding a cache in a single
process. Keys are kept as-is by default since no storage medium restricts
them.
"""

from __future__ import annotations

from typecache.cache.base import ByteStore
from typecache.keys import IdentityKeyTransform, KeyTransform


class InMemoryByteStore(ByteStore):
    """Dict-backed byte store."""

    def __init__(self, key_transform: KeyTransform | None = None) -> None:
        self.key_transform = key_transform or IdentityKeyTransform()
        self._data: dict[str, bytes] = {}

    def _write(self, key: str, data: bytes) -> bool:
        self._data[self.key_transform.transform(key)] = data
        return True

    def get(self, key: str) -> bytes | None:
        return self._data.get(self.key_transform.transform(key))

    def remove(self, key: str) -> bool:
        return self._data.pop(self.key_transform.transform(key), None) is not None

    def contains(self, key: str) -> bool:
        return self.key_transform.transform(key) in self._data

    def keys(self) -> list[str]:
        """Physical keys currently stored."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)
