"""
Base class for byte stores.

A byte store persists opaque byte payloads under physical keys. It knows
nothing about the typed values above it; typed caches do the conversion and
hand it finished payloads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ByteStore(ABC):
    """Abstract interface for physical byte storage."""

    def put(self, key: str, data: bytes | None) -> bool:
        """Store bytes under a key.

        Passing None deletes the key instead.

        Returns:
            Whether the write succeeded, or for None whether a value was removed.
        """
        if data is None:
            return self.remove(key)
        return self._write(key, bytes(data))

    @abstractmethod
    def _write(self, key: str, data: bytes) -> bool:
        """Write a payload, replacing any previous one."""
        ...

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Get the stored bytes, or None if the key is absent."""
        ...

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Delete a key. Returns whether something was deleted."""
        ...

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check if a key is present."""
        ...
