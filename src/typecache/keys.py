"""
Key transforms mapping logical cache keys to physical store keys.

Two transforms are normally stacked: each typed cache prefixes its keys so
different cache kinds never collide, and the store applies its own transform
(a hash for the file store) to make keys safe for the storage medium.
"""

from __future__ import annotations

import hashlib
from typing import Callable, Protocol, runtime_checkable

from typecache.exceptions import ConfigurationError

Digest = Callable[[bytes], bytes]


@runtime_checkable
class KeyTransform(Protocol):
    """Maps a logical key to a physical key. Must be total and deterministic."""

    def transform(self, key: str) -> str: ...


def md5_digest(data: bytes) -> bytes:
    """Default 128-bit digest used for physical file names."""
    return hashlib.md5(data).digest()


class HashKeyTransform:
    """Replaces a key with the lowercase hex digest of its UTF-8 encoding.

    Arbitrary caller keys become fixed-shape identifiers that are safe to use
    as file names.
    """

    def __init__(self, digest: Digest | None = None) -> None:
        self._digest = digest or md5_digest

    @classmethod
    def for_algorithm(cls, algorithm: str) -> HashKeyTransform:
        """Build a transform from a hashlib algorithm name.

        Raises:
            ConfigurationError: If hashlib does not provide the algorithm, or
                its digest has no fixed length (shake_128, shake_256).
        """
        name = algorithm.strip().lower()
        if name not in hashlib.algorithms_available:
            raise ConfigurationError(
                "Unknown key hash algorithm",
                context={"algorithm": algorithm},
            )
        if name.startswith("shake_"):
            raise ConfigurationError(
                "Key hash algorithm must have a fixed digest length",
                context={"algorithm": algorithm},
            )

        def digest(data: bytes) -> bytes:
            return hashlib.new(name, data).digest()

        return cls(digest)

    def transform(self, key: str) -> str:
        return self._digest(key.encode("utf-8")).hex()


class PrefixKeyTransform:
    """Namespaces keys by prepending a fixed prefix (e.g. ``StringCache:``)."""

    def __init__(self, prefix: str) -> None:
        if not prefix:
            raise ConfigurationError("Key prefix must not be empty")
        self.prefix = prefix

    def transform(self, key: str) -> str:
        return self.prefix + key

    def __repr__(self) -> str:
        return f"PrefixKeyTransform({self.prefix!r})"


class IdentityKeyTransform:
    """Leaves keys unchanged; used by stores that accept any string key."""

    def transform(self, key: str) -> str:
        return key
