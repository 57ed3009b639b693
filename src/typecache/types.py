"""
Core types for the typed cache library.

This module defines:
- ObjectTag: the trailing tag byte written after every serialized object
- CacheableObject and its two capabilities (ByteObject, JsonMapObject)
- CacheConfiguration: the immutable bundle shared by all typed caches
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar

from typecache.exceptions import ConfigurationError

if TYPE_CHECKING:
    from typecache.cache.base import ByteStore
    from typecache.converters import ByteObjectConverter, JsonMapObjectConverter


class ObjectTag(IntEnum):
    """Tag byte identifying how a cacheable object was encoded."""

    BYTES = 0
    JSON_MAP = 1


class CacheableObject(ABC):
    """Base for values storable in an object cache.

    Concrete classes subclass exactly one of ByteObject or JsonMapObject,
    which fixes ``cache_tag`` for the class.
    """

    cache_tag: ClassVar[ObjectTag]


class ByteObject(CacheableObject):
    """Cacheable object that serializes itself to raw bytes."""

    cache_tag: ClassVar[ObjectTag] = ObjectTag.BYTES

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Return a non-empty byte representation of the object."""
        ...


class JsonMapObject(CacheableObject):
    """Cacheable object that serializes itself to a JSON object."""

    cache_tag: ClassVar[ObjectTag] = ObjectTag.JSON_MAP

    @abstractmethod
    def to_json_map(self) -> dict[str, Any]:
        """Return a string-keyed map of JSON-compatible values."""
        ...


CAPABILITY_TYPES: tuple[type[CacheableObject], ...] = (
    CacheableObject,
    ByteObject,
    JsonMapObject,
)


@dataclass(frozen=True)
class CacheConfiguration:
    """Immutable configuration shared by reference by every typed cache.

    Attributes:
        store: Physical byte store.
        byte_object_converter: Rebuilds ByteObject values (tag 0).
        json_map_object_converter: Rebuilds JsonMapObject values (tag 1).
    """

    store: ByteStore
    byte_object_converter: ByteObjectConverter | None = None
    json_map_object_converter: JsonMapObjectConverter | None = None

    def __post_init__(self) -> None:
        if self.store is None:
            raise ConfigurationError("CacheConfiguration requires a store")
