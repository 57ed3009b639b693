"""
Typed caches over a byte store.

TypedCache[T] converts domain values to bytes and back, and delegates
physical I/O to the configured store through its key transform. Concrete
caches exist for str, int, float and cacheable objects, plus a keyless
single-object cache.

A zero-length payload is treated as "no value" on read. Writing a value whose
serialization is empty is therefore rejected instead of silently turning into
a delete. This also means an intentionally empty value (such as "") cannot
be cached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from typecache.codec import ObjectCodec, require_concrete_type
from typecache.exceptions import DeserializationError, SerializationError
from typecache.keys import KeyTransform
from typecache.logging import get_logger, log_context
from typecache.types import CacheableObject, CacheConfiguration

logger = get_logger(__name__)

T = TypeVar("T")
ObjectT = TypeVar("ObjectT", bound=CacheableObject)


class TypedCache(ABC, Generic[T]):
    """Generic bridge between a value type and the byte store."""

    def __init__(self, config: CacheConfiguration, key_transform: KeyTransform) -> None:
        self.config = config
        self.key_transform = key_transform

    @property
    def name(self) -> str:
        return type(self).__name__

    def put(self, key: str, value: T | None) -> bool:
        """Store a value. Storing None removes the key.

        Returns:
            Whether the write succeeded, or for None whether a value was removed.

        Raises:
            SerializationError: If the value serializes to nothing.
        """
        with log_context(cache=self.name, operation="put"):
            physical_key = self.key_transform.transform(key)

            if value is None:
                return self.config.store.put(physical_key, None)

            data = self.value_to_bytes(value)
            if not data:
                raise SerializationError(
                    "Value serialized to an empty payload",
                    context={"cache": self.name, "value_type": type(value).__name__},
                )

            stored = self.config.store.put(physical_key, data)
            logger.debug("Put value", key=key, size=len(data))
            return stored

    def get(self, key: str) -> T | None:
        """Get a value, or None if nothing (or an empty payload) is stored."""
        with log_context(cache=self.name, operation="get"):
            data = self.config.store.get(self.key_transform.transform(key))
            if not data:
                logger.debug("Cache miss", key=key)
                return None
            return self.bytes_to_value(data)

    def remove(self, key: str) -> bool:
        """Remove a value. Returns whether something was deleted."""
        with log_context(cache=self.name, operation="remove"):
            return self.config.store.remove(self.key_transform.transform(key))

    def contains(self, key: str) -> bool:
        with log_context(cache=self.name, operation="contains"):
            return self.config.store.contains(self.key_transform.transform(key))

    @abstractmethod
    def value_to_bytes(self, value: T) -> bytes:
        """Serialize a non-None value."""
        ...

    @abstractmethod
    def bytes_to_value(self, data: bytes) -> T:
        """Deserialize a non-empty payload."""
        ...

    def _decode_text(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DeserializationError(
                "Stored payload is not valid UTF-8",
                context={"cache": self.name, "size": len(data)},
            ) from e

    def _reject(self, value: object, expected: str) -> SerializationError:
        return SerializationError(
            f"{self.name} only stores {expected} values",
            context={"cache": self.name, "value_type": type(value).__name__},
        )


class StringCache(TypedCache[str]):
    """Stores strings as UTF-8."""

    def value_to_bytes(self, value: str) -> bytes:
        if not isinstance(value, str):
            raise self._reject(value, "str")
        return value.encode("utf-8")

    def bytes_to_value(self, data: bytes) -> str:
        return self._decode_text(data)


class IntCache(TypedCache[int]):
    """Stores integers as decimal text."""

    def value_to_bytes(self, value: int) -> bytes:
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._reject(value, "int")
        try:
            return str(value).encode("ascii")
        except ValueError as e:
            # int-to-str digit limit (sys.set_int_max_str_digits)
            raise SerializationError(
                "Integer has too many digits to store",
                context={"cache": self.name, "value_type": type(value).__name__},
            ) from e

    def bytes_to_value(self, data: bytes) -> int:
        text = self._decode_text(data)
        try:
            return int(text)
        except ValueError as e:
            raise DeserializationError(
                "Stored payload is not an integer",
                context={"cache": self.name, "text": text[:32]},
            ) from e


class FloatCache(TypedCache[float]):
    """Stores floats as their shortest round-tripping text (``repr``).

    Every finite float reads back bit-for-bit identical. ``inf``, ``-inf`` and
    ``nan`` are stored by name.
    """

    def value_to_bytes(self, value: float) -> bytes:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._reject(value, "float")
        try:
            return repr(float(value)).encode("ascii")
        except OverflowError as e:
            raise SerializationError(
                "Integer is too large to store as a float",
                context={"cache": self.name},
            ) from e

    def bytes_to_value(self, data: bytes) -> float:
        text = self._decode_text(data)
        try:
            return float(text)
        except ValueError as e:
            raise DeserializationError(
                "Stored payload is not a float",
                context={"cache": self.name, "text": text[:32]},
            ) from e


class ObjectCache(TypedCache[ObjectT]):
    """Stores cacheable objects of one concrete type using the object codec."""

    def __init__(
        self,
        config: CacheConfiguration,
        key_transform: KeyTransform,
        item_type: type[ObjectT],
    ) -> None:
        self.item_type = require_concrete_type(item_type)
        super().__init__(config, key_transform)
        self.codec = ObjectCodec(config)

    @property
    def name(self) -> str:
        return f"{type(self).__name__}[{self.item_type.__qualname__}]"

    def value_to_bytes(self, value: ObjectT) -> bytes:
        return self.codec.encode(value)

    def bytes_to_value(self, data: bytes) -> ObjectT:
        return self.codec.decode(data, self.item_type)


class SingleObjectCache(Generic[ObjectT]):
    """Holds at most one object per concrete type, keyed by the type itself."""

    def __init__(
        self,
        config: CacheConfiguration,
        key_transform: KeyTransform,
        item_type: type[ObjectT],
    ) -> None:
        self._objects: ObjectCache[ObjectT] = ObjectCache(config, key_transform, item_type)
        self.key = f"{item_type.__module__}.{item_type.__qualname__}"

    @property
    def item_type(self) -> type[ObjectT]:
        return self._objects.item_type

    def put(self, value: ObjectT | None) -> bool:
        return self._objects.put(self.key, value)

    def get(self) -> ObjectT | None:
        return self._objects.get(self.key)

    def remove(self) -> bool:
        return self._objects.remove(self.key)

    def contains(self) -> bool:
        return self._objects.contains(self.key)
