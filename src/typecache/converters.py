"""
Converters that rebuild cacheable objects from their stored form.

The object cache hands a converter the decoded payload together with the
concrete type the caller asked for. The converter must return an instance of
exactly that type.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from typecache.exceptions import MissingConverterError
from typecache.types import CacheableObject

C = TypeVar("C", bound=CacheableObject)


@runtime_checkable
class ByteObjectConverter(Protocol):
    """Rebuilds objects stored with the BYTES tag."""

    def cache_to_object(self, data: bytes, target_type: type[C]) -> CacheableObject: ...


@runtime_checkable
class JsonMapObjectConverter(Protocol):
    """Rebuilds objects stored with the JSON_MAP tag."""

    def cache_to_object(
        self, json_map: dict[str, Any], target_type: type[C]
    ) -> CacheableObject: ...


class TypeDispatchConverter:
    """Converter that looks up a factory by the requested type.

    Satisfies both converter protocols, so the same instance can be configured
    for byte and JSON map objects.

    Example:
        converter = TypeDispatchConverter()
        converter.register(Point, Point.from_json_map)
        converter.register(Blob, Blob.from_bytes)
    """

    def __init__(self) -> None:
        self._factories: dict[type, Callable[[Any], CacheableObject]] = {}

    def register(
        self, target_type: type[C], factory: Callable[[Any], C]
    ) -> TypeDispatchConverter:
        """Register (or replace) the factory for a type. Returns self."""
        self._factories[target_type] = factory
        return self

    def is_registered(self, target_type: type) -> bool:
        return target_type in self._factories

    def cache_to_object(self, payload: Any, target_type: type[C]) -> CacheableObject:
        factory = self._factories.get(target_type)
        if factory is None:
            raise MissingConverterError(
                "No factory registered for type",
                context={"target_type": target_type.__qualname__},
            )
        return factory(payload)
