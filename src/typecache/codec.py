"""
Object codec for cacheable objects.

Wire format: the encoded payload followed by exactly one tag byte.

    tag 0 (ObjectTag.BYTES)     payload is the object's to_bytes() output
    tag 1 (ObjectTag.JSON_MAP)  payload is the UTF-8 JSON of to_json_map()

Decoding reads the last byte, hands the remaining payload to the converter
configured for that tag, and checks the rebuilt instance is exactly of the
requested type.
"""

from __future__ import annotations

import inspect
import math
from typing import Any, TypeVar

import orjson

from typecache.exceptions import (
    DeserializationError,
    MissingConverterError,
    MissingTypeParameterError,
    SerializationError,
    TypeMismatchError,
    UnknownTagError,
    UnsupportedTypeError,
)
from typecache.types import (
    CAPABILITY_TYPES,
    ByteObject,
    CacheableObject,
    CacheConfiguration,
    JsonMapObject,
    ObjectTag,
)

T = TypeVar("T", bound=CacheableObject)

_CAPABILITIES: dict[ObjectTag, type[CacheableObject]] = {
    ObjectTag.BYTES: ByteObject,
    ObjectTag.JSON_MAP: JsonMapObject,
}


def require_concrete_type(item_type: Any) -> type[CacheableObject]:
    """Validate the element type of an object cache.

    Raises:
        MissingTypeParameterError: If no concrete type was given.
        UnsupportedTypeError: If the type is not a CacheableObject subclass.
    """
    if item_type is None or item_type in CAPABILITY_TYPES:
        raise MissingTypeParameterError(
            "A concrete cacheable object type is required",
            context={"item_type": getattr(item_type, "__qualname__", item_type)},
        )
    if not inspect.isclass(item_type) or not issubclass(item_type, CacheableObject):
        raise UnsupportedTypeError(
            "Object caches only hold CacheableObject subclasses",
            context={"item_type": repr(item_type)},
        )
    if inspect.isabstract(item_type):
        raise MissingTypeParameterError(
            "A concrete cacheable object type is required",
            context={"item_type": item_type.__qualname__},
        )
    return item_type


def _find_non_finite(value: Any, path: str = "$") -> str | None:
    """Return the path of the first NaN or infinite float in a JSON value."""
    if isinstance(value, float):
        return None if math.isfinite(value) else path
    if isinstance(value, dict):
        items = ((f"{path}.{k}", v) for k, v in value.items())
    elif isinstance(value, (list, tuple)):
        items = ((f"{path}[{i}]", v) for i, v in enumerate(value))
    else:
        return None
    for item_path, item in items:
        found = _find_non_finite(item, item_path)
        if found is not None:
            return found
    return None


def _capability_tag(value: Any) -> ObjectTag:
    type_name = type(value).__qualname__
    if not isinstance(value, CacheableObject):
        raise UnsupportedTypeError(
            "Value is not a cacheable object", context={"value_type": type_name}
        )
    if isinstance(value, ByteObject) and isinstance(value, JsonMapObject):
        raise UnsupportedTypeError(
            "Cacheable object declares more than one capability",
            context={"value_type": type_name},
        )
    tag = getattr(value, "cache_tag", None)
    if tag not in _CAPABILITIES or not isinstance(value, _CAPABILITIES[tag]):
        raise UnsupportedTypeError(
            "Unknown cacheable object", context={"value_type": type_name}
        )
    return ObjectTag(tag)


class ObjectCodec:
    """Encodes cacheable objects to tagged bytes and back."""

    def __init__(self, config: CacheConfiguration) -> None:
        self.config = config

    def encode(self, value: CacheableObject) -> bytes:
        """Serialize a cacheable object and append its tag byte.

        Raises:
            UnsupportedTypeError: If the value has no usable capability or its
                serialization method returns nothing.
            SerializationError: If the JSON map holds non-JSON values or
                non-finite floats.
        """
        tag = _capability_tag(value)
        type_name = type(value).__qualname__

        if tag is ObjectTag.BYTES:
            payload = value.to_bytes()
            if not payload:
                raise UnsupportedTypeError(
                    f"{type_name}.to_bytes() returned empty or None",
                    context={"value_type": type_name},
                )
            payload = bytes(payload)
        else:
            json_map = value.to_json_map()
            if json_map is None or not isinstance(json_map, dict):
                raise UnsupportedTypeError(
                    f"{type_name}.to_json_map() did not return a map",
                    context={"value_type": type_name},
                )
            # orjson writes NaN and Infinity as null
            bad_path = _find_non_finite(json_map)
            if bad_path is not None:
                raise SerializationError(
                    "JSON map holds a non-finite float",
                    context={"value_type": type_name, "path": bad_path},
                )
            try:
                payload = orjson.dumps(json_map)
            except orjson.JSONEncodeError as e:
                raise SerializationError(
                    "JSON map is not serializable",
                    context={"value_type": type_name, "error": str(e)},
                ) from e

        return payload + bytes((tag,))

    def decode(self, data: bytes, target_type: type[T]) -> T:
        """Rebuild an object of ``target_type`` from tagged bytes.

        Raises:
            UnknownTagError: If the trailing byte is not a known tag.
            MissingConverterError: If no converter handles the tag.
            DeserializationError: If a JSON payload cannot be parsed into a map.
            TypeMismatchError: If the converter returns another type.
        """
        if not data:
            raise DeserializationError("Cannot decode an empty payload")

        tag = data[-1]
        payload = data[:-1]

        if tag == ObjectTag.BYTES:
            converter = self.config.byte_object_converter
            if converter is None:
                raise MissingConverterError(
                    "No byte object converter configured",
                    context={"tag": tag, "target_type": target_type.__qualname__},
                )
            obj = converter.cache_to_object(payload, target_type)
        elif tag == ObjectTag.JSON_MAP:
            converter = self.config.json_map_object_converter
            if converter is None:
                raise MissingConverterError(
                    "No JSON map object converter configured",
                    context={"tag": tag, "target_type": target_type.__qualname__},
                )
            obj = converter.cache_to_object(self._load_json_map(payload), target_type)
        else:
            raise UnknownTagError("Unknown object tag", context={"tag": tag})

        if type(obj) is not target_type:
            raise TypeMismatchError(
                f"Expected {target_type.__qualname__} but converter returned "
                f"{type(obj).__qualname__}",
                context={
                    "expected": target_type.__qualname__,
                    "actual": type(obj).__qualname__,
                },
            )
        return obj

    @staticmethod
    def _load_json_map(payload: bytes) -> dict[str, Any]:
        try:
            json_map = orjson.loads(payload)
        except orjson.JSONDecodeError as e:
            raise DeserializationError(
                "Stored JSON payload is malformed", context={"size": len(payload)}
            ) from e
        if not isinstance(json_map, dict):
            raise DeserializationError(
                "Stored JSON payload is not an object",
                context={"json_type": type(json_map).__name__},
            )
        return json_map
