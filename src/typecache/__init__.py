"""
Typed, pluggable key-value caching.

Store strings, numbers and structured objects under string keys on top of a
swappable byte store (by default, one file per key in a directory).
"""

from typecache.cache import ByteStore, FileByteStore, InMemoryByteStore
from typecache.codec import ObjectCodec
from typecache.converters import (
    ByteObjectConverter,
    JsonMapObjectConverter,
    TypeDispatchConverter,
)
from typecache.exceptions import (
    AlreadyConfiguredError,
    ConfigurationError,
    DeserializationError,
    MissingConverterError,
    MissingTypeParameterError,
    NotConfiguredError,
    SerializationError,
    StoreError,
    TypeCacheError,
    TypeMismatchError,
    UnknownTagError,
    UnsupportedTypeError,
)
from typecache.keys import (
    HashKeyTransform,
    IdentityKeyTransform,
    KeyTransform,
    PrefixKeyTransform,
)
from typecache.registry import CacheRegistry
from typecache.typed import (
    FloatCache,
    IntCache,
    ObjectCache,
    SingleObjectCache,
    StringCache,
    TypedCache,
)
from typecache.types import (
    ByteObject,
    CacheableObject,
    CacheConfiguration,
    JsonMapObject,
    ObjectTag,
)

__version__ = "0.1.0"

__all__ = [
    "AlreadyConfiguredError",
    "ByteObject",
    "ByteObjectConverter",
    "ByteStore",
    "CacheConfiguration",
    "CacheRegistry",
    "CacheableObject",
    "ConfigurationError",
    "DeserializationError",
    "FileByteStore",
    "FloatCache",
    "HashKeyTransform",
    "IdentityKeyTransform",
    "InMemoryByteStore",
    "IntCache",
    "JsonMapObject",
    "JsonMapObjectConverter",
    "KeyTransform",
    "MissingConverterError",
    "MissingTypeParameterError",
    "NotConfiguredError",
    "ObjectCache",
    "ObjectCodec",
    "ObjectTag",
    "PrefixKeyTransform",
    "SerializationError",
    "SingleObjectCache",
    "StoreError",
    "StringCache",
    "TypeCacheError",
    "TypeDispatchConverter",
    "TypeMismatchError",
    "TypedCache",
    "UnknownTagError",
    "UnsupportedTypeError",
    "__version__",
]
