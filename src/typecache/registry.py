"""
Registry handing out typed caches over one shared configuration.

The registry is an ordinary object: create it, configure it exactly once, and
pass it to whoever needs caches. Each factory call returns a fresh typed
cache with the prefix transform for its kind, so the same logical key used
in two kinds of cache never collides in the store.
"""

from __future__ import annotations

from typing import TypeVar

from typecache.cache.file_cache import FileByteStore
from typecache.config import Settings, get_settings
from typecache.converters import ByteObjectConverter, JsonMapObjectConverter
from typecache.exceptions import (
    AlreadyConfiguredError,
    ConfigurationError,
    NotConfiguredError,
)
from typecache.keys import HashKeyTransform, PrefixKeyTransform
from typecache.logging import get_logger, setup_logging
from typecache.typed import (
    FloatCache,
    IntCache,
    ObjectCache,
    SingleObjectCache,
    StringCache,
)
from typecache.types import CacheableObject, CacheConfiguration

logger = get_logger(__name__)

ObjectT = TypeVar("ObjectT", bound=CacheableObject)

STRING_PREFIX = "StringCache:"
INT_PREFIX = "IntCache:"
FLOAT_PREFIX = "FloatCache:"
OBJECT_PREFIX = "ObjectCache:"
SINGLE_OBJECT_PREFIX = "SingleObjectCache:"


class CacheRegistry:
    """Factory for typed caches sharing one CacheConfiguration."""

    def __init__(self, config: CacheConfiguration | None = None) -> None:
        self._config: CacheConfiguration | None = None
        if config is not None:
            self.configure(config)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        byte_object_converter: ByteObjectConverter | None = None,
        json_map_object_converter: JsonMapObjectConverter | None = None,
    ) -> CacheRegistry:
        """Build a registry backed by a file store in ``settings.CACHE_DIR``.

        Args:
            settings: Settings to use. Defaults to get_settings().
            byte_object_converter: Converter for byte-encoded objects.
            json_map_object_converter: Converter for JSON map objects.
        """
        settings = settings or get_settings()
        setup_logging(log_level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)
        store = FileByteStore(
            settings.CACHE_DIR,
            key_transform=HashKeyTransform.for_algorithm(settings.KEY_HASH_ALGORITHM),
        )
        return cls(
            CacheConfiguration(
                store=store,
                byte_object_converter=byte_object_converter,
                json_map_object_converter=json_map_object_converter,
            )
        )

    def configure(self, config: CacheConfiguration) -> None:
        """Set the configuration. Allowed only once.

        Raises:
            ConfigurationError: If config is None.
            AlreadyConfiguredError: If the registry already has a configuration.
        """
        if config is None:
            raise ConfigurationError("CacheRegistry requires a configuration")
        if self._config is not None:
            raise AlreadyConfiguredError("CacheRegistry can only be configured once")
        self._config = config
        logger.debug("Cache registry configured", store=type(config.store).__name__)

    @property
    def configured(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> CacheConfiguration:
        """The shared configuration.

        Raises:
            NotConfiguredError: If configure() has not been called.
        """
        if self._config is None:
            raise NotConfiguredError("CacheRegistry has not been configured")
        return self._config

    def string_cache(self) -> StringCache:
        return StringCache(self.config, PrefixKeyTransform(STRING_PREFIX))

    def int_cache(self) -> IntCache:
        return IntCache(self.config, PrefixKeyTransform(INT_PREFIX))

    def float_cache(self) -> FloatCache:
        return FloatCache(self.config, PrefixKeyTransform(FLOAT_PREFIX))

    def object_cache(self, item_type: type[ObjectT]) -> ObjectCache[ObjectT]:
        return ObjectCache(self.config, PrefixKeyTransform(OBJECT_PREFIX), item_type)

    def single_object_cache(self, item_type: type[ObjectT]) -> SingleObjectCache[ObjectT]:
        return SingleObjectCache(
            self.config, PrefixKeyTransform(SINGLE_OBJECT_PREFIX), item_type
        )
