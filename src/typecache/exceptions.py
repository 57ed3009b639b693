"""
Custom exception hierarchy for the typed cache library.

All exceptions inherit from TypeCacheError, which provides optional context
for structured error handling and logging. Absence of a cached value is never
an error: lookups return None instead.
"""

from __future__ import annotations

from typing import Any


class TypeCacheError(Exception):
    """Base exception for all typed cache errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(TypeCacheError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Unknown KEY_HASH_ALGORITHM
        - Empty key prefix
        - Empty store directory
    """

    pass


class NotConfiguredError(TypeCacheError):
    """Raised when a registry is used before it has been configured."""

    pass


class AlreadyConfiguredError(TypeCacheError):
    """Raised when a registry is configured a second time."""

    pass


class MissingTypeParameterError(TypeCacheError):
    """Raised when an object cache is requested without a concrete item type.

    Context should include:
        - item_type: The type that was supplied (None or an abstract type)
    """

    pass


class SerializationError(TypeCacheError):
    """Raised when a value cannot be turned into a non-empty byte payload.

    Context should include:
        - cache: The typed cache that attempted the conversion
        - value_type: The runtime type of the rejected value
    """

    pass


class DeserializationError(TypeCacheError):
    """Raised when stored bytes cannot be parsed back into a value.

    Context should include:
        - cache: The typed cache that attempted the conversion
        - size: Length of the stored payload
    """

    pass


class UnsupportedTypeError(TypeCacheError):
    """Raised when a value is not a usable cacheable object.

    Examples:
        - The value declares neither or both capabilities
        - to_bytes() returned empty bytes or None
        - to_json_map() returned None
    """

    pass


class UnknownTagError(TypeCacheError):
    """Raised when a stored object payload ends with an unrecognized tag byte.

    Context should include:
        - tag: The tag byte that was found
    """

    pass


class MissingConverterError(TypeCacheError):
    """Raised when no converter is available to rebuild a stored object.

    Context should include:
        - tag: The tag of the stored payload
        - target_type: The type that was requested
    """

    pass


class TypeMismatchError(TypeCacheError):
    """Raised when a converter returns an instance of the wrong concrete type.

    Context should include:
        - expected: Name of the requested type
        - actual: Name of the returned type
    """

    pass


class StoreError(TypeCacheError):
    """Raised when the underlying byte store fails.

    Context should include:
        - path: The file or directory involved
        - operation: The store operation (put, remove, mkdir)
    """

    pass
