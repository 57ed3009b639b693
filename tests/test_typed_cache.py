"""
Tests for the scalar typed caches.
"""

from __future__ import annotations

import math
import sys

import pytest

from typecache import (
    CacheRegistry,
    DeserializationError,
    FloatCache,
    InMemoryByteStore,
    IntCache,
    SerializationError,
    StringCache,
)
from typecache.registry import FLOAT_PREFIX, INT_PREFIX, STRING_PREFIX


class TestScenarios:
    """End-to-end scenarios over a fresh directory-backed store."""

    def test_greeting_lifecycle(self, registry: CacheRegistry) -> None:
        """Test put, get, remove, get on a string cache."""
        strings = registry.string_cache()

        assert strings.put("greeting", "hi") is True
        assert strings.get("greeting") == "hi"
        assert strings.remove("greeting") is True
        assert strings.get("greeting") is None

    def test_count_and_pi(self, registry: CacheRegistry) -> None:
        """Test the integer and float caches."""
        ints = registry.int_cache()
        floats = registry.float_cache()

        ints.put("count", 42)
        floats.put("pi", 3.14)

        assert ints.get("count") == 42
        assert floats.get("pi") == 3.14


class TestTypedCacheContract:
    """Behaviour shared by every typed cache."""

    def test_put_none_behaves_like_remove(self, registry: CacheRegistry) -> None:
        """Test that put(k, None) reports prior existence and deletes."""
        strings = registry.string_cache()
        strings.put("k", "value")

        assert strings.put("k", None) is True
        assert strings.get("k") is None
        assert strings.put("k", None) is False
        assert strings.remove("k") is False

    def test_absence_after_remove(self, registry: CacheRegistry) -> None:
        ints = registry.int_cache()
        ints.put("k", 7)
        ints.remove("k")

        assert ints.contains("k") is False
        assert ints.get("k") is None

    def test_missing_key(self, registry: CacheRegistry) -> None:
        assert registry.string_cache().get("never") is None
        assert registry.string_cache().contains("never") is False
        assert registry.string_cache().remove("never") is False

    def test_overwrite(self, registry: CacheRegistry) -> None:
        strings = registry.string_cache()
        strings.put("k", "one")
        strings.put("k", "two")
        assert strings.get("k") == "two"

    def test_namespace_isolation(self, registry: CacheRegistry) -> None:
        """Test that the same logical key in two caches never collides."""
        strings = registry.string_cache()
        ints = registry.int_cache()

        strings.put("x", "text")
        assert ints.get("x") is None
        assert ints.contains("x") is False

        ints.put("x", 5)
        assert strings.get("x") == "text"
        assert ints.get("x") == 5

    def test_caches_share_the_store(self, registry: CacheRegistry) -> None:
        """Test that two instances of the same cache kind see each other's data."""
        registry.string_cache().put("shared", "yes")
        assert registry.string_cache().get("shared") == "yes"

    def test_physical_keys_are_prefixed(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        """Test the prefix each cache kind adds to logical keys."""
        memory_registry.string_cache().put("x", "a")
        memory_registry.int_cache().put("x", 1)
        memory_registry.float_cache().put("x", 1.5)

        assert sorted(memory_store.keys()) == sorted(
            [STRING_PREFIX + "x", INT_PREFIX + "x", FLOAT_PREFIX + "x"]
        )

    def test_zero_length_payload_reads_as_absent(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        """Test that an empty stored payload is reported as no value."""
        memory_store.put(STRING_PREFIX + "empty", b"")

        assert memory_registry.string_cache().get("empty") is None
        assert memory_registry.string_cache().contains("empty") is True


class TestStringCache:
    """String cache specifics."""

    @pytest.mark.parametrize("value", ["hi", "ключ", "emoji 🎉", "line\nbreak", " "])
    def test_round_trip(self, registry: CacheRegistry, value: str) -> None:
        strings = registry.string_cache()
        strings.put("k", value)
        assert strings.get("k") == value

    def test_empty_string_rejected(self, registry: CacheRegistry) -> None:
        """Test that an empty serialization is an error, not a delete."""
        strings = registry.string_cache()
        strings.put("k", "existing")

        with pytest.raises(SerializationError):
            strings.put("k", "")

        assert strings.get("k") == "existing"

    def test_non_string_rejected(self, registry: CacheRegistry) -> None:
        with pytest.raises(SerializationError):
            registry.string_cache().put("k", 5)  # type: ignore[arg-type]

    def test_invalid_utf8_raises(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        memory_store.put(STRING_PREFIX + "bad", b"\xff\xfe")
        with pytest.raises(DeserializationError):
            memory_registry.string_cache().get("bad")

    def test_is_string_cache(self, registry: CacheRegistry) -> None:
        assert isinstance(registry.string_cache(), StringCache)


class TestIntCache:
    """Integer cache specifics."""

    @pytest.mark.parametrize("value", [0, 1, -1, 42, 2**63, -(2**100)])
    def test_round_trip(self, registry: CacheRegistry, value: int) -> None:
        ints = registry.int_cache()
        ints.put("k", value)
        assert ints.get("k") == value

    def test_stored_as_decimal_text(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        memory_registry.int_cache().put("count", -42)
        assert memory_store.get(INT_PREFIX + "count") == b"-42"

    @pytest.mark.parametrize("value", [True, 1.5, "1"])
    def test_non_int_rejected(self, registry: CacheRegistry, value: object) -> None:
        with pytest.raises(SerializationError):
            registry.int_cache().put("k", value)  # type: ignore[arg-type]

    def test_too_many_digits_rejected(self, memory_registry: CacheRegistry) -> None:
        """Test that ints past the int-to-str digit limit raise SerializationError."""
        old_limit = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(4300)
        try:
            with pytest.raises(SerializationError) as exc_info:
                memory_registry.int_cache().put("k", 10**5000)
        finally:
            sys.set_int_max_str_digits(old_limit)

        assert exc_info.value.context["value_type"] == "int"
        assert memory_registry.int_cache().contains("k") is False

    def test_garbage_raises(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        memory_store.put(INT_PREFIX + "bad", b"forty-two")
        with pytest.raises(DeserializationError):
            memory_registry.int_cache().get("bad")

    def test_is_int_cache(self, registry: CacheRegistry) -> None:
        assert isinstance(registry.int_cache(), IntCache)


class TestFloatCache:
    """Float cache specifics; the canonical text format is repr()."""

    @pytest.mark.parametrize(
        "value",
        [
            0.0,
            -0.0,
            3.14,
            -2.5,
            0.1,
            1e-300,
            5e-324,
            sys.float_info.max,
            -sys.float_info.max,
            1e22,
            123456789.123456789,
        ],
    )
    def test_round_trip_is_exact(self, registry: CacheRegistry, value: float) -> None:
        """Test that finite floats read back bit-for-bit identical."""
        floats = registry.float_cache()
        floats.put("k", value)
        result = floats.get("k")

        assert result == value
        assert math.copysign(1.0, result) == math.copysign(1.0, value)
        assert result.hex() == value.hex()

    def test_infinities(self, registry: CacheRegistry) -> None:
        floats = registry.float_cache()
        floats.put("pos", math.inf)
        floats.put("neg", -math.inf)
        assert floats.get("pos") == math.inf
        assert floats.get("neg") == -math.inf

    def test_nan(self, registry: CacheRegistry) -> None:
        floats = registry.float_cache()
        floats.put("k", math.nan)
        assert math.isnan(floats.get("k"))

    def test_canonical_text(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        """Test the stored text for a few values."""
        floats = memory_registry.float_cache()
        floats.put("pi", 3.14)
        floats.put("tiny", 1e-300)
        floats.put("int", 2)

        assert memory_store.get(FLOAT_PREFIX + "pi") == b"3.14"
        assert memory_store.get(FLOAT_PREFIX + "tiny") == b"1e-300"
        assert memory_store.get(FLOAT_PREFIX + "int") == b"2.0"

    def test_int_accepted_as_float(self, registry: CacheRegistry) -> None:
        floats = registry.float_cache()
        floats.put("k", 3)
        result = floats.get("k")
        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("value", [False, "3.14", [1.0]])
    def test_non_number_rejected(self, registry: CacheRegistry, value: object) -> None:
        with pytest.raises(SerializationError):
            registry.float_cache().put("k", value)  # type: ignore[arg-type]

    def test_huge_int_rejected(self, registry: CacheRegistry) -> None:
        with pytest.raises(SerializationError):
            registry.float_cache().put("k", 10**400)

    def test_garbage_raises(
        self, memory_registry: CacheRegistry, memory_store: InMemoryByteStore
    ) -> None:
        memory_store.put(FLOAT_PREFIX + "bad", b"pi")
        with pytest.raises(DeserializationError):
            memory_registry.float_cache().get("bad")

    def test_is_float_cache(self, registry: CacheRegistry) -> None:
        assert isinstance(registry.float_cache(), FloatCache)
