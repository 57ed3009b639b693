"""
Pytest configuration and fixtures for typed cache tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from tests.objects import make_converter
from typecache import (
    CacheConfiguration,
    CacheRegistry,
    FileByteStore,
    InMemoryByteStore,
    TypeDispatchConverter,
)
from typecache.config import clear_settings_cache
from typecache.logging import reset_logging


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def mock_env_vars(temp_dir: Path) -> Generator[dict[str, str], None, None]:
    """Provide environment variables for the default file-backed registry."""
    env_vars = {
        "TYPECACHE_CACHE_DIR": str(temp_dir / "env_cache"),
        "TYPECACHE_KEY_HASH_ALGORITHM": "sha256",
        "TYPECACHE_LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture
def converter() -> TypeDispatchConverter:
    """Converter that knows every sample object type."""
    return make_converter()


@pytest.fixture
def file_store(temp_dir: Path) -> FileByteStore:
    """File store in a directory that does not exist yet."""
    return FileByteStore(temp_dir / "cache")


@pytest.fixture
def memory_store() -> InMemoryByteStore:
    return InMemoryByteStore()


@pytest.fixture
def config(
    file_store: FileByteStore, converter: TypeDispatchConverter
) -> CacheConfiguration:
    return CacheConfiguration(
        store=file_store,
        byte_object_converter=converter,
        json_map_object_converter=converter,
    )


@pytest.fixture
def registry(config: CacheConfiguration) -> CacheRegistry:
    """Registry configured with a fresh, empty directory-backed store."""
    return CacheRegistry(config)


@pytest.fixture
def memory_registry(
    memory_store: InMemoryByteStore, converter: TypeDispatchConverter
) -> CacheRegistry:
    """Registry configured with an in-memory store."""
    return CacheRegistry(
        CacheConfiguration(
            store=memory_store,
            byte_object_converter=converter,
            json_map_object_converter=converter,
        )
    )


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Automatically reset settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_library_logging() -> Generator[None, None, None]:
    """Return the typecache logger to its library default after each test."""
    yield
    reset_logging()
