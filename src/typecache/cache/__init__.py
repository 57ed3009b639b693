"""
Byte store package for physical persistence.

This package provides the raw byte layer underneath the typed caches:
- Base store (base.py): the ByteStore contract
- File store (file_cache.py): one file per key inside a directory
- In-memory store (kv_cache.py): dict-backed store for tests and embedding
"""

from typecache.cache.base import ByteStore
from typecache.cache.file_cache import FileByteStore
from typecache.cache.kv_cache import InMemoryByteStore

__all__ = ["ByteStore", "FileByteStore", "InMemoryByteStore"]
