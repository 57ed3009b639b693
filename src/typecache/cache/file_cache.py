"""
File-based byte store.

Each physical key is passed through the store's key transform (MD5 hex by
default) and stored as a single file inside the configured directory. The
directory is created on first write; failing to create it is an error rather
than something the caller has to guarantee up front.

Writes are atomic: the payload goes to a temporary file in the same
directory, which then replaces the target, so a key always holds either the
old bytes or the new bytes.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from typecache.cache.base import ByteStore
from typecache.exceptions import ConfigurationError, StoreError
from typecache.keys import HashKeyTransform, KeyTransform
from typecache.logging import get_logger

logger = get_logger(__name__)


class FileByteStore(ByteStore):
    """Directory-backed byte store, one file per key."""

    def __init__(
        self,
        directory: str | Path,
        key_transform: KeyTransform | None = None,
    ) -> None:
        """Initialize file store.

        Args:
            directory: Directory holding the cache files. Created lazily.
            key_transform: Maps keys to file names. Defaults to MD5 hex.
        """
        if not str(directory):
            raise ConfigurationError("FileByteStore requires a directory")
        self.directory = Path(directory)
        self.key_transform = key_transform or HashKeyTransform()

    def _get_path(self, key: str) -> Path:
        return self.directory / self.key_transform.transform(key)

    def _ensure_directory(self) -> None:
        if self.directory.is_dir():
            return
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create cache directory", path=str(self.directory))
            raise StoreError(
                "Failed to create cache directory",
                context={"path": str(self.directory), "operation": "mkdir"},
            ) from e
        logger.debug("Created cache directory", path=str(self.directory))

    def _write(self, key: str, data: bytes) -> bool:
        self._ensure_directory()
        path = self._get_path(key)

        tmp_path: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                dir=self.directory, prefix=".tmp-", delete=False
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(data)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error("Failed to write cache file", path=str(path))
            raise StoreError(
                "Failed to write cache file",
                context={"path": str(path), "operation": "put"},
            ) from e

        logger.debug("Stored bytes", file=path.name, size=len(data))
        return True

    def get(self, key: str) -> bytes | None:
        path = self._get_path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error("Failed to read cache file", path=str(path))
            raise StoreError(
                "Failed to read cache file",
                context={"path": str(path), "operation": "get"},
            ) from e

    def remove(self, key: str) -> bool:
        path = self._get_path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error("Failed to delete cache file", path=str(path))
            raise StoreError(
                "Failed to delete cache file",
                context={"path": str(path), "operation": "remove"},
            ) from e

        logger.debug("Removed bytes", file=path.name)
        return True

    def contains(self, key: str) -> bool:
        return self._get_path(key).is_file()
