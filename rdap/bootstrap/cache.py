"""Caches for bootstrap Service Registry files, in memory or on disk."""

from __future__ import annotations

import abc
import enum
import os
import time
from pathlib import Path

DEFAULT_TIMEOUT = 24 * 60 * 60.0
DEFAULT_CACHE_DIR_NAME = ".openrdap"


class FileState(enum.Enum):
    """Cache state of a single Service Registry file."""

    ABSENT = 0
    """The file is not in the cache."""

    GOOD = 1
    """The file is cached, and the latest version has already been loaded or saved."""

    SHOULD_RELOAD = 2
    """The file is cached, and a newer version is available to load."""

    EXPIRED = 3
    """The file is cached but has expired. It can still be loaded."""

    def __str__(self) -> str:
        if self is FileState.ABSENT:
            return "not cached"
        if self is FileState.EXPIRED:
            return "expired"
        return "good"


class CacheMissError(LookupError):
    """Raised when a file is requested that the cache does not hold."""


class RegistryCache(abc.ABC):
    """A cache of Service Registry files."""

    @abc.abstractmethod
    def load(self, filename: str) -> bytes:
        """Return the cached contents of ``filename``."""

    @abc.abstractmethod
    def save(self, filename: str, data: bytes) -> None:
        """Store ``data`` as ``filename``."""

    @abc.abstractmethod
    def state(self, filename: str) -> FileState:
        """Return the cache state of ``filename``."""

    @abc.abstractmethod
    def set_timeout(self, timeout: float) -> None:
        """Set how many seconds a file stays fresh before it is expired."""


class MemoryCache(RegistryCache):
    """Caches Service Registry files in memory."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        self._data: dict[str, bytes] = {}
        self._mtime: dict[str, float] = {}

    def set_timeout(self, timeout: float) -> None:
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        self._data[filename] = bytes(data)
        self._mtime[filename] = time.time()

    def load(self, filename: str) -> bytes:
        """Return the file even if it has expired."""
        try:
            return bytes(self._data[filename])
        except KeyError:
            raise CacheMissError(f"File {filename} not in cache") from None

    def state(self, filename: str) -> FileState:
        mtime = self._mtime.get(filename)
        if mtime is None:
            return FileState.ABSENT
        if mtime + self.timeout < time.time():
            return FileState.EXPIRED
        return FileState.GOOD


class DiskCache(RegistryCache):
    """Caches Service Registry files in a directory, using file mtimes for expiry.

    The directory defaults to ``~/.openrdap`` and is created as needed.
    """

    def __init__(
        self, directory: str | os.PathLike[str] | None = None, timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        if directory is None:
            directory = Path.home() / DEFAULT_CACHE_DIR_NAME
        self.directory = Path(directory)
        self.timeout = timeout
        self._last_loaded: dict[str, int] = {}

    def init_dir(self) -> bool:
        """Create the cache directory if needed; return True if it was created."""
        try:
            if self.directory.is_dir():
                return False
            if self.directory.exists():
                raise NotADirectoryError(f"Cache dir is not a dir: {self.directory}")
        except OSError:
            raise
        self.directory.mkdir(mode=0o775)
        return True

    def set_timeout(self, timeout: float) -> None:
        self.timeout = timeout

    def save(self, filename: str, data: bytes) -> None:
        self.init_dir()
        self._path(filename).write_bytes(bytes(data))
        self._last_loaded[filename] = self._mod_time(filename)

    def load(self, filename: str) -> bytes:
        """Return the file even if it has expired."""
        try:
            mtime = self._mod_time(filename)
        except OSError as exc:
            raise CacheMissError(f"Unable to load {filename}: {exc}") from exc
        data = self._path(filename).read_bytes()
        self._last_loaded[filename] = mtime
        return data

    def state(self, filename: str) -> FileState:
        try:
            mtime = self._mod_time(filename)
        except OSError:
            return FileState.ABSENT

        expiry = time.time_ns() - int(self.timeout * 1_000_000_000)
        if mtime <= expiry:
            return FileState.EXPIRED

        last_loaded = self._last_loaded.get(filename)
        if last_loaded is not None and mtime <= last_loaded:
            return FileState.GOOD
        return FileState.SHOULD_RELOAD

    def _mod_time(self, filename: str) -> int:
        return self._path(filename).stat().st_mtime_ns

    def _path(self, filename: str) -> Path:
        return self.directory / filename