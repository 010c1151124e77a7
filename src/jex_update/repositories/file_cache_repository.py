"""Filesystem implementation of CacheStore.

Each rendered document lives in ``<cache_dir>/<target>.xml``. Freshness is
derived from the file's modification time: a file is served while
``now <= mtime + ttl``.

Writes go to a temporary file in the same directory which is then renamed
over the target, so readers never observe a half-written document.
"""

import logging
import os
import tempfile
from pathlib import Path

from jex_update.config import Settings, settings
from jex_update.protocols import Clock

from .system_clock import SystemClock

logger = logging.getLogger(__name__)


class FileCacheRepository:
    """Disk cache for rendered XML documents.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        cache_dir: Path | str | None = None,
        ttl: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the cache repository.

        Args:
            cache_dir: Directory holding the documents. Defaults to settings.
            ttl: Time-to-live in seconds. Defaults to settings.
            clock: Time source. Defaults to the system clock.
        """
        self._cache_dir = Path(cache_dir) if cache_dir is not None else settings.cache_path
        self._ttl = ttl if ttl is not None else settings.cache_ttl
        self._clock = clock or SystemClock()

    @classmethod
    def create(cls, config: Settings | None = None, clock: Clock | None = None) -> "FileCacheRepository":
        """Factory method to create the repository from settings."""
        config = config or settings
        return cls(cache_dir=config.cache_path, ttl=config.cache_ttl, clock=clock)

    @property
    def cache_dir(self) -> Path:
        return self._cache_dir

    @property
    def ttl(self) -> int:
        return self._ttl

    def path_for(self, target: str) -> Path:
        return self._cache_dir / f"{target}.xml"

    def is_valid(self, target: str) -> bool:
        path = self.path_for(target)
        try:
            modified = path.stat().st_mtime
        except OSError:
            return False

        if not path.is_file() or not os.access(path, os.R_OK):
            return False

        return modified + self._ttl >= self._clock.now()

    def read(self, target: str) -> bytes | None:
        path = self.path_for(target)
        try:
            return path.read_bytes()
        except OSError as e:
            logger.warning("Cannot read cache file %s: %s", path, e)
            return None

    def write(self, target: str, document: bytes) -> None:
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(target)

        fd, tmp_name = tempfile.mkstemp(dir=self._cache_dir, prefix=f".{target}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(document)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def is_writable(self) -> bool:
        """Check whether documents can be written to the cache directory."""
        directory = self._cache_dir if self._cache_dir.exists() else self._cache_dir.parent
        return os.access(directory, os.W_OK)
