"""Repository layer for data access.

This layer hides external dependencies (the GitHub API, the filesystem,
the system clock) behind the protocol interfaces in jex_update.protocols.
"""

from jex_update.protocols import CacheStore, Clock, SourceClient

from .file_cache_repository import FileCacheRepository
from .github_client import GitHubSourceClient
from .system_clock import SystemClock

__all__ = [
    "CacheStore",
    "Clock",
    "SourceClient",
    "FileCacheRepository",
    "GitHubSourceClient",
    "SystemClock",
]
