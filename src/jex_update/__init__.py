"""JEX Update Server - Joomla extension updates served from GitHub releases.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (SourceClient, CacheStore, Clock)
    - repositories: GitHub API client, on-disk document cache
    - services: Entry resolution, XML rendering, cache orchestration
    - handlers: HTTP endpoint handlers
    - dto: GitHub payloads and JSON responses
    - entities: Domain models (internal)

For HTTP API:
    ```python
    from jex_update.api.app import app, create_app
    ```
"""

from jex_update.config import Settings, get_settings, settings
from jex_update.entities import CatalogEntry, ExtensionKind, Manifest, Release
from jex_update.exceptions import (
    ExtensionUnavailableError,
    JexUpdateError,
    ManifestError,
    SourceClientError,
)
from jex_update.handlers import UpdateFeedHandler
from jex_update.protocols import CacheStore, Clock, SourceClient
from jex_update.repositories import FileCacheRepository, GitHubSourceClient
from jex_update.services import ExtensionResolver, UpdateFeedService

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "settings",
    # Protocols (interfaces)
    "CacheStore",
    "Clock",
    "SourceClient",
    # Services (business logic)
    "ExtensionResolver",
    "UpdateFeedService",
    # Handlers (HTTP)
    "UpdateFeedHandler",
    # Repositories (data access)
    "FileCacheRepository",
    "GitHubSourceClient",
    # Entities (domain models)
    "CatalogEntry",
    "ExtensionKind",
    "Manifest",
    "Release",
    # Errors
    "JexUpdateError",
    "SourceClientError",
    "ManifestError",
    "ExtensionUnavailableError",
]
