"""Update feed service.

Orchestrates the request path: cache check -> resolve -> render -> cache
write. Regeneration of a stale target is single-flight: concurrent
requests for the same target wait on one asyncio.Lock and re-check the
cache once they hold it.
"""

import asyncio
import logging
from collections.abc import Iterable

from jex_update.config import INDEX_TARGET, Settings, settings
from jex_update.entities import CatalogEntry, EntryResult, SkipReason
from jex_update.exceptions import ExtensionUnavailableError
from jex_update.protocols import CacheStore, SourceClient

from .extension_resolver import ExtensionResolver
from .xml_renderer import DEFAULT_TARGET_PLATFORM, DEFAULT_TARGET_VERSION, render_extension_set, render_update

logger = logging.getLogger(__name__)


class UpdateFeedService:
    """Serve cached update documents, regenerating them when stale.

    Example:
        ```python
        from jex_update.repositories import FileCacheRepository, GitHubSourceClient
        from jex_update.services import UpdateFeedService

        feed = UpdateFeedService.create(
            source_client=GitHubSourceClient.create(),
            cache_store=FileCacheRepository.create(),
        )
        index = await feed.get_document("index", "https://updates.example.com/")
        ```
    """

    def __init__(
        self,
        resolver: ExtensionResolver,
        cache_store: CacheStore,
        catalog: Iterable[CatalogEntry],
        server_name: str,
        server_description: str,
        download_format: str = "zip",
        description_from_name: bool = False,
        target_platform: str = DEFAULT_TARGET_PLATFORM,
        target_version: str = DEFAULT_TARGET_VERSION,
    ) -> None:
        """Initialize the feed service.

        Args:
            resolver: Resolves catalog entries against the source host.
            cache_store: Storage for rendered documents.
            catalog: Configured extensions, in rendering order.
            server_name: Name attribute of the collection index.
            server_description: Description attribute of the collection index.
            download_format: Format attribute of downloadurl elements.
            description_from_name: Use the manifest name as description.
            target_platform: Target platform name of update documents.
            target_version: Target platform version pattern.
        """
        self._resolver = resolver
        self._cache = cache_store
        self._catalog = {entry.identifier: entry for entry in catalog}
        self._server_name = server_name
        self._server_description = server_description
        self._download_format = download_format
        self._description_from_name = description_from_name
        self._target_platform = target_platform
        self._target_version = target_version
        self._locks: dict[str, asyncio.Lock] = {}

    @classmethod
    def create(
        cls,
        source_client: SourceClient,
        cache_store: CacheStore,
        config: Settings | None = None,
    ) -> "UpdateFeedService":
        """Factory method wiring the service from settings.

        Args:
            source_client: Source hosting API client (required).
            cache_store: Rendered document storage (required).
            config: Settings to read. If None, uses the global settings.

        Returns:
            Configured UpdateFeedService
        """
        config = config or settings
        return cls(
            resolver=ExtensionResolver(source_client),
            cache_store=cache_store,
            catalog=config.catalog,
            server_name=config.server_name,
            server_description=config.server_description,
            download_format=config.download_format,
            description_from_name=config.description_from_name,
            target_platform=config.target_platform,
            target_version=config.target_version,
        )

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        return tuple(self._catalog.values())

    def is_known(self, target: str) -> bool:
        """Check whether a target can be served ("index" or a catalog identifier)."""
        return target == INDEX_TARGET or target in self._catalog

    async def get_document(self, target: str, base_url: str) -> bytes:
        """Return the XML document for a target, from cache when fresh.

        Args:
            target: "index" or a catalog identifier
            base_url: Base URL of the incoming request (for index detailsurls)

        Returns:
            The XML document bytes

        Raises:
            KeyError: If the target is not known
            ExtensionUnavailableError: If an extension document cannot be built
        """
        if not self.is_known(target):
            raise KeyError(target)

        document = self._read_fresh(target)
        if document is not None:
            return document

        lock = self._locks.setdefault(target, asyncio.Lock())
        async with lock:
            # Another request may have regenerated it while we waited
            document = self._read_fresh(target)
            if document is not None:
                return document

            logger.info("Cache file (cache/%s.xml) is not valid, generating new file!", target)
            document = await self._render(target, base_url)
            await asyncio.to_thread(self._cache.write, target, document)
            return document

    def _read_fresh(self, target: str) -> bytes | None:
        if not self._cache.is_valid(target):
            return None
        document = self._cache.read(target)
        if document is not None:
            logger.info("Loading file (cache/%s.xml) from cache.", target)
        return document

    async def _render(self, target: str, base_url: str) -> bytes:
        if target == INDEX_TARGET:
            return await self.build_collection(base_url)
        return await self.build_extension(self._catalog[target])

    async def build_collection(self, base_url: str) -> bytes:
        """Render the collection index from every resolvable catalog entry."""
        results = await self._resolver.resolve_all(self._catalog.values())

        extensions = []
        for result in results:
            if result.info is None:
                self._log_skip(result)
                continue
            extensions.append(result.info)

        return render_extension_set(self._server_name, self._server_description, extensions, base_url)

    async def build_extension(self, entry: CatalogEntry) -> bytes:
        """Render the update document of one catalog entry.

        Raises:
            ExtensionUnavailableError: If the entry cannot be resolved
        """
        result = await self._resolver.resolve(entry)
        if result.info is None:
            self._log_skip(result)
            raise ExtensionUnavailableError(entry.identifier, result.reason, result.detail)

        return render_update(
            result.info,
            download_format=self._download_format,
            description_from_name=self._description_from_name,
            target_platform=self._target_platform,
            target_version=self._target_version,
        )

    @staticmethod
    def _log_skip(result: EntryResult) -> None:
        if result.reason is SkipReason.NO_RELEASE_ASSETS:
            logger.warning("%s don't have a valid zip installer asset.", result.entry.slug)
        elif result.reason is SkipReason.MANIFEST_MISSING:
            logger.info("Skipping %s: %s", result.entry.slug, result.detail)
        else:
            logger.error("Skipping %s: %s", result.entry.slug, result.detail)
