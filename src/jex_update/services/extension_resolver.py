"""Resolve catalog entries into render-ready extension data."""

from collections.abc import Iterable

from jex_update.entities import CatalogEntry, EntryResult, ExtensionInfo, Manifest, SkipReason
from jex_update.exceptions import ManifestError, SourceClientError
from jex_update.protocols import SourceClient


class ExtensionResolver:
    """Fetch a manifest and latest release for each catalog entry.

    Every outcome is reported as an EntryResult; fetch and parse failures
    are turned into skip results instead of propagating, so one broken
    repository never hides the others.
    """

    def __init__(self, source_client: SourceClient) -> None:
        self._client = source_client

    async def resolve(self, entry: CatalogEntry) -> EntryResult:
        """Resolve a single catalog entry.

        Steps:
        1. Fetch the manifest (templateDetails.xml for templates)
        2. Parse the client attribute and descriptive fields
        3. Fetch the latest release and require at least one asset

        Args:
            entry: The catalog entry to resolve

        Returns:
            A resolved result, or a skipped one carrying the SkipReason
        """
        try:
            remote = await self._client.get_file(entry.vendor, entry.identifier, entry.manifest_filename)
            if remote is None:
                return EntryResult.skipped(
                    entry,
                    SkipReason.MANIFEST_MISSING,
                    f"{entry.manifest_filename} not found in {entry.slug}",
                )

            manifest = Manifest.from_xml(remote.decoded())
            release = await self._client.get_latest_release(entry.vendor, entry.identifier)
        except SourceClientError as e:
            return EntryResult.skipped(entry, SkipReason.FETCH_FAILED, str(e))
        except (ManifestError, ValueError) as e:
            # ValueError covers a manifest payload that is not valid base64
            return EntryResult.skipped(entry, SkipReason.INVALID_MANIFEST, str(e))

        if release is None or release.download_url is None:
            return EntryResult.skipped(
                entry,
                SkipReason.NO_RELEASE_ASSETS,
                f"{entry.slug} don't have a valid zip installer asset.",
            )

        return EntryResult.resolved(ExtensionInfo(entry=entry, manifest=manifest, release=release))

    async def resolve_all(self, entries: Iterable[CatalogEntry]) -> list[EntryResult]:
        """Resolve entries one after another, in catalog order."""
        return [await self.resolve(entry) for entry in entries]
