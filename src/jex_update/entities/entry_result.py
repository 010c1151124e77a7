"""Per-entry resolution result."""

from dataclasses import dataclass
from enum import Enum

from .catalog_entry import CatalogEntry, ExtensionKind
from .manifest import Manifest
from .release import Release


class SkipReason(str, Enum):
    """Why a catalog entry produced no output."""

    MANIFEST_MISSING = "manifest_missing"
    NO_RELEASE_ASSETS = "no_release_assets"
    INVALID_MANIFEST = "invalid_manifest"
    FETCH_FAILED = "fetch_failed"


@dataclass(frozen=True)
class ExtensionInfo:
    """Everything needed to render one extension.

    Attributes:
        entry: The catalog entry this info was resolved for
        manifest: Parsed extension manifest
        release: Latest release, guaranteed to have at least one asset
    """

    entry: CatalogEntry
    manifest: Manifest
    release: Release

    @property
    def identifier(self) -> str:
        return self.entry.identifier

    @property
    def kind(self) -> ExtensionKind | None:
        return self.entry.kind

    @property
    def version(self) -> str:
        return self.release.version


@dataclass(frozen=True)
class EntryResult:
    """Either a resolved ExtensionInfo or the reason the entry was skipped."""

    entry: CatalogEntry
    info: ExtensionInfo | None = None
    reason: SkipReason | None = None
    detail: str = ""

    @classmethod
    def resolved(cls, info: ExtensionInfo) -> "EntryResult":
        return cls(entry=info.entry, info=info)

    @classmethod
    def skipped(cls, entry: CatalogEntry, reason: SkipReason, detail: str = "") -> "EntryResult":
        return cls(entry=entry, reason=reason, detail=detail)

    @property
    def ok(self) -> bool:
        return self.info is not None
