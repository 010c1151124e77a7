"""Domain entities for internal representation.

These are frozen dataclasses used by services and repositories. They are
NOT the GitHub wire format - use the DTOs from the dto package for that.
"""

from .catalog_entry import CatalogEntry, ExtensionKind
from .entry_result import EntryResult, ExtensionInfo, SkipReason
from .manifest import Manifest
from .release import Release, ReleaseAsset, RemoteFile, strip_version_prefix

__all__ = [
    "CatalogEntry",
    "EntryResult",
    "ExtensionInfo",
    "ExtensionKind",
    "Manifest",
    "Release",
    "ReleaseAsset",
    "RemoteFile",
    "SkipReason",
    "strip_version_prefix",
]
