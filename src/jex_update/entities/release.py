"""Release and remote file domain entities."""

import base64
from dataclasses import dataclass, field


def strip_version_prefix(tag: str) -> str:
    """Strip exactly one leading "v" from a release tag.

    Example:
        >>> strip_version_prefix("v1.2.3")
        '1.2.3'
        >>> strip_version_prefix("1.2.3")
        '1.2.3'
    """
    return tag[1:] if tag.startswith("v") else tag


@dataclass(frozen=True)
class ReleaseAsset:
    """A downloadable file attached to a release."""

    browser_download_url: str
    name: str = ""


@dataclass(frozen=True)
class Release:
    """Latest published release of an extension repository.

    Attributes:
        tag_name: Git tag of the release, possibly prefixed with "v"
        html_url: Human-readable release page
        assets: Downloadable installer packages, in upload order
    """

    tag_name: str
    html_url: str
    assets: tuple[ReleaseAsset, ...] = field(default_factory=tuple)

    @property
    def version(self) -> str:
        return strip_version_prefix(self.tag_name)

    @property
    def download_url(self) -> str | None:
        """Download URL of the first asset, or None for an incomplete release."""
        if not self.assets:
            return None
        return self.assets[0].browser_download_url or None


@dataclass(frozen=True)
class RemoteFile:
    """A file fetched from a repository's default branch."""

    path: str
    content: str
    encoding: str = "base64"

    def decoded(self) -> bytes:
        """Return the raw file bytes."""
        if self.encoding == "base64":
            # GitHub wraps base64 payloads at 60 columns; b64decode drops the newlines
            return base64.b64decode(self.content)
        return self.content.encode("utf-8")
