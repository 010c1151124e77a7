"""Catalog entry domain entity."""

from dataclasses import dataclass
from enum import Enum

TEMPLATE_MANIFEST = "templateDetails.xml"


class ExtensionKind(str, Enum):
    """Joomla extension type, derived from the identifier prefix."""

    COMPONENT = "component"
    MODULE = "module"
    PLUGIN = "plugin"
    TEMPLATE = "template"
    PACKAGE = "package"
    LIBRARY = "library"

    @classmethod
    def from_identifier(cls, identifier: str) -> "ExtensionKind | None":
        """Return the kind for an identifier such as ``com_foo``.

        Only the first three characters are inspected. Unknown prefixes
        return None rather than a default kind.
        """
        return _PREFIXES.get(identifier[:3])


_PREFIXES = {
    "com": ExtensionKind.COMPONENT,
    "mod": ExtensionKind.MODULE,
    "plg": ExtensionKind.PLUGIN,
    "tpl": ExtensionKind.TEMPLATE,
    "pkg": ExtensionKind.PACKAGE,
    "lib": ExtensionKind.LIBRARY,
}


@dataclass(frozen=True)
class CatalogEntry:
    """A configured extension and the GitHub namespace that hosts it.

    Attributes:
        identifier: Extension identifier, also the repository name (e.g. "mod_weather")
        vendor: GitHub user or organisation owning the repository
    """

    identifier: str
    vendor: str

    @property
    def kind(self) -> ExtensionKind | None:
        return ExtensionKind.from_identifier(self.identifier)

    @property
    def manifest_filename(self) -> str:
        """Manifest file name in the repository root."""
        if self.kind is ExtensionKind.TEMPLATE:
            return TEMPLATE_MANIFEST
        return f"{self.identifier}.xml"

    @property
    def slug(self) -> str:
        return f"{self.vendor}/{self.identifier}"
