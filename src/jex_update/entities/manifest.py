"""Extension manifest domain entity."""

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from jex_update.exceptions import ManifestError


def _first_text(root: ET.Element, tag: str) -> str | None:
    if root.tag == tag:
        element = root
    else:
        element = root.find(f".//{tag}")
    if element is None:
        return None
    return (element.text or "").strip()


@dataclass(frozen=True)
class Manifest:
    """The subset of a Joomla installation manifest the update server uses.

    Attributes:
        client: Value of the ``client`` attribute on the ``extension`` element,
            None for plugins, components and other kinds that declare none
        name: Text of the first ``name`` element
        description: Text of the first ``description`` element
        author: Text of the first ``author`` element
        author_url: Text of the first ``authorUrl`` element
    """

    client: str | None = None
    name: str | None = None
    description: str | None = None
    author: str | None = None
    author_url: str | None = None

    @classmethod
    def from_xml(cls, data: bytes) -> "Manifest":
        """Parse a manifest document.

        Args:
            data: Raw manifest bytes

        Returns:
            The parsed manifest

        Raises:
            ManifestError: If the document is not XML or has no ``extension``
                element
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise ManifestError(f"Manifest is not well-formed XML: {e}") from e

        extension = root if root.tag == "extension" else root.find(".//extension")
        if extension is None:
            raise ManifestError("Manifest has no <extension> element")

        return cls(
            client=extension.get("client"),
            name=_first_text(root, "name"),
            description=_first_text(root, "description"),
            author=_first_text(root, "author"),
            author_url=_first_text(root, "authorUrl"),
        )
