"""XML synthesis for the Joomla update server dialect.

Two document shapes are produced:

- the collection index (``<extensionset>``), listing every extension
- the per-extension update descriptor (``<updates><update>``)

Both are UTF-8 with an ``<?xml version="1.0" encoding="utf-8"?>`` declaration.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from urllib.parse import urljoin

from jex_update.entities import ExtensionInfo

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

DEFAULT_TARGET_PLATFORM = "joomla"
DEFAULT_TARGET_VERSION = "3.[23456789]"


def _serialize(root: ET.Element) -> bytes:
    return (XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n").encode("utf-8")


def _text_element(parent: ET.Element, tag: str, text: str | None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text or ""
    return element


def details_url(base_url: str, identifier: str) -> str:
    """Build the update document URL for an extension.

    Example:
        >>> details_url("https://updates.example.com/", "mod_weather")
        'https://updates.example.com/mod_weather.xml'
    """
    return urljoin(base_url, f"{identifier}.xml")


def render_extension_set(
    name: str,
    description: str,
    extensions: Iterable[ExtensionInfo],
    base_url: str,
) -> bytes:
    """Render the collection index.

    Args:
        name: Server name, the ``name`` attribute of ``<extensionset>``
        description: Server description
        extensions: Resolved extensions, rendered in the given order
        base_url: Base URL of the incoming request, used for detailsurl

    Returns:
        The serialized document. An empty iterable yields an empty set.
    """
    extension_set = ET.Element("extensionset", {"name": name, "description": description})

    for info in extensions:
        kind = info.kind.value if info.kind is not None else ""
        client = info.manifest.client or ""
        ET.SubElement(
            extension_set,
            "extension",
            {
                "name": info.identifier,
                "element": info.identifier,
                "type": kind,
                "client": client,
                "client_id": client,
                "version": info.version,
                "detailsurl": details_url(base_url, info.identifier),
            },
        )

    return _serialize(extension_set)


def render_update(
    info: ExtensionInfo,
    download_format: str = "zip",
    description_from_name: bool = False,
    target_platform: str = DEFAULT_TARGET_PLATFORM,
    target_version: str = DEFAULT_TARGET_VERSION,
) -> bytes:
    """Render the update descriptor of a single extension.

    Args:
        info: Resolved extension; its release must have a download URL
        download_format: Value of the downloadurl ``format`` attribute
        description_from_name: Fill <description> with the manifest name
            even when the manifest carries a description
        target_platform: ``name`` attribute of <targetplatform>
        target_version: ``version`` attribute of <targetplatform>

    Returns:
        The serialized document
    """
    manifest = info.manifest
    kind = info.kind.value if info.kind is not None else ""

    if description_from_name:
        description = manifest.name
    else:
        description = manifest.description or manifest.name

    updates = ET.Element("updates")
    update = ET.SubElement(updates, "update")

    _text_element(update, "name", manifest.name)
    _text_element(update, "description", description)
    _text_element(update, "element", info.identifier)
    _text_element(update, "type", kind)
    _text_element(update, "version", info.version)
    _text_element(update, "infourl", info.release.html_url)
    _text_element(update, "client", manifest.client)

    downloads = ET.SubElement(update, "downloads")
    download_url = _text_element(downloads, "downloadurl", info.release.download_url)
    download_url.set("type", "upgrade")
    download_url.set("format", download_format)

    tags = ET.SubElement(update, "tags")
    _text_element(tags, "tag", "stable")

    _text_element(update, "maintainer", manifest.author)
    _text_element(update, "maintainerurl", manifest.author_url)
    ET.SubElement(update, "targetplatform", {"name": target_platform, "version": target_version})

    return _serialize(updates)
