"""Helper functions to work with XML namespaces, templates and serialization."""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from lxml import etree


class Namespaces:
    """Common OpenXML namespace prefixes used across part builders."""

    WORD: Dict[str, str] = {
        "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    }
    PACKAGE_RELS = "http://schemas.openxmlformats.org/package/2006/relationships"
    CONTENT_TYPES = "http://schemas.openxmlformats.org/package/2006/content-types"
    CORE_PROPERTIES: Dict[str, str] = {
        "cp": "http://schemas.openxmlformats.org/package/2006/metadata/core-properties",
        "dc": "http://purl.org/dc/elements/1.1/",
        "dcterms": "http://purl.org/dc/terms/",
        "dcmitype": "http://purl.org/dc/dcmitype/",
        "xsi": "http://www.w3.org/2001/XMLSchema-instance",
    }
    # Prefixes a rendered body or header fragment may use.
    DOCUMENT: Dict[str, str] = {
        "ve": "http://schemas.openxmlformats.org/markup-compatibility/2006",
        "o": "urn:schemas-microsoft-com:office:office",
        "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
        "m": "http://schemas.openxmlformats.org/officeDocument/2006/math",
        "v": "urn:schemas-microsoft-com:vml",
        "wp": "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing",
        "w10": "urn:schemas-microsoft-com:office:word",
        "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
        "wne": "http://schemas.microsoft.com/office/word/2006/wordml",
        "a": "http://schemas.openxmlformats.org/drawingml/2006/main",
        "pic": "http://schemas.openxmlformats.org/drawingml/2006/picture",
    }
    HEADER: Dict[str, str] = {}


Namespaces.HEADER = {prefix: Namespaces.DOCUMENT[prefix] for prefix in ("w", "ve", "o", "r", "v", "wp", "w10")}

_ALL_PREFIXES: Dict[str, str] = {**Namespaces.DOCUMENT, **Namespaces.CORE_PROPERTIES}

_TEMPLATE_PARSER = etree.XMLParser(remove_blank_text=True)


def qn(name: str) -> str:
    """Qualify a ``prefix:local`` name into Clark notation (``{uri}local``)."""
    if name.startswith("{") or ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    return f"{{{_ALL_PREFIXES[prefix]}}}{local}"


def parse_template(xml: str) -> etree._Element:
    """Parse an XML template, dropping indentation so the output re-indents cleanly."""
    return etree.fromstring(xml.strip().encode("utf-8"), _TEMPLATE_PARSER)


def make_element(
    tag: str,
    attributes: Optional[Mapping[str, object]] = None,
    nsmap: Optional[Mapping[Optional[str], str]] = None,
) -> etree._Element:
    """Create a detached element from prefixed names, stringifying attribute values.

    Without an explicit ``nsmap`` the element declares the prefix of its own
    tag, so it serializes with that prefix even before it is attached.
    """
    if nsmap is None and ":" in tag and not tag.startswith("{"):
        prefix = tag.split(":", 1)[0]
        nsmap = {prefix: _ALL_PREFIXES[prefix]}
    element = etree.Element(qn(tag), nsmap=dict(nsmap) if nsmap else None)
    _set_attributes(element, attributes)
    return element


def add_child(
    parent: etree._Element, tag: str, attributes: Optional[Mapping[str, object]] = None
) -> etree._Element:
    """Append a child with prefixed tag and attributes, returning the child."""
    child = etree.SubElement(parent, qn(tag))
    _set_attributes(child, attributes)
    return child


def serialize_xml(element: etree._Element) -> str:
    """Serialize a part root into pretty-printed text with a standalone declaration."""
    payload = etree.tostring(
        element.getroottree(),
        xml_declaration=True,
        encoding="UTF-8",
        standalone=True,
        pretty_print=True,
    )
    return payload.decode("utf-8")


def _set_attributes(element: etree._Element, attributes: Optional[Mapping[str, object]]) -> None:
    for key, value in (attributes or {}).items():
        element.set(qn(key), str(value))
