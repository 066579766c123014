"""Build [Content_Types].xml for the generated package."""
from __future__ import annotations

from typing import Iterable, List, Set

from lxml import etree

from docx_writer.model.parts import HeaderPart, MediaFile
from docx_writer.schemas.templates import CONTENT_TYPES_XML
from docx_writer.utils.xml_utils import Namespaces, parse_template

HEADER_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.header+xml"

_DEFAULT_TAG = f"{{{Namespaces.CONTENT_TYPES}}}Default"
_OVERRIDE_TAG = f"{{{Namespaces.CONTENT_TYPES}}}Override"


class ContentTypesBuilder:
    """Render the content types part, adding header overrides and media defaults."""

    def __init__(self, headers: Iterable[HeaderPart] = (), media: Iterable[MediaFile] = ()) -> None:
        self._headers: List[HeaderPart] = list(headers)
        self._media: List[MediaFile] = list(media)

    def build(self) -> etree._Element:
        root = parse_template(CONTENT_TYPES_XML)
        self._add_media_defaults(root)
        for header in self._headers:
            override = etree.SubElement(root, _OVERRIDE_TAG)
            override.set("PartName", f"/word/{header.part_name}")
            override.set("ContentType", HEADER_CONTENT_TYPE)
        return root

    def _add_media_defaults(self, root: etree._Element) -> None:
        declared: Set[str] = {element.get("Extension") for element in root.iter(_DEFAULT_TAG)}
        insert_at = len(root.findall(_DEFAULT_TAG))
        for media in self._media:
            if media.extension in declared:
                continue
            default = etree.Element(_DEFAULT_TAG)
            default.set("Extension", media.extension)
            default.set("ContentType", media.mime_type)
            root.insert(insert_at, default)
            insert_at += 1
            declared.add(media.extension)
