"""Entry-point that runs one assembly pass and collects every generated part."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from docx_writer.builder.docx_document import DocxDocument
from docx_writer.model.parts import MediaFile
from docx_writer.renderer.fragment import FragmentRenderer
from docx_writer.utils.logger import get_logger

LOGGER = get_logger(__name__)

CONTENT_TYPES_PATH = "[Content_Types].xml"
PACKAGE_RELS_PATH = "_rels/.rels"
CORE_PROPS_PATH = "docProps/core.xml"
DOCUMENT_XML_PATH = "word/document.xml"
STYLES_XML_PATH = "word/styles.xml"
NUMBERING_XML_PATH = "word/numbering.xml"
SETTINGS_XML_PATH = "word/settings.xml"
WEB_SETTINGS_XML_PATH = "word/webSettings.xml"
FONT_TABLE_XML_PATH = "word/fontTable.xml"
DOCUMENT_RELS_PATH = "word/_rels/document.xml.rels"


@dataclass(slots=True)
class PackageParts:
    """Generated XML parts keyed by archive path, plus the media to embed."""

    xml_parts: Dict[str, str] = field(default_factory=dict)
    media: List[MediaFile] = field(default_factory=list)

    def media_paths(self) -> Dict[str, MediaFile]:
        return {f"word/{media.part_name}": media for media in self.media}


def collect_parts(document: DocxDocument) -> PackageParts:
    """Render every part of ``document``; registration must be complete."""
    xml_parts = {
        CONTENT_TYPES_PATH: document.generate_content_types_xml(),
        PACKAGE_RELS_PATH: document.generate_package_rels_xml(),
        CORE_PROPS_PATH: document.generate_core_xml(),
        DOCUMENT_XML_PATH: document.generate_document_xml(),
        STYLES_XML_PATH: document.generate_styles_xml(),
        NUMBERING_XML_PATH: document.generate_numbering_xml(),
        SETTINGS_XML_PATH: document.generate_settings_xml(),
        WEB_SETTINGS_XML_PATH: document.generate_web_settings_xml(),
        FONT_TABLE_XML_PATH: document.generate_font_table_xml(),
        DOCUMENT_RELS_PATH: document.generate_document_rels_xml(),
    }
    for header in document.header_objects:
        xml_parts[f"word/{header.part_name}"] = document.generate_header_part_xml(header)
    return PackageParts(xml_parts=xml_parts, media=list(document.media_files))


def build_docx_parts(
    body: Any,
    header: Any = None,
    options: Optional[Mapping[str, Any]] = None,
    renderer: Optional[FragmentRenderer] = None,
) -> PackageParts:
    """Assemble one document from rendered body (and optional header) content.

    ``header`` is only rendered when the ``header`` option is enabled.
    """
    document = DocxDocument.from_options(options, renderer=renderer)
    document.attach_body(body)
    if document.config.header and header is not None:
        document.generate_header_xml(header)

    parts = collect_parts(document)
    LOGGER.info(
        "Assembled %d XML parts and %d media files", len(parts.xml_parts), len(parts.media)
    )
    return parts
