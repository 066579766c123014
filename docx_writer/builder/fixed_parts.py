"""Builders for the parts that only depend on the document configuration."""
from __future__ import annotations

from datetime import datetime, timezone

from lxml import etree

from docx_writer.model.config import DocumentConfig, DocumentMetadata
from docx_writer.schemas.templates import (
    CORE_PROPERTIES_XML,
    FONT_TABLE_XML,
    SETTINGS_XML,
    STYLES_XML,
    WEB_SETTINGS_XML,
)
from docx_writer.utils.xml_utils import Namespaces, parse_template, qn


def format_w3cdtf(value: datetime) -> str:
    """Format a timestamp as UTC W3CDTF; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_core_properties(metadata: DocumentMetadata) -> etree._Element:
    root = parse_template(CORE_PROPERTIES_XML)
    values = {
        "dc:title": metadata.title,
        "dc:subject": metadata.subject,
        "dc:creator": metadata.creator,
        "cp:keywords": ", ".join(metadata.keywords),
        "dc:description": metadata.description,
        "cp:lastModifiedBy": metadata.last_modified_by,
        "cp:revision": str(metadata.revision),
        "dcterms:created": format_w3cdtf(metadata.created_at),
        "dcterms:modified": format_w3cdtf(metadata.modified_at),
    }
    for name, text in values.items():
        root.find(name, Namespaces.CORE_PROPERTIES).text = text
    return root


def build_styles(config: DocumentConfig) -> etree._Element:
    root = parse_template(STYLES_XML)
    r_pr = root.find("w:docDefaults/w:rPrDefault/w:rPr", Namespaces.WORD)
    fonts = r_pr.find("w:rFonts", Namespaces.WORD)
    for attribute in ("w:ascii", "w:eastAsia", "w:hAnsi", "w:cs"):
        fonts.set(qn(attribute), config.font)
    r_pr.find("w:sz", Namespaces.WORD).set(qn("w:val"), str(config.font_size))
    r_pr.find("w:szCs", Namespaces.WORD).set(qn("w:val"), str(config.complex_script_font_size))
    return root


def build_settings() -> etree._Element:
    return parse_template(SETTINGS_XML)


def build_web_settings() -> etree._Element:
    return parse_template(WEB_SETTINGS_XML)


def build_font_table() -> etree._Element:
    return parse_template(FONT_TABLE_XML)
