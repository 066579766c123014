"""Build Open Packaging Convention relationship parts."""
from __future__ import annotations

from typing import Dict, Iterable

from lxml import etree

from docx_writer.model.parts import Relationship
from docx_writer.schemas.templates import DOCUMENT_RELS_XML, PACKAGE_RELS_XML
from docx_writer.utils.xml_utils import Namespaces, parse_template

WORD_REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

RELTYPE_IMAGE = f"{WORD_REL_NS}/image"
RELTYPE_HYPERLINK = f"{WORD_REL_NS}/hyperlink"
RELTYPE_HEADER = f"{WORD_REL_NS}/header"

RELATIONSHIP_TYPES: Dict[str, str] = {
    "hyperlink": RELTYPE_HYPERLINK,
    "image": RELTYPE_IMAGE,
    "header": RELTYPE_HEADER,
}

TARGET_MODES = ("Internal", "External")

# Ids 1-4 belong to the static numbering, styles, settings and font table relationships.
RESERVED_RELATIONSHIP_IDS = 4

_RELATIONSHIP_TAG = f"{{{Namespaces.PACKAGE_RELS}}}Relationship"


class RelationshipsBuilder:
    """Render ``word/_rels/document.xml.rels`` from registered relationships."""

    def __init__(self, relationships: Iterable[Relationship]) -> None:
        self._relationships = list(relationships)

    def build(self) -> etree._Element:
        root = parse_template(DOCUMENT_RELS_XML)
        for relationship in self._relationships:
            root.append(self._relationship_element(relationship))
        return root

    @staticmethod
    def _relationship_element(relationship: Relationship) -> etree._Element:
        element = etree.Element(_RELATIONSHIP_TAG)
        element.set("Id", relationship.r_id)
        # Legacy relationships with an unknown kind carry no Type attribute.
        if relationship.type is not None:
            element.set("Type", relationship.type)
        element.set("Target", relationship.target)
        element.set("TargetMode", relationship.target_mode)
        return element


def build_package_rels() -> etree._Element:
    """Return the root ``_rels/.rels`` part linking the main document and core properties."""
    return parse_template(PACKAGE_RELS_XML)
