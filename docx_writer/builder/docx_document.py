"""Stateful assembler that tracks cross-part identifiers and renders every XML part."""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Iterable, List, Mapping, Optional, Union

from lxml import etree

from docx_writer.builder.content_types_builder import ContentTypesBuilder
from docx_writer.builder.document_builder import DocumentBuilder
from docx_writer.builder.fixed_parts import (
    build_core_properties,
    build_font_table,
    build_settings,
    build_styles,
    build_web_settings,
)
from docx_writer.builder.media_builder import build_media_file
from docx_writer.builder.numbering_builder import NumberingBuilder
from docx_writer.builder.rels_builder import (
    RELATIONSHIP_TYPES,
    RESERVED_RELATIONSHIP_IDS,
    TARGET_MODES,
    RelationshipsBuilder,
    build_package_rels,
)
from docx_writer.errors import ConfigurationError, UnsupportedRelationshipKindError
from docx_writer.model.config import HEADER_TYPES, DocumentConfig
from docx_writer.model.parts import HeaderPart, ListLevel, MediaFile, NumberingDefinition, Relationship
from docx_writer.renderer.fragment import FragmentRenderer, render_fragment
from docx_writer.utils.logger import get_logger
from docx_writer.utils.xml_utils import Namespaces, make_element, serialize_xml

LOGGER = get_logger(__name__)

ListLevelInput = Union[ListLevel, Mapping[str, Any]]


class DocxDocument:
    """Document-wide state for one conversion.

    The orchestrator registers lists, media, relationships and headers while
    it walks its content tree, then asks for each part exactly when it needs
    it. Identifiers come from per-instance counters that only ever grow, so
    every ``numId``/``rId`` written into one part resolves to a single entry
    of this document. Instances must not be shared between conversions.
    """

    def __init__(
        self,
        config: Optional[DocumentConfig] = None,
        renderer: Optional[FragmentRenderer] = None,
    ) -> None:
        self.config = config or DocumentConfig()
        self._renderer = renderer or render_fragment

        self.last_numbering_id = 0
        self.last_document_rels_id = RESERVED_RELATIONSHIP_IDS
        self.last_media_id = 0
        self.last_header_id = 0

        self.numbering_objects: List[NumberingDefinition] = []
        self.document_rels_objects: List[Relationship] = []
        self.media_files: List[MediaFile] = []
        self.header_objects: List[HeaderPart] = []
        self._body: List[etree._Element] = []

    @classmethod
    def from_options(
        cls,
        options: Optional[Mapping[str, Any]] = None,
        renderer: Optional[FragmentRenderer] = None,
    ) -> "DocxDocument":
        return cls(DocumentConfig.from_options(options), renderer=renderer)

    # ------------------------------------------------------------------
    # Registration
    def create_numbering(self, levels: Iterable[ListLevelInput]) -> int:
        """Register a list and return the id paragraphs use as ``w:numId``."""
        definition_levels = tuple(self._coerce_level(entry) for entry in levels)
        self.last_numbering_id += 1
        self.numbering_objects.append(
            NumberingDefinition(numbering_id=self.last_numbering_id, levels=definition_levels)
        )
        LOGGER.debug("Registered numbering %d with %d level entries", self.last_numbering_id, len(definition_levels))
        return self.last_numbering_id

    def create_media_file(self, data_uri: str) -> MediaFile:
        """Decode a base64 data URI into a media record; raises ``InvalidMediaError``."""
        media = build_media_file(self.last_media_id + 1, data_uri)
        self.last_media_id = media.media_id
        self.media_files.append(media)
        LOGGER.debug("Registered media %d as %s", media.media_id, media.file_name)
        return media

    def create_document_relationship(self, kind: str, target: str, target_mode: str = "External") -> int:
        """Register a relationship from the main document and return its numeric id."""
        if target_mode not in TARGET_MODES:
            raise ConfigurationError(f"Unknown target mode: {target_mode!r}")
        relationship_type = RELATIONSHIP_TYPES.get(kind)
        if relationship_type is None:
            if self.config.strict_relationships:
                raise UnsupportedRelationshipKindError(kind)
            LOGGER.warning("Relationship kind %r has no type URI; writing it without a Type attribute", kind)

        self.last_document_rels_id += 1
        self.document_rels_objects.append(
            Relationship(
                relationship_id=self.last_document_rels_id,
                kind=kind,
                type=relationship_type,
                target=target,
                target_mode=target_mode,
            )
        )
        LOGGER.debug("Registered %s relationship rId%d -> %s", kind, self.last_document_rels_id, target)
        return self.last_document_rels_id

    def generate_header_xml(self, tree: Any, header_type: Optional[str] = None) -> HeaderPart:
        """Render ``tree`` into a header part and link it from the document.

        The renderer runs first so that media or hyperlinks found inside the
        header are registered before the header itself.
        """
        header_type = header_type or self.config.header_type
        if header_type not in HEADER_TYPES:
            raise ConfigurationError(f"Unknown header type: {header_type!r}")

        header_xml = make_element("w:hdr", nsmap=Namespaces.HEADER)
        # Header parts never share nodes with the caller's tree or with each other.
        header_xml.extend(deepcopy(element) for element in self._renderer(tree, self))

        self.last_header_id += 1
        header_id = self.last_header_id
        relationship_id = self.create_document_relationship("header", f"header{header_id}.xml", "Internal")
        header = HeaderPart(
            header_id=header_id,
            relationship_id=relationship_id,
            type=header_type,
            xml=header_xml,
        )
        self.header_objects.append(header)
        return header

    def attach_body(self, tree: Any) -> None:
        """Set the rendered body content placed ahead of the section properties."""
        self._body = list(self._renderer(tree, self))

    # ------------------------------------------------------------------
    # Part generation
    def generate_content_types_xml(self) -> str:
        return serialize_xml(ContentTypesBuilder(self.header_objects, self.media_files).build())

    def generate_package_rels_xml(self) -> str:
        return serialize_xml(build_package_rels())

    def generate_core_xml(self) -> str:
        return serialize_xml(build_core_properties(self.config.metadata))

    def generate_document_xml(self) -> str:
        return serialize_xml(DocumentBuilder(self.config, self._body, self.header_objects).build())

    def generate_settings_xml(self) -> str:
        return serialize_xml(build_settings())

    def generate_web_settings_xml(self) -> str:
        return serialize_xml(build_web_settings())

    def generate_styles_xml(self) -> str:
        return serialize_xml(build_styles(self.config))

    def generate_font_table_xml(self) -> str:
        return serialize_xml(build_font_table())

    def generate_numbering_xml(self) -> str:
        return serialize_xml(NumberingBuilder(self.numbering_objects).build())

    def generate_document_rels_xml(self) -> str:
        return serialize_xml(RelationshipsBuilder(self.document_rels_objects).build())

    def generate_header_part_xml(self, header: HeaderPart) -> str:
        return serialize_xml(header.xml)

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_level(entry: ListLevelInput) -> ListLevel:
        if isinstance(entry, ListLevel):
            return entry
        kind = entry.get("kind", entry.get("type"))
        return ListLevel(level=int(entry["level"]), kind=kind)
