"""Assemble word/document.xml around already-rendered body content."""
from __future__ import annotations

from copy import deepcopy
from typing import Iterable, List, Sequence

from lxml import etree

from docx_writer.model.config import DocumentConfig
from docx_writer.model.parts import HeaderPart
from docx_writer.schemas.templates import DOCUMENT_XML
from docx_writer.utils.logger import get_logger
from docx_writer.utils.xml_utils import Namespaces, make_element, parse_template, qn

LOGGER = get_logger(__name__)

_REFERENCE_NAMESPACES = {prefix: Namespaces.DOCUMENT[prefix] for prefix in ("w", "r")}


class DocumentBuilder:
    """Fill the document template with section properties, body content and header references."""

    def __init__(
        self,
        config: DocumentConfig,
        body: Iterable[etree._Element],
        headers: Sequence[HeaderPart] = (),
    ) -> None:
        self._config = config
        self._body = list(body)
        self._headers = list(headers) if config.header else []

    def build(self) -> etree._Element:
        root = parse_template(DOCUMENT_XML)
        body = root.find("w:body", Namespaces.WORD)
        sect_pr = body.find("w:sectPr", Namespaces.WORD)

        self._fill_page_setup(sect_pr)
        for element in self._body:
            # The attached body stays untouched; each render imports copies.
            sect_pr.addprevious(deepcopy(element))
        self._insert_header_references(sect_pr)
        return root

    def _fill_page_setup(self, sect_pr: etree._Element) -> None:
        config = self._config
        pg_sz = sect_pr.find("w:pgSz", Namespaces.WORD)
        pg_sz.set(qn("w:w"), str(config.page_width))
        pg_sz.set(qn("w:h"), str(config.page_height))
        pg_sz.set(qn("w:orient"), config.orientation)

        pg_mar = sect_pr.find("w:pgMar", Namespaces.WORD)
        margins = config.margins
        for name in ("top", "right", "bottom", "left", "header", "footer", "gutter"):
            pg_mar.set(qn(f"w:{name}"), str(getattr(margins, name)))

    def _insert_header_references(self, sect_pr: etree._Element) -> None:
        if not self._headers:
            return
        references: List[etree._Element] = [
            make_element(
                "w:headerReference",
                {"r:id": f"rId{header.relationship_id}", "w:type": header.type},
                nsmap=_REFERENCE_NAMESPACES,
            )
            for header in self._headers
        ]
        for index, reference in enumerate(references):
            sect_pr.insert(index, reference)
        if any(header.type == "first" for header in self._headers):
            sect_pr.append(make_element("w:titlePg"))
        LOGGER.debug("Linked %d header part(s) into the section properties", len(references))
