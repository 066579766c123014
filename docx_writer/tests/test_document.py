"""Tests for word/document.xml assembly."""
import unittest
from xml.etree import ElementTree as ET

from docx_writer.builder.docx_document import DocxDocument
from docx_writer.errors import FragmentRenderError
from docx_writer.model.config import DocumentConfig, PageMargins

W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
R = "{http://schemas.openxmlformats.org/officeDocument/2006/relationships}"

BODY = '<w:p><w:r><w:t>First</w:t></w:r></w:p><w:p><w:r><w:t>Second</w:t></w:r></w:p>'


def parse_document(document: DocxDocument) -> ET.Element:
    return ET.fromstring(document.generate_document_xml().encode("utf-8"))


class DocumentBodyTest(unittest.TestCase):
    """Body content and section properties."""

    def test_body_precedes_section_properties(self) -> None:
        document = DocxDocument()
        document.attach_body(BODY)
        body = parse_document(document).find(f"{W}body")
        assert body is not None

        tags = [child.tag for child in body]
        self.assertEqual(tags, [f"{W}p", f"{W}p", f"{W}sectPr"])
        texts = [t.text for t in body.iter(f"{W}t")]
        self.assertEqual(texts, ["First", "Second"])

    def test_portrait_page_setup(self) -> None:
        sect_pr = parse_document(DocxDocument()).find(f"{W}body/{W}sectPr")
        assert sect_pr is not None
        pg_sz = sect_pr.find(f"{W}pgSz")
        self.assertEqual(pg_sz.attrib[f"{W}w"], "12240")
        self.assertEqual(pg_sz.attrib[f"{W}h"], "15840")
        self.assertEqual(pg_sz.attrib[f"{W}orient"], "portrait")

        pg_mar = sect_pr.find(f"{W}pgMar")
        expected = {"top": "1440", "right": "1800", "bottom": "1440", "left": "1800",
                    "header": "720", "footer": "720", "gutter": "0"}
        for name, value in expected.items():
            self.assertEqual(pg_mar.attrib[f"{W}{name}"], value)

    def test_landscape_page_setup_with_custom_margins(self) -> None:
        config = DocumentConfig(orientation="landscape", margins=PageMargins(top=100, right=200, bottom=300, left=400))
        sect_pr = parse_document(DocxDocument(config)).find(f"{W}body/{W}sectPr")
        pg_sz = sect_pr.find(f"{W}pgSz")
        self.assertEqual((pg_sz.attrib[f"{W}w"], pg_sz.attrib[f"{W}h"]), ("15840", "12240"))
        self.assertEqual(pg_sz.attrib[f"{W}orient"], "landscape")
        self.assertEqual(sect_pr.find(f"{W}pgMar").attrib[f"{W}left"], "400")

    def test_rendering_is_idempotent(self) -> None:
        document = DocxDocument()
        document.attach_body(BODY)
        self.assertEqual(document.generate_document_xml(), document.generate_document_xml())

    def test_malformed_fragment_raises(self) -> None:
        with self.assertRaises(FragmentRenderError):
            DocxDocument().attach_body("<w:p><w:r></w:p>")

    def test_output_is_pretty_printed_with_declaration(self) -> None:
        document = DocxDocument()
        document.attach_body(BODY)
        xml = document.generate_document_xml()
        self.assertTrue(xml.startswith("<?xml"))
        self.assertIn("standalone='yes'", xml.splitlines()[0])
        self.assertIn("\n  <w:body>", xml)


class HeaderReferenceTest(unittest.TestCase):
    """Header references are emitted only when headers are enabled."""

    def _document(self, **options) -> DocxDocument:
        document = DocxDocument(DocumentConfig(**options))
        document.attach_body(BODY)
        return document

    def test_references_are_first_children_in_creation_order(self) -> None:
        document = self._document(header=True)
        document.create_document_relationship("hyperlink", "https://example.com")
        first = document.generate_header_xml('<w:p><w:r><w:t>Header</w:t></w:r></w:p>')
        second = document.generate_header_xml('<w:p/>', header_type="even")

        sect_pr = parse_document(document).find(f"{W}body/{W}sectPr")
        children = list(sect_pr)
        self.assertEqual(children[0].tag, f"{W}headerReference")
        self.assertEqual(children[1].tag, f"{W}headerReference")
        self.assertEqual(children[2].tag, f"{W}pgSz")

        self.assertEqual(children[0].attrib[f"{R}id"], f"rId{first.relationship_id}")
        self.assertEqual(children[0].attrib[f"{W}type"], "default")
        self.assertEqual(children[1].attrib[f"{R}id"], f"rId{second.relationship_id}")
        self.assertEqual(children[1].attrib[f"{W}type"], "even")
        self.assertEqual((first.relationship_id, second.relationship_id), (6, 7))
        self.assertIsNone(sect_pr.find(f"{W}titlePg"))

    def test_disabled_headers_are_not_referenced(self) -> None:
        document = self._document(header=False)
        document.generate_header_xml('<w:p/>')
        sect_pr = parse_document(document).find(f"{W}body/{W}sectPr")
        self.assertIsNone(sect_pr.find(f"{W}headerReference"))

    def test_first_page_header_sets_title_page(self) -> None:
        document = self._document(header=True, header_type="first")
        document.generate_header_xml('<w:p/>')
        sect_pr = parse_document(document).find(f"{W}body/{W}sectPr")
        self.assertEqual(list(sect_pr)[-1].tag, f"{W}titlePg")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
