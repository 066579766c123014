"""Tests for numbering registration and numbering.xml generation."""
import unittest
from xml.etree import ElementTree as ET

from docx_writer.builder.docx_document import DocxDocument
from docx_writer.model.parts import ListLevel

W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"


def w_attr(element: ET.Element, name: str) -> str:
    return element.attrib[f"{W}{name}"]


class NumberingRegistrationTest(unittest.TestCase):
    """Numbering ids are allocated sequentially per document."""

    def test_ids_follow_call_order(self) -> None:
        document = DocxDocument()
        ids = [document.create_numbering([{"level": 0, "kind": "ordered"}]) for _ in range(5)]
        self.assertEqual(ids, [1, 2, 3, 4, 5])
        self.assertEqual(document.last_numbering_id, 5)

    def test_documents_do_not_share_counters(self) -> None:
        first = DocxDocument()
        second = DocxDocument()
        first.create_numbering([ListLevel(0, "ordered")])
        first.create_numbering([ListLevel(0, "ordered")])
        self.assertEqual(second.create_numbering([ListLevel(0, "unordered")]), 1)

    def test_list_tag_aliases_are_accepted(self) -> None:
        document = DocxDocument()
        document.create_numbering([{"level": 0, "type": "ol"}, {"level": 1, "type": "ul"}])
        kinds = [entry.kind for entry in document.numbering_objects[0].levels]
        self.assertEqual(kinds, ["ordered", "unordered"])

    def test_unknown_kind_is_rejected(self) -> None:
        document = DocxDocument()
        with self.assertRaises(ValueError):
            document.create_numbering([{"level": 0, "kind": "checklist"}])
        self.assertEqual(document.last_numbering_id, 0)


class NumberingXmlTest(unittest.TestCase):
    """Ensure abstract definitions and instances are rendered correctly."""

    def setUp(self) -> None:
        self.document = DocxDocument()
        self.numbering_id = self.document.create_numbering(
            [
                {"level": 0, "kind": "ordered"},
                {"level": 0, "kind": "unordered"},
                {"level": 1, "kind": "unordered"},
            ]
        )
        self.root = ET.fromstring(self.document.generate_numbering_xml().encode("utf-8"))

    def test_duplicate_levels_are_dropped(self) -> None:
        abstract = self.root.find(f"{W}abstractNum")
        assert abstract is not None
        self.assertEqual(w_attr(abstract, "abstractNumId"), "1")
        self.assertEqual(w_attr(abstract.find(f"{W}multiLevelType"), "val"), "hybridMultilevel")

        levels = abstract.findall(f"{W}lvl")
        self.assertEqual([w_attr(level, "ilvl") for level in levels], ["0", "1"])

        first, second = levels
        self.assertEqual(w_attr(first.find(f"{W}numFmt"), "val"), "decimal")
        self.assertEqual(w_attr(first.find(f"{W}lvlText"), "val"), "%1")
        self.assertIsNone(first.find(f"{W}rPr"))

        self.assertEqual(w_attr(second.find(f"{W}numFmt"), "val"), "bullet")
        self.assertEqual(w_attr(second.find(f"{W}lvlText"), "val"), "")
        fonts = second.find(f"{W}rPr/{W}rFonts")
        assert fonts is not None
        self.assertEqual(w_attr(fonts, "ascii"), "Wingdings")
        self.assertEqual(w_attr(fonts, "hAnsi"), "Wingdings")
        self.assertEqual(w_attr(fonts, "hint"), "default")

    def test_levels_share_start_and_justification(self) -> None:
        for level in self.root.iter(f"{W}lvl"):
            self.assertEqual(w_attr(level.find(f"{W}start"), "val"), "1")
            self.assertEqual(w_attr(level.find(f"{W}lvlJc"), "val"), "left")

    def test_instance_points_at_same_abstract_id(self) -> None:
        num = self.root.find(f"{W}num")
        assert num is not None
        self.assertEqual(w_attr(num, "numId"), str(self.numbering_id))
        self.assertEqual(w_attr(num.find(f"{W}abstractNumId"), "val"), str(self.numbering_id))

    def test_rendering_is_idempotent(self) -> None:
        self.assertEqual(self.document.generate_numbering_xml(), self.document.generate_numbering_xml())


class NumberingLayoutTest(unittest.TestCase):
    """Indentation grows by 720 twips per level with a fixed hanging indent."""

    def test_indent_and_tab_per_level(self) -> None:
        document = DocxDocument()
        document.create_numbering([{"level": level, "kind": "ordered"} for level in range(4)])
        root = ET.fromstring(document.generate_numbering_xml().encode("utf-8"))

        for level in root.iter(f"{W}lvl"):
            index = int(w_attr(level, "ilvl"))
            expected = str((index + 1) * 720)
            tab = level.find(f"{W}pPr/{W}tabs/{W}tab")
            ind = level.find(f"{W}pPr/{W}ind")
            assert tab is not None and ind is not None
            self.assertEqual(w_attr(tab, "val"), "num")
            self.assertEqual(w_attr(tab, "pos"), expected)
            self.assertEqual(w_attr(ind, "left"), expected)
            self.assertEqual(w_attr(ind, "hanging"), "360")
            self.assertEqual(w_attr(level.find(f"{W}lvlText"), "val"), f"%{index + 1}")

    def test_abstract_definitions_precede_instances(self) -> None:
        document = DocxDocument()
        document.create_numbering([{"level": 0, "kind": "ordered"}])
        document.create_numbering([{"level": 0, "kind": "unordered"}])
        root = ET.fromstring(document.generate_numbering_xml().encode("utf-8"))

        tags = [child.tag.split("}")[-1] for child in root]
        self.assertEqual(tags, ["abstractNum", "abstractNum", "num", "num"])
        self.assertEqual([w_attr(num, "numId") for num in root.findall(f"{W}num")], ["1", "2"])

    def test_empty_document_renders_empty_numbering(self) -> None:
        root = ET.fromstring(DocxDocument().generate_numbering_xml().encode("utf-8"))
        self.assertEqual(root.tag, f"{W}numbering")
        self.assertEqual(len(root), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
