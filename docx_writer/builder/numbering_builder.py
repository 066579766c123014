"""Build numbering.xml from the list definitions registered on a document.

Every definition yields an ``w:abstractNum`` holding one ``w:lvl`` per
distinct list level plus a ``w:num`` instance that points back at it. Both
reuse the definition id, so ``numId == abstractNumId`` throughout the part.
Abstract definitions are written first, then instances, as the schema
requires.
"""
from __future__ import annotations

from typing import Iterable, List

from lxml import etree

from docx_writer.model.parts import ListLevel, NumberingDefinition
from docx_writer.schemas.templates import NUMBERING_XML
from docx_writer.utils.units import points_to_twips
from docx_writer.utils.xml_utils import add_child, make_element, parse_template

# Each nesting level moves the list half an inch further right.
LEVEL_INDENT_STEP = points_to_twips(36)
HANGING_INDENT = points_to_twips(18)
BULLET_FONT = "Wingdings"


def level_indent(level: int) -> int:
    """Left indent and tab stop, in twips, for a zero-based list level."""
    return (level + 1) * LEVEL_INDENT_STEP


class NumberingBuilder:
    """Render numbering definitions into a ``w:numbering`` part."""

    def __init__(self, definitions: Iterable[NumberingDefinition]) -> None:
        self._definitions = list(definitions)

    def build(self) -> etree._Element:
        root = parse_template(NUMBERING_XML)
        abstracts: List[etree._Element] = []
        instances: List[etree._Element] = []
        for definition in self._definitions:
            abstracts.append(self._abstract_numbering(definition))
            instances.append(self._numbering_instance(definition))
        root.extend(abstracts)
        root.extend(instances)
        return root

    # ------------------------------------------------------------------
    def _abstract_numbering(self, definition: NumberingDefinition) -> etree._Element:
        abstract = make_element("w:abstractNum", {"w:abstractNumId": definition.numbering_id})
        add_child(abstract, "w:multiLevelType", {"w:val": "hybridMultilevel"})
        for entry in definition.distinct_levels():
            abstract.append(self._level(entry))
        return abstract

    def _level(self, entry: ListLevel) -> etree._Element:
        indent = level_indent(entry.level)
        lvl = make_element("w:lvl", {"w:ilvl": entry.level})
        add_child(lvl, "w:start", {"w:val": 1})
        add_child(lvl, "w:numFmt", {"w:val": "decimal" if entry.is_ordered else "bullet"})
        add_child(lvl, "w:lvlText", {"w:val": f"%{entry.level + 1}" if entry.is_ordered else ""})
        add_child(lvl, "w:lvlJc", {"w:val": "left"})

        p_pr = add_child(lvl, "w:pPr")
        tabs = add_child(p_pr, "w:tabs")
        add_child(tabs, "w:tab", {"w:val": "num", "w:pos": indent})
        add_child(p_pr, "w:ind", {"w:left": indent, "w:hanging": HANGING_INDENT})

        if not entry.is_ordered:
            r_pr = add_child(lvl, "w:rPr")
            add_child(
                r_pr,
                "w:rFonts",
                {"w:ascii": BULLET_FONT, "w:hAnsi": BULLET_FONT, "w:hint": "default"},
            )
        return lvl

    def _numbering_instance(self, definition: NumberingDefinition) -> etree._Element:
        num = make_element("w:num", {"w:numId": definition.numbering_id})
        add_child(num, "w:abstractNumId", {"w:val": definition.numbering_id})
        return num
