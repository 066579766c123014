"""Records registered on a document while its content tree is walked."""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Optional, Tuple

from lxml import etree

LIST_KIND_ALIASES = {
    "ordered": "ordered",
    "ol": "ordered",
    "unordered": "unordered",
    "ul": "unordered",
}


@dataclass(frozen=True, slots=True)
class ListLevel:
    """One list entry: its nesting level and whether it is numbered or bulleted."""

    level: int
    kind: str

    def __post_init__(self) -> None:
        if self.level < 0:
            raise ValueError(f"List level must be >= 0, got {self.level}")
        kind = LIST_KIND_ALIASES.get(self.kind)
        if kind is None:
            raise ValueError(f"Unknown list kind: {self.kind!r}")
        object.__setattr__(self, "kind", kind)

    @property
    def is_ordered(self) -> bool:
        return self.kind == "ordered"


@dataclass(frozen=True, slots=True)
class NumberingDefinition:
    """List formatting shared by every paragraph that references ``numbering_id``."""

    numbering_id: int
    levels: Tuple[ListLevel, ...]

    def distinct_levels(self) -> Tuple[ListLevel, ...]:
        """Levels in order of first appearance; later duplicates of a level are dropped."""
        seen = set()
        distinct = []
        for entry in self.levels:
            if entry.level in seen:
                continue
            seen.add(entry.level)
            distinct.append(entry)
        return tuple(distinct)


@dataclass(frozen=True, slots=True)
class Relationship:
    """Entry of ``word/_rels/document.xml.rels``."""

    relationship_id: int
    kind: str
    type: Optional[str]
    target: str
    target_mode: str = "External"

    @property
    def r_id(self) -> str:
        return f"rId{self.relationship_id}"


@dataclass(frozen=True, slots=True)
class MediaFile:
    """Embedded image decoded from a data URI."""

    media_id: int
    content: str
    file_name: str
    mime_type: str

    @property
    def extension(self) -> str:
        return self.file_name.rsplit(".", 1)[-1]

    @property
    def part_name(self) -> str:
        """Target of the file relative to ``word/``."""
        return f"media/{self.file_name}"

    @property
    def data(self) -> bytes:
        return base64.b64decode(self.content)


@dataclass(frozen=True, slots=True)
class HeaderPart:
    """A rendered header and the relationship that links it to the body."""

    header_id: int
    relationship_id: int
    type: str
    xml: etree._Element

    @property
    def part_name(self) -> str:
        return f"header{self.header_id}.xml"
