"""Helpers to persist generated parts for debugging."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from docx_writer.main import PackageParts


class PartDumper:
    """Writes generated parts onto disk for inspection, mirroring archive paths."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, parts: "PackageParts") -> List[Path]:
        """Write every XML part and media payload; return the written paths."""
        written: List[Path] = []
        for name, xml in parts.xml_parts.items():
            written.append(self._write(name, xml.encode("utf-8")))
        for name, media in parts.media_paths().items():
            written.append(self._write(name, media.data))
        return written

    def _write(self, name: str, payload: bytes) -> Path:
        path = self.directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        return path
