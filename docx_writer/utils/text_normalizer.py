"""
Text normalization utilities for generated WordprocessingML.

Handles characters that XML 1.0 cannot carry and optional whitespace
collapsing for metadata values written into package parts.
"""

import re
from typing import Iterable, Optional, Tuple


class TextNormalizer:
    """Normalizes free text before it is written into an XML part."""

    # Characters illegal in XML 1.0 (tab, newline and carriage return are allowed)
    ILLEGAL_XML_CHARS_PATTERN = re.compile(
        '[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]'
    )

    # Regex for collapsing multiple whitespace characters
    WHITESPACE_PATTERN = re.compile(r'\s+')

    def __init__(self, preserve_whitespace: bool = True):
        """Initialize text normalizer.

        Args:
            preserve_whitespace: If True, keep whitespace exactly as given.
                                If False, collapse runs of whitespace and trim.
        """
        self.preserve_whitespace = preserve_whitespace

    def normalize_text(self, text: Optional[str]) -> str:
        """Return ``text`` with XML-illegal characters removed."""
        if not text:
            return ""

        normalized = self._remove_illegal_chars(text)

        if not self.preserve_whitespace:
            normalized = self._normalize_whitespace(normalized)

        return normalized

    def normalize_many(self, values: Iterable[str]) -> Tuple[str, ...]:
        """Normalize a sequence of values, dropping the ones left empty."""
        normalized = (self.normalize_text(value) for value in values)
        return tuple(value for value in normalized if value)

    def _remove_illegal_chars(self, text: str) -> str:
        return self.ILLEGAL_XML_CHARS_PATTERN.sub('', text)

    def _normalize_whitespace(self, text: str) -> str:
        return self.WHITESPACE_PATTERN.sub(' ', text).strip()
