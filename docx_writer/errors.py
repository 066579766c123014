"""Exceptions raised while assembling a DOCX package."""
from __future__ import annotations


class DocxWriterError(Exception):
    """Base class for every error raised by the package."""


class ConfigurationError(DocxWriterError, ValueError):
    """An option passed to the document configuration is unknown or invalid."""


class InvalidMediaError(DocxWriterError, ValueError):
    """A media source is not a ``data:<mime>;base64,<payload>`` URI."""

    def __init__(self, source: str) -> None:
        preview = source if len(source) <= 48 else f"{source[:45]}..."
        super().__init__(f"Invalid base64 data URI: {preview!r}")
        self.source = source


class UnsupportedRelationshipKindError(DocxWriterError, ValueError):
    """A document relationship was requested for a kind with no known type URI."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unsupported relationship kind: {kind!r}")
        self.kind = kind


class FragmentRenderError(DocxWriterError):
    """A pre-rendered content fragment could not be parsed as XML."""
