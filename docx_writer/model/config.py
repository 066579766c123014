"""Document configuration: page geometry, metadata and default fonts."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Tuple

from docx_writer.errors import ConfigurationError
from docx_writer.utils.text_normalizer import TextNormalizer
from docx_writer.utils.units import inches_to_twips

ORIENTATIONS = ("portrait", "landscape")
HEADER_TYPES = ("default", "even", "first")

LETTER_SHORT_EDGE = inches_to_twips(8.5)
LETTER_LONG_EDGE = inches_to_twips(11)

DEFAULT_CREATOR = "html-to-docx"
DEFAULT_FONT = "Times New Roman"
DEFAULT_FONT_SIZE = 22
DEFAULT_COMPLEX_SCRIPT_FONT_SIZE = 22


@dataclass(frozen=True)
class PageMargins:
    """Page margins in twips."""

    top: int
    right: int
    bottom: int
    left: int
    header: int = 720
    footer: int = 720
    gutter: int = 0

    def merged(self, overrides: Optional[Mapping[str, Any]]) -> "PageMargins":
        """Return a copy with the non-empty ``overrides`` applied field by field."""
        if not overrides:
            return self
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigurationError(f"Unknown margin fields: {', '.join(sorted(unknown))}")
        values = {key: int(value) for key, value in overrides.items() if value is not None}
        return replace(self, **values)


PORTRAIT_MARGINS = PageMargins(top=1440, right=1800, bottom=1440, left=1800)
LANDSCAPE_MARGINS = PageMargins(top=1800, right=1440, bottom=1800, left=1440)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DocumentMetadata:
    """Values written to ``docProps/core.xml``."""

    title: str = ""
    subject: str = ""
    creator: str = DEFAULT_CREATOR
    keywords: Tuple[str, ...] = (DEFAULT_CREATOR,)
    description: str = ""
    last_modified_by: str = DEFAULT_CREATOR
    revision: int = 1
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        now = _utc_now()
        if self.created_at is None:
            object.__setattr__(self, "created_at", now)
        if self.modified_at is None:
            object.__setattr__(self, "modified_at", now)

    def normalized(self) -> "DocumentMetadata":
        """Return a copy whose text fields only hold XML-safe characters.

        Keywords additionally have their whitespace collapsed and trimmed.
        """
        normalizer = TextNormalizer()
        keyword_normalizer = TextNormalizer(preserve_whitespace=False)
        return replace(
            self,
            title=normalizer.normalize_text(self.title),
            subject=normalizer.normalize_text(self.subject),
            creator=normalizer.normalize_text(self.creator),
            keywords=keyword_normalizer.normalize_many(self.keywords),
            description=normalizer.normalize_text(self.description),
            last_modified_by=normalizer.normalize_text(self.last_modified_by),
        )


@dataclass(frozen=True)
class DocumentConfig:
    """Immutable settings for one conversion.

    Page size follows ``orientation``; margins default to the preset of that
    orientation. Font sizes are expressed in half-points, as ``w:sz`` expects.
    """

    orientation: str = "portrait"
    margins: Optional[PageMargins] = None
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    header: bool = False
    header_type: str = "default"
    font: str = DEFAULT_FONT
    font_size: int = DEFAULT_FONT_SIZE
    complex_script_font_size: int = DEFAULT_COMPLEX_SCRIPT_FONT_SIZE
    strict_relationships: bool = True

    def __post_init__(self) -> None:
        if self.orientation not in ORIENTATIONS:
            raise ConfigurationError(f"Unknown orientation: {self.orientation!r}")
        if self.header_type not in HEADER_TYPES:
            raise ConfigurationError(f"Unknown header type: {self.header_type!r}")
        if self.margins is None:
            object.__setattr__(self, "margins", self.default_margins)
        object.__setattr__(self, "metadata", self.metadata.normalized())

    @property
    def is_landscape(self) -> bool:
        return self.orientation == "landscape"

    @property
    def page_width(self) -> int:
        return LETTER_LONG_EDGE if self.is_landscape else LETTER_SHORT_EDGE

    @property
    def page_height(self) -> int:
        return LETTER_SHORT_EDGE if self.is_landscape else LETTER_LONG_EDGE

    @property
    def default_margins(self) -> PageMargins:
        return LANDSCAPE_MARGINS if self.is_landscape else PORTRAIT_MARGINS

    @property
    def available_document_space(self) -> int:
        """Width left for content between the left and right margins, in twips."""
        return self.page_width - self.margins.left - self.margins.right

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "DocumentConfig":
        """Build a configuration from loose conversion options.

        Accepts snake_case names as well as the camelCase names used by
        HTML-to-DOCX converters (``lastModifiedBy``, ``headerType``,
        ``fontSize``...). ``None`` values are treated as absent so callers can
        forward optional arguments unchanged.
        """
        resolved: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            if value is None:
                continue
            name = _OPTION_ALIASES.get(key, key)
            if name not in _CONFIG_OPTIONS and name not in _METADATA_OPTIONS:
                raise ConfigurationError(f"Unknown document option: {key!r}")
            resolved[name] = value

        metadata_values = {name: resolved.pop(name) for name in list(resolved) if name in _METADATA_OPTIONS}
        if "keywords" in metadata_values:
            metadata_values["keywords"] = _as_keywords(metadata_values["keywords"])
        if "revision" in metadata_values:
            metadata_values["revision"] = int(metadata_values["revision"])

        orientation = resolved.get("orientation", "portrait")
        margins = resolved.pop("margins", None)
        if isinstance(margins, Mapping):
            preset = LANDSCAPE_MARGINS if orientation == "landscape" else PORTRAIT_MARGINS
            margins = preset.merged(margins)
        if margins is not None:
            resolved["margins"] = margins

        return cls(metadata=DocumentMetadata(**metadata_values), **resolved)


def _as_keywords(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(item) for item in value)


_CONFIG_OPTIONS = frozenset(f.name for f in fields(DocumentConfig)) - {"metadata"}
_METADATA_OPTIONS = frozenset(f.name for f in fields(DocumentMetadata))
_OPTION_ALIASES = {
    "lastModifiedBy": "last_modified_by",
    "createdAt": "created_at",
    "modifiedAt": "modified_at",
    "headerType": "header_type",
    "fontSize": "font_size",
    "complexScriptFontSize": "complex_script_font_size",
    "strictRelationships": "strict_relationships",
}
