"""Unit conversion helpers for WordprocessingML measurements."""
from __future__ import annotations

TWIPS_PER_POINT = 20
POINTS_PER_INCH = 72
TWIPS_PER_INCH = TWIPS_PER_POINT * POINTS_PER_INCH


def points_to_twips(value: float) -> int:
    """Convert points to twips (1/20th of a point)."""
    return int(round(value * TWIPS_PER_POINT))


def inches_to_twips(value: float) -> int:
    """Convert inches to twips."""
    return int(round(value * TWIPS_PER_INCH))
