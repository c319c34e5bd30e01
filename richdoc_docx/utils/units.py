"""
Unit and value normalizers for DOCX export.

Converts loosely-typed values coming from the document model into WordML
native units (half-points for font sizes, twips for lengths) and sanitizes
run text. Every function here is total: it returns either a converted value
or ``None`` and never raises on malformed input.
"""

from __future__ import annotations

import math
import re
from typing import Any, List, Optional

TWIPS_PER_POINT = 20
HALF_POINTS_PER_POINT = 2
LINE_SPACING_UNIT = 240  # w:line value for single spacing

MIN_FONT_SIZE_PT = 1
MAX_FONT_SIZE_PT = 400

ZERO_WIDTH_SPACE = "\u200b"

_HEX6_RE = re.compile(r"^[0-9a-fA-F]{6}$")
_HEX3_RE = re.compile(r"^[0-9a-fA-F]{3}$")
# Control characters XML 1.0 does not allow (tab, LF and CR are allowed)
_XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def is_number(value: Any) -> bool:
    """Return True for real numbers that are not NaN (bools are not numbers)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return int(math.floor(value + 0.5))


def to_number(value: Any) -> float:
    """
    Coerce an arbitrary value to a float the way a JSON producer would.

    Numeric strings are parsed, ``None`` and empty strings become 0,
    everything unparseable becomes NaN.

    Args:
        value: Value to coerce

    Returns:
        Float value (possibly NaN)
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            return float(stripped)
        except ValueError:
            return math.nan
    return math.nan


def coerce_positive_int(value: Any) -> Optional[int]:
    """
    Coerce a footnote identifier to a positive integer.

    Args:
        value: Raw identifier (int, float or numeric string)

    Returns:
        Positive integer, or None when the value is not a finite integer > 0
    """
    if isinstance(value, bool) or value is None:
        return None
    number = to_number(value)
    if not math.isfinite(number) or not number.is_integer() or number <= 0:
        return None
    return int(number)


def normalize_hex_color(value: Any) -> Optional[str]:
    """
    Normalize a hex color to uppercase ``RRGGBB``.

    Accepts 3- or 6-digit hex with or without a leading ``#``; 3-digit
    colors are expanded by doubling each digit.

    Args:
        value: Raw color value

    Returns:
        Six-digit uppercase hex string, or None when unparseable
    """
    if not isinstance(value, str):
        return None
    raw = value.strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if _HEX6_RE.match(raw):
        return raw.upper()
    if _HEX3_RE.match(raw):
        return "".join(ch * 2 for ch in raw).upper()
    return None


def clamp_number(value: Any, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``; non-numbers yield ``minimum``."""
    if not is_number(value):
        return minimum
    return max(minimum, min(maximum, value))


def to_half_points(size_pt: Any) -> Optional[int]:
    """
    Convert a point size to half-points, clamped to 1..400pt.

    Args:
        size_pt: Font size in points

    Returns:
        Size in half-points, or None for non-numeric input
    """
    if not is_number(size_pt):
        return None
    clamped = clamp_number(size_pt, MIN_FONT_SIZE_PT, MAX_FONT_SIZE_PT)
    return round_half_up(clamped * HALF_POINTS_PER_POINT)


def to_twips(points: Any) -> Optional[int]:
    """
    Convert points to twips (1/20 pt).

    Args:
        points: Length in points

    Returns:
        Length in twips, or None for non-numeric or infinite input
    """
    if not is_number(points) or math.isinf(points):
        return None
    return round_half_up(points * TWIPS_PER_POINT)


def line_spacing_to_twips(multiple: float) -> int:
    """Convert a line-spacing multiple (clamped to 0.5..4) to the w:line value."""
    return round_half_up(clamp_number(multiple, 0.5, 4) * LINE_SPACING_UNIT)


def strip_xml_invalid_chars(raw: str) -> str:
    """Remove control characters that cannot appear in an XML 1.0 document."""
    return _XML_INVALID_RE.sub("", raw)


def normalize_run_text(raw: Any) -> str:
    """Strip zero-width spaces and XML-invalid control characters; non-strings become ""."""
    if not isinstance(raw, str):
        return ""
    return strip_xml_invalid_chars(raw.replace(ZERO_WIDTH_SPACE, ""))


def has_visible_text(raw: Any) -> bool:
    """Return True when ``raw`` holds non-whitespace text after sanitization."""
    return bool(normalize_run_text(raw).strip())


def split_run_text(raw: Any) -> List[Optional[str]]:
    """
    Split sanitized run text into pieces with line-break markers.

    The result interleaves text pieces with ``None`` entries standing for an
    explicit line break. Empty pieces are dropped, but the break before them
    is kept, so ``"a\\n\\nb"`` yields ``["a", None, None, "b"]``.

    Args:
        raw: Raw run text

    Returns:
        Ordered list of text pieces and ``None`` break markers
    """
    normalized = normalize_run_text(raw)
    if not normalized:
        return []

    out: List[Optional[str]] = []
    for index, piece in enumerate(normalized.split("\n")):
        if index > 0:
            out.append(None)
        if piece:
            out.append(piece)
    return out
