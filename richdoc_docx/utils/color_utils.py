"""Color utilities: hex parsing and nearest highlight color matching."""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from .enums import HighlightColor
from .units import normalize_hex_color

RGB = Tuple[int, int, int]

# Declaration order is the tie-break order for equidistant colors.
HIGHLIGHT_PALETTE: Sequence[Tuple[HighlightColor, str]] = (
    (HighlightColor.YELLOW, "FFFF00"),
    (HighlightColor.GREEN, "00FF00"),
    (HighlightColor.CYAN, "00FFFF"),
    (HighlightColor.MAGENTA, "FF00FF"),
    (HighlightColor.BLUE, "0000FF"),
    (HighlightColor.RED, "FF0000"),
    (HighlightColor.DARK_YELLOW, "808000"),
    (HighlightColor.DARK_GREEN, "008000"),
    (HighlightColor.DARK_CYAN, "008080"),
    (HighlightColor.DARK_MAGENTA, "800080"),
    (HighlightColor.DARK_BLUE, "000080"),
    (HighlightColor.DARK_RED, "800000"),
    (HighlightColor.DARK_GRAY, "404040"),
    (HighlightColor.LIGHT_GRAY, "C0C0C0"),
    (HighlightColor.BLACK, "000000"),
    (HighlightColor.WHITE, "FFFFFF"),
)


def parse_hex_rgb(value: Any) -> Optional[RGB]:
    """Convert a hex color to an ``(r, g, b)`` tuple, or None when invalid."""
    normalized = normalize_hex_color(value)
    if not normalized:
        return None
    return tuple(int(normalized[i:i + 2], 16) for i in (0, 2, 4))


def color_distance(first: RGB, second: RGB) -> int:
    """Squared euclidean distance between two RGB colors."""
    return sum((a - b) * (a - b) for a, b in zip(first, second))


def map_highlight_color(value: Any) -> Optional[HighlightColor]:
    """
    Map an arbitrary hex color to the nearest Word highlight color.

    Args:
        value: Hex color (``#RGB``, ``RRGGBB``...)

    Returns:
        Closest palette entry (first declared wins ties), or None when the
        color cannot be parsed
    """
    rgb = parse_hex_rgb(value)
    if rgb is None:
        return None

    best: Optional[HighlightColor] = None
    best_distance = None
    for key, hex_value in HIGHLIGHT_PALETTE:
        distance = color_distance(rgb, parse_hex_rgb(hex_value))
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best = key
    return best
