"""
Utils module for value normalization, color matching and logging.
"""

from .units import (
    clamp_number,
    coerce_positive_int,
    normalize_hex_color,
    normalize_run_text,
    split_run_text,
    strip_xml_invalid_chars,
    to_half_points,
    to_twips,
)
from .color_utils import HIGHLIGHT_PALETTE, map_highlight_color, parse_hex_rgb
from .enums import (
    AlignmentType,
    BreakType,
    HeadingLevel,
    HighlightColor,
    LevelFormat,
    UnderlineType,
    WidthType,
)
from .rich_logger import get_logger, setup_logging

__all__ = [
    "clamp_number",
    "coerce_positive_int",
    "normalize_hex_color",
    "normalize_run_text",
    "split_run_text",
    "strip_xml_invalid_chars",
    "to_half_points",
    "to_twips",
    "HIGHLIGHT_PALETTE",
    "map_highlight_color",
    "parse_hex_rgb",
    "AlignmentType",
    "BreakType",
    "HeadingLevel",
    "HighlightColor",
    "LevelFormat",
    "UnderlineType",
    "WidthType",
    "get_logger",
    "setup_logging",
]
