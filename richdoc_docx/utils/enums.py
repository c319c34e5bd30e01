"""Enumerations mapping document-model keywords to WordML values."""

from __future__ import annotations

from enum import Enum


class AlignmentType(str, Enum):
    """Paragraph justification values (``w:jc``)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFIED = "both"


class HeadingLevel(str, Enum):
    """Built-in heading paragraph style ids (``w:pStyle``)."""

    HEADING_1 = "Heading1"
    HEADING_2 = "Heading2"
    HEADING_3 = "Heading3"
    HEADING_4 = "Heading4"


class HighlightColor(str, Enum):
    """Highlight palette supported by Word (``w:highlight``)."""

    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"
    BLUE = "blue"
    RED = "red"
    DARK_YELLOW = "darkYellow"
    DARK_GREEN = "darkGreen"
    DARK_CYAN = "darkCyan"
    DARK_MAGENTA = "darkMagenta"
    DARK_BLUE = "darkBlue"
    DARK_RED = "darkRed"
    DARK_GRAY = "darkGray"
    LIGHT_GRAY = "lightGray"
    BLACK = "black"
    WHITE = "white"


class LevelFormat(str, Enum):
    """List level number formats (``w:numFmt``)."""

    BULLET = "bullet"
    DECIMAL = "decimal"


class UnderlineType(str, Enum):
    """Underline styles (``w:u``)."""

    SINGLE = "single"


class WidthType(str, Enum):
    """Table and cell width units (``w:type``)."""

    AUTO = "auto"
    DXA = "dxa"
    PERCENTAGE = "pct"


class BreakType(str, Enum):
    """Break kinds emitted inside runs."""

    LINE = "line"
    PAGE = "page"
