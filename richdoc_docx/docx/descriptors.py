"""

Output document descriptors handed to the DOCX packer.

Write-once structures describing what goes into the WordML package:
paragraphs and their runs, tables, footnotes and numbering schemes. They
carry WordML values (half-points, twips, enum codes) but no XML; the
packer is the only component that knows the markup.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..utils.enums import (
    AlignmentType,
    HeadingLevel,
    HighlightColor,
    LevelFormat,
    UnderlineType,
    WidthType,
)

###############################################################################
# Inline items
###############################################################################


@dataclass(slots=True)
class TextRun:
    """

    Text run with character formatting.

    A run with ``break_before`` > 0 and no text is a pure line break.

    """

    text: str = ""
    bold: bool = False
    italics: bool = False
    underline: Optional[UnderlineType] = None
    strike: bool = False
    sub_script: bool = False
    super_script: bool = False
    color: Optional[str] = None
    highlight: Optional[HighlightColor] = None
    font: Optional[str] = None
    size: Optional[int] = None
    break_before: int = 0

    @classmethod
    def line_break(cls) -> "TextRun":
        return cls(break_before=1)

    @property
    def is_break(self) -> bool:
        return self.break_before > 0 and not self.text


@dataclass(slots=True)
class FootnoteReferenceRun:
    footnote_id: int


@dataclass(slots=True)
class PageBreak:
    """Hard page break run."""


InlineItem = Union[TextRun, FootnoteReferenceRun, PageBreak]

###############################################################################
# Paragraphs
###############################################################################


@dataclass(slots=True)
class SpacingSpec:
    line: Optional[int] = None


@dataclass(slots=True)
class IndentSpec:
    left: Optional[int] = None
    first_line: Optional[int] = None
    hanging: Optional[int] = None


@dataclass(slots=True)
class NumberingRef:
    reference: str
    level: int = 0


@dataclass(slots=True)
class Paragraph:
    children: List[InlineItem] = field(default_factory=list)
    heading: Optional[HeadingLevel] = None
    alignment: Optional[AlignmentType] = None
    spacing: Optional[SpacingSpec] = None
    indent: Optional[IndentSpec] = None
    numbering: Optional[NumberingRef] = None
    style: Optional[str] = None

    @classmethod
    def empty(cls) -> "Paragraph":
        """Paragraph holding a single empty run."""
        return cls(children=[TextRun("")])

    @classmethod
    def page_break(cls) -> "Paragraph":
        return cls(children=[PageBreak()])

    def get_text(self) -> str:
        return "".join(child.text for child in self.children if isinstance(child, TextRun))

###############################################################################
# Tables
###############################################################################


@dataclass(slots=True)
class WidthSpec:
    size: float
    type: WidthType = WidthType.PERCENTAGE


@dataclass(slots=True)
class TableCell:
    children: List[Paragraph] = field(default_factory=list)
    width: Optional[WidthSpec] = None


@dataclass(slots=True)
class TableRow:
    children: List[TableCell] = field(default_factory=list)


@dataclass(slots=True)
class Table:
    rows: List[TableRow] = field(default_factory=list)
    width: WidthSpec = field(default_factory=lambda: WidthSpec(100))

    @property
    def column_count(self) -> int:
        return max((len(row.children) for row in self.rows), default=0)


BodyElement = Union[Paragraph, Table]

###############################################################################
# Footnotes and numbering
###############################################################################


@dataclass(slots=True)
class Footnote:
    children: List[Paragraph] = field(default_factory=list)


@dataclass(slots=True)
class NumberingLevel:
    level: int
    format: LevelFormat
    text: str
    alignment: AlignmentType = AlignmentType.LEFT
    indent: IndentSpec = field(default_factory=IndentSpec)
    start: int = 1


@dataclass(slots=True)
class NumberingScheme:
    reference: str
    levels: List[NumberingLevel] = field(default_factory=list)

###############################################################################
# Document
###############################################################################


@dataclass(slots=True)
class DocumentSection:
    children: List[BodyElement] = field(default_factory=list)


@dataclass(slots=True)
class DocxDocument:
    """Complete description of one output document."""

    sections: List[DocumentSection] = field(default_factory=list)
    numbering: List[NumberingScheme] = field(default_factory=list)
    footnotes: Optional[Dict[str, Footnote]] = None
    title: Optional[str] = None
    creator: Optional[str] = None

    def iter_body(self):
        for section in self.sections:
            yield from section.children
