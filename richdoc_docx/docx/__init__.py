"""
DOCX output: document descriptors, WordML writer and package writer.
"""

from .descriptors import (
    DocumentSection,
    DocxDocument,
    Footnote,
    FootnoteReferenceRun,
    IndentSpec,
    NumberingLevel,
    NumberingRef,
    NumberingScheme,
    PageBreak,
    Paragraph,
    SpacingSpec,
    Table,
    TableCell,
    TableRow,
    TextRun,
    WidthSpec,
)
from .packer import Packer
from .wordml import WordMLWriter

__all__ = [
    "DocumentSection",
    "DocxDocument",
    "Footnote",
    "FootnoteReferenceRun",
    "IndentSpec",
    "NumberingLevel",
    "NumberingRef",
    "NumberingScheme",
    "PageBreak",
    "Paragraph",
    "SpacingSpec",
    "Table",
    "TableCell",
    "TableRow",
    "TextRun",
    "WidthSpec",
    "Packer",
    "WordMLWriter",
]
