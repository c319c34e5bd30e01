"""
Input document model (sections, blocks, runs, footnotes).
"""

from .document_model import (
    Block,
    DocumentModel,
    FootnoteRecord,
    FootnoteRefRun,
    ListSpec,
    ParagraphBlock,
    Run,
    Section,
    TableBlock,
    TableCell,
    TableRow,
    TextRun,
    parse_block,
    parse_run,
    parse_runs,
    parse_section,
)

__all__ = [
    "Block",
    "DocumentModel",
    "FootnoteRecord",
    "FootnoteRefRun",
    "ListSpec",
    "ParagraphBlock",
    "Run",
    "Section",
    "TableBlock",
    "TableCell",
    "TableRow",
    "TextRun",
    "parse_block",
    "parse_run",
    "parse_runs",
    "parse_section",
]
