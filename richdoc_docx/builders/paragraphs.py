"""
Paragraph builder: heading, alignment, spacing, indentation and list membership.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from ..docx.descriptors import IndentSpec, NumberingRef, Paragraph, SpacingSpec, TextRun
from ..models.document_model import ParagraphBlock, parse_paragraph
from ..utils.enums import AlignmentType, HeadingLevel
from ..utils.units import clamp_number, is_number, line_spacing_to_twips, to_number, to_twips
from .runs import build_runs

logger = logging.getLogger(__name__)

HEADING_MAP: Mapping[str, HeadingLevel] = {
    "heading1": HeadingLevel.HEADING_1,
    "heading2": HeadingLevel.HEADING_2,
    "heading3": HeadingLevel.HEADING_3,
    "heading4": HeadingLevel.HEADING_4,
}

ALIGNMENT_MAP: Mapping[str, AlignmentType] = {
    "left": AlignmentType.LEFT,
    "center": AlignmentType.CENTER,
    "right": AlignmentType.RIGHT,
    "justify": AlignmentType.JUSTIFIED,
}

BULLET_REFERENCE = "parallel-bullet"
NUMBER_REFERENCE = "parallel-number"

LIST_REFERENCES: Mapping[str, str] = {
    "bullet": BULLET_REFERENCE,
    "number": NUMBER_REFERENCE,
}

MAX_LIST_LEVEL = 8


def _lookup(table: Mapping[str, Any], key: Any) -> Optional[Any]:
    if not isinstance(key, str):
        return None
    return table.get(key.lower())


def resolve_heading(value: Any) -> Optional[HeadingLevel]:
    return _lookup(HEADING_MAP, value)


def resolve_alignment(value: Any) -> Optional[AlignmentType]:
    return _lookup(ALIGNMENT_MAP, value)


def resolve_spacing(line_spacing: Any) -> Optional[SpacingSpec]:
    """Line spacing multiple -> w:spacing, omitted when no number is given."""
    if not is_number(line_spacing):
        return None
    return SpacingSpec(line=line_spacing_to_twips(line_spacing))


def resolve_indent(indent_left_pt: Any, indent_first_pt: Any) -> Optional[IndentSpec]:
    """
    Convert point indents to twips.

    Args:
        indent_left_pt: Left indent in points (negative results clamp to 0)
        indent_first_pt: First-line indent in points

    Returns:
        IndentSpec, or None when neither indent is given
    """
    indent = IndentSpec()
    has_indent = False

    if is_number(indent_left_pt):
        indent.left = max(0, to_twips(indent_left_pt) or 0)
        has_indent = True
    if is_number(indent_first_pt):
        indent.first_line = to_twips(indent_first_pt) or 0
        has_indent = True

    return indent if has_indent else None


def resolve_numbering(block: ParagraphBlock) -> Optional[NumberingRef]:
    """Map list membership to one of the two fixed numbering schemes."""
    list_spec = block.list_spec
    if list_spec is None:
        return None

    list_type = "" if list_spec.type is None else str(list_spec.type).lower()
    reference = LIST_REFERENCES.get(list_type)
    if reference is None:
        if list_type:
            logger.debug(f"Ignoring unsupported list type: {list_spec.type!r}")
        return None

    level = clamp_number(to_number(list_spec.level or 0), 0, MAX_LIST_LEVEL)
    return NumberingRef(reference=reference, level=int(math.floor(level)))


def build_paragraph(block: Any) -> Paragraph:
    """
    Build one output paragraph from a paragraph block.

    Args:
        block: ParagraphBlock, or a raw paragraph mapping

    Returns:
        Paragraph with at least one child run
    """
    if not isinstance(block, ParagraphBlock):
        block = parse_paragraph(block if isinstance(block, Mapping) else {})

    runs = build_runs(block.runs)
    return Paragraph(
        children=runs if runs else [TextRun("")],
        heading=resolve_heading(block.heading),
        alignment=resolve_alignment(block.alignment),
        spacing=resolve_spacing(block.line_spacing),
        indent=resolve_indent(block.indent_left_pt, block.indent_first_pt),
        numbering=resolve_numbering(block),
    )
