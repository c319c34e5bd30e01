"""
Section assembler: drops content-free sections and flattens the rest into
one document body separated by page breaks.
"""

from __future__ import annotations

import logging
from typing import Any, List

from ..docx.descriptors import BodyElement, Paragraph
from ..models.document_model import ParagraphBlock, Section, TableBlock, parse_section
from .paragraphs import build_paragraph
from .tables import build_table

logger = logging.getLogger(__name__)


def normalize_sections(raw_sections: Any) -> List[Section]:
    """
    Keep the sections that have exportable content, in original order.

    Args:
        raw_sections: Parsed sections (None entries allowed) or raw section mappings

    Returns:
        Contentful sections
    """
    if not isinstance(raw_sections, list):
        return []

    sections: List[Section] = []
    for index, raw in enumerate(raw_sections):
        section = raw if isinstance(raw, Section) else parse_section(raw)
        if section is None:
            logger.debug(f"Skipping section {index}: missing block list")
            continue
        if not section.has_content():
            logger.debug(f"Skipping section {index}: no exportable content")
            continue
        sections.append(section)
    return sections


def build_section_elements(section: Section) -> List[BodyElement]:
    """Body elements of one section, blocks in original order."""
    elements: List[BodyElement] = []
    for block in section.blocks:
        if isinstance(block, ParagraphBlock):
            elements.append(build_paragraph(block))
        elif isinstance(block, TableBlock):
            elements.append(build_table(block))
    return elements


def build_document_children(sections: List[Section]) -> List[BodyElement]:
    """
    Flatten sections into the document body.

    A page-break paragraph separates consecutive sections. The body is never
    empty: a single empty paragraph is used when nothing else is produced.

    Args:
        sections: Contentful sections

    Returns:
        Ordered body elements
    """
    children: List[BodyElement] = []
    for index, section in enumerate(sections):
        if index > 0:
            children.append(Paragraph.page_break())
        children.extend(build_section_elements(section))

    if not children:
        children.append(Paragraph.empty())
    return children
