"""
Footnote map builder.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..docx.descriptors import Footnote, Paragraph, TextRun
from ..models.document_model import FootnoteRecord, parse_footnote
from ..utils.units import coerce_positive_int, strip_xml_invalid_chars

logger = logging.getLogger(__name__)


def build_footnote_paragraphs(text: Any) -> List[Paragraph]:
    """One unstyled paragraph per line of ``text``."""
    raw = str(text) if text else ""
    raw = strip_xml_invalid_chars(raw.replace("\r", ""))
    return [Paragraph(children=[TextRun(line)]) for line in raw.split("\n")]


def build_footnotes_map(footnotes: Any) -> Dict[str, Footnote]:
    """
    Build the footnote lookup keyed by decimal id.

    Records whose id is not a positive integer are skipped; a later record
    with the same id replaces the earlier one.

    Args:
        footnotes: Footnote records (or raw footnote mappings)

    Returns:
        Mapping of id string to Footnote (possibly empty)
    """
    if not isinstance(footnotes, list):
        return {}

    out: Dict[str, Footnote] = {}
    for record in footnotes:
        if not isinstance(record, FootnoteRecord):
            record = parse_footnote(record)

        note_id = coerce_positive_int(record.id)
        if note_id is None:
            logger.debug(f"Skipping footnote with invalid id: {record.id!r}")
            continue

        key = str(note_id)
        if key in out:
            logger.debug(f"Footnote {key} defined more than once, keeping the last one")
        out[key] = Footnote(children=build_footnote_paragraphs(record.text))

    return out
