"""
Run builder: turns document-model runs into output runs.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

from ..docx.descriptors import FootnoteReferenceRun, InlineItem, TextRun
from ..models.document_model import FootnoteRefRun, TextRun as ModelTextRun, parse_run
from ..utils.color_utils import map_highlight_color
from ..utils.enums import UnderlineType
from ..utils.units import (
    coerce_positive_int,
    normalize_hex_color,
    split_run_text,
    strip_xml_invalid_chars,
    to_half_points,
    to_number,
)

logger = logging.getLogger(__name__)


def build_run_style(run: ModelTextRun) -> Dict[str, Any]:
    """
    Build character formatting keyword arguments for a text run.

    Args:
        run: Model text run

    Returns:
        Keyword arguments for :class:`TextRun` (only set attributes)
    """
    style: Dict[str, Any] = {}

    if run.bold:
        style["bold"] = True
    if run.italic:
        style["italics"] = True
    if run.underline:
        style["underline"] = UnderlineType.SINGLE
    if run.strike:
        style["strike"] = True
    if run.subscript:
        style["sub_script"] = True
    if run.superscript:
        style["super_script"] = True

    color = normalize_hex_color(run.color)
    if color:
        style["color"] = color

    highlight = map_highlight_color(run.highlight)
    if highlight:
        style["highlight"] = highlight

    if isinstance(run.font, str) and run.font.strip():
        style["font"] = strip_xml_invalid_chars(run.font.strip())

    half_points = to_half_points(run.size_pt)
    if half_points:
        style["size"] = half_points

    return style


def explicit_break_count(value: Any) -> int:
    """Number of explicit line breaks requested by ``breaks``."""
    number = to_number(value)
    if not math.isfinite(number) or number <= 0:
        return 0
    return int(math.floor(number))


def build_runs(runs: Any) -> List[InlineItem]:
    """
    Convert model runs to output runs.

    Footnote references with an invalid id are skipped. Explicit breaks are
    emitted before the run's text; embedded newlines become line breaks
    between text pieces.

    Args:
        runs: Parsed runs, or the raw run list from the payload

    Returns:
        Flat list of output runs (possibly empty)
    """
    if not isinstance(runs, list):
        return []
    runs = [
        run if isinstance(run, (ModelTextRun, FootnoteRefRun)) else parse_run(run)
        for run in runs
    ]

    out: List[InlineItem] = []
    for run in runs:
        if isinstance(run, FootnoteRefRun):
            note_id = coerce_positive_int(run.footnote_ref)
            if note_id is None:
                logger.debug(f"Skipping footnote reference with invalid id: {run.footnote_ref!r}")
                continue
            out.append(FootnoteReferenceRun(note_id))
            continue

        style = build_run_style(run)

        for _ in range(explicit_break_count(run.breaks)):
            out.append(TextRun.line_break())

        for piece in split_run_text(run.text):
            if piece is None:
                out.append(TextRun.line_break())
            else:
                out.append(TextRun(text=piece, **style))

    return out
