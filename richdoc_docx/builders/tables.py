"""
Table builder: rows of cells holding paragraphs, evenly split column widths.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from ..docx.descriptors import Paragraph, Table, TableCell, TableRow, WidthSpec
from ..models.document_model import TableBlock, TableCell as ModelTableCell, parse_table
from ..utils.enums import WidthType
from .paragraphs import build_paragraph

logger = logging.getLogger(__name__)


def build_cell_paragraphs(cell: ModelTableCell) -> List[Paragraph]:
    """Paragraphs of one cell; an empty cell gets one empty paragraph."""
    paragraphs = [build_paragraph(block) for block in cell.blocks]
    if not paragraphs:
        paragraphs.append(Paragraph.empty())
    return paragraphs


def cell_width_percent(cell_count: int) -> float:
    """Width of each cell in a row with ``cell_count`` cells, in percent."""
    return 100 / max(1, cell_count)


def build_table(block: Any) -> Table:
    """
    Build an output table.

    Each row spreads its cells evenly over the full width on its own, so
    rows with different cell counts get different widths. Rows without cells
    are dropped and a table left without rows gets a single empty cell.

    Args:
        block: TableBlock, or a raw table mapping

    Returns:
        Table with at least one row
    """
    if not isinstance(block, TableBlock):
        block = parse_table(block if isinstance(block, Mapping) else {})

    rows: List[TableRow] = []
    for row in block.rows:
        if not row.cells:
            logger.debug("Dropping table row without cells")
            continue
        width = cell_width_percent(len(row.cells))
        rows.append(TableRow(children=[
            TableCell(
                children=build_cell_paragraphs(cell),
                width=WidthSpec(width, WidthType.PERCENTAGE),
            )
            for cell in row.cells
        ]))

    if not rows:
        rows.append(TableRow(children=[TableCell(children=[Paragraph.empty()])]))

    return Table(rows=rows, width=WidthSpec(100, WidthType.PERCENTAGE))
