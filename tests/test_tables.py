"""
Tests for the table builder.
"""

from richdoc_docx.builders.tables import build_table, cell_width_percent
from richdoc_docx.docx.descriptors import Paragraph, Table
from richdoc_docx.utils.enums import WidthType

from tests.conftest import table_block


def test_cell_width_percent():
    assert cell_width_percent(4) == 25
    assert cell_width_percent(0) == 100


class TestBuildTable:
    """Test cases for build_table."""

    def test_widths_per_row(self):
        """Test every row spreads its own cells over the full width."""
        table = build_table(table_block(["a", "b"], ["c"]))

        assert isinstance(table, Table)
        assert table.width.size == 100
        assert table.width.type == WidthType.PERCENTAGE
        assert [cell.width.size for cell in table.rows[0].children] == [50, 50]
        assert [cell.width.size for cell in table.rows[1].children] == [100]
        assert table.column_count == 2

    def test_cell_text(self):
        table = build_table(table_block(["a", "b"]))
        assert [cell.children[0].get_text() for cell in table.rows[0].children] == ["a", "b"]

    def test_empty_cell_gets_empty_paragraph(self):
        table = build_table(table_block([None]))
        assert table.rows[0].children[0].children == [Paragraph.empty()]

    def test_rows_without_cells_dropped(self):
        table = build_table({"type": "table", "rows": [{"cells": []}, {"cells": [{"blocks": []}]}]})
        assert len(table.rows) == 1

    def test_empty_table_placeholder(self):
        table = build_table(table_block())

        assert len(table.rows) == 1
        assert len(table.rows[0].children) == 1
        assert table.rows[0].children[0].children == [Paragraph.empty()]

    def test_nested_table_dropped(self):
        raw = table_block(["outer"])
        raw["rows"][0]["cells"][0]["blocks"].append(table_block(["inner"]))

        table = build_table(raw)

        cell = table.rows[0].children[0]
        assert len(cell.children) == 1
        assert cell.children[0].get_text() == "outer"
