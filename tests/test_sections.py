"""
Tests for section filtering and document body assembly.
"""

from richdoc_docx.builders.sections import build_document_children, normalize_sections
from richdoc_docx.docx.descriptors import PageBreak, Paragraph, Table

from tests.conftest import table_block, text_paragraph


def _is_page_break(element):
    return isinstance(element, Paragraph) and element.children == [PageBreak()]


class TestNormalizeSections:
    """Test cases for normalize_sections."""

    def test_content_free_sections_elided(self):
        sections = normalize_sections([
            {"blocks": [text_paragraph("keep")]},
            {"blocks": [text_paragraph("   ")]},
            {"blocks": [text_paragraph("\u200b")]},
            {"blocks": []},
            None,
            {"title": "no blocks"},
            {"blocks": [table_block()]},
        ])

        assert len(sections) == 2

    def test_non_list(self):
        assert normalize_sections(None) == []


class TestBuildDocumentChildren:
    """Test cases for build_document_children."""

    def test_page_breaks_between_sections(self):
        sections = normalize_sections([
            {"blocks": [text_paragraph("one")]},
            {"blocks": [text_paragraph("two")]},
            {"blocks": [text_paragraph("three")]},
        ])

        children = build_document_children(sections)

        assert len(children) == 5
        assert [_is_page_break(child) for child in children] == [False, True, False, True, False]
        assert children[4].get_text() == "three"

    def test_block_order_preserved(self):
        sections = normalize_sections([
            {"blocks": [text_paragraph("before"), table_block(["cell"]), text_paragraph("after")]},
        ])

        children = build_document_children(sections)

        assert isinstance(children[1], Table)
        assert [children[0].get_text(), children[2].get_text()] == ["before", "after"]

    def test_whitespace_paragraph_kept_in_contentful_section(self):
        sections = normalize_sections([{"blocks": [text_paragraph("a"), text_paragraph("  ")]}])
        assert len(build_document_children(sections)) == 2

    def test_no_sections_gives_empty_paragraph(self):
        assert build_document_children([]) == [Paragraph.empty()]
