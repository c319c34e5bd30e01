"""
Tests for export options and exceptions.
"""

import pytest

from richdoc_docx.config import ExportOptions
from richdoc_docx.exceptions import NoExportableContentError, PackagingError, RichDocExportError


class TestExportOptions:
    """Test cases for ExportOptions."""

    def test_defaults(self):
        options = ExportOptions()

        assert options.title is None
        assert options.creator == "richdoc_docx"
        assert (options.page_width, options.page_height, options.margin) == (11906, 16838, 1440)
        assert options.text_width == 9026
        assert options.compression is True

    def test_from_dict_ignores_unknown_keys(self):
        options = ExportOptions.from_dict({"title": "T", "margin": 720, "colour": "red"})

        assert options.title == "T"
        assert options.margin == 720

    def test_from_none(self):
        assert ExportOptions.from_dict(None).margin == 1440

    @pytest.mark.parametrize("kwargs", [
        {"page_width": 0},
        {"page_height": -1},
        {"margin": -1},
        {"margin": 6000},
    ])
    def test_invalid_geometry(self, kwargs):
        with pytest.raises(ValueError):
            ExportOptions(**kwargs)

    def test_repr(self):
        assert "title='T'" in repr(ExportOptions(title="T"))


class TestExceptions:
    """Test cases for exception types."""

    def test_hierarchy(self):
        assert issubclass(NoExportableContentError, RichDocExportError)
        assert issubclass(PackagingError, RichDocExportError)

    def test_str_with_details(self):
        error = PackagingError("Failed to serialize DOCX package", details="boom")
        assert str(error) == "Failed to serialize DOCX package: boom"

    def test_default_message(self):
        assert str(NoExportableContentError()) == "No section content available to export."
