"""
Tests for the command-line interface.
"""

import json

import pytest

from richdoc_docx import __version__
from richdoc_docx.cli import create_parser, main


@pytest.fixture
def model_file(tmp_path, rich_payload):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(rich_payload), encoding="utf-8")
    return path


class TestCli:
    """Test cases for the CLI."""

    def test_parser_defaults(self):
        args = create_parser().parse_args(["convert", "in.json"])

        assert args.command == "convert"
        assert args.output is None
        assert args.log_level == "WARNING"

    def test_convert_default_output(self, model_file, open_package, capsys):
        assert main(["--no-rich", "convert", str(model_file)]) == 0

        output = model_file.with_suffix(".docx")
        assert output.exists()
        assert "word/footnotes.xml" in open_package(output.read_bytes())
        assert "Saved:" in capsys.readouterr().out

    def test_convert_with_options(self, model_file, tmp_path, open_package):
        output = tmp_path / "out" / "report.docx"

        code = main(["--no-rich", "convert", str(model_file), "-o", str(output),
                     "--title", "Report", "--creator", "Ann"])

        assert code == 0
        core = open_package(output.read_bytes())["docProps/core.xml"]
        assert b"Report" in core
        assert b"Ann" in core

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--no-rich", "convert", str(tmp_path / "missing.json")]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        assert main(["--no-rich", "convert", str(path)]) == 1
        assert "Cannot read document model" in capsys.readouterr().err

    def test_no_content(self, tmp_path, capsys):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"sections": []}), encoding="utf-8")

        assert main(["--no-rich", "convert", str(path)]) == 1
        assert "No section content available to export." in capsys.readouterr().err
        assert not path.with_suffix(".docx").exists()

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out
