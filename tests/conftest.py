"""
Pytest configuration for richdoc_docx
"""

import io
import logging
import sys
import zipfile

import pytest

# Modules that go through the real packer end to end
INTEGRATION_MODULES = ("test_api", "test_cli", "test_packer")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: pure builder and normalizer tests")
    config.addinivalue_line("markers", "integration: tests that write and read DOCX packages")


def pytest_collection_modifyitems(config, items):
    """Mark every test as unit or integration by module."""
    for item in items:
        if item.module.__name__.rsplit(".", 1)[-1] in INTEGRATION_MODULES:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler leakage between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


def text_paragraph(*texts, **attrs):
    """Paragraph block with one plain run per text."""
    block = {"type": "paragraph", "runs": [{"text": text} for text in texts]}
    block.update(attrs)
    return block


def table_block(*rows):
    """Table block; each row is a list of cell texts (None for an empty cell)."""
    return {
        "type": "table",
        "rows": [
            {"cells": [
                {"blocks": [] if text is None else [text_paragraph(text)]}
                for text in row
            ]}
            for row in rows
        ],
    }


@pytest.fixture
def simple_payload():
    """Payload with one section holding a single paragraph."""
    return {"sections": [{"blocks": [text_paragraph("Hello world")]}]}


@pytest.fixture
def rich_payload():
    """Payload exercising headings, lists, tables, footnotes and sections."""
    return {
        "sections": [
            {"blocks": [
                text_paragraph("Title", heading="heading1", alignment="center"),
                {
                    "type": "paragraph",
                    "runs": [
                        {"text": "Bold ", "bold": True, "color": "#c00"},
                        {"text": "marked", "highlight": "#ffff33", "sizePt": 14},
                        {"footnoteRef": 1},
                    ],
                    "lineSpacing": 1.5,
                    "indentLeftPt": 18,
                    "indentFirstPt": -9,
                },
                text_paragraph("First item", list={"type": "bullet", "level": 0}),
                text_paragraph("Second item", list={"type": "number", "level": 1}),
            ]},
            {"blocks": [text_paragraph("   ")]},
            {"blocks": [table_block(["a", "b"], ["c"])]},
        ],
        "footnotes": [
            {"id": 1, "text": "First note\r\nsecond line"},
        ],
    }


def read_package(data: bytes):
    """Open DOCX bytes and return {part name: bytes}."""
    with zipfile.ZipFile(io.BytesIO(data)) as zip_file:
        return {name: zip_file.read(name) for name in zip_file.namelist()}


@pytest.fixture
def open_package():
    return read_package
