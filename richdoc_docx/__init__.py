"""
richdoc_docx - export rich document models to DOCX.

Converts the JSON-like document model produced by an editor (sections of
paragraphs, styled runs, lists, tables and footnotes) into a Word
document package.

Quick Start:
    from richdoc_docx import export_docx_sync

    payload = {
        "sections": [
            {"blocks": [{"type": "paragraph", "runs": [{"text": "Hello", "bold": True}]}]}
        ]
    }
    data = export_docx_sync(payload)
"""

from .version import __version__, __version_info__

from .exceptions import (
    RichDocExportError,
    NoExportableContentError,
    PackagingError,
)
from .config import ExportOptions
from .api import (
    build_document,
    build_docx_buffer_from_model,
    export_docx,
    export_docx_sync,
)
from .docx.packer import Packer

__author__ = "AddNap"

__all__ = [
    "__version__",
    "__version_info__",
    "RichDocExportError",
    "NoExportableContentError",
    "PackagingError",
    "ExportOptions",
    "build_document",
    "build_docx_buffer_from_model",
    "export_docx",
    "export_docx_sync",
    "Packer",
]


def main():
    """CLI entry point."""
    from .cli import main as cli_main
    return cli_main()
