"""
Entry point for running richdoc_docx as a module.

Usage:
    python -m richdoc_docx convert model.json --output document.docx
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main() or 0)
