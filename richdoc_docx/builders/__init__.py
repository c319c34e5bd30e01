"""
Builders translating the input document model into output descriptors.
"""

from .runs import build_runs
from .paragraphs import build_paragraph
from .tables import build_table
from .footnotes import build_footnotes_map
from .sections import build_document_children, normalize_sections
from .numbering import build_numbering_config

__all__ = [
    "build_runs",
    "build_paragraph",
    "build_table",
    "build_footnotes_map",
    "build_document_children",
    "normalize_sections",
    "build_numbering_config",
]
