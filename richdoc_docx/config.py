"""
Export options for DOCX generation.
"""

from typing import Any, Dict, Optional

# A4 portrait with 1 inch margins, in twips
DEFAULT_PAGE_WIDTH = 11906
DEFAULT_PAGE_HEIGHT = 16838
DEFAULT_MARGIN = 1440
DEFAULT_CREATOR = "richdoc_docx"


class ExportOptions:
    """Document-level options that are not part of the document model."""

    def __init__(
        self,
        title: Optional[str] = None,
        creator: str = DEFAULT_CREATOR,
        page_width: int = DEFAULT_PAGE_WIDTH,
        page_height: int = DEFAULT_PAGE_HEIGHT,
        margin: int = DEFAULT_MARGIN,
        compression: bool = True,
    ):
        """
        Initializes export options.

        Args:
            title: Document title written to core properties
            creator: Author written to core properties
            page_width: Page width in twips
            page_height: Page height in twips
            margin: Page margin on all sides in twips
            compression: Whether to deflate ZIP entries
        """
        if page_width <= 0 or page_height <= 0:
            raise ValueError("Page dimensions must be positive")
        if margin < 0 or 2 * margin >= min(page_width, page_height):
            raise ValueError(f"Invalid page margin: {margin}")

        self.title = title
        self.creator = creator
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.compression = compression

    @property
    def text_width(self) -> int:
        """Usable text width in twips."""
        return self.page_width - 2 * self.margin

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ExportOptions":
        """Create options from a mapping, ignoring unknown keys."""
        data = data or {}
        known = ("title", "creator", "page_width", "page_height", "margin", "compression")
        return cls(**{key: data[key] for key in known if key in data})

    def __repr__(self) -> str:
        return (f"ExportOptions(title={self.title!r}, creator={self.creator!r}, "
                f"page={self.page_width}x{self.page_height}, margin={self.margin})")
