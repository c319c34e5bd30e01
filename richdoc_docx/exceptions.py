"""Custom exceptions for the rich document DOCX exporter."""

from typing import Optional


class RichDocExportError(Exception):
    """Base exception for export errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class NoExportableContentError(RichDocExportError):
    """Raised when no section of the document model has exportable content."""

    def __init__(self, message: str = "No section content available to export.",
                 details: Optional[str] = None):
        super().__init__(message, details)


class PackagingError(RichDocExportError):
    """Raised when the DOCX package cannot be serialized."""

    pass
