"""
Export entry point: rich document model to DOCX bytes.

Usage:
    from richdoc_docx import export_docx

    data = await export_docx(payload)
    data = export_docx_sync(payload, ExportOptions(title="Report"))
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Protocol

from .builders.footnotes import build_footnotes_map
from .builders.numbering import build_numbering_config
from .builders.sections import build_document_children, normalize_sections
from .config import ExportOptions
from .docx.descriptors import DocumentSection, DocxDocument
from .docx.packer import Packer
from .exceptions import NoExportableContentError
from .models.document_model import DocumentModel

logger = logging.getLogger(__name__)


class DocumentPacker(Protocol):
    """Anything that can serialize a DocxDocument to bytes."""

    async def to_buffer(self, document: DocxDocument) -> bytes:
        ...


def build_document(payload: Any, options: Optional[ExportOptions] = None) -> DocxDocument:
    """
    Build the output document descriptor from a document-model payload.

    Args:
        payload: Document model (mapping with ``sections`` and ``footnotes``)
        options: Export options

    Returns:
        Document descriptor ready for packing

    Raises:
        NoExportableContentError: If no section has exportable content
    """
    options = options or ExportOptions()
    model = DocumentModel.from_payload(payload)

    sections = normalize_sections(model.sections)
    if not sections:
        raise NoExportableContentError(details=f"{len(model.sections)} section(s) in payload")

    footnotes = build_footnotes_map(model.footnotes)
    logger.debug(
        f"Building document from {model.to_dict()}: {len(sections)} contentful section(s), "
        f"{len(footnotes)} valid footnote(s)"
    )

    return DocxDocument(
        numbering=build_numbering_config(),
        footnotes=footnotes or None,
        sections=[DocumentSection(children=build_document_children(sections))],
        title=options.title,
        creator=options.creator,
    )


async def export_docx(payload: Any, options: Optional[ExportOptions] = None,
                      packer: Optional[DocumentPacker] = None) -> bytes:
    """
    Export a document model to DOCX bytes.

    Args:
        payload: Document model
        options: Export options
        packer: Serializer for the document descriptor (defaults to :class:`Packer`)

    Returns:
        DOCX file content

    Raises:
        NoExportableContentError: If no section has exportable content
        PackagingError: If the package cannot be serialized
    """
    options = options or ExportOptions()
    document = build_document(payload, options)
    packer = packer or Packer(options)

    data = await packer.to_buffer(document)
    logger.info(f"Exported DOCX document ({len(data)} bytes)")
    return data


# Name used by the editor integration
build_docx_buffer_from_model = export_docx


def export_docx_sync(payload: Any, options: Optional[ExportOptions] = None,
                     packer: Optional[DocumentPacker] = None) -> bytes:
    """Blocking wrapper around :func:`export_docx` for callers without an event loop."""
    return asyncio.run(export_docx(payload, options, packer))
