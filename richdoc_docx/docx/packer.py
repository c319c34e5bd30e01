"""

DOCX packer - serializes document descriptors into a DOCX package.

Uses WordMLWriter to generate the XML parts and assembles them into an
OPC package (ZIP) with relationships and [Content_Types].xml. Entries are
written in a fixed order with a fixed timestamp, so the same document
always produces the same bytes.

"""

from __future__ import annotations

import asyncio
import io
import logging
import xml.etree.ElementTree as ET
import zipfile
from typing import List, Optional, Tuple

from ..config import ExportOptions
from ..exceptions import PackagingError
from .descriptors import DocxDocument
from .wordml import WordMLWriter, serialize

logger = logging.getLogger(__name__)

# OPC namespaces
OPC_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"
REL_TYPE_BASE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

REL_OFFICE_DOCUMENT = f"{REL_TYPE_BASE}/officeDocument"
REL_EXTENDED_PROPERTIES = f"{REL_TYPE_BASE}/extended-properties"
REL_CORE_PROPERTIES = "http://schemas.openxmlformats.org/package/2006/relationships/metadata/core-properties"
REL_STYLES = f"{REL_TYPE_BASE}/styles"
REL_NUMBERING = f"{REL_TYPE_BASE}/numbering"
REL_SETTINGS = f"{REL_TYPE_BASE}/settings"
REL_FOOTNOTES = f"{REL_TYPE_BASE}/footnotes"

_WML_CT = "application/vnd.openxmlformats-officedocument.wordprocessingml"
CONTENT_TYPES = {
    "word/document.xml": f"{_WML_CT}.document.main+xml",
    "word/styles.xml": f"{_WML_CT}.styles+xml",
    "word/numbering.xml": f"{_WML_CT}.numbering+xml",
    "word/settings.xml": f"{_WML_CT}.settings+xml",
    "word/footnotes.xml": f"{_WML_CT}.footnotes+xml",
    "docProps/core.xml": "application/vnd.openxmlformats-package.core-properties+xml",
    "docProps/app.xml": "application/vnd.openxmlformats-officedocument.extended-properties+xml",
}
DEFAULT_CONTENT_TYPES = {
    "rels": "application/vnd.openxmlformats-package.relationships+xml",
    "xml": "application/xml",
}

# Fixed entry timestamp (the earliest ZIP date)
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

Relationship = Tuple[str, str, str]


class Packer:
    """
    Serializes a :class:`DocxDocument` into DOCX bytes.

    ``to_bytes`` is synchronous; ``to_buffer`` runs it off the event loop.
    """

    def __init__(self, options: Optional[ExportOptions] = None):
        """
        Initializes DOCX packer.

        Args:
            options: Export options (page geometry, properties, compression)
        """
        self.options = options or ExportOptions()

    def to_bytes(self, document: DocxDocument) -> bytes:
        """
        Serialize document to DOCX bytes.

        Args:
            document: Document descriptor

        Returns:
            Complete DOCX file content

        Raises:
            PackagingError: If any part cannot be rendered or written
        """
        try:
            parts = self._prepare_parts(document)
            data = self._write_package(parts)
        except PackagingError:
            raise
        except Exception as e:
            logger.error(f"Failed to serialize DOCX package: {e}")
            raise PackagingError("Failed to serialize DOCX package", details=str(e)) from e

        logger.debug(f"DOCX package written: {len(parts)} parts, {len(data)} bytes")
        return data

    async def to_buffer(self, document: DocxDocument) -> bytes:
        """Asynchronously serialize document to DOCX bytes."""
        return await asyncio.to_thread(self.to_bytes, document)

    def _prepare_parts(self, document: DocxDocument) -> List[Tuple[str, bytes]]:
        """Render every package part, in the order they are written."""
        writer = WordMLWriter(document, self.options)

        word_parts = [
            ("word/document.xml", writer.render_document()),
            ("word/styles.xml", writer.render_styles()),
            ("word/numbering.xml", writer.render_numbering()),
            ("word/settings.xml", writer.render_settings()),
        ]
        footnotes_xml = writer.render_footnotes()
        if footnotes_xml is not None:
            word_parts.append(("word/footnotes.xml", footnotes_xml))

        document_rels: List[Relationship] = [
            (f"rId{index + 1}", self._relationship_type(name), name.split("/", 1)[1])
            for index, (name, _) in enumerate(word_parts[1:])
        ]
        package_rels: List[Relationship] = [
            ("rId1", REL_OFFICE_DOCUMENT, "word/document.xml"),
            ("rId2", REL_CORE_PROPERTIES, "docProps/core.xml"),
            ("rId3", REL_EXTENDED_PROPERTIES, "docProps/app.xml"),
        ]

        parts = [
            ("docProps/core.xml", writer.render_core_properties()),
            ("docProps/app.xml", writer.render_app_properties()),
        ] + word_parts

        return [
            ("[Content_Types].xml", self._generate_content_types_xml([name for name, _ in parts])),
            ("_rels/.rels", self._generate_relationships_xml(package_rels)),
            ("word/_rels/document.xml.rels", self._generate_relationships_xml(document_rels)),
        ] + parts

    @staticmethod
    def _relationship_type(part_name: str) -> str:
        return {
            "word/styles.xml": REL_STYLES,
            "word/numbering.xml": REL_NUMBERING,
            "word/settings.xml": REL_SETTINGS,
            "word/footnotes.xml": REL_FOOTNOTES,
        }[part_name]

    def _generate_content_types_xml(self, part_names: List[str]) -> bytes:
        """Generate [Content_Types].xml."""
        root = ET.Element("Types", {"xmlns": CONTENT_TYPES_NS})

        for extension, content_type in DEFAULT_CONTENT_TYPES.items():
            ET.SubElement(root, "Default", {
                "Extension": extension,
                "ContentType": content_type,
            })

        for part_name in part_names:
            ET.SubElement(root, "Override", {
                "PartName": f"/{part_name}",
                "ContentType": CONTENT_TYPES[part_name],
            })

        return serialize(root)

    def _generate_relationships_xml(self, relationships: List[Relationship]) -> bytes:
        """Generate a relationships part."""
        root = ET.Element("Relationships", {"xmlns": OPC_NS})
        for rel_id, rel_type, target in relationships:
            ET.SubElement(root, "Relationship", {
                "Id": rel_id,
                "Type": rel_type,
                "Target": target,
            })
        return serialize(root)

    def _write_package(self, parts: List[Tuple[str, bytes]]) -> bytes:
        """Write package parts to an in-memory ZIP."""
        compress_type = zipfile.ZIP_DEFLATED if self.options.compression else zipfile.ZIP_STORED
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compress_type) as zip_file:
            for name, content in parts:
                info = zipfile.ZipInfo(name, date_time=ZIP_DATE_TIME)
                info.compress_type = compress_type
                zip_file.writestr(info, content)
        return buffer.getvalue()
