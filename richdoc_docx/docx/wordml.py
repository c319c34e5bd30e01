"""
WordML writer for output document descriptors.

Renders the XML parts of a DOCX package (document, styles, numbering,
footnotes, settings, document properties) from a :class:`DocxDocument`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from ..config import ExportOptions
from ..utils.enums import BreakType, WidthType
from ..utils.units import round_half_up, strip_xml_invalid_chars
from .descriptors import (
    DocxDocument,
    Footnote,
    FootnoteReferenceRun,
    InlineItem,
    NumberingScheme,
    PageBreak,
    Paragraph,
    Table,
    TextRun,
)

logger = logging.getLogger(__name__)

W_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
R_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
CP_NAMESPACE = "http://schemas.openxmlformats.org/package/2006/metadata/core-properties"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
DCTERMS_NAMESPACE = "http://purl.org/dc/terms/"
EP_NAMESPACE = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"

ET.register_namespace("w", W_NAMESPACE)
ET.register_namespace("r", R_NAMESPACE)
ET.register_namespace("cp", CP_NAMESPACE)
ET.register_namespace("dc", DC_NAMESPACE)
ET.register_namespace("dcterms", DCTERMS_NAMESPACE)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

FOOTNOTE_TEXT_STYLE = "FootnoteText"
FOOTNOTE_REFERENCE_STYLE = "FootnoteReference"
SEPARATOR_FOOTNOTE_ID = -1
CONTINUATION_SEPARATOR_FOOTNOTE_ID = 0

# Percent widths are written in fiftieths of a percent
PCT_UNITS_PER_PERCENT = 50

BORDER_SIDES = ("top", "left", "bottom", "right", "insideH", "insideV")

# styleId -> (display name, run size in half-points, outline level)
HEADING_STYLES = {
    "Heading1": ("heading 1", 32, 0),
    "Heading2": ("heading 2", 28, 1),
    "Heading3": ("heading 3", 26, 2),
    "Heading4": ("heading 4", 24, 3),
}


def _w(tag: str) -> str:
    return f"{{{W_NAMESPACE}}}{tag}"


def serialize(root: ET.Element) -> bytes:
    """Serialize an element tree as a compact standalone UTF-8 XML part."""
    body = ET.tostring(root, encoding="unicode")
    return (XML_DECLARATION + body).encode("utf-8")


class WordMLWriter:
    """
    Renders WordML parts for one document.

    Handles paragraph, run and table markup, numbering definitions,
    footnotes, styles and document settings.
    """

    def __init__(self, document: DocxDocument, options: Optional[ExportOptions] = None):
        """
        Initialize WordML writer.

        Args:
            document: Document descriptor to render
            options: Export options (page geometry, properties)
        """
        if document is None:
            raise ValueError("Document cannot be None")

        self.document = document
        self.options = options or ExportOptions()
        # Numbering references resolve to numIds in declaration order
        self.numbering_ids: Dict[str, int] = {
            scheme.reference: index + 1 for index, scheme in enumerate(document.numbering)
        }

    @property
    def has_footnotes(self) -> bool:
        return bool(self.document.footnotes)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------

    def _add_run_properties(self, r: ET.Element, run: TextRun) -> None:
        """Add w:rPr for a text run, in schema order."""
        rPr = ET.Element(_w("rPr"))

        if run.font:
            ET.SubElement(rPr, _w("rFonts"), {
                _w("ascii"): run.font,
                _w("hAnsi"): run.font,
                _w("cs"): run.font,
                _w("eastAsia"): run.font,
            })
        if run.bold:
            ET.SubElement(rPr, _w("b"))
            ET.SubElement(rPr, _w("bCs"))
        if run.italics:
            ET.SubElement(rPr, _w("i"))
            ET.SubElement(rPr, _w("iCs"))
        if run.strike:
            ET.SubElement(rPr, _w("strike"))
        if run.color:
            ET.SubElement(rPr, _w("color"), {_w("val"): run.color})
        if run.size:
            ET.SubElement(rPr, _w("sz"), {_w("val"): str(run.size)})
            ET.SubElement(rPr, _w("szCs"), {_w("val"): str(run.size)})
        if run.highlight:
            ET.SubElement(rPr, _w("highlight"), {_w("val"): run.highlight.value})
        if run.underline:
            ET.SubElement(rPr, _w("u"), {_w("val"): run.underline.value})
        if run.super_script:
            ET.SubElement(rPr, _w("vertAlign"), {_w("val"): "superscript"})
        elif run.sub_script:
            ET.SubElement(rPr, _w("vertAlign"), {_w("val"): "subscript"})

        if len(rPr):
            r.append(rPr)

    def _run_style_element(self, r: ET.Element, style_id: str) -> None:
        rPr = ET.SubElement(r, _w("rPr"))
        ET.SubElement(rPr, _w("rStyle"), {_w("val"): style_id})

    def export_run_xml(self, item: InlineItem) -> ET.Element:
        """Export one inline item as a w:r element."""
        r = ET.Element(_w("r"))

        if isinstance(item, FootnoteReferenceRun):
            self._run_style_element(r, FOOTNOTE_REFERENCE_STYLE)
            ET.SubElement(r, _w("footnoteReference"), {_w("id"): str(item.footnote_id)})
            return r

        if isinstance(item, PageBreak):
            ET.SubElement(r, _w("br"), {_w("type"): BreakType.PAGE.value})
            return r

        self._add_run_properties(r, item)
        for _ in range(item.break_before):
            ET.SubElement(r, _w("br"))
        if item.text or not item.break_before:
            t = ET.SubElement(r, _w("t"))
            t.set(f"{{{XML_NAMESPACE}}}space", "preserve")
            t.text = item.text
        return r

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def _add_paragraph_properties(self, p: ET.Element, paragraph: Paragraph) -> None:
        """Add w:pPr in schema order (pStyle, numPr, spacing, ind, jc)."""
        pPr = ET.Element(_w("pPr"))

        style_id = paragraph.style or (paragraph.heading.value if paragraph.heading else None)
        if style_id:
            ET.SubElement(pPr, _w("pStyle"), {_w("val"): style_id})

        if paragraph.numbering:
            num_id = self.numbering_ids.get(paragraph.numbering.reference)
            if num_id is None:
                logger.warning(f"Unknown numbering reference: {paragraph.numbering.reference}")
            else:
                numPr = ET.SubElement(pPr, _w("numPr"))
                ET.SubElement(numPr, _w("ilvl"), {_w("val"): str(paragraph.numbering.level)})
                ET.SubElement(numPr, _w("numId"), {_w("val"): str(num_id)})

        if paragraph.spacing and paragraph.spacing.line is not None:
            ET.SubElement(pPr, _w("spacing"), {
                _w("line"): str(paragraph.spacing.line),
                _w("lineRule"): "auto",
            })

        if paragraph.indent:
            attrs = {}
            if paragraph.indent.left is not None:
                attrs[_w("left")] = str(paragraph.indent.left)
            first_line = paragraph.indent.first_line
            if paragraph.indent.hanging is not None:
                attrs[_w("hanging")] = str(paragraph.indent.hanging)
            elif first_line is not None and first_line < 0:
                attrs[_w("hanging")] = str(-first_line)
            elif first_line is not None:
                attrs[_w("firstLine")] = str(first_line)
            if attrs:
                ET.SubElement(pPr, _w("ind"), attrs)

        if paragraph.alignment:
            ET.SubElement(pPr, _w("jc"), {_w("val"): paragraph.alignment.value})

        if len(pPr):
            p.append(pPr)

    def export_paragraph_xml(self, paragraph: Paragraph,
                             leading: Optional[List[ET.Element]] = None) -> ET.Element:
        """
        Export paragraph as XML.

        Args:
            paragraph: Paragraph descriptor
            leading: Extra run elements placed before the paragraph's own runs

        Returns:
            w:p element
        """
        p = ET.Element(_w("p"))
        self._add_paragraph_properties(p, paragraph)
        for element in leading or ():
            p.append(element)
        for item in paragraph.children:
            p.append(self.export_run_xml(item))
        return p

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    @staticmethod
    def _width_attrs(size: float, width_type: WidthType) -> Dict[str, str]:
        if width_type == WidthType.PERCENTAGE:
            value = round_half_up(size * PCT_UNITS_PER_PERCENT)
        else:
            value = round_half_up(size)
        return {_w("w"): str(value), _w("type"): width_type.value}

    def export_table_xml(self, table: Table) -> ET.Element:
        """Export table as XML (tblPr, tblGrid, then rows)."""
        tbl = ET.Element(_w("tbl"))

        tblPr = ET.SubElement(tbl, _w("tblPr"))
        ET.SubElement(tblPr, _w("tblW"), self._width_attrs(table.width.size, table.width.type))
        borders = ET.SubElement(tblPr, _w("tblBorders"))
        for side in BORDER_SIDES:
            ET.SubElement(borders, _w(side), {
                _w("val"): "single", _w("sz"): "4", _w("space"): "0", _w("color"): "auto",
            })
        ET.SubElement(tblPr, _w("tblLook"), {_w("val"): "04A0"})

        columns = max(1, table.column_count)
        tblGrid = ET.SubElement(tbl, _w("tblGrid"))
        for _ in range(columns):
            ET.SubElement(tblGrid, _w("gridCol"), {_w("w"): str(self.options.text_width // columns)})

        for row in table.rows:
            tr = ET.SubElement(tbl, _w("tr"))
            for cell in row.children:
                tc = ET.SubElement(tr, _w("tc"))
                if cell.width is not None:
                    tcPr = ET.SubElement(tc, _w("tcPr"))
                    ET.SubElement(tcPr, _w("tcW"), self._width_attrs(cell.width.size, cell.width.type))
                paragraphs = cell.children or [Paragraph.empty()]
                for paragraph in paragraphs:
                    tc.append(self.export_paragraph_xml(paragraph))

        return tbl

    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------

    def _export_sect_pr(self, body: ET.Element) -> None:
        sectPr = ET.SubElement(body, _w("sectPr"))
        ET.SubElement(sectPr, _w("pgSz"), {
            _w("w"): str(self.options.page_width),
            _w("h"): str(self.options.page_height),
        })
        margin = str(self.options.margin)
        ET.SubElement(sectPr, _w("pgMar"), {
            _w("top"): margin, _w("right"): margin, _w("bottom"): margin, _w("left"): margin,
            _w("header"): "708", _w("footer"): "708", _w("gutter"): "0",
        })

    def render_document(self) -> bytes:
        """Render word/document.xml."""
        root = ET.Element(_w("document"))
        body = ET.SubElement(root, _w("body"))

        count = 0
        for element in self.document.iter_body():
            if isinstance(element, Table):
                body.append(self.export_table_xml(element))
            else:
                body.append(self.export_paragraph_xml(element))
            count += 1
        if count == 0:
            body.append(self.export_paragraph_xml(Paragraph.empty()))

        self._export_sect_pr(body)
        logger.debug(f"Rendered document.xml with {count} body elements")
        return serialize(root)

    def render_numbering(self) -> bytes:
        """Render word/numbering.xml (abstractNum per scheme, then num instances)."""
        root = ET.Element(_w("numbering"))

        for index, scheme in enumerate(self.document.numbering):
            root.append(self._export_abstract_num(index, scheme))

        for index, scheme in enumerate(self.document.numbering):
            num = ET.SubElement(root, _w("num"), {_w("numId"): str(self.numbering_ids[scheme.reference])})
            ET.SubElement(num, _w("abstractNumId"), {_w("val"): str(index)})

        return serialize(root)

    def _export_abstract_num(self, index: int, scheme: NumberingScheme) -> ET.Element:
        abstract = ET.Element(_w("abstractNum"), {_w("abstractNumId"): str(index)})
        ET.SubElement(abstract, _w("multiLevelType"), {_w("val"): "hybridMultilevel"})

        for level in scheme.levels:
            lvl = ET.SubElement(abstract, _w("lvl"), {_w("ilvl"): str(level.level)})
            ET.SubElement(lvl, _w("start"), {_w("val"): str(level.start)})
            ET.SubElement(lvl, _w("numFmt"), {_w("val"): level.format.value})
            ET.SubElement(lvl, _w("lvlText"), {_w("val"): level.text})
            ET.SubElement(lvl, _w("lvlJc"), {_w("val"): level.alignment.value})

            ind = {}
            if level.indent.left is not None:
                ind[_w("left")] = str(level.indent.left)
            if level.indent.hanging is not None:
                ind[_w("hanging")] = str(level.indent.hanging)
            if ind:
                pPr = ET.SubElement(lvl, _w("pPr"))
                ET.SubElement(pPr, _w("ind"), ind)

        return abstract

    def _export_separator(self, root: ET.Element, note_type: str, note_id: int) -> None:
        note = ET.SubElement(root, _w("footnote"), {_w("type"): note_type, _w("id"): str(note_id)})
        p = ET.SubElement(note, _w("p"))
        pPr = ET.SubElement(p, _w("pPr"))
        ET.SubElement(pPr, _w("spacing"), {_w("after"): "0", _w("line"): "240", _w("lineRule"): "auto"})
        r = ET.SubElement(p, _w("r"))
        ET.SubElement(r, _w(note_type))

    def _export_footnote(self, root: ET.Element, note_id: str, footnote: Footnote) -> None:
        note = ET.SubElement(root, _w("footnote"), {_w("id"): note_id})
        paragraphs = footnote.children or [Paragraph.empty()]
        for index, paragraph in enumerate(paragraphs):
            styled = Paragraph(
                children=paragraph.children,
                alignment=paragraph.alignment,
                spacing=paragraph.spacing,
                indent=paragraph.indent,
                style=paragraph.style or FOOTNOTE_TEXT_STYLE,
            )
            leading = None
            if index == 0:
                mark = ET.Element(_w("r"))
                self._run_style_element(mark, FOOTNOTE_REFERENCE_STYLE)
                ET.SubElement(mark, _w("footnoteRef"))
                leading = [mark]
            note.append(self.export_paragraph_xml(styled, leading=leading))

    def render_footnotes(self) -> Optional[bytes]:
        """Render word/footnotes.xml, or None when the document has no footnotes."""
        if not self.has_footnotes:
            return None

        root = ET.Element(_w("footnotes"))
        self._export_separator(root, "separator", SEPARATOR_FOOTNOTE_ID)
        self._export_separator(root, "continuationSeparator", CONTINUATION_SEPARATOR_FOOTNOTE_ID)

        for note_id in sorted(self.document.footnotes, key=int):
            self._export_footnote(root, note_id, self.document.footnotes[note_id])

        return serialize(root)

    def render_styles(self) -> bytes:
        """Render word/styles.xml with the styles the writer references."""
        root = ET.Element(_w("styles"))

        defaults = ET.SubElement(root, _w("docDefaults"))
        rPr = ET.SubElement(ET.SubElement(defaults, _w("rPrDefault")), _w("rPr"))
        ET.SubElement(rPr, _w("rFonts"), {
            _w("asciiTheme"): "minorHAnsi", _w("hAnsiTheme"): "minorHAnsi",
            _w("eastAsiaTheme"): "minorEastAsia", _w("cstheme"): "minorBidi",
        })
        ET.SubElement(rPr, _w("sz"), {_w("val"): "22"})
        ET.SubElement(rPr, _w("szCs"), {_w("val"): "22"})
        pPr = ET.SubElement(ET.SubElement(defaults, _w("pPrDefault")), _w("pPr"))
        ET.SubElement(pPr, _w("spacing"), {_w("after"): "160", _w("line"): "259", _w("lineRule"): "auto"})

        normal = self._style(root, "paragraph", "Normal", "Normal", default=True)
        ET.SubElement(normal, _w("qFormat"))

        for style_id, (name, size, outline) in HEADING_STYLES.items():
            style = self._style(root, "paragraph", style_id, name, based_on="Normal")
            ET.SubElement(style, _w("next"), {_w("val"): "Normal"})
            ET.SubElement(style, _w("qFormat"))
            style_pPr = ET.SubElement(style, _w("pPr"))
            ET.SubElement(style_pPr, _w("keepNext"))
            ET.SubElement(style_pPr, _w("spacing"), {_w("before"): "240", _w("after"): "80"})
            ET.SubElement(style_pPr, _w("outlineLvl"), {_w("val"): str(outline)})
            style_rPr = ET.SubElement(style, _w("rPr"))
            ET.SubElement(style_rPr, _w("b"))
            ET.SubElement(style_rPr, _w("sz"), {_w("val"): str(size)})
            ET.SubElement(style_rPr, _w("szCs"), {_w("val"): str(size)})

        text_style = self._style(root, "paragraph", FOOTNOTE_TEXT_STYLE, "footnote text", based_on="Normal")
        text_pPr = ET.SubElement(text_style, _w("pPr"))
        ET.SubElement(text_pPr, _w("spacing"), {_w("after"): "0", _w("line"): "240", _w("lineRule"): "auto"})
        text_rPr = ET.SubElement(text_style, _w("rPr"))
        ET.SubElement(text_rPr, _w("sz"), {_w("val"): "20"})
        ET.SubElement(text_rPr, _w("szCs"), {_w("val"): "20"})

        ref_style = self._style(root, "character", FOOTNOTE_REFERENCE_STYLE, "footnote reference")
        ref_rPr = ET.SubElement(ref_style, _w("rPr"))
        ET.SubElement(ref_rPr, _w("vertAlign"), {_w("val"): "superscript"})

        return serialize(root)

    @staticmethod
    def _style(root: ET.Element, style_type: str, style_id: str, name: str,
               based_on: Optional[str] = None, default: bool = False) -> ET.Element:
        attrs = {_w("type"): style_type, _w("styleId"): style_id}
        if default:
            attrs[_w("default")] = "1"
        style = ET.SubElement(root, _w("style"), attrs)
        ET.SubElement(style, _w("name"), {_w("val"): name})
        if based_on:
            ET.SubElement(style, _w("basedOn"), {_w("val"): based_on})
        return style

    def render_settings(self) -> bytes:
        """Render word/settings.xml."""
        root = ET.Element(_w("settings"))
        ET.SubElement(root, _w("defaultTabStop"), {_w("val"): "708"})
        if self.has_footnotes:
            footnote_pr = ET.SubElement(root, _w("footnotePr"))
            ET.SubElement(footnote_pr, _w("footnote"), {_w("id"): str(SEPARATOR_FOOTNOTE_ID)})
            ET.SubElement(footnote_pr, _w("footnote"), {_w("id"): str(CONTINUATION_SEPARATOR_FOOTNOTE_ID)})
        compat = ET.SubElement(root, _w("compat"))
        ET.SubElement(compat, _w("compatSetting"), {
            _w("name"): "compatibilityMode",
            _w("uri"): "http://schemas.microsoft.com/office/word",
            _w("val"): "15",
        })
        return serialize(root)

    def render_core_properties(self) -> bytes:
        """Render docProps/core.xml (no timestamps, output stays deterministic)."""
        root = ET.Element(f"{{{CP_NAMESPACE}}}coreProperties")
        title = self.document.title or self.options.title
        if title:
            ET.SubElement(root, f"{{{DC_NAMESPACE}}}title").text = strip_xml_invalid_chars(title)
        creator = strip_xml_invalid_chars(self.document.creator or self.options.creator or "")
        if creator:
            ET.SubElement(root, f"{{{DC_NAMESPACE}}}creator").text = creator
            ET.SubElement(root, f"{{{CP_NAMESPACE}}}lastModifiedBy").text = creator
        return serialize(root)

    def render_app_properties(self) -> bytes:
        """Render docProps/app.xml."""
        root = ET.Element("Properties", {"xmlns": EP_NAMESPACE})
        ET.SubElement(root, "Application").text = "richdoc_docx"
        return serialize(root)
