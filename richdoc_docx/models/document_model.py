"""

Input document model produced by the upstream editor.

The payload is JSON-like (dicts and lists with camelCase keys). Parsing is
total: malformed entries never raise, they become empty variants or are
dropped, and raw attribute values are kept as-is so each builder can apply
its own fallback rules.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from ..utils.units import has_visible_text


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


###############################################################################
# Runs
###############################################################################


@dataclass(slots=True)
class TextRun:
    """Styled text run as sent by the producer."""

    text: Any = ""
    bold: Any = False
    italic: Any = False
    underline: Any = False
    strike: Any = False
    subscript: Any = False
    superscript: Any = False
    color: Any = None
    highlight: Any = None
    font: Any = None
    size_pt: Any = None
    breaks: Any = None

    def has_text(self) -> bool:
        return has_visible_text(self.text)


@dataclass(slots=True)
class FootnoteRefRun:
    """

    Inline footnote reference marker.

    Text sent along with the reference is not rendered but still makes the
    paragraph count as having text.

    """

    footnote_ref: Any
    text: Any = ""

    def has_text(self) -> bool:
        return has_visible_text(self.text)


Run = Union[TextRun, FootnoteRefRun]


def parse_run(raw: Any) -> Run:
    """Parse a run mapping; non-mappings become an empty text run."""
    data = _as_mapping(raw)
    if data.get("footnoteRef"):
        return FootnoteRefRun(footnote_ref=data["footnoteRef"], text=data.get("text", ""))
    return TextRun(
        text=data.get("text", ""),
        bold=data.get("bold", False),
        italic=data.get("italic", False),
        underline=data.get("underline", False),
        strike=data.get("strike", False),
        subscript=data.get("subscript", False),
        superscript=data.get("superscript", False),
        color=data.get("color"),
        highlight=data.get("highlight"),
        font=data.get("font"),
        size_pt=data.get("sizePt"),
        breaks=data.get("breaks"),
    )


def parse_runs(raw: Any) -> List[Run]:
    """Parse a run list; non-list input yields an empty list."""
    return [parse_run(item) for item in _as_list(raw)]


###############################################################################
# Blocks
###############################################################################


@dataclass(slots=True)
class ListSpec:
    """List membership of a paragraph (``type`` is bullet or number)."""

    type: Any = None
    level: Any = 0


@dataclass(slots=True)
class ParagraphBlock:
    runs: List[Run] = field(default_factory=list)
    heading: Any = None
    alignment: Any = None
    line_spacing: Any = None
    indent_left_pt: Any = None
    indent_first_pt: Any = None
    list_spec: Optional[ListSpec] = None

    def has_text(self) -> bool:
        return any(run.has_text() for run in self.runs)


@dataclass(slots=True)
class TableCell:
    """Table cell; only paragraph blocks are kept (tables do not nest)."""

    blocks: List[ParagraphBlock] = field(default_factory=list)


@dataclass(slots=True)
class TableRow:
    cells: List[TableCell] = field(default_factory=list)


@dataclass(slots=True)
class TableBlock:
    rows: List[TableRow] = field(default_factory=list)


Block = Union[ParagraphBlock, TableBlock]


def parse_paragraph(data: Mapping[str, Any]) -> ParagraphBlock:
    list_data = data.get("list")
    list_spec = None
    if isinstance(list_data, Mapping):
        list_spec = ListSpec(type=list_data.get("type"), level=list_data.get("level", 0))

    return ParagraphBlock(
        runs=parse_runs(data.get("runs")),
        heading=data.get("heading"),
        alignment=data.get("alignment"),
        line_spacing=data.get("lineSpacing"),
        indent_left_pt=data.get("indentLeftPt"),
        indent_first_pt=data.get("indentFirstPt"),
        list_spec=list_spec,
    )


def parse_table(data: Mapping[str, Any]) -> TableBlock:
    rows = []
    for raw_row in _as_list(data.get("rows")):
        cells = []
        for raw_cell in _as_list(_as_mapping(raw_row).get("cells")):
            blocks = [
                parse_paragraph(block)
                for block in _as_list(_as_mapping(raw_cell).get("blocks"))
                if isinstance(block, Mapping) and block.get("type") == "paragraph"
            ]
            cells.append(TableCell(blocks=blocks))
        rows.append(TableRow(cells=cells))
    return TableBlock(rows=rows)


def parse_block(raw: Any) -> Optional[Block]:
    """
    Parse one block.

    Args:
        raw: Block mapping with a ``type`` of ``paragraph`` or ``table``

    Returns:
        Parsed block, or None for absent or unrecognized blocks
    """
    if not isinstance(raw, Mapping):
        return None
    block_type = raw.get("type")
    if block_type == "paragraph":
        return parse_paragraph(raw)
    if block_type == "table":
        return parse_table(raw)
    return None


###############################################################################
# Sections, footnotes, document
###############################################################################


@dataclass(slots=True)
class Section:
    blocks: List[Block] = field(default_factory=list)

    def has_content(self) -> bool:
        """A section is contentful if it holds a table or a paragraph with visible text."""
        for block in self.blocks:
            if isinstance(block, TableBlock):
                return True
            if isinstance(block, ParagraphBlock) and block.has_text():
                return True
        return False


def parse_section(raw: Any) -> Optional[Section]:
    """Parse a section; returns None when it is absent or has no block list."""
    if not isinstance(raw, Mapping) or not isinstance(raw.get("blocks"), list):
        return None
    blocks = [block for block in map(parse_block, raw["blocks"]) if block is not None]
    return Section(blocks=blocks)


@dataclass(slots=True)
class FootnoteRecord:
    id: Any
    text: Any = ""


def parse_footnote(raw: Any) -> FootnoteRecord:
    data = _as_mapping(raw)
    return FootnoteRecord(id=data.get("id"), text=data.get("text", ""))


@dataclass(slots=True)
class DocumentModel:
    """Whole export payload."""

    sections: List[Optional[Section]] = field(default_factory=list)
    footnotes: List[FootnoteRecord] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "DocumentModel":
        if isinstance(payload, DocumentModel):
            return payload
        data = _as_mapping(payload)
        return cls(
            sections=[parse_section(raw) for raw in _as_list(data.get("sections"))],
            footnotes=[parse_footnote(raw) for raw in _as_list(data.get("footnotes"))],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summary used for logging."""
        return {
            "sections": len(self.sections),
            "footnotes": len(self.footnotes),
        }
