from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt, RGBColor

from .model import (
    Block,
    CodeBlock,
    Document,
    Heading,
    InlineBold,
    InlineCode,
    InlineElement,
    InlineItalic,
    InlineLink,
    InlineText,
    ListBlock,
    Paragraph,
    TableBlock,
)

FONT_NAME = "Calibri"
CODE_FONT_NAME = "Courier New"
FONT_SIZE_PT = 11
CODE_FONT_SIZE_PT = 10
SPACE_AFTER_PT = 6
LINK_COLOR = RGBColor(0x25, 0x63, 0xEB)

MARGIN_CM = 2.0

# Characters lxml refuses in XML text; tab, newline and carriage return are allowed.
XML_INVALID_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def render_document(doc: Document, output_path: str | Path, title: str | None = None) -> None:
    """Write the Document to a .docx file."""
    output_path = Path(output_path)
    docx = DocxDocument()
    _apply_page_layout(docx)
    if title:
        docx.core_properties.title = _xml_safe(title)

    for block in doc.blocks:
        _dispatch_block(docx, block)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def _apply_page_layout(docx: DocxDocument) -> None:
    for section in docx.sections:
        section.left_margin = Cm(MARGIN_CM)
        section.right_margin = Cm(MARGIN_CM)
        section.top_margin = Cm(MARGIN_CM)
        section.bottom_margin = Cm(MARGIN_CM)


def _dispatch_block(docx: DocxDocument, block: Block) -> None:
    if isinstance(block, Heading):
        _render_heading(docx, block)
    elif isinstance(block, Paragraph):
        _render_paragraph(docx, block)
    elif isinstance(block, ListBlock):
        _render_list(docx, block)
    elif isinstance(block, CodeBlock):
        _render_code_block(docx, block)
    elif isinstance(block, TableBlock):
        _render_table_block(docx, block)


def _render_heading(docx: DocxDocument, heading: Heading) -> None:
    paragraph = docx.add_heading("", level=heading.level)
    _add_runs(paragraph, heading.inline, bold=True, size=None)


def _render_paragraph(docx: DocxDocument, block: Paragraph) -> None:
    paragraph = docx.add_paragraph()
    _add_runs(paragraph, block.inline)
    paragraph.paragraph_format.space_after = Pt(SPACE_AFTER_PT)


def _render_list(docx: DocxDocument, block: ListBlock) -> None:
    for item in block.items:
        paragraph = docx.add_paragraph(style="List Bullet")
        _add_runs(paragraph, item)


def _render_code_block(docx: DocxDocument, block: CodeBlock) -> None:
    if block.language:
        label = docx.add_paragraph()
        run = label.add_run(_xml_safe(block.language))
        set_run_font(run, bold=True, size=CODE_FONT_SIZE_PT)
        label.paragraph_format.space_after = Pt(0)
    paragraph = docx.add_paragraph()
    run = paragraph.add_run(_xml_safe(block.code))
    set_run_font(run, code=True, size=CODE_FONT_SIZE_PT)
    paragraph.paragraph_format.left_indent = Cm(0.5)
    paragraph.paragraph_format.space_after = Pt(SPACE_AFTER_PT)
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT


def _render_table_block(docx: DocxDocument, block: TableBlock) -> None:
    col_count = max(1, len(block.header))
    table = docx.add_table(rows=1 + len(block.rows), cols=col_count)
    table.style = "Table Grid"
    table.alignment = WD_TABLE_ALIGNMENT.LEFT
    for idx, cell_inline in enumerate(block.header):
        _add_runs(table.cell(0, idx).paragraphs[0], cell_inline, bold=True)
    for r_idx, row in enumerate(block.rows, start=1):
        for c_idx, cell_inline in enumerate(row):
            _add_runs(table.cell(r_idx, c_idx).paragraphs[0], cell_inline)
    spacer = docx.add_paragraph("")
    spacer.paragraph_format.space_after = Pt(0)


def _add_runs(
    paragraph,
    inlines: Iterable[InlineElement],
    bold: bool = False,
    italic: bool = False,
    underline: bool = False,
    size: int | None = FONT_SIZE_PT,
) -> None:
    for inline in inlines:
        if isinstance(inline, InlineText):
            run = paragraph.add_run(_xml_safe(inline.text))
            set_run_font(run, bold=bold, italic=italic, underline=underline, size=size)
        elif isinstance(inline, InlineCode):
            run = paragraph.add_run(_xml_safe(inline.code))
            set_run_font(run, bold=bold, italic=italic, code=True, size=size)
        elif isinstance(inline, InlineBold):
            _add_runs(paragraph, inline.children, True, italic, underline, size)
        elif isinstance(inline, InlineItalic):
            _add_runs(paragraph, inline.children, bold, True, underline, size)
        elif isinstance(inline, InlineLink):
            start = len(paragraph.runs)
            _add_runs(paragraph, inline.children, bold, italic, True, size)
            for run in paragraph.runs[start:]:
                run.font.color.rgb = LINK_COLOR


def set_run_font(
    run,
    bold: bool = False,
    italic: bool = False,
    code: bool = False,
    underline: bool = False,
    size: int | None = FONT_SIZE_PT,
) -> None:
    """Apply font settings to a run; size None keeps the paragraph style's size."""
    run.font.name = CODE_FONT_NAME if code else FONT_NAME
    if size is not None:
        run.font.size = Pt(size)
    run.bold = bold
    run.italic = italic
    run.underline = underline


def _xml_safe(text: str) -> str:
    return XML_INVALID_RE.sub("", text)
