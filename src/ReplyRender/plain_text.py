from __future__ import annotations

from .inline_parser import inline_to_text
from .model import Block, CodeBlock, Document, Heading, ListBlock, Paragraph, TableBlock

BULLET = "• "
CELL_SEPARATOR = " | "


def to_plain_text(doc: Document) -> str:
    """Readable text for clipboard copy, with the Markdown syntax stripped."""
    parts = [_block_text(block) for block in doc.blocks]
    return "\n\n".join(part for part in parts if part)


def _block_text(block: Block) -> str:
    if isinstance(block, (Heading, Paragraph)):
        return inline_to_text(block.inline)
    if isinstance(block, ListBlock):
        return "\n".join(BULLET + inline_to_text(item) for item in block.items)
    if isinstance(block, TableBlock):
        lines = [CELL_SEPARATOR.join(inline_to_text(cell) for cell in block.header)]
        lines.extend(CELL_SEPARATOR.join(inline_to_text(cell) for cell in row) for row in block.rows)
        return "\n".join(lines)
    if isinstance(block, CodeBlock):
        return block.code
    return ""
