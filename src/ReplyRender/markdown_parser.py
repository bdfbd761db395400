from __future__ import annotations

import logging
import re
from typing import List

from .inline_parser import format_inline
from .model import (
    Block,
    CodeBlock,
    CodeSegment,
    Document,
    Heading,
    Inline,
    ListBlock,
    Paragraph,
    ProseSegment,
)
from .table_parser import is_table_line, recognize_table

FENCE_OPEN_RE = re.compile(r"^\s*```([^\s`]+)?\s*$")
FENCE = "```"
HEADING_RE = re.compile(r"^(#+)\s+(.+)$")
LIST_MARKER_RE = re.compile(r"^(?:[-*] |\d+\.\s)")
LIST_STRIP_RE = re.compile(r"^(?:[-*]|\d+\.)\s+")
MAX_HEADING_LEVEL = 6


def parse_reply(reply: str) -> Document:
    """Parse an assistant reply into a Document. Never raises for any string input."""
    blocks: List[Block] = []
    for segment in segment_reply(reply):
        if isinstance(segment, CodeSegment):
            blocks.append(CodeBlock(language=segment.language, code=segment.code))
        else:
            blocks.extend(parse_prose(segment.text))
    return Document(blocks=tuple(blocks))


def segment_reply(reply: str) -> list[CodeSegment | ProseSegment]:
    """Split a reply into fenced code segments and the prose between them."""
    lines = reply.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    segments: list[CodeSegment | ProseSegment] = []
    prose: list[str] = []

    def flush_prose() -> None:
        text = "\n".join(prose)
        if text.strip():
            segments.append(ProseSegment(text=text))
        prose.clear()

    i = 0
    while i < len(lines):
        match = FENCE_OPEN_RE.match(lines[i])
        if match is None:
            prose.append(lines[i])
            i += 1
            continue
        close = _find_fence_close(lines, i + 1)
        if close is None:
            logging.debug("Unterminated code fence at line %d, keeping the rest as prose", i + 1)
            prose.extend(lines[i:])
            break
        flush_prose()
        segments.append(CodeSegment(language=match.group(1), code="\n".join(lines[i + 1 : close])))
        i = close + 1
    flush_prose()
    return segments


def _find_fence_close(lines: list[str], start: int) -> int | None:
    for idx in range(start, len(lines)):
        if lines[idx].strip() == FENCE:
            return idx
    return None


def parse_prose(text: str) -> list[Block]:
    """Classify prose lines into headings, lists, tables and paragraphs."""
    state = _ProseState()
    for line in text.split("\n"):
        state.feed(line)
    state.flush_paragraph()
    state.flush_list()
    state.flush_table()
    return state.blocks


class _ProseState:
    """Open-block accumulators for one prose segment; at most one is non-empty."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.paragraph: list[str] = []
        self.items: list[Inline] = []
        self.table_lines: list[str] = []

    def feed(self, line: str) -> None:
        stripped = line.strip()

        if is_table_line(line):
            if not self.table_lines:
                self.flush_paragraph()
                self.flush_list()
            self.table_lines.append(line)
            return

        if self.table_lines:
            self.flush_table()

        heading = HEADING_RE.match(stripped)
        if heading:
            self.flush_paragraph()
            self.flush_list()
            level = min(len(heading.group(1)), MAX_HEADING_LEVEL)
            self.blocks.append(Heading(level=level, inline=format_inline(heading.group(2).strip())))
            return

        if LIST_MARKER_RE.match(stripped):
            self.flush_paragraph()
            self.items.append(format_inline(LIST_STRIP_RE.sub("", stripped, count=1)))
            return

        if not stripped:
            self.flush_paragraph()
            self.flush_list()
            return

        self.flush_list()
        self.paragraph.append(line)

    def flush_paragraph(self) -> None:
        if self.paragraph:
            self.blocks.append(Paragraph(inline=format_inline("\n".join(self.paragraph))))
            self.paragraph = []

    def flush_list(self) -> None:
        if self.items:
            self.blocks.append(ListBlock(items=tuple(self.items)))
            self.items = []

    def flush_table(self) -> None:
        if not self.table_lines:
            return
        table = recognize_table(self.table_lines)
        if table is not None:
            self.blocks.append(table)
        else:
            # Not a table: keep the raw lines as one paragraph.
            self.paragraph.extend(self.table_lines)
            self.flush_paragraph()
        self.table_lines = []
