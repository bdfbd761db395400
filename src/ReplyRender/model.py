from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class InlineElement:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class InlineText(InlineElement):
    text: str


@dataclass(frozen=True)
class InlineCode(InlineElement):
    code: str


@dataclass(frozen=True)
class InlineBold(InlineElement):
    children: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class InlineItalic(InlineElement):
    children: Tuple[InlineElement, ...]


@dataclass(frozen=True)
class InlineLink(InlineElement):
    children: Tuple[InlineElement, ...]
    url: str


Inline = Tuple[InlineElement, ...]


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Document:
    blocks: Tuple[Block, ...] = ()


@dataclass(frozen=True)
class Heading(Block):
    level: int
    inline: Inline


@dataclass(frozen=True)
class Paragraph(Block):
    inline: Inline


@dataclass(frozen=True)
class ListBlock(Block):
    items: Tuple[Inline, ...]


@dataclass(frozen=True)
class CodeBlock(Block):
    language: str | None
    code: str


@dataclass(frozen=True)
class TableBlock(Block):
    header: Tuple[Inline, ...]
    rows: Tuple[Tuple[Inline, ...], ...]

    def __post_init__(self) -> None:
        width = len(self.header)
        for row in self.rows:
            if len(row) != width:
                raise ValueError(f"Table row has {len(row)} cells, header has {width}.")


@dataclass(frozen=True)
class CodeSegment:
    language: str | None
    code: str


@dataclass(frozen=True)
class ProseSegment:
    text: str
