from __future__ import annotations

import re
from typing import Callable, List, Union

from .model import (
    Inline,
    InlineBold,
    InlineCode,
    InlineElement,
    InlineItalic,
    InlineLink,
    InlineText,
)

CODE_RE = re.compile(r"`([^`]+)`")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
# A lone "*" only; either side of a "**" pair is skipped.
ITALIC_RE = re.compile(r"(?<!\*)\*(?!\*)([^*]+)\*(?!\*)")
LINK_RE = re.compile(r"\[([^\[\]]+)\]\(([^()\s]+)\)")

_Fragment = Union[str, InlineElement]


def format_inline(text: str) -> Inline:
    """Split a run of text into inline nodes.

    Passes run in precedence order: code spans, bold, italic, links. Each pass
    only looks at the plain strings left over by the passes before it.
    """
    fragments: List[_Fragment] = [text] if text else []
    fragments = _split(fragments, CODE_RE, lambda m: InlineCode(m.group(1)))
    fragments = _split(fragments, BOLD_RE, lambda m: InlineBold((InlineText(m.group(1)),)))
    fragments = _split(fragments, ITALIC_RE, lambda m: InlineItalic((InlineText(m.group(1)),)))
    fragments = _split(fragments, LINK_RE, lambda m: InlineLink((InlineText(m.group(1)),), m.group(2)))
    return tuple(InlineText(part) if isinstance(part, str) else part for part in fragments)


def _split(
    fragments: List[_Fragment],
    pattern: re.Pattern,
    build: Callable[[re.Match], InlineElement],
) -> List[_Fragment]:
    result: List[_Fragment] = []
    for fragment in fragments:
        if not isinstance(fragment, str):
            result.append(fragment)
            continue
        last = 0
        for match in pattern.finditer(fragment):
            if match.start() > last:
                result.append(fragment[last : match.start()])
            result.append(build(match))
            last = match.end()
        if last < len(fragment):
            result.append(fragment[last:])
    return result


def inline_to_text(inlines: Inline) -> str:
    """Flatten inline nodes to their visible text (link targets dropped)."""
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, InlineText):
            parts.append(inline.text)
        elif isinstance(inline, InlineCode):
            parts.append(inline.code)
        elif isinstance(inline, (InlineBold, InlineItalic, InlineLink)):
            parts.append(inline_to_text(inline.children))
    return "".join(parts)
