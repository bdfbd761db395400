from __future__ import annotations

from pathlib import Path
from typing import Iterable

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

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

DEFAULT_TITLE = "AI Assistant Response"
TABLE_FOOTER_MIN_ROWS = 10

STYLESHEET = """
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; line-height: 1.6; color: #333; background-color: #f9fafb; padding: 2rem; max-width: 1200px; margin: 0 auto; }
.container { background-color: #ffffff; border: 1px solid #e5e7eb; border-radius: 12px; padding: 2rem; box-shadow: 0 4px 6px -1px rgb(0 0 0 / 0.1); }
h1, h2, h3, h4, h5, h6 { margin-top: 1.5rem; margin-bottom: 1rem; }
h1 { font-size: 1.5rem; font-weight: 700; color: #1e40af; border-bottom: 2px solid #dbeafe; padding-bottom: 0.5rem; }
h2 { font-size: 1.25rem; font-weight: 600; color: #15803d; }
h3 { font-size: 1.1rem; font-weight: 600; color: #be185d; }
h4, h5, h6 { font-size: 0.95rem; font-weight: 600; color: #4f46e5; }
p { margin-bottom: 1rem; }
strong { font-weight: 700; color: #111827; }
em { font-style: italic; color: #374151; }
a { color: #2563eb; text-decoration: none; }
a:hover { text-decoration: underline; }
ul { list-style: none; padding-left: 1rem; margin-bottom: 1rem; }
li { position: relative; padding-left: 1.5rem; margin-bottom: 0.5rem; }
li::before { content: ''; position: absolute; left: 0; top: 0.6em; width: 6px; height: 6px; border-radius: 50%; background: linear-gradient(to right, #60a5fa, #a78bfa); }
pre { background-color: #f3f4f6; border: 1px solid #e5e7eb; border-radius: 8px; padding: 1rem; overflow-x: auto; font-size: 0.9em; }
.code-language { display: inline-block; margin-bottom: 0.5rem; padding: 0.1rem 0.5rem; border-radius: 6px; font-size: 0.75rem; font-weight: 600; color: #059669; background-color: #ecfdf5; }
code { font-family: "Courier New", Courier, monospace; color: #111827; }
pre code { background-color: transparent; padding: 0; }
code:not(pre > code) { background-color: #e0f2f1; color: #0d9488; padding: 0.2em 0.4em; font-size: 85%; border-radius: 3px; }
.table-wrapper { margin-bottom: 1.5rem; border-radius: 12px; border: 1px solid #e5e7eb; background-color: #ffffff; overflow: hidden; }
.table-header, .table-footer { padding: 8px 16px; background-color: #f8fafc; font-size: 0.75rem; color: #64748b; }
.table-footer { border-top: 1px solid #e5e7eb; text-align: center; }
.table-container { max-height: 400px; overflow: auto; }
table { width: 100%; border-collapse: collapse; font-size: 0.875rem; }
th, td { border: 1px solid #e5e7eb; padding: 12px; text-align: left; white-space: nowrap; }
th { background: linear-gradient(to right, #dbeafe, #e0f2fe); font-weight: 600; position: sticky; top: 0; color: #1e40af; border-bottom: 2px solid #3b82f6; }
tbody tr:nth-child(even) { background-color: #f8fafc; }
@media (max-width: 768px) { body { padding: 1rem; } .container { padding: 1rem; } .table-container { max-height: 300px; } }
"""

_md = MarkdownIt("commonmark")


def render_html(doc: Document, title: str = DEFAULT_TITLE) -> str:
    """Wrap the rendered Document in a standalone HTML page with an embedded stylesheet."""
    body = "\n".join(_render_block(block) for block in doc.blocks)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{escapeHtml(title)}</title>\n"
        f"<style>{STYLESHEET}</style>\n"
        "</head>\n"
        f'<body><div class="container"><div class="markdown-content">\n{body}\n</div></div></body>\n'
        "</html>\n"
    )


def write_html(doc: Document, output_path: str | Path, title: str = DEFAULT_TITLE) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html(doc, title=title), encoding="utf-8")


def _render_block(block: Block) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{_render_inline(block.inline)}</h{block.level}>"
    elif isinstance(block, Paragraph):
        text = _render_inline(block.inline).replace("\n", "<br>\n")
        return f"<p>{text}</p>"
    elif isinstance(block, ListBlock):
        items = "".join(f"<li>{_render_inline(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"
    elif isinstance(block, TableBlock):
        return _render_table(block)
    elif isinstance(block, CodeBlock):
        return _render_code_block(block)
    return ""


def _render_code_block(block: CodeBlock) -> str:
    badge = ""
    class_attr = ""
    if block.language:
        badge = f'<div class="code-language">{escapeHtml(block.language)}</div>'
        class_attr = f' class="language-{escapeHtml(block.language)}"'
    return f"<pre>{badge}<code{class_attr}>{escapeHtml(block.code)}</code></pre>"


def _render_table(block: TableBlock) -> str:
    head = "".join(f"<th>{_render_inline(cell)}</th>" for cell in block.header)
    body = "".join(
        "<tr>" + "".join(f"<td>{_render_inline(cell)}</td>" for cell in row) + "</tr>" for row in block.rows
    )
    parts = [
        '<div class="table-wrapper">',
        '<div class="table-header">Scroll horizontally and vertically to view all data</div>',
        '<div class="table-container">',
        f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>",
        "</div>",
    ]
    if len(block.rows) > TABLE_FOOTER_MIN_ROWS:
        parts.append(
            f'<div class="table-footer">Showing {len(block.rows)} rows × {len(block.header)} columns</div>'
        )
    parts.append("</div>")
    return "".join(parts)


def _render_inline(inlines: Iterable[InlineElement]) -> str:
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, InlineText):
            parts.append(escapeHtml(inline.text))
        elif isinstance(inline, InlineCode):
            parts.append(f"<code>{escapeHtml(inline.code)}</code>")
        elif isinstance(inline, InlineBold):
            parts.append(f"<strong>{_render_inline(inline.children)}</strong>")
        elif isinstance(inline, InlineItalic):
            parts.append(f"<em>{_render_inline(inline.children)}</em>")
        elif isinstance(inline, InlineLink):
            parts.append(_render_link(inline))
    return "".join(parts)


def _render_link(link: InlineLink) -> str:
    label = _render_inline(link.children)
    url = link.url.strip()
    if not _md.validateLink(url):
        # javascript:, vbscript: and similar targets lose the anchor
        return label
    href = escapeHtml(_md.normalizeLink(url))
    return f'<a href="{href}" target="_blank" rel="noopener noreferrer">{label}</a>'
