from pathlib import Path

from docx import Document as DocxReader

from ReplyRender.markdown_parser import parse_reply
from ReplyRender.model import Document, Heading, InlineText, Paragraph
from ReplyRender.renderer_docx import render_document
from ReplyRender.renderer_html import render_html, write_html

REPLY = """# Report

Plain text with **bold**, *italic*, `code` and [a link](https://example.com).

- first
- second

| A | B |
|---|---|
| 1 | 2 |

```js
let x = 1 < 2;
```
"""


def test_html_maps_every_node_type():
    html = render_html(parse_reply(REPLY))
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>AI Assistant Response</title>" in html
    assert "<style>" in html
    assert "<h1>Report</h1>" in html
    assert "<strong>bold</strong>" in html
    assert "<em>italic</em>" in html
    assert "<code>code</code>" in html
    assert '<a href="https://example.com" target="_blank" rel="noopener noreferrer">a link</a>' in html
    assert "<ul><li>first</li><li>second</li></ul>" in html
    assert "<th>A</th><th>B</th>" in html
    assert "<td>1</td><td>2</td>" in html
    assert '<code class="language-js">let x = 1 &lt; 2;</code>' in html


def test_html_escapes_text_and_title():
    doc = Document(blocks=(Paragraph(inline=(InlineText("<script>alert(1)</script>"),)),))
    html = render_html(doc, title="Q&A")
    assert "<script>alert" not in html
    assert "&lt;script&gt;" in html
    assert "<title>Q&amp;A</title>" in html


def test_html_drops_unsafe_links():
    html = render_html(parse_reply("[click](javascript:alert(1))"))
    assert 'href="javascript' not in html
    assert "click" in html


def test_html_table_footer_for_long_tables():
    rows = "\n".join(f"| {i} | x |" for i in range(11))
    html = render_html(parse_reply("| N | V |\n|---|---|\n" + rows))
    assert "Showing 11 rows × 2 columns" in html
    short = render_html(parse_reply("| N | V |\n|---|---|\n| 1 | x |"))
    assert "table-footer\">" not in short


def test_paragraph_line_breaks():
    html = render_html(parse_reply("one\ntwo"))
    assert "<p>one<br>\ntwo</p>" in html


def test_write_html(tmp_path: Path):
    out = tmp_path / "nested" / "reply.html"
    write_html(parse_reply(REPLY), out)
    assert out.exists()
    assert "<h1>Report</h1>" in out.read_text(encoding="utf-8")


def test_render_creates_docx(tmp_path: Path):
    doc = Document(
        blocks=(
            Heading(level=1, inline=(InlineText("Introduction"),)),
            Paragraph(inline=(InlineText("Example paragraph."),)),
        )
    )
    output_file = tmp_path / "report.docx"
    render_document(doc, output_file)
    assert output_file.exists()
    assert output_file.stat().st_size > 0


def test_docx_contents(tmp_path: Path):
    out = tmp_path / "reply.docx"
    render_document(parse_reply(REPLY), out, title="Reply")
    reader = DocxReader(out)
    texts = [p.text for p in reader.paragraphs]
    assert "Report" in texts
    assert "Plain text with bold, italic, code and a link." in texts
    assert "first" in texts and "second" in texts
    assert "let x = 1 < 2;" in texts
    assert len(reader.tables) == 1
    assert reader.tables[0].cell(0, 0).text == "A"
    assert reader.tables[0].cell(1, 1).text == "2"
    bold_runs = [run.text for p in reader.paragraphs for run in p.runs if run.bold]
    assert "bold" in bold_runs
    assert reader.core_properties.title == "Reply"


def test_docx_drops_control_characters(tmp_path: Path):
    out = tmp_path / "control.docx"
    render_document(parse_reply("value\x01here `a\x0bb`\n\n```\nx\x00y\n```"), out, title="T\x02")
    texts = [p.text for p in DocxReader(out).paragraphs]
    assert "valuehere ab" in texts
    assert "xy" in texts
