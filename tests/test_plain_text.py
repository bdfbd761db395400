from ReplyRender.inline_parser import format_inline
from ReplyRender.markdown_parser import parse_reply
from ReplyRender.model import InlineItalic, InlineText
from ReplyRender.plain_text import to_plain_text


def test_plain_text_layout():
    reply = "## Head\n\nText with **bold** and [a link](https://example.com).\n\n- one\n- `two`"
    assert to_plain_text(parse_reply(reply)) == (
        "Head\n\nText with bold and a link.\n\n• one\n• two"
    )


def test_plain_text_table_and_code():
    reply = "| A | B |\n|---|---|\n| 1 | **2** |\n\n```\nkeep **this**\n```"
    assert to_plain_text(parse_reply(reply)) == "A | B\n1 | 2\n\nkeep **this**"


def test_plain_text_of_empty_document():
    assert to_plain_text(parse_reply("")) == ""


def test_code_span_inside_delimiters_reappears_as_markup():
    # Known limit: a code span splits the delimiter pair, so the stripped text re-forms it.
    text = to_plain_text(parse_reply("*a `b` c*"))
    assert text == "*a b c*"
    assert format_inline(text) == (InlineItalic((InlineText("a b c"),)),)
