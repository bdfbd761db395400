from ReplyRender.inline_parser import format_inline, inline_to_text
from ReplyRender.model import InlineBold, InlineCode, InlineItalic, InlineLink, InlineText


def test_empty_text_gives_no_nodes():
    assert format_inline("") == ()


def test_code_span_is_not_formatted_inside():
    nodes = format_inline("use `x = **1**` here")
    assert nodes == (InlineText("use "), InlineCode("x = **1**"), InlineText(" here"))


def test_bold_swallows_inner_single_asterisks():
    nodes = format_inline("**bold *not-italic* still bold**")
    assert nodes == (InlineBold((InlineText("bold *not-italic* still bold"),)),)


def test_italic_and_bold_side_by_side():
    nodes = format_inline("*it* and **b**")
    assert nodes == (
        InlineItalic((InlineText("it"),)),
        InlineText(" and "),
        InlineBold((InlineText("b"),)),
    )


def test_link_keeps_label_and_href():
    nodes = format_inline("see [docs](https://example.com/a) now")
    assert nodes == (
        InlineText("see "),
        InlineLink((InlineText("docs"),), "https://example.com/a"),
        InlineText(" now"),
    )


def test_bold_payload_is_not_reinterpreted():
    nodes = format_inline("**[a](b)**")
    assert nodes == (InlineBold((InlineText("[a](b)"),)),)


def test_bold_spans_lines():
    nodes = format_inline("**start\nend** tail")
    assert nodes == (InlineBold((InlineText("start\nend"),)), InlineText(" tail"))


def test_unmatched_delimiters_stay_literal():
    for text in ("2 * 3 = 6", "a ** b", "open `tick", "[label](", "**never closed", "``"):
        assert format_inline(text) == (InlineText(text),)


def test_double_asterisk_is_not_an_italic_delimiter():
    nodes = format_inline("**a* b")
    assert all(not isinstance(node, InlineItalic) for node in nodes)
    assert inline_to_text(nodes) == "**a* b"


def test_inline_to_text_drops_syntax_and_href():
    nodes = format_inline("A `c` **b** *i* [l](http://x)")
    assert inline_to_text(nodes) == "A c b i l"


def test_link_needs_plain_label_and_href():
    assert format_inline("[[a](b)") == (InlineText("["), InlineLink((InlineText("a"),), "b"))
    for text in ("[a](b c)", "[a](f(x))", "[a]("):
        assert not any(isinstance(node, InlineLink) for node in format_inline(text))
