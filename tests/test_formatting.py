"""Tests for HTML to Markdown conversion."""

from __future__ import annotations

import pytest

from takopi_matrix_commands.formatting import html_to_markdown, unescape_entities


@pytest.mark.parametrize(
    ("html", "expected"),
    [
        ("<b>bold</b> <strong>strong</strong>", "**bold** **strong**"),
        ("<i>it</i> <em>em</em>", "*it* *em*"),
        ("<code>x = 1</code>", "`x = 1`"),
        ("<strike>old</strike> <del>gone</del> <s>x</s>", "~~old~~ ~~gone~~ ~~x~~"),
        ('<a href="https://example.org">site</a>', "[site](https://example.org)"),
        ("<a>no target</a>", "no target"),
        ("line<br>next<br/>last", "line\nnext\nlast"),
        ("<span class='x'>kept</span>", "kept"),
        ("<pre>x = 1</pre>", "```\nx = 1\n```"),
        ("a &amp; b &lt;c&gt;", "a & b <c>"),
    ],
)
def test_html_to_markdown(html: str, expected: str) -> None:
    assert html_to_markdown(html, False) == expected


def test_html_to_markdown_leaves_plain_text_unchanged() -> None:
    text = '**already** converted "foo bar" 2'

    assert html_to_markdown(text, False) == text
    assert html_to_markdown(html_to_markdown(text, False), False) == text


def test_html_to_markdown_fixed_width_indents_lines() -> None:
    assert html_to_markdown("a &lt; b\nc", True) == "    a < b\n    c"


def test_unescape_entities() -> None:
    assert unescape_entities("&amp;&lt;&gt;&quot;&#39;") == "&<>\"'"
    assert unescape_entities("plain") == "plain"
