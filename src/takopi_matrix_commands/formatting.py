"""HTML to Markdown conversion for command content."""

from __future__ import annotations

import html
from html.parser import HTMLParser

_INLINE_MARKERS = {
    "b": "**",
    "strong": "**",
    "i": "*",
    "em": "*",
    "code": "`",
    "s": "~~",
    "del": "~~",
    "strike": "~~",
}
_FIXED_WIDTH_INDENT = "    "


def unescape_entities(text: str) -> str:
    """Decode HTML character references (`&amp;` -> `&`)."""
    return html.unescape(text)


class _MarkdownConverter(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._out: list[str] = []
        self._links: list[tuple[str | None, int]] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        marker = _INLINE_MARKERS.get(tag)
        if marker is not None:
            self._out.append(marker)
        elif tag == "a":
            self._links.append((dict(attrs).get("href"), len(self._out)))
            self._out.append("[")
        elif tag == "br":
            self._out.append("\n")
        elif tag == "pre":
            self._out.append("```\n")

    def handle_startendtag(
        self, tag: str, attrs: list[tuple[str, str | None]]
    ) -> None:
        if tag == "br":
            self._out.append("\n")

    def handle_endtag(self, tag: str) -> None:
        marker = _INLINE_MARKERS.get(tag)
        if marker is not None:
            self._out.append(marker)
        elif tag == "a" and self._links:
            href, start = self._links.pop()
            if href:
                self._out.append(f"]({href})")
            else:
                # No target: keep just the link text.
                del self._out[start]
        elif tag == "pre":
            self._out.append("\n```")

    def handle_data(self, data: str) -> None:
        self._out.append(data)

    def result(self) -> str:
        self.close()
        return "".join(self._out)


def html_to_markdown(text: str, fixed_width: bool) -> str:
    """Convert inline HTML formatting to Markdown.

    Fixed-width content is treated as preformatted: entities are decoded and
    every line is indented so it renders as a code block. Text without tags
    or entities comes back unchanged.
    """
    if fixed_width:
        lines = unescape_entities(text).split("\n")
        return "\n".join(f"{_FIXED_WIDTH_INDENT}{line}" for line in lines)
    converter = _MarkdownConverter()
    converter.feed(text)
    return converter.result()
