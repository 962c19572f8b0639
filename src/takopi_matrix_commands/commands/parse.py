"""Command parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass, field

# Non-breaking spaces are word characters, not separators.
_NON_BREAKING = frozenset("\u00a0\u2007\u202f\u0085")
_TRIM_CHARS = "".join(map(chr, range(0x21)))


def _is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _NON_BREAKING


def trim(text: str) -> str:
    """Strip control characters and ASCII spaces from both ends."""
    return text.strip(_TRIM_CHARS)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Result of splitting the command name off a message body.

    `content_start` is None when nothing follows the command name.
    """

    open_tags_before_command_name: tuple[str, ...]
    command_name_raw: str
    content_start: int | None


@dataclass(slots=True)
class _TagFrame:
    name: str
    opening_text: str | None = None


@dataclass(slots=True)
class _CommandSplitter:
    raw: str
    name_chars: list[str] = field(default_factory=list)
    open_tags: list[_TagFrame] = field(default_factory=list)
    in_tag: bool = False
    in_tag_name: bool = False
    in_closing_tag: bool = False
    seen_non_whitespace: bool = False
    tag_start: int = -1
    tag_name_start: int = -1
    tag_name: str | None = None
    content_start: int | None = None

    def run(self) -> ParseResult:
        for index, char in enumerate(self.raw):
            if _is_whitespace(char):
                if not self.seen_non_whitespace:
                    continue
                if not self.in_tag:
                    self.content_start = index + 1
                    break
                self._end_tag_name(index)
                continue

            self.seen_non_whitespace = True

            if char == "<":
                self._start_tag(index)
            elif char == "/" and index > 0 and self.raw[index - 1] == "<":
                self.in_closing_tag = True
                self.tag_name_start = index + 1
            elif char == ">" and self.in_tag:
                self._end_tag(index)
            elif not self.in_tag:
                self.name_chars.append(char)

        open_tags = tuple(
            frame.opening_text
            for frame in self.open_tags
            if frame.opening_text is not None
        )
        return ParseResult(
            open_tags_before_command_name=open_tags,
            command_name_raw="".join(self.name_chars),
            content_start=self.content_start,
        )

    def _start_tag(self, index: int) -> None:
        self.in_tag = True
        self.in_tag_name = True
        self.in_closing_tag = False
        self.tag_start = index
        self.tag_name_start = index + 1
        self.tag_name = None

    def _end_tag_name(self, index: int) -> None:
        if not self.in_tag_name:
            return
        self.tag_name = self.raw[self.tag_name_start : index]
        if not self.in_closing_tag:
            self.open_tags.append(_TagFrame(self.tag_name))
        self.in_tag_name = False

    def _end_tag(self, index: int) -> None:
        self._end_tag_name(index)
        if self.in_closing_tag:
            self._pop_until(self.tag_name)
        elif self.open_tags:
            self.open_tags[-1].opening_text = self.raw[self.tag_start : index + 1]
        self.in_tag = False
        self.in_tag_name = False
        self.in_closing_tag = False

    def _pop_until(self, name: str | None) -> None:
        # Unbalanced markup: frames above the match are discarded with it.
        while self.open_tags:
            frame = self.open_tags.pop()
            if frame.name == name:
                break


def split_command_name(text: str) -> ParseResult:
    """Split the leading command name off an HTML message body.

    Tags that are still open when the name ends are reported by their full
    opening text (outer to inner) so they can be re-opened in front of the
    content. Tags opened and closed inside the name are dropped.

    Args:
        text: The raw HTML body.

    Returns:
        The parse result. Malformed markup never raises.
    """
    return _CommandSplitter(text).run()


def split_command_args(text: str) -> tuple[str, ...]:
    """Split command arguments on whitespace.

    Double quotes group words (and allow empty arguments); a backslash
    escapes the next character anywhere, quotes included.

    Args:
        text: The arguments text to split.

    Returns:
        A tuple of argument strings.
    """
    if not trim(text):
        return ()

    args: list[str] = []
    buf: list[str] = []
    in_quotes = False
    escape_next = False
    for char in text:
        if escape_next:
            buf.append(char)
            escape_next = False
            continue

        if _is_whitespace(char) and not in_quotes:
            if buf:
                args.append("".join(buf))
                buf.clear()
            continue

        if char == '"':
            if in_quotes:
                args.append("".join(buf))
                buf.clear()
            in_quotes = not in_quotes
            continue

        if char == "\\":
            escape_next = True
            continue

        buf.append(char)

    if buf:
        args.append("".join(buf))
    return tuple(args)
