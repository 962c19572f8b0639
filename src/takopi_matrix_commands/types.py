"""Matrix message types consumed by the command parser."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass

from nio import RoomMessageText

HTML_FORMAT = "org.matrix.custom.html"

_PRE_BLOCK_RE = re.compile(
    r"^\s*<pre[^>]*>(?:(<code[^>]*>)|(?!<code))"
    r"(?P<inner>.*?)(?(1)</code>)</pre>\s*$",
    re.DOTALL,
)


@dataclass(frozen=True, slots=True)
class MatrixChatMessage:
    """A received Matrix text message.

    `html` is always markup: plain-text bodies are escaped on the way in.
    `fixed_width` is set for messages sent as a single preformatted block,
    in which case the `<pre>` wrapper is not part of `html`.
    """

    room_id: str
    event_id: str
    sender: str
    html: str | None
    fixed_width: bool = False
    timestamp: int | None = None

    @property
    def is_fixed_width_font(self) -> bool:
        return self.fixed_width

    @classmethod
    def from_event(cls, room_id: str, event: RoomMessageText) -> MatrixChatMessage:
        body, fixed_width = _event_html(event)
        return cls(
            room_id=room_id,
            event_id=event.event_id,
            sender=event.sender,
            html=body,
            fixed_width=fixed_width,
            timestamp=event.server_timestamp,
        )


def _event_html(event: RoomMessageText) -> tuple[str | None, bool]:
    if event.format == HTML_FORMAT and event.formatted_body:
        match = _PRE_BLOCK_RE.match(event.formatted_body)
        if match is not None and "<pre" not in match.group("inner"):
            return match.group("inner"), True
        return event.formatted_body, False
    if event.body is None:
        return None, False
    return html.escape(event.body, quote=False), False
