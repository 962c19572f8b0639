"""Chat messages in the form of a bot command."""

from __future__ import annotations

from dataclasses import dataclass

from takopi.api import get_logger

from ..formatting import html_to_markdown, unescape_entities
from ..types import MatrixChatMessage
from .parse import split_command_args, split_command_name, trim

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ChatCommand:
    """A command parsed out of a chat message.

    For the message `/define <b>java</b> "foo bar" 2` with trigger `/`, the
    name is `define` and the content is `<b>java</b> "foo bar" 2`.
    Formatting that was open before the name ended is re-opened at the start
    of the content.
    """

    message: MatrixChatMessage
    name: str
    content: str

    @property
    def is_fixed_width_font(self) -> bool:
        return self.message.is_fixed_width_font

    @property
    def content_markdown(self) -> str:
        """The content with its HTML formatting converted to Markdown."""
        return html_to_markdown(self.content, self.is_fixed_width_font)

    def content_as_args(self) -> tuple[str, ...]:
        """The content as Markdown, split into arguments.

        `/define <b>java</b> "foo bar" 2` gives `("**java**", "foo bar", "2")`.
        """
        if not trim(self.content):
            return ()
        return split_command_args(trim(self.content_markdown))

    @classmethod
    def from_message(
        cls, message: MatrixChatMessage, trigger: str | None = None
    ) -> ChatCommand | None:
        """Parse a command out of a chat message.

        Args:
            message: The received message.
            trigger: The command prefix, or None to treat the first word of
                the message as the command name.

        Returns:
            The command, or None if the message is not a command.
        """
        body = message.html
        if body is None:
            return None

        parts = split_command_name(body)
        name = unescape_entities(parts.command_name_raw)
        if trigger is not None:
            if not name.startswith(trigger):
                return None
            name = name[len(trigger) :]
        if not name:
            logger.debug(
                "matrix.command.empty_name",
                event_id=message.event_id,
                trigger=trigger,
            )
            return None

        if parts.content_start is None:
            content = ""
        else:
            content = body[parts.content_start :]
            if not message.is_fixed_width_font:
                content = trim(content)
        content = "".join(parts.open_tags_before_command_name) + content

        logger.debug(
            "matrix.command.parsed",
            event_id=message.event_id,
            name=name,
            reopened_tags=len(parts.open_tags_before_command_name),
        )
        return cls(message=message, name=name, content=content)
