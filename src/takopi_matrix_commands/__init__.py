"""Bot command parsing for HTML-formatted Matrix messages."""

from __future__ import annotations

from .commands import ChatCommand, ParseResult, split_command_args, split_command_name
from .config import CommandConfig, load_command_config
from .formatting import html_to_markdown, unescape_entities
from .types import MatrixChatMessage

__all__ = [
    "ChatCommand",
    "CommandConfig",
    "MatrixChatMessage",
    "ParseResult",
    "html_to_markdown",
    "load_command_config",
    "split_command_args",
    "split_command_name",
    "unescape_entities",
]
