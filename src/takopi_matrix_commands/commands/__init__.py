"""Command handling for Matrix transport.

This module provides command name splitting, argument parsing, and the
parsed command value.
"""

from __future__ import annotations

from .command import ChatCommand
from .parse import ParseResult, split_command_args, split_command_name

__all__ = [
    "ChatCommand",
    "ParseResult",
    "split_command_args",
    "split_command_name",
]
