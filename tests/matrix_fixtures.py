"""Shared builders for Matrix message tests."""

from __future__ import annotations

from takopi_matrix_commands.types import MatrixChatMessage


def make_matrix_message(
    *,
    text: str | None,
    fixed_width: bool = False,
    room_id: str = "!room:example.org",
    event_id: str = "$msg:example.org",
    sender: str = "@user:example.org",
) -> MatrixChatMessage:
    return MatrixChatMessage(
        room_id=room_id,
        event_id=event_id,
        sender=sender,
        html=text,
        fixed_width=fixed_width,
        timestamp=1_700_000_000_000,
    )
