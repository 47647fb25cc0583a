"""Command classification."""

from __future__ import annotations

from enum import Enum

BLOCK_OPEN_MARK = "{"
BLOCK_CLOSE_MARK = "}"


class CommandKind(str, Enum):
    PLAIN = "plain"
    BLOCK_OPEN = "block_open"
    BLOCK_CLOSE = "block_close"


def classify_command(command: str) -> CommandKind:
    """Return the kind of ``command``.

    Any token containing ``{`` opens a block, even if it also contains ``}``
    or other characters; the rest of such a token is dropped. Otherwise any
    token containing ``}`` closes a block.
    """
    if BLOCK_OPEN_MARK in command:
        return CommandKind.BLOCK_OPEN
    if BLOCK_CLOSE_MARK in command:
        return CommandKind.BLOCK_CLOSE
    return CommandKind.PLAIN
