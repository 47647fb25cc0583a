"""Splitting of raw transport chunks into commands."""

from __future__ import annotations

import re

_DELIMITERS_BYTES = re.compile(rb"[\n\r\x00]+")
_DELIMITERS_TEXT = re.compile(r"[\n\r\x00]+")


def split_commands(chunk: bytes | bytearray | str) -> list[str]:
    """Split ``chunk`` into commands on LF, CR and NUL.

    Runs of delimiters are collapsed and empty commands are never produced.
    Byte input is decoded as UTF-8; invalid sequences are replaced so every
    command can be written to a text stream.

    The tokenizer keeps no state: a command cut in two by the transport comes
    out as two commands.
    """
    if isinstance(chunk, str):
        return [part for part in _DELIMITERS_TEXT.split(chunk) if part]
    return [
        part.decode("utf-8", errors="replace")
        for part in _DELIMITERS_BYTES.split(bytes(chunk))
        if part
    ]
