import pytest

from bulk.core import split_commands


@pytest.mark.parametrize(
    "chunk, expected",
    [
        (b"", []),
        (b"\n\r\x00", []),
        (b"cmd1\ncmd2\n", ["cmd1", "cmd2"]),
        (b"cmd1\r\ncmd2\r\n", ["cmd1", "cmd2"]),
        (b"a\x00b\rc\nd", ["a", "b", "c", "d"]),
        (b"\n\n\na\n\n\nb\n\n", ["a", "b"]),
        (b"no delimiter", ["no delimiter"]),
        (b"  spaced  \n", ["  spaced  "]),
    ],
)
def test_split_bytes(chunk: bytes, expected: list[str]) -> None:
    assert split_commands(chunk) == expected


def test_split_text_and_bytearray() -> None:
    assert split_commands("x\ny\r\n") == ["x", "y"]
    assert split_commands(bytearray(b"{\nz\n}")) == ["{", "z", "}"]


def test_invalid_utf8_is_replaced() -> None:
    assert split_commands(b"ok\n\xff\xfe\n") == ["ok", "\ufffd\ufffd"]


def test_utf8_commands_are_decoded() -> None:
    assert split_commands("команда\n".encode("utf-8")) == ["команда"]
