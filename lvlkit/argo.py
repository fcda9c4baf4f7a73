"""Parse and print a small JSON subset: objects, strings and integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import IO, Optional, Union

JsonValue = Union[dict, int, str]

_DIGITS = "0123456789"


class ParseError(ValueError):
    """The input is not a valid document.

    ``token`` is the character found where it did not belong, or None at the
    end of input. ``reported`` is False for the one failure that the command
    line tool exits on without printing a message.
    """

    def __init__(self, token: Optional[str], *, reported: bool = True) -> None:
        self.token = token
        self.reported = reported
        if token is None:
            message = "unexpected end of input"
        else:
            message = f"unexpected token '{token}'"
        super().__init__(message)


def _isdigit(c: str) -> bool:
    return len(c) == 1 and c in _DIGITS


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


class _Reader:
    """Character reader with one character of lookahead; '' means end of input."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._ahead: Optional[str] = None

    def peek(self) -> str:
        if self._ahead is None:
            self._ahead = self._stream.read(1)
        return self._ahead

    def get(self) -> str:
        c = self.peek()
        self._ahead = None
        return c

    def accept(self, c: str) -> bool:
        if self.peek() == c:
            self.get()
            return True
        return False

    def expect(self, c: str) -> None:
        if not self.accept(c):
            raise self.unexpected()

    def unexpected(self) -> ParseError:
        return ParseError(self.peek() or None)


def _parse_value(reader: _Reader) -> JsonValue:
    c = reader.peek()
    if c == '"':
        return _parse_string(reader)
    if c == "{":
        return _parse_map(reader)
    if c == "-" or _isdigit(c):
        return _parse_integer(reader)
    raise reader.unexpected()


def _parse_integer(reader: _Reader) -> int:
    sign = 1
    if reader.accept("-"):
        sign = -1
    if not _isdigit(reader.peek()):
        raise reader.unexpected()
    value = 0
    while _isdigit(reader.peek()):
        value = value * 10 + int(reader.get())
    return _to_int32(sign * value)


def _parse_string(reader: _Reader) -> str:
    if not reader.accept('"'):
        raise ParseError(reader.peek() or None, reported=False)
    chars: list[str] = []
    while True:
        c = reader.get()
        if c in ("", '"'):
            break
        if c == "\\":
            c = reader.get()
            if c not in ('"', "\\"):
                raise reader.unexpected()
        chars.append(c)
    if c != '"':
        raise reader.unexpected()
    return "".join(chars)


def _parse_map(reader: _Reader) -> dict:
    reader.expect("{")
    result: dict = {}
    if reader.accept("}"):
        return result
    while True:
        key = _parse_string(reader)
        reader.expect(":")
        result[key] = _parse_value(reader)
        if not reader.accept(","):
            break
    reader.expect("}")
    return result


def argo(stream: IO[str]) -> JsonValue:
    """Read one value from ``stream``, which must hold nothing after it.

    Objects become dicts, strings str and integers int (wrapped to 32 bits).
    No whitespace is allowed anywhere outside strings. Raises ParseError.
    """
    reader = _Reader(stream)
    value = _parse_value(reader)
    if reader.peek() != "":
        raise reader.unexpected()
    return value


def _serialize_string(text: str) -> str:
    escaped = "".join("\\" + c if c in '\\"' else c for c in text)
    return f'"{escaped}"'


def serialize(value: JsonValue) -> str:
    """Render ``value`` in the same compact form that ``argo`` reads."""
    if isinstance(value, bool):
        raise TypeError("booleans cannot be serialized")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return _serialize_string(value)
    if isinstance(value, dict):
        items = ",".join(
            f"{_serialize_string(key)}:{serialize(item)}" for key, item in value.items()
        )
        return "{" + items + "}"
    raise TypeError(f"cannot serialize {type(value).__name__}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the file named by the single argument and print it back."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        with open(args[0], encoding="utf-8", newline="") as stream:
            value = argo(stream)
    except ParseError as exc:
        if exc.reported:
            print(exc)
        return 1
    except (OSError, UnicodeDecodeError):
        return 1
    sys.stdout.write(serialize(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())