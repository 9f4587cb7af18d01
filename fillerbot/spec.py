"""Conversion specifications: flags, width, precision, length and type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

CONVERSIONS = "cs%bfFdiuopxX"
_FLAGS = "-+ #0"
_LENGTH_CHARS = "lLhz"
_WHITESPACE = " \t\n\v\f\r"

_INT64_MAX = 9223372036854775807


def _int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _char(fmt: str, pos: int) -> str:
    return fmt[pos] if 0 <= pos < len(fmt) else ""


def _is_nonzero_digit(ch: str) -> bool:
    return ch != "" and "1" <= ch <= "9"


def _skip_digits(fmt: str, pos: int) -> int:
    while _char(fmt, pos).isdigit() and _char(fmt, pos) in "0123456789":
        pos += 1
    return pos


@dataclass
class FormatSpec:
    """One parsed conversion.

    Flags are integers so that they can take part in width arithmetic:
    ``sharp`` is 2 when ``#`` is given (the length of ``0x``).
    ``size`` is 0 (none), 1 (``h``), 2 (``hh``), 3 (``l``/``z``),
    4 (``ll``) or 5 (``L``). ``precision`` is -1 when absent and
    ``conversion`` is empty when no known conversion character follows.
    """

    width: int = 0
    precision: int = -1
    dollar: int = 0
    sign: int = 0
    base: int = 0
    minus: int = 0
    plus: int = 0
    space: int = 0
    sharp: int = 0
    zero: int = 0
    size: int = 0
    conversion: str = ""


class Arguments:
    """A cursor over the values handed to a formatting call.

    A saved mark lets positional (``n$``) conversions rewind to the
    point where the last ordinary conversion finished.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = tuple(values)
        self._cursor = 0
        self._mark = 0

    def take(self) -> Any:
        """Return the next value and advance past it."""
        if self._cursor >= len(self._values):
            raise IndexError("format needs more arguments than were given")
        value = self._values[self._cursor]
        self._cursor += 1
        return value

    def skip(self, count: int) -> None:
        """Discard the next ``count`` values."""
        for _ in range(count):
            self.take()

    def commit(self) -> None:
        """Remember the current position as the rewind point."""
        self._mark = self._cursor

    def restore(self) -> None:
        """Go back to the remembered position."""
        self._cursor = self._mark


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the formatter reads widths.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Values above the signed 64-bit range give -1 (or 0
    when negative); others are truncated to a signed 32-bit integer.
    """
    pos = 0
    while _char(text, pos) != "" and _char(text, pos) in _WHITESPACE:
        pos += 1
    negative = False
    if _char(text, pos) in ("-", "+") and _char(text, pos) != "":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    while _char(text, pos) != "" and _char(text, pos) in "0123456789":
        value = (value * 10 + int(text[pos])) & 0xFFFFFFFFFFFFFFFF
        pos += 1
    if value > _INT64_MAX:
        return 0 if negative else -1
    result = _int32(value)
    return _int32(-result) if negative else result


def _parse_flags(spec: FormatSpec, fmt: str, pos: int) -> int:
    while _char(fmt, pos) != "" and _char(fmt, pos) in _FLAGS:
        ch = fmt[pos]
        if ch == "-":
            spec.minus = 1
        elif ch == "+":
            spec.plus = 1
        elif ch == "#":
            spec.sharp = 2
        elif ch == "0":
            spec.zero = 1
        else:
            spec.space = 1
        pos += 1
    return pos


def _parse_width(spec: FormatSpec, fmt: str, pos: int, args: Arguments) -> int:
    if _char(fmt, pos) == "*":
        spec.width = _int32(int(args.take()))
        if spec.width < 0:
            spec.minus = 1
            spec.width = _int32(-spec.width)
        if spec.width < 0:
            spec.width = 0
        pos += 1
    if _is_nonzero_digit(_char(fmt, pos)):
        spec.width = max(atoi(fmt[pos:]), 0)
        pos = _skip_digits(fmt, pos)
    if _char(fmt, pos) == "$":
        spec.dollar = spec.width
        spec.width = 0
        pos += 1
    return pos


def _parse_precision(spec: FormatSpec, fmt: str, pos: int, args: Arguments) -> int:
    spec.precision = 0
    if pos >= len(fmt):
        return pos
    if fmt[pos] == "*":
        spec.precision = _int32(int(args.take()))
        pos += 1
    else:
        spec.precision = atoi(fmt[pos:])
    if spec.precision < 0:
        spec.precision = -1
    return _skip_digits(fmt, pos)


def _parse_size(spec: FormatSpec, fmt: str, pos: int) -> int:
    ch = _char(fmt, pos)
    nxt = _char(fmt, pos + 1)
    if ch == "h":
        spec.size = 2 if nxt == "h" else 1
    elif ch in ("l", "z"):
        spec.size = 4 if nxt == "l" else 3
    elif ch == "L":
        spec.size = 5
    while _char(fmt, pos) != "" and _char(fmt, pos) in _LENGTH_CHARS:
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Arguments) -> tuple[FormatSpec, int]:
    """Parse the conversion that starts at ``pos`` (just after ``%``).

    Returns the specification and the index of the character that ended
    it: the conversion character when one was recognised, otherwise the
    first character that is not part of a specification (``len(fmt)`` at
    the end of the string). ``*`` widths and precisions are taken from
    ``args``.
    """
    spec = FormatSpec()
    if pos >= len(fmt):
        return spec, pos
    if _char(fmt, pos) in _FLAGS:
        pos = _parse_flags(spec, fmt, pos)
    ch = _char(fmt, pos)
    if ch == "*" or _is_nonzero_digit(ch):
        pos = _parse_width(spec, fmt, pos, args)
    ch = _char(fmt, pos)
    if (ch == "*" or _is_nonzero_digit(ch)) and spec.width == 0:
        pos = _parse_width(spec, fmt, pos, args)
    if _char(fmt, pos) == ".":
        pos = _parse_precision(spec, fmt, pos + 1, args)
    ch = _char(fmt, pos)
    if ch != "" and ch in _LENGTH_CHARS:
        pos = _parse_size(spec, fmt, pos)
    ch = _char(fmt, pos)
    if ch != "" and ch in CONVERSIONS:
        spec.conversion = ch
    return spec, pos