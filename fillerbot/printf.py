"""The formatter entry points: walk a format string and expand conversions."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .floats import format_float
from .numbers import format_number
from .spec import Arguments, FormatSpec, parse_spec
from .text import format_bits, format_char, format_percent, format_string

COLORS = {
    "red": "\x1b[38;5;196m",
    "green": "\x1b[38;5;48m",
    "blue": "\x1b[38;5;69m",
    "yellow": "\x1b[38;5;226m",
    "orange": "\x1b[38;5;208m",
    "pink": "\x1b[38;5;205m",
    "neon": "\x1b[38;5;123m",
    "eoc": "\x1b[0m",
}


def _color_at(fmt: str, pos: int) -> tuple[str, int] | None:
    """Match ``{name}`` at ``pos``; return the escape and the index of ``}``."""
    for name, code in COLORS.items():
        if fmt.startswith(name + "}", pos + 1):
            return code, pos + 1 + len(name)
    return None


def _convert(spec: FormatSpec, args: Arguments) -> str:
    if spec.dollar > 1:
        args.skip(spec.dollar - 1)
    conversion = spec.conversion
    if conversion == "c":
        text = format_char(spec, args.take())
    elif conversion == "s":
        text = format_string(spec, args.take())
    elif conversion == "b":
        text = format_bits(spec, args.take())
    elif conversion == "%":
        text = format_percent(spec)
    elif conversion in ("f", "F"):
        text = format_float(spec, args)
    else:
        text = format_number(spec, args)
    if spec.dollar == 0:
        args.commit()
    else:
        args.restore()
    return text


def _render(fmt: str, values: tuple[Any, ...]) -> tuple[str, int]:
    """Return the expanded text and the count of characters outside escapes."""
    args = Arguments(values)
    pieces: list[str] = []
    count = 0
    pos = 0
    end = len(fmt)
    while pos < end:
        if fmt[pos] == "{":
            match = _color_at(fmt, pos)
            if match is not None:
                code, pos = match
                pieces.append(code)
        if fmt[pos] != "%":
            pieces.append(fmt[pos])
            count += 1
        else:
            spec, pos = parse_spec(fmt, pos + 1, args)
            if spec.conversion:
                text = _convert(spec, args)
                pieces.append(text)
                count += len(text)
            elif pos < end and fmt[pos] != "%":
                pieces.append(fmt[pos])
                count += 1
        if pos >= end:
            break
        pos += 1
    return "".join(pieces), count


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions expanded from ``args``.

    ``{red}``, ``{green}`` and the other colour names insert a terminal
    colour escape; the closing brace is copied through after it.
    Raises IndexError when the format needs more arguments than given.
    """
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded format to ``file`` (standard output by default).

    Returns the number of characters written, not counting colour escapes.
    """
    text, count = _render(fmt, args)
    out = sys.stdout if file is None else file
    out.write(text)
    out.flush()
    return count