"""Character, string, percent and binary conversions: ``c``, ``s``, ``%``, ``b``."""

from __future__ import annotations

from typing import Any

from .spec import FormatSpec

NULL_STRING = "(null)"
_UINT64_MASK = (1 << 64) - 1
_SIGN_BIT = 31


def _pad(body: str, width: int, left_align: int, fill: str = " ") -> str:
    padding = fill * max(width - len(body), 0)
    return body + padding if left_align else padding + body


def _to_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a character conversion needs a single character")
        return value
    return chr(int(value) & 0xFF)


def format_char(spec: FormatSpec, value: Any) -> str:
    """Format one character, padded with spaces to the field width.

    An integer is truncated to a byte. The zero flag has no effect.
    """
    return _pad(_to_char(value), spec.width, spec.minus)


def format_string(spec: FormatSpec, value: Any) -> str:
    """Format a string, cut to the precision and padded with spaces.

    ``None`` prints as ``(null)``. The zero flag has no effect.
    """
    text = NULL_STRING if value is None else str(value)
    if 0 <= spec.precision < len(text):
        text = text[: spec.precision]
    return _pad(text, spec.width, spec.minus)


def format_percent(spec: FormatSpec) -> str:
    """Format a literal ``%`` in its field.

    Right-aligned fields are filled with zeros when the zero flag is set.
    """
    fill = "0" if spec.zero and not spec.minus else " "
    return _pad("%", spec.width, spec.minus, fill)


def _bit_set(value: int, bit: int) -> bool:
    # The top bit of a 32-bit field is tested with a sign-extended mask,
    # so it lights up when any bit from 31 upwards is set.
    if bit == _SIGN_BIT:
        return value >> _SIGN_BIT != 0
    return bool(value >> bit & 1)


def format_bits(spec: FormatSpec, value: Any) -> str:
    """Format an unsigned 64-bit value in binary.

    The value is shown in 8 bits when it fits a byte, 16 when it fits two
    bytes and 32 otherwise, then padded with spaces to the field width.
    """
    value = int(value) & _UINT64_MASK
    if value <= 0xFF:
        bits = 8
    elif value <= 0xFFFF:
        bits = 16
    else:
        bits = 32
    digits = "".join(
        "1" if _bit_set(value, bit) else "0" for bit in reversed(range(bits))
    )
    return _pad(digits, spec.width, spec.minus)