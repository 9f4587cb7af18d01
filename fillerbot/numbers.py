"""Integer conversions: ``d``, ``i``, ``u``, ``o``, ``x``, ``X`` and ``p``."""

from __future__ import annotations

from dataclasses import replace

from .spec import Arguments, FormatSpec

_DIGITS = "0123456789abcdef"

_SIGNED_BITS = {0: 32, 1: 16, 2: 8, 3: 64, 4: 64}
_UNSIGNED_BITS = {1: 16, 2: 8, 3: 64, 4: 64}


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def to_base(value: int, base: int, upper: bool) -> str:
    """Return the digits of a non-negative ``value`` in ``base`` (2 to 16)."""
    if value < 0:
        raise ValueError("value must not be negative")
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(_DIGITS[remainder])
        if value == 0:
            break
    text = "".join(reversed(digits))
    return text.upper() if upper else text


def _read_signed(spec: FormatSpec, args: Arguments) -> int:
    # An ``L`` length on an integer conversion reads no argument at all.
    if spec.size not in _SIGNED_BITS:
        return 0
    return _wrap_signed(int(args.take()), _SIGNED_BITS[spec.size])


def _read_unsigned(spec: FormatSpec, args: Arguments) -> int:
    if spec.size in _UNSIGNED_BITS:
        bits = _UNSIGNED_BITS[spec.size]
    elif spec.conversion == "p":
        bits = 64
    else:
        bits = 32
    raw = args.take()
    value = 0 if raw is None else int(raw)
    return value & ((1 << bits) - 1)


def _adjust_prefix(spec: FormatSpec, value: int) -> None:
    conversion = spec.conversion
    if conversion == "o":
        spec.sharp = 0 if value == 0 and spec.precision != 0 else 1
    if (value == 0 and conversion != "o") or (
        spec.precision > 0 and conversion == "o"
    ):
        spec.sharp = 0
    if conversion == "p":
        spec.sharp = 2


def _prefix(spec: FormatSpec) -> str:
    if spec.sharp == 2:
        return "0X" if spec.conversion == "X" else "0x"
    return "0" if spec.sharp else ""


def format_number(spec: FormatSpec, args: Arguments) -> str:
    """Format the next argument for an integer or pointer conversion.

    The given ``spec`` is left untouched; the value is taken from ``args``
    and truncated to the width its length modifier names.
    """
    spec = replace(spec)
    conversion = spec.conversion

    if conversion in ("d", "i"):
        signed = _read_signed(spec, args)
        spec.base = 10
        if signed < 0:
            spec.sign = 1
        value = abs(signed)
    else:
        value = _read_unsigned(spec, args)
        spec.base = {"u": 10, "o": 8}.get(conversion, 16)

    upper = conversion == "X"
    digits = to_base(value, spec.base, upper)
    length = len(digits)

    if spec.precision >= 0:
        spec.zero = 0
        if spec.precision == 0 and value == 0:
            length = 0
            digits = ""
        spec.precision = max(spec.precision - length, 0)
    if spec.sharp or conversion == "p":
        _adjust_prefix(spec, value)
    if spec.plus and (conversion == "u" or spec.sign):
        spec.plus = 0
    if spec.space:
        if conversion == "u" or spec.plus or spec.sign:
            spec.space = 0
        if (
            spec.width > length + spec.precision
            and spec.precision != -1
            and spec.minus == 0
            and spec.zero == 0
        ):
            spec.space = 0
    if spec.width:
        spec.width -= spec.sign + spec.space + spec.plus + spec.sharp + length
        if spec.precision > 0:
            spec.width -= spec.precision
        spec.width = max(spec.width, 0)

    zeros = "0" * max(spec.precision, 0)
    prefix = _prefix(spec)
    sign = "-" if spec.sign else ("+" if spec.plus else "")
    space = " " if spec.space else ""
    body = zeros + digits

    if spec.minus:
        return space + sign + prefix + body + " " * spec.width
    if spec.zero:
        return sign + space + prefix + "0" * spec.width + body
    return space + " " * spec.width + prefix + sign + body