"""Fixed-point conversions ``f`` and ``F``, printed from the exact binary value."""

from __future__ import annotations

import math
from dataclasses import replace

from .floatdigits import (
    mantissa_digits,
    multiply_digits,
    nan_or_inf,
    power_digits,
    round_digits,
)
from .spec import Arguments, FormatSpec

_DEFAULT_PRECISION = 6
_FRACTION_BITS = 63
_INFINITY_MANTISSA = 1 << 63
_QUIET_NAN_MANTISSA = 0b11 << 62


def _decompose(value: float) -> tuple[int, int]:
    """Split a finite non-zero value into a 64-bit significand and a power of two.

    The significand has its top bit set and its binary point after that
    bit, as in the x87 extended format.
    """
    fraction, exponent = math.frexp(value)
    return int(math.ldexp(fraction, 64)), exponent - 1


def _zero_body(precision: int, sharp: bool) -> str:
    if precision == 0:
        return "0." if sharp else "0"
    return "0." + "0" * precision


def float_body(value: float, precision: int, sharp: bool, upper: bool) -> str:
    """Return the digits of ``abs(value)`` with ``precision`` fraction digits.

    The value is expanded exactly and rounded on the first dropped digit
    (five or more rounds up). With a precision of zero no decimal point is
    written unless ``sharp`` is set. Infinities and NaNs give ``inf`` and
    ``nan``, in capitals when ``upper`` is set.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    value = float(value)
    if math.isinf(value):
        return nan_or_inf(_INFINITY_MANTISSA, upper)
    if math.isnan(value):
        return nan_or_inf(_QUIET_NAN_MANTISSA, upper)
    value = abs(value)
    if value == 0:
        return _zero_body(precision, sharp)

    mantissa, power = _decompose(value)
    product = multiply_digits(mantissa_digits(mantissa), power_digits(power))
    fraction_length = _FRACTION_BITS + (-power if power < 0 else 0)
    whole = product[:-fraction_length].lstrip("0") or "0"
    fraction = product[-fraction_length:]

    body = round_digits(f"{whole}.{fraction}", precision)
    if precision == 0 and sharp:
        body += "."
    return body


def _sign_char(spec: FormatSpec) -> str:
    if spec.sign:
        return "-"
    return "+" if spec.plus else ""


def format_float(spec: FormatSpec, args: Arguments) -> str:
    """Format the next argument for an ``f`` or ``F`` conversion.

    The given ``spec`` is left untouched. A missing precision means six
    digits. Infinities and NaNs are never zero-padded, and a NaN drops
    the ``+`` and space flags.
    """
    spec = replace(spec)
    value = float(args.take())

    if value <= 0:
        if math.copysign(1.0, value) < 0:
            spec.sign = 1
        value = -value

    precision = _DEFAULT_PRECISION if spec.precision < 0 else spec.precision
    body = float_body(value, precision, bool(spec.sharp), spec.conversion == "F")

    first = body[0]
    if first in "nNiI":
        if first in "nN":
            spec.space = 0
            spec.plus = 0
        spec.zero = 0

    if spec.width:
        spec.width = spec.width - len(body) if spec.width >= len(body) else 0
    if spec.space and (spec.plus or spec.sign):
        spec.space = 0
    if spec.plus and spec.sign:
        spec.plus = 0
    if spec.zero and spec.minus:
        spec.zero = 0

    pad_length = spec.width - spec.plus - spec.sign - spec.space
    pad = ("0" if spec.zero else " ") * max(pad_length, 0)
    space = " " if spec.space else ""
    sign = _sign_char(spec)

    if spec.minus:
        return space + sign + body + pad
    if spec.zero:
        return space + sign + pad + body
    return pad + space + sign + body