"""Exact decimal digit strings for the parts of a binary floating-point value.

The long-double formatter never converts through binary floating point:
it expands the 64-bit significand and the power of two into decimal digit
strings, multiplies them, places the decimal point and rounds the text.
"""

from __future__ import annotations

_DECIMAL = frozenset("0123456789")
_UINT64_LIMIT = 1 << 64
_FRACTION_BITS = 63
_UINT64_MASK = _UINT64_LIMIT - 1


def _check_digits(text: str, what: str) -> None:
    if not text or not set(text) <= _DECIMAL:
        raise ValueError(f"{what} must be a non-empty string of decimal digits")


def _check_mantissa(mantissa: int) -> None:
    if not 0 <= mantissa < _UINT64_LIMIT:
        raise ValueError("mantissa must fit in 64 unsigned bits")


def mantissa_digits(mantissa: int) -> str:
    """Return the 64-bit significand as 64 decimal digits.

    The significand is read with its binary point after the top bit, so
    the result is one integer digit followed by 63 fraction digits, with
    no decimal point. The expansion is exact.
    """
    _check_mantissa(mantissa)
    width = _FRACTION_BITS + 1
    return str(mantissa * 5**_FRACTION_BITS).zfill(width)


def power_digits(exponent: int) -> str:
    """Return the decimal digits of ``2 ** exponent``.

    For a positive exponent these are the digits of the integer, for zero
    the single digit ``1``. For a negative exponent ``-p`` they are the
    ``p`` digits that follow the decimal point of ``2 ** -p``.
    """
    if exponent > 0:
        return str(2**exponent)
    if exponent == 0:
        return "1"
    places = -exponent
    return str(5**places).zfill(places)


def multiply_digits(left: str, right: str) -> str:
    """Multiply two decimal digit strings.

    The product is written in ``len(left) + len(right)`` digits, keeping
    leading zeros, so that a decimal point can be placed by counting the
    fraction digits of both factors.
    """
    _check_digits(left, "left")
    _check_digits(right, "right")
    width = len(left) + len(right)
    return str(int(left) * int(right)).zfill(width)


def round_digits(text: str, precision: int) -> str:
    """Round a decimal string such as ``"12.3456"`` to ``precision`` places.

    Only the first dropped digit decides: five or more rounds the kept
    digits up, carrying into the integer part (which may gain a leading
    ``1``). Missing fraction digits are filled with zeros. With a
    precision of zero the decimal point is dropped as well.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    whole, dot, fraction = text.partition(".")
    if not dot:
        raise ValueError("text must contain a decimal point")
    _check_digits(whole, "integer part")
    if fraction and not set(fraction) <= _DECIMAL:
        raise ValueError("fraction part must hold decimal digits only")

    kept = fraction[:precision].ljust(precision, "0")
    round_up = precision < len(fraction) and fraction[precision] >= "5"
    digits = whole + kept
    if round_up:
        digits = str(int(digits) + 1).zfill(len(digits))

    if precision == 0:
        return digits
    split = len(digits) - precision
    return f"{digits[:split]}.{digits[split:]}"


def nan_or_inf(mantissa: int, upper: bool) -> str:
    """Name the special value whose all-ones exponent has this significand.

    The two top bits and the remaining 62 bits decide, as in the x87
    extended format: a zero tail with top bits ``00`` or ``10`` is an
    infinity, anything else is not a number.
    """
    _check_mantissa(mantissa)
    head = mantissa >> 62
    tail = (mantissa << 2) & _UINT64_MASK
    if head in (1, 3):
        name = "nan"
    else:
        name = "inf" if tail == 0 else "nan"
    return name.upper() if upper else name