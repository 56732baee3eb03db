"""Reading of signed numeric literals into exact or floating values."""

from __future__ import annotations

from fractions import Fraction

from space_vectors.models import Number
from space_vectors.warning_policy import emit_warning


def read_number(text: str) -> Number:
    """Convert a number token to a value.

    ``a/b`` gives an exact ``Fraction`` (an ``int`` when it divides evenly),
    ``a.b`` gives a ``float`` and a bare integer gives an ``int``. Whitespace
    between the sign and the digits is allowed.
    """
    token = "".join(text.split())
    if "/" in token:
        numerator, denominator = token.split("/")
        if int(denominator) == 0:
            emit_warning("W01", f"Division by zero in literal {token!r}")
            return float("nan")
        value = Fraction(int(numerator), int(denominator))
        return value.numerator if value.denominator == 1 else value
    if "." in token:
        return float(token)
    return int(token)
