"""Text rendering of evaluation results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Context, Decimal

from space_vectors.models import Line, Plane, PPlane, Vector

# Enough digits to quantize any finite float without overflowing the context.
_DECIMAL_CONTEXT = Context(prec=400)


def format_number(value: object, max_fraction_digits: int = 3, grouping: bool = True) -> str:
    """Format a number the way a US-locale number formatter would.

    Integers are printed verbatim. Floats and fractions are rounded half-even
    to at most *max_fraction_digits* digits, with trailing zeros dropped and
    thousands separated by commas when *grouping* is set.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    x = float(value)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"

    quantum = Decimal(1).scaleb(-max_fraction_digits)
    d = Decimal(repr(x)).quantize(quantum, rounding=ROUND_HALF_EVEN, context=_DECIMAL_CONTEXT)
    text = format(d, ",f" if grouping else "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _signed(text: str) -> str:
    return text if text.startswith("-") else f"+{text}"


def render(value: object, max_fraction_digits: int = 3, grouping: bool = True) -> str:
    """Render an evaluation result as text.

    Vectors print as ``(x, y, z)``, lines as ``<point> + t * <direction>``,
    parametric planes as ``<point> + s * <dir1> + t * <dir2>`` and normal-form
    planes as ``ax+by+cz+d=0``.
    """

    def num(n: object) -> str:
        return format_number(n, max_fraction_digits, grouping)

    def sub(v: object) -> str:
        return render(v, max_fraction_digits, grouping)

    if value is None:
        return "none"
    if isinstance(value, Vector):
        return "(" + ", ".join(num(c) for c in value) + ")"
    if isinstance(value, Line):
        return f"{sub(value.base)} + t * {sub(value.direction)}"
    if isinstance(value, PPlane):
        return f"{sub(value.base)} + s * {sub(value.dir1)} + t * {sub(value.dir2)}"
    if isinstance(value, Plane):
        a, b, c = (num(n) for n in value.normal)
        return f"{a}x{_signed(b)}y{_signed(c)}z{_signed(num(value.offset))}=0"
    if isinstance(value, (tuple, list)):
        return "[" + ", ".join(sub(v) for v in value) + "]"
    if isinstance(value, str):
        return value
    return num(value)
