"""Vector algebra and conversions between plane representations.

Exact inputs (``int`` and ``Fraction``) stay exact through every operation
except those that need a square root or a trigonometric function, which
return ``float``. Division by zero never raises: it yields ``nan`` and a
``W01`` degeneracy warning.
"""

from __future__ import annotations

import math
from fractions import Fraction
from numbers import Rational

from space_vectors.models import Line, Number, Plane, PPlane, Vector
from space_vectors.warning_policy import emit_warning

__all__ = [
    "divide",
    "length",
    "normalize",
    "dotp",
    "cross",
    "area",
    "between",
    "lwith",
    "three_points",
    "param",
    "normal",
    "pwith",
    "make_line",
    "make_plane",
]


def divide(a: Number, b: Number) -> Number:
    """Divide, keeping rationals exact and turning a zero divisor into ``nan``."""
    if b == 0:
        emit_warning("W01", f"Division by zero ({a} / {b}) gives NaN")
        return math.nan
    if isinstance(a, Rational) and isinstance(b, Rational):
        q = Fraction(a) / Fraction(b)
        return q.numerator if q.denominator == 1 else q
    return a / b


def length(v: Vector) -> float:
    """Euclidean length of *v*."""
    return math.sqrt(dotp(v, v))


def normalize(v: Vector) -> Vector:
    """Unit vector in the direction of *v*; components are NaN for a zero vector."""
    n = length(v)
    if n == 0:
        emit_warning("W01", "Normalizing a zero-length vector gives NaN components")
        return Vector(math.nan, math.nan, math.nan)
    return Vector(v.x / n, v.y / n, v.z / n)


def dotp(a: Vector, b: Vector) -> Number:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def area(a: Vector, b: Vector) -> float:
    """Area of the parallelogram spanned by *a* and *b*."""
    return length(cross(a, b))


def between(a: Vector, b: Vector) -> Vector:
    """Vector from point *a* to point *b*."""
    return b - a


def lwith(t: Number, line: Line) -> Vector:
    """Point of *line* at parameter *t*."""
    return line.base + line.direction.scaled(t)


def three_points(plane: Plane | PPlane) -> tuple[Vector, Vector, Vector]:
    """The axis intercepts of *plane*, one point per axis.

    An axis the plane never meets (zero normal component) gives NaN.
    """
    plane = normal(plane)
    x, y, z = (divide(-plane.offset, n) for n in plane.normal)
    return (Vector(x, 0, 0), Vector(0, y, 0), Vector(0, 0, z))


def param(plane: Plane | PPlane) -> PPlane:
    """Parametric form of *plane*, spanned by its axis intercepts.

    Planes through the origin or parallel to an axis have no three distinct
    intercepts; those are spanned by two directions perpendicular to the
    normal instead, so that ``normal(param(p))`` is always a multiple of ``p``.
    """
    if isinstance(plane, PPlane):
        return plane
    if plane.offset != 0 and all(n != 0 for n in plane.normal):
        o, p, q = three_points(plane)
        return PPlane(o, between(o, p), between(o, q))

    n = plane.normal
    base = n.scaled(divide(-plane.offset, dotp(n, n)))
    smallest = min(range(3), key=lambda i: abs(n[i]))
    helper = Vector(*(1 if i == smallest else 0 for i in range(3)))
    dir1 = cross(n, helper)
    return PPlane(base, dir1, cross(n, dir1))


def normal(plane: Plane | PPlane) -> Plane:
    """Normal form of *plane*; a plane already in normal form is returned as is."""
    if isinstance(plane, Plane):
        return plane
    n = cross(plane.dir1, plane.dir2)
    return Plane(n, -dotp(plane.base, n))


def pwith(s: Number, t: Number, plane: PPlane) -> Vector:
    """Point of a parametric plane at parameters *s* and *t*."""
    return plane.base + plane.dir1.scaled(s) + plane.dir2.scaled(t)


def make_line(a: Vector, b: Vector) -> Line:
    """Line through the points *a* and *b*."""
    return Line(a, between(a, b))


def make_plane(a: Vector, b: Vector, c: Vector | None = None) -> Plane | PPlane:
    """Build a plane from points.

    With two arguments *a* is the normal and *b* a point on the plane, giving
    a normal-form plane. With three arguments the plane through the three
    points is returned in parametric form.
    """
    if c is None:
        return Plane(a, -dotp(b, a))
    return PPlane(a, between(a, b), between(a, c))
