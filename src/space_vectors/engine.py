"""Generic binary operations dispatched on the kinds of their operands.

Every operation has one method per canonical pair of kinds, where a pair is
canonical when its kinds are in ``line < plane < pplane < vector`` order.
Callers bring operands into that order with :func:`canonicalize` and turn
parametric planes into normal form with :func:`to_normal_form` before
calling :func:`dispatch`; pairs without a method raise ``DispatchError``.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Union

from space_vectors.errors import DispatchError
from space_vectors.models import Entity, Kind, Line, Number, Plane, PPlane, Vector
from space_vectors.primitives import (
    between,
    cross,
    divide,
    dotp,
    length,
    lwith,
    normal,
)
from space_vectors.warning_policy import emit_warning

logger = logging.getLogger(__name__)

Result = Union[Entity, Number, bool, None]
Method = Callable[[Entity, Entity], Result]


def to_normal_form(element: Entity) -> Entity:
    """Parametric planes become normal-form planes; everything else is unchanged."""
    if isinstance(element, PPlane):
        return normal(element)
    return element


def canonicalize(a: Entity, b: Entity) -> tuple[Entity, Entity, bool]:
    """Order two operands by kind, reporting whether they were swapped."""
    if b.kind.value < a.kind.value:
        return b, a, True
    return a, b, False


def _check_degenerate(element: Entity) -> None:
    if isinstance(element, Line) and element.direction.is_zero():
        emit_warning("W02", "Line has a zero direction vector")
    elif isinstance(element, Plane) and element.normal.is_zero():
        emit_warning("W02", "Plane has a zero normal vector")


def _find_method(name: str, a: Entity, b: Entity) -> Method:
    try:
        methods = GENERIC_FUNCTIONS[name]
    except KeyError:
        raise DispatchError(name, (str(a.kind), str(b.kind))) from None
    method = methods.get((a.kind, b.kind))
    if method is None:
        raise DispatchError(name, (str(a.kind), str(b.kind)))
    return method


def dispatch(name: str, a: Entity, b: Entity) -> Result:
    """Run generic operation *name* on an already canonical pair of operands."""
    method = _find_method(name, a, b)
    logger.debug("Dispatching %s on (%s, %s)", name, a.kind, b.kind)
    _check_degenerate(a)
    _check_degenerate(b)
    return method(a, b)


# Angle


def _vector_angle(u: Vector, v: Vector) -> float:
    """Angle in degrees, NaN when either vector has zero length."""
    d = dotp(u, v)
    uu_vv = dotp(u, u) * dotp(v, v)
    if uu_vv == 0:
        return math.nan
    if d == 0:
        return 90.0
    if d * d == uu_vv:
        return 0.0 if d > 0 else 180.0
    c = d / math.sqrt(uu_vv)
    if math.isnan(c):
        return math.nan
    return math.degrees(math.acos(max(-1.0, min(1.0, c))))


def _angle_vector_vector(a: Vector, b: Vector) -> float:
    v = _vector_angle(a, b)
    return 0.0 if math.isnan(v) else v


def _angle_line_vector(line: Line, v: Vector) -> float:
    return _angle_vector_vector(line.direction, v)


def _angle_line_line(l: Line, m: Line) -> float:
    return _angle_vector_vector(l.direction, m.direction)


def _angle_plane_vector(plane: Plane, r: Vector) -> float:
    v = _vector_angle(plane.normal, r)
    return 90 - v if 90 - v >= 0 else v - 90


def _angle_plane_plane(alpha: Plane, beta: Plane) -> float:
    v = _vector_angle(alpha.normal, beta.normal)
    return min(v, 180 - v)


def _angle_line_plane(line: Line, plane: Plane) -> float:
    return _angle_plane_vector(plane, line.direction)


def angle(a: Entity, b: Entity) -> float:
    """Angle between two elements in degrees."""
    return dispatch("angle", a, b)


def parallel(a: Entity, b: Entity) -> bool:
    v = _find_method("angle", a, b)(a, b)
    return v == 0.0 or v == 180.0


def perpendicular(a: Entity, b: Entity) -> bool:
    v = _find_method("angle", a, b)(a, b)
    return v == 90.0 or v == 270.0


# Distance


def _distance_vector_vector(p: Vector, q: Vector) -> float:
    return length(between(p, q))


def _distance_line_vector(line: Line, p: Vector) -> float:
    r = line.direction
    return divide(length(cross(r, between(line.base, p))), length(r))


def _distance_line_line(l: Line, m: Line) -> float:
    n = cross(l.direction, m.direction)
    if n.is_zero():
        return _distance_line_vector(l, m.base)
    return divide(abs(dotp(n, between(l.base, m.base))), length(n))


def _distance_plane_vector(plane: Plane, p: Vector) -> float:
    return divide(abs(dotp(plane.normal, p) + plane.offset), length(plane.normal))


def _distance_line_plane(line: Line, plane: Plane) -> float:
    if parallel(line, plane):
        return _distance_plane_vector(plane, line.base)
    return 0.0


def _point_on_plane(plane: Plane) -> Vector:
    """The point of *plane* on the axis of its largest normal component."""
    n = plane.normal
    axis = max(range(3), key=lambda i: abs(n[i]))
    value = divide(-plane.offset, n[axis])
    return Vector(*(value if i == axis else 0 for i in range(3)))


def _distance_plane_plane(alpha: Plane, beta: Plane) -> float:
    if parallel(alpha, beta):
        return _distance_plane_vector(beta, _point_on_plane(alpha))
    return 0.0


def distance(a: Entity, b: Entity) -> float:
    """Shortest distance between two elements."""
    return dispatch("distance", a, b)


def on(a: Entity, b: Entity) -> bool:
    """Whether two elements touch."""
    return _find_method("distance", a, b)(a, b) == 0.0


def skewed(a: Entity, b: Entity) -> bool:
    """Whether two lines are neither parallel nor touching."""
    return dispatch("skewed?", a, b)


def _skewed_line_line(l: Line, m: Line) -> bool:
    return not (parallel(l, m) or on(l, m))


# Intersection


def _intersection_line_line(a: Line, b: Line) -> Vector | Line | None:
    ab = between(a.base, b.base)
    rw = cross(a.direction, b.direction)
    if rw.is_zero():
        return a if on(a, b) else None
    if dotp(ab, rw) != 0:
        return None
    s = divide(dotp(cross(ab, b.direction), rw), dotp(rw, rw))
    return lwith(s, a)


def _intersection_plane_plane(alpha: Plane, beta: Plane) -> Line | Plane | None:
    r = cross(alpha.normal, beta.normal)
    if r.is_zero():
        return alpha if on(alpha, beta) else None
    n1, n2 = alpha.normal, beta.normal
    d1, d2 = alpha.offset, beta.offset
    i = next(i for i in range(3) if r[i] != 0)
    j, k = (i + 1) % 3, (i + 2) % 3
    det = r[i]
    point = [0, 0, 0]
    point[j] = divide(n1[k] * d2 - n2[k] * d1, det)
    point[k] = divide(n2[j] * d1 - n1[j] * d2, det)
    direction = Vector(*(divide(c, det) for c in r))
    return Line(Vector(*point), direction)


def _intersection_line_plane(line: Line, plane: Plane) -> Vector | Line | None:
    denominator = dotp(plane.normal, line.direction)
    numerator = -(dotp(plane.normal, line.base) + plane.offset)
    if denominator == 0:
        return line if numerator == 0 else None
    return lwith(divide(numerator, denominator), line)


def intersection(a: Entity, b: Entity) -> Result:
    """Intersection point or line of two elements, ``None`` if they do not meet."""
    return dispatch("intersection", a, b)


# Projection


def _projection_vector_vector(a: Vector, b: Vector) -> Vector:
    return b.scaled(divide(dotp(a, b), dotp(b, b)))


def _projection_plane_vector(plane: Plane, p: Vector) -> Vector:
    n = plane.normal
    return p - n.scaled(divide(dotp(n, p) + plane.offset, dotp(n, n)))


def _projection_line_plane(line: Line, plane: Plane) -> Line | Vector:
    n, r = plane.normal, line.direction
    direction = r - n.scaled(divide(dotp(r, n), dotp(n, n)))
    hit = _intersection_line_plane(line, plane)
    anchor = hit if isinstance(hit, Vector) else _projection_plane_vector(plane, line.base)
    if direction.is_zero():
        return anchor
    return Line(anchor, direction)


def projection(a: Entity, b: Entity) -> Result:
    """Projection of the first element onto the second."""
    return dispatch("projection", a, b)


_L, _P, _V = Kind.LINE, Kind.PLANE, Kind.VECTOR

GENERIC_FUNCTIONS: dict[str, dict[tuple[Kind, Kind], Method]] = {
    "angle": {
        (_V, _V): _angle_vector_vector,
        (_L, _V): _angle_line_vector,
        (_L, _L): _angle_line_line,
        (_P, _V): _angle_plane_vector,
        (_P, _P): _angle_plane_plane,
        (_L, _P): _angle_line_plane,
    },
    "distance": {
        (_V, _V): _distance_vector_vector,
        (_L, _V): _distance_line_vector,
        (_L, _L): _distance_line_line,
        (_P, _V): _distance_plane_vector,
        (_L, _P): _distance_line_plane,
        (_P, _P): _distance_plane_plane,
    },
    "intersection": {
        (_L, _L): _intersection_line_line,
        (_P, _P): _intersection_plane_plane,
        (_L, _P): _intersection_line_plane,
    },
    "projection": {
        (_V, _V): _projection_vector_vector,
        (_L, _P): _projection_line_plane,
        (_P, _V): _projection_plane_vector,
    },
    "skewed?": {
        (_L, _L): _skewed_line_line,
    },
}

# Predicates derived from angle or distance take every pair those support.
GENERIC_FUNCTIONS["parallel?"] = {
    pair: parallel for pair in GENERIC_FUNCTIONS["angle"]
}
GENERIC_FUNCTIONS["perpendicular?"] = {
    pair: perpendicular for pair in GENERIC_FUNCTIONS["angle"]
}
GENERIC_FUNCTIONS["on?"] = {pair: on for pair in GENERIC_FUNCTIONS["distance"]}
