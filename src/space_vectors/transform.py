"""Build typed geometric values from the parse tree and evaluate calls.

The transformer runs bottom-up, so a parenthesized call is evaluated before
the call that consumes its result.
"""

from __future__ import annotations

import logging

from lark import Token, Transformer, v_args

from space_vectors.engine import Result, canonicalize, dispatch, to_normal_form
from space_vectors.errors import DispatchError
from space_vectors.literals import read_number
from space_vectors.models import Entity, Line, Number, Plane, PPlane, Vector
from space_vectors.primitives import (
    area,
    between,
    cross,
    dotp,
    length,
    lwith,
    make_line,
    make_plane,
    normal,
    normalize,
    param,
    pwith,
    three_points,
)

logger = logging.getLogger(__name__)

VECTOR_FUNCTIONS = {
    "length": length,
    "normalize": normalize,
    "dotp": dotp,
    "cross": cross,
    "area": area,
    "between": between,
}

PLANE_FUNCTIONS = {
    "param": param,
    "three-points": three_points,
    "normal": normal,
}


def prepare_operands(a: Entity, b: Entity) -> tuple[Entity, Entity, bool]:
    """Normal-form any parametric plane, then put the pair in kind order."""
    return canonicalize(to_normal_form(a), to_normal_form(b))


def call_generic(name: str, a: Entity, b: Entity) -> Result:
    """Evaluate a generic binary function on operands in any order."""
    a, b, swapped = prepare_operands(a, b)
    if swapped:
        logger.debug("Reordered operands of %s to (%s, %s)", name, a.kind, b.kind)
    return dispatch(name, a, b)


def _kind_name(value: object) -> str:
    if value is None:
        return "none"
    kind = getattr(value, "kind", None)
    return str(kind) if kind is not None else type(value).__name__


def _expect(name: str, operands: tuple, *types: type) -> None:
    """Raise ``DispatchError`` unless every operand is one of *types*.

    Nested calls can produce any value, so their results are checked here
    before they reach a function that expects a particular kind.
    """
    if not all(isinstance(op, types) for op in operands):
        raise DispatchError(name, tuple(_kind_name(op) for op in operands))


@v_args(inline=True)
class ExpressionBuilder(Transformer):
    """Turns a parse tree into the value of the expression it denotes."""

    def number(self, token: Token) -> Number:
        return read_number(token)

    def vector(self, x: Number, y: Number, z: Number) -> Vector:
        return Vector(x, y, z)

    def line(self, base: Vector, direction: Vector) -> Line:
        return Line(base, direction)

    def plane(self, a: Number, b: Number, c: Number, d: Number) -> Plane:
        return Plane(Vector(a, b, c), d)

    def pplane(self, base: Vector, dir1: Vector, dir2: Vector) -> PPlane:
        return PPlane(base, dir1, dir2)

    def vector_function(self, name: Token, *operands: Vector):
        _expect(str(name), operands, Vector)
        return VECTOR_FUNCTIONS[str(name)](*operands)

    def lwith(self, line: Line, t: Number) -> Vector:
        _expect("lwith", (line,), Line)
        return lwith(t, line)

    def plane_function(self, name: Token, plane: Plane | PPlane):
        _expect(str(name), (plane,), Plane, PPlane)
        return PLANE_FUNCTIONS[str(name)](plane)

    def pwith(self, plane: PPlane, s: Number, t: Number) -> Vector:
        _expect("pwith", (plane,), PPlane)
        return pwith(s, t, plane)

    def line_from_points(self, a: Vector, b: Vector) -> Line:
        _expect("line", (a, b), Vector)
        return make_line(a, b)

    def plane_from_points(self, *points: Vector) -> Plane | PPlane:
        _expect("plane", points, Vector)
        return make_plane(*points)

    def generic_function(self, name: Token, a: Entity, b: Entity) -> Result:
        _expect(str(name), (a, b), Vector, Line, Plane, PPlane)
        return call_generic(str(name), a, b)
