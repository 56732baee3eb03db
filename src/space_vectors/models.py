"""Value types for the four geometric kinds: vector, line, plane and pplane."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Iterator, Union

Number = Union[int, Fraction, float]


class Kind(str, Enum):
    """Variant tag; the string values give the canonical dispatch order."""

    LINE = "line"
    PLANE = "plane"
    PPLANE = "pplane"
    VECTOR = "vector"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Vector:
    """A free vector or a point position."""

    x: Number
    y: Number
    z: Number

    kind = Kind.VECTOR

    @property
    def comps(self) -> tuple[Number, Number, Number]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[Number]:
        return iter(self.comps)

    def __getitem__(self, index: int) -> Number:
        return self.comps[index]

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled(self, factor: Number) -> Vector:
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0


@dataclass(frozen=True)
class Line:
    """Point plus direction, ``base + t * direction``."""

    base: Vector
    direction: Vector

    kind = Kind.LINE


@dataclass(frozen=True)
class Plane:
    """Normal-form plane: points ``p`` with ``normal . p + offset = 0``."""

    normal: Vector
    offset: Number

    kind = Kind.PLANE


@dataclass(frozen=True)
class PPlane:
    """Parametric-form plane, ``base + s * dir1 + t * dir2``."""

    base: Vector
    dir1: Vector
    dir2: Vector

    kind = Kind.PPLANE


Entity = Union[Vector, Line, Plane, PPlane]
