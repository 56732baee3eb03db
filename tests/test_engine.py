"""Tests for the generic operation engine."""

import math
import warnings

import numpy as np
import pytest

from space_vectors.engine import (
    GENERIC_FUNCTIONS,
    angle,
    canonicalize,
    dispatch,
    distance,
    intersection,
    on,
    parallel,
    perpendicular,
    projection,
    skewed,
    to_normal_form,
)
from space_vectors.errors import DispatchError
from space_vectors.models import Kind, Line, Plane, Vector
from space_vectors.warning_policy import DegeneracyWarning


class TestCanonicalize:
    def test_orders_by_kind(self, x_axis):
        v = Vector(1, 2, 3)
        assert canonicalize(v, x_axis) == (x_axis, v, True)
        assert canonicalize(x_axis, v) == (x_axis, v, False)

    def test_plane_before_vector(self, xy_plane):
        v = Vector(1, 2, 3)
        assert canonicalize(v, xy_plane) == (xy_plane, v, True)

    def test_same_kind_keeps_order(self):
        a, b = Vector(1, 0, 0), Vector(0, 1, 0)
        assert canonicalize(a, b) == (a, b, False)

    def test_to_normal_form(self, xy_pplane, xy_plane):
        assert to_normal_form(xy_pplane) == xy_plane
        assert to_normal_form(xy_plane) is xy_plane

    def test_generic_tables_never_mention_pplane(self):
        for methods in GENERIC_FUNCTIONS.values():
            for pair in methods:
                assert Kind.PPLANE not in pair


class TestDispatch:
    def test_missing_pair_raises(self):
        with pytest.raises(DispatchError, match="intersection with input types: vector, vector"):
            dispatch("intersection", Vector(1, 2, 3), Vector(4, 5, 6))

    def test_non_canonical_order_is_a_miss(self, x_axis):
        with pytest.raises(DispatchError, match="vector, line"):
            angle(Vector(1, 0, 0), x_axis)

    def test_unknown_function(self):
        with pytest.raises(DispatchError, match="No method found for volume"):
            dispatch("volume", Vector(1, 0, 0), Vector(0, 1, 0))

    def test_degenerate_line_warns(self):
        line = Line(Vector(0, 0, 0), Vector(0, 0, 0))
        with pytest.warns(DegeneracyWarning, match="W02"):
            angle(line, Vector(1, 0, 0))

    def test_predicate_warns_once_per_degenerate_operand(self):
        line = Line(Vector(0, 0, 0), Vector(0, 0, 0))
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            dispatch("parallel?", line, Vector(1, 0, 0))
            dispatch("on?", line, Vector(1, 0, 0))
        codes = [w.message.code for w in caught if isinstance(w.message, DegeneracyWarning)]
        assert codes.count("W02") == 2


class TestAngle:
    def test_vector_vector(self):
        assert angle(Vector(1, 0, 0), Vector(0, 1, 0)) == 90.0
        assert angle(Vector(1, 0, 0), Vector(2, 0, 0)) == 0.0
        assert angle(Vector(1, 0, 0), Vector(-3, 0, 0)) == 180.0
        assert angle(Vector(1, 0, 0), Vector(1, 1, 0)) == pytest.approx(45.0)

    def test_scaled_parallel_vectors_are_exact(self):
        assert angle(Vector(1, 1, 0), Vector(2, 2, 0)) == 0.0

    def test_zero_vector_collapses_to_zero(self):
        assert angle(Vector(0, 0, 0), Vector(1, 2, 3)) == 0.0

    def test_line_vector(self, x_axis):
        assert angle(x_axis, Vector(0, 5, 0)) == 90.0

    def test_line_line(self, x_axis, z_axis):
        assert angle(x_axis, z_axis) == 90.0

    def test_plane_vector(self, xy_plane):
        assert angle(xy_plane, Vector(1, 0, 1)) == pytest.approx(45.0)
        assert angle(xy_plane, Vector(0, 0, 1)) == 90.0
        assert angle(xy_plane, Vector(1, 0, 0)) == 0.0

    def test_plane_plane_takes_smaller_angle(self, xy_plane):
        flipped = Plane(Vector(0, 0, -1), 5)
        assert angle(xy_plane, flipped) == 0.0
        tilted = Plane(Vector(0, 1, 1), 0)
        assert angle(xy_plane, tilted) == pytest.approx(45.0)

    def test_line_plane(self, z_axis, xy_plane):
        assert angle(z_axis, xy_plane) == 90.0


class TestPredicates:
    def test_parallel_lines(self, x_axis):
        other = Line(Vector(0, 1, 0), Vector(1, 0, 0))
        assert parallel(x_axis, other)
        assert not on(x_axis, other)
        assert not skewed(x_axis, other)

    def test_perpendicular(self, z_axis, xy_plane):
        assert perpendicular(z_axis, xy_plane)
        assert not parallel(z_axis, xy_plane)

    def test_skew_lines(self, x_axis):
        other = Line(Vector(0, 1, 1), Vector(0, 0, 1))
        assert skewed(x_axis, other)

    def test_intersecting_lines_are_not_skew(self, x_axis, z_axis):
        assert on(x_axis, z_axis)
        assert not skewed(x_axis, z_axis)

    def test_skewed_only_for_lines(self, x_axis):
        with pytest.raises(DispatchError):
            skewed(x_axis, Vector(1, 2, 3))

    def test_point_on_plane(self, unit_diagonal_plane):
        assert on(unit_diagonal_plane, Vector(1, 0, 0))
        assert not on(unit_diagonal_plane, Vector(0, 0, 0))


class TestDistance:
    def test_vector_vector(self):
        assert distance(Vector(1, 1, 1), Vector(4, 5, 1)) == 5.0

    def test_line_vector(self, x_axis):
        assert distance(x_axis, Vector(7, 3, 4)) == 5.0

    def test_skew_lines(self, x_axis):
        other = Line(Vector(0, 2, 3), Vector(0, 0, 1))
        assert distance(x_axis, other) == pytest.approx(2.0)

    def test_parallel_lines(self, x_axis):
        other = Line(Vector(5, 3, 4), Vector(-2, 0, 0))
        assert distance(x_axis, other) == 5.0

    def test_plane_vector(self, unit_diagonal_plane):
        assert distance(unit_diagonal_plane, Vector(0, 0, 0)) == pytest.approx(1 / math.sqrt(3))

    def test_line_plane(self, x_axis, z_axis):
        raised = Plane(Vector(0, 0, 1), -4)
        assert distance(x_axis, raised) == 4.0
        assert distance(z_axis, raised) == 0.0

    def test_plane_plane(self, xy_plane):
        assert distance(xy_plane, Plane(Vector(0, 0, -2), 6)) == 3.0
        assert distance(xy_plane, Plane(Vector(1, 0, 0), 6)) == 0.0


class TestIntersection:
    def test_line_plane(self, z_axis):
        assert intersection(z_axis, Plane(Vector(0, 0, 1), -2)) == Vector(0, 0, 2)

    def test_line_parallel_to_plane(self, x_axis):
        assert intersection(x_axis, Plane(Vector(0, 0, 1), -2)) is None

    def test_line_in_plane(self, x_axis, xy_plane):
        assert intersection(x_axis, xy_plane) == x_axis

    def test_line_line(self, x_axis):
        other = Line(Vector(1, -1, 0), Vector(0, 1, 0))
        assert intersection(x_axis, other) == Vector(1, 0, 0)

    def test_skew_lines_do_not_meet(self, x_axis):
        assert intersection(x_axis, Line(Vector(0, 1, 1), Vector(0, 0, 1))) is None

    def test_parallel_lines_do_not_meet(self, x_axis):
        assert intersection(x_axis, Line(Vector(0, 1, 0), Vector(1, 0, 0))) is None

    def test_coincident_lines(self, x_axis):
        assert intersection(x_axis, Line(Vector(3, 0, 0), Vector(-2, 0, 0))) == x_axis

    def test_plane_plane(self):
        line = intersection(Plane(Vector(1, 0, 0), -1), Plane(Vector(0, 0, 1), -2))
        assert line == Line(Vector(1, 0, 2), Vector(0, 1, 0))

    def test_plane_plane_line_lies_in_both(self):
        alpha = Plane(Vector(1, 2, -1), 3)
        beta = Plane(Vector(2, -1, 1), -4)
        line = intersection(alpha, beta)
        for t in (0, 1, -3):
            point = line.base + line.direction.scaled(t)
            assert distance(alpha, point) == pytest.approx(0.0, abs=1e-12)
            assert distance(beta, point) == pytest.approx(0.0, abs=1e-12)

    def test_parallel_planes(self, xy_plane):
        assert intersection(xy_plane, Plane(Vector(0, 0, 2), -2)) is None


class TestProjection:
    def test_vector_vector(self):
        assert projection(Vector(1, 1, 0), Vector(1, 0, 0)) == Vector(1, 0, 0)
        np.testing.assert_allclose(
            [float(c) for c in projection(Vector(1, 2, 3), Vector(0, 2, 2))], [0.0, 2.5, 2.5]
        )

    def test_line_plane(self, xy_plane):
        line = Line(Vector(0, 0, 1), Vector(1, 0, 1))
        assert projection(line, xy_plane) == Line(Vector(-1, 0, 0), Vector(1, 0, 0))

    def test_parallel_line_onto_plane(self, xy_plane):
        line = Line(Vector(1, 2, 5), Vector(0, 1, 0))
        assert projection(line, xy_plane) == Line(Vector(1, 2, 0), Vector(0, 1, 0))

    def test_perpendicular_line_projects_to_point(self, xy_plane):
        line = Line(Vector(3, 4, 5), Vector(0, 0, 2))
        assert projection(line, xy_plane) == Vector(3, 4, 0)

    def test_point_onto_plane(self, unit_diagonal_plane):
        np.testing.assert_allclose(
            [float(c) for c in projection(unit_diagonal_plane, Vector(0, 0, 0))],
            [1 / 3, 1 / 3, 1 / 3],
        )
