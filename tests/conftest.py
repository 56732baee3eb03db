"""Shared fixtures for space-vectors tests."""

import pytest

from space_vectors.models import Line, Plane, PPlane, Vector


@pytest.fixture
def x_axis():
    return Line(Vector(0, 0, 0), Vector(1, 0, 0))


@pytest.fixture
def z_axis():
    return Line(Vector(0, 0, 0), Vector(0, 0, 1))


@pytest.fixture
def xy_plane():
    """z = 0 in normal form."""
    return Plane(Vector(0, 0, 1), 0)


@pytest.fixture
def unit_diagonal_plane():
    """x + y + z - 1 = 0."""
    return Plane(Vector(1, 1, 1), -1)


@pytest.fixture
def xy_pplane():
    return PPlane(Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 1, 0))


@pytest.fixture
def sample_elements():
    """One non-degenerate element of every kind."""
    return [
        Vector(1, 2, 3),
        Line(Vector(0, 0, 0), Vector(1, 1, 0)),
        Plane(Vector(0, 1, 1), -2),
        PPlane(Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 0, 1)),
    ]
