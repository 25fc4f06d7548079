"""Unit tests for geographic geometry helpers."""

import math

import pytest

from guidance_toolkit.core.geometry import (
    EARTH_RADIUS,
    angular_deviation,
    haversine_distance,
    interpolate_linear,
)
from guidance_toolkit.domain import Coordinate


class TestHaversineDistance:
    """Tests for great-circle distance."""

    def test_zero_distance(self):
        """Identical points are zero metres apart."""
        c = Coordinate(13.4, 52.5)
        assert haversine_distance(c, c) == 0.0

    def test_along_equator(self):
        """A longitude step on the equator is radius times the angle."""
        step = math.degrees(100.0 / EARTH_RADIUS)
        distance = haversine_distance(Coordinate(0.0, 0.0), Coordinate(step, 0.0))
        assert distance == pytest.approx(100.0, rel=1e-9)

    def test_symmetric(self):
        """Distance does not depend on direction."""
        a = Coordinate(13.38, 52.51)
        b = Coordinate(13.40, 52.52)
        assert haversine_distance(a, b) == pytest.approx(haversine_distance(b, a))

    def test_custom_radius(self):
        """Distance scales with the sphere radius."""
        a = Coordinate(0.0, 0.0)
        b = Coordinate(1.0, 0.0)
        assert haversine_distance(a, b, earth_radius=2.0) == pytest.approx(math.radians(2.0))


class TestInterpolateLinear:
    """Tests for linear interpolation."""

    def test_endpoints(self):
        """Factors 0 and 1 return the endpoints."""
        a = Coordinate(1.0, 2.0)
        b = Coordinate(3.0, 6.0)
        assert interpolate_linear(0.0, a, b) == a
        assert interpolate_linear(1.0, a, b) == b

    def test_midpoint(self):
        """Factor 0.5 is the midpoint."""
        result = interpolate_linear(0.5, Coordinate(0.0, 0.0), Coordinate(2.0, 4.0))
        assert result == Coordinate(1.0, 2.0)


class TestAngularDeviation:
    """Tests for angular deviation."""

    @pytest.mark.parametrize(
        ("angle", "other", "expected"),
        [
            (0.0, 0.0, 0.0),
            (90.0, 0.0, 90.0),
            (270.0, 0.0, 90.0),
            (350.0, 10.0, 20.0),
            (180.0, 0.0, 180.0),
            (360.0, 0.0, 0.0),
        ],
    )
    def test_deviation(self, angle, other, expected):
        """Deviation takes the shorter way around the circle."""
        assert angular_deviation(angle, other) == pytest.approx(expected)
