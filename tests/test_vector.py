"""Unit tests for the vector module."""

import math

import pytest

from geom import Point
from vector import Vector


class TestMagnitude:
    def test_zero_unit(self):
        zero_unit = Vector().unit()
        assert zero_unit == Vector(0.0, 0.0)
        assert zero_unit.magnitude() == 0.0

    @pytest.mark.parametrize("x, y", [(3.0, 4.0), (-7.0, 1.2), (1e-3, -2e5), (0.0, -9.0)])
    def test_unit_has_length_one(self, x, y):
        assert Vector(x, y).unit().magnitude() == pytest.approx(1.0)

    def test_mag_sqr_and_dist_sqr(self):
        v = Vector(3.0, 4.0)
        assert v.mag_sqr() == 25.0
        assert v.magnitude() == 5.0
        assert v.dist_sqr(Vector(0.0, 1.0)) == 18.0

    def test_nan_propagates(self):
        v = Vector(math.nan, 0.0)
        assert math.isnan(v.mag_sqr())
        assert math.isnan(v.magnitude())


class TestDirection:
    @pytest.mark.parametrize(
        "degrees", [0.0, 10.0, 30.0, 45.0, 90.0, 132.3, 245.0, 281.3, 301.4]
    )
    def test_angle(self, degrees):
        rads = math.radians(degrees)
        r = 3.1
        vec = Vector(r * math.cos(rads), r * math.sin(rads))
        assert vec.magnitude() == pytest.approx(r)

        angle = vec.angle()
        actual = angle + 2.0 * math.pi if angle < 0.0 else angle
        assert actual == pytest.approx(rads, abs=1.0e-12)

    @pytest.mark.parametrize("x, y", [(1.0, 2.0), (-5.0, 0.5), (0.0, -3.0)])
    def test_unit_preserves_angle(self, x, y):
        v = Vector(x, y)
        assert v.unit().angle() == pytest.approx(v.angle())

    @pytest.mark.parametrize("x, y", [(1.0, 2.0), (-5.0, 0.5), (4.0, -3.0)])
    def test_normal_is_orthogonal(self, x, y):
        v = Vector(x, y)
        assert v.dot(v.normal()) == 0.0

    def test_normal_rotates_counterclockwise(self):
        assert Vector(1.0, 0.0).normal() == Vector(-0.0, 1.0)
        assert Vector(2.0, 3.0).normal() == Vector(-3.0, 2.0)


class TestArithmetic:
    def test_plus(self):
        v3 = Vector(-1.0, 1.0) + Vector(1.0, -1.0)
        assert v3 == Vector(0.0, 0.0)
        assert v3.magnitude() == 0.0

    def test_plus_equals(self):
        v1 = Vector(-1.0, 1.0)
        v2 = Vector(1.0, -1.0)
        v2 += v1
        v2 += v1
        assert v2 == Vector(-1.0, 1.0)
        assert v2.mag_sqr() == 2.0
        assert v2.magnitude() == math.sqrt(2.0)

    def test_minus_equals_rebinds(self):
        original = Vector(5.0, 5.0)
        v = original
        v -= Vector(1.0, 2.0)
        assert v == Vector(4.0, 3.0)
        assert original == Vector(5.0, 5.0)

    @pytest.mark.parametrize("x, y", [(1.5, -2.0), (0.0, 0.0), (-1e9, 3.25)])
    def test_additive_inverse(self, x, y):
        v = Vector(x, y)
        assert v + (-1 * v) == Vector()
        assert v - v == Vector()

    def test_scalar_multiply(self):
        assert Vector(1.0, 4.0) * 3.0 == Vector(3.0, 12.0)
        assert 3.0 * Vector(1.0, 4.0) == Vector(3.0, 12.0)

    def test_scalar_divide(self):
        assert Vector(1.0, 4.0) / 4.0 == Vector(0.25, 1.0)

    def test_scalar_divide_by_zero(self):
        vs = Vector(1.0, -4.0) / 0.0
        assert vs.x == math.inf
        assert vs.y == -math.inf

    def test_divide_zero_by_zero_is_nan(self):
        vs = Vector(0.0, 2.0) / 0.0
        assert math.isnan(vs.x)
        assert vs.y == math.inf

    def test_adding_non_vector_is_rejected(self):
        with pytest.raises(TypeError):
            Vector(1.0, 1.0) + 1.0


class TestPointConversion:
    def test_from_point(self):
        v = Vector.from_point(Point(10.0, 10.0))
        assert v == Vector(10.0, 10.0)

    def test_to_point(self):
        point = Vector(-7.0, 1.2).to_point()
        assert point == Point(-7.0, 1.2)
