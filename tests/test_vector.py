"""Tests for Vector2."""

import dataclasses
import math

import numpy as np
import pytest
from skidkit.core.vector import Vector2, clamp


class TestNormalize:
    """Tests for Vector2.normalized."""

    @pytest.mark.parametrize("x, y", [(3.0, 4.0), (-2.0, 0.5), (1e-3, -7.0), (0.0, -9.0)])
    def test_unit_length_and_same_direction(self, x: float, y: float) -> None:
        """Nonzero vectors become unit length without changing direction."""
        v = Vector2(x, y)
        n = v.normalized()

        assert n.magnitude() == pytest.approx(1.0)
        length = math.hypot(x, y)
        assert n.x == pytest.approx(x / length)
        assert n.y == pytest.approx(y / length)

    def test_zero_vector_maps_to_fixed_direction(self) -> None:
        """The zero vector normalizes to exactly (0, 1)."""
        n = Vector2(0.0, 0.0).normalized()

        assert n.x == 0.0
        assert n.y == 1.0

    def test_does_not_mutate(self) -> None:
        """Normalizing returns a new vector and leaves the original alone."""
        v = Vector2(3.0, 4.0)
        v.normalized()

        assert v == Vector2(3.0, 4.0)

    def test_is_immutable(self) -> None:
        """Fields cannot be assigned."""
        v = Vector2(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0


class TestAngleBetween:
    """Tests for the signed sine angle measure."""

    @pytest.mark.parametrize("x, y", [(1.0, 0.0), (3.0, -4.0), (-0.2, 0.9)])
    def test_self_is_zero(self, x: float, y: float) -> None:
        v = Vector2(x, y)
        assert v.angle_between(v) == pytest.approx(0.0, abs=1e-12)

    def test_antisymmetric(self) -> None:
        a = Vector2(2.0, 1.0)
        b = Vector2(-0.5, 3.0)

        assert a.angle_between(b) == pytest.approx(-b.angle_between(a))

    def test_is_sine_not_angle(self) -> None:
        """A quarter turn gives magnitude 1, not pi/2."""
        a = Vector2(1.0, 0.0)
        b = Vector2(0.0, 1.0)

        assert a.angle_between(b) == pytest.approx(-1.0)

    def test_small_rotation(self) -> None:
        """Rotating by theta gives -sin(theta), independent of lengths."""
        theta = 0.05
        a = Vector2(5.0, 0.0)
        b = Vector2(1.0, 0.0).rotate(theta) * 0.25

        assert a.angle_between(b) == pytest.approx(-math.sin(theta))

    def test_zero_operand_uses_fallback_direction(self) -> None:
        """A zero operand is treated as (0, 1)."""
        a = Vector2(1.0, 0.0)
        assert a.angle_between(Vector2()) == pytest.approx(-1.0)


class TestVectorOps:
    """Tests for arithmetic and geometric helpers."""

    def test_arithmetic(self) -> None:
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, -1.0)

        assert a + b == Vector2(4.0, 1.0)
        assert a - b == Vector2(-2.0, 3.0)
        assert a * 2.0 == Vector2(2.0, 4.0)
        assert 2.0 * a == Vector2(2.0, 4.0)
        assert b / 2.0 == Vector2(1.5, -0.5)
        assert -a == Vector2(-1.0, -2.0)

    def test_perpendicular_is_fixed_quarter_turn(self) -> None:
        """Perpendicular is (y, -x) and keeps the length."""
        v = Vector2(1.0, 2.0)
        p = v.perpendicular()

        assert p == Vector2(2.0, -1.0)
        assert p.dot(v) == 0.0

    def test_rotate(self) -> None:
        r = Vector2(1.0, 0.0).rotate(math.pi / 2)

        assert r.x == pytest.approx(0.0, abs=1e-12)
        assert r.y == pytest.approx(1.0)

    def test_with_magnitude(self) -> None:
        v = Vector2(3.0, 4.0).with_magnitude(10.0)

        assert v.x == pytest.approx(6.0)
        assert v.y == pytest.approx(8.0)

    def test_magnitude(self) -> None:
        assert Vector2(3.0, 4.0).magnitude() == pytest.approx(5.0)

    def test_array_conversion(self) -> None:
        v = Vector2(1.5, -2.5)
        arr = v.to_array()

        assert isinstance(arr, np.ndarray)
        assert Vector2.from_array(arr) == v

    def test_unpacking(self) -> None:
        x, y = Vector2(7.0, 8.0)
        assert (x, y) == (7.0, 8.0)


def test_clamp() -> None:
    assert clamp(5.0, -1.0, 1.0) == 1.0
    assert clamp(-5.0, -1.0, 1.0) == -1.0
    assert clamp(0.25, -1.0, 1.0) == 0.25
