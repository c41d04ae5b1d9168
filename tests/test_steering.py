"""Tests for steering and Ackermann geometry."""

import math

import pytest
from skidkit.vehicle.steering import Steering, SteeringConfig

LENGTH = 3.995
HALF_FRONT_TRACK = 0.75


@pytest.fixture
def steering() -> Steering:
    return Steering(SteeringConfig(
        max_steer_angle=0.7,
        sensitivity=0.002,
        length=LENGTH,
        half_front_track=HALF_FRONT_TRACK
    ))


class TestAckermann:
    """Tests for front wheel angles."""

    def test_straight(self, steering: Steering) -> None:
        """Zero steering leaves both wheels straight."""
        assert steering.get_wheel_angles(0.0) == (0.0, 0.0)

    def test_inner_gets_full_angle(self, steering: Steering) -> None:
        left, right = steering.get_wheel_angles(0.1)

        assert left == 0.1
        assert 0.0 < right < 0.1

    def test_outer_angle_formula(self, steering: Steering) -> None:
        _, right = steering.get_wheel_angles(0.1)
        corner_radius = LENGTH / math.tan(0.1)
        expected = math.atan(LENGTH / (corner_radius + 2 * HALF_FRONT_TRACK))

        assert right == pytest.approx(expected)

    def test_negative_steering_mirrors(self, steering: Steering) -> None:
        left, right = steering.get_wheel_angles(-0.1)
        pos_left, pos_right = steering.get_wheel_angles(0.1)

        assert right == -0.1
        assert -0.1 < left < 0.0
        assert left == pytest.approx(-pos_right)

    @pytest.mark.parametrize("angle", [0.01, 0.2, 0.5, 0.7])
    def test_outer_always_smaller(self, steering: Steering, angle: float) -> None:
        inner, outer = steering.get_wheel_angles(angle)
        assert abs(outer) < abs(inner)

    def test_turn_radius(self, steering: Steering) -> None:
        assert steering.get_turn_radius(0.0) == float('inf')
        assert steering.get_turn_radius(0.3) == pytest.approx(LENGTH / math.tan(0.3))


class TestSteeringInput:
    """Tests for integrating mouse movement."""

    def test_mouse_movement_integrates(self, steering: Steering) -> None:
        steering.update(25.0)
        steering.update(25.0)

        assert steering.angle == pytest.approx(0.1)

    def test_clamped_to_lock(self, steering: Steering) -> None:
        steering.update(10000.0)
        assert steering.angle == 0.7

        steering.update(-50000.0)
        assert steering.angle == -0.7

    def test_reset(self, steering: Steering) -> None:
        steering.set_angle(0.3)
        steering.reset()

        assert steering.angle == 0.0
        assert steering.get_wheel_angles() == (0.0, 0.0)
