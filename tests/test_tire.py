"""Tests for the lateral tire model and wheel forces."""

import math

import pytest
from skidkit.core.vector import Vector2
from skidkit.tire import LinearTire, SlipCalculator, TireConfig
from skidkit.vehicle.wheel import Wheel, WheelPosition

MASS = 1095.0
GRAVITY = 9.81
LOAD = MASS * GRAVITY / 4.0


def make_wheel(move: Vector2, forward: Vector2 = Vector2(1.0, 0.0)) -> Wheel:
    """Wheel that has just travelled by ``move``."""
    start = Vector2(10.0, 20.0)
    return Wheel(position=start + move, previous_position=start, forward=forward)


class TestSlipCalculator:
    """Tests for slip angle clamping."""

    def test_within_limit_passes_through(self) -> None:
        move = Vector2(1.0, 0.0).rotate(0.03)
        slip = SlipCalculator.slip_angle(move, Vector2(1.0, 0.0), 0.07)

        assert slip == pytest.approx(math.sin(0.03))

    def test_clamped_both_ways(self) -> None:
        forward = Vector2(1.0, 0.0)

        assert SlipCalculator.slip_angle(Vector2(0.0, 1.0), forward, 0.07) == 0.07
        assert SlipCalculator.slip_angle(Vector2(0.0, -1.0), forward, 0.07) == -0.07


class TestLinearTire:
    """Tests for the saturating-linear force law."""

    def test_linear_region(self) -> None:
        tire = LinearTire(TireConfig(friction_mu=0.7, max_slip_angle=0.07))

        assert tire.lateral_force(0.035, LOAD) == pytest.approx(0.5 * LOAD * 0.7)
        assert tire.lateral_force(-0.035, LOAD) == pytest.approx(-0.5 * LOAD * 0.7)

    def test_max_force(self) -> None:
        tire = LinearTire()
        assert tire.max_lateral_force(LOAD) == pytest.approx(0.7 * LOAD)

    def test_invalid_slip_limit(self) -> None:
        with pytest.raises(ValueError):
            TireConfig(max_slip_angle=0.0)


class TestWheelLateralForce:
    """Tests for Wheel.calc_lateral_force."""

    def test_no_slip_no_force(self) -> None:
        """Travelling exactly where the wheel points gives no force."""
        wheel = make_wheel(Vector2(0.5, 0.0))
        force = wheel.calc_lateral_force(LinearTire(), LOAD)

        assert wheel.slip_angle == 0.0
        assert force.magnitude() == 0.0

    @pytest.mark.parametrize("travel_angle", [0.08, 0.1, 0.4, 1.2, math.pi / 2])
    def test_saturates_beyond_slip_limit(self, travel_angle: float) -> None:
        """Past the limit the force stays at mu * m * g / 4."""
        move = Vector2(1.0, 0.0).rotate(travel_angle)
        wheel = make_wheel(move)
        force = wheel.calc_lateral_force(LinearTire(), LOAD)

        assert abs(wheel.slip_angle) == pytest.approx(0.07)
        assert force.magnitude() == pytest.approx(0.7 * MASS * GRAVITY / 4.0)

    def test_force_is_perpendicular_to_forward(self) -> None:
        forward = Vector2(0.6, 0.8)
        wheel = make_wheel(forward.rotate(0.02), forward)
        force = wheel.calc_lateral_force(LinearTire(), LOAD)

        assert force.dot(forward) == pytest.approx(0.0, abs=1e-9)
        assert force.magnitude() == pytest.approx(math.sin(0.02) / 0.07 * LOAD * 0.7)

    def test_force_sign(self) -> None:
        """Sliding toward +y while pointing along +x pushes back along -y."""
        wheel = make_wheel(Vector2(1.0, 0.0).rotate(0.01))
        force = wheel.calc_lateral_force(LinearTire(), LOAD)

        # slip = sin(0.01) is positive, perpendicular of (1, 0) is (0, -1)
        assert wheel.slip_angle > 0.0
        assert force.y < 0.0

    def test_stationary_wheel_has_no_force(self) -> None:
        wheel = make_wheel(Vector2(0.0, 0.0))
        force = wheel.calc_lateral_force(LinearTire(), LOAD)

        assert force == Vector2(0.0, 0.0)
        assert wheel.slip_angle == 0.0

    def test_grip_scales_with_friction(self) -> None:
        move = Vector2(0.0, 1.0)
        dry = make_wheel(move).calc_lateral_force(LinearTire(TireConfig.tarmac()), LOAD)
        wet = make_wheel(move).calc_lateral_force(LinearTire(TireConfig.wet()), LOAD)

        assert wet.magnitude() < dry.magnitude()


class TestWheel:
    """Tests for wheel bookkeeping."""

    def test_place_remembers_previous(self) -> None:
        wheel = Wheel(position=Vector2(1.0, 1.0))
        wheel.place(Vector2(2.0, 3.0))

        assert wheel.previous_position == Vector2(1.0, 1.0)
        assert wheel.position == Vector2(2.0, 3.0)

    def test_settle(self) -> None:
        wheel = Wheel(position=Vector2(1.0, 1.0))
        wheel.place(Vector2(2.0, 3.0))
        wheel.settle()

        assert wheel.previous_position == wheel.position

    def test_corners(self) -> None:
        wheel = Wheel(position=Vector2(0.0, 0.0), forward=Vector2(1.0, 0.0))
        corners = wheel.corners(0.35, 0.15)

        assert len(corners) == 4
        assert corners[0] == Vector2(0.35, 0.15)
        assert corners[2] == Vector2(-0.35, -0.15)

    def test_position_order(self) -> None:
        assert [p.name for p in WheelPosition] == [
            "FRONT_LEFT", "FRONT_RIGHT", "REAR_RIGHT", "REAR_LEFT"
        ]
        assert WheelPosition.FRONT_RIGHT.is_front
        assert not WheelPosition.REAR_LEFT.is_front
