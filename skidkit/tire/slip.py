"""Lateral slip calculation."""

from __future__ import annotations

from skidkit.core.vector import Vector2, clamp


class SlipCalculator:
    """Calculate tire slip from a wheel's travel and pointing directions."""

    @staticmethod
    def slip_angle(
        move_direction: Vector2,
        forward: Vector2,
        max_slip_angle: float
    ) -> float:
        """Calculate the clamped lateral slip angle.

        Slip angle is the angle between the direction the wheel actually
        travelled and the direction it points. It is measured with
        ``Vector2.angle_between`` (the sine of the angle), which is what
        the force law is tuned against.

        Args:
            move_direction: Direction of travel since the last step
            forward: Direction the wheel is pointing
            max_slip_angle: Saturation limit (radians)

        Returns:
            Slip angle in [-max_slip_angle, max_slip_angle]
        """
        slip = move_direction.angle_between(forward)
        return clamp(slip, -max_slip_angle, max_slip_angle)
