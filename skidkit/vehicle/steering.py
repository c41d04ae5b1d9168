"""Steering system with Ackermann geometry.

Ackermann steering geometry ensures that during a turn, the inner wheel
turns at a sharper angle than the outer wheel. This allows both front
wheels to roll around a common center point, reducing tire scrub.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from skidkit.core.vector import clamp


@dataclass
class SteeringConfig:
    """Steering system configuration."""
    # Steering lock at the inner wheel (radians)
    max_steer_angle: float = 0.7

    # Radians of steering per pixel of horizontal mouse movement
    sensitivity: float = 0.002

    # Vehicle geometry (needed for Ackermann calculation)
    length: float = 3.995
    half_front_track: float = 0.75


class Steering:
    """Steering system driven by relative mouse movement.

    Holds the steering angle, integrates mouse movement into it and
    converts it into individual front wheel angles.
    """

    def __init__(self, config: SteeringConfig):
        """Initialize steering system.

        Args:
            config: Steering configuration
        """
        self.config = config
        self._angle: float = 0.0

    def update(self, mouse_dx: float) -> float:
        """Integrate a mouse movement into the steering angle.

        Args:
            mouse_dx: Horizontal mouse movement since the last frame (pixels)

        Returns:
            New steering angle (radians), clamped to the lock
        """
        self.set_angle(self._angle + mouse_dx * self.config.sensitivity)
        return self._angle

    def set_angle(self, angle: float) -> None:
        """Set the steering angle directly, clamped to the lock."""
        lock = self.config.max_steer_angle
        self._angle = clamp(angle, -lock, lock)

    def reset(self) -> None:
        """Center the steering."""
        self._angle = 0.0

    def get_wheel_angles(self, angle: Optional[float] = None) -> tuple[float, float]:
        """Get steering angles for front wheels.

        The inner wheel gets the full steering angle; the outer wheel
        follows a wider circle and gets a smaller one.

        Args:
            angle: Override steering angle. If None, uses current state.

        Returns:
            Tuple of (left_angle, right_angle) in radians.
        """
        if angle is None:
            angle = self._angle

        if angle == 0.0:
            # Going straight, tan(0) would divide by zero
            return 0.0, 0.0

        corner_radius = self.config.length / math.tan(abs(angle))
        outer_angle = math.atan(
            self.config.length / (corner_radius + self.config.half_front_track * 2.0)
        )

        if angle > 0.0:
            return angle, outer_angle
        return -outer_angle, angle

    def get_turn_radius(self, angle: Optional[float] = None) -> float:
        """Radius of the circle the inner front wheel follows.

        Returns:
            Turn radius in meters. Returns inf for straight steering.
        """
        if angle is None:
            angle = self._angle

        if angle == 0.0:
            return float('inf')

        return self.config.length / math.tan(abs(angle))

    @property
    def angle(self) -> float:
        """Current steering angle (radians)."""
        return self._angle
