"""Wheel contact points and their lateral tire force."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List

from skidkit.core.vector import Vector2
from skidkit.tire.slip import SlipCalculator
from skidkit.tire.tire import LinearTire


class WheelPosition(IntEnum):
    """Wheel positions on the vehicle, in storage order."""
    FRONT_LEFT = 0
    FRONT_RIGHT = 1
    REAR_RIGHT = 2
    REAR_LEFT = 3

    @property
    def is_front(self) -> bool:
        return self in (WheelPosition.FRONT_LEFT, WheelPosition.FRONT_RIGHT)


@dataclass
class Wheel:
    """One tire contact point.

    ``forward`` is not owned state: the car overwrites it on every
    geometry update from its heading plus this wheel's steering angle.
    """
    position: Vector2 = field(default_factory=Vector2)
    previous_position: Vector2 = field(default_factory=Vector2)
    forward: Vector2 = field(default_factory=lambda: Vector2(1.0, 0.0))
    force: Vector2 = field(default_factory=Vector2)
    slip_angle: float = 0.0

    def place(self, position: Vector2) -> None:
        """Move the contact point, remembering where it was."""
        self.previous_position = self.position
        self.position = position

    def settle(self) -> None:
        """Forget the travel history, as if the wheel had always been here."""
        self.previous_position = self.position

    def calc_lateral_force(self, tire: LinearTire, normal_load: float) -> Vector2:
        """Compute the lateral force from this wheel's slip.

        The travel direction is the wheel's movement since the previous
        geometry update. A wheel that has not moved has no travel
        direction and produces no force.

        Args:
            tire: Tire model
            normal_load: Vertical load on this wheel (N)

        Returns:
            Force in world coordinates (N), also stored in ``self.force``
        """
        move = self.position - self.previous_position
        if move.magnitude_squared() == 0.0:
            self.slip_angle = 0.0
            self.force = Vector2()
            return self.force

        self.slip_angle = SlipCalculator.slip_angle(
            move.normalized(), self.forward, tire.config.max_slip_angle
        )
        magnitude = tire.lateral_force(self.slip_angle, normal_load)
        self.force = self.forward.perpendicular() * magnitude
        return self.force

    def corners(self, half_length: float, half_width: float) -> List[Vector2]:
        """Outline of the tire as four world points."""
        fr = self.forward * half_length
        ortho = self.forward.perpendicular() * half_width
        return [
            self.position + fr - ortho,
            self.position + fr + ortho,
            self.position - fr + ortho,
            self.position - fr - ortho,
        ]
