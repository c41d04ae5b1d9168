"""Saturating-linear lateral tire model."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class TireConfig:
    """Configuration for a tire."""
    friction_mu: float = 0.7           # Coefficient of friction
    max_slip_angle: float = 0.07       # Slip at which force saturates (radians)

    def __post_init__(self) -> None:
        if self.max_slip_angle <= 0.0:
            raise ValueError(f"max_slip_angle must be positive, got {self.max_slip_angle}")

    @classmethod
    def tarmac(cls) -> TireConfig:
        """Dry road tire."""
        return cls(friction_mu=0.7, max_slip_angle=0.07)

    @classmethod
    def wet(cls) -> TireConfig:
        """Wet road, same stiffness curve shape with less grip."""
        return cls(friction_mu=0.45, max_slip_angle=0.07)


class LinearTire:
    """Lateral force grows linearly with slip up to the limit, then stays flat.

    F = (slip / max_slip) * normal_load * mu, with slip already clamped
    to [-max_slip, max_slip].
    """

    def __init__(self, config: Optional[TireConfig] = None):
        """Initialize tire.

        Args:
            config: Tire configuration. Defaults to tarmac.
        """
        self.config = config or TireConfig.tarmac()

    def max_lateral_force(self, normal_load: float) -> float:
        """Force magnitude at saturation (N)."""
        return normal_load * self.config.friction_mu

    def lateral_force(self, slip_angle: float, normal_load: float) -> float:
        """Signed lateral force magnitude for a clamped slip angle.

        Args:
            slip_angle: Slip angle in [-max_slip_angle, max_slip_angle]
            normal_load: Vertical load on the tire (N)

        Returns:
            Force along the wheel's perpendicular (N)
        """
        fraction_of_max = slip_angle / self.config.max_slip_angle
        return fraction_of_max * normal_load * self.config.friction_mu
