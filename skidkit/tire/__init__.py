"""Tire physics with a saturating-linear lateral force law."""

from skidkit.tire.slip import SlipCalculator
from skidkit.tire.tire import LinearTire, TireConfig

__all__ = [
    "SlipCalculator",
    "LinearTire",
    "TireConfig",
]
