"""Pre-configured vehicle parameter sets."""

from typing import Optional

from skidkit.vehicle.car import CarConfig
from skidkit.config.tire_presets import get_tire_config


VEHICLE_PRESETS = {
    "hatchback": {
        "name": "Hatchback",
        "description": "Small 1.1 tonne hatchback, the default",
        "config": CarConfig.hatchback,
    },
    "estate": {
        "name": "Estate",
        "description": "Long, heavy and slow to rotate",
        "config": CarConfig.estate,
    },
    "kart": {
        "name": "Kart",
        "description": "Tiny and light, turns on the spot",
        "config": CarConfig.kart,
    },
}


def get_vehicle_config(preset_name: str, tire_preset: Optional[str] = None) -> CarConfig:
    """Get a vehicle configuration by preset name.

    Args:
        preset_name: Name of the preset
        tire_preset: Optional tire preset replacing the vehicle's own tires

    Returns:
        CarConfig instance

    Raises:
        ValueError: If either preset name is not found
    """
    if preset_name not in VEHICLE_PRESETS:
        available = ", ".join(VEHICLE_PRESETS.keys())
        raise ValueError(f"Unknown vehicle preset '{preset_name}'. Available: {available}")

    config = VEHICLE_PRESETS[preset_name]["config"]()
    if tire_preset is not None:
        config.tire_config = get_tire_config(tire_preset)
    return config
