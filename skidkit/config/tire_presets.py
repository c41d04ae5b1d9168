"""Pre-configured tire parameter sets."""

from skidkit.tire.tire import TireConfig


TIRE_PRESETS = {
    "tarmac": {
        "name": "Tarmac",
        "description": "Dry road, the default grip level",
        "config": TireConfig.tarmac,
    },
    "wet": {
        "name": "Wet Tarmac",
        "description": "Standing water, grip drops by a third",
        "config": TireConfig.wet,
    },
    "gravel": {
        "name": "Gravel",
        "description": "Loose surface, low grip and a soft breakaway",
        "config": lambda: TireConfig(
            friction_mu=0.5,
            max_slip_angle=0.12
        ),
    },
    "ice": {
        "name": "Ice",
        "description": "Almost no grip, slides from the first input",
        "config": lambda: TireConfig(
            friction_mu=0.12,
            max_slip_angle=0.05
        ),
    },
}


def get_tire_config(preset_name: str) -> TireConfig:
    """Get a tire configuration by preset name.

    Args:
        preset_name: Name of the preset ('tarmac', 'wet', 'gravel', 'ice')

    Returns:
        TireConfig instance

    Raises:
        ValueError: If preset name is not found
    """
    if preset_name not in TIRE_PRESETS:
        available = ", ".join(TIRE_PRESETS.keys())
        raise ValueError(f"Unknown tire preset '{preset_name}'. Available: {available}")

    return TIRE_PRESETS[preset_name]["config"]()
