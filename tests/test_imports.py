"""Tests that the simulation core loads without the display libraries."""

import subprocess
import sys

import pytest

DISPLAY_MODULES = ["pygame", "matplotlib.pyplot"]


@pytest.mark.parametrize("module", [
    "skidkit",
    "skidkit.core",
    "skidkit.vehicle.car",
    "skidkit.config",
])
def test_core_import_skips_display_libraries(module: str) -> None:
    """Importing the car model must not open pygame or pyplot."""
    script = (
        f"import sys; import {module}; "
        f"print(','.join(m for m in {DISPLAY_MODULES!r} if m in sys.modules))"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True, text=True, check=True
    )

    assert result.stdout.strip() == ""
