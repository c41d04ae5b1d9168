#!/usr/bin/env python3
"""Compare skid trails on different surfaces.

This example demonstrates:
- Scripting a session with the headless frame driver
- Swapping tire presets on the same car
- Plotting the resulting trajectories and skid marks

Run with: python examples/skid_trace.py [--save]
"""

import sys

from skidkit.config import get_vehicle_config
from skidkit.core.frame import InputSample
from skidkit.core.world import run_frame_loop
from skidkit.vehicle.car import Car
from skidkit.visualization.recorder import ScriptedDriver, ScriptedFrame


def trace(tire: str):
    """Respawn the hatchback and let it spin out on one surface."""
    car = Car(get_vehicle_config("hatchback", tire))
    # First frame throws the car in moving and spinning
    frames = [ScriptedFrame(1 / 60, InputSample(respawn=True))]
    frames += [ScriptedFrame(1 / 60, InputSample(mouse_dx=1.0)) for _ in range(239)]
    driver = ScriptedDriver(frames)

    positions = []
    run_frame_loop(
        driver, car, bounded=False,
        on_frame=lambda c, ctx: positions.append(tuple(c.body.position))
    )
    return positions, car.skidmarks.ordered_points()


def main():
    """Plot traces for each tire preset."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("This example requires matplotlib. Install with: pip install matplotlib")
        return 1

    from skidkit.visualization.plotter import TrajectoryPlotter

    tires = ["tarmac", "wet", "gravel", "ice"]
    fig, axes = plt.subplots(1, len(tires), figsize=(5 * len(tires), 5))

    for ax, tire in zip(axes, tires):
        positions, skids = trace(tire)
        TrajectoryPlotter.plot_skidmarks(skids, ax=ax)
        TrajectoryPlotter.plot_trajectory(positions, ax=ax)
        ax.set_title(tire.title())
        print(f"{tire:8} travelled to ({positions[-1][0]:.1f}, {positions[-1][1]:.1f})")

    fig.suptitle('Respawn spin-out by surface', fontsize=14)
    plt.tight_layout()

    if len(sys.argv) > 1 and sys.argv[1] == '--save':
        output_file = 'skid_trace.png'
        plt.savefig(output_file, dpi=150)
        print(f"Saved to: {output_file}")
    else:
        print("Displaying plot. Close window to exit.")
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
