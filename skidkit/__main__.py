"""CLI entry point for SkidKit.

Run with: python -m skidkit [command]

Commands:
    drive     - Drive the car in a window
    trace     - Run a scripted session headless and plot it
    info      - Show available presets
"""

import sys
import argparse
import logging
from pathlib import Path


def run_drive(args):
    """Drive the car interactively."""
    try:
        from skidkit.visualization import PygameDriver, RenderConfig
        driver = PygameDriver(RenderConfig(
            width=args.width,
            height=args.height,
            scale=args.scale,
            bounded_world=not args.unbounded
        ))
    except ImportError as e:
        print(f"Error: {e}")
        return 1

    from skidkit.core.world import run_frame_loop
    from skidkit.vehicle.car import Car
    from skidkit.config.vehicle_presets import get_vehicle_config

    try:
        config = get_vehicle_config(args.vehicle, args.tire)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("SkidKit Car Sim")
    print("=" * 40)
    print(f"Vehicle: {args.vehicle}")
    print(f"Tires:   {args.tire}")
    print()
    print("Controls:")
    print("  Mouse        - Steer")
    print("  Right button - Accelerate")
    print("  Left button  - Decelerate")
    print("  Space        - Respawn")
    print("  F            - Toggle force arrows")
    print("  Esc          - Quit")
    print()

    car = Car(config)

    try:
        run_frame_loop(
            driver,
            car,
            render_scale=driver.config.scale,
            bounded=driver.config.bounded_world,
            background=driver.config.background_color
        )
    except KeyboardInterrupt:
        pass
    finally:
        driver.quit()

    print("Simulation ended.")
    return 0


def run_trace(args):
    """Run a scripted session without a window and plot the result."""
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Error: Matplotlib is required for plotting.")
        print("Install it with: pip install matplotlib")
        return 1

    from skidkit.core.frame import InputSample
    from skidkit.core.world import run_frame_loop
    from skidkit.vehicle.car import Car
    from skidkit.config.vehicle_presets import get_vehicle_config
    from skidkit.visualization.recorder import ScriptedDriver, ScriptedFrame
    from skidkit.visualization.plotter import TrajectoryPlotter

    try:
        config = get_vehicle_config(args.vehicle, args.tire)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    dt = 1.0 / args.fps
    frames = []
    for i in range(args.frames):
        frames.append(ScriptedFrame(dt, InputSample(
            mouse_dx=args.steer if i < args.steer_frames else 0.0,
            throttle=args.throttle,
            respawn=args.respawn and i == 0
        )))

    driver = ScriptedDriver(frames, width=args.width, height=args.height)
    car = Car(config)

    time, positions, headings, speed, steering, yaw_rate = [], [], [], [], [], []

    def record(car, context):
        state = car.get_state()
        time.append(state.sim_time)
        positions.append(tuple(state.position))
        headings.append(tuple(state.forward))
        speed.append(state.speed_mph)
        steering.append(state.steering_angle)
        yaw_rate.append(state.angular_velocity)

    run_frame_loop(driver, car, render_scale=args.scale,
                   bounded=not args.unbounded, on_frame=record)

    final = car.get_state()
    print(f"Simulated {final.sim_time:.2f}s over {args.frames} frames")
    print(f"Final position: ({final.position.x:.2f}, {final.position.y:.2f})")
    print(f"Final speed:    {final.speed_mph:.1f} mph")
    print(f"Skid marks:     {len(car.skidmarks)}")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 7))
    TrajectoryPlotter.plot_skidmarks(car.skidmarks.ordered_points(), ax=ax1)
    TrajectoryPlotter.plot_trajectory(positions, headings, ax=ax1)
    ax2.plot(time, speed, 'b-')
    ax2.set_xlabel('Time (seconds)')
    ax2.set_ylabel('Speed (mph)')
    ax2.grid(True, alpha=0.3)
    fig.suptitle(f'{args.vehicle.title()} on {args.tire}')
    fig.tight_layout()

    telemetry_fig = None
    if args.telemetry:
        telemetry_fig = TrajectoryPlotter.plot_telemetry(time, speed, steering, yaw_rate)

    if args.output:
        fig.savefig(args.output, dpi=150)
        print(f"Saved to: {args.output}")
        if telemetry_fig is not None:
            output = Path(args.output)
            telemetry_path = output.with_name(f"{output.stem}_telemetry{output.suffix}")
            telemetry_fig.savefig(telemetry_path, dpi=150)
            print(f"Saved to: {telemetry_path}")
    else:
        plt.show()

    return 0


def show_info(args):
    """Show available presets and information."""
    from skidkit import __version__
    from skidkit.config.tire_presets import TIRE_PRESETS
    from skidkit.config.vehicle_presets import VEHICLE_PRESETS

    print(f"SkidKit v{__version__}")
    print("=" * 40)
    print()

    print("Vehicle Presets:")
    print("-" * 30)
    for name, info in VEHICLE_PRESETS.items():
        print(f"  {name:15} - {info['description']}")
    print()

    print("Tire Presets:")
    print("-" * 30)
    for name, info in TIRE_PRESETS.items():
        print(f"  {name:15} - {info['description']}")
    print()

    return 0


def _add_world_args(parser):
    parser.add_argument(
        "-v", "--vehicle",
        default="hatchback",
        help="Vehicle preset to use (default: hatchback)"
    )
    parser.add_argument(
        "-t", "--tire",
        default="tarmac",
        help="Tire preset to use (default: tarmac)"
    )
    parser.add_argument(
        "--width", type=int, default=1280,
        help="Surface width in pixels (default: 1280)"
    )
    parser.add_argument(
        "--height", type=int, default=720,
        help="Surface height in pixels (default: 720)"
    )
    parser.add_argument(
        "--scale", type=float, default=15.0,
        help="Pixels per meter (default: 15)"
    )
    parser.add_argument(
        "--unbounded", action="store_true",
        help="Let the car leave the screen instead of bouncing off the edges"
    )


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="SkidKit - Top-down car simulation with skid marks",
        prog="skidkit"
    )
    parser.add_argument(
        "--version", action="version",
        version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Drive command
    drive_parser = subparsers.add_parser("drive", help="Drive the car in a window")
    _add_world_args(drive_parser)

    # Trace command
    trace_parser = subparsers.add_parser("trace", help="Run a scripted session and plot it")
    _add_world_args(trace_parser)
    trace_parser.add_argument(
        "-n", "--frames",
        type=int, default=300,
        help="Number of frames to simulate (default: 300)"
    )
    trace_parser.add_argument(
        "--fps",
        type=float, default=60.0,
        help="Simulated frame rate (default: 60)"
    )
    trace_parser.add_argument(
        "-s", "--steer",
        type=float, default=2.0,
        help="Mouse pixels per frame while steering (default: 2)"
    )
    trace_parser.add_argument(
        "--steer-frames",
        type=int, default=60,
        help="Frames to keep turning the wheel for (default: 60)"
    )
    trace_parser.add_argument(
        "--throttle", action="store_true",
        help="Hold the throttle for the whole run"
    )
    trace_parser.add_argument(
        "--respawn", action="store_true",
        help="Start with a respawn (moving and spinning)"
    )
    trace_parser.add_argument(
        "--telemetry", action="store_true",
        help="Also plot speed, steering and yaw rate over time"
    )
    trace_parser.add_argument(
        "-o", "--output",
        help="Save plot to file instead of displaying"
    )

    # Info command
    subparsers.add_parser("info", help="Show available presets")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    if args.command == "drive":
        return run_drive(args)
    elif args.command == "trace":
        return run_trace(args)
    elif args.command == "info":
        return show_info(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
