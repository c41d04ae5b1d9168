"""Matplotlib-based plotting for recorded runs.

Provides static plots for:
- Vehicle trajectory with heading markers
- The skid mark trail, shaded by age
- Telemetry over time
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import numpy as np

try:
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False


def _check_matplotlib():
    """Check if matplotlib is available."""
    if not MATPLOTLIB_AVAILABLE:
        raise ImportError(
            "Matplotlib is required for plotting. "
            "Install it with: pip install matplotlib"
        )


class TrajectoryPlotter:
    """Plot vehicle trajectory and telemetry."""

    @staticmethod
    def plot_trajectory(
        positions: Sequence[Tuple[float, float]],
        headings: Optional[Sequence[Tuple[float, float]]] = None,
        ax: Optional[plt.Axes] = None,
        marker_interval: int = 50
    ) -> plt.Figure:
        """Plot vehicle trajectory path.

        World y grows downward on screen, so the y axis is inverted to
        match what the driver saw.

        Args:
            positions: List of (x, y) positions
            headings: Optional list of unit forward vectors, one per position
            ax: Optional axes to plot on
            marker_interval: Interval between heading arrows

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(10, 10))
        else:
            fig = ax.figure

        if len(positions) == 0:
            return fig

        path = np.asarray(positions, dtype=float)
        ax.plot(path[:, 0], path[:, 1], 'b-', linewidth=1.5, alpha=0.7)

        ax.plot(path[0, 0], path[0, 1], 'go', markersize=10, label='Start')
        ax.plot(path[-1, 0], path[-1, 1], 'rs', markersize=10, label='End')

        if headings is not None and len(headings) == len(positions):
            for i in range(0, len(positions), marker_interval):
                px, py = path[i]
                fx, fy = headings[i]
                ax.arrow(px, py, fx * 2, fy * 2, head_width=0.5, head_length=0.3,
                         fc='red', ec='red', alpha=0.5)

        ax.set_xlabel('X (meters)')
        ax.set_ylabel('Y (meters)')
        ax.set_title('Vehicle Trajectory')
        ax.legend()
        ax.grid(True, alpha=0.3)
        ax.set_aspect('equal')
        if not ax.yaxis_inverted():
            ax.invert_yaxis()

        return fig

    @staticmethod
    def plot_skidmarks(
        points: np.ndarray,
        ax: Optional[plt.Axes] = None
    ) -> plt.Figure:
        """Scatter skid mark points, older ones lighter.

        Args:
            points: (n, 2) array, oldest first (``SkidTrail.ordered_points``)
            ax: Optional axes to plot on

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        if ax is None:
            fig, ax = plt.subplots(figsize=(10, 10))
        else:
            fig = ax.figure

        if len(points) == 0:
            return fig

        recency = np.linspace(0.15, 1.0, len(points))
        ax.scatter(points[:, 0], points[:, 1], c=recency, cmap='Greys', s=2,
                   label='Skid marks')

        ax.set_aspect('equal')
        if not ax.yaxis_inverted():
            ax.invert_yaxis()

        return fig

    @staticmethod
    def plot_telemetry(
        time: List[float],
        speed_mph: List[float],
        steering: List[float],
        yaw_rate: List[float],
        figsize: Tuple[float, float] = (12, 8)
    ) -> plt.Figure:
        """Plot telemetry over time.

        Args:
            time: Time values (seconds)
            speed_mph: Speed values (mph)
            steering: Steering angle values (radians)
            yaw_rate: Yaw rate values (rad/s)
            figsize: Figure size

        Returns:
            Matplotlib figure
        """
        _check_matplotlib()

        fig, axes = plt.subplots(3, 1, figsize=figsize, sharex=True)

        axes[0].plot(time, speed_mph, 'b-')
        axes[0].set_ylabel('Speed (mph)')
        axes[0].grid(True, alpha=0.3)

        axes[1].plot(time, np.degrees(steering), 'm-')
        axes[1].set_ylabel('Steering (°)')
        axes[1].axhline(y=0, color='k', linewidth=0.5)
        axes[1].grid(True, alpha=0.3)

        axes[2].plot(time, np.degrees(yaw_rate), 'r-')
        axes[2].set_ylabel('Yaw Rate (°/s)')
        axes[2].axhline(y=0, color='k', linewidth=0.5)
        axes[2].grid(True, alpha=0.3)

        axes[2].set_xlabel('Time (seconds)')
        fig.suptitle('Telemetry')
        fig.tight_layout()

        return fig
