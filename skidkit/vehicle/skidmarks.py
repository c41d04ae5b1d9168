"""Fading trail of tire marks.

A fixed-capacity ring buffer of world points. New points overwrite the
oldest once the buffer is full; there is no other eviction.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, Tuple

import numpy as np

from skidkit.core.vector import Vector2

if TYPE_CHECKING:
    from skidkit.core.frame import DrawSurface

# Marks a slot that has never been written; far outside any world
SENTINEL: float = -1e6


class SkidTrail:
    """Ring buffer of skid mark points with implicit recency ordering."""

    DEFAULT_CAPACITY: int = 2000

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """Initialize an empty trail.

        Args:
            capacity: Number of points kept
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._points = np.full((capacity, 2), SENTINEL, dtype=np.float64)
        self._head: int = 0

    @property
    def head(self) -> int:
        """Index the next point will be written to."""
        return self._head

    def add(self, point: Vector2) -> None:
        """Write a point at the head and advance it."""
        self._points[self._head] = (point.x, point.y)
        self._head = (self._head + 1) % self.capacity

    def _occupied(self) -> np.ndarray:
        return self._points[:, 0] != SENTINEL

    def __len__(self) -> int:
        return int(np.count_nonzero(self._occupied()))

    def age(self, index: int) -> int:
        """Circular distance from the head back to a slot.

        The most recently written slot has age 1, the slot at the head
        (next to be overwritten) has age ``capacity``.
        """
        dist = self._head - index
        if dist <= 0:
            dist += self.capacity
        return dist

    def iter_points(self) -> Iterator[Tuple[Vector2, int]]:
        """Yield (point, age) for every occupied slot, in slot order."""
        for i in np.flatnonzero(self._occupied()):
            yield Vector2.from_array(self._points[i]), self.age(int(i))

    def ordered_points(self) -> np.ndarray:
        """Occupied points oldest first, as an (n, 2) array."""
        rolled = np.roll(self._points, -self._head, axis=0)
        return rolled[rolled[:, 0] != SENTINEL].copy()

    def shade(self, age: int) -> int:
        """Grey level for a point of the given age; older is darker."""
        return int(128 - age * (127.5 / self.capacity))

    def render(self, surface: DrawSurface, render_scale: float) -> None:
        """Draw every occupied slot as one pixel.

        Args:
            surface: Target surface
            render_scale: Pixels per meter
        """
        for point, age in self.iter_points():
            c = self.shade(age)
            surface.put_pixel(point.x * render_scale, point.y * render_scale, (c, c, c))

    def clear(self) -> None:
        """Remove all points."""
        self._points.fill(SENTINEL)
        self._head = 0
