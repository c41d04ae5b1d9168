"""Headless frame driver and surface.

``ScriptedDriver`` replays a fixed list of frames and ``RecordingSurface``
keeps every drawing call, so a session can run without a window (tests,
batch traces).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from skidkit.core.frame import Colour, InputSample


@dataclass
class ScriptedFrame:
    """One frame of scripted input."""
    elapsed_time: float
    inputs: InputSample = field(default_factory=InputSample)


class RecordingSurface:
    """DrawSurface that stores primitives instead of drawing them."""

    def __init__(self, width: int = 1280, height: int = 720):
        self._width = width
        self._height = height
        self.lines: List[Tuple[float, float, float, float, Colour]] = []
        self.pixels: List[Tuple[float, float, Colour]] = []
        self.texts: List[Tuple[float, float, str, Colour, str]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self, colour: Colour) -> None:
        self.lines.clear()
        self.pixels.clear()
        self.texts.clear()

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, colour: Colour) -> None:
        self.lines.append((x0, y0, x1, y1, colour))

    def put_pixel(self, x: float, y: float, colour: Colour) -> None:
        self.pixels.append((x, y, colour))

    def draw_text(self, x: float, y: float, text: str, colour: Colour,
                  align: str = "left") -> None:
        self.texts.append((x, y, text, colour, align))


class ScriptedDriver:
    """FrameDriver that replays scripted frames, then quits."""

    def __init__(self, frames: Iterable[ScriptedFrame], width: int = 1280, height: int = 720):
        self._frames = list(frames)
        self._index = -1
        self._surface = RecordingSurface(width, height)
        self.presented: int = 0

    @classmethod
    def constant(cls, count: int, elapsed_time: float,
                 inputs: Optional[InputSample] = None, **kwargs) -> ScriptedDriver:
        """Script ``count`` identical frames."""
        inputs = inputs or InputSample()
        return cls([ScriptedFrame(elapsed_time, inputs) for _ in range(count)], **kwargs)

    def sample_input(self) -> InputSample:
        self._index += 1
        if self._index >= len(self._frames):
            return InputSample(quit=True)
        return self._frames[self._index].inputs

    def elapsed_time(self) -> float:
        return self._frames[self._index].elapsed_time

    def surface(self) -> RecordingSurface:
        return self._surface

    def present(self) -> None:
        self.presented += 1
