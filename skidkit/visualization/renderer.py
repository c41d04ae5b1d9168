"""Pygame-based frame driver for interactive driving.

Provides:
- A window whose pixels are the drawing surface
- Relative mouse steering with the cursor hidden and grabbed
- Mouse buttons for throttle and brake
- Keyboard handling for respawn, overlay toggles and quit
"""

from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from skidkit.core.frame import Colour, InputSample


@dataclass
class RenderConfig:
    """Renderer configuration."""
    width: int = 1280
    height: int = 720
    scale: float = 15.0             # Pixels per meter
    background_color: Tuple[int, int, int] = (0, 0, 0)
    font_size: int = 18

    bounded_world: bool = True
    show_forces: bool = False
    grab_mouse: bool = True


class PygameSurface:
    """DrawSurface over a pygame display surface."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self._screen = screen
        self._font = font

    @property
    def width(self) -> int:
        return self._screen.get_width()

    @property
    def height(self) -> int:
        return self._screen.get_height()

    def clear(self, colour: Colour) -> None:
        self._screen.fill(colour)

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, colour: Colour) -> None:
        pygame.draw.line(self._screen, colour, (int(x0), int(y0)), (int(x1), int(y1)))

    def put_pixel(self, x: float, y: float, colour: Colour) -> None:
        ix, iy = int(x), int(y)
        if 0 <= ix < self.width and 0 <= iy < self.height:
            self._screen.set_at((ix, iy), colour)

    def draw_text(self, x: float, y: float, text: str, colour: Colour,
                  align: str = "left") -> None:
        rendered = self._font.render(text, True, colour)
        if align == "right":
            x -= rendered.get_width()
        elif align == "center":
            x -= rendered.get_width() / 2
        self._screen.blit(rendered, (int(x), int(y)))


class PygameDriver:
    """FrameDriver backed by a pygame window.

    Controls:
        Mouse move   - Steer
        Right button - Accelerate
        Left button  - Decelerate
        Space        - Respawn (on release)
        F            - Toggle force arrows
        Esc          - Quit
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize driver.

        Args:
            config: Render configuration. Uses defaults if None.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError(
                "Pygame is required for visualization. "
                "Install it with: pip install pygame"
            )

        self.config = config or RenderConfig()
        self._initialized = False

        self._screen = None
        self._surface: Optional[PygameSurface] = None
        self._frame_start: float = 0.0

        self._show_forces = self.config.show_forces

    def init(self) -> None:
        """Initialize Pygame and create window."""
        pygame.init()
        pygame.display.set_caption("SkidKit - Car sim")

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height)
        )
        font = pygame.font.Font(None, self.config.font_size)
        self._surface = PygameSurface(self._screen, font)

        if self.config.grab_mouse:
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)
        # Discard movement accumulated before the first frame
        pygame.mouse.get_rel()

        self._frame_start = time.perf_counter()
        self._initialized = True

    def quit(self) -> None:
        """Clean up Pygame."""
        if self._initialized:
            pygame.quit()
            self._initialized = False

    def elapsed_time(self) -> float:
        """Real seconds since the previous call."""
        now = time.perf_counter()
        elapsed = now - self._frame_start
        self._frame_start = now
        return elapsed

    def sample_input(self) -> InputSample:
        """Process input events and return this frame's input."""
        if not self._initialized:
            self.init()

        quit_requested = False
        respawn = False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_f:
                    self._show_forces = not self._show_forces
            elif event.type == pygame.KEYUP:
                if event.key == pygame.K_SPACE:
                    respawn = True

        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            quit_requested = True

        mouse_dx, _ = pygame.mouse.get_rel()
        left, _, right = pygame.mouse.get_pressed()

        return InputSample(
            mouse_dx=float(mouse_dx),
            throttle=bool(right),
            brake=bool(left),
            respawn=respawn,
            quit=quit_requested,
            show_forces=self._show_forces
        )

    def surface(self) -> PygameSurface:
        if not self._initialized:
            self.init()
        return self._surface

    def present(self) -> None:
        """Flip the display and yield briefly to the OS."""
        pygame.display.flip()
        pygame.time.wait(1)
