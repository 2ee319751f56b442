from dataclasses import dataclass
from typing import Tuple

from stickynote.constants import BACKGROUND_END, BACKGROUND_START, SURFACE_HEIGHT, SURFACE_WIDTH


@dataclass
class Surface:
    """Singleton component for the drawing surface.

    ``width``/``height`` are the logical size every note coordinate lives in.
    ``viewport_width``/``viewport_height`` track the window in pixels so input
    and painting can be rescaled when the window is resized.
    """
    width: float = SURFACE_WIDTH
    height: float = SURFACE_HEIGHT
    viewport_width: float = SURFACE_WIDTH
    viewport_height: float = SURFACE_HEIGHT
    background_start: Tuple[int, int, int, int] = BACKGROUND_START
    background_end: Tuple[int, int, int, int] = BACKGROUND_END

    @property
    def scale_x(self) -> float:
        return self.viewport_width / self.width

    @property
    def scale_y(self) -> float:
        return self.viewport_height / self.height
