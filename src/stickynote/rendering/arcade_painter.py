from __future__ import annotations

from typing import Callable, Iterable

from stickynote.components.surface import Surface
from stickynote.constants import PX_TO_PT
from stickynote.rendering.commands import (
    ClearRect,
    DrawCommand,
    FillCircle,
    FillGradientRect,
    FillRect,
    FillText,
    StrokeLine,
)


def _mix(start, end):
    return tuple((a + b) // 2 for a, b in zip(start, end))


class ArcadePainter:
    """Replays draw commands through the arcade drawing API.

    Commands use surface-local units with y pointing down; arcade draws in
    window pixels with y pointing up, so every coordinate is scaled by the
    surface/viewport ratio and flipped.
    """

    def __init__(self, clear: Callable[[], None] | None = None):
        self._clear = clear
        # Gradient geometry is only uploaded again when the viewport changes.
        self._gradient_key = None
        self._gradient_shape = None

    def paint(self, arcade, commands: Iterable[DrawCommand], surface: Surface) -> int:
        """Draw ``commands`` in order and return how many produced output."""
        drawn = 0
        for command in commands:
            if self._paint_one(arcade, command, surface):
                drawn += 1
        return drawn

    def _paint_one(self, arcade, command: DrawCommand, surface: Surface) -> bool:
        sx = surface.scale_x
        sy = surface.scale_y
        top = surface.viewport_height

        if isinstance(command, ClearRect):
            if self._clear is None:
                return False
            self._clear()
            return True
        if isinstance(command, FillRect):
            arcade.draw_lbwh_rectangle_filled(
                command.x * sx,
                top - (command.y + command.height) * sy,
                command.width * sx,
                command.height * sy,
                command.color,
            )
            return True
        if isinstance(command, FillGradientRect):
            left = command.x * sx
            right = (command.x + command.width) * sx
            upper = top - command.y * sy
            lower = top - (command.y + command.height) * sy
            key = (left, upper, right, lower, command.start_color, command.end_color)
            if key != self._gradient_key:
                middle = _mix(command.start_color, command.end_color)
                self._gradient_shape = arcade.shape_list.create_rectangle_filled_with_colors(
                    [(left, upper), (right, upper), (right, lower), (left, lower)],
                    [command.start_color, middle, command.end_color, middle],
                )
                self._gradient_key = key
            self._gradient_shape.draw()
            return True
        if isinstance(command, StrokeLine):
            arcade.draw_line(
                command.x1 * sx,
                top - command.y1 * sy,
                command.x2 * sx,
                top - command.y2 * sy,
                command.color,
                command.line_width,
            )
            return True
        if isinstance(command, FillText):
            if not command.text:
                return False
            arcade.draw_text(
                command.text,
                command.x * sx,
                top - command.y * sy,
                command.color,
                command.font_size * PX_TO_PT * sy,
                font_name=command.font_name,
                anchor_x="left",
                anchor_y="baseline",
            )
            return True
        if isinstance(command, FillCircle):
            arcade.draw_circle_filled(
                command.cx * sx,
                top - command.cy * sy,
                command.radius * min(sx, sy),
                command.color,
            )
            return True
        return False
