from __future__ import annotations

from typing import Any

from stickynote.events.bus import (
    EVENT_POINTER_MOVE,
    EVENT_POINTER_PRESS,
    EVENT_POINTER_RELEASE,
    EventBus,
)


class _RecordedShape:
    def __init__(self, calls: list, points, colors) -> None:
        self._calls = calls
        self.points = points
        self.colors = colors

    def draw(self) -> None:
        self._calls.append(("gradient", tuple(self.points), tuple(self.colors)))


class _ShapeList:
    def __init__(self, calls: list) -> None:
        self._calls = calls
        self.created = 0

    def create_rectangle_filled_with_colors(self, point_list, color_list):
        self.created += 1
        return _RecordedShape(self._calls, point_list, color_list)


class RecordingArcade:
    """Stands in for the ``arcade`` module and records every draw call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.shape_list = _ShapeList(self.calls)

    def draw_lbwh_rectangle_filled(self, left, bottom, width, height, color):
        self.calls.append(("rect", left, bottom, width, height, color))

    def draw_line(self, start_x, start_y, end_x, end_y, color, line_width=1):
        self.calls.append(("line", start_x, start_y, end_x, end_y, color, line_width))

    def draw_text(self, text, x, y, color, font_size, **kwargs):
        self.calls.append(("text", text, x, y, color, font_size, kwargs))

    def draw_circle_filled(self, center_x, center_y, radius, color):
        self.calls.append(("circle", center_x, center_y, radius, color))

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


def drag_note(bus: EventBus, start: tuple[float, float], *moves: tuple[float, float]) -> None:
    """Press at ``start``, move through ``moves`` and release at the last point."""
    bus.emit(EVENT_POINTER_PRESS, x=start[0], y=start[1], button=1)
    last = start
    for x, y in moves:
        bus.emit(EVENT_POINTER_MOVE, x=x, y=y)
        last = (x, y)
    bus.emit(EVENT_POINTER_RELEASE, x=last[0], y=last[1], button=1)
