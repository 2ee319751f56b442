from __future__ import annotations

import logging
from typing import Any

from esper import World

from stickynote.constants import LEFT_MOUSE_BUTTON
from stickynote.events.bus import (
    EVENT_MOUSE_LEAVE_RAW,
    EVENT_MOUSE_MOVE_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_POINTER_LEAVE,
    EVENT_POINTER_MOVE,
    EVENT_POINTER_PRESS,
    EVENT_POINTER_RELEASE,
    EVENT_SURFACE_RESIZED,
    EventBus,
)
from stickynote.utils.numbers import finite_floats
from stickynote.world import get_surface

logger = logging.getLogger(__name__)


class PointerInputSystem:
    """Bridges raw window mouse events to surface-local pointer events.

    Window coordinates are pixels with the origin at the bottom-left. Pointer
    events carry logical surface units with the origin at the top-left, so the
    rest of the systems never see the window size.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        button: int = LEFT_MOUSE_BUTTON,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.button = button
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self._on_mouse_press_raw)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE_RAW, self._on_mouse_release_raw)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE_RAW, self._on_mouse_move_raw)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE_RAW, self._on_mouse_leave_raw)
        self.event_bus.subscribe(EVENT_SURFACE_RESIZED, self._on_surface_resized)

    def to_local(self, x: float, y: float) -> tuple[float, float]:
        """Translate window pixels into surface-local units."""
        surface = get_surface(self.world)
        return x / surface.scale_x, (surface.viewport_height - y) / surface.scale_y

    def _button_matches(self, payload: dict[str, Any]) -> bool:
        try:
            return int(payload.get("button")) == self.button
        except (TypeError, ValueError):
            return False

    def _on_mouse_press_raw(self, sender: Any, **payload: Any) -> None:
        if not self._button_matches(payload):
            return
        coords = finite_floats(payload.get("x"), payload.get("y"))
        if coords is None:
            logger.debug("Dropping press with bad coordinates: %r", payload)
            return
        x, y = self.to_local(*coords)
        self.event_bus.emit(EVENT_POINTER_PRESS, x=x, y=y, button=self.button)

    def _on_mouse_release_raw(self, sender: Any, **payload: Any) -> None:
        # A release always ends the drag; its position is informational only.
        if not self._button_matches(payload):
            return
        coords = finite_floats(payload.get("x"), payload.get("y"))
        x, y = self.to_local(*coords) if coords is not None else (None, None)
        self.event_bus.emit(EVENT_POINTER_RELEASE, x=x, y=y, button=self.button)

    def _on_mouse_move_raw(self, sender: Any, **payload: Any) -> None:
        coords = finite_floats(payload.get("x"), payload.get("y"))
        if coords is None:
            logger.debug("Dropping move with bad coordinates: %r", payload)
            return
        x, y = self.to_local(*coords)
        self.event_bus.emit(EVENT_POINTER_MOVE, x=x, y=y)

    def _on_mouse_leave_raw(self, sender: Any, **payload: Any) -> None:
        self.event_bus.emit(EVENT_POINTER_LEAVE)

    def _on_surface_resized(self, sender: Any, **payload: Any) -> None:
        size = finite_floats(payload.get("width"), payload.get("height"))
        if size is None or size[0] <= 0 or size[1] <= 0:
            return
        surface = get_surface(self.world)
        surface.viewport_width, surface.viewport_height = size
        logger.debug("Viewport resized to %sx%s", *size)
