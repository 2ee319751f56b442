"""Arcade window hosting a draggable sticky note.

Sets up the ECS world, event bus and systems, and forwards raw mouse input
onto the bus. Drawing happens only from ``on_draw``.
"""
import logging
import os

from arcade import Window, run

from stickynote.constants import SURFACE_HEIGHT, SURFACE_WIDTH, WINDOW_TITLE
from stickynote.events.bus import (
    EVENT_MOUSE_LEAVE_RAW,
    EVENT_MOUSE_MOVE_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_NOTE_DRAG_ENDED,
    EVENT_NOTE_DRAG_STARTED,
    EVENT_SURFACE_RESIZED,
    EventBus,
)
from stickynote.logging_utils import configure_logging
from stickynote.systems.drag_system import NoteDragSystem
from stickynote.systems.pointer_input_system import PointerInputSystem
from stickynote.systems.render import NoteRenderSystem
from stickynote.ui.cursor import cursor_for
from stickynote.world import create_world

logger = logging.getLogger(__name__)


class StickyNoteWindow(Window):
    def __init__(self):
        super().__init__(SURFACE_WIDTH, SURFACE_HEIGHT, WINDOW_TITLE, resizable=True)
        self.event_bus = EventBus()
        self.world = create_world(viewport_size=(self.width, self.height))
        self.pointer_input_system = PointerInputSystem(self.world, self.event_bus)
        self.drag_system = NoteDragSystem(self.world, self.event_bus)
        self.render_system = NoteRenderSystem(self.world, self)
        self.event_bus.subscribe(EVENT_NOTE_DRAG_STARTED, self._on_drag_state_changed)
        self.event_bus.subscribe(EVENT_NOTE_DRAG_ENDED, self._on_drag_state_changed)
        self._apply_cursor(False)

    def on_resize(self, width: int, height: int):
        self.event_bus.emit(EVENT_SURFACE_RESIZED, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE_RAW, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        # pyglet reports motion with a button held as a drag, not a motion.
        self.event_bus.emit(EVENT_MOUSE_MOVE_RAW, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE_RAW, x=x, y=y)

    def _on_drag_state_changed(self, sender, **payload):
        self._apply_cursor(self.drag_system.is_dragging)

    def _apply_cursor(self, dragging: bool) -> None:
        try:
            self.set_mouse_cursor(self.get_system_mouse_cursor(cursor_for(dragging)))
        except Exception:
            # Some platforms lack system cursors; keep the default.
            logger.debug("System cursor unavailable", exc_info=True)


def main():
    configure_logging(os.environ.get("STICKYNOTE_LOG_LEVEL", "WARNING"))
    StickyNoteWindow()
    run()


if __name__ == "__main__":
    main()
