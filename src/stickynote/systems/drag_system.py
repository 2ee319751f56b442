"""Pointer-driven dragging of sticky notes.

Two states per note: idle and dragging. A press inside a note's bounding box
opens its drag session, moves follow the pointer minus the recorded grab
offset, and a release or the pointer leaving the surface closes the session.
Presses that miss every note are ignored.
"""
from __future__ import annotations

import logging
from typing import Any

from esper import World

from stickynote.components.note import DragSession, NotePosition, StickyNote
from stickynote.events.bus import (
    EVENT_NOTE_DRAG_ENDED,
    EVENT_NOTE_DRAG_STARTED,
    EVENT_NOTE_MOVED,
    EVENT_POINTER_LEAVE,
    EVENT_POINTER_MOVE,
    EVENT_POINTER_PRESS,
    EVENT_POINTER_RELEASE,
    EventBus,
)
from stickynote.utils.numbers import finite_floats

logger = logging.getLogger(__name__)


class NoteDragSystem:
    def __init__(self, world: World, event_bus: EventBus | None = None) -> None:
        self.world = world
        self._event_bus = event_bus
        self._dragged: int | None = None
        if event_bus is not None:
            event_bus.subscribe(EVENT_POINTER_PRESS, self.on_pointer_press)
            event_bus.subscribe(EVENT_POINTER_MOVE, self.on_pointer_move)
            event_bus.subscribe(EVENT_POINTER_RELEASE, self.on_pointer_release)
            event_bus.subscribe(EVENT_POINTER_LEAVE, self.on_pointer_leave)

    @property
    def dragged_entity(self) -> int | None:
        return self._dragged

    @property
    def is_dragging(self) -> bool:
        return self._dragged is not None

    # Event adapters -------------------------------------------------------

    def on_pointer_press(self, sender, **payload: Any) -> None:
        coords = finite_floats(payload.get("x"), payload.get("y"))
        if coords is None:
            return
        self.handle_press(*coords)

    def on_pointer_move(self, sender, **payload: Any) -> None:
        coords = finite_floats(payload.get("x"), payload.get("y"))
        if coords is None:
            return
        self.handle_move(*coords)

    def on_pointer_release(self, sender, **payload: Any) -> None:
        self.handle_release(reason="release")

    def on_pointer_leave(self, sender, **payload: Any) -> None:
        self.handle_release(reason="leave")

    # Operations ------------------------------------------------------------

    def handle_press(self, x: float, y: float) -> int | None:
        """Open a drag session on the topmost note under ``(x, y)``.

        Returns the grabbed entity, or ``None`` when the press missed.
        """
        if finite_floats(x, y) is None:
            return None
        if self._dragged is not None:
            # A missed release; the new press takes over.
            self.handle_release(reason="release")
        entity = self.note_at_point(x, y)
        if entity is None:
            return None
        position = self.world.component_for_entity(entity, NotePosition)
        session = self.world.component_for_entity(entity, DragSession)
        session.open(x - position.x, y - position.y)
        self._dragged = entity
        logger.debug(
            "Drag started on note %s with offset (%s, %s)",
            entity,
            session.offset_x,
            session.offset_y,
        )
        self._emit(
            EVENT_NOTE_DRAG_STARTED,
            note_entity=entity,
            offset_x=session.offset_x,
            offset_y=session.offset_y,
        )
        return entity

    def handle_move(self, x: float, y: float) -> bool:
        """Move the dragged note so the grab point stays under the pointer."""
        entity = self._dragged
        if entity is None:
            return False
        if finite_floats(x, y) is None:
            return False
        session = self.world.component_for_entity(entity, DragSession)
        if not session.active:
            self._dragged = None
            return False
        position = self.world.component_for_entity(entity, NotePosition)
        position.x = x - session.offset_x
        position.y = y - session.offset_y
        self._emit(EVENT_NOTE_MOVED, note_entity=entity, x=position.x, y=position.y)
        return True

    def handle_release(self, *, reason: str = "release") -> None:
        """Close any active session. Safe to call when idle."""
        entity = self._dragged
        self._dragged = None
        if entity is None:
            return
        try:
            session = self.world.component_for_entity(entity, DragSession)
        except KeyError:
            return
        session.close()
        logger.debug("Drag ended on note %s (%s)", entity, reason)
        self._emit(EVENT_NOTE_DRAG_ENDED, note_entity=entity, reason=reason)

    def note_at_point(self, x: float, y: float) -> int | None:
        hits = [
            ent
            for ent, (note, position) in self.world.get_components(StickyNote, NotePosition)
            if note.contains(position, x, y)
        ]
        if not hits:
            return None
        return max(hits)

    def _emit(self, name: str, **payload: Any) -> None:
        if self._event_bus is not None:
            self._event_bus.emit(name, **payload)
