from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else references alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# RAW WINDOW INPUT (window pixels, origin bottom-left)
# ============================================================================
EVENT_MOUSE_PRESS_RAW = "mouse_press_raw"        # payload: x, y, button, modifiers
EVENT_MOUSE_RELEASE_RAW = "mouse_release_raw"    # payload: x, y, button, modifiers
EVENT_MOUSE_MOVE_RAW = "mouse_move_raw"          # payload: x, y, dx, dy
EVENT_MOUSE_LEAVE_RAW = "mouse_leave_raw"        # payload: x, y
EVENT_SURFACE_RESIZED = "surface_resized"        # payload: width, height


# ============================================================================
# POINTER INPUT (surface-local units, origin top-left)
# ============================================================================
EVENT_POINTER_PRESS = "pointer_press"            # payload: x, y, button
EVENT_POINTER_MOVE = "pointer_move"              # payload: x, y
EVENT_POINTER_RELEASE = "pointer_release"        # payload: x, y, button
EVENT_POINTER_LEAVE = "pointer_leave"            # payload: none


# ============================================================================
# NOTE LIFECYCLE
# ============================================================================
EVENT_NOTE_DRAG_STARTED = "note_drag_started"    # payload: note_entity, offset_x, offset_y
EVENT_NOTE_MOVED = "note_moved"                  # payload: note_entity, x, y
EVENT_NOTE_DRAG_ENDED = "note_drag_ended"        # payload: note_entity, reason=str
