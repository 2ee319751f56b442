from stickynote.app import StickyNoteWindow
from stickynote.events.bus import (
    EVENT_MOUSE_LEAVE_RAW,
    EVENT_MOUSE_MOVE_RAW,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_NOTE_DRAG_ENDED,
    EVENT_NOTE_DRAG_STARTED,
    EventBus,
)
from stickynote.systems.drag_system import NoteDragSystem
from stickynote.systems.pointer_input_system import PointerInputSystem
from stickynote.world import create_world
from stickynote.components.note import NotePosition


class DummyWindow:
    """Carries the state the window's handlers touch, without opening a window."""

    on_mouse_press = StickyNoteWindow.on_mouse_press
    on_mouse_release = StickyNoteWindow.on_mouse_release
    on_mouse_motion = StickyNoteWindow.on_mouse_motion
    on_mouse_drag = StickyNoteWindow.on_mouse_drag
    on_mouse_leave = StickyNoteWindow.on_mouse_leave
    _on_drag_state_changed = StickyNoteWindow._on_drag_state_changed
    _apply_cursor = StickyNoteWindow._apply_cursor

    def __init__(self):
        self.event_bus = EventBus()
        self.world = create_world()
        self.pointer_input_system = PointerInputSystem(self.world, self.event_bus)
        self.drag_system = NoteDragSystem(self.world, self.event_bus)
        self.event_bus.subscribe(EVENT_NOTE_DRAG_STARTED, self._on_drag_state_changed)
        self.event_bus.subscribe(EVENT_NOTE_DRAG_ENDED, self._on_drag_state_changed)
        self.cursors = []

    def get_system_mouse_cursor(self, name):
        return name

    def set_mouse_cursor(self, cursor):
        self.cursors.append(cursor)


def _collect(bus, name):
    received = []
    bus.subscribe(name, lambda sender, **kw: received.append(kw))
    return received


def _position(window):
    for _, position in window.world.get_component(NotePosition):
        return position.x, position.y


def test_mouse_drag_is_forwarded_as_move():
    window = DummyWindow()
    moves = _collect(window.event_bus, EVENT_MOUSE_MOVE_RAW)

    window.on_mouse_drag(120, 440, 50, -30, 1, 0)

    assert moves == [{"x": 120, "y": 440, "dx": 50, "dy": -30}]


def test_press_release_motion_and_leave_are_forwarded():
    window = DummyWindow()
    presses = _collect(window.event_bus, EVENT_MOUSE_PRESS_RAW)
    releases = _collect(window.event_bus, EVENT_MOUSE_RELEASE_RAW)
    moves = _collect(window.event_bus, EVENT_MOUSE_MOVE_RAW)
    leaves = _collect(window.event_bus, EVENT_MOUSE_LEAVE_RAW)

    window.on_mouse_press(10, 20, 1, 0)
    window.on_mouse_motion(11, 21, 1, 1)
    window.on_mouse_release(11, 21, 1, 0)
    window.on_mouse_leave(900, 21)

    assert presses == [{"x": 10, "y": 20, "button": 1, "modifiers": 0}]
    assert moves == [{"x": 11, "y": 21, "dx": 1, "dy": 1}]
    assert releases == [{"x": 11, "y": 21, "button": 1, "modifiers": 0}]
    assert leaves == [{"x": 900, "y": 21}]


def test_held_button_drag_moves_note_and_swaps_cursor():
    window = DummyWindow()

    window.on_mouse_press(70, 470, 1, 0)
    window.on_mouse_drag(120, 440, 50, -30, 1, 0)
    assert _position(window) == (100.0, 130.0)
    assert window.cursors == ["size"]

    window.on_mouse_release(120, 440, 1, 0)
    assert window.cursors == ["size", "hand"]


def test_leaving_window_ends_drag_and_restores_cursor():
    window = DummyWindow()

    window.on_mouse_press(70, 470, 1, 0)
    window.on_mouse_leave(-5, 470)
    window.on_mouse_drag(300, 300, 0, 0, 1, 0)

    assert _position(window) == (50.0, 100.0)
    assert window.cursors == ["size", "hand"]


def test_cursor_failure_is_tolerated():
    window = DummyWindow()

    def _broken(name):
        raise RuntimeError("no cursors")

    window.get_system_mouse_cursor = _broken
    window._apply_cursor(True)

    assert window.cursors == []
