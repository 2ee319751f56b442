from stickynote.rendering.commands import ClearRect, build_frame
from stickynote.systems.drag_system import NoteDragSystem
from stickynote.systems.render import NoteRenderSystem
from stickynote.world import create_world


class DummyWindow:
    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.cleared = 0

    def clear(self):
        self.cleared += 1


def test_process_builds_frame_headless():
    world = create_world()
    window = DummyWindow()
    render_system = NoteRenderSystem(world, window)

    commands = render_system.process()

    assert commands == render_system.last_frame
    assert isinstance(commands[0], ClearRect)
    # No arcade window is open, so nothing is actually drawn.
    assert window.cleared == 0


def test_repeated_frames_are_identical():
    world = create_world()
    render_system = NoteRenderSystem(world, DummyWindow())

    assert render_system.process() == render_system.process()


def test_frame_reflects_latest_committed_position():
    world = create_world()
    render_system = NoteRenderSystem(world, DummyWindow())
    drag = NoteDragSystem(world)
    before = render_system.process()

    drag.handle_press(70.0, 130.0)
    drag.handle_move(120.0, 160.0)
    after = render_system.process()

    assert before != after
    assert after == build_frame(create_world(position=(100.0, 130.0)))


def test_state_changes_do_not_render_by_themselves():
    world = create_world()
    render_system = NoteRenderSystem(world, DummyWindow())
    drag = NoteDragSystem(world)

    drag.handle_press(70.0, 130.0)
    drag.handle_move(120.0, 160.0)

    assert render_system.last_frame == []
