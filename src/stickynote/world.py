from typing import Iterable, Sequence

from esper import World

from stickynote.components.note import DragSession, NotePosition, NoteStyle, StickyNote
from stickynote.components.surface import Surface
from stickynote.constants import DEFAULT_NOTE_LINES, DEFAULT_NOTE_POSITION, SURFACE_HEIGHT, SURFACE_WIDTH


def create_world(
    *,
    position: tuple[float, float] = DEFAULT_NOTE_POSITION,
    lines: Sequence[str] = DEFAULT_NOTE_LINES,
    surface_size: tuple[float, float] = (SURFACE_WIDTH, SURFACE_HEIGHT),
    viewport_size: tuple[float, float] | None = None,
) -> World:
    """Build a world holding the drawing surface and a single default note."""
    world = World()
    width, height = surface_size
    viewport_width, viewport_height = viewport_size or surface_size
    world.create_entity(
        Surface(
            width=width,
            height=height,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
        )
    )
    spawn_note(world, position=position, lines=lines)
    return world


def spawn_note(
    world: World,
    *,
    position: tuple[float, float] = DEFAULT_NOTE_POSITION,
    lines: Iterable[str] = DEFAULT_NOTE_LINES,
    style: NoteStyle | None = None,
) -> int:
    """Create a note entity; later notes stack on top of earlier ones."""
    x, y = position
    return world.create_entity(
        StickyNote(lines=tuple(lines)),
        NotePosition(x=float(x), y=float(y)),
        DragSession(),
        style or NoteStyle(),
    )


def get_surface(world: World) -> Surface:
    for _, surface in world.get_component(Surface):
        return surface
    return Surface()
