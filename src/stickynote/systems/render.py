from __future__ import annotations

from typing import List

from esper import World

from stickynote.rendering.arcade_painter import ArcadePainter
from stickynote.rendering.commands import DrawCommand, build_frame
from stickynote.world import get_surface


class NoteRenderSystem:
    """Draws the surface and every note once per frame.

    The host window calls ``process`` from ``on_draw``; state changes never
    trigger drawing by themselves.
    """

    def __init__(self, world: World, window=None):
        self.world = world
        self.window = window
        clear = getattr(window, "clear", None)
        self.painter = ArcadePainter(clear=clear)
        self.last_frame: List[DrawCommand] = []

    def frame_commands(self) -> List[DrawCommand]:
        return build_frame(self.world)

    def process(self) -> List[DrawCommand]:
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        commands = self.frame_commands()
        self.last_frame = commands
        if not headless:
            self.painter.paint(arcade, commands, get_surface(self.world))
        return commands
