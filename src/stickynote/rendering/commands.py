"""Immutable draw commands and the pure builders that produce them.

Everything here works in surface-local units with the origin at the top-left
and y growing downward. Turning commands into pixels is the painter's job.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from esper import World

from stickynote.components.note import NotePosition, NoteStyle, StickyNote
from stickynote.components.surface import Surface
from stickynote.constants import (
    PIN_GLYPH_DX,
    PIN_GLYPH_DY,
    PIN_SHADOW_DX,
    PIN_SHADOW_DY,
    PIN_SHADOW_RADIUS,
    RULE_COUNT,
    RULE_LEFT,
    RULE_RIGHT,
    RULE_SPACING,
    RULE_TOP,
    SHADOW_OFFSET,
    TEXT_LEFT,
    TEXT_LINE_SPACING,
    TEXT_TOP,
)
from stickynote.world import get_surface

Color = Tuple[int, int, int, int]


@dataclass(frozen=True, slots=True)
class ClearRect:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color


@dataclass(frozen=True, slots=True)
class FillGradientRect:
    """Diagonal gradient from the top-left corner to the bottom-right corner."""
    x: float
    y: float
    width: float
    height: float
    start_color: Color
    end_color: Color


@dataclass(frozen=True, slots=True)
class StrokeLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Color
    line_width: float = 1.0


@dataclass(frozen=True, slots=True)
class FillText:
    """Text drawn with its baseline starting at ``(x, y)``."""
    text: str
    x: float
    y: float
    color: Color
    font_size: int
    font_name: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FillCircle:
    cx: float
    cy: float
    radius: float
    color: Color


DrawCommand = Union[ClearRect, FillRect, FillGradientRect, StrokeLine, FillText, FillCircle]


def build_note_commands(
    position: NotePosition,
    note: StickyNote,
    style: NoteStyle | None = None,
) -> List[DrawCommand]:
    """Return the commands that paint ``note`` anchored at ``position``."""
    style = style or NoteStyle()
    x = position.x
    y = position.y
    commands: List[DrawCommand] = [
        FillRect(x + SHADOW_OFFSET, y + SHADOW_OFFSET, note.width, note.height, style.shadow_color),
        FillRect(x, y, note.width, note.height, style.body_color),
    ]
    for i in range(RULE_COUNT):
        rule_y = y + RULE_TOP + i * RULE_SPACING
        commands.append(
            StrokeLine(x + RULE_LEFT, rule_y, x + RULE_RIGHT, rule_y, style.rule_color, style.rule_width)
        )
    for i, line in enumerate(note.lines):
        commands.append(
            FillText(
                line,
                x + TEXT_LEFT,
                y + TEXT_TOP + i * TEXT_LINE_SPACING,
                style.text_color,
                style.text_font_size,
                style.text_font_name,
            )
        )
    commands.append(FillCircle(x + PIN_SHADOW_DX, y + PIN_SHADOW_DY, PIN_SHADOW_RADIUS, style.shadow_color))
    commands.append(
        FillText(
            style.pin_glyph,
            x + PIN_GLYPH_DX,
            y + PIN_GLYPH_DY,
            style.text_color,
            style.pin_font_size,
            style.pin_font_name,
        )
    )
    return commands


def build_surface_commands(surface: Surface) -> List[DrawCommand]:
    return [
        ClearRect(0.0, 0.0, surface.width, surface.height),
        FillGradientRect(
            0.0,
            0.0,
            surface.width,
            surface.height,
            surface.background_start,
            surface.background_end,
        ),
    ]


def iter_notes(world: World):
    """Yield ``(entity, note, position, style)`` bottom to top."""
    rows = [
        (ent, note, position, style)
        for ent, (note, position, style) in world.get_components(StickyNote, NotePosition, NoteStyle)
    ]
    rows.sort(key=lambda row: row[0])
    return iter(rows)


def build_frame(world: World) -> List[DrawCommand]:
    """Clear and background, then every note in stacking order."""
    commands = build_surface_commands(get_surface(world))
    for _, note, position, style in iter_notes(world):
        commands.extend(build_note_commands(position, note, style))
    return commands
