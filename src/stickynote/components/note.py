"""Components describing a sticky note: where it is, what it says, how it looks."""
from dataclasses import dataclass
from typing import Tuple

from stickynote.constants import (
    DEFAULT_NOTE_LINES,
    NOTE_COLOR,
    NOTE_HEIGHT,
    NOTE_WIDTH,
    PIN_FONT_NAME,
    PIN_FONT_SIZE,
    PIN_GLYPH,
    RULE_COLOR,
    RULE_WIDTH,
    SHADOW_COLOR,
    TEXT_COLOR,
    TEXT_FONT_NAME,
    TEXT_FONT_SIZE,
)

Color = Tuple[int, int, int, int]


@dataclass
class NotePosition:
    """Top-left anchor of the note body in surface-local units."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class StickyNote:
    """Fixed geometry and text of a note. Never mutated after creation."""
    lines: Tuple[str, ...] = DEFAULT_NOTE_LINES
    width: float = NOTE_WIDTH
    height: float = NOTE_HEIGHT

    def contains(self, position: NotePosition, x: float, y: float) -> bool:
        """Closed bounding-box test against the anchor at ``position``."""
        return (
            position.x <= x <= position.x + self.width
            and position.y <= y <= position.y + self.height
        )


@dataclass(slots=True)
class DragSession:
    """Grab offset recorded when a press lands on the note."""
    active: bool = False
    offset_x: float = 0.0
    offset_y: float = 0.0

    def open(self, offset_x: float, offset_y: float) -> None:
        self.active = True
        self.offset_x = offset_x
        self.offset_y = offset_y

    def close(self) -> None:
        self.active = False
        self.offset_x = 0.0
        self.offset_y = 0.0


@dataclass(frozen=True)
class NoteStyle:
    """Colours and fonts used when painting a note."""
    shadow_color: Color = SHADOW_COLOR
    body_color: Color = NOTE_COLOR
    rule_color: Color = RULE_COLOR
    rule_width: float = RULE_WIDTH
    text_color: Color = TEXT_COLOR
    text_font_size: int = TEXT_FONT_SIZE
    text_font_name: Tuple[str, ...] = TEXT_FONT_NAME
    pin_glyph: str = PIN_GLYPH
    pin_font_size: int = PIN_FONT_SIZE
    pin_font_name: Tuple[str, ...] = PIN_FONT_NAME
