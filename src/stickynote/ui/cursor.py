# pyglet system cursor names; arcade windows expose them as class attributes.
CURSOR_GRAB = "hand"
CURSOR_GRABBING = "size"


def cursor_for(dragging: bool) -> str:
    """Open hand while idle, the move cursor while a note is held."""
    return CURSOR_GRABBING if dragging else CURSOR_GRAB
