# Drawing surface, in logical units. Pointer input is rescaled into this space.
SURFACE_WIDTH = 800
SURFACE_HEIGHT = 600
WINDOW_TITLE = "Sticky Note"

# Note body geometry; also the hit-test bounding box.
NOTE_WIDTH = 200
NOTE_HEIGHT = 60
DEFAULT_NOTE_POSITION = (50.0, 100.0)
DEFAULT_NOTE_LINES = (
    "Remember to:",
    "",
    "• Buy groceries",
    "• Call mom",
    "• Finish project",
    "• Water plants",
)

SHADOW_OFFSET = 5

# Ruled lines run past the body on purpose; the original artwork does the same.
RULE_COUNT = 8
RULE_SPACING = 40
RULE_TOP = 50
RULE_LEFT = 20
RULE_RIGHT = 280
RULE_WIDTH = 1

TEXT_LEFT = 20
TEXT_TOP = 50
TEXT_LINE_SPACING = 30
TEXT_FONT_SIZE = 18
TEXT_FONT_NAME = ("Segoe UI", "Arial")

# Pin sits above the body: shadow disc first, glyph on top.
PIN_GLYPH = "\U0001F4CC"
PIN_SHADOW_DX = 152
PIN_SHADOW_DY = -48
PIN_SHADOW_RADIUS = 20
PIN_GLYPH_DX = 130
PIN_GLYPH_DY = -30
PIN_FONT_SIZE = 40
PIN_FONT_NAME = ("Arial",)

# RGBA colours.
SHADOW_COLOR = (0, 0, 0, 51)          # rgba(0,0,0,0.2)
NOTE_COLOR = (254, 246, 138, 255)     # #FEF68A
RULE_COLOR = (0, 0, 0, 26)            # rgba(0,0,0,0.1)
TEXT_COLOR = (51, 51, 51, 255)        # #333
BACKGROUND_START = (102, 126, 234, 255)  # #667EEA
BACKGROUND_END = (118, 75, 162, 255)     # #764BA2

LEFT_MOUSE_BUTTON = 1

# Sizes above are CSS pixels; arcade's draw_text takes points (96 DPI).
PX_TO_PT = 0.75
