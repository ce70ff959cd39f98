"""Window, timing and palette configuration for Nokia Snake."""

# Window configuration
SURFACE_SIZE = 400
TILE_SIZE = 20
STATUS_BAR_HEIGHT = 48
WINDOW_WIDTH = SURFACE_SIZE
WINDOW_HEIGHT = SURFACE_SIZE + STATUS_BAR_HEIGHT

# Timing
TICK_MS = 150  # Nokia snake speed
FPS = 60
BLINK_MS = 500

# Rules
SCORE_PER_FOOD = 10
SPAWN_MAX_ATTEMPTS = 1000

# Colors (R, G, B)
BACKGROUND = (0x9B, 0xB5, 0x63)
GRID_LINE = (0x8B, 0xA0, 0x5B)
SNAKE_COLOR = (0x2C, 0x3E, 0x50)
FOOD_COLOR = (0xE7, 0x4C, 0x3C)
FOOD_HIGHLIGHT = (0xFF, 0x6B, 0x6B)
STATUS_BG = (0x2C, 0x3E, 0x50)
STATUS_TEXT = (0x9B, 0xB5, 0x63)
STATUS_FONT_SIZE = 18

# Audio
SOUND_ENABLED = True
SAMPLE_RATE = 44100
