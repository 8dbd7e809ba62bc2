"""Game constants. Command-line flags in ``app`` override a few of these."""

# Window configuration
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 400
CELL_SIZE = 20
FRAME_RATE = 60

# Speed curve: milliseconds per move
INITIAL_SPEED_MS = 150
SPEED_INCREMENT_MS = 10
MIN_SPEED_MS = 50
POINTS_PER_LEVEL = 5

# Input
SWIPE_THRESHOLD_PX = 20

# Colors (R, G, B)
BACKGROUND = (135, 206, 235)
FOOD_COLOR = (255, 140, 0)
FOOD_OUTLINE = (192, 96, 0)
SNAKE_COLOR = (0, 0, 0)
EYE_COLOR = (255, 255, 255)
INDICATOR_COLOR = (255, 255, 255)
SWIPE_COLOR = (255, 255, 255)
WHITE = (240, 240, 240)
HUD_BASE_SIZE = 22
HUD_SMALL_SIZE = 15

# Swipe feedback ring animation, per drawn frame
SWIPE_START_RADIUS = 10
SWIPE_RADIUS_STEP = 2
SWIPE_ALPHA_STEP = 0.04

# Audio
SOUND_ENABLED = True
SAMPLE_RATE = 44100
SOUND_VOLUME = 0.5
