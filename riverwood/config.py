"""Shared constants for Riverwood. All game-wide configuration lives here."""

# --- Display ---
TILE_RENDER_SIZE = 24  # pixels per tile for rendering
VIEW_COLUMNS = 32
VIEW_ROWS = 20  # rows visible at once; the map scrolls vertically
SCREEN_WIDTH = VIEW_COLUMNS * TILE_RENDER_SIZE
SCREEN_HEIGHT = VIEW_ROWS * TILE_RENDER_SIZE
SCROLL_THRESHOLD_ROWS = 10  # player row at which the view starts scrolling

# --- Simulation ---
TICK_RATE = 60  # simulation ticks per second (one per display frame)
AUTOSAVE_INTERVAL_TICKS = 600  # 10 sec at 60 Hz

# --- Map ---
MAP_SIZE = 32  # tiles per side; one row fits a 32-bit word
DEFAULT_SEED = 0x7AF07AF07AF07AF0

# --- River generation ---
RIVER_CONTROL_POINTS = 9
RIVER_ENDPOINT_MAX = 21     # endpoints are drawn from (21 - 11)..21
RIVER_ENDPOINT_SPREAD = 12
RIVER_NOISE_OFFSET = 4      # midpoint noise = 4 - (r % 8)
RIVER_NOISE_SPREAD = 8

# --- Trees ---
TREE_COUNT = 4
TREE_ROW_LIMIT = 24  # trees are only placed in rows above this
WOOD_PER_TREE = 3

# --- Economy ---
ITEM_MAX = 255  # inventory counters are single bytes
BRIDGE_COST = 1

# --- Player ---
START_POSITION = (0, 0)

# --- Persistence ---
DEFAULT_SAVE_PATH = "riverwood.sav"

# --- Colors (placeholder rendering) ---
COLOR_BG = (10, 10, 20)
COLOR_LAND = (86, 140, 60)
COLOR_WATER = (40, 90, 170)
COLOR_BRIDGE = (140, 100, 55)
COLOR_TREE = (25, 80, 30)
COLOR_PLAYER = (230, 200, 120)
COLOR_HUD_BG = (30, 25, 20)
COLOR_HUD_TEXT = (220, 220, 200)
