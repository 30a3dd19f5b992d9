# Screen settings
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "Grid Pathfinder"

# Grid settings
# Default board size in cells
GRID_SIZE_X = 10
GRID_SIZE_Y = 10
# Requested board sizes are clamped to this range
GRID_SIZE_MIN = 8
GRID_SIZE_MAX = 200
# Width of the side panel holding instructions and path info (pixels)
PANEL_WIDTH = 240
# Gap between cells (pixels)
CELL_MARGIN = 1

# Layout file tile values
TILE_EMPTY = 0
TILE_OBSTACLE = 1

# Walker settings
# Movement speed in tiles per second
WALKER_MOVE_SPEED = 4.0
# Paths shorter than this many positions are walked instead of run
WALKER_MIN_TILES_TO_RUN = 6
# Fraction of full speed used when walking
WALKER_WALK_FACTOR = 0.25
# Delay between spawning and the first step (seconds)
WALKER_START_DELAY = 0.25
# Distance (tiles) at which a waypoint counts as reached
WALKER_MIN_DISTANCE = 0.05

# Colors
BACKGROUND_COLOR = (25, 25, 30)
PANEL_COLOR = (40, 40, 48)
EMPTY_COLOR = (200, 200, 200)
OBSTACLE_COLOR = (60, 60, 70)
START_COLOR = (60, 180, 75)
GOAL_COLOR = (220, 60, 60)
PATH_COLOR = (65, 105, 225)
CURSOR_COLOR = (255, 215, 0)
WALKER_COLOR = (250, 140, 0)
TEXT_COLOR = (235, 235, 235)
FONT_SIZE = 18

# UI strings
SPAWN_WALKER_TEXT = "Space: spawn walker"
STOP_WALKER_TEXT = "Space: stop walker"
INSTRUCTIONS_TEXT = (
    "1: paint obstacles\n"
    "2: place start\n"
    "3: place goal\n"
    "I: invert grid\n"
    "Hold left mouse to paint\n"
    "Esc / X: quit"
)
INFO_NO_START_NO_GOAL_TEXT = "Place start and goal points"
INFO_NO_START_TEXT = "Place a start point"
INFO_NO_GOAL_TEXT = "Place a goal point"
INFO_NO_VALID_PATH_TEXT = "No valid path: goal is obstructed"
# Formatted with the number of steps in the path
INFO_VALID_PATH_TEXT = "Shortest path: {length} steps"


def clamp_grid_size(size: int) -> int:
    """Clamp a requested board dimension into [GRID_SIZE_MIN, GRID_SIZE_MAX]."""
    return max(GRID_SIZE_MIN, min(GRID_SIZE_MAX, int(size)))
