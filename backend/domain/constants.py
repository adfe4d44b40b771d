"""
Game constants for the escaping-food snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (0, 0) is the bottom-left cell, so UP => y + 1
DIRECTION_VECTORS = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Snake.advance() results / death reasons
ADVANCE_OK = "ok"
OUT_OF_BOUNDS = "wall"
SELF_COLLISION = "self"
BOARD_FILLED = "board_filled"

DEATH_MESSAGES = {
    OUT_OF_BOUNDS: "hit the wall",
    SELF_COLLISION: "ran into itself",
    BOARD_FILLED: "filled the whole board",
}

# Game phases
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"
ENTERING_SCORE = "entering_score"
VALID_PHASES = {RUNNING, PAUSED, GAME_OVER, ENTERING_SCORE}

# Tick outcomes
CONTINUING = "continuing"
DIED = "died"
IDLE = "idle"

# Game settings
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_TICK_INTERVAL_MS = 100
DEFAULT_INITIAL_LENGTH = 3
DEFAULT_SCORE_PER_FOOD = 10
DEFAULT_HIGH_SCORE_CAPACITY = 10

# Food evasion
FOOD_SPEED_INCREASE = 5  # escape odds gained per snake segment
RESPAWN_CANDIDATES = 16
DISTANCE_WEIGHT = 1.0
CORNER_PENALTY = 2.0

# High scores
MAX_NAME_LENGTH = 10
DEFAULT_PLAYER_NAME = "default"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
