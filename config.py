from enum import IntEnum

# Board configuration
BOARD_SIZE = 8
CELL_SIZE = 60
CANVAS_PADDING = 20

# Player colors (using integers for internal representation)
EMPTY = 0
BLACK = 1   # Black moves first
WHITE = -1  # White is opponent

# Character representation for display
CHAR_MAP = {
    EMPTY: '.',
    BLACK: 'B',
    WHITE: 'W'
}

COLOR_NAMES = {
    BLACK: 'Black',
    WHITE: 'White'
}

# Directions for move validation (8 directions)
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]

CORNERS = [(0, 0), (0, 7), (7, 0), (7, 7)]

# Positional weights for the full search evaluation
EVAL_POSITION_WEIGHTS = [
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
]

# Positional weights for the greedy 1-ply heuristic (tuned separately)
GREEDY_POSITION_WEIGHTS = [
    [100, -20,  10,   5,   5,  10, -20, 100],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [ 10,  -2,  -1,  -1,  -1,  -1,  -2,  10],
    [  5,  -2,  -1,  -1,  -1,  -1,  -2,   5],
    [  5,  -2,  -1,  -1,  -1,  -1,  -2,   5],
    [ 10,  -2,  -1,  -1,  -1,  -1,  -2,  10],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [100, -20,  10,   5,   5,  10, -20, 100],
]

# Game phase thresholds (total discs on board)
OPENING_DISCS = 20
ENDGAME_DISCS = 50

# Evaluation weights
WEIGHTS = {
    "opening_position": 2,
    "mobility": 10,
    "material": 10,
    "corner": 25,
    "edge": 5,
    "flip": 2
}


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    @classmethod
    def parse(cls, text):
        # Accepts "hard", "HARD" or the numeric value "3"
        value = str(text).strip()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                pass
        else:
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown difficulty: {text!r}")


# AI Configuration: tier -> (strategy, search depth, description)
DIFFICULTY_SETTINGS = {
    Difficulty.EASY: ("greedy", 0, "Easy (greedy)"),
    Difficulty.MEDIUM: ("minimax", 3, "Medium (minimax, 3-ply lookahead)"),
    Difficulty.HARD: ("alphabeta", 5, "Hard (alpha-beta, 5-ply lookahead)"),
    Difficulty.EXPERT: ("alphabeta", 7, "Expert (alpha-beta, 7-ply lookahead + advanced evaluation)"),
}

DEFAULT_DIFFICULTY = Difficulty.MEDIUM

# Logging
LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'
LOG_DATEFMT = '%H:%M:%S'
DEFAULT_LOG_LEVEL = 'INFO'

# UI Colors
COLOR_BOARD = '#228B22'
COLOR_BLACK_PIECE = 'black'
COLOR_WHITE_PIECE = 'white'
COLOR_LEGAL_MOVE = '#3CB371'
COLOR_GRID = 'black'
AI_MOVE_DELAY_MS = 300
