from typing import Optional, Tuple
import time

from config import BOARD_SIZE, CELL_SIZE, CANVAS_PADDING

Move = Tuple[int, int]


def now_seconds() -> float:
    return time.time()


def format_seconds(s: float) -> str:
    if s < 0:
        s = 0
    mins = int(s) // 60
    secs = int(s) % 60
    return f"{mins:02d}:{secs:02d}"



def cell_from_pixel(x: float, y: float, cell_size: float = CELL_SIZE,
                    padding: float = CANVAS_PADDING) -> Optional[Move]:
    # Row 0 is drawn at the top of the canvas
    if x < padding or y < padding:
        return None
    col = int((x - padding) // cell_size)
    row = int((y - padding) // cell_size)
    if row >= BOARD_SIZE or col >= BOARD_SIZE:
        return None
    return row, col


def cell_origin(row: int, col: int, cell_size: float = CELL_SIZE,
                padding: float = CANVAS_PADDING) -> Tuple[float, float]:
    return padding + col * cell_size, padding + row * cell_size


def format_move(move: Optional[Move]) -> str:
    if move is None:
        return "pass"
    row, col = move
    return f"({row},{col})"
