import logging
from config import BOARD_SIZE, EMPTY, BLACK, WHITE, CHAR_MAP, DIRECTIONS

logger = logging.getLogger(__name__)

_CHAR_TO_DISC = {char: disc for disc, char in CHAR_MAP.items()}


class IllegalMoveError(ValueError):
    """Raised when a move or pass violates the rules for the side to move."""


def opponent(color):
    #Return opponent's color.
    return -color


class OthelloGame:
    def __init__(self):
        #Initialize the board with the standard starting layout, Black to move.
        self.board = [[EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
        self.current_player = BLACK

        # Center four squares: (3,3), (3,4), (4,3), (4,4)
        self.board[3][3] = WHITE
        self.board[3][4] = BLACK
        self.board[4][3] = BLACK
        self.board[4][4] = WHITE

    @classmethod
    def from_rows(cls, rows, current_player=BLACK):
        """
        Build a position from BOARD_SIZE strings of '.', 'B' and 'W',
        row 0 first. Whitespace inside a row is ignored.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        if current_player not in (BLACK, WHITE):
            raise ValueError(f"Invalid player: {current_player!r}")

        game = cls()
        for i, text in enumerate(rows):
            cells = text.replace(" ", "")
            if len(cells) != BOARD_SIZE:
                raise ValueError(f"Row {i} must have {BOARD_SIZE} cells: {text!r}")
            for j, char in enumerate(cells):
                if char not in _CHAR_TO_DISC:
                    raise ValueError(f"Invalid cell {char!r} in row {i}")
                game.board[i][j] = _CHAR_TO_DISC[char]
        game.current_player = current_player
        return game

    def __str__(self):
        lines = []
        lines.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
        for i in range(BOARD_SIZE):
            row_str = str(i) + " " + " ".join(CHAR_MAP[self.board[i][j]] for j in range(BOARD_SIZE))
            lines.append(row_str)
        return "\n".join(lines)

    def copy(self):
        #Value copy for search branches; never shares rows with self.
        clone = type(self).__new__(type(self))
        clone.board = [row[:] for row in self.board]
        clone.current_player = self.current_player
        return clone

    def is_valid_position(self, row, col):
        #Check if position is within board bounds.
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    # ------------------------------------------------------------------
    # Rules primitives
    # ------------------------------------------------------------------
    def can_flip(self, row, col, dr, dc, color):
        """
        Single-direction capture test from (row, col) along (dr, dc).

        True only when at least one opposing disc is followed by a disc of
        `color`, with no empty cell or board edge breaking the run.
        """
        r, c = row + dr, col + dc
        found_opponent = False

        while self.is_valid_position(r, c):
            piece = self.board[r][c]
            if piece == EMPTY:
                return False
            if piece == color:
                return found_opponent
            found_opponent = True
            r += dr
            c += dc

        return False

    def flip_discs(self, row, col, color):
        #Return positions that a move at (row, col) would flip, direction by direction.
        flipped = []

        for dr, dc in DIRECTIONS:
            if not self.can_flip(row, col, dr, dc, color):
                continue
            r, c = row + dr, col + dc
            while self.board[r][c] != color:
                flipped.append((r, c))
                r += dr
                c += dc

        return flipped

    def apply_move(self, move, color):
        """
        Place `color` at `move` and flip every captured run, in place.

        This is the unchecked rules primitive used by the search; callers
        must have validated the move. Returns the flipped positions.
        """
        row, col = move
        flipped = self.flip_discs(row, col, color)

        self.board[row][col] = color
        for r, c in flipped:
            self.board[r][c] = color

        return flipped

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------
    def is_valid_move(self, row, col, color):
        #Check if placing a disc at (row, col) is valid.
        #Must flip at least one opponent disc.
        if not self.is_valid_position(row, col):
            return False

        if self.board[row][col] != EMPTY:
            return False

        for dr, dc in DIRECTIONS:
            if self.can_flip(row, col, dr, dc, color):
                return True

        return False

    def is_legal(self, move, color):
        row, col = move
        return self.is_valid_move(row, col, color)

    def legal_moves(self, color):
        #Return legal moves for given color in row-major order.
        moves = []
        for i in range(BOARD_SIZE):
            for j in range(BOARD_SIZE):
                if self.is_valid_move(i, j, color):
                    moves.append((i, j))
        return moves

    def has_any_move(self, color):
        for i in range(BOARD_SIZE):
            for j in range(BOARD_SIZE):
                if self.is_valid_move(i, j, color):
                    return True
        return False

    def valid_moves_count(self, color=None):
        if color is None:
            color = self.current_player
        return len(self.legal_moves(color))

    # ------------------------------------------------------------------
    # Turn handling
    # ------------------------------------------------------------------
    def make_move(self, move, color=None):
        """
        Play a validated move for the side to move and hand the turn over.

        Raises IllegalMoveError, leaving the board untouched, if `color` is
        not the side to move or the move is not legal for it.
        """
        if color is None:
            color = self.current_player
        if color != self.current_player:
            raise IllegalMoveError(f"It is not {CHAR_MAP[color]}'s turn")

        row, col = move
        if not self.is_valid_move(row, col, color):
            raise IllegalMoveError(f"Illegal move {move} for {CHAR_MAP[color]}")

        flipped = self.apply_move(move, color)
        self.current_player = opponent(color)
        logger.debug("%s plays %s, flipping %d", CHAR_MAP[color], move, len(flipped))
        return flipped

    def pass_turn(self):
        #Pass is only allowed when the side to move has no legal move.
        if self.has_any_move(self.current_player):
            raise IllegalMoveError(f"{CHAR_MAP[self.current_player]} has a legal move and cannot pass")

        logger.debug("%s passes", CHAR_MAP[self.current_player])
        self.current_player = opponent(self.current_player)

    # ------------------------------------------------------------------
    # Terminal state and scoring
    # ------------------------------------------------------------------
    def is_full(self):
        return all(cell != EMPTY for row in self.board for cell in row)

    def is_game_over(self):
        #Game ends on a full board or when neither side can move.
        if self.is_full():
            return True
        return not self.has_any_move(BLACK) and not self.has_any_move(WHITE)

    is_terminal = is_game_over

    def count_discs(self):
        #Count discs for each color. Returns (black_count, white_count).
        black = sum(row.count(BLACK) for row in self.board)
        white = sum(row.count(WHITE) for row in self.board)
        return black, white

    def get_winner(self):
        #Get game winner. Returns BLACK, WHITE, or EMPTY (tie).
        #Should only be called when game is over.
        black, white = self.count_discs()
        if black > white:
            return BLACK
        elif white > black:
            return WHITE
        else:
            return EMPTY


def new_game():
    return OthelloGame()
