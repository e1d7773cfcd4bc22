import logging
import math
import time
from config import (
    BOARD_SIZE, EMPTY, CHAR_MAP, DIRECTIONS, CORNERS,
    EVAL_POSITION_WEIGHTS, GREEDY_POSITION_WEIGHTS,
    OPENING_DISCS, ENDGAME_DISCS, WEIGHTS,
    Difficulty, DIFFICULTY_SETTINGS, DEFAULT_DIFFICULTY
)
from game import opponent

logger = logging.getLogger(__name__)


def evaluate_board(game, color):
    """
    Phase-aware evaluation of `game` from `color`'s perspective.

    Any non-empty cell that is not `color` counts for the opponent.
    """
    board = game.board
    score = 0
    my_count = 0
    opp_count = 0

    # --- Position ---
    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            piece = board[i][j]
            if piece == color:
                my_count += 1
                score += EVAL_POSITION_WEIGHTS[i][j]
            elif piece != EMPTY:
                opp_count += 1
                score -= EVAL_POSITION_WEIGHTS[i][j]

    # --- Phase ---
    total = my_count + opp_count
    if total < OPENING_DISCS:
        score *= WEIGHTS["opening_position"]
    elif total < ENDGAME_DISCS:
        my_moves = len(game.legal_moves(color))
        opp_moves = len(game.legal_moves(opponent(color)))
        score += WEIGHTS["mobility"] * (my_moves - opp_moves)
    else:
        score += WEIGHTS["material"] * (my_count - opp_count)

    score += evaluate_stability(game, color)
    return score


def evaluate_stability(game, color):
    #Corners and the four border lines; corners count in both terms.
    board = game.board
    stability = 0

    for ci, cj in CORNERS:
        piece = board[ci][cj]
        if piece == color:
            stability += WEIGHTS["corner"]
        elif piece != EMPTY:
            stability -= WEIGHTS["corner"]

    last = BOARD_SIZE - 1
    for i in range(BOARD_SIZE):
        for r, c in ((0, i), (last, i), (i, 0), (i, last)):
            piece = board[r][c]
            if piece == color:
                stability += WEIGHTS["edge"]
            elif piece != EMPTY:
                stability -= WEIGHTS["edge"]

    return stability


def count_flips_in_direction(game, row, col, dr, dc, color):
    #Number of discs one direction would flip; 0 unless the run is closed.
    board = game.board
    r, c = row + dr, col + dc
    count = 0

    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
        piece = board[r][c]
        if piece == EMPTY:
            return 0
        if piece == color:
            return count
        count += 1
        r += dr
        c += dc

    return 0


def calculate_basic_move_score(game, move, color):
    #Greedy 1-ply heuristic: destination weight plus weighted flip count.
    row, col = move
    score = GREEDY_POSITION_WEIGHTS[row][col]
    for dr, dc in DIRECTIONS:
        score += WEIGHTS["flip"] * count_flips_in_direction(game, row, col, dr, dc, color)
    return score


def difficulty_description(difficulty):
    return DIFFICULTY_SETTINGS[Difficulty(difficulty)][2]


class OthelloAI:
    """
    Othello AI with four difficulty tiers.

    Easy plays the greedy 1-ply heuristic, Medium runs plain minimax and
    Hard/Expert run alpha-beta; depths come from DIFFICULTY_SETTINGS.
    The evaluation perspective is self.color for the whole tree, while the
    side to move and the maximizing flag alternate each ply.
    """

    def __init__(self, game, color, difficulty=DEFAULT_DIFFICULTY):
        self.game = game
        self.color = color
        self.difficulty = Difficulty(difficulty)
        self.nodes_evaluated = 0

    def set_difficulty(self, difficulty):
        self.difficulty = Difficulty(difficulty)

    def description(self):
        return difficulty_description(self.difficulty)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------
    def get_move(self):
        """
        Return the move chosen by the current tier's strategy, or None
        when self.color has no legal move and must pass.

        The live game is never touched; the search runs on a snapshot.
        """
        strategy, depth, _ = DIFFICULTY_SETTINGS[self.difficulty]
        self.nodes_evaluated = 0
        start_time = time.time()

        snapshot = self.game.copy()
        if strategy == "greedy":
            move, score = self.greedy_move(snapshot)
        elif strategy == "minimax":
            move, score = self.minimax_move(depth, snapshot)
        else:
            move, score = self.alpha_beta_move(depth, snapshot)

        logger.debug(
            "%s %s: move=%s score=%s depth=%d nodes=%d (%.3fs)",
            CHAR_MAP[self.color], self.difficulty.name, move, score,
            depth, self.nodes_evaluated, time.time() - start_time
        )
        return move

    # ------------------------------------------------------------------
    # Root move selection
    # ------------------------------------------------------------------
    def greedy_move(self, board=None):
        board = board or self.game.copy()
        legal_moves = board.legal_moves(self.color)
        if not legal_moves:
            return None, None

        best_move = legal_moves[0]
        best_score = calculate_basic_move_score(board, best_move, self.color)
        for move in legal_moves[1:]:
            score = calculate_basic_move_score(board, move, self.color)
            if score > best_score:
                best_score = score
                best_move = move

        return best_move, best_score

    def minimax_move(self, depth, board=None):
        board = board or self.game.copy()
        legal_moves = board.legal_moves(self.color)
        if not legal_moves:
            return None, None

        best_move = legal_moves[0]
        best_score = -math.inf
        for move in legal_moves:
            child = board.copy()
            child.apply_move(move, self.color)
            score = self.minimax(child, depth - 1, False, opponent(self.color))
            if score > best_score:
                best_score = score
                best_move = move

        return best_move, best_score

    def alpha_beta_move(self, depth, board=None):
        board = board or self.game.copy()
        legal_moves = board.legal_moves(self.color)
        if not legal_moves:
            return None, None

        best_move = legal_moves[0]
        best_score = -math.inf
        for move in legal_moves:
            child = board.copy()
            child.apply_move(move, self.color)
            # Each root child gets a full window so its score matches minimax
            score = self.alpha_beta(child, depth - 1, -math.inf, math.inf, False, opponent(self.color))
            if score > best_score:
                best_score = score
                best_move = move

        return best_move, best_score

    # ------------------------------------------------------------------
    # Recursive search
    # ------------------------------------------------------------------
    def minimax(self, board, depth, maximizing, player):
        self.nodes_evaluated += 1

        if depth <= 0 or board.is_terminal():
            return evaluate_board(board, self.color)

        legal_moves = board.legal_moves(player)
        if not legal_moves:
            # Forced pass still consumes a ply of depth
            return self.minimax(board, depth - 1, not maximizing, opponent(player))

        if maximizing:
            max_eval = -math.inf
            for move in legal_moves:
                child = board.copy()
                child.apply_move(move, player)
                max_eval = max(max_eval, self.minimax(child, depth - 1, False, opponent(player)))
            return max_eval
        else:
            min_eval = math.inf
            for move in legal_moves:
                child = board.copy()
                child.apply_move(move, player)
                min_eval = min(min_eval, self.minimax(child, depth - 1, True, opponent(player)))
            return min_eval

    def alpha_beta(self, board, depth, alpha, beta, maximizing, player):
        self.nodes_evaluated += 1

        if depth <= 0 or board.is_terminal():
            return evaluate_board(board, self.color)

        legal_moves = board.legal_moves(player)
        if not legal_moves:
            return self.alpha_beta(board, depth - 1, alpha, beta, not maximizing, opponent(player))

        if maximizing:
            max_eval = -math.inf
            for move in legal_moves:
                child = board.copy()
                child.apply_move(move, player)
                eval_val = self.alpha_beta(child, depth - 1, alpha, beta, False, opponent(player))
                max_eval = max(max_eval, eval_val)
                alpha = max(alpha, eval_val)
                if beta <= alpha:
                    break
            return max_eval
        else:
            min_eval = math.inf
            for move in legal_moves:
                child = board.copy()
                child.apply_move(move, player)
                eval_val = self.alpha_beta(child, depth - 1, alpha, beta, True, opponent(player))
                min_eval = min(min_eval, eval_val)
                beta = min(beta, eval_val)
                if beta <= alpha:
                    break
            return min_eval


def propose_move(game, difficulty, color=None):
    #One-shot search for `color` (default: side to move). None means pass.
    if color is None:
        color = game.current_player
    return OthelloAI(game, color, difficulty).get_move()
