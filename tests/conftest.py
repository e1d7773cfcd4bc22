import pytest

from config import BLACK, WHITE
from game import OthelloGame


@pytest.fixture
def initial_game():
    return OthelloGame()


@pytest.fixture
def center_endgame():
    # 60 discs, the four centre cells empty; only Black can move
    return OthelloGame.from_rows([
        "BBBBBBBB",
        "BWWWWWWB",
        "BWWWWWWB",
        "BWW..WWB",
        "BWW..WWB",
        "BWWWWWWB",
        "BWWWWWWB",
        "BBBBBBBB",
    ], BLACK)


@pytest.fixture
def corner_choice_game():
    # Black can play (3,2) or take the (7,7) corner
    return OthelloGame.from_rows([
        "........",
        "........",
        "........",
        "...WB...",
        "........",
        "........",
        "........",
        ".....BW.",
    ], BLACK)


@pytest.fixture
def white_stuck_game():
    # Black has (0,2); White has no legal move but the game is not over
    return OthelloGame.from_rows([
        "BW......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ], WHITE)


def _play_first_moves(game, plies):
    #Advance `game` by always playing the row-major-first legal move.
    for _ in range(plies):
        if game.is_game_over():
            break
        moves = game.legal_moves(game.current_player)
        if moves:
            game.make_move(moves[0])
        else:
            game.pass_turn()
    return game


@pytest.fixture
def play_first_moves():
    return _play_first_moves


@pytest.fixture
def pruning_game():
    # Black: (1,5) or (6,5); White then replies (2,2) or (5,2).
    # All four replies leave the same score, so the second reply after
    # (6,5) is cut off by the beta <= alpha test.
    return OthelloGame.from_rows([
        "........",
        "......WB",
        "WB......",
        "........",
        "........",
        "WB......",
        "......WB",
        "........",
    ], BLACK)
