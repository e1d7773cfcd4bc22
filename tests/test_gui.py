"""
Tk-thread side of the GUI's AI hand-off.

The window itself is never built; only the result callback is exercised.
"""

import pytest

pytest.importorskip("tkinter")

from config import BLACK, WHITE, EMPTY
from game import OthelloGame
from gui import OthelloGUI


class _Recorder:
    def __init__(self):
        self.lines = []

    def __call__(self, text):
        self.lines.append(text)


@pytest.fixture
def gui():
    # Bypass __init__ so no Tk root or widgets are created
    app = OthelloGUI.__new__(OthelloGUI)
    app.game = OthelloGame()
    app.game_over = False
    app.human_color = WHITE
    app.ai_color = BLACK
    app.append_log = _Recorder()
    app.update_score = lambda: None
    app.next_turn = lambda: None
    return app


def test_result_for_replaced_game_is_dropped(gui):
    old_game = gui.game
    gui.game = OthelloGame()

    gui._apply_ai_move(old_game, (2, 3), 0.0, 0)

    assert gui.game.board[2][3] == EMPTY
    assert gui.game.count_discs() == (2, 2)
    assert gui.game.current_player == BLACK
    assert gui.append_log.lines == []


def test_stale_illegal_move_does_not_raise(gui):
    # (0, 0) would raise IllegalMoveError if it reached make_move
    gui._apply_ai_move(OthelloGame(), (0, 0), 0.0, 0)
    assert gui.game.count_discs() == (2, 2)


def test_result_for_current_game_is_played(gui):
    gui._apply_ai_move(gui.game, (2, 3), 0.1, 5)

    assert gui.game.board[2][3] == BLACK
    assert gui.game.current_player == WHITE
    assert gui.append_log.lines == ["AI Black -> (2,3) (t=0.10s, n=5)"]


def test_result_ignored_when_not_ai_turn(gui):
    gui.game.current_player = WHITE
    gui._apply_ai_move(gui.game, (2, 3), 0.0, 0)
    assert gui.game.board[2][3] == EMPTY
