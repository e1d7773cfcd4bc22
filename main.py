import argparse
import logging
import sys

import config
from config import Difficulty, BLACK, WHITE, CHAR_MAP
from game import OthelloGame
from ai import OthelloAI, difficulty_description
from utils import format_move, format_seconds, now_seconds

logger = logging.getLogger(__name__)


def run_selfplay(black_difficulty, white_difficulty):
    """
    Play a full game between two AI tiers without a window.

    Returns the final (black_count, white_count).
    """
    game = OthelloGame()
    agents = {
        BLACK: OthelloAI(game, BLACK, black_difficulty),
        WHITE: OthelloAI(game, WHITE, white_difficulty),
    }
    logger.info("Self-play: Black=%s, White=%s",
                difficulty_description(black_difficulty), difficulty_description(white_difficulty))

    start = now_seconds()
    ply = 0
    while not game.is_game_over():
        color = game.current_player
        move = agents[color].get_move()
        if move is None:
            game.pass_turn()
        else:
            game.make_move(move, color)
        ply += 1
        logger.info("%3d. %s %s", ply, CHAR_MAP[color], format_move(move))

    black, white = game.count_discs()
    logger.info("Final board:\n%s", game)
    logger.info("Game over after %d plies (%s): Black %d, White %d",
                ply, format_seconds(now_seconds() - start), black, white)
    return black, white


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Othello against a minimax / alpha-beta AI")
    parser.add_argument(
        "--difficulty", type=Difficulty.parse, default=config.DEFAULT_DIFFICULTY,
        help="AI tier: easy, medium, hard, expert (or 1-4)"
    )
    parser.add_argument(
        "--human", choices=["black", "white"], default="black",
        help="Colour played by the human in the GUI"
    )
    parser.add_argument(
        "--selfplay", nargs=2, metavar=("BLACK", "WHITE"), type=Difficulty.parse,
        help="Play AI vs AI headless with the given tiers and exit"
    )
    parser.add_argument(
        "--log-level", default=config.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity"
    )
    return parser.parse_args(argv)


def run_gui(difficulty, human_color):
    import tkinter as tk
    from gui import OthelloGUI

    root = tk.Tk()
    root.title("Othello")
    OthelloGUI(root, difficulty=difficulty, human_color=human_color)
    root.minsize(520, 600)
    root.mainloop()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)

    if args.selfplay:
        run_selfplay(*args.selfplay)
        return 0

    human_color = BLACK if args.human == "black" else WHITE
    try:
        run_gui(args.difficulty, human_color)
    except ImportError as e:
        logger.error("tkinter is not available (%s); try --selfplay", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
