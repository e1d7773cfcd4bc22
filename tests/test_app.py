from pathlib import Path

import pytest

import config
from config import Difficulty
from main import parse_args, run_selfplay, main
from utils import cell_from_pixel, cell_origin, format_move, format_seconds


class TestCellFromPixel:
    def test_top_left(self):
        assert cell_from_pixel(config.CANVAS_PADDING, config.CANVAS_PADDING) == (0, 0)

    def test_bottom_right(self):
        far = config.CANVAS_PADDING + config.CELL_SIZE * config.BOARD_SIZE - 1
        assert cell_from_pixel(far, far) == (7, 7)

    def test_row_follows_y(self):
        x = config.CANVAS_PADDING + 5
        y = config.CANVAS_PADDING + 2 * config.CELL_SIZE + 5
        assert cell_from_pixel(x, y) == (2, 0)

    @pytest.mark.parametrize("x,y", [(5, 50), (50, 5), (10_000, 50), (50, 10_000)])
    def test_outside_board(self, x, y):
        assert cell_from_pixel(x, y) is None

    def test_origin_inverse(self):
        for r, c in [(0, 0), (3, 5), (7, 7)]:
            x, y = cell_origin(r, c)
            assert cell_from_pixel(x + 1, y + 1) == (r, c)


class TestFormatting:
    def test_format_seconds(self):
        assert format_seconds(125) == "02:05"
        assert format_seconds(0.4) == "00:00"
        assert format_seconds(-3) == "00:00"

    def test_format_move(self):
        assert format_move(None) == "pass"
        assert format_move((2, 3)) == "(2,3)"


class TestCommandLine:
    def test_defaults(self):
        args = parse_args([])
        assert args.difficulty == config.DEFAULT_DIFFICULTY
        assert args.human == "black"
        assert args.selfplay is None
        assert args.log_level == "INFO"

    def test_difficulty_names(self):
        args = parse_args(["--difficulty", "expert", "--selfplay", "easy", "2"])
        assert args.difficulty == Difficulty.EXPERT
        assert args.selfplay == [Difficulty.EASY, Difficulty.MEDIUM]

    def test_bad_difficulty_exits(self):
        with pytest.raises(SystemExit):
            parse_args(["--difficulty", "godlike"])


class TestSelfPlay:
    def test_easy_vs_easy_completes(self):
        black, white = run_selfplay(Difficulty.EASY, Difficulty.EASY)
        assert 4 < black + white <= 64

    def test_deterministic(self):
        assert run_selfplay(Difficulty.EASY, Difficulty.EASY) == run_selfplay(Difficulty.EASY, Difficulty.EASY)

    def test_main_selfplay(self, caplog):
        with caplog.at_level("INFO"):
            assert main(["--selfplay", "easy", "easy"]) == 0
        assert any("Game over" in r.getMessage() for r in caplog.records)
        # Self-play records go through the module logger, like every other module
        assert {r.name for r in caplog.records if "Self-play" in r.getMessage()} == {"main"}


class TestPackaging:
    def test_metadata_only_points_at_shipped_files(self):
        tomllib = pytest.importorskip("tomllib")
        root = Path(__file__).resolve().parent.parent
        with open(root / "pyproject.toml", "rb") as f:
            project = tomllib.load(f)["project"]

        readme = project.get("readme")
        if readme is not None:
            assert readme != "DESIGN.md"
            assert (root / readme).is_file()
        assert project["scripts"]["othello"] == "main:main"
