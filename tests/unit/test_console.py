"""
Unit tests for console rendering and move parsing.
"""
import pytest
from sweeper import (
    CellDisplay,
    DisplayKind,
    GameEngine,
    InvalidCell,
    InvalidCommand,
    MineLayout,
    MoveKind,
)
from sweeper.console import glyph, parse_move, render_board


# ============================================================================
# Rendering Tests
# ============================================================================

class TestGlyph:
    """Test per-cell characters."""

    @pytest.mark.parametrize("display, expected", [
        (CellDisplay(DisplayKind.HIDDEN), "."),
        (CellDisplay(DisplayKind.FLAGGED), "*"),
        (CellDisplay(DisplayKind.MINE), "X"),
        (CellDisplay.revealed(0), "/"),
        (CellDisplay.revealed(7), "7"),
    ])
    def test_glyph(self, display: CellDisplay, expected: str) -> None:
        assert glyph(display) == expected


class TestRenderBoard:
    """Test full board rendering."""

    def test_new_board_is_all_hidden(self, center_game: GameEngine) -> None:
        assert render_board(center_game).splitlines() == [
            " │123│",
            "—│———│",
            "1│...│",
            "2│...│",
            "3│...│",
            "—│———│",
        ]

    def test_board_after_flood(self) -> None:
        engine = GameEngine(layout=MineLayout.from_mines(3, [5]))
        engine.reveal(0)
        engine.toggle_flag(5)
        assert render_board(engine).splitlines()[2:5] == [
            "1│/1.│",
            "2│/1*│",
            "3│/1.│",
        ]

    def test_lost_board_shows_mines(self, center_game: GameEngine) -> None:
        center_game.reveal(4)
        assert render_board(center_game).splitlines()[3] == "2│.X.│"

    def test_wide_board_rulers_use_last_digit(self) -> None:
        engine = GameEngine(layout=MineLayout.from_mines(12, [0]))
        lines = render_board(engine).splitlines()
        assert lines[0] == " │123456789012│"
        assert lines[-2].startswith("2│")


# ============================================================================
# Parsing Tests
# ============================================================================

class TestParseMove:
    """Test console command parsing."""

    def test_free_is_reveal(self) -> None:
        assert parse_move("1 1 free", 9) == (0, MoveKind.REVEAL)

    def test_mine_is_flag_toggle(self) -> None:
        assert parse_move("3 2 mine", 9) == (11, MoveKind.TOGGLE_FLAG)

    def test_command_is_case_insensitive(self) -> None:
        assert parse_move("  2 1   FREE \n", 9) == (1, MoveKind.REVEAL)

    @pytest.mark.parametrize("line", ["", "1 1", "1 1 free now", "a 1 free", "1 1 dig"])
    def test_malformed_input_raises(self, line: str) -> None:
        with pytest.raises(InvalidCommand):
            parse_move(line, 9)

    @pytest.mark.parametrize("line", ["0 1 free", "10 1 free", "1 10 mine"])
    def test_out_of_board_raises_invalid_cell(self, line: str) -> None:
        with pytest.raises(InvalidCell):
            parse_move(line, 9)
