"""
Minesweeper board engine.

Provides mine placement, cell visibility tracking, flood-fill reveals
and win/loss evaluation for a single square-grid game.
"""
from .cell import CellDisplay, CellState, DisplayKind
from .errors import (
    GameAlreadyOver,
    InvalidCell,
    InvalidCommand,
    InvalidConfiguration,
    MinesweeperError,
)
from .layout import (
    BoardConfig,
    MineLayout,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    neighbors,
    to_index,
)
from .board import BoardState, RevealOutcome
from .engine import (
    GameEngine,
    GameStatus,
    MoveKind,
    MoveResult,
    is_won_by_flags,
    is_won_by_reveal,
    new_game,
)

__all__ = [
    "CellDisplay",
    "CellState",
    "DisplayKind",
    "MinesweeperError",
    "InvalidConfiguration",
    "InvalidCell",
    "GameAlreadyOver",
    "InvalidCommand",
    "BoardConfig",
    "MineLayout",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "neighbors",
    "to_index",
    "BoardState",
    "RevealOutcome",
    "GameEngine",
    "GameStatus",
    "MoveKind",
    "MoveResult",
    "is_won_by_flags",
    "is_won_by_reveal",
    "new_game",
]
