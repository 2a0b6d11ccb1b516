"""
Engine module for Minesweeper game.

Owns one mine layout and one board state, applies player moves and
decides when the game has been won or lost.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, Optional

import numpy as np

from .board import BoardState
from .cell import CellDisplay
from .errors import GameAlreadyOver, InvalidConfiguration
from .layout import BoardConfig, MineLayout, check_index, to_index

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class MoveKind(Enum):
    """Actions a player can take on a cell."""

    REVEAL = auto()
    TOGGLE_FLAG = auto()


LOST_MESSAGE = "You stepped on a mine and failed!"
WON_MESSAGE = "Congratulations! You found all the mines!"


@dataclass(frozen=True)
class MoveResult:
    """
    What a single move did.

    Attributes:
        index: Target cell.
        kind: Action applied.
        changed: Every index whose visibility changed.
        status: Game status after the move.
        message: Terminal message, if the move ended the game.
    """

    index: int
    kind: MoveKind
    changed: FrozenSet[int]
    status: GameStatus
    message: Optional[str] = None

    @property
    def hit_mine(self) -> bool:
        return self.status == GameStatus.LOST


# ============================================================================
# Win Predicates
# ============================================================================

def is_won_by_flags(board: BoardState) -> bool:
    """
    Check if the flags mark exactly the mine set and nothing else.

    A board without mines cannot be won by flagging.
    """
    mines = board.layout.mines
    if not mines:
        return False
    return board.flagged_count == len(mines) and board.flagged_indices() == mines


def is_won_by_reveal(board: BoardState) -> bool:
    """Check if, with no flags placed, only the mines are still hidden."""
    return (
        board.flagged_count == 0
        and board.hidden_count == board.layout.num_mines
    )


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    One game of Minesweeper.

    Moves are processed one at a time to completion. Once the status
    leaves IN_PROGRESS every further move raises GameAlreadyOver.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        layout: Optional[MineLayout] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Create a game and place its mines.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
                Must match layout when both are given.
            layout: Fixed mine layout to play on.
            seed: Random seed for reproducible mine placement.

        Raises:
            InvalidConfiguration: If config and layout disagree.
        """
        if layout is None:
            config = config or BoardConfig()
            layout = MineLayout.generate(config, random.Random(seed))
        elif config is not None and (
            config.dimension != layout.dimension
            or config.num_mines != layout.num_mines
        ):
            raise InvalidConfiguration(
                f"Config {config.dimension}x{config.dimension} with "
                f"{config.num_mines} mines does not match the layout"
            )
        self.layout = layout
        self.board = BoardState(layout)
        self._status = GameStatus.IN_PROGRESS
        self._message: Optional[str] = None
        self.moves_made = 0
        logger.debug(
            "New game: %dx%d board with %d mines",
            layout.dimension, layout.dimension, layout.num_mines,
        )

    # ========================================================================
    # Moves
    # ========================================================================

    def apply_move(self, index: int, kind: MoveKind) -> MoveResult:
        """
        Apply a move and re-evaluate the game status.

        Args:
            index: Row-major cell index.
            kind: Reveal or flag toggle.

        Returns:
            Description of the cells changed and the resulting status.

        Raises:
            GameAlreadyOver: If the game has already been won or lost.
            InvalidCell: If index is outside the grid.
        """
        if self._status != GameStatus.IN_PROGRESS:
            raise GameAlreadyOver(f"Game is already {self._status.name.lower()}")
        check_index(index, self.layout.dimension)

        if kind == MoveKind.REVEAL:
            outcome = self.board.reveal(index)
            changed = outcome.opened
            if outcome.hit_mine:
                changed = changed | self.board.reveal_mines()
                self._finish(GameStatus.LOST, LOST_MESSAGE)
                self.moves_made += 1
                return self._result(index, kind, changed)
        else:
            toggled = self.board.toggle_flag(index)
            changed = frozenset({index}) if toggled else frozenset()

        self.moves_made += 1
        logger.debug("%s at %d changed %d cells", kind.name, index, len(changed))

        if is_won_by_flags(self.board) or is_won_by_reveal(self.board):
            self._finish(GameStatus.WON, WON_MESSAGE)
        return self._result(index, kind, changed)

    def apply_move_at(self, x: int, y: int, kind: MoveKind) -> MoveResult:
        """Apply a move addressed by 1-based (x, y) coordinates."""
        return self.apply_move(to_index(x, y, self.layout.dimension), kind)

    def reveal(self, index: int) -> MoveResult:
        return self.apply_move(index, MoveKind.REVEAL)

    def toggle_flag(self, index: int) -> MoveResult:
        return self.apply_move(index, MoveKind.TOGGLE_FLAG)

    def _finish(self, status: GameStatus, message: str) -> None:
        self._status = status
        self._message = message
        logger.info("Game %s: %s", status.name.lower(), message)

    def _result(
        self, index: int, kind: MoveKind, changed: FrozenSet[int]
    ) -> MoveResult:
        return MoveResult(
            index=index,
            kind=kind,
            changed=changed,
            status=self._status,
            message=self._message,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def message(self) -> Optional[str]:
        return self._message

    @property
    def dimension(self) -> int:
        return self.layout.dimension

    @property
    def is_playing(self) -> bool:
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        return self._status == GameStatus.LOST

    def cell_display_state(self, index: int) -> CellDisplay:
        """Get what a renderer should draw at index."""
        return self.board.display_state(index)

    def get_observation(self) -> np.ndarray:
        """Get the board as a (dimension, dimension) int8 array."""
        return self.board.get_observation()


def new_game(
    dimension: int, num_mines: int, seed: Optional[int] = None
) -> GameEngine:
    """
    Start a game on a dimension x dimension board.

    Raises:
        InvalidConfiguration: If the mine count does not fit the board.
    """
    return GameEngine(BoardConfig(dimension, num_mines), seed=seed)
