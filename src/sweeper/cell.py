"""
Cell module for Minesweeper game.

Defines the visibility state of a cell and the tagged display value
that renderers consume.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visibility states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class DisplayKind(Enum):
    """What a renderer should draw for a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    MINE = auto()
    EMPTY = auto()
    COUNT = auto()


# Observation codes shared with the numpy board view
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Display Value
# ============================================================================

@dataclass(frozen=True)
class CellDisplay:
    """
    Render-friendly view of a single cell.

    Attributes:
        kind: Which variant this is.
        count: Adjacent mine count, only meaningful for COUNT (1-8).
    """

    kind: DisplayKind
    count: int = 0

    @classmethod
    def revealed(cls, adjacent_mines: int) -> "CellDisplay":
        """Build the display for a revealed safe cell."""
        if adjacent_mines == 0:
            return cls(DisplayKind.EMPTY)
        return cls(DisplayKind.COUNT, adjacent_mines)

    @property
    def is_hidden(self) -> bool:
        return self.kind == DisplayKind.HIDDEN

    @property
    def is_flagged(self) -> bool:
        return self.kind == DisplayKind.FLAGGED

    @property
    def is_mine(self) -> bool:
        return self.kind == DisplayKind.MINE

    def to_observation(self) -> int:
        """
        Convert display value to an observation integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.kind == DisplayKind.HIDDEN:
            return HIDDEN_CODE
        if self.kind == DisplayKind.FLAGGED:
            return FLAGGED_CODE
        if self.kind == DisplayKind.MINE:
            return MINE_CODE
        return self.count
