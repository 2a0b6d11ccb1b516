"""
Board module for Minesweeper game.

Tracks the visibility of every cell over a fixed mine layout and
implements revealing, flood fill and flag toggling.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import FrozenSet, List, Set

import numpy as np

from .cell import CellDisplay, CellState, DisplayKind
from .layout import MineLayout, check_index, neighbors


# ============================================================================
# Reveal Outcome
# ============================================================================

@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a single reveal.

    Attributes:
        hit_mine: True if the revealed cell held a mine.
        opened: Every index whose visibility changed.
    """

    hit_mine: bool = False
    opened: FrozenSet[int] = frozenset()


# ============================================================================
# Board State
# ============================================================================

@dataclass
class BoardState:
    """
    Mutable per-cell visibility for one game.

    A cell becomes REVEALED only if it is safe, or through
    reveal_mines() once the game is lost.
    """

    layout: MineLayout
    _cells: List[CellState] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Start with every cell hidden."""
        self._cells = [CellState.HIDDEN] * self.layout.total_cells

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, index: int) -> RevealOutcome:
        """
        Reveal the cell at index.

        Flagged and already revealed cells are left untouched. A safe
        cell with no adjacent mines opens its whole zero region.

        Args:
            index: Cell to reveal.

        Returns:
            Outcome describing a mine hit or the newly opened cells.

        Raises:
            InvalidCell: If index is outside the grid.
        """
        check_index(index, self.layout.dimension)
        if self._cells[index] != CellState.HIDDEN:
            return RevealOutcome()

        if index in self.layout.mines:
            self._cells[index] = CellState.REVEALED
            return RevealOutcome(hit_mine=True, opened=frozenset({index}))

        return RevealOutcome(opened=frozenset(self._flood_fill(index)))

    def _flood_fill(self, start: int) -> Set[int]:
        """Open start and every hidden cell reachable through zero counts."""
        dimension = self.layout.dimension
        opened = set()
        visited = {start}
        pending = deque([start])

        while pending:
            index = pending.popleft()
            self._cells[index] = CellState.REVEALED
            opened.add(index)

            if self.layout.adjacent_counts[index] != 0:
                continue
            for neighbor in neighbors(index, dimension):
                if neighbor in visited:
                    continue
                if self._cells[neighbor] != CellState.HIDDEN:
                    continue
                visited.add(neighbor)
                pending.append(neighbor)

        return opened

    def toggle_flag(self, index: int) -> bool:
        """
        Toggle flag on the cell at index.

        Returns:
            True if flag was toggled, False if the cell is revealed.

        Raises:
            InvalidCell: If index is outside the grid.
        """
        check_index(index, self.layout.dimension)
        state = self._cells[index]
        if state == CellState.REVEALED:
            return False
        if state == CellState.HIDDEN:
            self._cells[index] = CellState.FLAGGED
        else:
            self._cells[index] = CellState.HIDDEN
        return True

    def reveal_mines(self) -> FrozenSet[int]:
        """Reveal every mine, flagged or not, for the loss display."""
        changed = set()
        for index in self.layout.mines:
            if self._cells[index] != CellState.REVEALED:
                self._cells[index] = CellState.REVEALED
                changed.add(index)
        return frozenset(changed)

    # ========================================================================
    # State Accessors
    # ========================================================================

    def state(self, index: int) -> CellState:
        """Get the visibility of the cell at index."""
        return self._cells[check_index(index, self.layout.dimension)]

    def display_state(self, index: int) -> CellDisplay:
        """Get the render-friendly value of the cell at index."""
        state = self.state(index)
        if state == CellState.HIDDEN:
            return CellDisplay(DisplayKind.HIDDEN)
        if state == CellState.FLAGGED:
            return CellDisplay(DisplayKind.FLAGGED)
        if index in self.layout.mines:
            return CellDisplay(DisplayKind.MINE)
        return CellDisplay.revealed(self.layout.adjacent_counts[index])

    @property
    def hidden_count(self) -> int:
        return self._cells.count(CellState.HIDDEN)

    @property
    def flagged_count(self) -> int:
        return self._cells.count(CellState.FLAGGED)

    @property
    def revealed_count(self) -> int:
        return self._cells.count(CellState.REVEALED)

    def flagged_indices(self) -> FrozenSet[int]:
        """Get every index currently carrying a flag."""
        return frozenset(
            index for index, state in enumerate(self._cells)
            if state == CellState.FLAGGED
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        dimension = self.layout.dimension
        obs = np.zeros((dimension, dimension), dtype=np.int8)
        for index in range(self.layout.total_cells):
            row, col = divmod(index, dimension)
            obs[row, col] = self.display_state(index).to_observation()
        return obs
