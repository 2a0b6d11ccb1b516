"""
Layout module for Minesweeper game.

Holds the board configuration, the square-grid geometry shared by every
component, and the immutable mine layout with its adjacency counts.
"""
import numbers
import random
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from .errors import InvalidCell, InvalidConfiguration


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        dimension: Side length of the grid.
        num_mines: Total mines to place.
    """

    dimension: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not isinstance(self.dimension, numbers.Integral):
            raise InvalidConfiguration("Board dimension must be a whole number")
        if not isinstance(self.num_mines, numbers.Integral):
            raise InvalidConfiguration("Number of mines must be a whole number")
        if self.dimension < 1:
            raise InvalidConfiguration("Board dimension must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.dimension * self.dimension


# Preset difficulty levels
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)
EXPERT = BoardConfig(24, 99)


# ============================================================================
# Grid Geometry
# ============================================================================

def is_valid_index(index: int, dimension: int) -> bool:
    """Check if a linear index lies inside the grid."""
    return 0 <= index < dimension * dimension


def check_index(index: int, dimension: int) -> int:
    """Return index unchanged, or raise InvalidCell if it is off the grid."""
    if not isinstance(index, numbers.Integral) or not is_valid_index(index, dimension):
        raise InvalidCell(
            f"Cell {index!r} is outside a {dimension}x{dimension} board"
        )
    return index


def to_index(x: int, y: int, dimension: int) -> int:
    """
    Convert 1-based (x, y) coordinates to a row-major index.

    Args:
        x: Column, counted from 1.
        y: Row, counted from 1.
        dimension: Side length of the grid.

    Returns:
        Linear index dimension * (y - 1) + (x - 1).

    Raises:
        InvalidCell: If either coordinate is outside 1..dimension.
    """
    if not (1 <= x <= dimension and 1 <= y <= dimension):
        raise InvalidCell(
            f"Coordinates ({x}, {y}) are outside a "
            f"{dimension}x{dimension} board"
        )
    return dimension * (y - 1) + (x - 1)


def to_position(index: int, dimension: int) -> Tuple[int, int]:
    """Convert a linear index to a 0-based (row, col) position."""
    return divmod(index, dimension)


def neighbors(index: int, dimension: int) -> List[int]:
    """
    Get the indices of the up-to-8 cells around index.

    Neighbors never wrap across a row boundary: a cell in the first
    column has no western neighbors, one in the last column no eastern.

    Args:
        index: Center cell.
        dimension: Side length of the grid.

    Returns:
        Neighbor indices in row-major order.
    """
    row, col = to_position(index, dimension)
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < dimension and 0 <= new_col < dimension:
                result.append(new_row * dimension + new_col)
    return result


# ============================================================================
# Mine Layout
# ============================================================================

@dataclass(frozen=True)
class MineLayout:
    """
    Immutable placement of mines on the grid.

    Attributes:
        dimension: Side length of the grid.
        mines: Indices holding a mine.
        adjacent_counts: Mine count among the neighbors of every index.
    """

    dimension: int
    mines: FrozenSet[int]
    adjacent_counts: Tuple[int, ...]

    @classmethod
    def generate(
        cls,
        config: BoardConfig,
        rng: Optional[random.Random] = None,
    ) -> "MineLayout":
        """
        Place config.num_mines mines uniformly at random.

        Uses rejection sampling: a draw that lands on a mined cell is
        discarded and redrawn, so every mine is distinct.

        Args:
            config: Validated board configuration.
            rng: Random source (default: a fresh unseeded Random).

        Returns:
            New layout with adjacency counts computed.
        """
        rng = rng or random.Random()
        mines = set()
        while len(mines) < config.num_mines:
            index = rng.randrange(config.total_cells)
            if index in mines:
                continue
            mines.add(index)
        return cls._build(config.dimension, frozenset(mines))

    @classmethod
    def from_mines(cls, dimension: int, mines: Iterable[int]) -> "MineLayout":
        """
        Build a layout with mines at known positions.

        Raises:
            InvalidConfiguration: If an index is repeated or off the grid,
                or the mine count is not below the cell count.
        """
        mine_list = list(mines)
        mine_set = frozenset(mine_list)
        if len(mine_set) != len(mine_list):
            raise InvalidConfiguration("Mine positions must be distinct")
        config = BoardConfig(dimension, len(mine_set))
        for index in mine_set:
            if not isinstance(index, numbers.Integral) or not is_valid_index(index, dimension):
                raise InvalidConfiguration(
                    f"Mine position {index!r} is outside the board"
                )
        return cls._build(config.dimension, mine_set)

    @classmethod
    def _build(cls, dimension: int, mines: FrozenSet[int]) -> "MineLayout":
        counts = tuple(
            sum(1 for neighbor in neighbors(index, dimension) if neighbor in mines)
            for index in range(dimension * dimension)
        )
        return cls(dimension=dimension, mines=mines, adjacent_counts=counts)

    @property
    def num_mines(self) -> int:
        return len(self.mines)

    @property
    def total_cells(self) -> int:
        return self.dimension * self.dimension

    def is_mine(self, index: int) -> bool:
        """Check if the cell at index holds a mine."""
        return check_index(index, self.dimension) in self.mines

    def adjacent_mines(self, index: int) -> int:
        """Get the number of mines around the cell at index."""
        return self.adjacent_counts[check_index(index, self.dimension)]
