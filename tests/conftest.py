"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import BoardConfig, BoardState, GameEngine, MineLayout


# ============================================================================
# Layout Fixtures
# ============================================================================

@pytest.fixture
def center_layout() -> MineLayout:
    """3x3 board with a single mine in the center (index 4)."""
    return MineLayout.from_mines(3, [4])


@pytest.fixture
def wall_layout() -> MineLayout:
    """5x5 board with the middle column (col 2) fully mined."""
    return MineLayout.from_mines(5, [2, 7, 12, 17, 22])


@pytest.fixture
def corner_layout() -> MineLayout:
    """4x4 board with one mine in the bottom-right corner (index 15)."""
    return MineLayout.from_mines(4, [15])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def wall_board(wall_layout: MineLayout) -> BoardState:
    """Fresh board state over the wall layout."""
    return BoardState(wall_layout)


@pytest.fixture
def center_board(center_layout: MineLayout) -> BoardState:
    """Fresh board state over the center layout."""
    return BoardState(center_layout)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def center_game(center_layout: MineLayout) -> GameEngine:
    """Game on the 3x3 board with a center mine."""
    return GameEngine(layout=center_layout)


@pytest.fixture
def wall_game(wall_layout: MineLayout) -> GameEngine:
    """Game on the 5x5 board with a mined middle column."""
    return GameEngine(layout=wall_layout)


@pytest.fixture
def default_game() -> GameEngine:
    """Seeded 9x9 game with 10 mines."""
    return GameEngine(BoardConfig(), seed=1234)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """3x3 board with a single mine."""
    return BoardConfig(3, 1)
