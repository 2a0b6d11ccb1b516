"""
Exceptions raised by the Minesweeper engine.

Win and loss are game statuses, not errors; these cover invalid input only.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimension or mine count cannot describe a playable board."""


class InvalidCell(MinesweeperError, IndexError):
    """Cell index or coordinate lies outside the grid."""


class GameAlreadyOver(MinesweeperError, RuntimeError):
    """A move was submitted after the game reached a terminal status."""


class InvalidCommand(MinesweeperError, ValueError):
    """Console input could not be parsed into a move."""
