"""
Console helpers for playing in a terminal.

Turns an engine into text and a typed line into a move. Neither keeps
any state of its own.
"""
from typing import Tuple

from .cell import CellDisplay, DisplayKind
from .engine import GameEngine, MoveKind
from .errors import InvalidCommand
from .layout import to_index


GLYPHS = {
    DisplayKind.HIDDEN: ".",
    DisplayKind.FLAGGED: "*",
    DisplayKind.MINE: "X",
    DisplayKind.EMPTY: "/",
}

COMMANDS = {
    "free": MoveKind.REVEAL,
    "mine": MoveKind.TOGGLE_FLAG,
}


def glyph(display: CellDisplay) -> str:
    """Get the single character drawn for a cell."""
    if display.kind == DisplayKind.COUNT:
        return str(display.count)
    return GLYPHS[display.kind]


def render_board(engine: GameEngine) -> str:
    """
    Render the board with 1-based rulers along the top and left.

    Example for a 3x3 board with a mine at (3, 2) after revealing (1, 1):

         │123│
        —│———│
        1│/1.│
        2│/1.│
        3│/1.│
        —│———│
    """
    dimension = engine.dimension
    ruler = "".join(str(col % 10) for col in range(1, dimension + 1))
    separator = "—│" + "—" * dimension + "│"

    lines = [" │" + ruler + "│", separator]
    for row in range(dimension):
        cells = "".join(
            glyph(engine.cell_display_state(row * dimension + col))
            for col in range(dimension)
        )
        lines.append(f"{(row + 1) % 10}│{cells}│")
    lines.append(separator)
    return "\n".join(lines)


def parse_move(line: str, dimension: int) -> Tuple[int, MoveKind]:
    """
    Parse "x y free" or "x y mine" into a cell index and move kind.

    Raises:
        InvalidCommand: If the line is not three tokens of the right form.
        InvalidCell: If the coordinates fall outside the board.
    """
    parts = line.split()
    if len(parts) != 3:
        raise InvalidCommand(f"Expected 'x y free|mine', got {line.strip()!r}")

    x_text, y_text, command = parts
    try:
        x, y = int(x_text), int(y_text)
    except ValueError:
        raise InvalidCommand(f"Coordinates must be integers: {x_text} {y_text}")

    kind = COMMANDS.get(command.lower())
    if kind is None:
        raise InvalidCommand(f"Unknown command {command!r}, use free or mine")

    return to_index(x, y, dimension), kind
