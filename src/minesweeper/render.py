"""
Text rendering of Minesweeper grids.
"""
from typing import List

from .cell import Cell, CellState
from .engine import GameEngine
from .generator import SolutionGrid

ICON_EMPTY = "?"
ICON_BOMB = "X"
ICON_BUSTED = "B"
ICON_OPEN = "-"
ICON_FLAG = "F"


def cell_icon(cell: Cell) -> str:
    """Get the display character for a visible cell."""
    if cell.state == CellState.HIDDEN:
        return ICON_EMPTY
    if cell.state == CellState.FLAGGED:
        return ICON_FLAG
    if cell.state == CellState.BUSTED:
        return ICON_BUSTED
    if cell.state == CellState.BLANK:
        return ICON_OPEN
    return str(cell.adjacent_mines)


def solution_icon(solution: SolutionGrid, x: int, y: int) -> str:
    if solution.is_mine(x, y):
        return ICON_BOMB
    return str(solution.count(x, y))


def _header(flags_remaining: int, width: int) -> List[str]:
    columns = "".join(f"{i + 1} " for i in range(width))
    return [f"You have {flags_remaining} flags remaining", f"0 {columns}"]


def render_board(engine: GameEngine) -> str:
    """
    Render the player-visible grid.

    The first line shows the flag budget, the second numbers the columns
    from 1, and every following line starts with its 1-based row number.
    """
    lines = _header(engine.flags_remaining, engine.width)
    for y in range(engine.height):
        row = "".join(f"{cell_icon(engine.get_cell(x, y))} " for x in range(engine.width))
        lines.append(f"{y + 1} {row}")
    return "\n".join(lines)


def render_solution(engine: GameEngine) -> str:
    """Render the minefield with every mine and count uncovered."""
    solution = engine.solution
    lines = _header(engine.flags_remaining, solution.width)
    for y in range(solution.height):
        row = "".join(f"{solution_icon(solution, x, y)} " for x in range(solution.width))
        lines.append(f"{y + 1} {row}")
    return "\n".join(lines)
