"""
Minesweeper game module.

Provides board generation, the game engine, text rendering and the
interactive prompt loop.
"""
from .cell import Cell, CellState
from .errors import ActionError, ConfigError, GameOverError, MinesweeperError
from .generator import MINE, BoardConfig, SolutionGrid, generate, generate_board
from .engine import FlagOutcome, GameEngine, GameState, RevealOutcome
from .render import render_board, render_solution

__all__ = [
    "Cell",
    "CellState",
    "ActionError",
    "ConfigError",
    "GameOverError",
    "MinesweeperError",
    "MINE",
    "BoardConfig",
    "SolutionGrid",
    "generate",
    "generate_board",
    "FlagOutcome",
    "GameEngine",
    "GameState",
    "RevealOutcome",
    "render_board",
    "render_solution",
]
