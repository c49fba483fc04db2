"""
Exceptions raised by the Minesweeper engine and its prompt loop.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class ConfigError(MinesweeperError, ValueError):
    """Board configuration is invalid; the game cannot start."""


class ActionError(MinesweeperError, ValueError):
    """Player action is malformed or points outside the board."""


class GameOverError(MinesweeperError, RuntimeError):
    """Action attempted after the game has ended."""
