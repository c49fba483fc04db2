"""
Game engine for Minesweeper.

Owns the solution grid, the player-visible grid and the flag budget.
Implements revealing with cascade, flagging, and the win check.
"""
import logging
import random
from dataclasses import replace
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import ActionError, ConfigError, GameOverError
from .generator import BoardConfig, Position, SolutionGrid, generate

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


class RevealOutcome(Enum):
    """Result of revealing a cell."""

    CONTINUE = auto()
    ALREADY_PLAYED = auto()
    LOST = auto()


class FlagOutcome(Enum):
    """Result of flagging a cell."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    ALREADY_PLAYED = auto()


# ============================================================================
# Game Engine
# ============================================================================

class GameEngine:
    """
    Minesweeper game engine.

    Cells are addressed as (x, y) with 0-based indices, x being the
    column. Out-of-range coordinates raise ActionError; any action after
    the game has ended raises GameOverError.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        solution: Optional[SolutionGrid] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new game.

        Args:
            config: Board configuration (default: 16x16 with 5 mines).
            solution: Pre-built minefield; generated from config if omitted.
            rng: Random source for mine placement.
        """
        self.config = config or BoardConfig()
        if solution is None:
            solution = generate(self.config, rng)
        elif (solution.width, solution.height) != (
            self.config.width, self.config.height
        ):
            raise ConfigError("Solution grid does not match board dimensions")
        elif solution.num_mines != self.config.num_mines:
            raise ConfigError(
                f"Solution grid has {solution.num_mines} mines, "
                f"expected {self.config.num_mines}"
            )

        self._solution = solution
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._flags_remaining = self.config.num_mines
        self._game_state = GameState.PLAYING

    @classmethod
    def create(
        cls, width: int, height: int, num_mines: int, seed: Optional[int] = None
    ) -> "GameEngine":
        """Build an engine from plain dimensions; raises ConfigError."""
        return cls(BoardConfig(width, height, num_mines, seed))

    @classmethod
    def from_solution(cls, solution: SolutionGrid) -> "GameEngine":
        """Build an engine around an existing minefield."""
        config = BoardConfig(solution.width, solution.height, solution.num_mines)
        return cls(config, solution=solution)

    # ========================================================================
    # Guards (Low-level)
    # ========================================================================

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_position(self, x: int, y: int) -> None:
        if not self._is_valid_position(x, y):
            raise ActionError(f"Position ({x}, {y}) is out of bounds")

    def _require_playing(self) -> None:
        if self._game_state != GameState.PLAYING:
            raise GameOverError(
                f"Game is over ({self._game_state.name.lower()})"
            )

    def _orthogonal_neighbors(self, x: int, y: int) -> List[Position]:
        """Get in-bounds left, right, up and down neighbours."""
        candidates = ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
        return [(nx, ny) for nx, ny in candidates if self._is_valid_position(nx, ny)]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A flagged cell loses its flag and gives it back to the budget. A
        mine busts and ends the game. Anything else starts a cascade.

        Args:
            x: Column index to reveal.
            y: Row index to reveal.

        Returns:
            ALREADY_PLAYED if the cell was revealed before, LOST on a mine,
            CONTINUE otherwise.
        """
        self._require_playing()
        self._check_position(x, y)

        cell = self._grid[y][x]
        if cell.is_revealed:
            return RevealOutcome.ALREADY_PLAYED

        if cell.is_flagged:
            cell.unflag()
            self._flags_remaining += 1

        if self._solution.is_mine(x, y):
            cell.bust()
            self._game_state = GameState.LOST
            logger.info("Mine hit at (%d, %d), game lost", x, y)
            return RevealOutcome.LOST

        opened = self._cascade(x, y)
        logger.debug("Reveal at (%d, %d) opened %d cells", x, y, opened)
        return RevealOutcome.CONTINUE

    def _cascade(self, x: int, y: int) -> int:
        """
        Flood-fill reveal from (x, y).

        Blank cells spread to their orthogonal neighbours; numbered cells
        are revealed but stop the spread. Flagged and already revealed
        cells are left alone.

        Returns:
            Number of cells revealed.
        """
        opened = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._grid[cy][cx]
            if not cell.is_hidden:
                continue
            count = self._solution.count(cx, cy)
            cell.reveal(count)
            opened += 1
            if count == 0:
                stack.extend(self._orthogonal_neighbors(cx, cy))
        return opened

    def flag(self, x: int, y: int) -> FlagOutcome:
        """
        Toggle flag on a cell.

        The budget is not clamped: placing more flags than mines drives
        it negative.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            FLAGGED or UNFLAGGED, or ALREADY_PLAYED for a revealed cell.
        """
        self._require_playing()
        self._check_position(x, y)

        cell = self._grid[y][x]
        if not cell.toggle_flag():
            return FlagOutcome.ALREADY_PLAYED
        if cell.is_flagged:
            self._flags_remaining -= 1
            return FlagOutcome.FLAGGED
        self._flags_remaining += 1
        return FlagOutcome.UNFLAGGED

    def check_win(self) -> bool:
        """
        Check whether every mine is flagged.

        Flags on safe cells are not penalised, but the budget must be used
        up before the mines are even looked at.
        """
        self._require_playing()
        if self._flags_remaining > 0:
            return False
        return all(
            self._grid[y][x].is_flagged
            for x, y in self._solution.mine_positions()
        )

    def finish(self) -> bool:
        """Run the win check and end the game as won if it passes."""
        won = self.check_win()
        if won:
            self._game_state = GameState.WON
            logger.info("All mines flagged, game won")
        return won

    def quit(self) -> None:
        """Abandon the game."""
        self._require_playing()
        self._game_state = GameState.QUIT
        logger.info("Game abandoned")

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def solution(self) -> SolutionGrid:
        """Get the read-only minefield."""
        return self._solution

    @property
    def flags_remaining(self) -> int:
        """Get flags left to place; negative when over-flagged."""
        return self._flags_remaining

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get a copy of the visible cell at position, or None if invalid."""
        if not self._is_valid_position(x, y):
            return None
        return replace(self._grid[y][x])

    def visible_grid(self) -> List[List[CellState]]:
        """Get the visible state of every cell, indexed [y][x]."""
        return [[cell.state for cell in row] for row in self._grid]

    def get_observation(self) -> np.ndarray:
        """
        Get the visible grid as a numpy array.

        Returns:
            2D array indexed [y, x] where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = busted mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def hidden_positions(self) -> List[Tuple[int, int]]:
        """Get (x, y) positions of cells that are neither revealed nor flagged."""
        return [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
            if self._grid[y][x].is_hidden
        ]
