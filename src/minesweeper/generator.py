"""
Board generation for Minesweeper.

Places mines by rejection sampling and computes the neighbour count of
every safe cell. The result is an immutable solution grid.
"""
import logging
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .errors import ConfigError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

MINE = -1


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        seed: Optional seed for reproducible mine placement.
    """

    width: int = 16
    height: int = 16
    num_mines: int = 5
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        if self.num_mines > self.max_mines:
            raise ConfigError(
                "Bombs can not cover more than half of the playing area "
                f"(max {self.max_mines})"
            )

    @property
    def max_mines(self) -> int:
        """Mine density cap: half the cell count, rounded down."""
        return (self.width * self.height) // 2


# ============================================================================
# Solution Grid
# ============================================================================

def neighbors(x: int, y: int, width: int, height: int) -> Iterator[Position]:
    """Yield the in-bounds 8-neighbours of (x, y)."""
    for ny in range(max(0, y - 1), min(height, y + 2)):
        for nx in range(max(0, x - 1), min(width, x + 2)):
            if nx == x and ny == y:
                continue
            yield nx, ny


class SolutionGrid:
    """
    Read-only minefield.

    Every cell holds either ``MINE`` or the number of mines among its
    neighbours (0-8). Cells are addressed as (x, y), x being the column.
    """

    def __init__(self, values: np.ndarray) -> None:
        self._values = np.array(values, dtype=np.int8)
        self._values.setflags(write=False)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "SolutionGrid":
        """
        Build a solution grid from explicit mine positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines.

        Returns:
            Grid with mines placed and counts filled in.
        """
        values = np.zeros((height, width), dtype=np.int8)
        for x, y in mines:
            values[y, x] = MINE

        for y in range(height):
            for x in range(width):
                if values[y, x] == MINE:
                    continue
                values[y, x] = sum(
                    1 for nx, ny in neighbors(x, y, width, height)
                    if values[ny, nx] == MINE
                )
        return cls(values)

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def num_mines(self) -> int:
        return int(np.count_nonzero(self._values == MINE))

    def is_mine(self, x: int, y: int) -> bool:
        return bool(self._values[y, x] == MINE)

    def count(self, x: int, y: int) -> int:
        """Adjacent mine count of a safe cell, ``MINE`` for a mine."""
        return int(self._values[y, x])

    def neighbors(self, x: int, y: int) -> List[Position]:
        return list(neighbors(x, y, self.width, self.height))

    def mine_positions(self) -> List[Position]:
        """Get (x, y) positions of every mine, row by row."""
        ys, xs = np.nonzero(self._values == MINE)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def as_array(self) -> np.ndarray:
        """Get the underlying read-only array, indexed [y, x]."""
        return self._values


# ============================================================================
# Generation
# ============================================================================

def place_mines(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> List[Position]:
    """
    Pick mine positions by rejection sampling.

    Random coordinates are drawn until ``config.num_mines`` distinct ones
    have been collected. The density cap keeps the expected number of
    draws linear in the mine count.
    """
    rng = rng or random.Random(config.seed)
    mines: List[Position] = []
    taken = set()
    while len(mines) < config.num_mines:
        position = (rng.randrange(config.width), rng.randrange(config.height))
        if position in taken:
            continue
        taken.add(position)
        mines.append(position)
    return mines


def generate(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> SolutionGrid:
    """
    Generate a solved minefield.

    Args:
        config: Board dimensions, mine count and optional seed.
        rng: Random source, overrides ``config.seed`` when given.

    Returns:
        Immutable solution grid with exactly ``config.num_mines`` mines.
    """
    mines = place_mines(config, rng)
    grid = SolutionGrid.from_mines(config.width, config.height, mines)
    logger.debug(
        "Generated %dx%d board with %d mines",
        config.width, config.height, len(mines),
    )
    return grid


def generate_board(
    width: int, height: int, num_mines: int, seed: Optional[int] = None
) -> SolutionGrid:
    """Validate dimensions and generate a board; raises ConfigError."""
    return generate(BoardConfig(width, height, num_mines, seed))
