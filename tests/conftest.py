"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import BoardConfig, Cell, GameEngine, SolutionGrid


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> GameEngine:
    """Create a default 16x16 game with 5 mines."""
    return GameEngine(BoardConfig(seed=1234))


@pytest.fixture
def corner_mine_solution() -> SolutionGrid:
    """A 3x3 minefield with its only mine at (0, 0)."""
    return SolutionGrid.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def small_engine(corner_mine_solution: SolutionGrid) -> GameEngine:
    """Create a 3x3 game with a single mine in the top-left corner."""
    return GameEngine.from_solution(corner_mine_solution)


@pytest.fixture
def walled_engine() -> GameEngine:
    """
    Create a 5x5 game with a column of mines at x=2.

    Layout (M = mine, 0 = blank):
        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
        0 1 1 1 0
    The numbered cells keep the two blank columns apart.
    """
    mines = [(2, 0), (2, 1), (2, 2), (2, 3)]
    return GameEngine.from_solution(SolutionGrid.from_mines(5, 5, mines))


@pytest.fixture
def empty_engine() -> GameEngine:
    """Create a game with no mines for cascade testing."""
    return GameEngine(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell()
    cell.reveal(3)
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10, seed=7)
