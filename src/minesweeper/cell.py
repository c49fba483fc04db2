"""
Cell module for Minesweeper game.

Represents a single cell of the player-visible grid: what the player
currently sees there (hidden, flagged, revealed or busted).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()
    BLANK = auto()
    BUSTED = auto()


# Observation values for cells that do not show a count
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_BUSTED = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the player-visible grid.

    Attributes:
        state: Current visual state.
        adjacent_mines: Count shown once the cell is revealed (1-8), 0 otherwise.
    """

    state: CellState = CellState.HIDDEN
    adjacent_mines: int = 0

    def reveal(self, adjacent_mines: int) -> bool:
        """
        Reveal this cell with the given neighbour count.

        A count of 0 turns the cell blank, anything else shows the number.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.adjacent_mines = adjacent_mines
        self.state = CellState.BLANK if adjacent_mines == 0 else CellState.REVEALED
        return True

    def bust(self) -> None:
        """Mark this cell as the detonated mine."""
        self.state = CellState.BUSTED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed or self.state == CellState.BUSTED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def unflag(self) -> None:
        if self.state == CellState.FLAGGED:
            self.state = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell shows a count or is blank."""
        return self.state in (CellState.REVEALED, CellState.BLANK)

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_busted(self) -> bool:
        return self.state == CellState.BUSTED

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Busted mine
        """
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAGGED
        if self.state == CellState.BUSTED:
            return OBS_BUSTED
        return self.adjacent_mines
