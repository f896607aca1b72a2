"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(unrevealed/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

UNREVEALED_SYMBOL = "*"
FLAG_SYMBOL = "F"
EMPTY_SYMBOL = " "


class CellState(Enum):
    """Possible visual states of a cell."""

    UNREVEALED = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8), fixed
            when the cell is revealed.
        state: Current visual state (unrevealed, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.UNREVEALED

    def reveal(self, adjacent_mines: int) -> bool:
        """
        Reveal this cell with the given neighbor mine count.

        Args:
            adjacent_mines: Number of mines around the cell (0-8).

        Returns:
            True if cell was revealed, False if already revealed
            or flagged.
        """
        if self.state != CellState.UNREVEALED:
            return False
        self.adjacent_mines = adjacent_mines
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.UNREVEALED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.UNREVEALED
        return True

    @property
    def is_unrevealed(self) -> bool:
        """Check if cell is unrevealed."""
        return self.state == CellState.UNREVEALED

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def symbol(self) -> str:
        """Single-character symbol shown for this cell."""
        if self.state == CellState.UNREVEALED:
            return UNREVEALED_SYMBOL
        if self.state == CellState.FLAGGED:
            return FLAG_SYMBOL
        if self.adjacent_mines == 0:
            return EMPTY_SYMBOL
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for the environment.

        Returns:
            -1: Unrevealed cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
        """
        if self.state == CellState.UNREVEALED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacent_mines
