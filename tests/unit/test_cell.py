"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, symbols and
observation conversion.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_unrevealed(self) -> None:
        """New cell should be unrevealed by default."""
        cell = Cell()
        assert cell.state == CellState.UNREVEALED
        assert cell.is_unrevealed is True

    def test_mine_cell_creation(self) -> None:
        """Can create a cell that is a mine."""
        cell = Cell(is_mine=True)
        assert cell.is_mine is True


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_unrevealed_cell_returns_true(
        self, unrevealed_cell: Cell
    ) -> None:
        """Revealing an unrevealed cell should succeed."""
        assert unrevealed_cell.reveal(0) is True

    def test_reveal_stores_adjacent_count(self, unrevealed_cell: Cell) -> None:
        """Revealing a cell should fix its adjacent mine count."""
        unrevealed_cell.reveal(3)
        assert unrevealed_cell.state == CellState.REVEALED
        assert unrevealed_cell.is_revealed is True
        assert unrevealed_cell.adjacent_mines == 3

    def test_reveal_already_revealed_keeps_count(
        self, unrevealed_cell: Cell
    ) -> None:
        """A revealed cell never changes again."""
        unrevealed_cell.reveal(2)
        assert unrevealed_cell.reveal(5) is False
        assert unrevealed_cell.adjacent_mines == 2

    def test_reveal_flagged_cell_returns_false(
        self, unrevealed_cell: Cell
    ) -> None:
        """Cannot reveal a flagged cell."""
        unrevealed_cell.toggle_flag()
        assert unrevealed_cell.reveal(0) is False
        assert unrevealed_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(
        self, unrevealed_cell: Cell
    ) -> None:
        """Flagging a cell should change its state."""
        assert unrevealed_cell.toggle_flag() is True
        assert unrevealed_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_unrevealed(self, unrevealed_cell: Cell) -> None:
        """Flagging twice should return the cell to unrevealed."""
        unrevealed_cell.toggle_flag()
        unrevealed_cell.toggle_flag()
        assert unrevealed_cell.state == CellState.UNREVEALED

    def test_flag_revealed_cell_returns_false(
        self, unrevealed_cell: Cell
    ) -> None:
        """Cannot flag a revealed cell."""
        unrevealed_cell.reveal(1)
        assert unrevealed_cell.toggle_flag() is False
        assert unrevealed_cell.is_revealed is True

    def test_flag_mine_cell(self, mine_cell: Cell) -> None:
        """Mines can be flagged like any other cell."""
        mine_cell.toggle_flag()
        assert mine_cell.is_flagged is True
        assert mine_cell.is_mine is True


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test render symbols."""

    def test_unrevealed_symbol(self, unrevealed_cell: Cell) -> None:
        assert unrevealed_cell.symbol == "*"

    def test_flagged_symbol(self, unrevealed_cell: Cell) -> None:
        unrevealed_cell.toggle_flag()
        assert unrevealed_cell.symbol == "F"

    def test_revealed_empty_symbol_is_blank(
        self, unrevealed_cell: Cell
    ) -> None:
        unrevealed_cell.reveal(0)
        assert unrevealed_cell.symbol == " "

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_symbol_is_count(self, count: int) -> None:
        """Revealed cell shows its adjacent mine count."""
        cell = Cell()
        cell.reveal(count)
        assert cell.symbol == str(count)


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for the environment."""

    def test_unrevealed_cell_observation_is_negative_one(
        self, unrevealed_cell: Cell
    ) -> None:
        assert unrevealed_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, unrevealed_cell: Cell
    ) -> None:
        unrevealed_cell.toggle_flag()
        assert unrevealed_cell.to_observation() == -2

    def test_revealed_cell_observation_matches_adjacent_count(
        self, unrevealed_cell: Cell
    ) -> None:
        unrevealed_cell.reveal(4)
        assert unrevealed_cell.to_observation() == 4

    def test_unrevealed_mine_observation_is_hidden(
        self, mine_cell: Cell
    ) -> None:
        """Mines are never exposed in observations."""
        assert mine_cell.to_observation() == -1
