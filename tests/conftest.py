"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 10, seed=1234))


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_mines(3, [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 2x2 board with a mine in the top-left corner."""
    return Board.from_mines(2, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a 4x4 board with no mines for cascade testing."""
    return Board.from_mines(4, [])


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with a full column of mines in the middle."""
    return Board.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def open_board() -> Board:
    """Create a 5x5 board with no mines for cursor testing."""
    return Board.from_mines(5, [])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def unrevealed_cell() -> Cell:
    """Create an unrevealed cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_game(corner_mine_board: Board) -> Game:
    """Controller over the 2x2 corner-mine board."""
    return Game(corner_mine_board)


@pytest.fixture
def empty_game(empty_board: Board) -> Game:
    """Controller over the 4x4 empty board."""
    return Game(empty_board)
