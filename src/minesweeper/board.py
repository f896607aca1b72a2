"""
Board module for Minesweeper game.

Implements the square game board with mine placement, cell revealing,
flagging, cursor movement and game state management.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
        seed: Optional seed for reproducible mine placement.
    """

    size: int = 10
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    the cursor and win/lose conditions.

    Mines are placed at construction, either at random (exactly
    ``config.num_mines`` distinct cells) or from ``mine_layout``.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    mine_layout: Optional[Tuple[Position, ...]] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _cursor_row: int = 0
    _cursor_col: int = 0
    _cells_revealed: int = 0
    _safe_cells: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid and place mines after dataclass creation."""
        self._rng = random.Random(self.config.seed)
        if self.mine_layout is not None:
            self.mine_layout = tuple(sorted(set(self.mine_layout)))
            if len(self.mine_layout) != self.config.num_mines:
                raise ValueError(
                    f"Mine layout has {len(self.mine_layout)} mines, "
                    f"config expects {self.config.num_mines}"
                )
        self._new_game()

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Args:
            size: Number of rows and columns.
            mines: (row, col) positions; duplicates are collapsed.

        Returns:
            New board ready to play.
        """
        layout = tuple(set(mines))
        return cls(BoardConfig(size, len(layout)), mine_layout=layout)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _new_game(self) -> None:
        self._init_grid()
        if self.mine_layout is None:
            positions = self._get_random_mine_positions()
        else:
            positions = list(self.mine_layout)
        self._place_mines(positions)
        self._game_state = GameState.PLAYING
        self._cursor_row = 0
        self._cursor_col = 0
        self._cells_revealed = 0
        self._safe_cells = self.config.total_cells - len(positions)

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.size)]
            for _ in range(self.config.size)
        ]

    def _get_random_mine_positions(self) -> List[Position]:
        """Pick ``num_mines`` distinct positions uniformly at random."""
        positions = [
            (row, col)
            for row in range(self.config.size)
            for col in range(self.config.size)
        ]
        return self._rng.sample(positions, self.config.num_mines)

    def _place_mines(self, positions: List[Position]) -> None:
        """
        Mark the given positions as mines.

        Args:
            positions: (row, col) tuples inside the board.
        """
        for row, col in positions:
            self._check_position(row, col)
            self._grid[row][col].is_mine = True
        logger.debug(
            "Placed %d mines on a %dx%d board",
            len(positions), self.config.size, self.config.size,
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Bounds come from the grid itself, so out-of-range neighbors are
        skipped rather than wrapped around.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        height = len(self._grid)
        width = len(self._grid[0])
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < height and 0 <= new_col < width:
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside a "
                f"{self.config.size}x{self.config.size} board"
            )

    def count_mines(self, row: int, col: int) -> int:
        """
        Count mines in the Moore neighborhood of a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Number of neighboring mines (0-8).
        """
        self._check_position(row, col)
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        A mine ends the game as lost and is left unrevealed. A cell with
        no adjacent mines opens its neighbors, and theirs, until the
        region is bounded by numbered cells or the board edges. Flagged
        and already revealed cells are left alone.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if any cell was revealed or a mine was hit,
            False otherwise.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self.game_over:
            return False

        cell = self._grid[row][col]
        # Flags are checked before mines: a flagged mine is protected like
        # any other flagged cell instead of ending the game.
        if cell.is_flagged:
            return False
        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine hit at (%d, %d)", row, col)
            return True

        revealed = self._flood_fill(row, col)
        self.update_game_over()
        return revealed > 0

    def _flood_fill(self, row: int, col: int) -> int:
        """Reveal from a safe cell using an explicit stack of positions."""
        revealed = 0
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if cell.is_mine or not cell.is_unrevealed:
                continue

            mines = self.count_mines(current_row, current_col)
            cell.reveal(mines)
            revealed += 1

            if mines == 0:
                stack.extend(self._get_neighbors(current_row, current_col))

        self._cells_revealed += revealed
        if revealed > 1:
            logger.debug(
                "Flood fill from (%d, %d) revealed %d cells",
                row, col, revealed,
            )
        return revealed

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        if self.game_over:
            return False
        return self._grid[row][col].toggle_flag()

    def reveal_at_cursor(self) -> bool:
        """Reveal the cell under the cursor."""
        return self.reveal(self._cursor_row, self._cursor_col)

    def flag_at_cursor(self) -> bool:
        """Toggle the flag under the cursor."""
        return self.flag(self._cursor_row, self._cursor_col)

    # ========================================================================
    # Cursor Movement
    # ========================================================================

    def move_up(self) -> bool:
        """Move cursor one row up; no-op on the top edge."""
        if self._cursor_row > 0:
            self._cursor_row -= 1
            return True
        return False

    def move_down(self) -> bool:
        """Move cursor one row down; no-op on the bottom edge."""
        if self._cursor_row < self.config.size - 1:
            self._cursor_row += 1
            return True
        return False

    def move_left(self) -> bool:
        """Move cursor one column left; no-op on the left edge."""
        if self._cursor_col > 0:
            self._cursor_col -= 1
            return True
        return False

    def move_right(self) -> bool:
        """Move cursor one column right; no-op on the right edge."""
        if self._cursor_col < self.config.size - 1:
            self._cursor_col += 1
            return True
        return False

    # ========================================================================
    # Win Condition
    # ========================================================================

    def check_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return self._cells_revealed >= self._safe_cells

    def scan_win(self) -> bool:
        """Check the win condition by scanning every cell."""
        return all(
            cell.is_revealed
            for grid_row in self._grid
            for cell in grid_row
            if not cell.is_mine
        )

    def update_game_over(self) -> bool:
        """
        Mark the game as won if every safe cell is revealed.

        Returns:
            True if the game is over (won or lost).
        """
        if self._game_state == GameState.PLAYING and self.check_win():
            self._game_state = GameState.WON
        return self.game_over

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Number of rows and columns."""
        return self.config.size

    @property
    def cursor(self) -> Position:
        """Current cursor position as (row, col)."""
        return self._cursor_row, self._cursor_col

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def game_over(self) -> bool:
        """Check if game has ended."""
        return self._game_state != GameState.PLAYING

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

    @property
    def revealed_count(self) -> int:
        """Number of safe cells revealed so far."""
        return self._cells_revealed

    @property
    def safe_cell_count(self) -> int:
        """Number of cells without a mine."""
        return self._safe_cells

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(
            1 for grid_row in self._grid for cell in grid_row if cell.is_flagged
        )

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the board.
        """
        self._check_position(row, col)
        return self._grid[row][col]

    def iter_rows(self) -> Iterator[List[Cell]]:
        """Iterate over rows of cells, top to bottom."""
        return iter(self._grid)

    def mine_positions(self) -> List[Position]:
        """Positions of all mines, in row-major order."""
        return [
            (row, col)
            for row in range(self.config.size)
            for col in range(self.config.size)
            if self._grid[row][col].is_mine
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = unrevealed
                -2 = flagged
                0-8 = revealed with adjacent count
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for row in range(size):
            for col in range(size):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def reset(self) -> None:
        """Reset board to a fresh game with the same configuration."""
        self._new_game()
