"""
Render snapshots of a Minesweeper board.

A snapshot is an immutable picture of the board taken after each player
action: one symbol per cell, the cursor, and the game outcome. Front ends
draw snapshots and never read the board directly.
"""
from dataclasses import dataclass
from typing import Tuple

from .board import Board, GameState


# ============================================================================
# Constants
# ============================================================================

HELP_TEXT = "Use arrow keys to move, space to reveal, f to flag, and q to quit"
WIN_MESSAGE = "Game over! You win!"
LOSS_MESSAGE = "Game over! You hit a mine!"


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class RenderSnapshot:
    """
    Immutable view of a board for rendering.

    Attributes:
        rows: One string per board row, one symbol per cell.
        cursor: Cursor position as (row, col).
        game_over: Whether the game has ended.
        outcome: Current game state (playing, won or lost).
    """

    rows: Tuple[str, ...]
    cursor: Tuple[int, int]
    game_over: bool
    outcome: GameState

    @property
    def size(self) -> int:
        return len(self.rows)

    @property
    def won(self) -> bool:
        return self.outcome == GameState.WON

    @property
    def lost(self) -> bool:
        return self.outcome == GameState.LOST

    def symbol_at(self, row: int, col: int) -> str:
        """Symbol shown at the given position."""
        return self.rows[row][col]

    @property
    def status_message(self) -> str:
        """Outcome message once the game is over, help text otherwise."""
        if self.won:
            return WIN_MESSAGE
        if self.lost:
            return LOSS_MESSAGE
        return HELP_TEXT


def take_snapshot(board: Board) -> RenderSnapshot:
    """
    Capture the current state of a board.

    Args:
        board: Board to capture.

    Returns:
        Snapshot of symbols, cursor and outcome.
    """
    rows = tuple(
        "".join(cell.symbol for cell in grid_row)
        for grid_row in board.iter_rows()
    )
    return RenderSnapshot(
        rows=rows,
        cursor=board.cursor,
        game_over=board.game_over,
        outcome=board.game_state,
    )


def render_text(snapshot: RenderSnapshot, highlight: str = "[]") -> str:
    """
    Render a snapshot as plain text.

    Each cell takes three characters; the cursor cell is wrapped in the
    two ``highlight`` characters.

    Args:
        snapshot: Snapshot to render.
        highlight: Opening and closing characters around the cursor cell.

    Raises:
        ValueError: If ``highlight`` is not exactly two characters.

    Returns:
        Multiline string ending with the status line.
    """
    if len(highlight) != 2:
        raise ValueError(
            f"highlight must be two characters, got {highlight!r}"
        )
    open_mark, close_mark = highlight
    lines = []
    for row, symbols in enumerate(snapshot.rows):
        row_str = ""
        for col, symbol in enumerate(symbols):
            if (row, col) == snapshot.cursor:
                row_str += f"{open_mark}{symbol}{close_mark}"
            else:
                row_str += f" {symbol} "
        lines.append(row_str.rstrip())

    lines.append("")
    lines.append(snapshot.status_message)
    return "\n".join(lines)
