"""
Minesweeper game module.

Provides the board state machine, input events, render snapshots and
the terminal and gymnasium front ends built on them.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState
from .events import Game, InputEvent
from .render import RenderSnapshot, render_text, take_snapshot
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "Game",
    "InputEvent",
    "RenderSnapshot",
    "render_text",
    "take_snapshot",
    "MinesweeperEnv",
]
