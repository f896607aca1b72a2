"""
Input events and the game controller.

The controller applies one discrete input event at a time to a board
and hands back a render snapshot, so any front end (terminal, gymnasium
environment, tests) can drive the game without touching the board.
"""
import logging
from enum import Enum
from typing import Callable, Dict

from .board import Board
from .render import RenderSnapshot, take_snapshot

logger = logging.getLogger(__name__)


class InputEvent(Enum):
    """Discrete player inputs."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    REVEAL = "reveal"
    FLAG = "flag"
    QUIT = "quit"


class Game:
    """
    Owns a board and applies input events to it.

    Each event is handled to completion, including the win check,
    before the next one is accepted.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.quit_requested = False
        self.last_action_changed = False
        self._handlers: Dict[InputEvent, Callable[[], bool]] = {
            InputEvent.MOVE_UP: board.move_up,
            InputEvent.MOVE_DOWN: board.move_down,
            InputEvent.MOVE_LEFT: board.move_left,
            InputEvent.MOVE_RIGHT: board.move_right,
            InputEvent.REVEAL: board.reveal_at_cursor,
            InputEvent.FLAG: board.flag_at_cursor,
        }

    @property
    def running(self) -> bool:
        """True until the player quits or the game ends."""
        return not self.quit_requested and not self.board.game_over

    def handle(self, event: InputEvent) -> RenderSnapshot:
        """
        Apply one input event and return the resulting snapshot.

        Events other than QUIT are ignored once the game is over.

        Args:
            event: Input to apply.

        Returns:
            Snapshot of the board after the event.
        """
        self.last_action_changed = False
        if event is InputEvent.QUIT:
            self.quit_requested = True
            logger.info("Player quit")
            return self.snapshot()

        if self.board.game_over:
            return self.snapshot()

        self.last_action_changed = self._handlers[event]()
        if self.board.update_game_over():
            if self.board.is_won:
                logger.info("Game won")
            else:
                logger.info("Game lost at %s", self.board.cursor)
        return self.snapshot()

    def snapshot(self) -> RenderSnapshot:
        """Snapshot of the current board."""
        return take_snapshot(self.board)
