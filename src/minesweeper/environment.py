"""
Gymnasium environment wrapper for Minesweeper.

Drives the board through the same discrete input events a player
sends from the keyboard, for scripted and headless play.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .events import Game, InputEvent
from .render import render_text


# ============================================================================
# Constants
# ============================================================================

ACTIONS = list(InputEvent)

WIN_REWARD = 10.0
LOSS_REWARD = -10.0
NOOP_PENALTY = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        Dict with:
        - board: 2D array, -1 = unrevealed, -2 = flagged,
          0-8 = revealed cell with adjacent mine count
        - cursor: (row, col) of the cursor

    Actions:
        Discrete action space with one action per input event,
        in ``InputEvent`` declaration order.

    Rewards:
        - +1 for each safe cell revealed by the action
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changed nothing
        - 0 for quitting
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.game = Game(self.board)
        self.render_mode = render_mode

        size = self.config.size
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=-2, high=8, shape=(size, size), dtype=np.int8
                ),
                "cursor": spaces.Box(
                    low=0, high=size - 1, shape=(2,), dtype=np.int64
                ),
            }
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Dict[str, np.ndarray], Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Reseeds mine placement; if None, the board's random
                generator carries on from the previous game.
            options: Unused.

        Returns:
            Initial observation and info dict.
        """
        super().reset(seed=seed)

        if seed is not None:
            self.config = BoardConfig(
                self.config.size, self.config.num_mines, seed
            )
            self.board = Board(self.config)
        else:
            self.board.reset()
        self.game = Game(self.board)
        self._steps = 0

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[Dict[str, np.ndarray], SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Apply one input event.

        Args:
            action: Index into ``ACTIONS``.

        Returns:
            observation, reward, terminated, truncated, info
        """
        self._steps += 1
        event = self._action_to_event(action)
        reward = self._calculate_reward(event)

        terminated = not self.game.running
        truncated = False

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _action_to_event(self, action: int) -> InputEvent:
        """Convert an action index to its input event."""
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")
        return ACTIONS[int(action)]

    def _calculate_reward(self, event: InputEvent) -> float:
        """
        Apply the event and score its effect.

        Args:
            event: Input event to apply.

        Returns:
            Reward value.
        """
        revealed_before = self.board.revealed_count
        self.game.handle(event)

        if event is InputEvent.QUIT:
            return 0.0
        if self.board.is_lost:
            return LOSS_REWARD
        if not self.game.last_action_changed:
            return NOOP_PENALTY

        reward = float(self.board.revealed_count - revealed_before)
        if self.board.is_won:
            reward += WIN_REWARD
        return reward

    def _get_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": self.board.get_observation(),
            "cursor": np.array(self.board.cursor, dtype=np.int64),
        }

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_count,
            "total_safe": self.board.safe_cell_count,
            "game_state": self.board.game_state.name,
            "cursor": self.board.cursor,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.game.snapshot())
        if self.render_mode == "human":
            print(render_text(self.game.snapshot()))
        return None
