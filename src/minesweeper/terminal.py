"""
Terminal front end: raw keyboard input and a rich live view.

Nothing here knows the rules of the game; keys are translated into
input events for the controller and snapshots are drawn as they come.
"""
import logging
import sys
import termios
import tty
from typing import Dict, Optional, TextIO

from rich.align import Align
from rich.console import Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from .events import Game, InputEvent
from .render import RenderSnapshot

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"

KEY_BINDINGS: Dict[str, InputEvent] = {
    "\x1b[A": InputEvent.MOVE_UP,
    "\x1b[B": InputEvent.MOVE_DOWN,
    "\x1b[C": InputEvent.MOVE_RIGHT,
    "\x1b[D": InputEvent.MOVE_LEFT,
    " ": InputEvent.REVEAL,
    "f": InputEvent.FLAG,
    "q": InputEvent.QUIT,
}

# Color text based on value
NUMBER_STYLES = [
    "default",  # 0
    "blue",  # 1
    "green",  # 2
    "red",  # 3
    "cyan",  # 4
    "yellow3",  # 5
    "magenta",  # 6
    "purple",  # 7
    "red",  # 8
]

CURSOR_STYLE = "on blue"


def translate_key(key: str) -> Optional[InputEvent]:
    """Map a keypress to an input event, or None for unbound keys."""
    return KEY_BINDINGS.get(key)


class KeyReader:
    """Reads single keypresses from a terminal in raw mode."""

    def __init__(self, stream: TextIO = sys.stdin) -> None:
        self.stream = stream
        self._pending = ""

    def getch(self) -> str:
        fd = self.stream.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return self.stream.read(1)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    def read_key(self) -> str:
        """
        Read one key, including the rest of an arrow-key escape sequence.

        Returns:
            The key as a string; arrow keys come back as ``"\\x1b[A"`` etc.
        """
        if self._pending:
            key, self._pending = self._pending, ""
        else:
            key = self.getch()
        if key != ESCAPE:
            return key

        follow = self.getch()
        if follow != "[":
            # lone Esc; the next key is read on its own
            self._pending = follow
            return key
        return key + follow + self.getch()

    def read_event(self) -> Optional[InputEvent]:
        """Read one key and translate it into an input event."""
        return translate_key(self.read_key())


def _cell_text(symbol: str, highlighted: bool) -> Text:
    if symbol.isdigit():
        style = NUMBER_STYLES[int(symbol)]
    elif symbol == "F":
        style = "red3"
    else:
        style = "default"
    if highlighted:
        style = f"{style} {CURSOR_STYLE}"
    return Text(symbol, style=style)


def build_board_text(snapshot: RenderSnapshot) -> Text:
    """Draw the snapshot's cells as styled text, one line per row."""
    text = Text()
    for row, symbols in enumerate(snapshot.rows):
        if row:
            text.append("\n")
        for col, symbol in enumerate(symbols):
            text.append_text(_cell_text(symbol, (row, col) == snapshot.cursor))
    return text


def build_panel(snapshot: RenderSnapshot) -> Align:
    """Wrap the board in a titled panel followed by the status line."""
    if snapshot.won:
        style = "green"
    elif snapshot.lost:
        style = "red"
    else:
        style = "default"
    return Align.center(
        Panel(
            Group(
                build_board_text(snapshot),
                Text(""),
                Text(snapshot.status_message, style=style),
            ),
            title=f"Minesweeper {snapshot.size}x{snapshot.size}",
            expand=False,
        )
    )


class TerminalView:
    """Full-screen live view that redraws a snapshot on demand."""

    def __init__(self) -> None:
        self._live: Optional[Live] = None

    def __enter__(self) -> "TerminalView":
        self._live = Live(auto_refresh=False, screen=True)
        self._live.__enter__()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._live is not None:
            self._live.__exit__(*exc_info)
            self._live = None

    def draw(self, snapshot: RenderSnapshot) -> None:
        if self._live is None:
            raise RuntimeError("TerminalView must be used as a context manager")
        self._live.update(build_panel(snapshot), refresh=True)


def play(game: Game, reader: KeyReader, view: TerminalView) -> RenderSnapshot:
    """
    Run the input loop until the player quits or the game ends.

    Args:
        game: Controller owning the board.
        reader: Source of keypresses.
        view: Open terminal view.

    Returns:
        The final snapshot.
    """
    snapshot = game.snapshot()
    view.draw(snapshot)
    while game.running:
        event = reader.read_event()
        if event is None:
            continue
        snapshot = game.handle(event)
        view.draw(snapshot)

    if snapshot.game_over:
        # wait for key before leaving the final screen
        reader.read_key()
    return snapshot
