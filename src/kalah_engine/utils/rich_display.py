"""
Rich-based board display for the command-line tool.

Provides:
- Boxed board panels colored by whose turn it is
- Short status messages for results, warnings and rejected moves
- Logging routed through the same console
"""

import logging
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..core import GameMode, GameState, render, get_game_result

console = Console()

MODE_STYLES = {
    GameMode.WHITE_TO_MOVE: "bold white",
    GameMode.BLACK_TO_MOVE: "bold cyan",
    GameMode.GAME_OVER: "bold red",
}


class BoardDisplay:
    """
    Rich-based display for game positions.

    Shows:
    - The rendered board inside a panel
    - Game result once the game is over
    """

    def __init__(self, target: Optional[Console] = None):
        """
        Initialize board display.

        Args:
            target: Console to print to (defaults to the shared console)
        """
        self.console = target or console

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        """Log warning message."""
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def board_panel(self, state: GameState, title: Optional[str] = None) -> Panel:
        """Create a panel holding the rendered board."""
        style = MODE_STYLES[state.mode]
        board = Text(render(state).rstrip("\n"), style=style)
        return Panel(board, title=title, expand=False, border_style=style)

    def show(self, state: GameState, title: Optional[str] = None):
        """Print a position, plus the result if the game has ended."""
        self.console.print(self.board_panel(state, title=title))

        result = get_game_result(state)
        if result is not None:
            self.log_success(result)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
