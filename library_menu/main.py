import logging
from typing import Optional

import typer
from rich.console import Console

from library_menu.actions import build_library
from library_menu.config import settings
from library_menu.utils.ui_helpers import Terminal

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"

app = typer.Typer(help=f"{settings.app_name} CLI", add_completion=False)


def resolve_log_level(level: str) -> int:
    """Map a level name such as ``"info"`` to its number; unknown names give WARNING."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    logging.basicConfig(
        level=resolve_log_level(level),
        filename=log_file,
        format=LOG_FORMAT,
    )


@app.command()
def run(
    no_clear: bool = typer.Option(False, "--no-clear", help="Do not clear the screen between menus"),
):
    """Start the interactive library menu."""
    configure_logging(settings.log_level, settings.log_file)
    terminal = Terminal(console=Console(), clear_screen=settings.clear_screen and not no_clear)
    library = build_library(terminal)
    try:
        library.run()
    except (EOFError, KeyboardInterrupt):
        # Input closed or interrupted at a prompt
        logger.info("Input closed, leaving the menu")
        terminal.print()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
