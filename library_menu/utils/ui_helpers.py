from typing import Callable, Iterable, Optional, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from library_menu.config import settings
from library_menu.prompts import MenuChoicePrompt, ValidatedPrompt, read_line

TITLE_WIDTH = 20
AUTHOR_WIDTH = 20
YEAR_WIDTH = 10

# One leading space per cell plus four vertical borders
TABLE_WIDTH = (TITLE_WIDTH + 1) + (AUTHOR_WIDTH + 1) + (YEAR_WIDTH + 1) + 4

NO_BOOKS_MESSAGE = "No books to display"
PAUSE_MESSAGE = "Press enter to continue..."


def book_table(books: Iterable) -> Table:
    """Fixed-width Title / Author / Year table.

    Values longer than their column fold onto extra lines inside the cell.
    """
    table = Table(box=box.SQUARE, padding=(0, 0, 0, 1), header_style="bold cyan")
    table.add_column("Title", width=TITLE_WIDTH, overflow="fold")
    table.add_column("Author", width=AUTHOR_WIDTH, overflow="fold")
    table.add_column("Year", width=YEAR_WIDTH, overflow="fold")
    for book in books:
        table.add_row(escape(book.title), escape(book.author), escape(book.year))
    return table


def no_books_panel() -> Panel:
    return Panel(Text(NO_BOOKS_MESSAGE, justify="center"), box=box.SQUARE, width=TABLE_WIDTH)


class Terminal:
    """Console output, screen clearing and validated input in one place.

    ``stream`` replaces standard input when given (used by tests). Screen
    clearing goes through rich, which skips it when output is not a terminal.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        clear_screen: Optional[bool] = None,
    ) -> None:
        self.console = console or Console()
        self.stream = stream
        self.clear_screen = settings.clear_screen if clear_screen is None else clear_screen

    def clear(self) -> None:
        if self.clear_screen:
            self.console.clear()

    def print(self, *objects, **kwargs) -> None:
        self.console.print(*objects, **kwargs)

    def pause(self) -> None:
        """Wait for the user to press enter."""
        self.console.print(PAUSE_MESSAGE)
        read_line(self.console, stream=self.stream)

    def ask(self, prompt: str, validator: Callable[[str], bool]) -> str:
        """Read a line ``validator`` accepts, clearing the screen after each bad answer."""
        reader = ValidatedPrompt(prompt, validator=validator, console=self.console, on_invalid=self.clear)
        return reader(stream=self.stream)

    def ask_choice(self, upper: int, redraw: Callable[[], None]) -> int:
        """Read a menu number in ``[1, upper]``; ``redraw`` repaints the menu after a bad answer."""

        def _on_invalid() -> None:
            self.clear()
            redraw()

        reader = MenuChoicePrompt("Enter your choice", upper=upper, console=self.console, on_invalid=_on_invalid)
        return reader(stream=self.stream)
