from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from library_menu.utils.validators import TextValidator

if TYPE_CHECKING:
    from library_menu.utils.ui_helpers import Terminal


@dataclass(frozen=True)
class Book:
    """A single book in the library. Fields are validated before construction."""

    title: str
    author: str
    year: str

    def __str__(self) -> str:
        return f"{self.title} by {self.author} ({self.year})"

    @staticmethod
    def from_input(terminal: Terminal) -> "Book":
        """Collect title, author and year from the user."""
        terminal.print("Enter book details:")
        terminal.print()
        title = terminal.ask("Enter title", TextValidator.validate_title)
        author = terminal.ask("Enter author", TextValidator.validate_author)
        year = terminal.ask("Enter year", TextValidator.validate_year)
        return Book(title=title, author=author, year=year)
