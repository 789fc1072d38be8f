"""Stock menu actions: add, search and display books."""
import logging
from typing import Optional

from library_menu.book import Book
from library_menu.library import Library
from library_menu.utils.ui_helpers import Terminal, book_table, no_books_panel
from library_menu.utils.validators import TextValidator

logger = logging.getLogger(__name__)


def add_book_action(library: Library) -> None:
    book = Book.from_input(library.terminal)
    library.add_book(book)


def search_book_action(library: Library) -> None:
    terminal = library.terminal
    terminal.clear()

    title = terminal.ask("Enter book title", TextValidator.validate_title)
    book = library.find_book(title)

    terminal.clear()
    if book is not None:
        terminal.print("Book found.")
        terminal.print()
        terminal.print(book_table([book]))
    else:
        terminal.print("Book not found.")
    terminal.pause()


def display_books_action(library: Library) -> None:
    terminal = library.terminal
    books = library.list_books()
    logger.debug("Displaying %d books", len(books))
    if books:
        terminal.print(book_table(books))
    else:
        terminal.print(no_books_panel())
    terminal.pause()


DEFAULT_ACTIONS = (
    ("Add a book", add_book_action),
    ("Search book", search_book_action),
    ("Display books", display_books_action),
)


def register_default_actions(library: Library) -> None:
    for label, callback in DEFAULT_ACTIONS:
        library.add_action(label, callback)


def build_library(terminal: Optional[Terminal] = None) -> Library:
    """Create a Library with the stock actions registered."""
    library = Library(terminal)
    register_default_actions(library)
    return library
