import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from rich.markup import escape

from library_menu.book import Book
from library_menu.config import settings
from library_menu.utils.ui_helpers import Terminal

logger = logging.getLogger(__name__)

EXIT_LABEL = "Exit"


class MenuSignal(Enum):
    """What the menu loop does after an action has run."""

    CONTINUE = "continue"
    STOP = "stop"


ActionCallback = Callable[["Library"], Optional[MenuSignal]]


@dataclass(frozen=True)
class Action:
    """A menu entry: a label and the callback run when it is chosen."""

    label: str
    callback: ActionCallback

    def execute(self, library: "Library") -> MenuSignal:
        result = self.callback(library)
        return MenuSignal.CONTINUE if result is None else result


def _exit_callback(library: "Library") -> MenuSignal:
    library.terminal.clear()
    library.terminal.print(escape(settings.farewell_message))
    logger.info("Exit selected, leaving the menu")
    return MenuSignal.STOP


class Library:
    """Manages the collection of books and the actions offered by the menu.

    Books live in memory for the lifetime of the process. Titles are not
    unique; lookups return the first match in insertion order.
    """

    def __init__(self, terminal: Optional[Terminal] = None) -> None:
        self.terminal = terminal or Terminal()
        self.books: List[Book] = []
        self._actions: List[Action] = []
        # Not stored in the registry; always rendered last
        self._exit_action = Action(EXIT_LABEL, _exit_callback)

    # ------------------------- Actions ------------------------- #
    def add_action(self, label: str, callback: ActionCallback) -> None:
        """Register a menu action. Order of registration is menu order."""
        self._actions.append(Action(label, callback))
        logger.debug("Registered action %d: %s", len(self._actions), label)

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        self.books.append(book)
        logger.info("Added book: %s", book)

    def list_books(self) -> List[Book]:
        return list(self.books)

    def find_book(self, title: str) -> Optional[Book]:
        """Return the first book whose title equals ``title`` exactly (case-sensitive)."""
        for book in self.books:
            if book.title == title:
                logger.debug("Search hit for %r", title)
                return book
        logger.debug("Search miss for %r", title)
        return None

    # ------------------------- Menu loop ------------------------- #
    def run(self) -> None:
        """Show the menu and handle choices until the user picks Exit."""
        while True:
            self.terminal.clear()
            self.render_menu()
            choice = self.read_choice()
            if self.dispatch(choice) is MenuSignal.STOP:
                break

    def render_menu(self) -> None:
        t = self.terminal
        t.print(escape(settings.welcome_message))
        t.print()
        t.print("Please choose an action:")
        for index, action in enumerate(self._actions, 1):
            t.print(f"{index}. {escape(action.label)}")
        t.print(f"{len(self._actions) + 1}. {self._exit_action.label}")
        t.print()

    def read_choice(self) -> int:
        return self.terminal.ask_choice(len(self._actions) + 1, redraw=self.render_menu)

    def dispatch(self, choice: int) -> MenuSignal:
        """Run the action numbered ``choice`` (1-based; the last number is Exit)."""
        exit_choice = len(self._actions) + 1
        if not 1 <= choice <= exit_choice:
            raise ValueError(f"Menu choice {choice} is out of range 1-{exit_choice}.")
        if choice == exit_choice:
            return self._exit_action.execute(self)

        action = self._actions[choice - 1]
        logger.debug("Dispatching choice %d: %s", choice, action.label)
        self.terminal.clear()
        return action.execute(self)
