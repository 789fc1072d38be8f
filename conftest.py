import io

import pytest
from rich.console import Console

from library_menu.actions import build_library
from library_menu.utils.ui_helpers import Terminal


def _terminal(text: str = "") -> Terminal:
    # A StringIO console is not a terminal, so clearing is skipped
    return Terminal(console=Console(file=io.StringIO(), width=100), stream=io.StringIO(text), clear_screen=True)


@pytest.fixture
def make_terminal():
    return _terminal


@pytest.fixture
def read_output():
    def _read(terminal: Terminal) -> str:
        return terminal.console.file.getvalue()
    return _read


@pytest.fixture
def lib():
    # Library with the stock actions and no scripted input
    return build_library(_terminal())
