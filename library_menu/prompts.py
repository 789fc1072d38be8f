"""Validated input prompts.

Both prompts re-ask until the answer is acceptable. There is no attempt
limit; only end of input gets out of the loop, as ``EOFError``.
"""
import logging
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.prompt import IntPrompt, InvalidResponse, Prompt
from rich.text import TextType

from library_menu.utils.validators import ChoiceValidator

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Invalid input. Please try again."


def read_line(
    console: Console,
    prompt: TextType = "",
    *,
    password: bool = False,
    stream: Optional[TextIO] = None,
) -> str:
    """Read one line without its terminator; ``EOFError`` at end of input."""
    line = console.input(prompt, password=password, stream=stream)
    if stream is not None and not line:
        # readline() only returns "" at end of stream
        raise EOFError
    return line.rstrip("\r\n")


class _RetryingPromptMixin:
    """Shared line reading and rejection handling for the menu prompts."""

    on_invalid: Optional[Callable[[], None]] = None

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: Optional[TextIO] = None,
    ) -> str:
        return read_line(console, prompt, password=password, stream=stream)

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        logger.debug("Rejected input %r", value)
        if self.on_invalid is not None:
            self.on_invalid()
        self.console.print(error)


class ValidatedPrompt(_RetryingPromptMixin, Prompt):
    """Ask for a line of text that ``validator`` accepts.

    The answer is returned exactly as typed; it is not stripped.
    """

    validate_error_message = INVALID_INPUT_MESSAGE

    def __init__(
        self,
        prompt: TextType = "",
        *,
        validator: Callable[[str], bool],
        console: Optional[Console] = None,
        on_invalid: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.validator = validator
        self.on_invalid = on_invalid

    def process_response(self, value: str) -> str:
        if not self.validator(value):
            raise InvalidResponse(self.validate_error_message)
        return value


class MenuChoicePrompt(_RetryingPromptMixin, IntPrompt):
    """Ask for a menu number between 1 and ``upper`` inclusive."""

    validate_error_message = INVALID_INPUT_MESSAGE

    def __init__(
        self,
        prompt: TextType = "",
        *,
        upper: int,
        console: Optional[Console] = None,
        on_invalid: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(prompt, console=console)
        self.upper = upper
        self.on_invalid = on_invalid

    def process_response(self, value: str) -> int:
        choice = ChoiceValidator.parse(value)
        if choice is None or not ChoiceValidator.in_range(choice, self.upper):
            raise InvalidResponse(self.validate_error_message)
        return choice
