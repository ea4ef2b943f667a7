"""Interactive confirmation prompt."""

from typing import Callable, Optional

from rich.console import Console

from gwt.constants import CONFIRM_ANSWERS

console = Console()


class Confirmer:
    """Asks a yes/no question through an injectable input source.

    ``input_func`` receives the prompt text and returns the user's answer.
    It defaults to the rich console's ``input``.
    """

    def __init__(self, input_func: Optional[Callable[[str], str]] = None):
        self.input_func = input_func or console.input

    def confirm(self, prompt: str) -> bool:
        """Return True only for an explicit y/yes (any case); EOF counts as no."""
        try:
            response = self.input_func(prompt)
        except EOFError:
            return False
        return response.strip().lower() in CONFIRM_ANSWERS
