"""Interactive prompts with local re-prompting on invalid input."""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from dockit.exceptions import OperationCancelled
from dockit.naming import is_valid_date, slugify

# Returns an error message for invalid input, None when the value is accepted.
Validator = Callable[[str], Optional[str]]


def required(label: str) -> Validator:
    def _check(value: str) -> Optional[str]:
        return None if value.strip() else f"{label} is required"

    return _check


def required_slug(label: str) -> Validator:
    def _check(value: str) -> Optional[str]:
        if not value.strip():
            return f"{label} is required"
        if not slugify(value):
            return f"{label} must contain letters or digits"
        return None

    return _check


def valid_date(value: str) -> Optional[str]:
    return None if is_valid_date(value) else "Invalid date format (YYYY-MM-DD)"


class Prompter:
    """Asks questions on the console.

    EOF or Ctrl-C while waiting for an answer raises OperationCancelled.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def text(self, message: str, default: Optional[str] = None, validate: Optional[Validator] = None) -> str:
        while True:
            try:
                if default is None:
                    answer = Prompt.ask(message, console=self.console)
                else:
                    answer = Prompt.ask(message, console=self.console, default=default)
            except (EOFError, KeyboardInterrupt) as exc:
                raise OperationCancelled("Prompt aborted") from exc
            answer = answer.strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(f"[red]{escape(error)}[/red]")

    def confirm(self, message: str, default: bool = True) -> bool:
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except (EOFError, KeyboardInterrupt) as exc:
            raise OperationCancelled("Prompt aborted") from exc
