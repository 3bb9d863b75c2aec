"""Shared test helpers."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

from dockit.cli.prompts import Prompter, Validator
from dockit.exceptions import OperationCancelled


class ScriptedPrompter(Prompter):
    """Answers prompts from a script. ``None`` accepts the default."""

    def __init__(self, answers: Iterable[Optional[str | bool]]) -> None:
        super().__init__()
        self.answers = deque(answers)
        self.asked: list[str] = []
        self.errors: list[str] = []

    def _next(self, message: str):
        self.asked.append(message)
        if not self.answers:
            raise OperationCancelled("Script exhausted")
        return self.answers.popleft()

    def text(self, message: str, default: Optional[str] = None, validate: Optional[Validator] = None) -> str:
        while True:
            answer = self._next(message)
            value = default if answer is None else str(answer).strip()
            value = value or ""
            error = validate(value) if validate else None
            if error is None:
                return value
            self.errors.append(error)

    def confirm(self, message: str, default: bool = True) -> bool:
        answer = self._next(message)
        return default if answer is None else bool(answer)
