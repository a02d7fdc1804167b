from __future__ import annotations

from typing import Callable

_YES = {"y", "yes"}


class ConsoleConfirmation:
    """Simple stdin/stdout implementation of ConfirmationPort."""

    def __init__(self, input_func: Callable[[str], str] = input) -> None:
        self._input = input_func

    def confirm(self, prompt: str) -> bool:
        try:
            answer = self._input(f"{prompt} [y/N]\n> ")
        except EOFError:
            return False
        return answer.strip().lower() in _YES
