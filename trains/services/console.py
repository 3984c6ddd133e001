"""Line-oriented console used by the interactive commands."""

import time
from typing import Callable

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


class Console:
    """Blocking prompt/response pair around `input` and `print`."""

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        pause_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._read_line = read_line
        self._write = write
        self._pause_seconds = pause_seconds
        self._sleep = sleep

    def show(self, text: str) -> None:
        self._write(text)

    def prompt(self, message: str, pause: bool = False) -> str:
        """Ask for one line of input, optionally after a short pause."""
        if pause and self._pause_seconds > 0:
            self._sleep(self._pause_seconds)
        return self._read_line(message).strip()

    def confirm(self, question: str, default: bool = False) -> bool:
        """Ask a yes/no question until the answer is understood."""
        suffix = " [Y/n] " if default else " [y/N] "
        while True:
            answer = self.prompt(question + suffix).lower()
            if not answer:
                return default
            if answer in YES_ANSWERS:
                return True
            if answer in NO_ANSWERS:
                return False
            self.show("Please answer 'y' or 'n'.")
