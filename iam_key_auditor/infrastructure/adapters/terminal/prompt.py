"""Terminal confirmation prompt."""

from __future__ import annotations

import signal
import threading
from collections.abc import Callable

_YES = frozenset({"y", "yes"})


class TerminalConfirmationPrompt:
    """
    Asks a yes/no question on the controlling terminal.

    The question blocks the event loop on purpose: nothing else runs while
    the gate is open. Ctrl-C at the prompt declines.
    """

    def __init__(self, read_line: Callable[[str], str] = input) -> None:
        """Initialize the prompt with a line reader (defaults to input)."""
        self._read_line = read_line

    async def confirm(self, message: str) -> bool:
        """Ask the question; anything but an explicit yes declines."""
        try:
            answer = self._ask(f"{message} (y/N) ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in _YES

    def _ask(self, question: str) -> str:
        # asyncio.run turns the first SIGINT into task cancellation; the read
        # needs the default handler to be interrupted.
        if threading.current_thread() is not threading.main_thread():
            return self._read_line(question)

        previous = signal.signal(signal.SIGINT, signal.default_int_handler)
        try:
            return self._read_line(question)
        finally:
            signal.signal(signal.SIGINT, previous)
