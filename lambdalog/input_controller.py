"""Input controller for wrapping curses key reads to enable testing"""

import curses
from abc import ABC, abstractmethod

INPUT_TIMEOUT_MS = 100


class InputController(ABC):
    """Abstract source of key presses"""

    @abstractmethod
    def get_input(self) -> int:
        """Get the next key code, or -1 if none arrived before the timeout"""


class CursesInputController(InputController):
    """Reads keys from a curses window with a short timeout"""

    def __init__(self, stdscr: curses.window, timeout_ms: int = INPUT_TIMEOUT_MS) -> None:
        self._stdscr = stdscr
        self._stdscr.keypad(True)
        self._stdscr.timeout(timeout_ms)

    def get_input(self) -> int:
        """Get the next key code, or -1 if none arrived before the timeout"""
        return self._stdscr.getch()
