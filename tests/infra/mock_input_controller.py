"""Scripted key source for driving the app in tests"""

from lambdalog.helpers.curses_utils import CTRL_C
from lambdalog.input_controller import InputController


class MockInputController(InputController):
    """Replays keys, then presses Ctrl-C so the input loop ends"""

    def __init__(self, keys: list[int] | None = None) -> None:
        self.input_keys: list[int] = list(keys or [])
        self.input_index: int = 0

    def add_keys(self, keys: str | list[int]) -> None:
        """Queue more keys, given as text or key codes"""
        if isinstance(keys, str):
            keys = [ord(char) for char in keys]
        self.input_keys.extend(keys)

    def get_input(self) -> int:
        if self.input_index < len(self.input_keys):
            key = self.input_keys[self.input_index]
            self.input_index += 1
            return key
        return CTRL_C
