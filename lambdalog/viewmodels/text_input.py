"""Single line text entry used by the filter prompts"""

import curses

from lambdalog.helpers.curses_utils import BACKSPACE_KEYS, is_printable


class TextInput:
    """Editable text buffer with a cursor"""

    def __init__(self, text: str = "") -> None:
        self.active: bool = False
        self.buffer: str = text
        self.cursor_pos: int = len(text)

    def start(self) -> None:
        """Start editing, with the cursor at the end of the text"""
        self.active = True
        self.cursor_pos = len(self.buffer)

    def stop(self) -> None:
        """Stop editing, keeping the text"""
        self.active = False

    def clear(self) -> None:
        """Remove all text"""
        self.buffer = ""
        self.cursor_pos = 0

    def handle_key(self, key: int) -> bool:
        """Apply an editing key. Returns True if the text changed."""
        old_buffer = self.buffer
        if key in BACKSPACE_KEYS:
            if self.cursor_pos > 0:
                self.buffer = (
                    self.buffer[: self.cursor_pos - 1] + self.buffer[self.cursor_pos :]
                )
                self.cursor_pos -= 1
        elif key == curses.KEY_DC:
            self.buffer = self.buffer[: self.cursor_pos] + self.buffer[self.cursor_pos + 1 :]
        elif key == curses.KEY_LEFT:
            self.cursor_pos = max(0, self.cursor_pos - 1)
        elif key == curses.KEY_RIGHT:
            self.cursor_pos = min(len(self.buffer), self.cursor_pos + 1)
        elif key == curses.KEY_HOME:
            self.cursor_pos = 0
        elif key == curses.KEY_END:
            self.cursor_pos = len(self.buffer)
        elif is_printable(key):
            self.buffer = (
                self.buffer[: self.cursor_pos] + chr(key) + self.buffer[self.cursor_pos :]
            )
            self.cursor_pos += 1
        return self.buffer != old_buffer
