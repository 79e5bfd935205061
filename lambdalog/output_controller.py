"""Output controller for wrapping curses operations to enable testing"""

import curses
from abc import ABC, abstractmethod

from lambdalog.helpers.curses_utils import Color, Position, Size, TextAttribute, Viewport

HLINE_CHAR = "─"


class Window(ABC):
    """A rectangle of the terminal that views draw into

    Positions are relative to the window. Text falling outside of it is
    clipped instead of raising.
    """

    @abstractmethod
    def derwin(self, viewport: Viewport) -> "Window":
        """Create a sub-window sharing this window's cells"""

    @abstractmethod
    def resize(self, size: Size) -> None:
        """Change the size of the window"""

    @abstractmethod
    def mvderwin(self, position: Position) -> None:
        """Move a sub-window inside its parent"""

    @abstractmethod
    def getmaxyx(self) -> Size:
        """Get the window size"""

    @abstractmethod
    def clear(self) -> None:
        """Blank the window"""

    @abstractmethod
    def refresh(self) -> None:
        """Push the window to the terminal"""

    @abstractmethod
    def addstr(
        self,
        position: Position,
        text: str,
        *,
        color: Color | None = None,
        attributes: list[TextAttribute] | None = None,
    ) -> None:
        """Write text at a position, clipped to the window"""

    @abstractmethod
    def move(self, position: Position) -> None:
        """Put the terminal cursor at a position"""

    def hline(self, position: Position, length: int, color: Color | None = None) -> None:
        """Draw a horizontal rule of the given length"""
        self.addstr(position, HLINE_CHAR * max(0, length), color=color)


class OutputController(ABC):
    """Access to the terminal as a whole"""

    @abstractmethod
    def create_main_window(self) -> Window:
        """Get the window covering the whole terminal"""

    @abstractmethod
    def curs_set(self, visibility: int) -> None:
        """Show (1) or hide (0) the terminal cursor"""

    @abstractmethod
    def update_lines_cols(self) -> None:
        """Pick up the terminal size after a resize"""

    @abstractmethod
    def get_terminal_size(self) -> Size:
        """Get the terminal size"""


def _init_color_pairs() -> dict[Color, int]:
    curses.start_color()
    curses.use_default_colors()
    pairs = {}
    for pair_num, color in enumerate(Color, start=1):
        curses.init_pair(pair_num, color.value, -1)
        pairs[color] = curses.color_pair(pair_num)
    return pairs


class CursesWindow(Window):
    """Window backed by a curses window"""

    def __init__(self, curses_window: curses.window, color_pairs: dict[Color, int]) -> None:
        self._window = curses_window
        self._color_pairs = color_pairs

    def derwin(self, viewport: Viewport) -> Window:
        sub_window = self._window.derwin(
            viewport.height, viewport.width, viewport.y, viewport.x
        )
        return CursesWindow(sub_window, self._color_pairs)

    def resize(self, size: Size) -> None:
        self._window.resize(size.height, size.width)

    def mvderwin(self, position: Position) -> None:
        self._window.mvderwin(position.y, position.x)

    def getmaxyx(self) -> Size:
        return Size(*self._window.getmaxyx())

    def clear(self) -> None:
        # erase() avoids the full repaint clear() forces on the next refresh
        self._window.erase()

    def refresh(self) -> None:
        self._window.refresh()

    def addstr(
        self,
        position: Position,
        text: str,
        *,
        color: Color | None = None,
        attributes: list[TextAttribute] | None = None,
    ) -> None:
        height, width = self._window.getmaxyx()
        if not (0 <= position.y < height and 0 <= position.x < width):
            return

        attr = self._color_pairs.get(color, 0) if color is not None else 0
        for text_attr in attributes or []:
            attr |= text_attr.value
        try:
            self._window.addstr(position.y, position.x, text[: width - position.x], attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the window
            pass

    def move(self, position: Position) -> None:
        self._window.move(position.y, position.x)


class CursesOutputController(OutputController):
    """Output controller driving the real terminal"""

    def __init__(self, stdscr: curses.window) -> None:
        self._stdscr = stdscr
        self._color_pairs = _init_color_pairs()

    def create_main_window(self) -> Window:
        return CursesWindow(self._stdscr, self._color_pairs)

    def curs_set(self, visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error:
            # Some terminals cannot hide or show the cursor
            pass

    def update_lines_cols(self) -> None:
        curses.update_lines_cols()

    def get_terminal_size(self) -> Size:
        return Size(curses.LINES, curses.COLS)  # pylint: disable=no-member
