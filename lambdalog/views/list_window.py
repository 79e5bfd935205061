"""Draws a filter bar above a scrolling, selectable list"""

import curses
from typing import Callable, Generic, TypeVar

from lambdalog.helpers.curses_utils import Color, Position, TextAttribute
from lambdalog.helpers.keyword_filter import find_matches
from lambdalog.output_controller import Window
from lambdalog.viewmodels.filtered_list import FilteredListViewModel

T = TypeVar("T")

FILTER_PROMPT = "Filter: "


class ListWindow(Generic[T]):
    """Handles the list display with its filter bar, scrolling and navigation"""

    _HEADER_HEIGHT = 2

    def __init__(
        self,
        viewmodel: FilteredListViewModel[T],
        window: Window,
        render_item: Callable[[T], tuple[str, str]],
        empty_text: str,
    ) -> None:
        """render_item splits an item into a dim prefix and its filterable text"""
        self._viewmodel = viewmodel
        self._window = window
        self._render_item = render_item
        self._empty_text = empty_text

    @property
    def data_height(self) -> int:
        """Get the number of rows available for items"""
        return max(0, self._window.getmaxyx().height - self._HEADER_HEIGHT)

    @property
    def cursor_position(self) -> Position | None:
        """Get where the cursor goes while the filter prompt is open"""
        if not self._viewmodel.filter_active:
            return None
        return Position(0, 1 + len(FILTER_PROMPT) + self._viewmodel.filter_input.cursor_pos)

    def handle_input(self, key: int) -> bool:
        """Handle filter and navigation keys, return True if handled"""
        selection = self._viewmodel.selection
        if self._viewmodel.filter_active:
            self._viewmodel.handle_filter_key(key)
        elif key == ord("/"):
            self._viewmodel.handle_filter_command()
        elif key == curses.KEY_UP:
            selection.previous()
        elif key == curses.KEY_DOWN:
            selection.next()
        elif key == curses.KEY_PPAGE:
            selection.page_up(self.data_height)
        elif key == curses.KEY_NPAGE:
            selection.page_down(self.data_height)
        elif key == curses.KEY_HOME:
            selection.first()
        elif key == curses.KEY_END:
            selection.last()
        else:
            return False
        return True

    def draw(self) -> None:
        """Draw the filter bar and the visible items"""
        self._window.clear()
        self._draw_filter_bar()

        if not self._viewmodel.selection.view:
            text = self._empty_text
            if self._viewmodel.selection.items:
                text = "No items match the filter"
            self._window.addstr(
                Position(self._HEADER_HEIGHT, 1), text, color=Color.WARNING
            )

        rows = self._viewmodel.visible_items(self.data_height)
        for row, (index, item) in enumerate(rows, start=self._HEADER_HEIGHT):
            self._draw_item(row, item, index == self._viewmodel.selection.selected)

        self._window.refresh()

    def _draw_filter_bar(self) -> None:
        width = self._window.getmaxyx().width
        text = self._viewmodel.filter_input.buffer
        color = Color.DEFAULT if self._viewmodel.filter_active else Color.HEADER
        self._window.addstr(Position(0, 1), FILTER_PROMPT, color=Color.HEADER)
        self._window.addstr(Position(0, 1 + len(FILTER_PROMPT)), text, color=color)
        self._window.hline(Position(1, 1), width - 2, color=Color.HEADER)

    def _draw_item(self, row: int, item: T, is_selected: bool) -> None:
        width = self._window.getmaxyx().width
        prefix, text = self._render_item(item)
        marker = "► " if is_selected else "  "
        base_color = Color.SELECTED if is_selected else Color.DEFAULT

        x_pos = 1
        self._window.addstr(Position(row, x_pos), marker, color=base_color)
        x_pos += len(marker)
        if prefix:
            self._window.addstr(
                Position(row, x_pos),
                prefix,
                color=base_color if is_selected else Color.DEBUG,
            )
            x_pos += len(prefix) + 1

        visible_text = text[: max(0, width - x_pos - 1)]
        last_end = 0
        for start, end in find_matches(self._viewmodel.filter_text, visible_text):
            self._window.addstr(
                Position(row, x_pos + last_end),
                visible_text[last_end:start],
                color=base_color,
            )
            self._window.addstr(
                Position(row, x_pos + start),
                visible_text[start:end],
                color=Color.WARNING,
                attributes=[TextAttribute.BOLD],
            )
            last_end = end
        self._window.addstr(
            Position(row, x_pos + last_end), visible_text[last_end:], color=base_color
        )
