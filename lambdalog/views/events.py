"""Event log view - the event list, or the details of one event"""

import curses

from lambdalog.helpers.curses_utils import ENTER_KEYS, ESC, Color, Position
from lambdalog.models.log_event import LogEvent
from lambdalog.output_controller import Window
from lambdalog.viewmodels.events import EventLogViewModel
from lambdalog.views.list_window import ListWindow


class EventLogMode:
    """Handles event log input and drawing logic"""

    _CONTENT_START_LINE = 2

    def __init__(self, viewmodel: EventLogViewModel, window: Window) -> None:
        self.viewmodel = viewmodel
        self._window = window
        self._list = ListWindow(viewmodel, window, self._render_event, "No log events")

    @staticmethod
    def _render_event(event: LogEvent) -> tuple[str, str]:
        return event.format_time(), event.summary

    @property
    def help_text(self) -> str:
        """Get the key hints of the list or the details"""
        if self.viewmodel.expanded:
            return "↑/↓: Scroll | PgUp/PgDn: Page | Enter/Esc: Close details | q: Quit"
        return "↑/↓: Move | /: Filter | Enter: Details | Esc: Back | q: Quit"

    @property
    def cursor_position(self) -> Position | None:
        """Get where the cursor goes while text is being entered"""
        if self.viewmodel.expanded:
            return None
        return self._list.cursor_position

    @property
    def text_entry_active(self) -> bool:
        """Check if keys are going to the filter prompt"""
        return self.viewmodel.filter_active

    @property
    def _detail_size(self) -> tuple[int, int]:
        height, width = self._window.getmaxyx()
        return max(1, height - self._CONTENT_START_LINE), max(1, width - 2)

    def handle_input(self, key: int) -> bool:
        """Handle input for the event log. Returns True if key was handled."""
        if self.viewmodel.expanded:
            return self._handle_details_input(key)
        if not self.viewmodel.filter_active and key in ENTER_KEYS:
            self.viewmodel.toggle_expand()
            return True
        return self._list.handle_input(key)

    def _handle_details_input(self, key: int) -> bool:
        visible_height, width = self._detail_size
        total_lines = len(self.viewmodel.detail_lines(width))
        if key in ENTER_KEYS or key == ESC:
            self.viewmodel.toggle_expand()
        elif key == curses.KEY_UP:
            self.viewmodel.scroll_up()
        elif key == curses.KEY_DOWN:
            self.viewmodel.scroll_down(total_lines, visible_height)
        elif key == curses.KEY_PPAGE:
            self.viewmodel.page_up(visible_height)
        elif key == curses.KEY_NPAGE:
            self.viewmodel.page_down(visible_height, total_lines)
        else:
            return False
        return True

    def status_text(self) -> str:
        """Get the footer status"""
        return self.viewmodel.status_text()

    def draw(self) -> None:
        """Draw the event list or the details of the selected event"""
        if self.viewmodel.expanded:
            self._draw_details()
        else:
            self._list.draw()

    def _draw_details(self) -> None:
        self._window.clear()
        visible_height, width = self._detail_size

        title = "Log Details"
        self._window.addstr(Position(0, 1), title, color=Color.HEADER)
        self._window.hline(Position(1, 1), min(len(title), width), Color.HEADER)

        lines = self.viewmodel.detail_lines(width)
        self.viewmodel.scroll.clamp(len(lines), visible_height)
        offset = self.viewmodel.scroll.offset
        for row, line in enumerate(
            lines[offset : offset + visible_height], start=self._CONTENT_START_LINE
        ):
            color = Color.INFO if row - self._CONTENT_START_LINE + offset < 2 else None
            self._window.addstr(Position(row, 1), line, color=color)

        self._window.refresh()
