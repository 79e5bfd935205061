"""Main application window - owns the screen layout and the input loop"""

import curses
import logging

from lambdalog.helpers.curses_utils import (
    CTRL_C,
    ENTER_KEYS,
    ESC,
    Color,
    Position,
    Size,
    Viewport,
)
from lambdalog.input_controller import InputController
from lambdalog.models.account import AccountContext
from lambdalog.models.lambdalog_model import LambdaLogState
from lambdalog.output_controller import OutputController, Window
from lambdalog.viewmodels.app import AppModel, Collaborators
from lambdalog.viewmodels.navigation import (
    ContextPick,
    EntityPick,
    EventView,
    RangePick,
    Screen,
)
from lambdalog.views.date_range import DateRangeMode
from lambdalog.views.events import EventLogMode
from lambdalog.views.functions import FunctionListMode
from lambdalog.views.profiles import ProfileListMode

logger = logging.getLogger(__name__)

ScreenMode = ProfileListMode | FunctionListMode | DateRangeMode | EventLogMode

NO_KEY = -1


class App:  # pylint: disable=too-many-instance-attributes
    """Main application class"""

    _HEADER_HEIGHT = 1
    _FOOTER_HEIGHT = 2

    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        output_controller: OutputController,
        input_controller: InputController,
        profiles: list[AccountContext],
        collaborators: Collaborators,
        state: LambdaLogState | None = None,
    ) -> None:
        self._output_controller = output_controller
        self._input_controller = input_controller
        self._state = state or LambdaLogState()

        self._needs_header_update = True
        self._needs_footer_update = True
        self._needs_resize = True
        self._needs_redraw = True

        self.model = AppModel(
            self._state,
            profiles,
            collaborators,
            header_update=self._header_update,
            footer_update=self._footer_update,
            size_update=self._size_update,
        )

        self._stdscr = self._output_controller.create_main_window()
        size = self._output_controller.get_terminal_size()
        self._state.terminal_size = size
        self._header_win = self._stdscr.derwin(self._header_viewport(size))
        self._content_win = self._stdscr.derwin(self._content_viewport(size))
        self._footer_win = self._stdscr.derwin(self._footer_viewport(size))
        self._mode_cache: tuple[Screen, ScreenMode] | None = None

    def _header_update(self) -> None:
        self._needs_header_update = True

    def _footer_update(self) -> None:
        self._needs_footer_update = True

    def _size_update(self) -> None:
        self._needs_resize = True

    def _header_viewport(self, size: Size) -> Viewport:
        return Viewport(Position(0, 0), Size(self._HEADER_HEIGHT, size.width))

    def _content_viewport(self, size: Size) -> Viewport:
        height = max(1, size.height - self._HEADER_HEIGHT - self._FOOTER_HEIGHT)
        return Viewport(Position(self._HEADER_HEIGHT, 0), Size(height, size.width))

    def _footer_viewport(self, size: Size) -> Viewport:
        y_pos = max(0, size.height - self._FOOTER_HEIGHT)
        return Viewport(Position(y_pos, 0), Size(self._FOOTER_HEIGHT, size.width))

    @property
    def mode(self) -> ScreenMode:
        """Get the view of the active screen"""
        screen = self.model.current
        if self._mode_cache is None or self._mode_cache[0] is not screen:
            self._mode_cache = (screen, self._create_mode(screen, self._content_win))
        return self._mode_cache[1]

    @staticmethod
    def _create_mode(screen: Screen, window: Window) -> ScreenMode:
        if isinstance(screen, ContextPick):
            return ProfileListMode(screen.profiles, window)
        if isinstance(screen, EntityPick):
            return FunctionListMode(screen.functions, window)
        if isinstance(screen, RangePick):
            return DateRangeMode(screen.editor, window)
        return EventLogMode(screen.events, window)

    def run(self) -> None:
        """Run the input loop until the user quits"""
        self._output_controller.curs_set(0)
        while self._state.running:
            self.run_once()

    def run_once(self) -> None:
        """Draw a frame, then handle one key and any finished background work"""
        self.draw()
        key = self._input_controller.get_input()
        self.handle_key(key)
        if self.model.tick():
            self._needs_redraw = True

    def handle_key(self, key: int) -> None:
        """Dispatch a key to the global bindings or the active screen"""
        if key == NO_KEY:
            return
        self._needs_redraw = True

        if key == curses.KEY_RESIZE:
            self._output_controller.update_lines_cols()
            self.model.update_terminal_size(self._output_controller.get_terminal_size())
            return
        if key == CTRL_C:
            self.model.quit()
            return

        mode = self.mode
        if key == ord("q") and not mode.text_entry_active:
            self.model.quit()
        elif mode.handle_input(key):
            return
        elif key in ENTER_KEYS:
            self.model.confirm()
        elif key == ESC:
            self.model.back()

    def draw(self) -> None:
        """Draw whatever changed since the last frame"""
        if self._needs_resize:
            self._resize_windows()
        if self._needs_header_update:
            self._draw_header()
        if self._needs_redraw or self._needs_footer_update:
            mode = self.mode
            mode.draw()
            self._draw_footer(mode)
            self._place_cursor(mode)
            self._needs_redraw = False

    def _resize_windows(self) -> None:
        size = self._state.terminal_size
        logger.info("Resizing to %dx%d", size.height, size.width)
        for window, viewport in (
            (self._header_win, self._header_viewport(size)),
            (self._content_win, self._content_viewport(size)),
            (self._footer_win, self._footer_viewport(size)),
        ):
            window.resize(viewport.size)
            window.mvderwin(viewport.pos)
        self._stdscr.clear()
        self._stdscr.refresh()
        self._needs_resize = False
        self._needs_header_update = True
        self._needs_redraw = True

    def _draw_header(self) -> None:
        self._header_win.clear()
        self._header_win.addstr(
            Position(0, 1), self.model.header_text(), color=Color.HEADER
        )
        self._header_win.refresh()
        self._needs_header_update = False

    def _draw_footer(self, mode: ScreenMode) -> None:
        self._footer_win.clear()
        if self._state.error_message:
            self._footer_win.addstr(
                Position(0, 1), f"Error: {self._state.error_message}", color=Color.ERROR
            )
        else:
            self._footer_win.addstr(Position(0, 1), mode.status_text(), color=Color.INFO)
        self._footer_win.addstr(Position(1, 1), mode.help_text, color=Color.DEBUG)
        self._footer_win.refresh()
        self._needs_footer_update = False

    def _place_cursor(self, mode: ScreenMode) -> None:
        position = mode.cursor_position
        if position is None:
            self._output_controller.curs_set(0)
            return
        self._content_win.move(position)
        self._content_win.refresh()
        self._output_controller.curs_set(1)
