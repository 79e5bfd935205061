"""Application view-model - drives the navigation between screens"""

import dataclasses
import logging
from typing import Callable

from lambdalog.errors import FetchError
from lambdalog.helpers.curses_utils import Size
from lambdalog.models.account import AccountContext
from lambdalog.models.cached_list import CacheStore, CachedListSource, PageFetcher
from lambdalog.models.date_range import Clock, DateRange, DateRangeEditor, system_clock
from lambdalog.models.lambdalog_model import LambdaLogState
from lambdalog.models.log_event import LogEvent
from lambdalog.viewmodels.events import EventLogViewModel
from lambdalog.viewmodels.functions import FunctionListViewModel
from lambdalog.viewmodels.navigation import (
    ContextPick,
    EntityPick,
    EventView,
    Navigator,
    RangePick,
    Screen,
)
from lambdalog.viewmodels.profiles import ProfileListViewModel

logger = logging.getLogger(__name__)

FUNCTIONS_KIND = "functions"
EVENTS_KIND = "events"


@dataclasses.dataclass(frozen=True)
class Collaborators:
    """Remote listings, cache and clock used by the screens"""

    list_functions: Callable[[AccountContext], PageFetcher[str]]
    fetch_events: Callable[[AccountContext, str, DateRange], PageFetcher[LogEvent]]
    cache: CacheStore | None = None
    clock: Clock = system_clock


class AppModel:
    """ViewModel class for the application"""

    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        state: LambdaLogState,
        profiles: list[AccountContext],
        collaborators: Collaborators,
        header_update: Callable[[], None],
        footer_update: Callable[[], None],
        size_update: Callable[[], None],
    ) -> None:
        self._state = state
        self._collaborators = collaborators
        self.navigator = Navigator(ContextPick(ProfileListViewModel(profiles)))
        for field in ["current_mode", "terminal_size"]:
            self._state.register_watcher(field, header_update)
        for field in ["current_mode", "terminal_size", "error_message"]:
            self._state.register_watcher(field, footer_update)
        self._state.register_watcher("terminal_size", size_update)

    @property
    def current(self) -> Screen:
        """Get the active screen"""
        return self.navigator.current

    def update_terminal_size(self, size: Size) -> None:
        """Update the terminal size"""
        self._state.terminal_size = size

    def quit(self) -> None:
        """End the session"""
        self._state.running = False

    def back(self) -> None:
        """Leave the active screen and return to the previous one"""
        if self.navigator.back():
            logger.info("Back to %s", self.current.mode.value)
            self._state.error_message = ""
            self._state.current_mode = self.current.mode

    def confirm(self) -> None:
        """Advance to the next screen with the current selection

        A failed load keeps the current screen and shows the error.
        """
        screen = self.current
        try:
            next_screen = self._next_screen(screen)
        except FetchError as e:
            logger.warning("Could not leave %s: %s", screen.mode.value, e)
            self._state.error_message = str(e)
            return

        if next_screen is None:
            return
        self.navigator.push(next_screen)
        logger.info("Entered %s", next_screen.mode.value)
        self._state.error_message = ""
        self._state.current_mode = next_screen.mode

    def _next_screen(self, screen: Screen) -> Screen | None:
        if isinstance(screen, ContextPick):
            return self._enter_functions(screen)
        if isinstance(screen, EntityPick):
            return self._enter_date_range(screen)
        if isinstance(screen, RangePick):
            return self._enter_events(screen)
        return None

    def _enter_functions(self, screen: ContextPick) -> EntityPick | None:
        context = screen.profiles.selected_profile
        if context is None:
            return None
        source = CachedListSource[str](
            FUNCTIONS_KIND,
            self._collaborators.list_functions,
            cache=self._collaborators.cache,
            sort_key=lambda name: name,
        )
        functions = FunctionListViewModel(context, source)
        functions.load()
        return EntityPick(context, functions)

    def _enter_date_range(self, screen: EntityPick) -> RangePick | None:
        function_name = screen.functions.selected_function
        if function_name is None:
            return None
        return RangePick(
            screen.context, function_name, DateRangeEditor(self._collaborators.clock)
        )

    def _enter_events(self, screen: RangePick) -> EventView:
        date_range = screen.editor.date_range
        fetch_events = self._collaborators.fetch_events
        source = CachedListSource[LogEvent](
            EVENTS_KIND,
            lambda context: fetch_events(context, screen.function_name, date_range),
        )
        events = EventLogViewModel(screen.context, screen.function_name, date_range, source)
        events.load()
        return EventView(screen.context, screen.function_name, date_range, events)

    def tick(self) -> bool:
        """Pick up background refreshes of the active screen. Returns True if anything changed."""
        screen = self.current
        if isinstance(screen, EntityPick):
            return screen.functions.sync()
        if isinstance(screen, EventView):
            return screen.events.sync()
        return False

    def header_text(self) -> str:
        """Get the breadcrumb of the active screen"""
        screen = self.current
        parts = ["lambdalog", screen.mode.value]
        if isinstance(screen, (EntityPick, RangePick, EventView)):
            parts.append(f"Profile: {screen.context.name}")
            parts.append(f"Region: {screen.context.region}")
        if isinstance(screen, (RangePick, EventView)):
            parts.append(f"Function: {screen.function_name}")
        if isinstance(screen, EventView):
            parts.append(screen.date_range.describe())
        return " | ".join(parts)
