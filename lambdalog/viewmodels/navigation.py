"""Screens of the browsing flow and the stack navigating between them"""

import dataclasses

from lambdalog.models.account import AccountContext
from lambdalog.models.date_range import DateRange, DateRangeEditor
from lambdalog.models.lambdalog_model import ViewMode
from lambdalog.viewmodels.events import EventLogViewModel
from lambdalog.viewmodels.functions import FunctionListViewModel
from lambdalog.viewmodels.profiles import ProfileListViewModel


@dataclasses.dataclass
class ContextPick:
    """Picking the AWS profile"""

    profiles: ProfileListViewModel

    mode = ViewMode.PROFILES


@dataclasses.dataclass
class EntityPick:
    """Picking a function of the chosen profile"""

    context: AccountContext
    functions: FunctionListViewModel

    mode = ViewMode.FUNCTIONS


@dataclasses.dataclass
class RangePick:
    """Picking the date range of the logs of the chosen function"""

    context: AccountContext
    function_name: str
    editor: DateRangeEditor

    mode = ViewMode.DATE_RANGE


@dataclasses.dataclass
class EventView:
    """Browsing the log events of the chosen function and range"""

    context: AccountContext
    function_name: str
    date_range: DateRange
    events: EventLogViewModel

    mode = ViewMode.EVENTS


Screen = ContextPick | EntityPick | RangePick | EventView

_SCREEN_ORDER: tuple[type, ...] = (ContextPick, EntityPick, RangePick, EventView)


class Navigator:
    """Stack of live screens; only the top one is active

    Screens can only be pushed in flow order, and going back discards the
    active screen so the previous one is shown as it was left.
    """

    def __init__(self, root: ContextPick) -> None:
        self._screens: list[Screen] = [root]

    @property
    def current(self) -> Screen:
        """Get the active screen"""
        return self._screens[-1]

    @property
    def depth(self) -> int:
        """Get the number of live screens"""
        return len(self._screens)

    def push(self, screen: Screen) -> None:
        """Advance to the next screen of the flow"""
        if self.depth >= len(_SCREEN_ORDER) or not isinstance(
            screen, _SCREEN_ORDER[self.depth]
        ):
            raise ValueError(
                f"Cannot go from {type(self.current).__name__} to {type(screen).__name__}"
            )
        self._screens.append(screen)

    def back(self) -> bool:
        """Discard the active screen. Returns False on the first screen."""
        if self.depth == 1:
            return False
        self._screens.pop()
        return True
