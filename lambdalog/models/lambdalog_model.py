import enum

from lambdalog.helpers.curses_utils import Size
from lambdalog.helpers.state import Field, State


class ViewMode(enum.Enum):
    """Enumeration of the screens of the application"""

    PROFILES = "Profiles"
    FUNCTIONS = "Functions"
    DATE_RANGE = "Date range"
    EVENTS = "Log events"


class LambdaLogState(State):
    """State of the application shared by the header, footer and screens"""

    terminal_size = Field[Size](Size(0, 0))
    current_mode = Field[ViewMode](ViewMode.PROFILES)
    error_message = Field[str]("")
    running = Field[bool](True)
