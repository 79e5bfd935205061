"""Profile list view - picks the account context to browse"""

from lambdalog.helpers.curses_utils import Position
from lambdalog.models.account import AccountContext
from lambdalog.output_controller import Window
from lambdalog.viewmodels.profiles import ProfileListViewModel
from lambdalog.views.list_window import ListWindow


class ProfileListMode:
    """Handles profile list input and drawing logic"""

    help_text = "↑/↓: Move | /: Filter | Enter: Select | q: Quit"

    def __init__(self, viewmodel: ProfileListViewModel, window: Window) -> None:
        self.viewmodel = viewmodel
        self._list = ListWindow(
            viewmodel,
            window,
            self._render_profile,
            "No profiles, add [[profiles]] entries to the config file",
        )

    @staticmethod
    def _render_profile(profile: AccountContext) -> tuple[str, str]:
        return "", profile.label

    @property
    def cursor_position(self) -> Position | None:
        """Get where the cursor goes while text is being entered"""
        return self._list.cursor_position

    @property
    def text_entry_active(self) -> bool:
        """Check if keys are going to the filter prompt"""
        return self.viewmodel.filter_active

    def handle_input(self, key: int) -> bool:
        """Handle input for the profile list. Returns True if key was handled."""
        return self._list.handle_input(key)

    def status_text(self) -> str:
        """Get the footer status"""
        return self.viewmodel.position_text("No profiles")

    def draw(self) -> None:
        """Draw the profile list"""
        self._list.draw()
