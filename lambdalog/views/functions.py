"""Function list view - picks the Lambda function to browse"""

from lambdalog.helpers.curses_utils import Position
from lambdalog.output_controller import Window
from lambdalog.viewmodels.functions import FunctionListViewModel
from lambdalog.views.list_window import ListWindow


class FunctionListMode:
    """Handles function list input and drawing logic"""

    help_text = "↑/↓: Move | /: Filter | Enter: Select | Esc: Back | q: Quit"

    def __init__(self, viewmodel: FunctionListViewModel, window: Window) -> None:
        self.viewmodel = viewmodel
        self._list = ListWindow(
            viewmodel, window, lambda name: ("", name), "No functions"
        )

    @property
    def cursor_position(self) -> Position | None:
        """Get where the cursor goes while text is being entered"""
        return self._list.cursor_position

    @property
    def text_entry_active(self) -> bool:
        """Check if keys are going to the filter prompt"""
        return self.viewmodel.filter_active

    def handle_input(self, key: int) -> bool:
        """Handle input for the function list. Returns True if key was handled."""
        return self._list.handle_input(key)

    def status_text(self) -> str:
        """Get the footer status"""
        return self.viewmodel.status_text()

    def draw(self) -> None:
        """Draw the function list"""
        self._list.draw()
