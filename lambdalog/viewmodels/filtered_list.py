"""Shared logic of the screens showing a filterable, selectable list"""

from typing import Generic, Iterator, TypeVar

from lambdalog.helpers.curses_utils import ENTER_KEYS, ESC
from lambdalog.models.selection import FilteredSelection
from lambdalog.models.viewport import visible_range
from lambdalog.viewmodels.text_input import TextInput

T = TypeVar("T")


class FilteredListViewModel(Generic[T]):
    """View-model for a list with a live keyword filter prompt"""

    def __init__(self, selection: FilteredSelection[T]) -> None:
        self.selection = selection
        self.filter_input = TextInput(selection.filter_text)

    @property
    def filter_active(self) -> bool:
        """Check if the filter prompt is open"""
        return self.filter_input.active

    @property
    def filter_text(self) -> str:
        """Get the applied filter text"""
        return self.selection.filter_text

    def handle_filter_command(self) -> None:
        """Open the filter prompt"""
        self.filter_input.start()

    def handle_filter_key(self, key: int) -> None:
        """Edit the filter, applying it on every change

        Enter closes the prompt and keeps the filter, Esc clears it.
        """
        if key in ENTER_KEYS:
            self.filter_input.stop()
        elif key == ESC:
            self.filter_input.stop()
            if self.filter_input.buffer:
                self.filter_input.clear()
                self._apply_filter()
        elif self.filter_input.handle_key(key):
            self._apply_filter()

    def _apply_filter(self) -> None:
        self.selection.set_filter(self.filter_input.buffer)

    def visible_items(self, visible_height: int) -> Iterator[tuple[int, T]]:
        """Iterate over the (index, item) pairs that fit in the visible rows"""
        view = self.selection.view
        start, end = visible_range(self.selection.selected, len(view), visible_height)
        for index in range(start, end):
            yield index, view[index]

    def position_text(self, empty_text: str) -> str:
        """Describe the selected row, or the empty state"""
        if self.selection.selected is None:
            if self.selection.items:
                return f"No matches ({len(self.selection.items)} total)"
            return empty_text
        return f"Row {self.selection.selected + 1}/{len(self.selection)}"
