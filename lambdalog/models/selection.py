"""Selection cursor over a keyword-filtered view of a list"""

from typing import Callable, Generic, Hashable, Iterable, TypeVar

from lambdalog.helpers.keyword_filter import matches
from lambdalog.helpers.list_utils import find_first_index

T = TypeVar("T")


class FilteredSelection(Generic[T]):
    """Keeps a valid selected index into the filtered view of a backing list

    The selected index is always relative to the filtered view. Replacing the
    backing list keeps the selection on the same item when its key is still
    in the new view, and falls back to the first item otherwise.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        text_of: Callable[[T], str] = str,
        key_of: Callable[[T], Hashable] = lambda item: item,
    ) -> None:
        self._text_of = text_of
        self._key_of = key_of
        self._items: list[T] = list(items)
        self._filter_text = ""
        self._view: list[T] = []
        self._selected: int | None = None
        self.set_filter("")

    @property
    def items(self) -> list[T]:
        """Get the backing list"""
        return self._items.copy()

    @property
    def filter_text(self) -> str:
        """Get the current filter text"""
        return self._filter_text

    @property
    def view(self) -> list[T]:
        """Get the filtered view"""
        return self._view.copy()

    def __len__(self) -> int:
        return len(self._view)

    @property
    def selected(self) -> int | None:
        """Get the selected index in the filtered view"""
        return self._selected

    @property
    def selected_item(self) -> T | None:
        """Get the selected item"""
        if self._selected is None:
            return None
        return self._view[self._selected]

    def _apply_filter(self) -> None:
        self._view = [
            item for item in self._items if matches(self._filter_text, self._text_of(item))
        ]

    def set_filter(self, text: str) -> None:
        """Filter the backing list and select the first match"""
        self._filter_text = text
        self._apply_filter()
        self._selected = 0 if self._view else None

    def replace_items(self, items: Iterable[T]) -> None:
        """Replace the backing list, keeping the selected item where possible"""
        previous = self.selected_item
        self._items = list(items)
        self._apply_filter()
        if not self._view:
            self._selected = None
            return

        self._selected = 0
        if previous is not None:
            previous_key = self._key_of(previous)
            index = find_first_index(
                self._view, lambda item: self._key_of(item) == previous_key
            )
            if index is not None:
                self._selected = index

    def _move_to(self, index: int) -> None:
        if not self._view:
            return
        self._selected = max(0, min(index, len(self._view) - 1))

    def next(self) -> None:
        """Select the next item, stopping at the last one"""
        self._move_to((self._selected or 0) + 1)

    def previous(self) -> None:
        """Select the previous item, stopping at the first one"""
        self._move_to((self._selected or 0) - 1)

    def page_down(self, page_size: int) -> None:
        """Move the selection down by a page"""
        self._move_to((self._selected or 0) + page_size)

    def page_up(self, page_size: int) -> None:
        """Move the selection up by a page"""
        self._move_to((self._selected or 0) - page_size)

    def first(self) -> None:
        """Select the first item"""
        self._move_to(0)

    def last(self) -> None:
        """Select the last item"""
        self._move_to(len(self._view) - 1)
