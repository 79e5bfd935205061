"""Event log view-model - handles list navigation and the expanded detail view"""

import logging
import textwrap

from lambdalog.models.account import AccountContext
from lambdalog.models.cached_list import CachedListSource
from lambdalog.models.date_range import DateRange
from lambdalog.models.log_event import LogEvent
from lambdalog.models.selection import FilteredSelection
from lambdalog.models.viewport import ScrollOffset
from lambdalog.viewmodels.filtered_list import FilteredListViewModel

logger = logging.getLogger(__name__)


class EventLogViewModel(FilteredListViewModel[LogEvent]):
    """View-model for browsing the log events of one function in a date range

    While expanded, up/down scroll the lines of the selected event instead
    of moving the selection.
    """

    def __init__(
        self,
        context: AccountContext,
        function_name: str,
        date_range: DateRange,
        source: CachedListSource[LogEvent],
    ) -> None:
        super().__init__(FilteredSelection(text_of=lambda event: event.message))
        self.context = context
        self.function_name = function_name
        self.date_range = date_range
        self._source = source
        self.expanded = False
        self.scroll = ScrollOffset()

    def load(self) -> None:
        """Fetch the events of the date range

        Raises FetchError if the fetch fails.
        """
        immediate, _ = self._source.load(self.context)
        logger.info(
            "Loaded %d events of %s for %s",
            len(immediate),
            self.function_name,
            self.date_range.describe(),
        )
        self.selection.replace_items(immediate)

    def sync(self) -> bool:
        """Pick up a finished background refresh. Returns True if the screen changed."""
        if not self._source.sync():
            return False
        self.selection.replace_items(self._source.items)
        return True

    def _apply_filter(self) -> None:
        super()._apply_filter()
        self.expanded = False
        self.scroll.reset()

    @property
    def selected_event(self) -> LogEvent | None:
        """Get the highlighted event"""
        return self.selection.selected_item

    def toggle_expand(self) -> None:
        """Switch between the event list and the details of the selected event"""
        if not self.expanded and self.selected_event is None:
            return
        self.expanded = not self.expanded
        self.scroll.reset()

    def scroll_up(self) -> None:
        """Move up one line when expanded, otherwise one event"""
        if self.expanded:
            self.scroll.up()
        else:
            self.selection.previous()

    def scroll_down(self, total_lines: int, visible_height: int) -> None:
        """Move down one line when expanded, otherwise one event"""
        if self.expanded:
            self.scroll.down(total_lines, visible_height)
        else:
            self.selection.next()

    def page_up(self, page_size: int) -> None:
        """Move up a page of lines when expanded, otherwise a page of events"""
        if self.expanded:
            self.scroll.page_up(page_size)
        else:
            self.selection.page_up(page_size)

    def page_down(self, page_size: int, total_lines: int) -> None:
        """Move down a page of lines when expanded, otherwise a page of events"""
        if self.expanded:
            self.scroll.page_down(page_size, total_lines, page_size)
        else:
            self.selection.page_down(page_size)

    def detail_lines(self, width: int) -> list[str]:
        """Get the wrapped lines describing the selected event"""
        event = self.selected_event
        if event is None:
            return []

        lines = [
            f"Timestamp: {event.format_time(precise=True)}",
            f"Ingested:  {event.ingested_at.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
        ]
        width = max(1, width)
        for line in event.detail_lines():
            indent = line[: len(line) - len(line.lstrip(" "))][: width // 2]
            lines.extend(
                textwrap.wrap(
                    line,
                    width,
                    subsequent_indent=indent,
                    replace_whitespace=False,
                    drop_whitespace=False,
                )
                or [""]
            )
        return lines

    def status_text(self) -> str:
        """Describe the selected event or the empty state"""
        return self.position_text("No log events")
