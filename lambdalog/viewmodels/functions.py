"""Function list view-model - keeps the list in sync with its cached source"""

import logging

from lambdalog.models.account import AccountContext
from lambdalog.models.cached_list import CachedListSource
from lambdalog.models.selection import FilteredSelection
from lambdalog.viewmodels.filtered_list import FilteredListViewModel

logger = logging.getLogger(__name__)


class FunctionListViewModel(FilteredListViewModel[str]):
    """View-model for picking a Lambda function of an account context"""

    def __init__(self, context: AccountContext, source: CachedListSource[str]) -> None:
        super().__init__(FilteredSelection())
        self.context = context
        self._source = source

    def load(self) -> None:
        """Show the cached functions and start refreshing them

        Raises FetchError if nothing is cached and the listing fails.
        """
        immediate, _ = self._source.load(self.context)
        self.selection.replace_items(immediate)

    def sync(self) -> bool:
        """Pick up a finished background refresh. Returns True if the screen changed."""
        if not self._source.sync():
            return False
        if self.refresh_failed:
            logger.info("Function list of %s kept after a failed refresh", self.context.label)
        else:
            logger.info("Function list of %s refreshed", self.context.label)
        self.selection.replace_items(self._source.items)
        return True

    @property
    def refreshing(self) -> bool:
        """Check if the list is still being refreshed"""
        return self._source.refreshing

    @property
    def refresh_failed(self) -> bool:
        """Check if the last background refresh failed"""
        return self._source.task.failed

    @property
    def selected_function(self) -> str | None:
        """Get the highlighted function name"""
        return self.selection.selected_item

    def status_text(self) -> str:
        """Describe the list and its refresh state"""
        parts = [self.position_text("No functions")]
        if self.refreshing:
            parts.append("Refreshing...")
        elif self.refresh_failed:
            parts.append("Refresh failed, showing cached list")
        return " | ".join(parts)
