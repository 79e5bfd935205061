from lambdalog.models.account import AccountContext
from lambdalog.models.selection import FilteredSelection
from lambdalog.viewmodels.filtered_list import FilteredListViewModel


class ProfileListViewModel(FilteredListViewModel[AccountContext]):
    """View-model for picking the account context"""

    def __init__(self, profiles: list[AccountContext]) -> None:
        super().__init__(FilteredSelection(profiles, text_of=lambda p: p.label))

    @property
    def selected_profile(self) -> AccountContext | None:
        """Get the highlighted profile"""
        return self.selection.selected_item
