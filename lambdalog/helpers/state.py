"""Change-tracking state objects that notify watchers on attribute updates"""

import collections
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

MISSING = object()


class Field(Generic[T]):
    """Descriptor for a tracked state attribute with a default value or factory"""

    def __init__(self, default: T | Callable[[], T]) -> None:
        self._default = default
        self._name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._name = name

    def _make_default(self) -> T:
        if callable(self._default):
            return self._default()
        return self._default

    def __get__(self, instance: "State | None", owner: type) -> Any:
        if instance is None:
            return self
        values = instance.__dict__.setdefault("_field_values", {})
        if self._name not in values:
            values[self._name] = self._make_default()
        return values[self._name]

    def __set__(self, instance: "State", value: T) -> None:
        old_value = self.__get__(instance, type(instance))
        instance.__dict__["_field_values"][self._name] = value
        if old_value != value:
            instance._changed(self._name)  # pylint: disable=protected-access


class State:
    """Tracks changes to its public attributes and notifies registered watchers"""

    def __init__(self) -> None:
        self.__dict__["_changes"] = set()
        self.__dict__["_watchers"] = collections.defaultdict(list)

    def __setattr__(self, name: str, value: Any) -> None:
        if isinstance(getattr(type(self), name, None), Field):
            super().__setattr__(name, value)
            return

        old_value = getattr(self, name, MISSING)
        super().__setattr__(name, value)
        if not name.startswith("_") and old_value != value:
            self._changed(name)

    def _changed(self, name: str) -> None:
        self._changes.add(name)
        for callback in self._watchers[name]:
            callback()

    @property
    def changes(self) -> set[str]:
        """Get the set of attribute names that have changed."""
        return self._changes.copy()

    def clear_changes(self) -> None:
        """Clear the changes set."""
        self._changes.clear()

    def register_watcher(self, name: str, callback: Callable[[], None]) -> None:
        """Register a callback to be notified when an attribute changes"""
        self._watchers[name].append(callback)
