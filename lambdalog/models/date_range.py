"""Date range selection: quick presets relative to now, or field-by-field editing"""

import calendar
import dataclasses
import enum
from datetime import datetime, timedelta
from typing import Callable

from lambdalog.helpers.list_utils import cycle_index, cycle_member

Clock = Callable[[], datetime]

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def system_clock() -> datetime:
    """Get the current local time as an aware datetime"""
    return datetime.now().astimezone()


class DateField(enum.Enum):
    """Calendar fields that can be edited in a custom range"""

    YEAR = "Year"
    MONTH = "Month"
    DAY = "Day"
    HOUR = "Hour"
    MINUTE = "Minute"


class QuickRangePreset(enum.Enum):
    """Named durations ending at the current time"""

    LAST_15_MINUTES = ("Last 15 minutes", timedelta(minutes=15))
    LAST_HOUR = ("Last hour", timedelta(hours=1))
    LAST_3_HOURS = ("Last 3 hours", timedelta(hours=3))
    LAST_6_HOURS = ("Last 6 hours", timedelta(hours=6))
    LAST_12_HOURS = ("Last 12 hours", timedelta(hours=12))
    LAST_24_HOURS = ("Last 24 hours", timedelta(hours=24))
    LAST_3_DAYS = ("Last 3 days", timedelta(days=3))
    LAST_WEEK = ("Last week", timedelta(weeks=1))

    def __init__(self, label: str, duration: timedelta) -> None:
        self.label = label
        self.duration = duration


PRESETS = list(QuickRangePreset)
FIELDS = list(DateField)


@dataclasses.dataclass(frozen=True)
class DateRange:
    """A [from, to) pair of instants; to is raised to from if given earlier"""

    from_date: datetime
    to_date: datetime

    def __post_init__(self) -> None:
        if self.to_date < self.from_date:
            object.__setattr__(self, "to_date", self.from_date)

    @classmethod
    def last(cls, duration: timedelta, now: datetime) -> "DateRange":
        """Create the range covering the given duration up to now"""
        return cls(now - duration, now)

    def describe(self) -> str:
        """Format the range for display"""
        return (
            f"{self.from_date.strftime(DISPLAY_FORMAT)}"
            f" to {self.to_date.strftime(DISPLAY_FORMAT)}"
        )


@dataclasses.dataclass(frozen=True)
class QuickMode:
    """Selecting one of the quick presets"""

    preset_index: int


@dataclasses.dataclass(frozen=True)
class CustomMode:
    """Editing one field of one bound of a custom range"""

    preset_index: int
    editing_from: bool = True
    field: DateField = DateField.DAY


def shift_month(moment: datetime, delta: int) -> datetime:
    """Move to the neighbouring month, wrapping within the same year

    The day is clamped to the last day of the target month.
    """
    month = (moment.month + delta) % 12 or 12
    last_day = calendar.monthrange(moment.year, month)[1]
    return moment.replace(month=month, day=min(moment.day, last_day))


def shift_year(moment: datetime, delta: int) -> datetime:
    """Move to the neighbouring year, keeping the original on an invalid date"""
    try:
        return moment.replace(year=moment.year + delta)
    except ValueError:
        return moment


_FIELD_STEPS: dict[DateField, timedelta] = {
    DateField.DAY: timedelta(days=1),
    DateField.HOUR: timedelta(hours=1),
    DateField.MINUTE: timedelta(minutes=1),
}


def adjust_field(moment: datetime, field: DateField, increment: bool) -> datetime:
    """Add or subtract one unit of the given field"""
    delta = 1 if increment else -1
    if field == DateField.YEAR:
        return shift_year(moment, delta)
    if field == DateField.MONTH:
        return shift_month(moment, delta)
    return moment + delta * _FIELD_STEPS[field]


class DateRangeEditor:
    """State machine producing the date range for the log query

    In quick mode the range is always recomputed from the clock when a preset
    is (re)selected. In custom mode the last active range is frozen and its
    bounds are edited one field at a time, keeping from <= to after every
    adjustment.
    """

    def __init__(
        self,
        clock: Clock = system_clock,
        preset: QuickRangePreset = QuickRangePreset.LAST_HOUR,
    ) -> None:
        self._clock = clock
        self.mode: QuickMode | CustomMode = QuickMode(PRESETS.index(preset))
        self.date_range = self._range_for_preset(preset)

    @property
    def is_custom(self) -> bool:
        """Check if the editor is in custom mode"""
        return isinstance(self.mode, CustomMode)

    @property
    def preset(self) -> QuickRangePreset:
        """Get the selected quick preset"""
        return PRESETS[self.mode.preset_index]

    @property
    def editing_from(self) -> bool:
        """Check if the from bound is being edited"""
        return isinstance(self.mode, CustomMode) and self.mode.editing_from

    @property
    def editing_to(self) -> bool:
        """Check if the to bound is being edited"""
        return isinstance(self.mode, CustomMode) and not self.mode.editing_from

    @property
    def field(self) -> DateField | None:
        """Get the field being edited, if in custom mode"""
        if isinstance(self.mode, CustomMode):
            return self.mode.field
        return None

    def _range_for_preset(self, preset: QuickRangePreset) -> DateRange:
        return DateRange.last(preset.duration, self._clock())

    def toggle_custom(self) -> None:
        """Switch between quick and custom mode"""
        if isinstance(self.mode, CustomMode):
            self.mode = QuickMode(self.mode.preset_index)
            self.date_range = self._range_for_preset(self.preset)
        else:
            self.mode = CustomMode(self.mode.preset_index)

    def next_preset(self) -> None:
        """Select the next quick preset"""
        self._move_preset(1)

    def previous_preset(self) -> None:
        """Select the previous quick preset"""
        self._move_preset(-1)

    def _move_preset(self, step: int) -> None:
        if not isinstance(self.mode, QuickMode):
            return
        self.mode = QuickMode(cycle_index(self.mode.preset_index, len(PRESETS), step))
        self.date_range = self._range_for_preset(self.preset)

    def next_field(self) -> None:
        """Edit the next calendar field"""
        self._move_field(1)

    def previous_field(self) -> None:
        """Edit the previous calendar field"""
        self._move_field(-1)

    def _move_field(self, step: int) -> None:
        if isinstance(self.mode, CustomMode):
            self.mode = dataclasses.replace(
                self.mode, field=cycle_member(FIELDS, self.mode.field, step)
            )

    def toggle_selection(self) -> None:
        """Switch between editing the from and the to bound"""
        if isinstance(self.mode, CustomMode):
            self.mode = dataclasses.replace(
                self.mode, editing_from=not self.mode.editing_from
            )

    def adjust_current_field(self, increment: bool) -> None:
        """Increment or decrement the edited field of the edited bound"""
        if not isinstance(self.mode, CustomMode):
            return

        from_date, to_date = self.date_range.from_date, self.date_range.to_date
        if self.mode.editing_from:
            from_date = min(adjust_field(from_date, self.mode.field, increment), to_date)
        else:
            to_date = max(adjust_field(to_date, self.mode.field, increment), from_date)
        self.date_range = DateRange(from_date, to_date)
