"""Tests for the date range editor"""

from datetime import datetime, timedelta, timezone

import pytest

from lambdalog.models.date_range import (
    FIELDS,
    PRESETS,
    CustomMode,
    DateField,
    DateRange,
    DateRangeEditor,
    QuickMode,
    QuickRangePreset,
    adjust_field,
    shift_month,
    shift_year,
)

NOW = datetime(2024, 5, 15, 12, 30, tzinfo=timezone.utc)


class FakeClock:
    """Clock whose time is set by the test"""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(name="clock")
def clock_fixture() -> FakeClock:
    """Create a clock stopped at NOW"""
    return FakeClock(NOW)


@pytest.fixture(name="editor")
def editor_fixture(clock: FakeClock) -> DateRangeEditor:
    """Create an editor in quick mode with the default preset"""
    return DateRangeEditor(clock)


@pytest.fixture(name="custom_editor")
def custom_editor_fixture(editor: DateRangeEditor) -> DateRangeEditor:
    """Create an editor in custom mode"""
    editor.toggle_custom()
    return editor


def _select_field(editor: DateRangeEditor, field: DateField) -> None:
    while editor.field != field:
        editor.next_field()


def test_initial_state_is_last_hour(editor: DateRangeEditor) -> None:
    """Test that the editor starts on the last hour preset"""
    # Assert
    assert editor.mode == QuickMode(PRESETS.index(QuickRangePreset.LAST_HOUR))
    assert editor.preset == QuickRangePreset.LAST_HOUR
    assert editor.date_range == DateRange(NOW - timedelta(hours=1), NOW)
    assert editor.field is None
    assert not editor.editing_from and not editor.editing_to


def test_last_hour_is_anchored_at_selection_time(
    editor: DateRangeEditor, clock: FakeClock
) -> None:
    """Test that reselecting a preset recomputes the range from the clock"""
    # Arrange
    later = NOW + timedelta(minutes=42)
    clock.now = later

    # Act
    editor.next_preset()
    editor.previous_preset()

    # Assert
    assert editor.preset == QuickRangePreset.LAST_HOUR
    assert editor.date_range == DateRange(later - timedelta(hours=1), later)


def test_presets_cycle(editor: DateRangeEditor) -> None:
    """Test that preset navigation wraps around"""
    # Act
    editor.previous_preset()
    editor.previous_preset()

    # Assert
    assert editor.preset == QuickRangePreset.LAST_WEEK
    assert editor.date_range == DateRange(NOW - timedelta(weeks=1), NOW)


def test_toggle_custom_freezes_the_range(
    editor: DateRangeEditor, clock: FakeClock
) -> None:
    """Test that custom mode starts from the last active range"""
    # Arrange
    expected = editor.date_range

    # Act
    clock.now = NOW + timedelta(days=1)
    editor.toggle_custom()

    # Assert
    assert editor.mode == CustomMode(PRESETS.index(QuickRangePreset.LAST_HOUR))
    assert editor.date_range == expected
    assert editor.editing_from
    assert editor.field == DateField.DAY


def test_back_to_quick_mode_discards_custom_edits(
    custom_editor: DateRangeEditor, clock: FakeClock
) -> None:
    """Test that leaving custom mode re-derives the range from the preset"""
    # Arrange
    custom_editor.adjust_current_field(increment=False)
    clock.now = NOW + timedelta(minutes=5)

    # Act
    custom_editor.toggle_custom()

    # Assert
    assert not custom_editor.is_custom
    assert custom_editor.date_range == DateRange(
        clock.now - timedelta(hours=1), clock.now
    )


def test_preset_keys_ignored_in_custom_mode(custom_editor: DateRangeEditor) -> None:
    """Test that presets cannot change while editing a custom range"""
    # Arrange
    expected = custom_editor.date_range

    # Act
    custom_editor.next_preset()

    # Assert
    assert custom_editor.preset == QuickRangePreset.LAST_HOUR
    assert custom_editor.date_range == expected


def test_field_keys_ignored_in_quick_mode(editor: DateRangeEditor) -> None:
    """Test that field editing does nothing in quick mode"""
    # Arrange
    expected = editor.date_range

    # Act
    editor.next_field()
    editor.toggle_selection()
    editor.adjust_current_field(increment=True)

    # Assert
    assert editor.mode == QuickMode(PRESETS.index(QuickRangePreset.LAST_HOUR))
    assert editor.date_range == expected


def test_fields_cycle(custom_editor: DateRangeEditor) -> None:
    """Test that field navigation wraps around"""
    # Act
    visited = []
    for _ in FIELDS:
        custom_editor.next_field()
        visited.append(custom_editor.field)

    # Assert
    assert visited == [
        DateField.HOUR,
        DateField.MINUTE,
        DateField.YEAR,
        DateField.MONTH,
        DateField.DAY,
    ]


def test_toggle_selection_switches_bound(custom_editor: DateRangeEditor) -> None:
    """Test switching between the from and the to bound"""
    # Act
    custom_editor.toggle_selection()

    # Assert
    assert custom_editor.editing_to
    assert not custom_editor.editing_from


def test_increment_from_is_clamped_to_to(custom_editor: DateRangeEditor) -> None:
    """Test that moving from past to stops at to"""
    # Act
    custom_editor.adjust_current_field(increment=True)

    # Assert
    assert custom_editor.date_range == DateRange(NOW, NOW)


def test_decrement_to_is_clamped_to_from(custom_editor: DateRangeEditor) -> None:
    """Test that moving to before from stops at from"""
    # Arrange
    custom_editor.toggle_selection()

    # Act
    custom_editor.adjust_current_field(increment=False)

    # Assert
    from_date = NOW - timedelta(hours=1)
    assert custom_editor.date_range == DateRange(from_date, from_date)


def test_adjust_from_minute(custom_editor: DateRangeEditor) -> None:
    """Test moving the from bound by a minute"""
    # Arrange
    _select_field(custom_editor, DateField.MINUTE)

    # Act
    custom_editor.adjust_current_field(increment=True)

    # Assert
    assert custom_editor.date_range.from_date == NOW - timedelta(minutes=59)
    assert custom_editor.date_range.to_date == NOW


@pytest.mark.parametrize("field", FIELDS)
@pytest.mark.parametrize("editing_from", [True, False])
@pytest.mark.parametrize("increment", [True, False])
def test_from_never_after_to(
    custom_editor: DateRangeEditor,
    field: DateField,
    editing_from: bool,
    increment: bool,
) -> None:
    """Test that no sequence of adjustments breaks the range order"""
    # Arrange
    _select_field(custom_editor, field)
    if not editing_from:
        custom_editor.toggle_selection()

    # Act and Assert
    for _ in range(30):
        custom_editor.adjust_current_field(increment)
        assert custom_editor.date_range.from_date <= custom_editor.date_range.to_date


def test_date_range_raises_to_to_from() -> None:
    """Test that a reversed range is collapsed to from"""
    # Act
    date_range = DateRange(NOW, NOW - timedelta(days=1))

    # Assert
    assert date_range.to_date == NOW


def test_describe() -> None:
    """Test the display format of a range"""
    # Act
    text = DateRange(NOW - timedelta(hours=1), NOW).describe()

    # Assert
    assert text == "2024-05-15 11:30 to 2024-05-15 12:30"


@pytest.mark.parametrize(
    "moment, delta, expected",
    [
        (datetime(2024, 12, 10), 1, datetime(2024, 1, 10)),
        (datetime(2024, 1, 10), -1, datetime(2024, 12, 10)),
        (datetime(2024, 3, 31), -1, datetime(2024, 2, 29)),
        (datetime(2023, 1, 31), 1, datetime(2023, 2, 28)),
        (datetime(2024, 6, 15, 8, 45), 1, datetime(2024, 7, 15, 8, 45)),
    ],
)
def test_shift_month(moment: datetime, delta: int, expected: datetime) -> None:
    """Test that months wrap within the year and clamp the day"""
    # Assert
    assert shift_month(moment, delta) == expected


def test_shift_year_keeps_invalid_leap_day() -> None:
    """Test that Feb 29 stays unchanged when the target year has none"""
    # Arrange
    leap_day = datetime(2024, 2, 29, 10, 0)

    # Assert
    assert shift_year(leap_day, 1) == leap_day
    assert shift_year(leap_day, 4) == datetime(2028, 2, 29, 10, 0)


def test_adjust_day_crosses_month() -> None:
    """Test that day adjustment carries into the next month"""
    # Assert
    assert adjust_field(datetime(2024, 1, 31), DateField.DAY, True) == datetime(2024, 2, 1)
