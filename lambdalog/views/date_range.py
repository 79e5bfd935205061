"""Date range view - quick presets or field-by-field custom bounds"""

import curses
from datetime import datetime

from lambdalog.helpers.curses_utils import TAB, Color, Position, TextAttribute
from lambdalog.models.date_range import (
    DISPLAY_FORMAT,
    PRESETS,
    DateField,
    DateRangeEditor,
)
from lambdalog.output_controller import Window

# Character spans of each field in DISPLAY_FORMAT
FIELD_SPANS: dict[DateField, tuple[int, int]] = {
    DateField.YEAR: (0, 4),
    DateField.MONTH: (5, 7),
    DateField.DAY: (8, 10),
    DateField.HOUR: (11, 13),
    DateField.MINUTE: (14, 16),
}


class DateRangeMode:
    """Handles date range input and drawing logic"""

    def __init__(self, editor: DateRangeEditor, window: Window) -> None:
        self.editor = editor
        self._window = window

    @property
    def help_text(self) -> str:
        """Get the key hints of the current editor mode"""
        if self.editor.is_custom:
            return (
                "←/→: Field | ↑/↓: Adjust | Tab: From/To | c: Quick ranges"
                " | Enter: Show logs | Esc: Back"
            )
        return "↑/↓: Select range | c: Custom range | Enter: Show logs | Esc: Back"

    cursor_position = None
    text_entry_active = False

    def handle_input(self, key: int) -> bool:
        """Handle input for the date range editor. Returns True if key was handled."""
        custom = self.editor.is_custom
        if key == ord("c"):
            self.editor.toggle_custom()
        elif key == TAB:
            self.editor.toggle_selection()
        elif key == curses.KEY_LEFT:
            if custom:
                self.editor.previous_field()
            else:
                self.editor.previous_preset()
        elif key == curses.KEY_RIGHT:
            if custom:
                self.editor.next_field()
            else:
                self.editor.next_preset()
        elif key == curses.KEY_UP:
            if custom:
                self.editor.adjust_current_field(increment=True)
            else:
                self.editor.previous_preset()
        elif key == curses.KEY_DOWN:
            if custom:
                self.editor.adjust_current_field(increment=False)
            else:
                self.editor.next_preset()
        else:
            return False
        return True

    def status_text(self) -> str:
        """Get the footer status"""
        if self.editor.is_custom:
            bound = "From" if self.editor.editing_from else "To"
            field = self.editor.field.value if self.editor.field else ""
            return f"Custom range | Editing {bound} {field}"
        return f"Quick range | {self.editor.preset.label}"

    def draw(self) -> None:
        """Draw the presets, the custom bounds and the resulting range"""
        self._window.clear()
        width = self._window.getmaxyx().width
        custom = self.editor.is_custom

        y_pos = self._draw_title(0, "Quick Ranges", active=not custom, width=width)
        for index, preset in enumerate(PRESETS):
            is_selected = index == self.editor.mode.preset_index
            if is_selected and not custom:
                self._window.addstr(
                    Position(y_pos, 1), f"► {preset.label}", color=Color.SELECTED
                )
            else:
                color = Color.DEBUG if custom else Color.DEFAULT
                self._window.addstr(Position(y_pos, 1), f"  {preset.label}", color=color)
            y_pos += 1

        y_pos = self._draw_title(y_pos + 1, "Custom Range", active=custom, width=width)
        date_range = self.editor.date_range
        self._draw_bound(y_pos, "From:", date_range.from_date, self.editor.editing_from)
        self._draw_bound(y_pos + 1, "To:  ", date_range.to_date, self.editor.editing_to)

        self._window.addstr(
            Position(y_pos + 3, 1),
            f"Selected: {date_range.describe()}",
            color=Color.INFO,
        )
        self._window.refresh()

    def _draw_title(self, y_pos: int, title: str, active: bool, width: int) -> int:
        attributes = [TextAttribute.BOLD] if active else None
        self._window.addstr(
            Position(y_pos, 1), title, color=Color.HEADER, attributes=attributes
        )
        self._window.hline(Position(y_pos + 1, 1), min(len(title), width - 2), Color.HEADER)
        return y_pos + 2

    def _draw_bound(self, y_pos: int, label: str, moment: datetime, editing: bool) -> None:
        marker = "► " if editing else "  "
        color = Color.DEFAULT if self.editor.is_custom else Color.DEBUG
        text = moment.strftime(DISPLAY_FORMAT)
        prefix = f"{marker}{label} "
        self._window.addstr(Position(y_pos, 1), prefix + text, color=color)

        field = self.editor.field
        if editing and field is not None:
            start, end = FIELD_SPANS[field]
            self._window.addstr(
                Position(y_pos, 1 + len(prefix) + start),
                text[start:end],
                color=Color.SELECTED,
                attributes=[TextAttribute.REVERSE],
            )
