"""Visible range computations for list and text views"""


def visible_range(
    selected: int | None, total: int, visible_height: int
) -> tuple[int, int]:
    """Get the [start, end) slice of a list to show in visible_height rows

    The selection is kept in the middle of the visible rows when possible and
    the slice is pinned to the tail of the list near its end.
    """
    if visible_height <= 0:
        return 0, 0
    if selected is None:
        return 0, min(visible_height, total)

    half_height = visible_height // 2
    if selected + half_height >= total:
        start = max(0, total - visible_height)
    else:
        start = max(0, selected - half_height)
    end = min(start + visible_height, total)
    return start, end


def max_scroll_offset(total: int, visible_height: int) -> int:
    """Get the largest line offset for a text of total lines"""
    if total <= 0:
        return 0
    if 0 < visible_height < total:
        return total - visible_height
    return total - 1


class ScrollOffset:
    """Line offset into a block of text, without any auto-centering"""

    def __init__(self) -> None:
        self.offset = 0

    def reset(self) -> None:
        """Go back to the first line"""
        self.offset = 0

    def up(self, lines: int = 1) -> None:
        """Scroll up, stopping at the first line"""
        self.offset = max(0, self.offset - lines)

    def down(self, total: int, visible_height: int, lines: int = 1) -> None:
        """Scroll down, stopping at the last scrollable line"""
        self.offset = min(self.offset + lines, max_scroll_offset(total, visible_height))

    def page_up(self, page_size: int) -> None:
        """Scroll up by a page"""
        self.up(page_size)

    def page_down(self, page_size: int, total: int, visible_height: int) -> None:
        """Scroll down by a page"""
        self.down(total, visible_height, page_size)

    def clamp(self, total: int, visible_height: int) -> None:
        """Keep the offset valid after the text or the window changed size"""
        self.offset = max(0, min(self.offset, max_scroll_offset(total, visible_height)))
