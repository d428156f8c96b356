from typing import Tuple

from basket.core import COLUMN_COUNT

# (minimum terminal width, columns shown side by side)
COLUMN_BREAKPOINTS: Tuple[Tuple[int, int], ...] = ((160, 5), (128, 4))
MIN_VISIBLE_COLUMNS = 3


def visible_column_count(term_width: int, total: int = COLUMN_COUNT) -> int:
    for min_width, count in COLUMN_BREAKPOINTS:
        if term_width >= min_width:
            return min(count, total)
    return min(MIN_VISIBLE_COLUMNS, total)


def centered_offset(selected: int, visible: int, total: int = COLUMN_COUNT) -> int:
    """Scroll offset that centres ``selected`` without running past either end."""
    desired = selected - visible // 2
    return max(0, min(desired, total - visible))


def column_window(term_width: int, offset: int, total: int = COLUMN_COUNT) -> Tuple[int, int]:
    """Half-open ``(start, end)`` range of column indices to draw."""
    visible = visible_column_count(term_width, total)
    start = max(0, min(offset, total - visible))
    return start, start + visible
