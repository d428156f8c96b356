import pytest

from basket.core import COLUMN_COUNT, PRIORITY_COLORS, Priority


def test_priorities_are_ordered_zero_to_four():
    assert [int(p) for p in Priority] == [0, 1, 2, 3, 4]
    assert Priority.LOWEST < Priority.MEDIUM < Priority.HIGHEST
    assert COLUMN_COUNT == 5


def test_labels_match_names():
    assert [p.label for p in Priority] == ["LOWEST", "LOW", "MEDIUM", "HIGH", "HIGHEST"]


def test_every_priority_has_a_color():
    for priority in Priority:
        assert priority.color == PRIORITY_COLORS[priority]
        assert priority.color.startswith("#")


def test_next_wraps_from_highest_to_lowest():
    assert Priority.MEDIUM.next() is Priority.HIGH
    assert Priority.HIGHEST.next() is Priority.LOWEST


@pytest.mark.parametrize("start", list(Priority))
def test_next_five_times_is_identity(start):
    current = start
    for _ in range(COLUMN_COUNT):
        current = current.next()
    assert current is start


@pytest.mark.parametrize(
    "raw, expected",
    [(0, Priority.LOWEST), ("3", Priority.HIGH), (4, Priority.HIGHEST), (9, Priority.MEDIUM), (None, Priority.MEDIUM), ("x", Priority.MEDIUM)],
)
def test_coerce(raw, expected):
    assert Priority.coerce(raw) is expected
