import pytest

from core.services.styling import get_thickness, get_thickness_interval


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (1, 1), (5, 2), (25, 3), (50, 4), (80, 5), (95, 5), (100, 5)],
)
def test_get_thickness(value, expected):
    assert get_thickness(value, 0, 100) == expected


def test_get_thickness_equal_bounds_start_at_zero():
    assert get_thickness(5, 10, 10) == 4


@pytest.mark.parametrize(
    "value, expected",
    [(0, 1), (20, 1), (21, 2), (40, 2), (60, 3), (80, 4), (81, 5), (500, 5)],
)
def test_get_thickness_interval(value, expected):
    assert get_thickness_interval(value, 0, 100) == expected


def test_get_thickness_interval_equal_bounds():
    assert get_thickness_interval(3, 10, 10) == 2
