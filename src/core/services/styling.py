"""Link thickness helpers.

Both functions map a value inside `[min, max]` onto the client's five link
thickness levels (1..5). When `min == max` the range starts at zero.
"""

from __future__ import annotations


def get_thickness(value: int, minimum: int, maximum: int) -> int:
    """Bucket `value` by percentage of the range (1%, 10%, 30%, 60%, rest)."""

    if minimum == maximum:
        minimum = 0
    delta = maximum - minimum

    for level, share in enumerate((0.01, 0.1, 0.3, 0.6), start=1):
        if value <= delta * share:
            return level
    return 5


def get_thickness_interval(value: int, minimum: int, maximum: int) -> int:
    """Bucket `value` into five equal intervals of the range."""

    if minimum == maximum:
        minimum = 0
    interval = (maximum - minimum) // 5

    for level in range(1, 5):
        if value <= interval * level:
            return level
    return 5
