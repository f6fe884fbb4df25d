"""Fixed-size pagination over a ranked list. Pages are 1-indexed."""

import math
from typing import TypeVar

T = TypeVar("T")


def paginate(ordered: list[T], page: int, page_size: int) -> tuple[list[T], int]:
    """Return the items on ``page`` and the total item count.

    An out-of-range page yields an empty slice; the total is always the
    full list length.
    """
    if page_size <= 0:
        msg = f"page_size must be positive, got {page_size}"
        raise ValueError(msg)
    total = len(ordered)
    start = max(0, (page - 1) * page_size)
    return ordered[start:start + page_size], total


def page_count(total: int, page_size: int) -> int:
    """Number of pages needed for ``total`` items (at least one)."""
    if page_size <= 0:
        msg = f"page_size must be positive, got {page_size}"
        raise ValueError(msg)
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Clamp a navigation target into ``[1, page_count]``."""
    return max(1, min(page, page_count(total, page_size)))
