"""
Pagination over the canonical result list.

All functions are pure: they take the result list (or its length), a 1-based page
number and a page size, and never raise for out-of-range pages. Requested pages are
clamped into [1, total_pages].
"""

import math
from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12


def total_pages(total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Number of pages for a result list; never less than 1.

    Examples:
        >>> total_pages(0), total_pages(12), total_pages(15)
        (1, 1, 2)
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Clamp a requested page number into [1, total_pages]."""
    return min(max(1, page), total_pages(total_items, page_size))


def page_items(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> List[T]:
    """
    Items shown on a page.

    The page is clamped first, so asking for a page past the end returns the
    last page.
    """
    current = clamp_page(page, len(items), page_size)
    start = (current - 1) * page_size
    return list(items[start:start + page_size])
