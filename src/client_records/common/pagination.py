"""Paging primitives shared by repositories and list views.

``Page`` is the slice a repository returns for one list request and
``PageRender`` turns it into the navigation links shown under the table:
a window of page numbers centred on the current page plus first/previous/
next/last indicators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total_elements <= 0:
            return 1
        return -(-self.total_elements // self.size)


@dataclass(frozen=True)
class PageItem:
    number: int
    current: bool


def check_window_size(window_size: int) -> int:
    if window_size <= 0 or window_size % 2 == 0:
        raise ValueError(f"window_size must be a positive odd integer, got {window_size}")
    return window_size


def page_window(current_page: int, total_pages: int, window_size: int) -> List[int]:
    """Return the 1-based page numbers to link, centred on ``current_page + 1``.

    ``current_page`` is 0-based. A ``total_pages`` of 0 is treated as one
    empty page. Contract violations raise ``ValueError``.
    """
    check_window_size(window_size)
    if total_pages < 0:
        raise ValueError(f"total_pages must not be negative, got {total_pages}")
    total_pages = max(1, total_pages)
    if current_page < 0 or current_page >= total_pages:
        raise ValueError(f"current_page {current_page} outside 0..{total_pages - 1}")

    half = window_size // 2
    start = max(1, current_page + 1 - half)
    end = start + window_size - 1
    if end > total_pages:
        end = total_pages
        start = max(1, end - window_size + 1)
    return list(range(start, end + 1))


class PageRender(Generic[T]):
    """View-model for the paginator partial."""

    def __init__(self, url: str, page: Page[T], window_size: int = 5):
        self.url = url
        self.page = page
        self.window_size = window_size
        self.current_page = page.number
        self.total_pages = page.total_pages
        self.items = [
            PageItem(number=n, current=(n == self.current_page + 1))
            for n in page_window(self.current_page, self.total_pages, window_size)
        ]

    @property
    def first(self) -> int:
        return 1

    @property
    def last(self) -> int:
        return self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 0

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages - 1

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def href(self, number: int) -> str:
        """Link for the 1-based page ``number``."""
        return f"{self.url}?page={number - 1}"
