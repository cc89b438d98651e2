import math
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel


class Page(BaseModel):
    items: List[Any]
    total_pages: int


def total_pages_for(count: int, page_size: int) -> int:
    return max(1, math.ceil(count / page_size))


def paginate(records: Sequence[Any], page_size: int, current_page: int) -> Page:
    """
    Slice out one page. The page number is not clamped: asking for a page
    past the end gives an empty `items`, callers keep 1 <= page <= total_pages.
    """
    start = (current_page - 1) * page_size
    if start < 0:
        return Page(items=[], total_pages=total_pages_for(len(records), page_size))
    return Page(
        items=list(records[start:start + page_size]),
        total_pages=total_pages_for(len(records), page_size),
    )


def is_page_visible(page: int, current_page: int, total_pages: int) -> bool:
    return page == 1 or page == total_pages or abs(page - current_page) <= 1


def page_window(current_page: int, total_pages: int) -> List[Optional[int]]:
    """
    Page buttons to show, with None where a run of hidden pages collapses.

      page_window(5, 10) -> [1, None, 4, 5, 6, None, 10]
    """
    window: List[Optional[int]] = []
    for page in range(1, total_pages + 1):
        if is_page_visible(page, current_page, total_pages):
            window.append(page)
        elif window and window[-1] is not None:
            window.append(None)
    return window
