from typing import Any, List, Optional, Sequence

from portfolio.services.categories import matches_category
from portfolio.services.content_filters import (
    BLOG,
    ContentKind,
    FilterCriteria,
    apply_filters,
)
from portfolio.services.pagination import Page, paginate, page_window


class ListingState:
    """
    Everything one list screen needs: the full collection, the current
    filters, an optional category route and a page cursor.

    Changing the criteria, the category or swapping the collection always
    sends the cursor back to page 1, so a stale page number never points
    into a shorter result list.
    """

    def __init__(
        self,
        records: Sequence[Any],
        page_size: int,
        kind: ContentKind = BLOG,
        criteria: Optional[FilterCriteria] = None,
        category_slug: Optional[str] = None,
    ):
        self.kind = kind
        self.page_size = page_size
        self._records = list(records)
        self._criteria = criteria or FilterCriteria()
        self._category_slug = category_slug
        self.current_page = 1

    @property
    def records(self) -> List[Any]:
        return self._records

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def category_slug(self) -> Optional[str]:
        return self._category_slug

    def replace_records(self, records: Sequence[Any]):
        self._records = list(records)
        self.current_page = 1

    def update_criteria(self, **changes):
        self._criteria = FilterCriteria(**{**self._criteria.model_dump(), **changes})
        self.current_page = 1

    def set_category(self, category_slug: Optional[str]):
        self._category_slug = category_slug
        self.current_page = 1

    def go_to(self, page: int):
        self.current_page = page

    def in_category(self) -> List[Any]:
        if not self._category_slug:
            return list(self._records)
        return [r for r in self._records if matches_category(r, self._category_slug)]

    def results(self) -> List[Any]:
        return apply_filters(self.in_category(), self._criteria, self.kind)

    def page(self) -> Page:
        return paginate(self.results(), self.page_size, self.current_page)

    def window(self) -> List[Optional[int]]:
        return page_window(self.current_page, self.page().total_pages)
