"""
Search / filter / sort over an in-memory list of blog or project records.

This is the one filtering implementation shared by the public blog list,
the category page and the admin lists. Records can be ORM rows, pydantic
models or plain dicts; fields are read through `field_value`.
"""

import unicodedata
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, field_validator

SORT_NEWEST = "newest"
SORT_OLDEST = "oldest"
SORT_TITLE = "title"
SORT_AUTHOR = "author"
SORT_CATEGORY = "category"

SORT_KEYS = (SORT_NEWEST, SORT_OLDEST, SORT_TITLE, SORT_AUTHOR, SORT_CATEGORY)
STATUS_FILTERS = ("all", "published", "draft")
FEATURED_FILTERS = ("all", "featured", "regular")

_EPOCH = 0.0


class ContentKind(BaseModel):
    """
    Which fields of a record take part in search.

    `search_fields` are scalar text fields; `list_field` is the
    tags/technologies list, where any single entry may match.
    """
    name: str
    search_fields: Sequence[str]
    list_field: str


BLOG = ContentKind(name="blog", search_fields=("title", "excerpt", "author"), list_field="tags")
PROJECT = ContentKind(name="project", search_fields=("title", "description"), list_field="technologies")


class FilterCriteria(BaseModel):
    search_term: str = ""
    status_filter: str = "all"
    featured_filter: str = "all"
    category_filter: str = "all"
    sort_by: str = SORT_NEWEST

    @field_validator("search_term", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

    @field_validator("status_filter", "category_filter", mode="before")
    @classmethod
    def _default_all(cls, v):
        return v or "all"

    @field_validator("featured_filter", mode="before")
    @classmethod
    def _featured_alias(cls, v):
        # the admin project screen calls it "not-featured"
        if v == "not-featured":
            return "regular"
        return v or "all"

    @field_validator("sort_by", mode="before")
    @classmethod
    def _default_sort(cls, v):
        return v or SORT_NEWEST


def field_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def collation_key(text: Optional[str]) -> str:
    """
    Case- and accent-insensitive ordering key ("Éclair" sorts with "eclair").
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def timestamp_of(value: Any) -> float:
    """
    Seconds since epoch for a datetime or ISO-8601 string.
    Missing or unparseable values count as the epoch itself.
    Naive datetimes are taken as UTC.
    """
    if value is None:
        return _EPOCH
    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(raw)
        except ValueError:
            return _EPOCH
    if not isinstance(value, datetime):
        return _EPOCH
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def matches_search(record: Any, term: str, kind: ContentKind) -> bool:
    q = (term or "").strip().lower()
    if not q:
        return True

    for name in kind.search_fields:
        value = field_value(record, name)
        if isinstance(value, str) and q in value.lower():
            return True

    for entry in field_value(record, kind.list_field) or []:
        if isinstance(entry, str) and q in entry.lower():
            return True

    return False


def matches_status(record: Any, status_filter: str) -> bool:
    if status_filter == "published":
        return bool(field_value(record, "published"))
    if status_filter == "draft":
        return not field_value(record, "published")
    return True


def matches_featured(record: Any, featured_filter: str) -> bool:
    if featured_filter == "featured":
        return bool(field_value(record, "featured"))
    if featured_filter == "regular":
        return not field_value(record, "featured")
    return True


def matches_category_label(record: Any, category_filter: str) -> bool:
    if not category_filter or category_filter == "all":
        return True
    return (field_value(record, "category") or "").strip() == category_filter


def matches_criteria(record: Any, criteria: FilterCriteria, kind: ContentKind) -> bool:
    return (
        matches_search(record, criteria.search_term, kind)
        and matches_status(record, criteria.status_filter)
        and matches_featured(record, criteria.featured_filter)
        and matches_category_label(record, criteria.category_filter)
    )


def sort_records(records: Iterable[Any], sort_by: str) -> List[Any]:
    """
    Stable sort; records that compare equal keep their input order.
    """
    items = list(records)
    if sort_by == SORT_NEWEST:
        items.sort(key=lambda r: timestamp_of(field_value(r, "created_at")), reverse=True)
    elif sort_by == SORT_OLDEST:
        items.sort(key=lambda r: timestamp_of(field_value(r, "created_at")))
    elif sort_by in (SORT_TITLE, SORT_AUTHOR, SORT_CATEGORY):
        items.sort(key=lambda r: collation_key(field_value(r, sort_by)))
    return items


def apply_filters(
    records: Iterable[Any],
    criteria: FilterCriteria,
    kind: ContentKind = BLOG,
) -> List[Any]:
    kept = [r for r in records if matches_criteria(r, criteria, kind)]
    return sort_records(kept, criteria.sort_by)
