from typing import Any, Dict, Iterable, List

from pydantic import BaseModel

from portfolio.services.content_filters import collation_key, field_value
from portfolio.services.slugs import slugify


class Category(BaseModel):
    label: str
    count: int
    slug: str


def category_label(record: Any) -> str:
    return (field_value(record, "category") or "").strip()


def category_slug_of(record: Any) -> str:
    """
    Stored category_slug when present, otherwise derived from the label.
    """
    return field_value(record, "category_slug") or slugify(category_label(record))


def matches_category(record: Any, target_slug: str) -> bool:
    """
    Does this record belong to the category route `target_slug`?

    Rows written before category_slug existed have only the label, so we
    fall back to slugifying it the same way the write path does.
    """
    if not field_value(record, "category"):
        return False
    stored = field_value(record, "category_slug")
    if stored and stored == target_slug:
        return True
    return slugify(field_value(record, "category")) == target_slug


def build_category_index(records: Iterable[Any]) -> List[Category]:
    """
    Distinct non-empty categories with their record counts, sorted by label.
    """
    counts: Dict[str, int] = {}
    slugs: Dict[str, str] = {}
    for record in records:
        label = category_label(record)
        if not label:
            continue
        counts[label] = counts.get(label, 0) + 1
        stored = field_value(record, "category_slug")
        if stored and label not in slugs:
            slugs[label] = stored

    labels = sorted(counts, key=collation_key)
    return [
        Category(label=label, count=counts[label], slug=slugs.get(label) or slugify(label))
        for label in labels
    ]


def suggest_other_categories(
    records: Iterable[Any],
    exclude_slug: str,
    limit: int = 5,
) -> List[Category]:
    """
    "Browse other categories": every category except the current one,
    most populated first. Ties keep the order in which the categories
    first appear in `records`.
    """
    counts: Dict[str, int] = {}
    slugs: Dict[str, str] = {}
    for record in records:
        label = category_label(record)
        if not label or matches_category(record, exclude_slug):
            continue
        counts[label] = counts.get(label, 0) + 1
        if not slugs.get(label):
            slugs[label] = field_value(record, "category_slug") or ""

    ranked = sorted(counts, key=lambda label: counts[label], reverse=True)
    return [
        Category(label=label, count=counts[label], slug=slugs[label] or slugify(label))
        for label in ranked[:limit]
    ]
