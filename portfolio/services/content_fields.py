"""
Write-time preparation of blog/project/skill fields.

Slugs are derived here, once, so every stored row carries both `slug` and
`category_slug` and category routes can match on the stored value.
"""

from typing import Any, Dict, Iterable, Optional

from portfolio.services.errors import ValidationError
from portfolio.services.slugs import slugify

BLOG_REQUIRED = ("title", "content")
PROJECT_REQUIRED = ("title", "description")
SKILL_REQUIRED = ("name", "website_url")

# Columns that may be left out of an edit but never set to null
BLOG_NOT_NULL = ("author", "published", "featured")
PROJECT_NOT_NULL = ("published", "featured")
SKILL_NOT_NULL = ("category", "featured")

# /blogs/author/... and /blogs/category/... shadow /blogs/{category_slug}/{slug}
BLOG_RESERVED_CATEGORY_SLUGS = ("author", "category")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_required(fields: Dict[str, Any], required: Iterable[str], partial: bool = False):
    """
    partial=True (edits) only checks required fields that are being changed.
    """
    for name in required:
        if partial and name not in fields:
            continue
        if _is_blank(fields.get(name)):
            raise ValidationError("Please fill in all required fields")


def check_not_null(fields: Dict[str, Any], names: Iterable[str]):
    for name in names:
        if name in fields and fields[name] is None:
            label = name.replace("_", " ").capitalize()
            raise ValidationError(f"{label} cannot be empty")


def prepare_content_fields(
    fields: Dict[str, Any],
    required: Iterable[str],
    existing: Optional[Any] = None,
    not_null: Iterable[str] = (),
    reserved_category_slugs: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Validate and complete a blog/project write.

    - create (existing is None): slug comes from the title unless one is given
    - edit: a blank slug is re-derived from the (new or current) title
    - whenever `category` is written, `category_slug` is recomputed from it
    """
    data = dict(fields)
    check_required(data, required, partial=existing is not None)
    check_not_null(data, not_null)

    if existing is None or "slug" in data or "title" in data:
        title = data.get("title") if "title" in data else getattr(existing, "title", None)
        raw_slug = data.get("slug")
        if existing is not None and "slug" not in data:
            raw_slug = getattr(existing, "slug", None)
        slug = slugify(raw_slug) if not _is_blank(raw_slug) else slugify(title)
        if not slug:
            raise ValidationError("Title must contain at least one letter or number")
        data["slug"] = slug

    if "category" in data:
        category = (data.get("category") or "").strip()
        if category:
            category_slug = slugify(category)
            if not category_slug:
                raise ValidationError("Category must contain at least one letter or number")
            if category_slug in reserved_category_slugs:
                raise ValidationError(f"\"{category}\" cannot be used as a category name")
            data["category"] = category
            data["category_slug"] = category_slug
        else:
            data["category"] = None
            data["category_slug"] = None
    elif existing is None:
        data["category_slug"] = None

    return data
