import math
from typing import Any, Dict, List, Optional

from portfolio.services.categories import category_label
from portfolio.services.content_filters import field_value

WORDS_PER_MINUTE = 200


def reading_time(content: Optional[str]) -> int:
    """
    Minutes to read `content` at 200 words/minute, never less than 1.
    """
    if not content or not content.strip():
        return 1
    words = len(content.split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def _count(records: List[Any], flag: str) -> int:
    return sum(1 for r in records if field_value(r, flag))


def blog_stats(blogs: List[Any]) -> Dict[str, int]:
    published = _count(blogs, "published")
    return {
        "total": len(blogs),
        "published": published,
        "drafts": len(blogs) - published,
        "featured": _count(blogs, "featured"),
    }


def project_stats(projects: List[Any]) -> Dict[str, int]:
    published = _count(projects, "published")
    return {
        "total": len(projects),
        "published": published,
        "featured": _count(projects, "featured"),
        "drafts": len(projects) - published,
        "categories": len({category_label(p) for p in projects if category_label(p)}),
    }


def dashboard_stats(blogs: List[Any], projects: List[Any], skills: List[Any]) -> Dict[str, int]:
    return {
        "total_blogs": len(blogs),
        "published_blogs": _count(blogs, "published"),
        "total_projects": len(projects),
        "featured_projects": _count(projects, "featured"),
        "total_skills": len(skills),
        "featured_skills": _count(skills, "featured"),
    }
