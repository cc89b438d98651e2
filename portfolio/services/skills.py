from typing import Any, Dict, List

from portfolio.services.content_filters import field_value

SKILL_CATEGORY_LABELS = {
    "frontend": "Frontend",
    "backend": "Backend",
    "database": "Database",
    "cloud": "Cloud",
    "devops": "DevOps",
    "tools": "Tools",
    "design": "Design",
    "other": "Other",
}


def skill_category_label(category: str) -> str:
    return SKILL_CATEGORY_LABELS.get(category, (category or "other").capitalize())


def skill_categories(skills: List[Any]) -> List[str]:
    """
    "all" plus each category in first-seen order, for the filter chips.
    """
    seen: List[str] = []
    for skill in skills:
        category = field_value(skill, "category") or "other"
        if category not in seen:
            seen.append(category)
    return ["all"] + seen


def filter_skills(skills: List[Any], category: str) -> List[Any]:
    if not category or category == "all":
        return list(skills)
    return [s for s in skills if (field_value(s, "category") or "other") == category]


def group_skills(skills: List[Any]) -> Dict[str, List[Any]]:
    groups: Dict[str, List[Any]] = {}
    for skill in skills:
        groups.setdefault(field_value(skill, "category") or "other", []).append(skill)
    return groups
