import pytest

from portfolio.services.content_stats import (
    blog_stats,
    dashboard_stats,
    project_stats,
    reading_time,
)
from portfolio.services.skills import (
    filter_skills,
    group_skills,
    skill_categories,
    skill_category_label,
)


@pytest.mark.parametrize(
    "content,minutes",
    [
        (None, 1),
        ("", 1),
        ("   ", 1),
        ("one two three", 1),
        (" ".join(["word"] * 200), 1),
        (" ".join(["word"] * 201), 2),
        ("\n".join(["word"] * 1000), 5),
    ],
)
def test_reading_time(content, minutes):
    assert reading_time(content) == minutes


def test_blog_and_project_stats():
    blogs = [
        {"published": True, "featured": True},
        {"published": False, "featured": None},
        {"published": True, "featured": False},
    ]
    assert blog_stats(blogs) == {"total": 3, "published": 2, "drafts": 1, "featured": 1}

    projects = [
        {"published": True, "featured": True, "category": "Web"},
        {"published": False, "featured": False, "category": "Web "},
        {"published": True, "featured": False, "category": None},
        {"published": True, "featured": True, "category": "CLI"},
    ]
    assert project_stats(projects) == {
        "total": 4,
        "published": 3,
        "featured": 2,
        "drafts": 1,
        "categories": 2,
    }


def test_dashboard_stats():
    stats = dashboard_stats(
        [{"published": True}, {"published": False}],
        [{"featured": True}],
        [{"featured": True}, {"featured": False}, {"featured": True}],
    )
    assert stats == {
        "total_blogs": 2,
        "published_blogs": 1,
        "total_projects": 1,
        "featured_projects": 1,
        "total_skills": 3,
        "featured_skills": 2,
    }


def test_skills_grouping_and_filtering():
    skills = [
        {"name": "React", "category": "frontend"},
        {"name": "FastAPI", "category": "backend"},
        {"name": "Vue", "category": "frontend"},
        {"name": "Figma", "category": None},
    ]
    assert skill_categories(skills) == ["all", "frontend", "backend", "other"]
    assert [s["name"] for s in filter_skills(skills, "frontend")] == ["React", "Vue"]
    assert len(filter_skills(skills, "all")) == 4

    groups = group_skills(skills)
    assert list(groups) == ["frontend", "backend", "other"]
    assert [s["name"] for s in groups["frontend"]] == ["React", "Vue"]


def test_skill_category_label():
    assert skill_category_label("devops") == "DevOps"
    assert skill_category_label("mobile") == "Mobile"
