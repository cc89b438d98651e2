from datetime import datetime

import pytest

from portfolio.services.content_filters import (
    BLOG,
    PROJECT,
    FilterCriteria,
    apply_filters,
    collation_key,
    matches_criteria,
    timestamp_of,
)


def blog(title, created_at="2024-01-01", **fields):
    record = {
        "title": title,
        "created_at": created_at,
        "author": "Saran",
        "excerpt": None,
        "tags": None,
        "published": True,
        "featured": None,
        "category": None,
    }
    record.update(fields)
    return record


def titles(records):
    return [r["title"] for r in records]


def test_draft_excluded_regardless_of_sort():
    records = [
        {"title": "Zebra", "created_at": "2024-01-01", "published": True},
        {"title": "Apple", "created_at": "2024-06-01", "published": False},
    ]
    result = apply_filters(records, FilterCriteria(status_filter="published", sort_by="title"))
    assert titles(result) == ["Zebra"]


def test_search_matches_title_excerpt_author_and_tags_case_insensitively():
    records = [
        blog("Intro to FastAPI"),
        blog("Other", excerpt="A post about FASTAPI internals"),
        blog("Third", author="Fastapi Fan"),
        blog("Fourth", tags=["python", "fastapi"]),
        blog("Unrelated", tags=["django"]),
    ]
    result = apply_filters(records, FilterCriteria(search_term="  fastapi ", sort_by="title"))
    assert titles(result) == ["Fourth", "Intro to FastAPI", "Other", "Third"]


def test_search_tolerates_missing_fields():
    records = [{"title": "Only a title", "created_at": None}]
    assert apply_filters(records, FilterCriteria(search_term="zzz")) == []
    assert len(apply_filters(records, FilterCriteria(search_term="title"))) == 1


def test_project_search_uses_description_and_technologies():
    records = [
        {"title": "CMS", "description": "Headless content store", "technologies": ["Go"]},
        {"title": "Portfolio", "description": "Personal site", "technologies": ["Next.js", "Supabase"]},
    ]
    assert titles(apply_filters(records, FilterCriteria(search_term="supa"), PROJECT)) == ["Portfolio"]
    assert titles(apply_filters(records, FilterCriteria(search_term="headless"), PROJECT)) == ["CMS"]
    # author is not a project field
    assert apply_filters(records, FilterCriteria(search_term="saran"), PROJECT) == []


@pytest.mark.parametrize(
    "featured_filter,expected",
    [("all", ["A", "B", "C"]), ("featured", ["A"]), ("regular", ["B", "C"]), ("not-featured", ["B", "C"])],
)
def test_featured_filter_treats_null_as_regular(featured_filter, expected):
    records = [blog("A", featured=True), blog("B", featured=False), blog("C", featured=None)]
    result = apply_filters(records, FilterCriteria(featured_filter=featured_filter, sort_by="title"))
    assert titles(result) == expected


@pytest.mark.parametrize(
    "status_filter,expected",
    [("all", ["A", "B"]), ("published", ["A"]), ("draft", ["B"])],
)
def test_status_filter(status_filter, expected):
    records = [blog("A", published=True), blog("B", published=False)]
    result = apply_filters(records, FilterCriteria(status_filter=status_filter, sort_by="title"))
    assert titles(result) == expected


def test_category_filter_is_exact_label_match():
    records = [blog("A", category="Web"), blog("B", category="Web Dev"), blog("C", category=" Web ")]
    result = apply_filters(records, FilterCriteria(category_filter="Web", sort_by="title"))
    assert titles(result) == ["A", "C"]


def test_single_record_passes_iff_every_predicate_holds():
    record = blog("Deploying Python", published=False, featured=True, category="Ops", tags=["docker"])
    criteria_cases = [
        (FilterCriteria(search_term="docker"), True),
        (FilterCriteria(search_term="docker", status_filter="published"), False),
        (FilterCriteria(status_filter="draft", featured_filter="featured"), True),
        (FilterCriteria(status_filter="draft", featured_filter="regular"), False),
        (FilterCriteria(category_filter="Ops", search_term="python"), True),
        (FilterCriteria(category_filter="Dev"), False),
    ]
    for criteria, expected in criteria_cases:
        result = apply_filters([record], criteria)
        assert len(result) in (0, 1)
        assert (len(result) == 1) is expected
        assert matches_criteria(record, criteria, BLOG) is expected


def test_newest_and_oldest_sorting():
    records = [blog("Mid", "2024-03-01"), blog("Old", "2023-01-01"), blog("New", "2024-09-01T10:00:00Z")]
    assert titles(apply_filters(records, FilterCriteria(sort_by="newest"))) == ["New", "Mid", "Old"]
    assert titles(apply_filters(records, FilterCriteria(sort_by="oldest"))) == ["Old", "Mid", "New"]


def test_sort_is_stable_for_equal_timestamps():
    records = [blog("first"), blog("second"), blog("third"), blog("newer", "2025-01-01")]
    assert titles(apply_filters(records, FilterCriteria(sort_by="newest"))) == [
        "newer", "first", "second", "third",
    ]
    assert titles(apply_filters(records, FilterCriteria(sort_by="oldest"))) == [
        "first", "second", "third", "newer",
    ]


def test_bad_dates_count_as_epoch():
    records = [blog("Broken", "not-a-date"), blog("Missing", None), blog("Real", "2020-05-05")]
    assert titles(apply_filters(records, FilterCriteria(sort_by="newest"))) == ["Real", "Broken", "Missing"]


def test_title_author_and_category_sort_ignore_case_and_accents():
    records = [blog("banana", author="Zoe"), blog("Éclair", author="adam"), blog("apple", author="Émile")]
    assert titles(apply_filters(records, FilterCriteria(sort_by="title"))) == ["apple", "banana", "Éclair"]
    assert titles(apply_filters(records, FilterCriteria(sort_by="author"))) == ["Éclair", "apple", "banana"]

    projects = [{"title": "P1", "category": "web"}, {"title": "P2", "category": "AI"}, {"title": "P3", "category": None}]
    assert titles(apply_filters(projects, FilterCriteria(sort_by="category"), PROJECT)) == ["P3", "P2", "P1"]


def test_unknown_sort_key_keeps_input_order():
    records = [blog("b"), blog("a")]
    assert titles(apply_filters(records, FilterCriteria(sort_by="popularity"))) == ["b", "a"]


def test_works_on_objects_as_well_as_mappings():
    class Row:
        def __init__(self, title, created_at):
            self.title = title
            self.created_at = created_at
            self.published = True

    rows = [Row("old", datetime(2020, 1, 1)), Row("new", datetime(2024, 1, 1))]
    assert [r.title for r in apply_filters(rows, FilterCriteria())] == ["new", "old"]


def test_criteria_defaults_fill_blanks():
    criteria = FilterCriteria(search_term=None, status_filter="", featured_filter=None, sort_by="")
    assert criteria.search_term == ""
    assert criteria.status_filter == "all"
    assert criteria.featured_filter == "all"
    assert criteria.sort_by == "newest"


def test_helpers():
    assert collation_key("Ébène") == "ebene"
    assert timestamp_of("2024-01-01") == timestamp_of(datetime(2024, 1, 1))
    assert timestamp_of(42) == 0.0
