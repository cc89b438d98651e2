from portfolio.services.categories import (
    build_category_index,
    category_slug_of,
    matches_category,
    suggest_other_categories,
)
from portfolio.services.slugs import slugify


def post(category=None, category_slug=None, title="t"):
    return {"title": title, "category": category, "category_slug": category_slug}


def test_index_counts_and_sorts_by_label():
    records = [
        post("Web Development"),
        post("ai & ML"),
        post("Web Development"),
        post("Career"),
    ]
    index = build_category_index(records)
    assert [(c.label, c.count, c.slug) for c in index] == [
        ("ai & ML", 1, "ai-ml"),
        ("Career", 1, "career"),
        ("Web Development", 2, "web-development"),
    ]


def test_index_skips_blank_categories_and_counts_add_up():
    records = [post(None), post(""), post("   "), post("Go"), post(" Go "), post("Rust")]
    index = build_category_index(records)
    assert [c.label for c in index] == ["Go", "Rust"]
    non_empty = [r for r in records if (r["category"] or "").strip()]
    assert sum(c.count for c in index) == len(non_empty)


def test_index_prefers_stored_category_slug():
    records = [post("C++ Tips"), post("C++ Tips", category_slug="cpp-tips")]
    index = build_category_index(records)
    assert index[0].slug == "cpp-tips"
    assert index[0].count == 2


def test_matches_category_uses_stored_slug_first():
    record = post("C++ Tips", category_slug="cpp-tips")
    assert matches_category(record, "cpp-tips")
    # the derived slug still matches too
    assert matches_category(record, "c-tips")
    assert not matches_category(record, "tips")


def test_matches_category_falls_back_to_slugified_label():
    legacy = post("Web Development")
    assert matches_category(legacy, "web-development")
    assert matches_category(legacy, slugify(legacy["category"]))
    assert not matches_category(legacy, "web")


def test_matches_category_false_without_category():
    assert not matches_category(post(None, category_slug="orphan"), "orphan")
    assert not matches_category(post(""), "")


def test_category_slug_of():
    assert category_slug_of(post("Data Science")) == "data-science"
    assert category_slug_of(post("Data Science", "ds")) == "ds"
    assert category_slug_of(post(None)) == ""


def test_suggest_other_categories_excludes_current_and_ranks_by_count():
    records = (
        [post("Python")] * 3
        + [post("Career")] * 1
        + [post("DevOps")] * 2
        + [post("Web")] * 4
        + [post("AI")] * 2
        + [post("Rust")] * 1
        + [post("Go")] * 1
    )
    suggestions = suggest_other_categories(records, "web")
    assert [c.label for c in suggestions] == ["Python", "DevOps", "AI", "Career", "Rust"]
    assert all(c.slug != "web" for c in suggestions)


def test_suggest_other_categories_limit():
    records = [post("A"), post("B"), post("C")]
    assert len(suggest_other_categories(records, "zzz", limit=2)) == 2


def test_suggest_other_categories_ties_keep_first_seen_order():
    newest_first = [post("Zig"), post("Career"), post("Web"), post("Zig"), post("Career"), post("Art")]
    suggestions = suggest_other_categories(newest_first, "web")
    assert [(c.label, c.count) for c in suggestions] == [("Zig", 2), ("Career", 2), ("Art", 1)]


def test_suggest_other_categories_uses_stored_slug():
    records = [post("C++ Tips"), post("C++ Tips", category_slug="cpp-tips")]
    assert suggest_other_categories(records, "web")[0].slug == "cpp-tips"
