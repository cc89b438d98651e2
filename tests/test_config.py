import pytest

from portfolio.config import positive_int_env


def test_page_size_default_and_override(monkeypatch):
    monkeypatch.delenv("BLOGS_PER_PAGE", raising=False)
    assert positive_int_env("BLOGS_PER_PAGE", 12) == 12

    monkeypatch.setenv("BLOGS_PER_PAGE", "6")
    assert positive_int_env("BLOGS_PER_PAGE", 12) == 6


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_page_size_must_be_positive(monkeypatch, raw):
    monkeypatch.setenv("ADMIN_PAGE_SIZE", raw)
    with pytest.raises(ValueError) as exc:
        positive_int_env("ADMIN_PAGE_SIZE", 20)
    assert "ADMIN_PAGE_SIZE" in str(exc.value)
