import re
from typing import Iterable, List, Optional, Union

_STRIP_RE = re.compile(r"[^a-z0-9\s-]")
_SPACE_RE = re.compile(r"\s+")
_DASH_RE = re.compile(r"-+")


def slugify(text: Optional[str]) -> str:
    """
    Turn free text into a URL-safe slug.

      "Hello, World!  Foo--Bar " -> "hello-world-foo-bar"
      "Web Development"          -> "web-development"
      "!!!"                      -> ""

    The same function is used when writing `slug`/`category_slug` and when
    matching a category route against rows that have no stored slug, so
    both sides always agree.
    """
    if not text:
        return ""
    value = text.lower()
    value = _STRIP_RE.sub("", value)
    value = _SPACE_RE.sub("-", value)
    value = _DASH_RE.sub("-", value)
    return value.strip("- \t\r\n")


def parse_csv_list(value: Union[str, Iterable[str], None]) -> List[str]:
    """
    "FastAPI, React , ,Docker" -> ["FastAPI", "React", "Docker"]

    Lists pass through with the same trimming, so API clients can send either.
    """
    if value is None:
        return []
    if isinstance(value, str):
        parts = value.split(",")
    else:
        parts = list(value)
    return [p.strip() for p in parts if p and p.strip()]
