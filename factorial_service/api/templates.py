"""HTML page rendering for the factorial endpoints."""

from functools import lru_cache
from pathlib import Path
from string import Template

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache()
def _load(name: str) -> str:
    return (TEMPLATES_DIR / name).read_text(encoding="utf-8")


def render_index() -> str:
    """Landing page with the input form."""
    return _load("index.html")


def render_number(input_number: int, value: str) -> str:
    """Result page showing the decimal factorial."""
    return Template(_load("number.html")).substitute(
        input_number=input_number, value=value
    )
