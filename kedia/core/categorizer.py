# kedia/core/categorizer.py
from functools import lru_cache
from types import MappingProxyType
from pathlib import Path

import yaml

from kedia.core.models import Category

DEFAULT_KEYWORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "categories.yaml"


def load_keywords(path=None):
    """Read a category keyword table from YAML.

    The result maps every :class:`Category`, in enumeration order, to a tuple
    of lowercase keywords. Categories absent from the file get no keywords.
    """
    target = Path(path) if path else DEFAULT_KEYWORDS_FILE
    with target.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Keyword table in {target} must be a mapping")

    table = {cat: () for cat in Category}
    for name, keywords in data.items():
        cat = Category.parse(name)
        if keywords is None:
            keywords = []
        if not isinstance(keywords, list):
            raise ValueError(f"Keywords for '{name}' in {target} must be a list")
        table[cat] = tuple(str(kw).lower() for kw in keywords)
    return table


@lru_cache(maxsize=None)
def default_keywords():
    return MappingProxyType(load_keywords())


def guess_category(description, keywords=None):
    text = description.lower()
    table = keywords if keywords is not None else default_keywords()
    for cat, words in table.items():
        for kw in words:
            if kw in text:
                return cat
    return Category.OTHER
