"""Class attribute helpers for the BeautifulSoup based postprocessors."""

from __future__ import annotations

from typing import Iterable, List

from bs4 import Tag


def get_class_list(tag: Tag) -> List[str]:
    """
    Return the tag's classes as a list of unique strings.

    The class attribute may be missing, a whitespace separated string, a
    boolean (bare ``class`` attribute) or a list.
    """
    value = tag.get("class")
    if not value or value is True:
        return []
    if isinstance(value, str):
        value = value.split()
    return list(dict.fromkeys(str(item) for item in value if item))


def add_classes(tag: Tag, classes: Iterable[str]) -> List[str]:
    """Append ``classes`` to the tag's class list, skipping duplicates."""
    merged = list(dict.fromkeys(get_class_list(tag) + list(classes)))
    if merged:
        tag["class"] = merged
    return merged
