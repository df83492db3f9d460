"""Whitespace normalisation and small BeautifulSoup lookup helpers."""

from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Collapse whitespace runs to one space and trim; ``None`` -> ``""``."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def node_text(tag: Optional[Tag]) -> str:
    """Normalised descendant text of *tag*, or ``""`` when there is no tag."""
    if tag is None:
        return ""
    return normalize(tag.get_text())


def first_text(soup: BeautifulSoup | Tag, selector: str) -> str:
    """Normalised text of the first element matching CSS *selector*."""
    return node_text(soup.select_one(selector))


def first_attr(tag: Tag, *names: str) -> Optional[str]:
    """Return the first non-empty attribute among *names*, in order."""
    for name in names:
        value = tag.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        if value:
            return value
    return None


def first_image_src(tag: Tag) -> Optional[str]:
    """``src`` of the first ``<img>`` below *tag*, or ``None``."""
    img = tag.find("img")
    if img is None:
        return None
    return first_attr(img, "src")
