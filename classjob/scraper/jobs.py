"""Parse a single job ``<li>`` from a category list.

The job rows carry no usable class names for their fields, so each direct
``<div>`` child is classified by the shape of its text:

* ``12``            -> level (1-3 digits, first match only)
* ``1,234 / 5,600`` -> experience / experience cap
* anything with a letter that is not a placeholder dash -> job name

Unlocked but never played jobs show ``-`` for level and experience; the name
rule ignores those placeholders so level-0 rows still get their real name.
"""

from __future__ import annotations

import re
from typing import Optional

from bs4 import Tag

from classjob.scraper.models import JobEntry
from classjob.scraper.text import first_attr, first_image_src, normalize

_LEVEL = re.compile(r"^\d{1,3}$")
_EXPERIENCE = re.compile(r"(\d[\d,]*)\s*/\s*(\d[\d,]*)")
_LETTER = re.compile(r"[A-Za-z]")

# "-" and an en dash that went through a UTF-8 -> cp1252 round trip.
PLACEHOLDERS = frozenset({"-", "\u00e2\u20ac\u201c"})

_TOOLTIP_ATTRS = ("data-tooltip", "title", "aria-label")


def is_placeholder(text: str) -> bool:
    return text in PLACEHOLDERS


def _to_int(digits: str) -> int:
    return int(digits.replace(",", ""))


def parse_job_item(li: Tag) -> Optional[JobEntry]:
    """Build a :class:`JobEntry` from *li*, or ``None`` if it has no name."""
    level: Optional[int] = None
    experience: Optional[tuple[int, int]] = None
    name = ""
    tooltip = ""

    for div in li.find_all("div", recursive=False):
        raw = normalize(div.get_text())

        if level is None and _LEVEL.match(raw):
            level = int(raw)
            continue

        if experience is None:
            match = _EXPERIENCE.search(raw)
            if match:
                experience = (_to_int(match.group(1)), _to_int(match.group(2)))
                continue

        if not name and raw and not is_placeholder(raw) and _LETTER.search(raw):
            name = raw
            tooltip = first_attr(div, *_TOOLTIP_ATTRS) or name

    if not name:
        return None

    exp, exp_max = experience or (0, 0)
    return JobEntry(
        name=name,
        level=level or 0,
        icon=first_image_src(li),
        tooltip=tooltip,
        experience=exp,
        experience_max=exp_max,
    )
