"""Assemble a :class:`ClassJobProfile` from a class/job page."""

from __future__ import annotations

from bs4 import BeautifulSoup

from classjob.scraper.categories import map_category
from classjob.scraper.jobs import parse_job_item
from classjob.scraper.markup import reconstruct_from_view_source
from classjob.scraper.models import CharacterDetails, ClassJobProfile
from classjob.scraper.text import first_image_src, first_text, node_text

_NAME_SELECTOR = ".frame__chara__name"
_WORLD_SELECTOR = ".frame__chara__world"


def parse_class_job_page(html: str) -> ClassJobProfile:
    """Extract identity and categorised jobs from real page markup.

    Each ``<h4>`` whose label maps onto the taxonomy owns the first ``<ul>``
    that follows it among its siblings.  Unknown headers, headers without a
    list and job rows without a name are skipped; nothing here raises on
    unexpected markup.
    """
    soup = BeautifulSoup(html, "html.parser")
    profile = ClassJobProfile(
        details=CharacterDetails(
            name=first_text(soup, _NAME_SELECTOR),
            world=first_text(soup, _WORLD_SELECTOR),
        )
    )

    for header in soup.find_all("h4"):
        category = map_category(node_text(header).lower())
        if category is None:
            continue
        slot = profile.slot(category)

        icon = first_image_src(header)
        if icon and slot.icon is None:
            slot.icon = icon

        job_list = header.find_next_sibling("ul")
        if job_list is None:
            continue

        for li in job_list.find_all("li", recursive=False):
            entry = parse_job_item(li)
            if entry is not None:
                slot.jobs.append(entry)

    return profile


def build_profile(page: str) -> ClassJobProfile:
    """Run the full pipeline on fetched page text (view-source or not)."""
    return parse_class_job_page(reconstruct_from_view_source(page))
