"""Scraper package - class/job page fetch & extraction."""

from classjob.scraper.categories import Category, map_category
from classjob.scraper.errors import ClassJobError
from classjob.scraper.fetcher import character_url, fetch_class_job_page
from classjob.scraper.models import ClassJobProfile, JobEntry, RawPage
from classjob.scraper.profile import build_profile, parse_class_job_page

__all__ = [
    "Category",
    "ClassJobError",
    "ClassJobProfile",
    "JobEntry",
    "RawPage",
    "build_profile",
    "character_url",
    "fetch_class_job_page",
    "map_category",
    "parse_class_job_page",
]
