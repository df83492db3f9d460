"""Data models for the class/job scraping pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from classjob.scraper.categories import Category, GROUPS


@dataclass
class RawPage:
    """The raw HTTP response for a single class/job page fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class JobEntry:
    """One job row of a category list."""

    name: str
    level: int = 0
    icon: Optional[str] = None
    tooltip: str = ""
    experience: int = 0
    experience_max: int = 0

    def __post_init__(self) -> None:
        if not self.tooltip:
            self.tooltip = self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "job_icon": self.icon,
            "job_level": self.level,
            "job_name": self.name,
            "job_name_tooltip": self.tooltip,
            "job_exp": self.experience,
            "job_exp_max": self.experience_max,
        }


@dataclass
class CategorySlot:
    """A taxonomy slot: category icon plus its jobs in document order."""

    icon: Optional[str] = None
    jobs: List[JobEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"icon": self.icon, "jobs": [job.to_dict() for job in self.jobs]}


@dataclass
class CharacterDetails:
    name: str = ""
    world: str = ""


@dataclass
class ClassJobProfile:
    """The assembled result for one character page.

    Every :class:`Category` has a slot from construction onwards, so the
    serialised shape never depends on which sections the page contained.
    """

    details: CharacterDetails = field(default_factory=CharacterDetails)
    slots: Dict[Category, CategorySlot] = field(
        default_factory=lambda: {category: CategorySlot() for category in Category}
    )

    def slot(self, category: Category) -> CategorySlot:
        return self.slots[category]

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping served by the API."""
        out: Dict[str, Any] = {
            "details": {"name": self.details.name, "world": self.details.world},
        }
        for group in GROUPS:
            out[group] = {
                category.label: self.slots[category].to_dict()
                for category in Category
                if category.group == group
            }
        return out
