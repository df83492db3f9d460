"""Fixed role taxonomy and the label -> category mapping."""

from __future__ import annotations

from enum import Enum
from typing import Optional

COMBAT = "DoW/DoM"
VOCATION = "DoH/DoL"

# Output order of the top-level groups.
GROUPS = (COMBAT, VOCATION)


class Category(Enum):
    """The eight category slots, declared in output order."""

    TANK = (COMBAT, "Tank")
    HEALER = (COMBAT, "Healer")
    MELEE_DPS = (COMBAT, "Melee DPS")
    PHYSICAL_RANGED_DPS = (COMBAT, "Physical Ranged DPS")
    MAGICAL_RANGED_DPS = (COMBAT, "Magical Ranged DPS")
    LIMITED = (COMBAT, "Limited Jobs")
    HAND = (VOCATION, "Hand (DoH)")
    LAND = (VOCATION, "Land (DoL)")

    @property
    def group(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]


# Substring rules, checked in order; the first hit wins.
_SUBSTRING_RULES = (
    ("tank", Category.TANK),
    ("healer", Category.HEALER),
    ("melee dps", Category.MELEE_DPS),
    ("physical ranged dps", Category.PHYSICAL_RANGED_DPS),
    ("magical ranged dps", Category.MAGICAL_RANGED_DPS),
    ("limited", Category.LIMITED),
)


def map_category(label: str) -> Optional[Category]:
    """Resolve a normalised, lower-cased header *label* to a :class:`Category`.

    Returns ``None`` for labels outside the taxonomy.
    """
    for needle, category in _SUBSTRING_RULES:
        if needle in label:
            return category
    if "disciples of the hand" in label or label == "hand":
        return Category.HAND
    if "disciples of the land" in label or label == "land":
        return Category.LAND
    return None
