"""Tests for the fixed taxonomy and header label mapping."""

from __future__ import annotations

import pytest

from classjob.scraper.categories import COMBAT, GROUPS, VOCATION, Category, map_category


@pytest.mark.parametrize(
    "label, expected",
    [
        ("tank", Category.TANK),
        ("healer", Category.HEALER),
        ("melee dps", Category.MELEE_DPS),
        ("physical ranged dps", Category.PHYSICAL_RANGED_DPS),
        ("magical ranged dps", Category.MAGICAL_RANGED_DPS),
        ("limited jobs", Category.LIMITED),
        ("disciples of the hand", Category.HAND),
        ("hand", Category.HAND),
        ("disciples of the land", Category.LAND),
        ("land", Category.LAND),
    ],
)
def test_known_labels(label: str, expected: Category) -> None:
    assert map_category(label) is expected


def test_substring_match_inside_longer_header() -> None:
    assert map_category("role: tank (3 jobs)") is Category.TANK


def test_ranged_labels_do_not_collapse_into_each_other() -> None:
    assert map_category("physical ranged dps") is not Category.MAGICAL_RANGED_DPS
    assert map_category("magical ranged dps") is not Category.PHYSICAL_RANGED_DPS


def test_hand_and_land_need_exact_short_form() -> None:
    assert map_category("handicraft") is None
    assert map_category("landmarks") is None


def test_unknown_label() -> None:
    assert map_category("unknown") is None
    assert map_category("") is None


def test_taxonomy_shape() -> None:
    assert GROUPS == (COMBAT, VOCATION)
    assert [c.label for c in Category if c.group == COMBAT] == [
        "Tank",
        "Healer",
        "Melee DPS",
        "Physical Ranged DPS",
        "Magical Ranged DPS",
        "Limited Jobs",
    ]
    assert [c.label for c in Category if c.group == VOCATION] == [
        "Hand (DoH)",
        "Land (DoL)",
    ]
