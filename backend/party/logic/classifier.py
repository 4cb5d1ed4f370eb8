"""
Animal-type classification and compliment message for a finished diagnosis.

The label and the message are computed from the same category totals by two
independent rule sets. Both are total: every combination of non-negative
totals yields a value.

Label rules are an ordered list of (predicate, label) pairs, first match
wins. High-tier rules come first and cover every non-empty set of "high"
categories, so mid-tier rules only apply when nothing is high.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import NamedTuple

from party.logic.enums import CATEGORIES, AnimalType, Category
from party.logic.settings import DiagnosisSettings
from party.logic.types import Classification

DEFAULT_SETTINGS = DiagnosisSettings()

R, M, H = Category.REFLEX, Category.MASH, Category.HOLD


class Tiers(NamedTuple):
    """Which categories landed in the high and mid tiers."""

    high: frozenset[Category]
    mid: frozenset[Category]


def compute_tiers(totals: Mapping[Category, int], settings: DiagnosisSettings = DEFAULT_SETTINGS) -> Tiers:
    high = frozenset(c for c in CATEGORIES if totals.get(c, 0) >= settings.high_threshold)
    mid = frozenset(c for c in CATEGORIES if settings.mid_min <= totals.get(c, 0) <= settings.mid_max)
    return Tiers(high=high, mid=mid)


def _high_exactly(*categories: Category) -> Callable[[Tiers], bool]:
    expected = frozenset(categories)
    return lambda tiers: tiers.high == expected


def _mid_exactly(*categories: Category) -> Callable[[Tiers], bool]:
    expected = frozenset(categories)
    return lambda tiers: tiers.mid == expected


LABEL_RULES: tuple[tuple[Callable[[Tiers], bool], AnimalType], ...] = (
    (_high_exactly(R, M, H), AnimalType.LION),
    (_high_exactly(R, M), AnimalType.WOLF),
    (_high_exactly(R, H), AnimalType.CHEETAH),
    (_high_exactly(M, H), AnimalType.GORILLA),
    (_high_exactly(R), AnimalType.RABBIT),
    (_high_exactly(M), AnimalType.BEAR),
    (_high_exactly(H), AnimalType.ELEPHANT),
    (_mid_exactly(R, M, H), AnimalType.PANDA),
    (_mid_exactly(R, M), AnimalType.DOG),
    (_mid_exactly(R, H), AnimalType.CAT),
    (_mid_exactly(M, H), AnimalType.MONKEY),
    (_mid_exactly(R), AnimalType.SQUIRREL),
    (_mid_exactly(M), AnimalType.PENGUIN),
    (_mid_exactly(H), AnimalType.TURTLE),
)

DEFAULT_LABEL = AnimalType.CHICK

ENCOURAGEMENT_MESSAGE = "Let's give it another go next time!"
ALL_AROUND_MESSAGE = "You can do a bit of everything! Try all kinds of challenges!"
PAIR_MESSAGES: dict[frozenset[Category], str] = {
    frozenset((R, M)): "You move really well! You could shine at sports!",
    frozenset((R, H)): "Quick and steady! Piano or dance might be your thing!",
    frozenset((M, H)): "You never give up! Calligraphy or crafts might be your thing!",
}
SINGLE_MESSAGES: dict[Category, str] = {
    R: "Super fast reactions! Dodgeball or sprinting might be your thing!",
    M: "So much energy! Soccer or swimming might be your thing!",
    H: "Great focus! Puzzles or reading might be your thing!",
}
FALLBACK_MESSAGE = "You can do so many things, amazing!"


def determine_animal_type(
    totals: Mapping[Category, int],
    settings: DiagnosisSettings = DEFAULT_SETTINGS,
) -> AnimalType:
    """Return the label of the first matching rule, or the default label."""
    tiers = compute_tiers(totals, settings)
    for predicate, label in LABEL_RULES:
        if predicate(tiers):
            return label
    return DEFAULT_LABEL


def generate_compliment(totals: Mapping[Category, int]) -> str:
    """Return a message keyed by which categories share the highest total."""
    max_value = max(totals.get(c, 0) for c in CATEGORIES)
    if max_value <= 0:
        return ENCOURAGEMENT_MESSAGE

    top = frozenset(c for c in CATEGORIES if totals.get(c, 0) == max_value)
    if len(top) == len(CATEGORIES):
        return ALL_AROUND_MESSAGE
    if len(top) == 2:
        return PAIR_MESSAGES[top]
    if len(top) == 1:
        (category,) = top
        return SINGLE_MESSAGES[category]
    return FALLBACK_MESSAGE


def classify(
    totals: Mapping[Category, int],
    settings: DiagnosisSettings = DEFAULT_SETTINGS,
) -> Classification:
    """Classify accumulated category totals into a label and a compliment."""
    return Classification(
        label=determine_animal_type(totals, settings),
        message=generate_compliment(totals),
    )
