"""
Diagnosis round queue construction.

Picks a fixed number of distinct rounds per category, then shuffles the
combined selection so round order does not follow category order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from party.logic.enums import CATEGORIES

if TYPE_CHECKING:
    import random
    from collections.abc import Sequence

    from party.logic.enums import Category
    from party.logic.types import RoundDescriptor

logger = structlog.get_logger()


def partition_by_category(
    catalog: Sequence[RoundDescriptor],
    categories: Sequence[Category] = CATEGORIES,
) -> dict[Category, list[RoundDescriptor]]:
    """Group catalog rounds by category, keeping catalog order within each group."""
    partitions: dict[Category, list[RoundDescriptor]] = {category: [] for category in categories}
    for descriptor in catalog:
        if descriptor.category in partitions:
            partitions[descriptor.category].append(descriptor)
    return partitions


def build_diagnosis_queue(
    catalog: Sequence[RoundDescriptor],
    per_category_count: int,
    rng: random.Random,
    categories: Sequence[Category] = CATEGORIES,
) -> list[RoundDescriptor]:
    """
    Build the ordered round queue for a diagnosis session.

    A category with fewer rounds than per_category_count contributes all of
    them. An empty catalog gives an empty queue; the caller decides whether
    that is fatal.
    """
    if per_category_count < 0:
        raise ValueError(f"per_category_count must be >= 0, got {per_category_count}")

    selected: list[RoundDescriptor] = []
    for category, pool in partition_by_category(catalog, categories).items():
        take = min(per_category_count, len(pool))
        if take < per_category_count:
            logger.warning(
                "category has too few rounds, using all of them",
                category=category,
                available=len(pool),
                requested=per_category_count,
            )
        selected.extend(rng.sample(pool, take))

    rng.shuffle(selected)
    logger.debug("diagnosis queue built", queue=[d.reference for d in selected])
    return selected
