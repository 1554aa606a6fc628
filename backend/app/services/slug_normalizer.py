"""Lowercase category slugs while keeping them unique per parent scope.

Slugs are compared case-insensitively inside a parent scope. Mixed-case
slugs that collide with another slug in their scope are first renamed to a
slug derived from the category name; whatever still collides afterwards is
cleared. Only mixed-case slugs are ever changed, and empty slugs are left
alone.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Mapping, Sequence

from sqlalchemy.engine import Connection

from ..schemas.category import CategoryRow
from .categories import slug_candidate
from .dao import CategoriesRepo

logger = logging.getLogger(__name__)

SlugKey = tuple[int | None, str]


def _key(category: CategoryRow, slug: str) -> SlugKey:
    return (category.parent_category_id, slug.lower())


def count_slugs(
    categories: Sequence[CategoryRow], slugs: Mapping[int, str]
) -> Counter[SlugKey]:
    """Count categories per (parent, lowercase slug), ignoring empty slugs."""

    return Counter(
        _key(category, slugs[category.id])
        for category in categories
        if slugs[category.id] != ""
    )


def _is_conflicting(slug: str, key: SlugKey, counts: Counter[SlugKey]) -> bool:
    return slug != "" and slug != slug.lower() and counts[key] > 1


def normalize_slugs(categories: Sequence[CategoryRow]) -> dict[int, str]:
    """Return the slug changes (category id -> new slug) for ``categories``."""

    slugs = {category.id: category.slug for category in categories}
    updates: dict[int, str] = {}

    counts = count_slugs(categories, slugs)
    for category in categories:
        slug = slugs[category.id]
        old_key = _key(category, slug)
        if not _is_conflicting(slug, old_key, counts):
            continue

        new_slug = slug_candidate(category.name)
        new_key = _key(category, new_slug)
        if new_slug == "" or counts[new_key] > 0:
            continue

        updates[category.id] = slugs[category.id] = new_slug
        counts[old_key] -= 1
        counts[new_key] = 1
    renamed = len(updates)

    counts = count_slugs(categories, slugs)
    for category in categories:
        slug = slugs[category.id]
        old_key = _key(category, slug)
        if not _is_conflicting(slug, old_key, counts):
            continue

        updates[category.id] = slugs[category.id] = ""
        counts[old_key] -= 1

    logger.info(
        "slug normalization: %d categories, %d renamed, %d cleared",
        len(categories),
        renamed,
        len(updates) - renamed,
    )
    return updates


def lowercase_category_slugs(connection: Connection) -> dict[int, str]:
    """Resolve slug collisions, persist them and lowercase every slug."""

    repo = CategoriesRepo(connection)
    categories = repo.fetch_all()
    updates = normalize_slugs(categories)
    repo.apply_updates(updates)
    repo.lowercase_all()
    return updates


__all__ = [
    "SlugKey",
    "count_slugs",
    "normalize_slugs",
    "lowercase_category_slugs",
]
