"""Database repositories."""

from __future__ import annotations

from typing import Mapping

import sqlalchemy as sa
from sqlalchemy.engine import Connection

from ..models import ROOT_SCOPE_SENTINEL, Category
from ..schemas.category import CategoryRow

categories = Category.__table__


class CategoriesRepo:
    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    def fetch_all(self) -> list[CategoryRow]:
        stmt = sa.select(
            categories.c.id,
            categories.c.name,
            categories.c.slug,
            categories.c.parent_category_id,
        ).order_by(categories.c.id)
        return [
            CategoryRow(
                id=row.id,
                name=row.name,
                slug=row.slug,
                parent_category_id=row.parent_category_id,
            )
            for row in self.connection.execute(stmt)
        ]

    def apply_updates(self, updates: Mapping[int, str]) -> None:
        if not updates:
            return
        stmt = (
            categories.update()
            .where(categories.c.id == sa.bindparam("category_id"))
            .values(slug=sa.bindparam("new_slug"))
        )
        self.connection.execute(
            stmt,
            [
                {"category_id": category_id, "new_slug": slug}
                for category_id, slug in updates.items()
            ],
        )

    def lowercase_all(self) -> None:
        self.connection.execute(
            categories.update().values(slug=sa.func.lower(categories.c.slug))
        )

    def count_slug_conflicts(self) -> int:
        """Count (scope, lowercase slug) pairs held by more than one category."""

        scope = sa.func.coalesce(
            categories.c.parent_category_id, ROOT_SCOPE_SENTINEL
        ).label("scope")
        lowered = sa.func.lower(categories.c.slug).label("lowered")
        groups = (
            sa.select(scope, lowered)
            .where(categories.c.slug != "")
            .group_by(scope, lowered)
            .having(sa.func.count() > 1)
            .subquery()
        )
        return int(
            self.connection.execute(
                sa.select(sa.func.count()).select_from(groups)
            ).scalar_one()
        )


__all__ = ["CategoriesRepo", "categories"]
