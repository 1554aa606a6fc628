"""ORM models for the category tables."""

from __future__ import annotations

from sqlalchemy import Index, Integer, String, func, text
from sqlalchemy.orm import Mapped, mapped_column

from ..db import Base

SLUG_INDEX_NAME = "unique_index_categories_on_slug"
# Stands in for a NULL parent so root categories share one scope.
ROOT_SCOPE_SENTINEL = -1
SLUG_MAX_LENGTH = 255


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(SLUG_MAX_LENGTH), nullable=False, default="", server_default=""
    )
    parent_category_id: Mapped[int | None] = mapped_column(Integer, nullable=True)


Index(
    SLUG_INDEX_NAME,
    func.coalesce(Category.parent_category_id, ROOT_SCOPE_SENTINEL),
    func.lower(Category.slug),
    unique=True,
    postgresql_where=text("slug != ''"),
    sqlite_where=text("slug != ''"),
)


__all__ = ["Category", "SLUG_INDEX_NAME", "ROOT_SCOPE_SENTINEL", "SLUG_MAX_LENGTH"]
