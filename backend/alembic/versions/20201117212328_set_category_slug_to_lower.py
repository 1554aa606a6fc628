"""set category slug to lower

Mixed-case slugs that clash case-insensitively with another slug of the same
parent are renamed from the category name, or cleared when no free name is
available. Every slug is then lowercased and the unique index is rebuilt on
``LOWER(slug)``.

The downgrade only restores the case-sensitive index; slug data stays
lowercased.
"""

from __future__ import annotations

from alembic import context, op
import sqlalchemy as sa

from backend.app.schemas.category import CategoryRow
from backend.app.services.slug_normalizer import normalize_slugs


revision = "20201117212328"
down_revision = "0001_baseline"
branch_labels = None
depends_on = None

INDEX_NAME = "unique_index_categories_on_slug"

categories = sa.table(
    "categories",
    sa.column("id", sa.Integer()),
    sa.column("name", sa.String()),
    sa.column("slug", sa.String()),
    sa.column("parent_category_id", sa.Integer()),
)


def _create_slug_index(slug_expression: str) -> None:
    op.create_index(
        INDEX_NAME,
        "categories",
        [sa.text("COALESCE(parent_category_id, -1)"), sa.text(slug_expression)],
        unique=True,
        postgresql_where=sa.text("slug != ''"),
        sqlite_where=sa.text("slug != ''"),
    )


def upgrade() -> None:
    if context.is_offline_mode():
        raise RuntimeError(
            "20201117212328 reads category rows and cannot run in offline mode"
        )
    op.drop_index(INDEX_NAME, table_name="categories")

    bind = op.get_bind()
    rows = bind.execute(
        sa.select(
            categories.c.id,
            categories.c.name,
            categories.c.slug,
            categories.c.parent_category_id,
        ).order_by(categories.c.id)
    )
    updates = normalize_slugs(
        [
            CategoryRow(
                id=row.id,
                name=row.name,
                slug=row.slug,
                parent_category_id=row.parent_category_id,
            )
            for row in rows
        ]
    )
    if updates:
        bind.execute(
            categories.update()
            .where(categories.c.id == sa.bindparam("category_id"))
            .values(slug=sa.bindparam("new_slug")),
            [
                {"category_id": category_id, "new_slug": slug}
                for category_id, slug in updates.items()
            ],
        )
    op.execute(categories.update().values(slug=sa.func.lower(categories.c.slug)))

    _create_slug_index("LOWER(slug)")


def downgrade() -> None:
    op.drop_index(INDEX_NAME, table_name="categories")
    _create_slug_index("slug")
