"""baseline schema"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0001_baseline"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("parent_category_id", sa.Integer(), nullable=True),
    )
    op.create_index(
        "unique_index_categories_on_slug",
        "categories",
        [sa.text("COALESCE(parent_category_id, -1)"), sa.text("slug")],
        unique=True,
        postgresql_where=sa.text("slug != ''"),
        sqlite_where=sa.text("slug != ''"),
    )


def downgrade() -> None:
    op.drop_index("unique_index_categories_on_slug", table_name="categories")
    op.drop_table("categories")
