"""add pantry normalized_name, category and best_before

Version: 2
Create Date: 2025-11-09

"""

import sqlalchemy as sa
from alembic.operations import Operations

from receptradar.migrations.helpers import add_column_if_missing
from receptradar.services.normalize import normalize_product_name

version: int = 2


def upgrade(op: Operations) -> None:
    add_column_if_missing(op, "pantry_items", sa.Column("normalized_name", sa.Text(), nullable=True))
    add_column_if_missing(op, "pantry_items", sa.Column("category", sa.Text(), nullable=True))
    add_column_if_missing(op, "pantry_items", sa.Column("best_before", sa.Integer(), nullable=True))

    # Backfill only rows that have no normalized name yet.
    # SQLite's LOWER() is ASCII-only, so this is done row by row instead.
    bind = op.get_bind()
    rows = bind.execute(
        sa.text("SELECT id, name FROM pantry_items WHERE normalized_name IS NULL")
    ).all()
    for row_id, name in rows:
        bind.execute(
            sa.text(
                "UPDATE pantry_items SET normalized_name = :normalized "
                "WHERE id = :id AND normalized_name IS NULL"
            ),
            {"normalized": normalize_product_name(name or "").normalized_name, "id": row_id},
        )
