"""favorites keyed by (provider, recipe_id)

Version: 3
Create Date: 2025-11-23

"""

import sqlalchemy as sa
from alembic.operations import Operations

from receptradar.migrations.helpers import existing_columns

version: int = 3


def upgrade(op: Operations) -> None:
    if "provider" in existing_columns(op, "favorites"):
        return

    # SQLite cannot alter a uniqueness constraint in place: build the new
    # table, copy rows across, then swap it in.
    op.execute(sa.text("DROP TABLE IF EXISTS favorites_new"))
    op.create_table(
        "favorites_new",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("provider", sa.Text(), nullable=False, server_default="web"),
        sa.Column("recipe_id", sa.Text(), nullable=False),
        sa.Column("recipe_data", sa.Text(), nullable=True),
        sa.Column("added_at", sa.Integer(), nullable=False),
        sa.UniqueConstraint("provider", "recipe_id", name="uq_favorites_provider_recipe"),
        sqlite_autoincrement=True,
    )
    op.execute(
        sa.text(
            "INSERT INTO favorites_new (id, provider, recipe_id, recipe_data, added_at) "
            "SELECT id, 'web', recipe_id, recipe_data, added_at FROM favorites"
        )
    )
    op.drop_table("favorites")
    op.rename_table("favorites_new", "favorites")
