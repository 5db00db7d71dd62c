"""initial tables

Version: 1
Create Date: 2025-11-02

"""

import sqlalchemy as sa
from alembic.operations import Operations

from receptradar.migrations.helpers import create_table_if_missing

version: int = 1


def _cache_table_columns() -> list[sa.Column]:
    return [
        sa.Column("key", sa.Text(), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("cached_at", sa.Integer(), nullable=False),
        sa.Column("ttl_seconds", sa.Integer(), nullable=False),
    ]


def upgrade(op: Operations) -> None:
    create_table_if_missing(
        op,
        "pantry_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("barcode", sa.Text(), nullable=True),
        sa.Column("quantity", sa.Float(), nullable=True),
        sa.Column("unit", sa.Text(), nullable=True),
        sa.Column("added_at", sa.Integer(), nullable=False),
        sa.Column("updated_at", sa.Integer(), nullable=False),
        sqlite_autoincrement=True,
    )

    # recipe_id alone is unique here; version 3 widens it to (provider, recipe_id)
    create_table_if_missing(
        op,
        "favorites",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("recipe_id", sa.Text(), nullable=False, unique=True),
        sa.Column("recipe_data", sa.Text(), nullable=True),
        sa.Column("added_at", sa.Integer(), nullable=False),
        sqlite_autoincrement=True,
    )

    create_table_if_missing(op, "product_cache", *_cache_table_columns())
    create_table_if_missing(op, "recipe_cache", *_cache_table_columns())

    create_table_if_missing(
        op,
        "settings",
        sa.Column("key", sa.Text(), primary_key=True),
        sa.Column("value", sa.Text(), nullable=True),
        sa.Column("updated_at", sa.Integer(), nullable=False),
    )
