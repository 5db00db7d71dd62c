"""add generated_recipes

Version: 5
Create Date: 2025-12-21

"""

import sqlalchemy as sa
from alembic.operations import Operations

from receptradar.migrations.helpers import create_table_if_missing, existing_indexes

version: int = 5

INGREDIENT_KEY_INDEX = "idx_generated_recipes_ingredient_key"


def upgrade(op: Operations) -> None:
    create_table_if_missing(
        op,
        "generated_recipes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ingredient_cache_key", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("ingredients_json", sa.Text(), nullable=False),
        sa.Column("steps_json", sa.Text(), nullable=False),
        sa.Column("servings", sa.Integer(), nullable=True),
        sa.Column("ready_in_minutes", sa.Integer(), nullable=True),
        sa.Column("image_path", sa.Text(), nullable=True),
        sa.Column("created_at", sa.Integer(), nullable=False),
        sqlite_autoincrement=True,
    )
    if INGREDIENT_KEY_INDEX not in existing_indexes(op, "generated_recipes"):
        op.create_index(INGREDIENT_KEY_INDEX, "generated_recipes", ["ingredient_cache_key"])
