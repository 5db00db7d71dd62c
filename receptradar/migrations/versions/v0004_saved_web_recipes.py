"""add saved_web_recipes

Version: 4
Create Date: 2025-12-07

"""

import sqlalchemy as sa
from alembic.operations import Operations

from receptradar.migrations.helpers import create_table_if_missing

version: int = 4


def upgrade(op: Operations) -> None:
    create_table_if_missing(
        op,
        "saved_web_recipes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("source_url", sa.Text(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("ingredient_query", sa.Text(), nullable=True),
        sa.Column("saved_at", sa.Integer(), nullable=False),
        sqlite_autoincrement=True,
    )
