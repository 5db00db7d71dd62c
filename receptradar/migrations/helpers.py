"""Schema introspection helpers for migration steps.

Every step may run against a store created at any earlier version, so additive
changes are guarded by a look at the live schema first.
"""

import sqlalchemy as sa
from alembic.operations import Operations


def has_table(op: Operations, table_name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(table_name)


def existing_columns(op: Operations, table_name: str) -> set[str]:
    """Return the column names currently present on a table."""
    inspector = sa.inspect(op.get_bind())
    return {column["name"] for column in inspector.get_columns(table_name)}


def existing_indexes(op: Operations, table_name: str) -> set[str]:
    inspector = sa.inspect(op.get_bind())
    return {index["name"] for index in inspector.get_indexes(table_name)}


def create_table_if_missing(op: Operations, table_name: str, *columns, **kw) -> bool:
    """Create a table unless it already exists. Returns True when created."""
    if has_table(op, table_name):
        return False
    op.create_table(table_name, *columns, **kw)
    return True


def add_column_if_missing(op: Operations, table_name: str, column: sa.Column) -> bool:
    """Add a column unless the table already has it. Returns True when added."""
    if column.name in existing_columns(op, table_name):
        return False
    op.add_column(table_name, column)
    return True
