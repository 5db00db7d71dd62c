"""normalize favorite providers

Version: 6
Create Date: 2026-01-11

Rows written before the provider set was closed may carry arbitrary values.
Anything outside web/generated, NULL included, is treated as a web favorite.

"""

import sqlalchemy as sa
from alembic.operations import Operations

version: int = 6


def upgrade(op: Operations) -> None:
    op.execute(
        sa.text(
            "UPDATE favorites SET provider = 'web' "
            "WHERE provider IS NULL OR provider NOT IN ('web', 'generated')"
        )
    )
