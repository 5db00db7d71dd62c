"""Versioned schema migrations for the on-device store.

The schema version lives in SQLite's ``PRAGMA user_version``. A run applies
every step whose version lies in ``(current, target]`` and then bumps the
counter, all inside one transaction: either the store ends up at the target
version or it stays exactly where it was.
"""

import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple

from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy import Connection, Engine

from receptradar.migrations.versions import (
    v0001_initial_tables,
    v0002_add_pantry_normalized_name,
    v0003_favorites_provider,
    v0004_saved_web_recipes,
    v0005_generated_recipes,
    v0006_normalize_favorite_providers,
)

logger = logging.getLogger(__name__)


class MigrationStep(NamedTuple):
    version: int
    description: str
    upgrade: Callable[[Operations], None]


def _step(module) -> MigrationStep:
    description = (module.__doc__ or module.__name__).strip().splitlines()[0]
    return MigrationStep(module.version, description, module.upgrade)


STEPS: tuple[MigrationStep, ...] = tuple(
    _step(module)
    for module in (
        v0001_initial_tables,
        v0002_add_pantry_normalized_name,
        v0003_favorites_provider,
        v0004_saved_web_recipes,
        v0005_generated_recipes,
        v0006_normalize_favorite_providers,
    )
)

TARGET_VERSION: int = STEPS[-1].version


class MigrationError(Exception):
    """A migration step failed and the whole run was rolled back."""

    def __init__(self, version: int, from_version: int, message: str):
        super().__init__(
            f"Migration to version {version} failed (store left at version {from_version}): "
            f"{message}"
        )
        self.version = version
        self.from_version = from_version


def get_schema_version(connection: Connection) -> int:
    """Read the persisted schema version, 0 for a fresh store."""
    value = connection.exec_driver_sql("PRAGMA user_version").scalar()
    return int(value or 0)


def _set_schema_version(connection: Connection, version: int) -> None:
    # PRAGMA does not accept bound parameters
    connection.exec_driver_sql(f"PRAGMA user_version = {int(version)}")


def migrate(
    engine: Engine,
    steps: Sequence[MigrationStep] = STEPS,
    target_version: int | None = None,
) -> int:
    """Bring the store up to the target version.

    Returns the schema version after the run. Raises MigrationError if any
    step fails; nothing from the run is persisted in that case.
    """
    if target_version is None:
        target_version = max((step.version for step in steps), default=0)
    ordered = sorted(steps, key=lambda step: step.version)

    with engine.begin() as connection:
        current = get_schema_version(connection)

        if current > target_version:
            logger.warning(
                f"Store schema version {current} is newer than this build ({target_version}); "
                "leaving it untouched"
            )
            return current

        pending = [step for step in ordered if current < step.version <= target_version]
        if not pending and current == target_version:
            logger.debug(f"Schema already at version {current}")
            return current

        op = Operations(MigrationContext.configure(connection))
        for step in pending:
            logger.info(f"Applying migration {step.version}: {step.description}")
            try:
                step.upgrade(op)
            except Exception as e:
                logger.error(f"Migration {step.version} failed: {e}")
                raise MigrationError(step.version, current, str(e)) from e

        _set_schema_version(connection, target_version)

    logger.info(f"Migrated store from version {current} to {target_version}")
    return target_version
