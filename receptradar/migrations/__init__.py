"""Schema migrations."""

from receptradar.migrations.engine import (
    STEPS,
    TARGET_VERSION,
    MigrationError,
    MigrationStep,
    get_schema_version,
    migrate,
)

__all__ = [
    "STEPS",
    "TARGET_VERSION",
    "MigrationError",
    "MigrationStep",
    "get_schema_version",
    "migrate",
]
