"""Tests for the schema migration engine."""

import pytest
import sqlalchemy as sa

from receptradar.migrations import (
    STEPS,
    TARGET_VERSION,
    MigrationError,
    MigrationStep,
    get_schema_version,
    migrate,
)

EXPECTED_TABLES = {
    "pantry_items",
    "favorites",
    "product_cache",
    "recipe_cache",
    "settings",
    "saved_web_recipes",
    "generated_recipes",
}


def _version(engine) -> int:
    with engine.connect() as connection:
        return get_schema_version(connection)


def _columns(engine, table: str) -> set[str]:
    return {column["name"] for column in sa.inspect(engine).get_columns(table)}


def _execute(engine, sql: str, **params):
    with engine.begin() as connection:
        return connection.execute(sa.text(sql), params)


def _insert_favorite_v1(engine, recipe_id: str):
    _execute(
        engine,
        "INSERT INTO favorites (recipe_id, recipe_data, added_at) VALUES (:rid, NULL, 1)",
        rid=recipe_id,
    )


def test_fresh_store_reaches_target_version(engine):
    assert _version(engine) == 0

    assert migrate(engine) == TARGET_VERSION

    assert _version(engine) == TARGET_VERSION
    assert EXPECTED_TABLES <= set(sa.inspect(engine).get_table_names())
    assert {"normalized_name", "category", "best_before"} <= _columns(engine, "pantry_items")
    assert "provider" in _columns(engine, "favorites")
    indexes = {index["name"] for index in sa.inspect(engine).get_indexes("generated_recipes")}
    assert "idx_generated_recipes_ingredient_key" in indexes


def test_second_run_is_a_no_op(engine):
    migrate(engine)
    _execute(
        engine,
        "INSERT INTO pantry_items (name, normalized_name, added_at, updated_at) "
        "VALUES ('Lök', 'lök', 1, 1)",
    )

    assert migrate(engine) == TARGET_VERSION

    with engine.connect() as connection:
        rows = connection.execute(sa.text("SELECT name FROM pantry_items")).all()
    assert rows == [("Lök",)]


def test_steps_are_ordered_and_versioned():
    versions = [step.version for step in STEPS]
    assert versions == sorted(versions)
    assert versions == list(range(1, TARGET_VERSION + 1))


def test_favorites_unique_per_provider_and_recipe(engine):
    migrate(engine)
    insert = (
        "INSERT INTO favorites (provider, recipe_id, added_at) VALUES (:provider, :rid, 1)"
    )
    _execute(engine, insert, provider="web", rid="42")
    _execute(engine, insert, provider="generated", rid="42")

    with pytest.raises(sa.exc.IntegrityError):
        _execute(engine, insert, provider="web", rid="42")


def test_legacy_store_is_upgraded_with_data_preserved(engine):
    assert migrate(engine, target_version=1) == 1
    _execute(
        engine,
        "INSERT INTO pantry_items (name, added_at, updated_at) VALUES (:name, 1, 1)",
        name="  ÄGG 12 st ",
    )
    _insert_favorite_v1(engine, "https://example.com/pannkakor")

    assert migrate(engine) == TARGET_VERSION

    with engine.connect() as connection:
        pantry = connection.execute(
            sa.text("SELECT name, normalized_name FROM pantry_items")
        ).all()
        favorites = connection.execute(
            sa.text("SELECT provider, recipe_id FROM favorites")
        ).all()
    assert pantry == [("  ÄGG 12 st ", "ägg")]
    assert favorites == [("web", "https://example.com/pannkakor")]


def test_backfill_keeps_existing_normalized_names(engine):
    migrate(engine, target_version=1)
    # Column already added by an interrupted earlier build
    _execute(engine, "ALTER TABLE pantry_items ADD COLUMN normalized_name TEXT")
    _execute(
        engine,
        "INSERT INTO pantry_items (name, normalized_name, added_at, updated_at) "
        "VALUES ('Gul lök', 'custom', 1, 1), ('Gul lök', NULL, 1, 1)",
    )

    migrate(engine)

    with engine.connect() as connection:
        names = connection.execute(
            sa.text("SELECT normalized_name FROM pantry_items ORDER BY id")
        ).scalars().all()
    assert names == ["custom", "gul lök"]


def test_unknown_favorite_providers_become_web(engine):
    migrate(engine, target_version=5)
    insert = (
        "INSERT INTO favorites (provider, recipe_id, added_at) VALUES (:provider, :rid, 1)"
    )
    _execute(engine, insert, provider="spoonacular", rid="1")
    _execute(engine, insert, provider="generated", rid="2")

    migrate(engine)

    with engine.connect() as connection:
        rows = connection.execute(
            sa.text("SELECT provider, recipe_id FROM favorites ORDER BY recipe_id")
        ).all()
    assert rows == [("web", "1"), ("generated", "2")]


def test_failed_step_rolls_back_whole_run(engine):
    def broken(op):
        op.execute(sa.text("CREATE TABLE half_done (id INTEGER)"))
        raise RuntimeError("disk on fire")

    steps = [*STEPS[:2], MigrationStep(3, "broken step", broken)]

    with pytest.raises(MigrationError) as exc_info:
        migrate(engine, steps=steps)

    assert exc_info.value.version == 3
    assert exc_info.value.from_version == 0
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert _version(engine) == 0
    assert sa.inspect(engine).get_table_names() == []


def test_failed_step_keeps_previous_version(engine):
    migrate(engine, target_version=2)

    def broken(op):
        raise RuntimeError("boom")

    with pytest.raises(MigrationError):
        migrate(engine, steps=[*STEPS[:2], MigrationStep(3, "broken step", broken)])

    assert _version(engine) == 2
    assert "provider" not in _columns(engine, "favorites")


def test_newer_store_is_left_untouched(engine):
    _execute(engine, "PRAGMA user_version = 99")

    assert migrate(engine) == 99

    assert _version(engine) == 99
    assert sa.inspect(engine).get_table_names() == []


def test_open_store_migrates(store):
    assert _version(store.engine) == TARGET_VERSION


def test_null_favorite_providers_become_web(engine):
    migrate(engine, target_version=5)
    # Store whose provider column was added without NOT NULL
    _execute(engine, "DROP TABLE favorites")
    _execute(
        engine,
        "CREATE TABLE favorites (id INTEGER PRIMARY KEY, provider TEXT, "
        "recipe_id TEXT NOT NULL, recipe_data TEXT, added_at INTEGER NOT NULL)",
    )
    _execute(
        engine,
        "INSERT INTO favorites (provider, recipe_id, added_at) "
        "VALUES (NULL, '1', 1), ('generated', '2', 1)",
    )

    migrate(engine)

    with engine.connect() as connection:
        rows = connection.execute(
            sa.text("SELECT provider, recipe_id FROM favorites ORDER BY recipe_id")
        ).all()
    assert rows == [("web", "1"), ("generated", "2")]
