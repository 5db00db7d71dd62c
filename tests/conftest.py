"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from receptradar.config import Settings
from receptradar.database import create_db_engine, open_store
from receptradar.main import create_app


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite:///{tmp_path / 'test.db'}",
        "image_dir": str(tmp_path / "images"),
        "environment": "test",
        "azure_openai_endpoint": "",
        "azure_openai_api_key": "",
        "azure_openai_chat_deployment": "",
        "azure_openai_image_deployment": None,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file, with no recipe provider."""
    return make_settings(tmp_path)


@pytest.fixture
def configured_settings(tmp_path):
    """Settings with a (fake) Azure OpenAI configuration."""
    return make_settings(
        tmp_path,
        azure_openai_endpoint="https://example.openai.azure.com/",
        azure_openai_api_key="test-key",
        azure_openai_chat_deployment="gpt-test",
        recipe_count=3,
    )


@pytest.fixture
def engine(settings):
    """Engine on an empty, unmigrated store."""
    engine = create_db_engine(settings.database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def store(settings):
    """Migrated store."""
    store = open_store(settings)
    yield store
    store.close()


@pytest.fixture
def db(store):
    """Database session on the migrated store."""
    session = store.session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def client(settings):
    """Test client for an app without a recipe provider."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def configured_client(configured_settings):
    """Test client for an app with a recipe provider configured."""
    with TestClient(create_app(configured_settings)) as test_client:
        yield test_client
