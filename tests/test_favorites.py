"""Favorites API tests."""

import json

from receptradar.models.favorite import Favorite
from receptradar.schemas.favorite import FavoriteCreate, FavoriteRecipeData
from receptradar.services.favorites_service import FavoritesService, to_response
from receptradar.services.saved_web_recipe_service import SavedWebRecipeService


def test_create_favorite(client):
    """Test favoriting a web recipe with a snapshot."""
    response = client.post(
        "/api/v1/favorites",
        json={
            "provider": "web",
            "recipe_id": "https://example.com/kottbullar",
            "recipe_data": {"title": "Köttbullar", "sourceUrl": "https://example.com/kottbullar"},
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["provider"] == "web"
    assert data["recipe_data"]["title"] == "Köttbullar"
    assert data["recipe_data"]["sourceUrl"] == "https://example.com/kottbullar"


def test_same_recipe_id_under_both_providers(client):
    """Test that identity is the (provider, recipe_id) pair."""
    for provider in ("web", "generated"):
        response = client.post(
            "/api/v1/favorites", json={"provider": provider, "recipe_id": "7"}
        )
        assert response.status_code == 201

    assert len(client.get("/api/v1/favorites").json()) == 2


def test_duplicate_favorite_conflicts(client):
    client.post("/api/v1/favorites", json={"provider": "generated", "recipe_id": "7"})

    response = client.post("/api/v1/favorites", json={"provider": "generated", "recipe_id": "7"})
    assert response.status_code == 409


def test_unknown_provider_rejected(client):
    response = client.post("/api/v1/favorites", json={"provider": "spoonacular", "recipe_id": "1"})
    assert response.status_code == 422


def test_delete_favorite(client):
    """Test removing a favorite by provider and recipe id."""
    client.post("/api/v1/favorites", json={"provider": "generated", "recipe_id": "3"})

    response = client.delete("/api/v1/favorites/generated/3")
    assert response.status_code == 204
    assert client.get("/api/v1/favorites").json() == []
    assert client.delete("/api/v1/favorites/generated/3").status_code == 404


def test_favorited_generated_ids_skip_non_numeric(db):
    service = FavoritesService(db)
    service.create(FavoriteCreate(provider="generated", recipe_id="12"))
    service.create(FavoriteCreate(provider="generated", recipe_id="not-a-number"))
    service.create(FavoriteCreate(provider="web", recipe_id="13"))

    assert service.favorited_generated_ids() == {12}


def test_corrupt_snapshot_reads_as_absent(db):
    favorite = Favorite(provider="web", recipe_id="x", recipe_data="{broken")
    db.add(favorite)
    db.commit()

    assert to_response(favorite).recipe_data is None


def test_settings_round_trip(client):
    """Test storing and reading a setting."""
    assert client.get("/api/v1/settings/llm_include_image").json() == {
        "key": "llm_include_image",
        "value": None,
    }

    response = client.put("/api/v1/settings/llm_include_image", json={"value": "false"})
    assert response.status_code == 200
    assert client.get("/api/v1/settings/llm_include_image").json()["value"] == "false"


def test_update_snapshot(db):
    service = FavoritesService(db)
    service.create(FavoriteCreate(provider="web", recipe_id="https://example.com/a"))

    favorite = service.update_recipe_data(
        "web",
        "https://example.com/a",
        FavoriteRecipeData(title="Ny titel", source_url="https://example.com/a"),
    )
    assert json.loads(favorite.recipe_data) == {
        "title": "Ny titel",
        "sourceUrl": "https://example.com/a",
    }
    assert service.update_recipe_data("generated", "1", FavoriteRecipeData()) is None

def test_saved_web_recipes(db):
    service = SavedWebRecipeService(db)
    kept = service.save("https://example.com/soppa", title="Soppa", ingredient_query="lök")
    other = service.save("https://example.com/paj", ingredient_query="ost")

    assert [r.id for r in service.get_by_ingredient_query("lök")] == [kept.id]
    assert service.delete(other.id) is True
    assert service.delete(other.id) is False
    assert [r.id for r in service.list_all()] == [kept.id]


def test_get_and_update_web_favorite_by_url(client):
    """Test looking up and refreshing a favorite whose id is a URL."""
    url = "https://example.com/recept/kottbullar"
    client.post("/api/v1/favorites", json={"provider": "web", "recipe_id": url})

    response = client.get(f"/api/v1/favorites/web/{url}")
    assert response.status_code == 200
    assert response.json()["recipe_id"] == url
    assert response.json()["recipe_data"] is None

    response = client.put(
        f"/api/v1/favorites/web/{url}", json={"title": "Köttbullar", "image": "k.png"}
    )
    assert response.status_code == 200
    assert response.json()["recipe_data"]["title"] == "Köttbullar"

    assert client.delete(f"/api/v1/favorites/web/{url}").status_code == 204
    assert client.get(f"/api/v1/favorites/web/{url}").status_code == 404
    assert client.put(f"/api/v1/favorites/web/{url}", json={}).status_code == 404


def test_saved_web_recipe_endpoints(client):
    """Test bookmarking, listing and removing web recipes."""
    response = client.post(
        "/api/v1/saved-web-recipes",
        json={
            "source_url": "https://example.com/soppa",
            "title": "Löksoppa",
            "ingredient_query": "lök",
        },
    )
    assert response.status_code == 201
    saved_id = response.json()["id"]
    client.post("/api/v1/saved-web-recipes", json={"source_url": "https://example.com/paj"})

    assert len(client.get("/api/v1/saved-web-recipes").json()) == 2
    by_query = client.get("/api/v1/saved-web-recipes", params={"ingredient_query": "lök"}).json()
    assert [r["id"] for r in by_query] == [saved_id]

    assert client.delete(f"/api/v1/saved-web-recipes/{saved_id}").status_code == 204
    assert client.delete(f"/api/v1/saved-web-recipes/{saved_id}").status_code == 404


def test_saved_web_recipe_requires_url(client):
    response = client.post("/api/v1/saved-web-recipes", json={"title": "Utan länk"})
    assert response.status_code == 422


def test_bookmarked_page_appears_in_suggestions(client):
    client.post("/api/v1/pantry", json={"name": "Lök"})
    client.post(
        "/api/v1/saved-web-recipes",
        json={"source_url": "https://example.com/soppa", "ingredient_query": "lök"},
    )

    suggestions = client.get("/api/v1/recipes/suggestions").json()["suggestions"]
    assert [(s["source"], s["recipe"]["source_url"]) for s in suggestions] == [
        ("web", "https://example.com/soppa")
    ]
