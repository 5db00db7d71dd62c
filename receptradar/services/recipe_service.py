"""Recipe suggestions and batch regeneration for the current pantry."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from receptradar.models.saved_web_recipe import SavedWebRecipe
from receptradar.schemas.generated_recipe import GeneratedRecipeCreate, GeneratedRecipeResponse
from receptradar.schemas.recipe import (
    ExtendedIngredient,
    RecipeSuggestion,
    RecipeSummary,
    SuggestionListResponse,
)
from receptradar.services.favorites_service import FavoritesService
from receptradar.services.fingerprint import EMPTY_KEY, build_ingredient_cache_key
from receptradar.services.generated_recipe_service import GeneratedRecipeService
from receptradar.services.llm import LLMService, ProviderNotConfiguredError, RecipeProviderError
from receptradar.services.pantry_service import PantryService
from receptradar.services.recipe_match import pantry_normalized_names, rank_by_match, score_recipe
from receptradar.services.saved_web_recipe_service import SavedWebRecipeService
from receptradar.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

# Saved web pages are filed under the first few pantry ingredients
WEB_QUERY_INGREDIENTS = 6
WEB_RECIPE_DEFAULT_TITLE = "Recept från webben"


def generated_to_summary(recipe: GeneratedRecipeResponse) -> RecipeSummary:
    extended = []
    for ing in recipe.ingredients:
        original = None
        if ing.amount is not None and ing.unit:
            original = f"{ing.amount} {ing.unit} {ing.name}"
        extended.append(ExtendedIngredient(name=ing.name, original=original))
    return RecipeSummary(
        id=str(recipe.id),
        title=recipe.title,
        image=recipe.image_path,
        ready_in_minutes=recipe.ready_in_minutes,
        extended_ingredients=extended,
        source_url=None,
    )


def saved_to_summary(row: SavedWebRecipe) -> RecipeSummary:
    return RecipeSummary(
        id=str(row.id),
        title=(row.title or "").strip() or WEB_RECIPE_DEFAULT_TITLE,
        image=(row.image_url or "").strip() or None,
        source_url=row.source_url,
        extended_ingredients=[],
    )


class RecipeService:
    """Service for the suggestion list and the regenerate workflow."""

    def __init__(self, db: Session, llm_service: LLMService | None = None):
        self.db = db
        self.llm_service = llm_service or LLMService()
        self.pantry = PantryService(db)
        self.generated = GeneratedRecipeService(db)
        self.favorites = FavoritesService(db)
        self.saved_web = SavedWebRecipeService(db)
        self.settings = SettingsService(db)

    @property
    def provider_available(self) -> bool:
        return self.llm_service.is_configured

    def find_recipes(self, ingredient_names: list[str]) -> list[tuple[str, RecipeSummary]]:
        """Generated recipes for this ingredient set first, then saved web recipes."""
        found: list[tuple[str, RecipeSummary]] = [
            ("generated", generated_to_summary(r))
            for r in self.generated.get_batch(ingredient_names)
        ]

        query = " ".join(ingredient_names[:WEB_QUERY_INGREDIENTS]).strip()
        saved = self.saved_web.get_by_ingredient_query(query) if query else self.saved_web.list_all()
        found.extend(("web", saved_to_summary(row)) for row in saved)
        return found

    def get_suggestions(self) -> SuggestionListResponse:
        """Suggestions for the current pantry, best match first."""
        items = self.pantry.list_items()
        ingredient_names = self.pantry.ingredient_names()
        pantry_names = pantry_normalized_names(items)

        suggestions = [
            RecipeSuggestion(
                source=source,
                recipe=summary,
                match=score_recipe(summary.extended_ingredients, pantry_names),
            )
            for source, summary in self.find_recipes(ingredient_names)
        ]
        ranked = rank_by_match(
            suggestions,
            match_of=lambda s: s.match,
            ready_in_minutes_of=lambda s: s.recipe.ready_in_minutes,
        )
        return SuggestionListResponse(
            ingredients=ingredient_names,
            provider_available=self.provider_available,
            suggestions=ranked,
        )

    async def get_suggestions_or_generate(self) -> SuggestionListResponse:
        """Suggestions for the current pantry, generating a first batch when there are none.

        Nothing is generated for an empty pantry or without a provider.
        """
        result = self.get_suggestions()
        if result.suggestions or not result.ingredients or not self.provider_available:
            return result

        logger.info("No suggestions for the current pantry, generating a first batch")
        await self.generate(result.ingredients, include_image=self.settings.include_image())
        return self.get_suggestions()

    def favorited_ids_in_batch(self, ingredient_names: Iterable[str]) -> list[int]:
        """Ids of this ingredient set's generated recipes that are favorites."""
        favorited = self.favorites.favorited_generated_ids()
        return [r.id for r in self.generated.get_batch(ingredient_names) if r.id in favorited]

    async def generate(
        self,
        ingredient_names: list[str],
        include_image: bool = True,
        skip_cache: bool = False,
    ) -> list[GeneratedRecipeResponse]:
        """Return a batch for the ingredients, calling the provider on a cache miss.

        A batch already holding a full set of recipes is served from the store
        unless skip_cache is set. New recipes are saved under the ingredient key.
        """
        key = build_ingredient_cache_key(ingredient_names)
        count = self.llm_service.settings.recipe_count
        if not skip_cache and key != EMPTY_KEY:
            existing = self.generated.get_batch_by_key(key)
            if len(existing) >= count:
                return existing[:count]

        payloads = await self.llm_service.generate_recipes(ingredient_names, include_image)
        if not payloads:
            raise RecipeProviderError("The provider returned no recipes")

        saved = []
        for payload in payloads:
            recipe_id = self.generated.save(
                GeneratedRecipeCreate(
                    ingredient_cache_key=key,
                    title=payload.title,
                    ingredients=payload.ingredients,
                    steps=payload.steps,
                    servings=payload.servings,
                    ready_in_minutes=payload.ready_in_minutes,
                    image_path=payload.image_path,
                )
            )
            recipe = self.generated.get_by_id(recipe_id)
            if recipe:
                saved.append(recipe)
        return saved

    async def regenerate(self, include_image: bool | None = None) -> list[GeneratedRecipeResponse]:
        """Replace the pantry's generated batch with a fresh one.

        Favorited recipes of the old batch are kept. The old batch is removed
        before the provider is called; if generation then fails, the removal
        stands and a later retry regenerates under the same key.
        """
        ingredient_names = self.pantry.ingredient_names()
        if not ingredient_names:
            logger.info("Pantry is empty, nothing to generate")
            return []

        if not self.provider_available:
            raise ProviderNotConfiguredError("Recipe generation is not configured")

        keep_ids = self.favorited_ids_in_batch(ingredient_names)
        self.generated.replace_batch_keeping_favorited(ingredient_names, keep_ids)

        if include_image is None:
            include_image = self.settings.include_image()
        return await self.generate(ingredient_names, include_image=include_image, skip_cache=True)
