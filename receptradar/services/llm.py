"""LLM service for Azure OpenAI recipe generation."""

import base64
import json
import logging
import time
import uuid
from pathlib import Path
from typing import Any

import httpx

from receptradar.config import Settings, get_settings
from receptradar.schemas.generated_recipe import (
    GeneratedIngredient,
    GeneratedRecipePayload,
    GeneratedStep,
)
from receptradar.services.llm_prompts import (
    get_recipe_generation_prompt,
    get_recipe_generation_system_prompt,
    get_recipe_image_prompt,
)

logger = logging.getLogger(__name__)

RESPONSES_API_VERSION = "2025-04-01-preview"
RESPONSES_PATH = "/openai/responses"
IMAGES_API_VERSION = "2024-02-15"
DEFAULT_RECIPE_TITLE = "Recept"


class RecipeProviderError(Exception):
    """The recipe provider failed or returned something unusable."""


class ProviderNotConfiguredError(RecipeProviderError):
    """Recipe generation was requested without provider configuration."""


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _parse_payload(obj: dict[str, Any]) -> GeneratedRecipePayload:
    title = obj.get("title")
    if not isinstance(title, str) or not title.strip():
        title = DEFAULT_RECIPE_TITLE

    ingredients = []
    for ing in obj.get("ingredients") or []:
        if not isinstance(ing, dict):
            continue
        name = ing.get("name")
        amount = ing.get("amount")
        unit = ing.get("unit")
        ingredients.append(
            GeneratedIngredient(
                name=name if isinstance(name, str) else str(name if name is not None else ""),
                amount=amount if isinstance(amount, int | float | str) else None,
                unit=unit if isinstance(unit, str) else None,
            )
        )

    steps = []
    for step in obj.get("steps") or []:
        if not isinstance(step, dict):
            continue
        number = step.get("step_number")
        instruction = step.get("instruction")
        steps.append(
            GeneratedStep(
                step_number=number if isinstance(number, int) else None,
                instruction=(
                    instruction
                    if isinstance(instruction, str)
                    else str(instruction if instruction is not None else "")
                ),
            )
        )

    servings = obj.get("servings")
    ready_in_minutes = obj.get("ready_in_minutes")
    return GeneratedRecipePayload(
        title=title,
        ingredients=ingredients,
        steps=steps,
        servings=int(servings) if isinstance(servings, int | float) else None,
        ready_in_minutes=int(ready_in_minutes) if isinstance(ready_in_minutes, int | float) else None,
    )


def parse_recipe_payloads(raw: str, limit: int = 10) -> list[GeneratedRecipePayload]:
    """Parse the model's answer: a JSON array of recipes, or a single recipe object.

    Raises RecipeProviderError when the answer is not JSON or not an object/array.
    """
    try:
        parsed = json.loads(_strip_code_fences(raw))
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse recipe response as JSON: {e}")
        raise RecipeProviderError("Recipe response was not valid JSON") from e

    if isinstance(parsed, list):
        return [_parse_payload(item) for item in parsed[:limit] if isinstance(item, dict)]
    if isinstance(parsed, dict):
        return [_parse_payload(parsed)]
    raise RecipeProviderError("Recipe response was neither a recipe nor a list of recipes")


class LLMService:
    """Service for generating recipes with Azure OpenAI."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.endpoint = self.settings.azure_openai_endpoint.strip().rstrip("/")
        self.api_key = self.settings.azure_openai_api_key.strip()
        self.chat_deployment = self.settings.azure_openai_chat_deployment.strip()
        self.image_deployment = (self.settings.azure_openai_image_deployment or "").strip() or None
        self.timeout = self.settings.llm_timeout_seconds

    @property
    def is_configured(self) -> bool:
        """Check if recipe generation can be attempted at all."""
        return self.settings.is_llm_configured

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "api-key": self.api_key}

    async def generate(
        self,
        prompt: str,
        system_prompt: str,
        max_output_tokens: int = 12000,
    ) -> str:
        """Generate a text response through the Responses API."""
        url = f"{self.endpoint}{RESPONSES_PATH}?api-version={RESPONSES_API_VERSION}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    headers=self._headers(),
                    json={
                        "model": self.chat_deployment,
                        "instructions": system_prompt,
                        "input": prompt,
                        "max_output_tokens": max_output_tokens,
                    },
                )
                response.raise_for_status()
                data = response.json()
        except ValueError as e:
            logger.error(f"Azure Responses API returned invalid JSON: {e}")
            raise RecipeProviderError("Azure Responses API returned invalid JSON") from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Azure Responses API failed: {e.response.status_code} {e.response.text}")
            raise RecipeProviderError(
                f"Azure Responses API failed: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling Azure Responses API: {e}")
            raise RecipeProviderError(f"Azure Responses API unreachable: {e}") from e

        output = data.get("output") if isinstance(data, dict) else None
        if not isinstance(output, list) or not output:
            raise RecipeProviderError("Azure Responses API returned no output")

        parts = []
        for item in output:
            if not isinstance(item, dict):
                continue
            for block in item.get("content") or []:
                if not isinstance(block, dict):
                    continue
                if block.get("type") == "output_text" and isinstance(block.get("text"), str):
                    parts.append(block["text"])
        content = "".join(parts).strip()
        if not content:
            raise RecipeProviderError("Azure Responses API returned no text content")
        return content

    async def generate_image(self, prompt: str) -> dict[str, Any] | None:
        """Request one image; returns {"b64_json": ...} or {"url": ...}."""
        url = (
            f"{self.endpoint}/openai/deployments/{self.image_deployment}"
            f"/images/generations?api-version={IMAGES_API_VERSION}"
        )
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                url,
                headers=self._headers(),
                json={
                    "model": self.image_deployment,
                    "prompt": prompt,
                    "n": 1,
                    "size": "1024x1024",
                    "style": "vivid",
                    "response_format": "b64_json",
                },
            )
            response.raise_for_status()
            body = response.json()

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            logger.warning("Image generation returned no usable image")
            return None
        return data[0]

    def _new_image_path(self) -> Path:
        image_dir = Path(self.settings.image_dir)
        image_dir.mkdir(parents=True, exist_ok=True)
        return image_dir / f"recipe_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}.png"

    async def save_image(self, image: dict[str, Any]) -> str | None:
        """Write a generated image to the local image directory."""
        if image.get("b64_json"):
            path = self._new_image_path()
            path.write_bytes(base64.b64decode(image["b64_json"]))
            return str(path)
        if image.get("url"):
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(image["url"])
                response.raise_for_status()
            path = self._new_image_path()
            path.write_bytes(response.content)
            return str(path)
        return None

    async def _image_for(self, title: str) -> str | None:
        """Best effort: any failure means the recipe is saved without a picture."""
        try:
            image = await self.generate_image(get_recipe_image_prompt(title))
            return await self.save_image(image) if image else None
        except Exception as e:
            logger.warning(f"Image generation failed for '{title}', continuing without: {e}")
            return None

    async def generate_recipes(
        self,
        ingredient_names: list[str],
        include_image: bool = True,
    ) -> list[GeneratedRecipePayload]:
        """Generate a batch of recipes for the given ingredients.

        Only the first recipe gets an image, and only when an image deployment
        is configured.
        """
        if not self.is_configured:
            raise ProviderNotConfiguredError(
                "Azure OpenAI is not configured. Set AZURE_OPENAI_ENDPOINT, "
                "AZURE_OPENAI_API_KEY and AZURE_OPENAI_CHAT_DEPLOYMENT."
            )

        count = self.settings.recipe_count
        ingredients = ingredient_names[: self.settings.max_prompt_ingredients]
        raw = await self.generate(
            prompt=get_recipe_generation_prompt(ingredients, count),
            system_prompt=get_recipe_generation_system_prompt(count),
        )
        payloads = parse_recipe_payloads(raw, limit=count)
        logger.info(f"Provider returned {len(payloads)} recipes for {len(ingredients)} ingredients")

        if payloads and include_image and self.image_deployment:
            image_path = await self._image_for(payloads[0].title)
            if image_path:
                payloads[0] = payloads[0].model_copy(update={"image_path": image_path})

        return payloads
