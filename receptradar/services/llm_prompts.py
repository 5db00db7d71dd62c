"""LLM prompt templates for recipe generation."""

RECIPE_GENERATION_SYSTEM_PROMPT = """Du är en kock. Skapa exakt {count} olika recept som en JSON-array. Varje recept ska vara ett JSON-objekt med följande fält (på svenska):
- "title": sträng, receptets titel
- "ingredients": array av objekt med "name" (sträng), valfritt "amount" (tal eller sträng), valfritt "unit" (sträng)
- "steps": array av objekt med "step_number" (tal, 1-baserat) och "instruction" (sträng, steg-för-steg)
- "servings": valfritt tal (portioner)
- "ready_in_minutes": valfritt tal (total tid i minuter)

Krav på variation: Recepten ska vara tydligt olika, med olika kök (t.ex. svenskt, italienskt, asiatiskt), olika rättstyper (förrätt, huvudrätt, soppa, sallad, dessert), olika tillagningssätt (stekt, kokt, ugnsbakat, wokad) och olika smakprofiler. Använd de angivna ingredienserna i alla recept men välj varierande tillbehör och tillagning.

Svara ENDAST med en JSON-array av exakt {count} receptobjekt, ingen markdown och ingen förklaring."""


def get_recipe_generation_system_prompt(count: int) -> str:
    return RECIPE_GENERATION_SYSTEM_PROMPT.format(count=count)


def get_recipe_generation_prompt(ingredient_names: list[str], count: int) -> str:
    """Generate the user prompt for a batch of recipes."""
    ingredient_list = ", ".join(ingredient_names)
    return (
        f"Skapa exakt {count} olika recept som använder följande ingredienser: {ingredient_list}. "
        "Varje recept ska vara tydligt varierat (olika kök, rättstyper, tillagningssätt). "
        f"Svara med en JSON-array av exakt {count} recept enligt formatet."
    )


def get_recipe_image_prompt(title: str) -> str:
    return f"Appetizing food photo of {title}, professional, no text"
