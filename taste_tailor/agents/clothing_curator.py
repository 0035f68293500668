"""Clothing Curator - selects the specific pieces shown on the board."""

from ..models import ClothingSelection, clothing_selection_schema
from ..utils.text import join_list


CLOTHING_CURATOR_SYSTEM = (
    "You are a world-renowned fashion stylist and curator with expertise in cultural "
    "fashion and personal style development. Create specific, detailed clothing "
    "selections that form cohesive style narratives."
)

CLOTHING_CURATOR_PROMPT = """As a professional fashion stylist and curator, select {min_items}-{max_items} specific clothing items that perfectly embody this style:

Cultural Tastes: {tastes}
Fashion Analysis: {analysis}
General Clothing Categories: {recommendations}
Color Palette: {palette}
Style Aesthetic: {aesthetic}

Curate {min_items}-{max_items} specific clothing items that work together as a cohesive wardrobe. Each item should be:
- Specific and detailed (not just "dress" but "midi wrap dress with geometric print")
- Aligned with the cultural tastes and aesthetic
- Part of a balanced outfit selection across different categories
- Unique and distinctive to this particular style identity

Focus on creating a diverse but cohesive selection that tells the complete style story."""


async def curate_clothing(
    generator,
    tastes_input: list[str],
    fashion_analysis: str,
    clothing_recommendations: list[str],
    palette: list[str],
    aesthetic: str,
    min_items: int = 2,
    max_items: int = 3,
) -> ClothingSelection:
    """Run the clothing curation stage; the item count must fall in [min_items, max_items]."""
    return await generator.generate_object(
        clothing_selection_schema(min_items, max_items),
        name="ClothingCurator",
        prompt=CLOTHING_CURATOR_PROMPT.format(
            min_items=min_items,
            max_items=max_items,
            tastes=join_list(tastes_input),
            analysis=fashion_analysis,
            recommendations=join_list(clothing_recommendations),
            palette=join_list(palette),
            aesthetic=aesthetic,
        ),
        system=CLOTHING_CURATOR_SYSTEM,
    )
