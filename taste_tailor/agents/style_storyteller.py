"""Style Storyteller - writes the personal style narrative."""

from ..models import ColorPalette, StyleNarrative
from ..utils.text import join_list


STORYTELLER_SYSTEM = (
    "You are a master fashion storyteller who creates compelling personal style "
    "narratives that connect cultural identity to fashion expression."
)

STORYTELLER_PROMPT = """As a fashion storyteller, craft a compelling personal style narrative:

Cultural Tastes: {tastes}
Fashion Analysis: {analysis}
Clothing Recommendations: {recommendations}
Color Palette: {palette}
Style Aesthetic: {aesthetic}
Color Psychology: {color_psychology}

Create:
1. A compelling 2-4 word style title
2. A 250-300 word narrative that tells the story of this unique fashion identity
3. A brief manifesto or tagline for this style identity"""


async def craft_narrative(
    generator,
    tastes_input: list[str],
    fashion_analysis: str,
    clothing_recommendations: list[str],
    colors: ColorPalette,
) -> StyleNarrative:
    """Run the storytelling stage.

    Args:
        generator: Text generator used for the structured call
        tastes_input: The user's cultural tastes
        fashion_analysis: Analysis text from the Fashion Analyst
        clothing_recommendations: Garment categories from the Fashion Analyst
        colors: Palette, aesthetic and color psychology from the Color Curator

    Returns:
        Title, narrative and manifesto for the board
    """
    return await generator.generate_object(
        StyleNarrative,
        name="StyleStoryteller",
        prompt=STORYTELLER_PROMPT.format(
            tastes=join_list(tastes_input),
            analysis=fashion_analysis,
            recommendations=join_list(clothing_recommendations),
            palette=join_list(colors.palette),
            aesthetic=colors.aesthetic,
            color_psychology=colors.color_psychology,
        ),
        system=STORYTELLER_SYSTEM,
    )
