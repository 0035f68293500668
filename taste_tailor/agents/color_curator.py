"""Color & Aesthetic Curator."""

from ..models import ColorPalette
from ..utils.text import join_list


COLOR_CURATOR_SYSTEM = (
    "You are a master colorist and aesthetic curator with expertise in cultural "
    "color psychology and fashion harmony."
)

COLOR_CURATOR_PROMPT = """As a color theory expert and aesthetic curator, create a cohesive color palette and aesthetic direction:

Cultural Tastes: {tastes}
Fashion Analysis: {analysis}

Provide:
1. A sophisticated 5-7 color palette with hex codes and color names
2. The overarching aesthetic style/archetype name
3. Explanation of color choices and their cultural significance"""


async def curate_colors(generator, tastes_input: list[str], fashion_analysis: str) -> ColorPalette:
    return await generator.generate_object(
        ColorPalette,
        name="ColorCurator",
        prompt=COLOR_CURATOR_PROMPT.format(
            tastes=join_list(tastes_input),
            analysis=fashion_analysis,
        ),
        system=COLOR_CURATOR_SYSTEM,
    )
