"""Visual Prompt Designer - writes the mood-board image prompt."""

from ..models import VisualPrompt
from ..utils.text import join_list


VISUAL_PROMPT_SYSTEM = (
    "You are a visual art director specializing in fashion photography and mood board "
    "creation. Create detailed, artistic prompts that capture style essence."
)

VISUAL_PROMPT_PROMPT = """As a visual art director, create a detailed prompt for generating a fashion mood board:

Style Title: {title}
Narrative: {narrative}
Color Palette: {palette}
Clothing Types: {recommendations}
Aesthetic: {aesthetic}

Create:
1. A detailed visual prompt for an image model that will generate a sophisticated fashion mood board
2. Key visual elements to include in the mood board
3. Layout and composition guidelines for the mood board"""


async def design_visual_prompt(
    generator,
    title: str,
    narrative: str,
    palette: list[str],
    clothing_recommendations: list[str],
    aesthetic: str,
) -> VisualPrompt:
    return await generator.generate_object(
        VisualPrompt,
        name="VisualPromptDesigner",
        prompt=VISUAL_PROMPT_PROMPT.format(
            title=title,
            narrative=narrative,
            palette=join_list(palette),
            recommendations=join_list(clothing_recommendations),
            aesthetic=aesthetic,
        ),
        system=VISUAL_PROMPT_SYSTEM,
    )
