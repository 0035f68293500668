"""Step Namer - short, personalised labels for pipeline progress."""

import logging

from ..utils.text import clean_label, join_list


logger = logging.getLogger(__name__)


FALLBACK_STEP_NAMES = {
    "fashion-analysis": "Analyzing Your Style DNA",
    "color-curation": "Curating Your Color Palette",
    "storytelling": "Crafting Your Style Story",
    "visual-design": "Designing Your Mood Board",
}
DEFAULT_STEP_NAME = "Processing Your Style"


STEP_NAME_SYSTEM = (
    "You are a creative copywriter specializing in fashion and user experience. "
    "Create engaging, personalized step names."
)

STEP_NAME_PROMPT = """Generate a creative, engaging step name for this fashion analysis phase:

Step Type: {stage_type}
User's Cultural Tastes: {tastes}

Create a short, catchy step name (3-6 words) that relates to the user's tastes and the current analysis phase. Make it personal and engaging.

Examples:
- "Decoding Your Cultural DNA"
- "Weaving Japanese Elegance"
- "Crafting Your Color Story"
- "Building Your Fashion Narrative\""""


def fallback_step_name(stage_type: str) -> str:
    """Static label for a stage type."""
    return FALLBACK_STEP_NAMES.get(stage_type, DEFAULT_STEP_NAME)


async def name_step(
    generator,
    stage_type: str,
    tastes_input: list[str],
    deployment: str | None = None,
) -> str:
    """Ask the step-name model for a label, falling back to a static one."""
    try:
        text = await generator.generate_text(
            name="StepNamer",
            prompt=STEP_NAME_PROMPT.format(stage_type=stage_type, tastes=join_list(tastes_input)),
            system=STEP_NAME_SYSTEM,
            deployment=deployment,
        )
        label = clean_label(text)
        if label:
            return label
        logger.warning("Empty step name for %s", stage_type)
    except Exception as e:
        logger.warning("Error generating step name for %s: %s", stage_type, e)
    return fallback_step_name(stage_type)
