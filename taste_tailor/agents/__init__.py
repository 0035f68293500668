"""Generation stages for the style pipeline."""

from .clothing_curator import curate_clothing
from .color_curator import curate_colors
from .fashion_analyst import analyze_fashion
from .step_namer import FALLBACK_STEP_NAMES, DEFAULT_STEP_NAME, fallback_step_name, name_step
from .style_storyteller import craft_narrative
from .visual_prompt_designer import design_visual_prompt

__all__ = [
    "analyze_fashion",
    "curate_colors",
    "craft_narrative",
    "curate_clothing",
    "design_visual_prompt",
    "name_step",
    "fallback_step_name",
    "FALLBACK_STEP_NAMES",
    "DEFAULT_STEP_NAME",
]
