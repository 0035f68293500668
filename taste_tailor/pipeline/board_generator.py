"""One style-board generation run, shared by the buffered and streaming endpoints."""

import logging
from typing import Any

from ..config import PipelineConfig
from ..models import StyleBoard
from .progress import NullProgressSink, ProgressSink, ScaledProgressSink, report
from .style_pipeline import StylePipeline


logger = logging.getLogger(__name__)

MIN_TASTES = 3
MAX_TASTES = 10


class InvalidTastesError(ValueError):
    """Raised when the submitted tastes cannot start a generation run."""


def validate_tastes_input(tastes_input: Any) -> list[str]:
    """Check and normalise the submitted tastes.

    Returns:
        The stripped taste strings, in submission order

    Raises:
        InvalidTastesError: Not a list of 3-10 non-empty strings
    """
    if not isinstance(tastes_input, list) or len(tastes_input) < MIN_TASTES:
        raise InvalidTastesError(f"At least {MIN_TASTES} taste inputs are required")
    if len(tastes_input) > MAX_TASTES:
        raise InvalidTastesError(f"At most {MAX_TASTES} taste inputs are allowed")
    if not all(isinstance(t, str) and t.strip() for t in tastes_input):
        raise InvalidTastesError("Taste inputs must be non-empty strings")
    return [t.strip() for t in tastes_input]


class StyleBoardGenerator:
    """Correlations -> text pipeline -> board image -> persistence.

    Progress checkpoints: 0 start, 10 correlations, 15-90 text pipeline and item
    images, 95 board image, 100 once the board is saved. Board-image and
    persistence failures propagate to the caller.
    """

    def __init__(
        self,
        config: PipelineConfig,
        correlation_client,
        pipeline: StylePipeline,
        store,
    ):
        self.config = config
        self.correlation_client = correlation_client
        self.pipeline = pipeline
        self.store = store

    async def generate(
        self,
        user_id: str,
        tastes_input: list[str],
        progress: ProgressSink | None = None,
    ) -> StyleBoard:
        sink = progress or NullProgressSink()

        report(sink, "Getting Started", 0, "Initializing your style generation...")

        report(sink, "Analyzing Cultural Tastes", 10, "Connecting with taste intelligence...")
        correlations = await self.correlation_client.get_style_correlations(tastes_input)
        logger.info(
            "Correlations: %d fashion, %d decor, %d tags",
            len(correlations.fashion_entities),
            len(correlations.decor_entities),
            len(correlations.tags),
        )

        report(sink, "Beginning AI Analysis", 15, "Starting agentic style generation...")
        result = await self.pipeline.generate_style_narrative(
            tastes_input,
            correlations,
            ScaledProgressSink(sink, 15, 90),
        )

        report(sink, "Generating Visual Assets", 95, "Creating your style board image...")
        image_url = await self.pipeline.generate_style_image(result.visual_prompt)

        board = StyleBoard.from_result(
            user_id=user_id,
            tastes_input=tastes_input,
            correlations=correlations,
            result=result,
            image_url=image_url,
            enriched_limit=self.config.correlation.enriched_taste_limit,
        )
        board = self.store.create_board(board)

        report(sink, "Style Board Ready", 100, "Your style board has been saved!")
        return board
