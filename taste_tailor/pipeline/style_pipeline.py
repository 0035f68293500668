"""Style generation pipeline."""

import asyncio
import logging

from ..config import PipelineConfig
from ..models import (
    PLACEHOLDER_IMAGE,
    ClothingItem,
    ClothingItemDraft,
    ColorPalette,
    CorrelationResult,
    StyleBoardResult,
)
from ..agents import (
    analyze_fashion,
    craft_narrative,
    curate_clothing,
    curate_colors,
    design_visual_prompt,
    fallback_step_name,
    name_step,
)
from .progress import NullProgressSink, ProgressSink, report


logger = logging.getLogger(__name__)


class StylePipeline:
    """Turns cultural tastes into a style board.

    Flow:
    1. Fashion analysis (style DNA, garment categories)
    2. Color & aesthetic curation
    3. Style narrative
    4. Clothing curation
    5. Mood-board prompt design
    6. One image per clothing item, generated concurrently

    If any text stage fails the run returns ``StyleBoardResult.fallback`` instead
    of raising. Item image failures only swap in a placeholder for that item.
    """

    def __init__(self, config: PipelineConfig, text_generator, image_synthesizer):
        self.config = config
        self.text_generator = text_generator
        self.image_synthesizer = image_synthesizer

    async def _step_name(self, stage_type: str, tastes_input: list[str]) -> str:
        if not self.config.generation.dynamic_step_names:
            return fallback_step_name(stage_type)
        return await name_step(
            self.text_generator,
            stage_type,
            tastes_input,
            deployment=self.config.text.step_name_deployment,
        )

    async def generate_style_narrative(
        self,
        tastes_input: list[str],
        correlations: CorrelationResult,
        progress: ProgressSink | None = None,
    ) -> StyleBoardResult:
        """Run the text stages and per-item images.

        Args:
            tastes_input: The user's cultural tastes (already validated)
            correlations: Cultural-graph correlations for the tastes
            progress: Optional sink receiving checkpoints from 15 up to 100

        Returns:
            The generated board, or the fallback board if a text stage failed
        """
        sink = progress or NullProgressSink()
        generator = self.text_generator
        generation = self.config.generation

        try:
            # Step 1: Fashion analysis
            step = await self._step_name("fashion-analysis", tastes_input)
            report(sink, step, 15, "Analyzing your cultural tastes and fashion correlations...")
            analysis = await analyze_fashion(generator, tastes_input, correlations.fashion_entities)
            logger.info("🔍 Fashion analysis: %d recommendations", len(analysis.recommendations))

            # Step 2: Color & aesthetic curation
            step = await self._step_name("color-curation", tastes_input)
            report(sink, step, 30, "Creating your personalized color palette...")
            colors = await curate_colors(generator, tastes_input, analysis.analysis)
            logger.info("🎨 Aesthetic: %s (%d colors)", colors.aesthetic, len(colors.palette))

            # Step 3: Storytelling
            step = await self._step_name("storytelling", tastes_input)
            report(sink, step, 45, "Crafting your unique style narrative...")
            story = await craft_narrative(
                generator,
                tastes_input,
                analysis.analysis,
                analysis.recommendations,
                colors,
            )
            logger.info("✨ Title: %s", story.title)

            # Step 4: Clothing curation
            report(sink, "Curating Your Wardrobe", 60, "Selecting specific clothing pieces...")
            selection = await curate_clothing(
                generator,
                tastes_input,
                analysis.analysis,
                analysis.recommendations,
                colors.palette,
                colors.aesthetic,
                min_items=generation.clothing_items_min,
                max_items=generation.clothing_items_max,
            )

            # Step 5: Visual prompt design
            step = await self._step_name("visual-design", tastes_input)
            report(sink, step, 75, "Designing your fashion mood board...")
            visual = await design_visual_prompt(
                generator,
                story.title,
                story.narrative,
                colors.palette,
                analysis.recommendations,
                colors.aesthetic,
            )

            # Step 6: Clothing item images
            report(sink, "Creating Style Visuals", 85, "Generating images for each clothing piece...")
            clothing_items = await self._synthesize_item_images(selection.clothing_items, colors, sink)

            report(sink, "Finalizing Your Style Board", 100, "Your personalized style board is ready!")

            return StyleBoardResult(
                title=story.title,
                narrative=story.narrative,
                visual_prompt=visual.mood_board_prompt,
                clothing_recommendations=analysis.recommendations,
                color_palette=colors.palette,
                style_archetype=colors.aesthetic,
                clothing_items=clothing_items,
            )

        except Exception:
            logger.exception("Error in style generation, returning fallback board")
            return StyleBoardResult.fallback(tastes_input)

    async def _synthesize_item_images(
        self,
        items: list[ClothingItemDraft],
        colors: ColorPalette,
        sink: ProgressSink,
    ) -> list[ClothingItem]:
        """Generate all item images concurrently, keeping the curated order."""
        total = len(items)
        completed = 0

        async def synthesize(item: ClothingItemDraft) -> ClothingItem:
            nonlocal completed
            try:
                image_url = await self.image_synthesizer.synthesize_item_image(
                    item.name,
                    item.description,
                    colors.palette,
                    colors.aesthetic,
                )
            except Exception as e:
                logger.warning("⚠️ Image for %r failed, using placeholder: %s", item.name, e)
                image_url = PLACEHOLDER_IMAGE

            # Counted by completion so progress stays monotonic
            completed += 1
            report(sink, "Creating Style Visuals", 85 + (10 * completed) // total, f"Generated {item.name}...")

            return ClothingItem(
                name=item.name,
                description=item.description,
                category=item.category,
                image_url=image_url,
            )

        return list(await asyncio.gather(*(synthesize(item) for item in items)))

    async def generate_style_image(self, visual_prompt: str) -> str:
        """Generate the mood-board image.

        Raises:
            ImageGenerationError: The image backend failed; there is no fallback.
        """
        return await self.image_synthesizer.synthesize_board_image(visual_prompt)
