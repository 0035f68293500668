"""OpenAI image generation for mood boards and clothing items."""

import logging
from typing import Any

from openai import AsyncOpenAI

from ..config import ImageConfig
from ..utils.images import to_data_uri
from ..utils.text import join_list


logger = logging.getLogger(__name__)


BOARD_IMAGE_PROMPT = (
    "Create a sophisticated fashion mood board and style collage: {visual_prompt}. "
    "The image should be clean, well-organized, and visually appealing, showing clothing "
    "items, accessories, and fashion elements arranged in an aesthetic grid or collage "
    "format. Focus on fashion and clothing rather than home decor. DO NOT include any "
    "text, labels, words, or written content in the image. Only show visual fashion "
    "elements, clothing, accessories, and style elements without any typography or text "
    "overlays."
)

ITEM_IMAGE_PROMPT = (
    "Create a high-quality fashion photography image of a single clothing item: "
    "{name}. {description}. The item should be photographed in a clean, professional "
    "style with excellent lighting and composition. Use colors from this palette: "
    "{palette}. The overall aesthetic should be {aesthetic}. Show the item clearly and "
    "beautifully, either on a model or as a flat lay, with clean background. DO NOT "
    "include any text, labels, tags, or written content in the image. Focus solely on "
    "showcasing the clothing item's design, texture, and style."
)


class ImageGenerationError(RuntimeError):
    """Raised when the image backend returns no usable image."""


class ImageSynthesizer:
    """Generates data-URI images from text prompts."""

    def __init__(
        self,
        config: ImageConfig,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        self.config = config
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """Get or create the OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self.config.timeout)
        return self._client

    def build_params(self, prompt: str) -> dict[str, Any]:
        """Request parameters for the configured image model."""
        params: dict[str, Any] = {
            "model": self.config.model,
            "prompt": prompt,
            "n": 1,
            "size": self.config.size,
        }
        if self.config.is_dalle:
            params["response_format"] = "b64_json"
        if self.config.model == "dall-e-3":
            params["style"] = self.config.style
        if self.config.supports_quality:
            params["quality"] = self.config.quality
        return params

    async def _generate(self, prompt: str) -> str:
        response = await self.client.images.generate(**self.build_params(prompt))

        image_data = response.data[0] if response.data else None
        if image_data is None or not image_data.b64_json:
            raise ImageGenerationError("No image data returned from OpenAI")

        return to_data_uri(image_data.b64_json)

    async def synthesize_board_image(self, visual_prompt: str) -> str:
        """Generate the composite mood-board image."""
        try:
            return await self._generate(BOARD_IMAGE_PROMPT.format(visual_prompt=visual_prompt))
        except Exception as e:
            logger.error("Error generating style image: %s", e)
            raise ImageGenerationError("Failed to generate style image") from e

    async def synthesize_item_image(
        self,
        name: str,
        description: str,
        palette: list[str],
        aesthetic: str,
    ) -> str:
        """Generate a product-style image for one clothing item."""
        prompt = ITEM_IMAGE_PROMPT.format(
            name=name,
            description=description,
            palette=join_list(palette),
            aesthetic=aesthetic,
        )
        try:
            return await self._generate(prompt)
        except Exception as e:
            logger.error("Error generating clothing item image for %r: %s", name, e)
            raise ImageGenerationError("Failed to generate clothing item image") from e

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
