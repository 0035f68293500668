"""Unit tests for ImageSynthesizer with a mocked OpenAI client."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from taste_tailor.config import ImageConfig
from taste_tailor.services import ImageGenerationError, ImageSynthesizer

from conftest import PNG_B64


JPEG_B64 = "/9j/4AAQSkZJRgABAQAAAQABAAD/2wBDAAgGBgcGBQgHBwcJCQgKDBQNDAsLDBkSEw8U"


def make_client(b64_json: str | None = PNG_B64, data: list | None = None):
    """OpenAI-like client whose images.generate returns one image."""
    if data is None:
        data = [SimpleNamespace(b64_json=b64_json)]
    client = MagicMock()
    client.images.generate = AsyncMock(return_value=SimpleNamespace(data=data))
    return client


class TestBuildParams:
    """Tests for model-specific request parameters."""

    def test_dalle2_params(self):
        synth = ImageSynthesizer(ImageConfig(model="dall-e-2", size="512x512"))

        params = synth.build_params("a mood board")

        assert params == {
            "model": "dall-e-2",
            "prompt": "a mood board",
            "n": 1,
            "size": "512x512",
            "response_format": "b64_json",
        }

    def test_dalle3_adds_quality_and_style(self):
        synth = ImageSynthesizer(ImageConfig(model="dall-e-3", size="1024x1024", quality="hd"))

        params = synth.build_params("a mood board")

        assert params["quality"] == "hd"
        assert params["style"] == "vivid"
        assert params["response_format"] == "b64_json"

    def test_gpt_image_omits_response_format(self):
        synth = ImageSynthesizer(ImageConfig(model="gpt-image-1", size="1024x1024"))

        params = synth.build_params("a mood board")

        assert "response_format" not in params
        assert "quality" not in params


class TestBoardImage:
    """Tests for the mood-board image."""

    @pytest.mark.asyncio
    async def test_returns_png_data_uri(self):
        client = make_client()
        synth = ImageSynthesizer(ImageConfig(), client=client)

        image = await synth.synthesize_board_image("linen and corduroy flat lay")

        assert image == f"data:image/png;base64,{PNG_B64}"
        prompt = client.images.generate.call_args.kwargs["prompt"]
        assert "linen and corduroy flat lay" in prompt
        assert "DO NOT include any text" in prompt

    @pytest.mark.asyncio
    async def test_detects_jpeg_payload(self):
        synth = ImageSynthesizer(ImageConfig(), client=make_client(JPEG_B64))

        image = await synth.synthesize_board_image("prompt")

        assert image.startswith("data:image/jpeg;base64,")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("data", [[], [SimpleNamespace(b64_json=None)], None])
    async def test_missing_payload_raises(self, data):
        client = MagicMock()
        client.images.generate = AsyncMock(return_value=SimpleNamespace(data=data))
        synth = ImageSynthesizer(ImageConfig(), client=client)

        with pytest.raises(ImageGenerationError, match="Failed to generate style image"):
            await synth.synthesize_board_image("prompt")

    @pytest.mark.asyncio
    async def test_api_error_raises_typed_error(self):
        client = MagicMock()
        client.images.generate = AsyncMock(side_effect=RuntimeError("content policy"))
        synth = ImageSynthesizer(ImageConfig(), client=client)

        with pytest.raises(ImageGenerationError) as exc_info:
            await synth.synthesize_board_image("prompt")

        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestItemImage:
    """Tests for clothing item images."""

    @pytest.mark.asyncio
    async def test_prompt_includes_item_details(self):
        client = make_client()
        synth = ImageSynthesizer(ImageConfig(), client=client)

        image = await synth.synthesize_item_image(
            "Moss Linen Overshirt",
            "Relaxed overshirt in washed linen",
            ["#7A8B5C - Moss", "#C9B79C - Oat"],
            "Pastoral Whimsy",
        )

        assert image.startswith("data:image/png;base64,")
        prompt = client.images.generate.call_args.kwargs["prompt"]
        assert "Moss Linen Overshirt" in prompt
        assert "#7A8B5C - Moss, #C9B79C - Oat" in prompt
        assert "Pastoral Whimsy" in prompt
        assert "DO NOT include any text" in prompt

    @pytest.mark.asyncio
    async def test_missing_payload_raises(self):
        synth = ImageSynthesizer(ImageConfig(), client=make_client(b64_json=""))

        with pytest.raises(ImageGenerationError, match="Failed to generate clothing item image"):
            await synth.synthesize_item_image("Beret", "Wool beret", ["#000000 - Black"], "Noir")
