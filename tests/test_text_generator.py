"""Unit tests for TextGenerator with mocked agents."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from pydantic import ValidationError

from taste_tailor.config import PipelineConfig
from taste_tailor.models import ColorPalette
from taste_tailor.services import TextGenerator


PALETTE_JSON = """{
  "palette": ["#C9B79C - Oat", "#7A8B5C - Moss", "#D98E73 - Terracotta",
              "#F2D7A7 - Butter", "#4A5D7E - Dusk Blue"],
  "aesthetic": "Pastoral Whimsy",
  "color_psychology": "Earthy and calm."
}"""


def agent_returning(*chunks: str):
    """Agent whose run() yields one message per text chunk."""
    agent = MagicMock()
    messages = [SimpleNamespace(contents=[SimpleNamespace(text=chunk)]) for chunk in chunks]
    agent.run = AsyncMock(return_value=SimpleNamespace(messages=messages))
    return agent


@pytest.fixture
def generator(tmp_path):
    return TextGenerator(PipelineConfig(data_dir=tmp_path))


class TestGenerateObject:
    """Tests for schema-validated generation."""

    @pytest.mark.asyncio
    async def test_parses_fenced_json(self, generator):
        generator._get_agent = MagicMock(return_value=agent_returning(f"```json\n{PALETTE_JSON}\n```"))

        palette = await generator.generate_object(
            ColorPalette, name="ColorCurator", prompt="tastes", system="You curate colors."
        )

        assert palette.aesthetic == "Pastoral Whimsy"
        assert len(palette.palette) == 5

    @pytest.mark.asyncio
    async def test_joins_message_chunks(self, generator):
        half = len(PALETTE_JSON) // 2
        generator._get_agent = MagicMock(
            return_value=agent_returning(PALETTE_JSON[:half], PALETTE_JSON[half:])
        )

        palette = await generator.generate_object(
            ColorPalette, name="ColorCurator", prompt="tastes", system="You curate colors."
        )

        assert palette.palette[1] == "#7A8B5C - Moss"

    @pytest.mark.asyncio
    async def test_schema_in_instructions(self, generator):
        generator._get_agent = MagicMock(return_value=agent_returning(PALETTE_JSON))

        await generator.generate_object(
            ColorPalette, name="ColorCurator", prompt="tastes", system="You curate colors."
        )

        name, instructions, deployment = generator._get_agent.call_args.args
        assert name == "ColorCurator"
        assert instructions.startswith("You curate colors.")
        assert '"color_psychology"' in instructions
        assert deployment == generator.config.text.deployment

    @pytest.mark.asyncio
    @pytest.mark.parametrize("output", [
        "I'm sorry, I can't help with that.",
        '{"palette": ["#000000 - Black"], "aesthetic": "Noir", "color_psychology": "Dark."}',
    ])
    async def test_invalid_output_raises(self, generator, output):
        generator._get_agent = MagicMock(return_value=agent_returning(output))

        with pytest.raises(ValidationError):
            await generator.generate_object(
                ColorPalette, name="ColorCurator", prompt="tastes", system="You curate colors."
            )


class TestGenerateText:
    """Tests for free-text generation."""

    @pytest.mark.asyncio
    async def test_uses_requested_deployment(self, generator):
        agent = agent_returning("Weaving Ghibli Whimsy")
        generator._get_agent = MagicMock(return_value=agent)

        text = await generator.generate_text(
            name="StepNamer", prompt="Step Type: storytelling", system="Name steps.",
            deployment="gpt-35-steps",
        )

        assert text == "Weaving Ghibli Whimsy"
        assert generator._get_agent.call_args.args == ("StepNamer", "Name steps.", "gpt-35-steps")
        agent.run.assert_awaited_once_with("Step Type: storytelling")

    @pytest.mark.asyncio
    async def test_defaults_to_text_deployment(self, generator):
        generator._get_agent = MagicMock(return_value=agent_returning("label"))

        await generator.generate_text(name="StepNamer", prompt="p", system="s")

        assert generator._get_agent.call_args.args[2] == generator.config.text.deployment

    @pytest.mark.asyncio
    async def test_skips_non_text_contents(self, generator):
        agent = MagicMock()
        message = SimpleNamespace(contents=[SimpleNamespace(), SimpleNamespace(text="Hello")])
        agent.run = AsyncMock(return_value=SimpleNamespace(messages=[message]))
        generator._get_agent = MagicMock(return_value=agent)

        assert await generator.generate_text(name="StepNamer", prompt="p", system="s") == "Hello"


class TestAgentCache:
    """Tests for lazy agent creation."""

    def test_agents_reused_per_name_and_deployment(self, generator):
        client = MagicMock()
        client.as_agent.side_effect = lambda **kwargs: MagicMock(name=kwargs["name"])
        generator._get_client = MagicMock(return_value=client)

        first = generator._get_agent("ColorCurator", "instr", "gpt-4o-mini")
        second = generator._get_agent("ColorCurator", "instr", "gpt-4o-mini")
        other = generator._get_agent("ColorCurator", "instr", "gpt-4o")

        assert first is second
        assert other is not first
        assert client.as_agent.call_count == 2
