# Test fixtures and configuration
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from taste_tailor.config import GenerationConfig, PipelineConfig
from taste_tailor.models import CorrelationResult, FashionEntity
from taste_tailor.pipeline import StyleBoardGenerator, StylePipeline
from taste_tailor.services import BoardStore, ImageGenerationError


PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAIAAACQd1PeAAAADElEQVQI12P4z8AAAAMAAQX+1KoAAAAASUVORK5CYII="


class FakeTextGenerator:
    """Stands in for TextGenerator; responses are keyed by agent name.

    A dict response is validated against the requested schema, so schema
    bounds behave as they do with the real generator. An exception response
    is raised.
    """

    def __init__(self, objects: dict, step_name: str | Exception = "Weaving Ghibli Whimsy"):
        self.objects = objects
        self.step_name = step_name
        self.calls: list[str] = []
        self.text_calls: list[dict] = []
        self.prompts: dict[str, str] = {}

    async def generate_object(self, schema, *, name, prompt, system):
        self.calls.append(name)
        self.prompts[name] = prompt
        response = self.objects[name]
        if isinstance(response, Exception):
            raise response
        return schema.model_validate(response)

    async def generate_text(self, *, name, prompt, system, deployment=None):
        self.text_calls.append({"name": name, "prompt": prompt, "deployment": deployment})
        if isinstance(self.step_name, Exception):
            raise self.step_name
        return self.step_name


class FakeImageSynthesizer:
    """Returns data URIs; named items (or the board image) can be made to fail."""

    def __init__(self, failing_items: set[str] | None = None, fail_board: bool = False):
        self.failing_items = failing_items or set()
        self.fail_board = fail_board
        self.item_calls: list[str] = []
        self.board_calls: list[str] = []

    async def synthesize_item_image(self, name, description, palette, aesthetic):
        self.item_calls.append(name)
        if name in self.failing_items:
            raise ImageGenerationError("Failed to generate clothing item image")
        return f"data:image/png;base64,{PNG_B64}"

    async def synthesize_board_image(self, visual_prompt):
        self.board_calls.append(visual_prompt)
        if self.fail_board:
            raise ImageGenerationError("Failed to generate style image")
        return f"data:image/png;base64,{PNG_B64}"

    async def close(self):
        pass


class FakeCorrelationClient:
    def __init__(self, result: CorrelationResult):
        self.result = result
        self.calls: list[list[str]] = []

    async def get_style_correlations(self, tastes_input):
        self.calls.append(list(tastes_input))
        return self.result

    async def check_connection(self):
        return True

    async def close(self):
        pass


class RecordingSink:
    def __init__(self):
        self.events = []

    def emit(self, event):
        self.events.append(event)

    @property
    def progress_values(self) -> list[int]:
        return [e.progress for e in self.events]

    @property
    def steps(self) -> list[str]:
        return [e.step for e in self.events]


@pytest.fixture
def sample_tastes():
    return ["Studio Ghibli movies", "Indie folk music", "Wes Anderson films"]


@pytest.fixture
def stage_outputs():
    """Canned structured outputs for every stage, keyed by agent name."""
    return {
        "FashionAnalyst": {
            "analysis": "A whimsical, craft-forward sensibility rooted in nostalgia and nature.",
            "recommendations": ["Linen overshirts", "Corduroy trousers", "Hand-knit cardigans"],
            "style_archetypes": ["Storybook Romantic", "Folk Artisan"],
            "fashion_dna": "Handmade warmth with symmetrical, curated composition.",
        },
        "ColorCurator": {
            "palette": [
                "#C9B79C - Oat",
                "#7A8B5C - Moss",
                "#D98E73 - Terracotta",
                "#F2D7A7 - Butter",
                "#4A5D7E - Dusk Blue",
            ],
            "aesthetic": "Pastoral Whimsy",
            "color_psychology": "Earthy tones ground the whimsy; pastels add storybook charm.",
        },
        "StyleStoryteller": {
            "title": "Whimsical Wanderer",
            "narrative": "Your style reads like a hand-drawn frame from a countryside film.",
            "style_manifesto": "Dress like every day is an adventure.",
        },
        "ClothingCurator": {
            "clothing_items": [
                {"name": "Moss Linen Overshirt", "description": "Relaxed overshirt", "category": "Top"},
                {"name": "Oat Corduroy Trousers", "description": "Wide-leg cords", "category": "Bottom"},
                {"name": "Terracotta Beret", "description": "Wool beret", "category": "Accessory"},
            ],
            "reasoning": "Earthy layers with one playful accent.",
        },
        "VisualPromptDesigner": {
            "mood_board_prompt": "Flat lay of linen, corduroy and a terracotta beret on oat paper",
            "style_elements": ["linen texture", "pressed flowers"],
            "composition": "Symmetrical grid",
        },
    }


@pytest.fixture
def correlations():
    return CorrelationResult(
        fashion_entities=[
            FashionEntity(id="f1", name="Kapital", category="brand"),
            FashionEntity(id="f2", name="Cottagecore fashion", category="fashion"),
        ],
        decor_entities=[FashionEntity(id="d1", name="Wabi-sabi decor", category="home")],
        tags=["whimsical", "nostalgic"],
    )


@pytest.fixture
def config(tmp_path):
    return PipelineConfig(
        data_dir=tmp_path / "data",
        generation=GenerationConfig(clothing_items_min=2, clothing_items_max=3),
    )


@pytest.fixture
def text_generator(stage_outputs):
    return FakeTextGenerator(stage_outputs)


@pytest.fixture
def image_synthesizer():
    return FakeImageSynthesizer()


@pytest.fixture
def correlation_client(correlations):
    return FakeCorrelationClient(correlations)


@pytest.fixture
def pipeline(config, text_generator, image_synthesizer):
    return StylePipeline(config, text_generator, image_synthesizer)


@pytest.fixture
def store(config):
    return BoardStore(config.data_dir)


@pytest.fixture
def board_generator(config, correlation_client, pipeline, store):
    return StyleBoardGenerator(
        config=config,
        correlation_client=correlation_client,
        pipeline=pipeline,
        store=store,
    )


@pytest.fixture
def sink():
    return RecordingSink()
