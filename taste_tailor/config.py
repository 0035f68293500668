"""Configuration management for the TasteTailor service."""

from pathlib import Path
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings


class TextModelConfig(BaseModel):
    """Azure OpenAI deployments used for text generation."""
    deployment: str = "gpt-4o-mini"  # Structured-output stages
    step_name_deployment: str = "gpt-4o-mini"  # Cheap model for progress labels


class GenerationConfig(BaseModel):
    """Style generation settings."""
    clothing_items_min: int = Field(default=2, ge=1)
    clothing_items_max: int = Field(default=3, ge=1, le=10)
    dynamic_step_names: bool = True

    @model_validator(mode="after")
    def _check_item_bounds(self) -> "GenerationConfig":
        if self.clothing_items_min > self.clothing_items_max:
            raise ValueError("clothing_items_min must not exceed clothing_items_max")
        return self


class ImageConfig(BaseModel):
    """Image generation settings."""
    model: str = "dall-e-2"  # "dall-e-2", "dall-e-3", or "gpt-image-1"
    size: str = "512x512"
    quality: str = "standard"  # Only sent to dall-e-3
    style: str = "vivid"
    timeout: float = 120.0

    @property
    def supports_quality(self) -> bool:
        return self.model == "dall-e-3"

    @property
    def is_dalle(self) -> bool:
        return self.model.startswith("dall-e")


class CorrelationConfig(BaseModel):
    """Cultural-graph lookup settings."""
    timeout: float = 30.0
    search_entity_limit: int = 10
    recommendation_limit: int = 20
    enriched_taste_limit: int = 15


class PipelineConfig(BaseSettings):
    """Main service configuration."""

    # Paths and URLs
    data_dir: Path = Path("data")
    app_url: str = "http://localhost:3000"

    log_level: str = "INFO"
    auth_header: str = "X-User-Id"

    # Sub-configs
    text: TextModelConfig = Field(default_factory=TextModelConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    image: ImageConfig = Field(default_factory=ImageConfig)
    correlation: CorrelationConfig = Field(default_factory=CorrelationConfig)

    # Credentials (loaded from .env)
    azure_openai_endpoint: str | None = None
    azure_openai_api_key: str | None = None
    openai_api_key: str | None = None
    qloo_api_key: str | None = None
    qloo_api_base_url: str = "https://api.qloo.com"

    class Config:
        env_file = ".env"
        env_prefix = ""
        env_nested_delimiter = "__"
        extra = "ignore"


def load_config() -> PipelineConfig:
    """Load configuration from environment and defaults."""
    return PipelineConfig()
