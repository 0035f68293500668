"""Style generation models shared by the pipeline and the API."""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


PLACEHOLDER_IMAGE = "/placeholder-clothing.svg"


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys for the browser client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self, **kwargs) -> dict:
        return self.model_dump(by_alias=True, mode="json", **kwargs)


class FashionEntity(CamelModel):
    """A cultural-graph node related to one of the user's tastes."""
    id: str
    name: str
    category: str | None = None


class CorrelationResult(CamelModel):
    """Entities and tags correlated with a set of tastes."""

    fashion_entities: list[FashionEntity] = Field(default_factory=list)
    decor_entities: list[FashionEntity] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "CorrelationResult":
        return cls()

    def enriched_tastes(self, limit: int = 15) -> list[str]:
        """Entity names (fashion first, then decor) used to enrich the board."""
        names = [e.name for e in self.fashion_entities]
        names += [e.name for e in self.decor_entities]
        return names[:limit]


class ClothingItem(CamelModel):
    """A curated clothing piece with its generated image."""
    name: str
    description: str
    category: str
    image_url: str = PLACEHOLDER_IMAGE


class StyleBoardResult(CamelModel):
    """Aggregate output of one style generation run."""

    title: str
    narrative: str
    visual_prompt: str
    clothing_recommendations: list[str]
    color_palette: list[str]
    style_archetype: str
    clothing_items: list[ClothingItem]

    @classmethod
    def fallback(cls, tastes_input: list[str]) -> "StyleBoardResult":
        """Deterministic board returned when the text pipeline fails."""
        tastes = ", ".join(tastes_input)
        return cls(
            title="Unique Style",
            narrative=(
                f"Your fashion identity draws inspiration from {tastes}, creating a "
                "distinctive style that reflects your cultural influences and personal "
                "aesthetic. This unique approach to clothing and personal expression "
                "showcases your individual taste and creative vision through carefully "
                "curated pieces that tell your story."
            ),
            visual_prompt=(
                "A sophisticated fashion mood board featuring clothing and accessories "
                f"inspired by {tastes}, with a cohesive color palette and modern aesthetic"
            ),
            clothing_recommendations=[
                "Statement pieces",
                "Classic basics",
                "Cultural-inspired accessories",
            ],
            color_palette=[
                "#2D3436 - Charcoal",
                "#636E72 - Steel Gray",
                "#DDA0DD - Plum",
            ],
            style_archetype="Cultural Modern",
            clothing_items=[
                ClothingItem(
                    name="Statement Jacket",
                    description="A culturally-inspired jacket that serves as the centerpiece of your style",
                    category="Outerwear",
                ),
                ClothingItem(
                    name="Classic Foundation Piece",
                    description="Essential basic that anchors your cultural aesthetic",
                    category="Top",
                ),
                ClothingItem(
                    name="Cultural Accessory",
                    description="Distinctive accessory that tells your cultural story",
                    category="Accessory",
                ),
            ],
        )


class ProgressEvent(BaseModel):
    """A progress checkpoint emitted during a generation run."""
    step: str
    progress: int = Field(ge=0, le=100)
    details: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
