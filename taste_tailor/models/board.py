"""Persisted style board and favorite records."""

import uuid
from datetime import datetime, timezone
from pydantic import Field

from .style import CamelModel, ClothingItem, CorrelationResult, StyleBoardResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


RESPONSE_FIELDS = {
    "id", "title", "description", "narrative", "image_url", "clothing_items",
    "tags", "tastes_input", "enriched_tastes", "created_at",
    "color_palette", "style_archetype",
}
SUMMARY_FIELDS = {
    "id", "title", "description", "image_url", "clothing_items",
    "tags", "tastes_input", "enriched_tastes", "created_at",
}


class StyleBoard(CamelModel):
    """A generated style board owned by one user."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    user_id: str
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=500)
    tastes_input: list[str] = Field(min_length=3, max_length=10)
    enriched_tastes: list[str] = Field(default_factory=list)
    narrative: str = Field(max_length=2000)
    image_url: str
    clothing_items: list[ClothingItem] = Field(default_factory=list, max_length=10)
    tags: list[str] = Field(default_factory=list)

    # Generation details not shown on the board page
    color_palette: list[str] = Field(default_factory=list)
    style_archetype: str | None = None
    visual_prompt: str | None = None

    # Sharing
    is_public: bool = False
    share_id: str | None = None

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_result(
        cls,
        user_id: str,
        tastes_input: list[str],
        correlations: CorrelationResult,
        result: StyleBoardResult,
        image_url: str,
        enriched_limit: int = 15,
    ) -> "StyleBoard":
        """Build the record persisted after a successful generation run."""
        return cls(
            user_id=user_id,
            title=result.title.strip(),
            description=result.narrative.strip()[:500],
            tastes_input=tastes_input,
            enriched_tastes=correlations.enriched_tastes(enriched_limit),
            narrative=result.narrative.strip(),
            image_url=image_url,
            clothing_items=result.clothing_items,
            tags=correlations.tags,
            color_palette=result.color_palette,
            style_archetype=result.style_archetype,
            visual_prompt=result.visual_prompt,
        )

    def to_response(self) -> dict:
        """Full board payload returned after generation."""
        return self.to_json_dict(include=RESPONSE_FIELDS)

    def to_detail(self) -> dict:
        """Board payload for the board page, including sharing state."""
        return self.to_json_dict(include=RESPONSE_FIELDS | {"is_public", "share_id"})

    def to_summary(self) -> dict:
        """Compact payload for dashboards and favorites."""
        return self.to_json_dict(include=SUMMARY_FIELDS)


class Favorite(CamelModel):
    """A user's bookmark on a style board."""
    user_id: str
    style_board_id: str
    created_at: datetime = Field(default_factory=_utcnow)
