"""Structured outputs for each generation stage."""

from functools import lru_cache
from pydantic import BaseModel, Field, create_model


class FashionAnalysis(BaseModel):
    """Fashion Analyst output."""
    analysis: str = Field(description="Professional analysis of style psychology and fashion DNA")
    recommendations: list[str] = Field(description="Specific clothing categories and garment types")
    style_archetypes: list[str] = Field(description="Key fashion archetypes and style identities")
    fashion_dna: str = Field(description="Core fashion DNA and psychological drivers")


class ColorPalette(BaseModel):
    """Color Curator output."""
    palette: list[str] = Field(
        min_length=5,
        max_length=7,
        description="5-7 color palette with hex codes and names (format: #HEXCODE - Color Name)",
    )
    aesthetic: str = Field(description="Overarching aesthetic style/archetype name")
    color_psychology: str = Field(description="Explanation of color choices and their cultural significance")


class StyleNarrative(BaseModel):
    """Style Storyteller output."""
    title: str = Field(description="Compelling 2-4 word style title")
    narrative: str = Field(description="250-300 word narrative connecting cultural tastes to personal style")
    style_manifesto: str = Field(description="Brief manifesto or tagline for this style identity")


class ClothingItemDraft(BaseModel):
    """A clothing item before its image is generated."""
    name: str = Field(description="Short, catchy name for the clothing item")
    description: str = Field(description="Brief description of the item and why it fits the style")
    category: str = Field(description="Category like 'Top', 'Bottom', 'Footwear', 'Accessory', 'Outerwear'")


class ClothingSelection(BaseModel):
    """Clothing Curator output."""
    clothing_items: list[ClothingItemDraft]
    reasoning: str = Field(description="Brief explanation of how these items work together as a cohesive style")


@lru_cache(maxsize=None)
def clothing_selection_schema(min_items: int, max_items: int) -> type[ClothingSelection]:
    """Build a ClothingSelection schema that enforces the configured item count."""
    return create_model(
        f"ClothingSelection{min_items}to{max_items}",
        __base__=ClothingSelection,
        clothing_items=(
            list[ClothingItemDraft],
            Field(
                min_length=min_items,
                max_length=max_items,
                description=f"{min_items}-{max_items} carefully curated clothing items that define this style",
            ),
        ),
    )


class VisualPrompt(BaseModel):
    """Visual Prompt Designer output."""
    mood_board_prompt: str = Field(description="Detailed prompt for fashion mood board generation")
    style_elements: list[str] = Field(description="Key visual elements to include")
    composition: str = Field(description="Layout and composition guidelines")
