"""Data models for the TasteTailor service."""

from .style import (
    PLACEHOLDER_IMAGE,
    ClothingItem,
    CorrelationResult,
    FashionEntity,
    ProgressEvent,
    StyleBoardResult,
)
from .stages import (
    ClothingItemDraft,
    ClothingSelection,
    ColorPalette,
    FashionAnalysis,
    StyleNarrative,
    VisualPrompt,
    clothing_selection_schema,
)
from .board import Favorite, StyleBoard

__all__ = [
    "PLACEHOLDER_IMAGE",
    "ClothingItem",
    "CorrelationResult",
    "FashionEntity",
    "ProgressEvent",
    "StyleBoardResult",
    "ClothingItemDraft",
    "ClothingSelection",
    "ColorPalette",
    "FashionAnalysis",
    "StyleNarrative",
    "VisualPrompt",
    "clothing_selection_schema",
    "Favorite",
    "StyleBoard",
]
