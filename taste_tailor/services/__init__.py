"""External service boundaries."""

from .board_store import BoardNotFoundError, BoardStore
from .correlation_client import CorrelationClient
from .image_synthesizer import ImageGenerationError, ImageSynthesizer
from .text_generator import TextGenerator

__all__ = [
    "BoardNotFoundError",
    "BoardStore",
    "CorrelationClient",
    "ImageGenerationError",
    "ImageSynthesizer",
    "TextGenerator",
]
