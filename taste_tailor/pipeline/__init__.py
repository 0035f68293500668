"""Style generation pipeline."""

from .board_generator import (
    InvalidTastesError,
    StyleBoardGenerator,
    validate_tastes_input,
)
from .progress import (
    NullProgressSink,
    ProgressSink,
    QueueProgressSink,
    ScaledProgressSink,
    complete_frame,
    encode_sse,
    error_frame,
)
from .style_pipeline import StylePipeline

__all__ = [
    "InvalidTastesError",
    "StyleBoardGenerator",
    "validate_tastes_input",
    "NullProgressSink",
    "ProgressSink",
    "QueueProgressSink",
    "ScaledProgressSink",
    "complete_frame",
    "encode_sse",
    "error_frame",
    "StylePipeline",
]
