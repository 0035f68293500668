"""Progress sinks and Server-Sent Events framing."""

import asyncio
import json
from datetime import datetime, timezone
from typing import Any, Protocol

from ..models import ProgressEvent, StyleBoard


class ProgressSink(Protocol):
    """Receives progress events from a generation run."""

    def emit(self, event: ProgressEvent) -> None:
        ...


class NullProgressSink:
    """Discards progress (buffered requests)."""

    def emit(self, event: ProgressEvent) -> None:
        pass


class QueueProgressSink:
    """Pushes progress frames onto an asyncio queue read by the SSE stream."""

    def __init__(self, queue: asyncio.Queue):
        self.queue = queue

    def emit(self, event: ProgressEvent) -> None:
        self.queue.put_nowait(progress_frame(event))


class ScaledProgressSink:
    """Maps a nested run's 0-100 progress onto the [start, end] band of its parent."""

    def __init__(self, inner: ProgressSink, start: int, end: int):
        self.inner = inner
        self.start = start
        self.end = end

    def emit(self, event: ProgressEvent) -> None:
        scaled = self.start + round(event.progress * (self.end - self.start) / 100)
        self.inner.emit(event.model_copy(update={"progress": scaled}))


def report(sink: ProgressSink, step: str, progress: int, details: str | None = None) -> None:
    sink.emit(ProgressEvent(step=step, progress=progress, details=details))


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def progress_frame(event: ProgressEvent) -> dict[str, Any]:
    frame = {
        "type": "progress",
        "step": event.step,
        "progress": event.progress,
        "timestamp": event.timestamp.isoformat(),
    }
    if event.details is not None:
        frame["details"] = event.details
    return frame


def complete_frame(board: StyleBoard) -> dict[str, Any]:
    return {"type": "complete", "styleBoard": board.to_response(), "timestamp": _timestamp()}


def error_frame(message: str) -> dict[str, Any]:
    return {"type": "error", "error": message, "timestamp": _timestamp()}


def encode_sse(frame: dict[str, Any]) -> str:
    """Serialise one frame as ``data: <json>`` followed by a blank line."""
    return f"data: {json.dumps(frame)}\n\n"
