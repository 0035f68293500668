"""FastAPI server for TasteTailor.

Receives requests from the web client with:
- tastesInput: 3-10 cultural tastes (movies, music, books, ...)

Generation is offered buffered (/api/generate) and as Server-Sent Events
(/api/generate-stream). The caller's identity comes from the auth proxy header
(X-User-Id by default).
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from taste_tailor import __version__
from taste_tailor.config import PipelineConfig, load_config
from taste_tailor.pipeline import (
    InvalidTastesError,
    QueueProgressSink,
    StyleBoardGenerator,
    StylePipeline,
    complete_frame,
    encode_sse,
    error_frame,
    validate_tastes_input,
)
from taste_tailor.services import (
    BoardNotFoundError,
    BoardStore,
    CorrelationClient,
    ImageSynthesizer,
    TextGenerator,
)
from taste_tailor.utils.logging import configure_logging


logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate style board"


def build_board_generator(config: PipelineConfig) -> StyleBoardGenerator:
    """Construct the service graph once per process."""
    text_generator = TextGenerator(config)
    image_synthesizer = ImageSynthesizer(config.image, api_key=config.openai_api_key)
    correlation_client = CorrelationClient(
        config.correlation,
        base_url=config.qloo_api_base_url,
        api_key=config.qloo_api_key,
    )
    return StyleBoardGenerator(
        config=config,
        correlation_client=correlation_client,
        pipeline=StylePipeline(config, text_generator, image_synthesizer),
        store=BoardStore(config.data_dir),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = load_config()  # Loads from .env automatically via pydantic-settings
    configure_logging(config.log_level)
    generator = build_board_generator(config)
    app.state.config = config
    app.state.board_generator = generator
    logger.info(
        "TasteTailor ready (text=%s, images=%s %s, clothing items %d-%d)",
        config.text.deployment,
        config.image.model,
        config.image.size,
        config.generation.clothing_items_min,
        config.generation.clothing_items_max,
    )
    yield
    await generator.correlation_client.close()
    await generator.pipeline.image_synthesizer.close()


app = FastAPI(
    title="TasteTailor API",
    description="Style boards generated from cultural tastes",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Streaming runs keep going after a client disconnects
_background_runs: set[asyncio.Task] = set()


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse({"error": "Invalid request body"}, status_code=400)


# Dependencies

def get_board_generator(request: Request) -> StyleBoardGenerator:
    return request.app.state.board_generator


def get_store(generator: StyleBoardGenerator = Depends(get_board_generator)) -> BoardStore:
    return generator.store


def get_app_url(generator: StyleBoardGenerator = Depends(get_board_generator)) -> str:
    return generator.config.app_url.rstrip("/")


def get_current_user(
    request: Request,
    generator: StyleBoardGenerator = Depends(get_board_generator),
) -> str:
    """Resolve the caller's user id from the auth proxy header."""
    user_id = request.headers.get(generator.config.auth_header)
    if not user_id or not user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id.strip()


# Request bodies

class GenerateRequest(BaseModel):
    """Request body for style board generation."""
    tastesInput: list[Any] | None = None


class BoardActionRequest(BaseModel):
    action: str | None = None


class FavoriteRequest(BaseModel):
    styleBoardId: str | None = None
    action: str | None = None


def _validated_tastes(body: GenerateRequest) -> list[str]:
    try:
        return validate_tastes_input(body.tastesInput)
    except InvalidTastesError as e:
        raise HTTPException(status_code=400, detail=str(e))


# Health

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "TasteTailor API", "version": __version__}


@app.get("/health")
async def health(generator: StyleBoardGenerator = Depends(get_board_generator)):
    """Detailed health check."""
    correlation_ok = await generator.correlation_client.check_connection()

    return {
        "status": "ok" if correlation_ok else "degraded",
        "correlations": "connected" if correlation_ok else "disconnected",
    }


# Generation

@app.post("/api/generate")
async def generate(
    body: GenerateRequest,
    user_id: str = Depends(get_current_user),
    generator: StyleBoardGenerator = Depends(get_board_generator),
):
    """Generate a style board and return it in one response."""
    tastes_input = _validated_tastes(body)

    try:
        board = await generator.generate(user_id, tastes_input)
    except Exception:
        logger.exception("Error generating style board")
        return JSONResponse({"error": GENERATION_FAILED}, status_code=500)

    return {"success": True, "styleBoard": board.to_response()}


@app.post("/api/generate-stream")
async def generate_stream(
    body: GenerateRequest,
    user_id: str = Depends(get_current_user),
    generator: StyleBoardGenerator = Depends(get_board_generator),
):
    """Generate a style board, streaming progress as Server-Sent Events.

    Frames are ``data: <json>\\n\\n`` with type ``progress``, then exactly one
    ``complete`` or ``error`` frame, after which the stream ends.
    """
    tastes_input = _validated_tastes(body)

    queue: asyncio.Queue = asyncio.Queue()

    async def run():
        try:
            board = await generator.generate(user_id, tastes_input, QueueProgressSink(queue))
            queue.put_nowait(complete_frame(board))
        except Exception:
            logger.exception("Error generating style board")
            queue.put_nowait(error_frame(GENERATION_FAILED))
        finally:
            queue.put_nowait(None)

    task = asyncio.create_task(run())
    _background_runs.add(task)
    task.add_done_callback(_background_runs.discard)

    async def event_stream():
        while True:
            frame = await queue.get()
            if frame is None:
                break
            yield encode_sse(frame)

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )


# Style boards

@app.get("/api/styleboards")
async def list_styleboards(
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
):
    boards = store.list_boards(user_id, limit=50)
    return {"success": True, "styleBoards": [b.to_summary() for b in boards]}


@app.get("/api/styleboards/{board_id}")
async def get_styleboard(
    board_id: str,
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
):
    try:
        board = store.find_visible_board(board_id, user_id)
    except BoardNotFoundError:
        raise HTTPException(status_code=404, detail="Style board not found")
    return {"success": True, "styleBoard": board.to_detail()}


@app.post("/api/styleboards/{board_id}")
async def update_styleboard(
    board_id: str,
    body: BoardActionRequest,
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
    app_url: str = Depends(get_app_url),
):
    try:
        store.get_owned_board(board_id, user_id)
    except BoardNotFoundError:
        raise HTTPException(status_code=404, detail="Style board not found")

    if body.action != "share":
        raise HTTPException(status_code=400, detail="Invalid action")

    board = store.share_board(board_id, user_id)
    return {
        "success": True,
        "shareUrl": f"{app_url}/share/{board.share_id}",
        "shareId": board.share_id,
    }


@app.get("/api/share/{share_id}")
async def get_shared_styleboard(share_id: str, store: BoardStore = Depends(get_store)):
    """Public board lookup for share links (no sign-in required)."""
    try:
        board = store.get_shared_board(share_id)
    except BoardNotFoundError:
        raise HTTPException(status_code=404, detail="Style board not found")
    return {"success": True, "styleBoard": board.to_detail()}


# Favorites

@app.get("/api/favorites")
async def list_favorites(
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
):
    boards = store.list_favorite_boards(user_id)
    return {"success": True, "favorites": [b.to_summary() for b in boards]}


@app.post("/api/favorites")
async def update_favorites(
    body: FavoriteRequest,
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
):
    if not body.styleBoardId or not body.action:
        raise HTTPException(status_code=400, detail="Missing required fields")

    if store.get_board(body.styleBoardId) is None:
        raise HTTPException(status_code=404, detail="StyleBoard not found")

    if body.action == "add":
        added = store.add_favorite(user_id, body.styleBoardId)
        message = "Added to favorites" if added else "Already in favorites"
        return {"success": True, "message": message}
    if body.action == "remove":
        store.remove_favorite(user_id, body.styleBoardId)
        return {"success": True, "message": "Removed from favorites"}

    raise HTTPException(status_code=400, detail="Invalid action")


@app.get("/api/favorites/{style_board_id}")
async def get_favorite_status(
    style_board_id: str,
    user_id: str = Depends(get_current_user),
    store: BoardStore = Depends(get_store),
):
    return {"success": True, "isFavorited": store.is_favorited(user_id, style_board_id)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
