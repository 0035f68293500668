"""JSON-file document store for style boards and favorites."""

import json
import logging
import re
import secrets
from datetime import datetime, timezone
from pathlib import Path

from ..models import Favorite, StyleBoard


logger = logging.getLogger(__name__)

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class BoardNotFoundError(LookupError):
    """Raised when a board does not exist or is not visible to the caller."""


class BoardStore:
    """Stores one JSON document per board plus a favorites index.

    Layout::

        <data_dir>/boards/<board_id>.json
        <data_dir>/favorites.json
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.boards_dir = self.data_dir / "boards"
        self.favorites_path = self.data_dir / "favorites.json"
        self.boards_dir.mkdir(parents=True, exist_ok=True)

    # Boards

    def _board_path(self, board_id: str) -> Path | None:
        if not _SAFE_ID.match(board_id):
            return None
        return self.boards_dir / f"{board_id}.json"

    def _write(self, path: Path, content: str) -> None:
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)

    def save_board(self, board: StyleBoard) -> StyleBoard:
        """Create or overwrite a board document."""
        path = self._board_path(board.id)
        if path is None:
            raise ValueError(f"Invalid board id: {board.id!r}")
        self._write(path, board.model_dump_json(indent=2))
        return board

    def create_board(self, board: StyleBoard) -> StyleBoard:
        board = self.save_board(board)
        logger.info("Saved style board %s for user %s", board.id, board.user_id)
        return board

    def get_board(self, board_id: str) -> StyleBoard | None:
        path = self._board_path(board_id)
        if path is None or not path.exists():
            return None
        return StyleBoard.model_validate_json(path.read_text(encoding="utf-8"))

    def _iter_boards(self):
        for path in self.boards_dir.glob("*.json"):
            yield StyleBoard.model_validate_json(path.read_text(encoding="utf-8"))

    def list_boards(self, user_id: str, limit: int = 50) -> list[StyleBoard]:
        """The user's boards, newest first."""
        boards = [b for b in self._iter_boards() if b.user_id == user_id]
        boards.sort(key=lambda b: b.created_at, reverse=True)
        return boards[:limit]

    def get_shared_board(self, share_id: str) -> StyleBoard:
        for board in self._iter_boards():
            if board.is_public and board.share_id == share_id:
                return board
        raise BoardNotFoundError(share_id)

    def find_visible_board(self, board_or_share_id: str, user_id: str) -> StyleBoard:
        """A board owned by the user, or a public board addressed by its share id."""
        board = self.get_board(board_or_share_id)
        if board is not None and board.user_id == user_id:
            return board
        return self.get_shared_board(board_or_share_id)

    def get_owned_board(self, board_id: str, user_id: str) -> StyleBoard:
        board = self.get_board(board_id)
        if board is None or board.user_id != user_id:
            raise BoardNotFoundError(board_id)
        return board

    def share_board(self, board_id: str, user_id: str) -> StyleBoard:
        """Make a board public, assigning its share id on first share."""
        board = self.get_owned_board(board_id, user_id)
        if not board.share_id:
            board.share_id = secrets.token_urlsafe(8)[:10]
            board.is_public = True
            board.updated_at = datetime.now(timezone.utc)
            self.save_board(board)
        return board

    # Favorites

    def _load_favorites(self) -> list[Favorite]:
        if not self.favorites_path.exists():
            return []
        data = json.loads(self.favorites_path.read_text(encoding="utf-8"))
        return [Favorite.model_validate(item) for item in data]

    def _save_favorites(self, favorites: list[Favorite]) -> None:
        payload = [f.model_dump(mode="json") for f in favorites]
        self._write(self.favorites_path, json.dumps(payload, indent=2))

    def add_favorite(self, user_id: str, style_board_id: str) -> bool:
        """Returns False if the board was already a favorite."""
        favorites = self._load_favorites()
        if any(f.user_id == user_id and f.style_board_id == style_board_id for f in favorites):
            return False
        favorites.append(Favorite(user_id=user_id, style_board_id=style_board_id))
        self._save_favorites(favorites)
        return True

    def remove_favorite(self, user_id: str, style_board_id: str) -> None:
        favorites = self._load_favorites()
        kept = [
            f for f in favorites
            if not (f.user_id == user_id and f.style_board_id == style_board_id)
        ]
        if len(kept) != len(favorites):
            self._save_favorites(kept)

    def is_favorited(self, user_id: str, style_board_id: str) -> bool:
        return any(
            f.user_id == user_id and f.style_board_id == style_board_id
            for f in self._load_favorites()
        )

    def list_favorite_boards(self, user_id: str) -> list[StyleBoard]:
        """The user's favorited boards, newest first."""
        ids = [f.style_board_id for f in self._load_favorites() if f.user_id == user_id]
        boards = [b for b in (self.get_board(i) for i in ids) if b is not None]
        boards.sort(key=lambda b: b.created_at, reverse=True)
        return boards
