"""
JSON file persistence for the album catalog.

The whole catalog lives in one file holding a JSON array of albums. Every
save rewrites the file in place; there is no temp file or rename.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
import json

from pydantic import TypeAdapter, ValidationError

from albums_api.domain.albums import Album

_ALBUM_LIST = TypeAdapter(list[Album])


class StorageError(Exception):
    """Base exception for catalog file access."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = str(path)


class StoreUnreadableError(StorageError):
    """Raised when the file is missing or cannot be opened."""


class StoreCorruptError(StorageError):
    """Raised when the file is not a JSON array of albums."""


class StoreWriteError(StorageError):
    """Raised when the catalog cannot be written back."""


def load_albums(path: Path | str) -> list[Album]:
    data_file = Path(path)
    try:
        raw = data_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StoreUnreadableError(data_file, f"unable to read albums file ({exc})") from exc
    try:
        return _ALBUM_LIST.validate_json(raw)
    except ValidationError as exc:
        raise StoreCorruptError(data_file, f"unable to process albums file ({exc.error_count()} errors)") from exc


def dump_albums(albums: Iterable[Album]) -> str:
    """Serialize the catalog the way it is stored on disk (one-space indent)."""
    return json.dumps([album.model_dump() for album in albums], ensure_ascii=False, allow_nan=False, indent=1)


def save_albums(path: Path | str, albums: Iterable[Album]) -> None:
    data_file = Path(path)
    payload = dump_albums(albums)
    try:
        data_file.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise StoreWriteError(data_file, f"unable to write albums file ({exc})") from exc
