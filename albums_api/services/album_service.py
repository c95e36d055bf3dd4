"""Album catalog use cases (list, lookup, append with write-through)."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from albums_api.domain.albums import Album, default_albums
from albums_api.repositories import json_storage
from albums_api.repositories.json_storage import StorageError

logger = logging.getLogger(__name__)


class AlbumServiceError(Exception):
    """Base exception for the album workflow."""


class AlbumNotFoundError(AlbumServiceError):
    """Raised when no album carries the requested id."""

    def __init__(self, album_id: str) -> None:
        super().__init__(f"Album {album_id!r} not found")
        self.album_id = album_id


class AlbumPersistenceError(AlbumServiceError):
    """Raised when a new album could not be written to the catalog file."""


class AlbumService:
    """Owns the in-memory catalog and mirrors it to a JSON file.

    The lock covers the whole "snapshot, append, write" sequence so concurrent
    creates never interleave their writes, and the list only grows once the
    file write has succeeded.
    """

    def __init__(self, path: Path | str, albums: list[Album] | None = None) -> None:
        self.path = Path(path)
        self._albums: list[Album] = list(albums) if albums is not None else default_albums()
        self._lock = threading.Lock()

    def load(self) -> list[Album]:
        """Replace the seed albums with the file contents when the file is usable."""
        try:
            loaded = json_storage.load_albums(self.path)
        except StorageError as exc:
            logger.warning("%s. Keeping %d default albums", exc, len(self._albums))
            return self.list_albums()
        with self._lock:
            self._albums = loaded
        logger.info("Using existing albums file at %s (%d albums)", self.path, len(loaded))
        return self.list_albums()

    def list_albums(self) -> list[Album]:
        with self._lock:
            return list(self._albums)

    def get_album(self, album_id: str) -> Album:
        # first match wins when ids repeat
        for album in self.list_albums():
            if album.id == album_id:
                return album
        raise AlbumNotFoundError(album_id)

    def create_album(self, album: Album) -> Album:
        with self._lock:
            updated = [*self._albums, album]
            try:
                json_storage.save_albums(self.path, updated)
            except StorageError as exc:
                logger.error("Album %r not persisted: %s", album.id, exc)
                raise AlbumPersistenceError(str(exc)) from exc
            self._albums = updated
        logger.info("Album %r added (%d albums)", album.id, len(updated))
        return album
