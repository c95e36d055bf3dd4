from __future__ import annotations

from fastapi import APIRouter, Request, status

from albums_api.core.responses import IndentedJSONResponse
from albums_api.domain.albums import Album
from albums_api.services.album_service import (
    AlbumService,
    AlbumNotFoundError,
    AlbumPersistenceError,
)

router = APIRouter(prefix="/albums", tags=["albums"])


def _get_album_service(request: Request) -> AlbumService:
    svc = getattr(getattr(request.app, "state", None), "album_service", None)
    if not svc:
        raise RuntimeError("AlbumService not configured")
    return svc


@router.get("", response_model=list[Album])
def list_albums(request: Request):
    return _get_album_service(request).list_albums()


@router.get("/{album_id}", response_model=Album)
def get_album(album_id: str, request: Request):
    svc = _get_album_service(request)
    try:
        return svc.get_album(album_id)
    except AlbumNotFoundError:
        return IndentedJSONResponse({"message": "album not found"}, status_code=status.HTTP_404_NOT_FOUND)


@router.post("", response_model=Album, status_code=status.HTTP_201_CREATED)
def create_album(album: Album, request: Request):
    svc = _get_album_service(request)
    try:
        return svc.create_album(album)
    except AlbumPersistenceError:
        return IndentedJSONResponse(
            {"message": "album could not be saved"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
