#!/usr/bin/env python3
"""
Append an album to the catalog file without going through the HTTP API.

Usage:
  python scripts/add_album.py --id 4 --title "Kind of Blue" --artist "Miles Davis" --price 29.99 [--path /tmp/albums.json]

The catalog is loaded the same way the server loads it on startup (falling
back to the three default albums), so the first run against a missing file
writes the defaults plus the new album.
"""
from __future__ import annotations

import argparse
import sys

from albums_api.core.config import get_settings
from albums_api.core.logging_config import setup_logging
from albums_api.domain.albums import Album
from albums_api.services.album_service import AlbumService


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Add an album to the catalog file")
    ap.add_argument("--id", required=True, help="album id (not checked for uniqueness)")
    ap.add_argument("--title", default="", help="album title")
    ap.add_argument("--artist", default="", help="artist name")
    ap.add_argument("--price", type=float, default=0.0, help="price (e.g.: 17.99)")
    ap.add_argument("--path", default=settings.albums_path, help="catalog file")
    args = ap.parse_args()

    setup_logging(settings.log_level)
    svc = AlbumService(args.path)
    svc.load()
    album = svc.create_album(Album(id=args.id, title=args.title, artist=args.artist, price=args.price))
    print("OK: album added")
    print(f"  ID: {album.id}")
    print(f"  Title: {album.title}")
    print(f"  Artist: {album.artist}")
    print(f"  Price: {album.price:.2f}")
    print(f"  Catalog: {args.path} ({len(svc.list_albums())} albums)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
