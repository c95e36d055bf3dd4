"""
Run the albums API with uvicorn.

Usage:
  albums-api [--path /tmp/albums.json] [--host localhost] [--port 8080] [--log-level INFO]

Flags override the ALBUMS_PATH / ALBUMS_HOST / ALBUMS_PORT / LOG_LEVEL
environment variables.
"""
from __future__ import annotations

import argparse
import dataclasses
from typing import Sequence

import uvicorn

from albums_api.app import create_app
from albums_api.core.config import Settings, get_settings


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="albums-api", description="Serve the album catalog over HTTP")
    ap.add_argument("--path", default=defaults.albums_path, help="path to store the albums")
    ap.add_argument("--host", default=defaults.host, help="bind address")
    ap.add_argument("--port", type=int, default=defaults.port, help="bind port")
    ap.add_argument("--log-level", default=defaults.log_level, help="DEBUG, INFO, WARNING...")
    return ap


def settings_from_args(argv: Sequence[str] | None = None) -> Settings:
    defaults = get_settings()
    args = build_parser(defaults).parse_args(argv)
    return dataclasses.replace(
        defaults,
        albums_path=args.path,
        host=args.host,
        port=args.port,
        log_level=args.log_level.upper(),
    )


def main(argv: Sequence[str] | None = None) -> None:
    settings = settings_from_args(argv)
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
