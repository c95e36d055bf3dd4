"""Entry point for the albums FastAPI app."""
from albums_api.app import create_app

__all__ = ["create_app"]
