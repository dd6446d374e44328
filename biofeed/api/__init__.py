"""HTTP API for biofeed."""

from .app import create_app

__all__ = ["create_app"]
