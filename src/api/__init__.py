"""HTTP API for single-title matching and batch brand assignment."""

from api.app import app

__all__ = ["app"]
