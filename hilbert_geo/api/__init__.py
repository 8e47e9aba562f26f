"""HTTP API for Hilbert Geo."""

from .app import create_app

__all__ = ["create_app"]
