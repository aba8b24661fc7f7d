"""Web API for squad-points."""

from .app import create_app

__all__ = ["create_app"]
