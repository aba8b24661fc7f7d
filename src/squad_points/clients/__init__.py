"""Input clients for squad-points."""

from .manual import ManualWorkoutClient

__all__ = ["ManualWorkoutClient"]
