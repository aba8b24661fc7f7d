"""Player model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Player:
    """A team member who logs workouts."""

    name: str
    position: str = ""
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
