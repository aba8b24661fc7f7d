"""squad-points: workout scoring and weekly leaderboards for team training."""

__version__ = "0.1.0"
