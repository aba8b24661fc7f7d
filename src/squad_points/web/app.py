"""FastAPI application for the squad-points HTTP API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import get_db_path, init_db
from ..exceptions import SquadPointsError
from .routers import leaderboard, players, workouts

logger = logging.getLogger(__name__)


async def squad_points_error_handler(request: Request, exc: SquadPointsError) -> JSONResponse:
    """Turn domain errors into JSON error responses."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: Database file to serve; the default data dir otherwise
    """
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Creates missing tables and adds the points columns to old databases
        await init_db(db_path)
        logger.info("Serving database %s", db_path)
        yield

    app = FastAPI(
        title="squad-points",
        description="Workout scoring and weekly leaderboards for team training",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    app.add_exception_handler(SquadPointsError, squad_points_error_handler)

    app.include_router(players.router)
    app.include_router(workouts.router)
    app.include_router(leaderboard.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
