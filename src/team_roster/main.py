"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from team_roster.config import settings
from team_roster.api.routes.groups import router as groups_router
from team_roster.services.roster_service import RosterService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Startup: tests may have installed a service already
    if not hasattr(app.state, "service"):
        app.state.service = RosterService.from_settings(settings)
    yield


app = FastAPI(
    title="Team Roster",
    description="Groups and two-team player rosters",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for the mobile/web client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(groups_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "team-roster"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Team Roster API",
        "version": "0.1.0",
        "docs": "/docs",
    }
