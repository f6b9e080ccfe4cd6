"""
EcoLar Web API - FastAPI application.

Uses Supabase Auth for authentication; the React frontend talks to /api.
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ecolar import __version__
from ecolar.config import configure_logging, settings
from ecolar.web.auth import AuthenticatedUser, get_current_user
from onboarding.api import router as onboarding_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI app with CORS and all routers registered."""
    app = FastAPI(title="EcoLar", version=__version__)

    # CORS middleware for React frontend dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(onboarding_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        configure_logging()
        logger.info(f"EcoLar starting up ({settings.ecolar_env})...")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/api/me")
    async def get_me(user: AuthenticatedUser = Depends(get_current_user)):
        """Current user's id and email."""
        return {"id": user.id, "email": user.email}

    return app
