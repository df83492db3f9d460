"""FastAPI application factory.

Routers
-------
    /character  - class/job profile of a single character
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classjob.api.routers import character as character_router


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Class/Job Profile API",
        description=(
            "Scrapes a character's Lodestone class/job page and returns job "
            "levels and experience grouped by role category."
        ),
        version="1.0.0",
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(character_router.router, prefix="/character", tags=["character"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn classjob.api.app:app --reload
app = create_app()
