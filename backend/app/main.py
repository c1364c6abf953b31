"""FastAPI application entrypoint for the career path predictor.

Responsibilities:
  - Serve the catalog option lists and UI strings
  - Validate selections and run the in-process matcher
  - Hold per-session selection state in memory

NOT responsible for:
  - Rendering (tags, dropdowns, alerts belong to the client)
  - Persisting selections between runs
"""

from __future__ import annotations

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from career_predictor.catalog import ALL_INTERESTS, ALL_SKILLS, CAREER_PROFILES
from career_predictor.logging_config import setup_logging
from career_predictor.models import SessionState
from app.core.config import settings
from app.routers import catalog, predict, selection
from app.services.selection_store import get_store

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Career Path Predictor",
    version="1.0.0",
    description="Recommends a career from selected skills, interests and education",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog.router, tags=["catalog"])
app.include_router(predict.router, tags=["predict"])
app.include_router(selection.router, tags=["selection"])


def _log_selection_change(state: SessionState) -> None:
    logger.debug(
        "Selection changed: %d skills, %d interests, education=%s",
        len(state.selection.skills), len(state.selection.interests),
        state.selection.education.value if state.selection.education else None,
        extra={"session_id": state.session_id},
    )


@app.delete("/session/{session_id}")
async def reset_session(session_id: str) -> dict:
    """Forget a session's selection state."""
    get_store().reset(session_id)
    return {"status": "ok", "session_id": session_id}


_unsubscribers: list = []


@app.on_event("startup")
async def startup_event() -> None:
    _unsubscribers.append(get_store().subscribe(_log_selection_change))
    logger.info(
        "Catalog ready: %d careers, %d skills, %d interests (default policy %s)",
        len(CAREER_PROFILES), len(ALL_SKILLS), len(ALL_INTERESTS),
        settings.SCORING_POLICY.value,
        extra={"policy": settings.SCORING_POLICY.value},
    )


@app.on_event("shutdown")
async def shutdown_event() -> None:
    logger.info("Shutting down with %d active sessions", get_store().count())
    while _unsubscribers:
        _unsubscribers.pop()()


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
