"""Application configuration loaded from environment variables.

The gateway does no network calls of its own: catalog and matcher run
in-process, and selection state is held in memory per session.
"""

from __future__ import annotations

import os

from career_predictor.models import ScoringPolicy


class Settings:
    # Scoring policy used when a request does not name one
    SCORING_POLICY: ScoringPolicy = ScoringPolicy(
        os.getenv("SCORING_POLICY", ScoringPolicy.WEIGHTED.value).lower()
    )

    # Request limits
    MAX_SELECTED_TOKENS: int = int(os.getenv("MAX_SELECTED_TOKENS", "50"))

    CORS_ORIGINS: list[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]


settings = Settings()
