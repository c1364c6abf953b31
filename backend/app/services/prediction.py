"""Request-side checks and timing around the in-process matcher."""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import HTTPException

from career_predictor.matcher import predict, rank_careers
from career_predictor.models import CareerScore, Prediction, ScoringPolicy, Selection
from career_predictor.strings import MISSING_INFORMATION, SELECT_AT_LEAST_ONE_SKILL
from app.core.config import settings

logger = logging.getLogger(__name__)


def validate_selection(selection: Selection, require_skills: bool = True) -> None:
    """Reject selections the client should never send.

    An empty skill list is a business-rule failure surfaced to the user as
    an informational prompt, not a matcher error.
    """
    if require_skills and not selection.skills:
        raise HTTPException(
            status_code=400,
            detail={"title": MISSING_INFORMATION, "message": SELECT_AT_LEAST_ONE_SKILL},
        )
    total = len(selection.skills) + len(selection.interests)
    if total > settings.MAX_SELECTED_TOKENS:
        raise HTTPException(
            status_code=400,
            detail=f"Too many selections. Max {settings.MAX_SELECTED_TOKENS}.",
        )


def run_prediction(
    selection: Selection,
    policy: Optional[ScoringPolicy] = None,
    session_id: Optional[str] = None,
) -> Prediction:
    validate_selection(selection)
    policy = policy or settings.SCORING_POLICY

    start = time.perf_counter()
    prediction = predict(selection, policy=policy)
    latency_ms = (time.perf_counter() - start) * 1000

    extra = {"latency_ms": latency_ms, "policy": policy.value}
    if session_id is not None:
        extra["session_id"] = session_id
    logger.info("Prediction served in %.3f ms", latency_ms, extra=extra)
    return prediction


def run_ranking(
    selection: Selection,
    policy: Optional[ScoringPolicy] = None,
) -> list[CareerScore]:
    validate_selection(selection)
    return rank_careers(selection, policy=policy or settings.SCORING_POLICY)
