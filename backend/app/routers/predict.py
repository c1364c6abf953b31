"""Stateless prediction endpoints.

The client sends its full selection in the body; nothing is stored.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter

from career_predictor.models import CareerScore, Prediction, ScoringPolicy, Selection
from app.services.prediction import run_prediction, run_ranking

router = APIRouter()


@router.post("/predict", response_model=Prediction)
async def predict_career(
    selection: Selection,
    policy: Optional[ScoringPolicy] = None,
) -> Prediction:
    """Return the single best career for *selection*.

    ``policy`` overrides the configured default for this request only.
    """
    return run_prediction(selection, policy)


@router.post("/rank", response_model=list[CareerScore])
async def rank_careers(
    selection: Selection,
    policy: Optional[ScoringPolicy] = None,
) -> list[CareerScore]:
    """Return every career scored against *selection*, best first."""
    return run_ranking(selection, policy)
