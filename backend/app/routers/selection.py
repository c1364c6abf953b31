"""Session-scoped selection endpoints.

Mirrors the client's tag toggles one event at a time. State is kept in
memory by the selection store and is gone when the process exits.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from career_predictor.models import EducationUpdate, Prediction, SessionState, normalise_token
from app.services.prediction import run_prediction, validate_selection
from app.services.selection_store import get_store

router = APIRouter(prefix="/selection")


@router.get("/{session_id}", response_model=SessionState)
async def get_selection(session_id: str) -> SessionState:
    return get_store().get(session_id)


def _require_token(token: str) -> str:
    token = normalise_token(token)
    if not token:
        raise HTTPException(status_code=400, detail="Selection token must not be blank")
    return token


def _check_room(session_id: str, skill: str | None = None, interest: str | None = None) -> None:
    # Validate the selection as it would be after the toggle, before mutating
    selection = get_store().get(session_id).selection
    skills = list(selection.skills)
    interests = list(selection.interests)
    if skill is not None:
        skills.append(skill)
    if interest is not None:
        interests.append(interest)
    validate_selection(
        selection.model_copy(update={"skills": skills, "interests": interests}),
        require_skills=False,
    )


@router.post("/{session_id}/skills/{skill}", response_model=SessionState)
async def toggle_skill(session_id: str, skill: str) -> SessionState:
    """Select *skill* if it is not selected yet, otherwise deselect it."""
    store = get_store()
    if _require_token(skill) not in store.get(session_id).selection.skills:
        _check_room(session_id, skill=skill)
    return store.toggle_skill(session_id, skill)


@router.post("/{session_id}/interests/{interest}", response_model=SessionState)
async def toggle_interest(session_id: str, interest: str) -> SessionState:
    store = get_store()
    if _require_token(interest) not in store.get(session_id).selection.interests:
        _check_room(session_id, interest=interest)
    return store.toggle_interest(session_id, interest)


@router.put("/{session_id}/education", response_model=SessionState)
async def set_education(session_id: str, update: EducationUpdate) -> SessionState:
    return get_store().set_education(session_id, update.education)


@router.post("/{session_id}/predict", response_model=Prediction)
async def predict_from_selection(session_id: str) -> Prediction:
    """Predict from the stored selection and remember the result."""
    store = get_store()
    state = store.get(session_id)
    prediction = run_prediction(state.selection, session_id=session_id)
    store.record_prediction(session_id, prediction.career)
    return prediction


@router.delete("/{session_id}", response_model=SessionState)
async def clear_selection(session_id: str) -> SessionState:
    """Clear all selections and the predicted career."""
    return get_store().clear(session_id)
