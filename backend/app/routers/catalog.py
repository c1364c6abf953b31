"""Catalog option lists and UI strings.

Everything here is served straight from compile-time constants.
"""

from __future__ import annotations

from fastapi import APIRouter

from career_predictor.catalog import (
    ALL_INTERESTS,
    ALL_SKILLS,
    CAREER_PROFILES,
    EDUCATION_LEVELS,
)
from career_predictor.models import CareerProfile, EducationLevel
from career_predictor.strings import UI_STRINGS

router = APIRouter()


@router.get("/catalog/skills", response_model=list[str])
async def get_skills() -> list[str]:
    """Every distinct skill in the catalog, sorted. Populates the skill tags."""
    return list(ALL_SKILLS)


@router.get("/catalog/interests", response_model=list[str])
async def get_interests() -> list[str]:
    return list(ALL_INTERESTS)


@router.get("/catalog/education", response_model=list[EducationLevel])
async def get_education_levels() -> list[EducationLevel]:
    return list(EDUCATION_LEVELS)


@router.get("/catalog/profiles", response_model=list[CareerProfile])
async def get_profiles() -> list[CareerProfile]:
    """All career profiles in catalog order (the order ties are broken in)."""
    return list(CAREER_PROFILES)


@router.get("/strings", response_model=dict[str, str])
async def get_strings() -> dict[str, str]:
    return dict(UI_STRINGS)
