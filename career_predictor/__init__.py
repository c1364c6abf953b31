"""Career path predictor: static profile catalog plus a deterministic matcher."""

from career_predictor.catalog import ALL_INTERESTS, ALL_SKILLS, CAREER_PROFILES
from career_predictor.matcher import predict, predict_career, rank_careers
from career_predictor.models import EducationLevel, ScoringPolicy, Selection

__all__ = [
    "ALL_INTERESTS",
    "ALL_SKILLS",
    "CAREER_PROFILES",
    "EducationLevel",
    "ScoringPolicy",
    "Selection",
    "predict",
    "predict_career",
    "rank_careers",
]
