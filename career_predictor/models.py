"""Pydantic models shared by the matcher and the HTTP gateway."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EducationLevel(str, Enum):
    HIGH_SCHOOL = "high school"
    DIPLOMA = "diploma"
    BACHELOR = "bachelor"
    MASTER = "master"


class ScoringPolicy(str, Enum):
    """Named scoring rule. Policies are picked, never blended."""
    SIMPLE = "simple"
    WEIGHTED = "weighted"


class CareerProfile(BaseModel):
    """One static career record. Frozen: the catalog never changes at runtime."""
    model_config = ConfigDict(frozen=True)

    skills: tuple[str, ...] = Field(..., min_length=1)
    interests: tuple[str, ...] = ()
    education: EducationLevel
    career: str


def normalise_token(token: str) -> str:
    """Lowercase and collapse whitespace: " Lab  Work" -> "lab work"."""
    return " ".join(token.split()).lower()


def _normalise_tokens(tokens: list[str]) -> list[str]:
    # Keep first-selected order, drop blanks and repeats
    seen: list[str] = []
    for token in tokens:
        token = normalise_token(token)
        if token and token not in seen:
            seen.append(token)
    return seen


class Selection(BaseModel):
    """The user's choices for one prediction request."""
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    education: Optional[EducationLevel] = None

    @field_validator("skills", "interests")
    @classmethod
    def _clean(cls, value: list[str]) -> list[str]:
        return _normalise_tokens(value)


class CareerScore(BaseModel):
    career: str
    score: int = Field(..., ge=0)
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)


class Prediction(BaseModel):
    """Structured prediction returned to the client."""
    career: str
    score: int = Field(..., ge=0)
    matched: bool = Field(..., description="False when the no-match sentinel is returned")
    policy: ScoringPolicy
    matched_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)


class SessionState(BaseModel):
    """Selection state owned by one client session. Lives in memory only."""
    session_id: str
    selection: Selection = Field(default_factory=Selection)
    predicted_career: str = ""


class EducationUpdate(BaseModel):
    education: Optional[EducationLevel] = None
