"""Static career profile catalog.

The records are compiled in and never mutated. The option lists shown to
the user (every distinct skill and interest) are derived once at import.
"""

from __future__ import annotations

from typing import Iterable, Optional

from career_predictor.models import CareerProfile, EducationLevel

# ---------------------------------------------------------------------------
# Reference catalog. Order matters: the matcher breaks ties by position.
# ---------------------------------------------------------------------------

CAREER_PROFILES: tuple[CareerProfile, ...] = (
    CareerProfile(
        skills=("python", "excel", "sql"),
        interests=("technology", "finance"),
        education=EducationLevel.BACHELOR,
        career="Data Analyst",
    ),
    CareerProfile(
        skills=("python", "r", "statistics"),
        interests=("technology", "science"),
        education=EducationLevel.MASTER,
        career="Data Scientist",
    ),
    CareerProfile(
        skills=("java", "react", "sql"),
        interests=("technology",),
        education=EducationLevel.BACHELOR,
        career="Software Developer",
    ),
    CareerProfile(
        skills=("communication", "marketing"),
        interests=("business",),
        education=EducationLevel.DIPLOMA,
        career="Marketing Officer",
    ),
    CareerProfile(
        skills=("excel", "accounting"),
        interests=("finance",),
        education=EducationLevel.BACHELOR,
        career="Accountant",
    ),
    CareerProfile(
        skills=("biology", "lab work"),
        interests=("health",),
        education=EducationLevel.BACHELOR,
        career="Laboratory Scientist",
    ),
    CareerProfile(
        skills=("teaching", "writing"),
        interests=("education",),
        education=EducationLevel.BACHELOR,
        career="Teacher",
    ),
    CareerProfile(
        skills=("graphic design", "creativity"),
        interests=("art",),
        education=EducationLevel.DIPLOMA,
        career="Graphic Designer",
    ),
    CareerProfile(
        skills=("sales", "communication"),
        interests=("business",),
        education=EducationLevel.HIGH_SCHOOL,
        career="Sales Representative",
    ),
    CareerProfile(
        skills=("project management", "leadership"),
        interests=("business",),
        education=EducationLevel.BACHELOR,
        career="Project Manager",
    ),
)


def distinct_sorted(groups: Iterable[Iterable[str]]) -> tuple[str, ...]:
    """Flatten, deduplicate and sort token groups."""
    return tuple(sorted({token for group in groups for token in group}))


ALL_SKILLS: tuple[str, ...] = distinct_sorted(p.skills for p in CAREER_PROFILES)
ALL_INTERESTS: tuple[str, ...] = distinct_sorted(p.interests for p in CAREER_PROFILES)
EDUCATION_LEVELS: tuple[EducationLevel, ...] = tuple(EducationLevel)


def find_profile(
    career: str,
    catalog: tuple[CareerProfile, ...] = CAREER_PROFILES,
) -> Optional[CareerProfile]:
    """Return the first profile labelled *career*, or None."""
    for profile in catalog:
        if profile.career == career:
            return profile
    return None
