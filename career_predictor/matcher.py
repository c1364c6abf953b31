"""Deterministic career matcher.

Scores every catalog profile against a user's selection and returns the
best career label. No I/O, no state: the same selection against the same
catalog always yields the same answer.

Two policies exist and are never mixed:
  - simple:   one point per selected skill the profile lists
  - weighted: 3 per shared skill, 2 per shared interest, 1 for equal education

Policies may be passed as ScoringPolicy members or their string values;
any other value raises ValueError.

Tie-break: profiles are scanned in catalog order and a later profile only
takes over on a strictly higher score, so the earliest maximum wins.
"""

from __future__ import annotations

import logging
from typing import Sequence

from career_predictor.catalog import CAREER_PROFILES
from career_predictor.models import (
    CareerProfile,
    CareerScore,
    Prediction,
    ScoringPolicy,
    Selection,
)
from career_predictor.strings import NO_SUITABLE_CAREER, NOT_FOUND

logger = logging.getLogger(__name__)

SKILL_WEIGHT = 3
INTEREST_WEIGHT = 2
EDUCATION_WEIGHT = 1

DEFAULT_POLICY = ScoringPolicy.WEIGHTED


def skill_gap(
    selected_skills: set[str], profile_skills: set[str]
) -> tuple[list[str], list[str], list[str]]:
    """Return (matched, missing, bonus) skill lists.

    - matched: skills both selected and listed by the profile
    - missing: profile skills the user did not select
    - bonus:   selected skills the profile does not list
    """
    matched = sorted(selected_skills & profile_skills)
    missing = sorted(profile_skills - selected_skills)
    bonus = sorted(selected_skills - profile_skills)
    return matched, missing, bonus


def score_profile(
    selection: Selection,
    profile: CareerProfile,
    policy: ScoringPolicy | str = DEFAULT_POLICY,
) -> int:
    """Return the non-negative integer score of *profile* for *selection*."""
    policy = ScoringPolicy(policy)
    skill_hits = len(set(selection.skills) & set(profile.skills))
    if policy is ScoringPolicy.SIMPLE:
        return skill_hits

    interest_hits = len(set(selection.interests) & set(profile.interests))
    education_hit = int(
        selection.education is not None and selection.education == profile.education
    )
    return (
        SKILL_WEIGHT * skill_hits
        + INTEREST_WEIGHT * interest_hits
        + EDUCATION_WEIGHT * education_hit
    )


def _career_score(
    selection: Selection,
    profile: CareerProfile,
    score: int,
) -> CareerScore:
    matched, missing, _ = skill_gap(set(selection.skills), set(profile.skills))
    return CareerScore(
        career=profile.career,
        score=score,
        matched_skills=matched,
        missing_skills=missing,
    )


def best_match(
    selection: Selection,
    catalog: Sequence[CareerProfile] = CAREER_PROFILES,
    policy: ScoringPolicy | str = DEFAULT_POLICY,
) -> CareerScore:
    """Scan *catalog* in order and return the highest-scoring profile.

    Starts from the NOT_FOUND placeholder at score 0; when nothing scores
    above 0 that placeholder is what comes back.
    """
    policy = ScoringPolicy(policy)
    best = CareerScore(career=NOT_FOUND, score=0)
    best_profile: CareerProfile | None = None
    for profile in catalog:
        score = score_profile(selection, profile, policy)
        if score > best.score:
            best = CareerScore(career=profile.career, score=score)
            best_profile = profile

    if best_profile is None:
        return best
    return _career_score(selection, best_profile, best.score)


def predict_career(
    selection: Selection,
    catalog: Sequence[CareerProfile] = CAREER_PROFILES,
    policy: ScoringPolicy | str = DEFAULT_POLICY,
) -> str:
    """Return the best career label, or NO_SUITABLE_CAREER when all score 0."""
    best = best_match(selection, catalog, policy)
    return best.career if best.score > 0 else NO_SUITABLE_CAREER


def predict(
    selection: Selection,
    catalog: Sequence[CareerProfile] = CAREER_PROFILES,
    policy: ScoringPolicy | str = DEFAULT_POLICY,
) -> Prediction:
    """Structured form of predict_career() with the winner's skill breakdown."""
    policy = ScoringPolicy(policy)
    best = best_match(selection, catalog, policy)
    found = best.score > 0
    prediction = Prediction(
        career=best.career if found else NO_SUITABLE_CAREER,
        score=best.score,
        matched=found,
        policy=policy,
        matched_skills=best.matched_skills,
        missing_skills=best.missing_skills,
    )
    logger.info(
        "Predicted %s (score %d, policy %s)",
        prediction.career, prediction.score, policy.value,
        extra={"score": prediction.score, "policy": policy.value},
    )
    return prediction


def rank_careers(
    selection: Selection,
    catalog: Sequence[CareerProfile] = CAREER_PROFILES,
    policy: ScoringPolicy | str = DEFAULT_POLICY,
) -> list[CareerScore]:
    """Score every profile, highest first. Equal scores keep catalog order."""
    policy = ScoringPolicy(policy)
    ranked = [
        _career_score(selection, profile, score_profile(selection, profile, policy))
        for profile in catalog
    ]
    # sort() is stable, so ties stay in catalog order
    ranked.sort(key=lambda c: c.score, reverse=True)
    return ranked
