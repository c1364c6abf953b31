import itertools

import pytest

from career_predictor.catalog import CAREER_PROFILES
from career_predictor.matcher import (
    best_match,
    predict,
    predict_career,
    rank_careers,
    score_profile,
    skill_gap,
)
from career_predictor.models import CareerProfile, EducationLevel, ScoringPolicy, Selection
from career_predictor.strings import NO_SUITABLE_CAREER, NOT_FOUND

SIMPLE = ScoringPolicy.SIMPLE
WEIGHTED = ScoringPolicy.WEIGHTED


def _profile(career, skills, interests=(), education=EducationLevel.BACHELOR):
    return CareerProfile(skills=skills, interests=interests, education=education, career=career)


def test_simple_policy_counts_skill_overlap():
    selection = Selection(skills=["python", "excel", "sql"])
    scores = {p.career: score_profile(selection, p, SIMPLE) for p in CAREER_PROFILES}

    assert scores["Data Analyst"] == 3
    assert scores["Data Scientist"] == 1
    assert scores["Software Developer"] == 1
    assert scores["Accountant"] == 1
    assert all(s < 3 for c, s in scores.items() if c != "Data Analyst")
    assert predict_career(selection, policy=SIMPLE) == "Data Analyst"


def test_weighted_policy_scores_skills_interests_and_education():
    selection = Selection(
        skills=["python"], interests=["technology"], education=EducationLevel.MASTER,
    )
    data_scientist, data_analyst = CAREER_PROFILES[1], CAREER_PROFILES[0]

    assert score_profile(selection, data_scientist, WEIGHTED) == 6
    assert score_profile(selection, data_analyst, WEIGHTED) == 5
    assert predict_career(selection, policy=WEIGHTED) == "Data Scientist"


def test_simple_policy_ignores_interests_and_education():
    selection = Selection(interests=["business"], education=EducationLevel.HIGH_SCHOOL)
    assert all(score_profile(selection, p, SIMPLE) == 0 for p in CAREER_PROFILES)
    assert predict_career(selection, policy=SIMPLE) == NO_SUITABLE_CAREER


def test_unknown_token_yields_sentinel_without_raising():
    selection = Selection(skills=["underwater basket weaving"])
    for policy in ScoringPolicy:
        assert predict_career(selection, policy=policy) == NO_SUITABLE_CAREER


def test_empty_selection_yields_sentinel():
    for policy in ScoringPolicy:
        assert predict_career(Selection(), policy=policy) == NO_SUITABLE_CAREER


def test_empty_skills_can_still_match_on_interests_under_weighted_policy():
    selection = Selection(interests=["health"])
    assert predict_career(selection, policy=WEIGHTED) == "Laboratory Scientist"


def test_education_alone_scores_one_point():
    selection = Selection(education=EducationLevel.HIGH_SCHOOL)
    best = best_match(selection, policy=WEIGHTED)
    assert best.career == "Sales Representative"
    assert best.score == 1


def test_best_match_returns_placeholder_when_nothing_scores():
    best = best_match(Selection(skills=["knitting"]))
    assert best.career == NOT_FOUND
    assert best.score == 0
    assert NOT_FOUND != NO_SUITABLE_CAREER


def test_sentinels_never_collide_with_catalog_labels():
    labels = {p.career for p in CAREER_PROFILES}
    assert NOT_FOUND not in labels
    assert NO_SUITABLE_CAREER not in labels


def test_first_profile_in_catalog_order_wins_ties():
    # "sql" is shared by Data Analyst and Software Developer
    assert predict_career(Selection(skills=["sql"]), policy=SIMPLE) == "Data Analyst"
    # "communication" is shared by Marketing Officer and Sales Representative
    assert predict_career(Selection(skills=["communication"]), policy=SIMPLE) == "Marketing Officer"
    # Three business profiles tie on interests alone
    assert predict_career(Selection(interests=["business"]), policy=WEIGHTED) == "Marketing Officer"


@pytest.mark.parametrize("policy", list(ScoringPolicy))
def test_tie_break_holds_for_every_permutation(policy):
    profiles = [
        _profile("Alpha", ("go",)),
        _profile("Beta", ("go",)),
        _profile("Gamma", ("go",)),
        _profile("Delta", ("rust",)),
    ]
    selection = Selection(skills=["go"])
    for order in itertools.permutations(profiles):
        expected = next(p.career for p in order if p.career != "Delta")
        assert predict_career(selection, order, policy) == expected


def test_later_profile_with_strictly_higher_score_wins():
    catalog = [_profile("First", ("a",)), _profile("Second", ("a", "b"))]
    assert predict_career(Selection(skills=["a", "b"]), catalog, SIMPLE) == "Second"


def test_returned_label_has_the_maximum_score():
    selections = [
        Selection(skills=["python", "r"]),
        Selection(skills=["excel"], interests=["finance"]),
        Selection(skills=["communication", "sales"], education=EducationLevel.HIGH_SCHOOL),
        Selection(skills=["writing", "creativity"], interests=["art"]),
    ]
    for selection in selections:
        for policy in ScoringPolicy:
            career = predict_career(selection, policy=policy)
            scores = [score_profile(selection, p, policy) for p in CAREER_PROFILES]
            winner = next(p for p in CAREER_PROFILES if p.career == career)
            assert score_profile(selection, winner, policy) == max(scores)


@pytest.mark.parametrize("policy", list(ScoringPolicy))
def test_adding_a_matching_skill_never_lowers_the_score(policy):
    for profile in CAREER_PROFILES:
        base = Selection(skills=[profile.skills[0]])
        grown = Selection(skills=list(profile.skills))
        assert score_profile(grown, profile, policy) >= score_profile(base, profile, policy)
        assert score_profile(grown, profile, policy) > score_profile(Selection(), profile, policy)


def test_prediction_is_idempotent():
    selection = Selection(skills=["java", "react"], interests=["technology"])
    first = predict(selection, policy=WEIGHTED)
    second = predict(selection, policy=WEIGHTED)
    assert first == second
    assert first.career == "Software Developer"


def test_predict_reports_skill_breakdown():
    prediction = predict(Selection(skills=["python", "sql", "juggling"]), policy=SIMPLE)
    assert prediction.career == "Data Analyst"
    assert prediction.matched is True
    assert prediction.score == 2
    assert prediction.policy is SIMPLE
    assert prediction.matched_skills == ["python", "sql"]
    assert prediction.missing_skills == ["excel"]


def test_predict_without_match_flags_it():
    prediction = predict(Selection(skills=["juggling"]))
    assert prediction.matched is False
    assert prediction.career == NO_SUITABLE_CAREER
    assert prediction.score == 0
    assert prediction.matched_skills == []


def test_rank_careers_orders_by_score_and_keeps_catalog_order_on_ties():
    ranked = rank_careers(Selection(skills=["sql", "excel"]), policy=SIMPLE)
    assert len(ranked) == len(CAREER_PROFILES)
    assert ranked[0].career == "Data Analyst"
    assert ranked[0].score == 2
    assert [r.career for r in ranked[1:3]] == ["Software Developer", "Accountant"]
    assert [r.score for r in ranked] == sorted((r.score for r in ranked), reverse=True)


def test_skill_gap_splits_matched_missing_and_bonus():
    matched, missing, bonus = skill_gap({"python", "sql", "go"}, {"python", "excel", "sql"})
    assert matched == ["python", "sql"]
    assert missing == ["excel"]
    assert bonus == ["go"]


def test_duplicate_selected_tokens_count_once():
    selection = Selection(skills=["python", "python", "Python "])
    assert selection.skills == ["python"]
    assert score_profile(selection, CAREER_PROFILES[0], SIMPLE) == 1


def test_policy_accepts_string_values():
    selection = Selection(skills=["python"], interests=["technology"])
    data_analyst = CAREER_PROFILES[0]

    assert score_profile(selection, data_analyst, "simple") == 1
    assert score_profile(selection, data_analyst, "weighted") == 5
    assert best_match(selection, policy="simple").score == 1
    assert predict(selection, policy="simple").policy is SIMPLE
    assert rank_careers(selection, policy="simple")[0].score == 1


def test_unknown_policy_string_raises():
    with pytest.raises(ValueError):
        score_profile(Selection(skills=["python"]), CAREER_PROFILES[0], "fancy")
