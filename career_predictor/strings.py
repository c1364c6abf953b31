"""Fixed user-facing strings.

Both no-match sentinels live here so they can never collide with a
catalog label.
"""

from __future__ import annotations

NOT_FOUND = "Not found"
NO_SUITABLE_CAREER = "No suitable career found. Please try different selections."

MISSING_INFORMATION = "Missing Information"
SELECT_AT_LEAST_ONE_SKILL = "Please select at least one skill."

UI_STRINGS: dict[str, str] = {
    "notFound": NOT_FOUND,
    "noSuitableCareer": NO_SUITABLE_CAREER,
    "missingInformation": MISSING_INFORMATION,
    "selectAtLeastOneSkill": SELECT_AT_LEAST_ONE_SKILL,
    "careerPathPredictor": "Career Path Predictor",
    "yourSkills": "Your Skills",
    "yourInterests": "Your Interests",
    "educationLevel": "Education Level",
    "clearSelections": "Clear Selections",
    "predictMyCareer": "Predict My Career",
    "suggestedCareer": "Suggested Career:",
}
