"""
Inflammation Tracker

Combines the hands and facial analyses into one inflammation picture.
Text fields are matched by substring, so results depend on the wording
the upstream analyser chose.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .base import InflammationTracking, Severity

if TYPE_CHECKING:
    from wellness_correlation.models.analysis import FullAnalysis

# Circulation score below this flags circulation issues
CIRCULATION_THRESHOLD = 60

# Case-sensitive, matched against hand inflammation indicators
ESCALATING_HAND_TERMS = ("severe", "moderate")

# Case-insensitive, matched against facial concern areas
FACIAL_INFLAMMATION_TERMS = ("inflammation", "redness")

GENERAL_RECOMMENDATIONS = [
    "Anti-inflammatory diet: reduce sugar, processed foods, alcohol",
    "Increase omega-3 fatty acids (fish, walnuts, flaxseed)",
    "Stay well-hydrated (half body weight in oz of water daily)",
]
CIRCULATION_RECOMMENDATIONS = [
    "Daily movement breaks to improve circulation",
    "Contrast therapy (alternating warm/cold)",
]
SYSTEMIC_RECOMMENDATIONS = [
    "Consider food sensitivity testing",
    "Prioritize sleep quality (7-9 hours)",
]


def _facial_inflammation(concern: str) -> bool:
    concern = concern.lower()
    return any(term in concern for term in FACIAL_INFLAMMATION_TERMS)


def analyze_inflammation(analysis: "FullAnalysis") -> InflammationTracking:
    result = InflammationTracking()
    hands = analysis.hands
    facial = analysis.facial

    if hands is not None:
        if hands.inflammation_indicators:
            result.primary_areas.append("Hands/extremities")
            escalated = any(
                term in indicator
                for indicator in hands.inflammation_indicators
                for term in ESCALATING_HAND_TERMS
            )
            if escalated:
                result.overall_level = Severity.MODERATE
                result.systemic_indicators = True
            else:
                result.overall_level = Severity.MILD

        if hands.circulation_score < CIRCULATION_THRESHOLD:
            result.circulation_issues = True
            result.primary_areas.append("Circulation (hands)")

    if facial is not None and any(_facial_inflammation(c) for c in facial.concern_areas):
        result.primary_areas.append("Facial tissue")
        result.systemic_indicators = True
        if result.overall_level == Severity.NONE:
            result.overall_level = Severity.MILD

    # Systemic signs in more than one area escalate a mild reading
    if (
        result.systemic_indicators
        and len(result.primary_areas) >= 2
        and result.overall_level == Severity.MILD
    ):
        result.overall_level = Severity.MODERATE

    if result.overall_level != Severity.NONE:
        result.recommendations.extend(GENERAL_RECOMMENDATIONS)
    if result.circulation_issues:
        result.recommendations.extend(CIRCULATION_RECOMMENDATIONS)
    if result.systemic_indicators:
        result.recommendations.extend(SYSTEMIC_RECOMMENDATIONS)

    return result
