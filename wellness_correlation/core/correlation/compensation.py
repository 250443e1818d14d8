"""
Compensation Map Builder

Lists each primary postural dysfunction together with the secondary
adaptations it produces, then rates the overall load on the body.

Pattern families are independent; each emits at most one pattern.
"""
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from .base import CompensationMap, CompensationPattern, RiskLevel, Severity
from .posture_chain import forward_head_severity, has_flattened_neck, has_kyphosis

if TYPE_CHECKING:
    from wellness_correlation.models.analysis import FullAnalysis

# How many posture compensation patterns are carried into the forward-head entry
POSTURE_PATTERNS_CARRIED = 2

# Scoliosis indicator counts
SCOLIOSIS_SEVERE_ABOVE = 2

# Seated issues needed before the seated family is reported at all
SEATED_ISSUES_ABOVE = 2
SEATED_SEVERE_AT = 3


def pattern_forward_head(analysis: "FullAnalysis") -> Optional[CompensationPattern]:
    severity = forward_head_severity(analysis)
    if severity == Severity.NONE:
        return None

    compensations: List[str] = []
    if has_flattened_neck(analysis):
        compensations.append("Cervical curve flattening")
    if has_kyphosis(analysis):
        compensations.append("Increased thoracic kyphosis")
    if analysis.posture is not None:
        compensations.extend(analysis.posture.compensation_patterns[:POSTURE_PATTERNS_CARRIED])

    return CompensationPattern("Forward Head Posture", compensations, severity)


def pattern_lateral_asymmetry(analysis: "FullAnalysis") -> Optional[CompensationPattern]:
    back = analysis.back_view
    if back is None or not back.is_asymmetric:
        return None

    compensations: List[str] = []
    if not back.shoulder_alignment.symmetrical:
        compensations.append("Unilateral shoulder loading")
    if not back.hip_alignment.symmetrical:
        compensations.append("Pelvic obliquity")
        compensations.append("Unilateral weight bearing patterns")

    indicators = len(back.scoliosis_indicators)
    if indicators > SCOLIOSIS_SEVERE_ABOVE:
        severity = Severity.SEVERE
    elif indicators > 0:
        severity = Severity.MODERATE
    else:
        severity = Severity.MILD

    return CompensationPattern("Lateral Asymmetry", compensations, severity)


def pattern_posterior_chain(analysis: "FullAnalysis") -> Optional[CompensationPattern]:
    bend = analysis.forward_bend
    if bend is None or not bend.compensation_patterns:
        return None

    severity = {
        "limited": Severity.SEVERE,
        "moderate": Severity.MODERATE,
    }.get(bend.hamstring_flexibility, Severity.MILD)

    return CompensationPattern(
        "Posterior Chain Tightness", list(bend.compensation_patterns), severity
    )


def pattern_seated_dysfunction(analysis: "FullAnalysis") -> Optional[CompensationPattern]:
    seated = analysis.seated_posture
    if seated is None or len(seated.work_posture_issues) <= SEATED_ISSUES_ABOVE:
        return None

    severity = (
        Severity.SEVERE if len(seated.work_posture_issues) >= SEATED_SEVERE_AT
        else Severity.MODERATE
    )
    return CompensationPattern(
        "Sustained Seated Posture Dysfunction", list(seated.work_posture_issues), severity
    )


PATTERN_BUILDERS = [
    pattern_forward_head,
    pattern_lateral_asymmetry,
    pattern_posterior_chain,
    pattern_seated_dysfunction,
]


def risk_level_for(patterns: List[CompensationPattern]) -> RiskLevel:
    severe = sum(1 for p in patterns if p.severity == Severity.SEVERE)
    if not patterns:
        return RiskLevel.LOW
    if severe >= 2:
        return RiskLevel.CRITICAL
    if severe >= 1 or len(patterns) >= 3:
        return RiskLevel.HIGH
    if len(patterns) >= 2:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def build_compensation_map(analysis: "FullAnalysis") -> CompensationMap:
    patterns = [
        pattern for pattern in (build(analysis) for build in PATTERN_BUILDERS)
        if pattern is not None
    ]
    return CompensationMap(patterns=patterns, risk_level=risk_level_for(patterns))
