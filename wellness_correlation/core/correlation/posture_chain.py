"""
Postural Chain Rules

Scores how a dysfunction at one segment (head, thoracic spine, pelvis,
posterior chain) propagates through the rest of the kinetic chain.

Design principles:
  - Each rule is pure: (FullAnalysis) → Optional[ChainContribution]
  - Rules fire independently and are folded in table order, so the
    order of affected areas in the output is fixed.
  - Weights and tier thresholds are module-level constants.
"""
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from .base import ChainContribution, ChainType, PostureChainAnalysis, Severity

if TYPE_CHECKING:
    from wellness_correlation.models.analysis import FullAnalysis

# ── Weights ───────────────────────────────────────────────────────────────────
FORWARD_HEAD_POINTS = {
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
}
FLATTENED_NECK_POINTS = 2
KYPHOSIS_POINTS       = 2
ASYMMETRY_POINTS      = 2
HAMSTRING_POINTS      = 1
SEATED_POINTS         = 1

# ── Tier thresholds (score >= value) ──────────────────────────────────────────
SEVERE_THRESHOLD   = 8
MODERATE_THRESHOLD = 5
MILD_THRESHOLD     = 2

DESCRIPTIONS = {
    ChainType.UPPER_CROSS_SYNDROME: (
        "Upper Cross Syndrome: Forward head and upper back rounding create a "
        "cascading postural dysfunction affecting neck, shoulders, and "
        "potentially lower back."
    ),
    ChainType.LOWER_CROSS_SYNDROME: (
        "Lower Cross Syndrome: Hip and hamstring imbalances creating lower back "
        "and pelvic dysfunction."
    ),
    ChainType.FORWARD_HEAD_CASCADE: (
        "Forward Head Cascade: Forward head posture initiating compensations "
        "down the spinal chain."
    ),
}


# ── Shared predicates ─────────────────────────────────────────────────────────

def forward_head_severity(analysis: "FullAnalysis") -> Severity:
    """Forward-head tier from the side profile, NONE when it was not supplied."""
    if analysis.side_profile is None:
        return Severity.NONE
    return Severity(analysis.side_profile.forward_head_posture.severity)


def has_flattened_neck(analysis: "FullAnalysis") -> bool:
    return analysis.side_profile is not None and "flattened" in analysis.side_profile.neck_curve


def has_kyphosis(analysis: "FullAnalysis") -> bool:
    return analysis.side_profile is not None and "kyphosis" in analysis.side_profile.upper_back_alignment


def tier_for_score(score: int) -> Severity:
    if score >= SEVERE_THRESHOLD:
        return Severity.SEVERE
    if score >= MODERATE_THRESHOLD:
        return Severity.MODERATE
    if score >= MILD_THRESHOLD:
        return Severity.MILD
    return Severity.NONE


# ── Rules ─────────────────────────────────────────────────────────────────────

def rule_forward_head(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    severity = forward_head_severity(analysis)
    if severity == Severity.NONE:
        return None
    return ChainContribution(
        FORWARD_HEAD_POINTS[severity],
        "Cervical spine (forward head posture)",
        "Forward head posture detected",
    )


def rule_flattened_neck(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    if not has_flattened_neck(analysis):
        return None
    return ChainContribution(
        FLATTENED_NECK_POINTS,
        "Cervical curve (flattened)",
        "Loss of natural neck curve",
    )


def rule_thoracic_kyphosis(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    if not has_kyphosis(analysis):
        return None
    return ChainContribution(
        KYPHOSIS_POINTS,
        "Thoracic spine (upper back rounding)",
        "Upper back compensation for forward head",
    )


def rule_lateral_asymmetry(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    if analysis.back_view is None or not analysis.back_view.is_asymmetric:
        return None
    return ChainContribution(
        ASYMMETRY_POINTS,
        "Lateral spine (asymmetry)",
        "Lateral chain imbalance from asymmetry",
    )


def rule_tight_hamstrings(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    if analysis.forward_bend is None or not analysis.forward_bend.has_tight_hamstrings:
        return None
    return ChainContribution(
        HAMSTRING_POINTS,
        "Posterior chain (tight hamstrings)",
        "Lumbar spine compensates for hamstring tightness",
    )


def rule_seated_posture(analysis: "FullAnalysis") -> Optional[ChainContribution]:
    if analysis.seated_posture is None or not analysis.seated_posture.work_posture_issues:
        return None
    return ChainContribution(
        SEATED_POINTS,
        "Work posture (sustained poor positioning)",
        "Daily seated posture reinforcing dysfunction",
    )


# Evaluation order, head to feet then daily habits.
CHAIN_RULES = [
    rule_forward_head,
    rule_flattened_neck,
    rule_thoracic_kyphosis,
    rule_lateral_asymmetry,
    rule_tight_hamstrings,
    rule_seated_posture,
]


def classify_chain(analysis: "FullAnalysis") -> ChainType:
    """Pick the chain type; earlier patterns take precedence."""
    head_forward = forward_head_severity(analysis) != Severity.NONE

    if head_forward and has_kyphosis(analysis):
        return ChainType.UPPER_CROSS_SYNDROME
    if (
        analysis.forward_bend is not None
        and analysis.back_view is not None
        and not analysis.back_view.hip_alignment.symmetrical
    ):
        return ChainType.LOWER_CROSS_SYNDROME
    if head_forward:
        return ChainType.FORWARD_HEAD_CASCADE
    return ChainType.NONE


def analyze_posture_chain(analysis: "FullAnalysis") -> PostureChainAnalysis:
    """
    Fold the chain rules over the posture-related analyses.

    Reads posture, side profile, back view, seated posture and forward bend;
    any of them may be missing, in which case its rules do not fire.
    """
    contributions: List[ChainContribution] = []
    for rule in CHAIN_RULES:
        contribution = rule(analysis)
        if contribution is not None:
            contributions.append(contribution)

    result = PostureChainAnalysis(
        severity_score=sum(c.points for c in contributions),
        affected_areas=[c.affected_area for c in contributions],
        compensation_flow=[c.flow_step for c in contributions],
    )

    if contributions:
        result.severity = tier_for_score(result.severity_score)
        result.chain_type = classify_chain(analysis)
        if result.chain_type in DESCRIPTIONS:
            result.description = DESCRIPTIONS[result.chain_type]

    if result.severity != Severity.NONE:
        result.recommendations = [
            "Address proximal issues first (start with head/neck positioning)",
            "Strengthen weak links in the kinetic chain",
            "Daily postural awareness breaks",
        ]
        if analysis.seated_posture is not None:
            result.recommendations.append(
                "Ergonomic workspace assessment critical for sustained improvement"
            )

    return result
