"""
Pain Predictor

Estimates how likely the current findings are to turn into pain, and where.
Consumes the three upstream correlation results plus the raw forward-bend
and back-view analyses.

Each rule is pure: (PainInputs) → Optional[PainContribution]. The rules are
folded in table order into a risk score, which is bucketed into a likelihood.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from .base import (
    ChainType,
    CompensationMap,
    InflammationTracking,
    PainContribution,
    PainLikelihood,
    PainPrediction,
    PostureChainAnalysis,
    RiskLevel,
    Severity,
)

if TYPE_CHECKING:
    from wellness_correlation.models.analysis import BackViewAnalysis, ForwardBendAnalysis

# Likelihood buckets (risk score >= value), highest first
LIKELIHOOD_BANDS = [
    (80, PainLikelihood.VERY_HIGH),
    (60, PainLikelihood.HIGH),
    (40, PainLikelihood.MODERATE),
    (20, PainLikelihood.LOW),
]

CONFIDENCE_BASE       = 0.3
CONFIDENCE_PER_FACTOR = 0.15
CONFIDENCE_CAP        = 0.95

_CHAIN_SEVERITY = {
    Severity.SEVERE: PainContribution(30, "Severe postural chain dysfunction"),
    Severity.MODERATE: PainContribution(20, "Moderate postural compensation patterns"),
    Severity.MILD: PainContribution(10, "Mild postural imbalances"),
}

_CHAIN_AREAS = {
    ChainType.FORWARD_HEAD_CASCADE: PainContribution(
        15, None, ("Neck pain", "Upper back tension", "Headaches")
    ),
    ChainType.UPPER_CROSS_SYNDROME: PainContribution(
        20, None, ("Neck and shoulder pain", "Mid-back pain")
    ),
    ChainType.LOWER_CROSS_SYNDROME: PainContribution(
        25, None, ("Lower back pain", "Hip pain", "Sciatica risk")
    ),
}

_COMPENSATION_RISK = {
    RiskLevel.CRITICAL: PainContribution(20, "Multiple severe compensation patterns"),
    RiskLevel.HIGH: PainContribution(15, "Multiple compensation patterns"),
}


@dataclass(frozen=True)
class PainInputs:
    posture_chain: PostureChainAnalysis
    inflammation: InflammationTracking
    compensation_map: CompensationMap
    forward_bend: Optional["ForwardBendAnalysis"] = None
    back_view: Optional["BackViewAnalysis"] = None


# ── Rules ─────────────────────────────────────────────────────────────────────

def rule_chain_severity(data: PainInputs) -> Optional[PainContribution]:
    return _CHAIN_SEVERITY.get(data.posture_chain.severity)


def rule_chain_type(data: PainInputs) -> Optional[PainContribution]:
    return _CHAIN_AREAS.get(data.posture_chain.chain_type)


def rule_pelvic_asymmetry(data: PainInputs) -> Optional[PainContribution]:
    if data.back_view is None or data.back_view.hip_alignment.symmetrical:
        return None
    return PainContribution(
        15, "Pelvic asymmetry", ("Lower back pain (unilateral)", "SI joint dysfunction")
    )


def rule_posterior_chain(data: PainInputs) -> Optional[PainContribution]:
    if data.forward_bend is None or not data.forward_bend.has_tight_hamstrings:
        return None
    return PainContribution(10, "Posterior chain tightness", ("Lower back strain",))


def rule_systemic_inflammation(data: PainInputs) -> Optional[PainContribution]:
    if not data.inflammation.systemic_indicators:
        return None
    return PainContribution(15, "Systemic inflammation present")


def rule_compensation_load(data: PainInputs) -> Optional[PainContribution]:
    return _COMPENSATION_RISK.get(data.compensation_map.risk_level)


PAIN_RULES = [
    rule_chain_severity,
    rule_chain_type,
    rule_pelvic_asymmetry,
    rule_posterior_chain,
    rule_systemic_inflammation,
    rule_compensation_load,
]


def likelihood_for(risk_score: int) -> PainLikelihood:
    for floor, likelihood in LIKELIHOOD_BANDS:
        if risk_score >= floor:
            return likelihood
    return PainLikelihood.VERY_LOW


def confidence_for(factor_count: int) -> float:
    return round(min(CONFIDENCE_CAP, CONFIDENCE_BASE + CONFIDENCE_PER_FACTOR * factor_count), 2)


def _prevention_priorities(data: PainInputs, predicted_areas: List[str]) -> List[str]:
    priorities: List[str] = []
    if data.posture_chain.severity != Severity.NONE:
        priorities.append("Address postural root cause (start proximal)")
    if any("Lower back" in area for area in predicted_areas):
        priorities.append("Core stability training")
        priorities.append("Hip mobility and strengthening")
    if any("Neck" in area for area in predicted_areas):
        priorities.append("Cervical strengthening and retraction exercises")
        priorities.append("Ergonomic workspace setup")
    if data.inflammation.overall_level != Severity.NONE:
        priorities.append("Anti-inflammatory lifestyle modifications")
    return priorities


def predict_pain(data: PainInputs) -> PainPrediction:
    risk_score = 0
    risk_factors: List[str] = []
    predicted_areas: List[str] = []

    for rule in PAIN_RULES:
        contribution = rule(data)
        if contribution is None:
            continue
        risk_score += contribution.points
        if contribution.risk_factor:
            risk_factors.append(contribution.risk_factor)
        for area in contribution.predicted_areas:
            if area not in predicted_areas:
                predicted_areas.append(area)

    return PainPrediction(
        likelihood=likelihood_for(risk_score),
        confidence_score=confidence_for(len(risk_factors)),
        primary_risk_factors=risk_factors,
        predicted_areas=predicted_areas,
        prevention_priorities=_prevention_priorities(data, predicted_areas),
    )
