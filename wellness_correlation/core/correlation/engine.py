"""
Correlation Engine

Central dispatcher. Takes the full set of vision analyses supplied for one
check-in and returns the fused CorrelationResults.

Usage:
    from wellness_correlation.core.correlation import CorrelationEngine

    engine = CorrelationEngine()
    results = engine.generate_correlations(full_analysis)
    print(results.overall_health_score, results.action_priorities)

The posture chain, inflammation and compensation map are independent of
each other; pain prediction consumes all three.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from wellness_correlation.models.analysis import FullAnalysis
from .base import (
    CompensationMap,
    CorrelationResults,
    InflammationTracking,
    PainLikelihood,
    PainPrediction,
    PostureChainAnalysis,
    RiskLevel,
    Severity,
)
from .compensation import build_compensation_map
from .inflammation import analyze_inflammation
from .pain_prediction import PainInputs, predict_pain
from .posture_chain import analyze_posture_chain

logger = logging.getLogger(__name__)

# ── Health score penalties ───────────────────────────────────────────────────
_CHAIN_PENALTY = {
    Severity.SEVERE: 30,
    Severity.MODERATE: 20,
    Severity.MILD: 10,
}
_INFLAMMATION_PENALTY = {
    Severity.SEVERE: 25,
    Severity.MODERATE: 15,
    Severity.MILD: 8,
}
_COMPENSATION_PENALTY = {
    RiskLevel.CRITICAL: 20,
    RiskLevel.HIGH: 15,
    RiskLevel.MODERATE: 10,
}

_ELEVATED_RISK = (RiskLevel.HIGH, RiskLevel.CRITICAL)
_ELEVATED_PAIN = (PainLikelihood.HIGH, PainLikelihood.VERY_HIGH)

MAX_ACTION_PRIORITIES = 5
PROFESSIONAL_ASSESSMENT = "Professional assessment recommended (PT/chiropractor)"


class CorrelationEngine:
    """
    Fuses independent vision analyses into aggregate risk assessments.

    Stateless; safe to call from multiple threads / concurrent requests.
    """

    def analyze_posture_chain(self, analysis: FullAnalysis) -> PostureChainAnalysis:
        return analyze_posture_chain(analysis)

    def analyze_inflammation(self, analysis: FullAnalysis) -> InflammationTracking:
        return analyze_inflammation(analysis)

    def build_compensation_map(self, analysis: FullAnalysis) -> CompensationMap:
        return build_compensation_map(analysis)

    def predict_pain(
        self,
        analysis: FullAnalysis,
        posture_chain: PostureChainAnalysis,
        inflammation: InflammationTracking,
        compensation_map: CompensationMap,
    ) -> PainPrediction:
        return predict_pain(PainInputs(
            posture_chain=posture_chain,
            inflammation=inflammation,
            compensation_map=compensation_map,
            forward_bend=analysis.forward_bend,
            back_view=analysis.back_view,
        ))

    def generate_correlations(self, analysis: FullAnalysis) -> CorrelationResults:
        """
        Run every correlation component against the supplied analyses.

        Args:
            analysis: Any subset of the eight vision analyses. Missing
                      analyses simply contribute nothing.

        Returns:
            CorrelationResults. With no analyses at all this is the
            all-clear result: score 100, no findings, no actions.
        """
        supplied = analysis.supplied()
        if not supplied:
            logger.debug("CorrelationEngine: no analyses supplied, returning baseline")

        posture_chain = self.analyze_posture_chain(analysis)
        inflammation = self.analyze_inflammation(analysis)
        compensation_map = self.build_compensation_map(analysis)
        pain_prediction = self.predict_pain(
            analysis, posture_chain, inflammation, compensation_map
        )

        results = CorrelationResults(
            posture_chain=posture_chain,
            inflammation=inflammation,
            compensation_map=compensation_map,
            pain_prediction=pain_prediction,
        )
        results.overall_health_score = self._health_score(results)
        results.critical_findings = self._critical_findings(results)
        results.action_priorities = self._action_priorities(results)

        logger.info(
            f"CorrelationEngine: "
            f"chain={posture_chain.chain_type.value}/{posture_chain.severity.value}, "
            f"pain={pain_prediction.likelihood.value}, "
            f"{len(results.critical_findings)} critical finding(s)",
            extra={
                "component": "correlations",
                "supplied": ",".join(supplied) or "none",
                "health_score": results.overall_health_score,
            },
        )
        return results

    # ── Aggregation ──────────────────────────────────────────────────────────

    @staticmethod
    def _health_score(results: CorrelationResults) -> int:
        score = 100
        score -= _CHAIN_PENALTY.get(results.posture_chain.severity, 0)
        score -= _INFLAMMATION_PENALTY.get(results.inflammation.overall_level, 0)
        score -= _COMPENSATION_PENALTY.get(results.compensation_map.risk_level, 0)
        return max(0, score)

    @staticmethod
    def _critical_findings(results: CorrelationResults) -> List[str]:
        chain = results.posture_chain
        findings: List[str] = []

        if chain.severity == Severity.SEVERE:
            findings.append(f"Severe {chain.chain_type.value.replace('_', ' ')} detected")
        if results.inflammation.systemic_indicators:
            findings.append("Systemic inflammation markers present")
        if results.compensation_map.risk_level in _ELEVATED_RISK:
            findings.append(
                f"{results.compensation_map.total_patterns} compensation patterns identified"
            )
        if results.pain_prediction.likelihood in _ELEVATED_PAIN:
            findings.append(
                f"High pain likelihood: {', '.join(results.pain_prediction.predicted_areas)}"
            )
        return findings

    @staticmethod
    def _action_priorities(results: CorrelationResults) -> List[str]:
        actions: List[str] = []

        if results.posture_chain.recommendations:
            actions.append(results.posture_chain.recommendations[0])
        if results.pain_prediction.prevention_priorities:
            actions.append(results.pain_prediction.prevention_priorities[0])
        if (
            results.inflammation.recommendations
            and results.inflammation.overall_level != Severity.NONE
        ):
            actions.append(results.inflammation.recommendations[0])
        if results.compensation_map.risk_level in _ELEVATED_RISK:
            actions.append(PROFESSIONAL_ASSESSMENT)

        return actions[:MAX_ACTION_PRIORITIES]

    @staticmethod
    def summarise(results: CorrelationResults) -> Dict:
        """
        Compact summary dict for logs and lightweight API consumers.

        Example output:
        {
            "overall_health_score": 62,
            "posture_chain": "upper_cross_syndrome",
            "pain_likelihood": "moderate",
            "total_patterns": 2,
            "critical_count": 1,
            "top_action": "Address proximal issues first (start with head/neck positioning)"
        }
        """
        return {
            "overall_health_score": results.overall_health_score,
            "posture_chain":        results.posture_chain.chain_type.value,
            "pain_likelihood":      results.pain_prediction.likelihood.value,
            "total_patterns":       results.compensation_map.total_patterns,
            "critical_count":       len(results.critical_findings),
            "top_action":           results.action_priorities[0] if results.action_priorities else None,
        }
