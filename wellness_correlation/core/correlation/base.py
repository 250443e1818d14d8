"""
Correlation Engine: Base Types

Defines the result contracts produced by each correlation component.
Every result is built fresh per call and serialises to the camelCase
shape returned by the API.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional


class Severity(str, Enum):
    """Severity tier derived from an accumulated score."""
    NONE     = "none"
    MILD     = "mild"
    MODERATE = "moderate"
    SEVERE   = "severe"


class ChainType(str, Enum):
    """Named postural chain dysfunction."""
    FORWARD_HEAD_CASCADE = "forward_head_cascade"
    LOWER_CROSS_SYNDROME = "lower_cross_syndrome"
    UPPER_CROSS_SYNDROME = "upper_cross_syndrome"
    NONE                 = "none"


class RiskLevel(str, Enum):
    """Aggregate risk bucket for the compensation map."""
    LOW      = "low"
    MODERATE = "moderate"
    HIGH     = "high"
    CRITICAL = "critical"


class PainLikelihood(str, Enum):
    VERY_LOW  = "very_low"
    LOW       = "low"
    MODERATE  = "moderate"
    HIGH      = "high"
    VERY_HIGH = "very_high"


# ── Rule contributions ────────────────────────────────────────────────────────

class ChainContribution(NamedTuple):
    """What one postural-chain rule adds when it fires."""
    points: int
    affected_area: str
    flow_step: str


class PainContribution(NamedTuple):
    """What one pain-prediction rule adds when it fires."""
    points: int
    risk_factor: Optional[str] = None
    predicted_areas: tuple = ()


# ── Results ───────────────────────────────────────────────────────────────────

@dataclass
class PostureChainAnalysis:
    chain_type: ChainType = ChainType.NONE
    severity: Severity = Severity.NONE
    severity_score: int = 0
    affected_areas: List[str] = field(default_factory=list)
    description: str = "No significant postural chain dysfunction detected"
    compensation_flow: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "chainType": self.chain_type.value,
            "severity": self.severity.value,
            "severityScore": self.severity_score,
            "affectedAreas": list(self.affected_areas),
            "description": self.description,
            "compensationFlow": list(self.compensation_flow),
            "recommendations": list(self.recommendations),
        }


@dataclass
class InflammationTracking:
    overall_level: Severity = Severity.NONE
    primary_areas: List[str] = field(default_factory=list)
    systemic_indicators: bool = False
    circulation_issues: bool = False
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "overallLevel": self.overall_level.value,
            "primaryAreas": list(self.primary_areas),
            "systemicIndicators": self.systemic_indicators,
            "circulationIssues": self.circulation_issues,
            "recommendations": list(self.recommendations),
        }


@dataclass
class CompensationPattern:
    """A primary dysfunction and the secondary adaptations it drives."""
    primary: str
    compensations: List[str]
    severity: Severity

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "compensations": list(self.compensations),
            "severity": self.severity.value,
        }


@dataclass
class CompensationMap:
    patterns: List[CompensationPattern] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW

    @property
    def total_patterns(self) -> int:
        return len(self.patterns)

    @property
    def severe_count(self) -> int:
        return sum(1 for p in self.patterns if p.severity == Severity.SEVERE)

    def to_dict(self) -> dict:
        return {
            "patterns": [p.to_dict() for p in self.patterns],
            "totalPatterns": self.total_patterns,
            "riskLevel": self.risk_level.value,
        }


@dataclass
class PainPrediction:
    likelihood: PainLikelihood = PainLikelihood.VERY_LOW
    confidence_score: float = 0.3
    primary_risk_factors: List[str] = field(default_factory=list)
    predicted_areas: List[str] = field(default_factory=list)
    prevention_priorities: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "likelihood": self.likelihood.value,
            "confidenceScore": self.confidence_score,
            "primaryRiskFactors": list(self.primary_risk_factors),
            "predictedAreas": list(self.predicted_areas),
            "preventionPriorities": list(self.prevention_priorities),
        }


@dataclass
class CorrelationResults:
    """Everything the engine derives from one set of analyses."""
    posture_chain: PostureChainAnalysis
    inflammation: InflammationTracking
    compensation_map: CompensationMap
    pain_prediction: PainPrediction
    overall_health_score: int = 100
    critical_findings: List[str] = field(default_factory=list)
    action_priorities: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "postureChain": self.posture_chain.to_dict(),
            "inflammation": self.inflammation.to_dict(),
            "compensationMap": self.compensation_map.to_dict(),
            "painPrediction": self.pain_prediction.to_dict(),
            "overallHealthScore": self.overall_health_score,
            "criticalFindings": list(self.critical_findings),
            "actionPriorities": list(self.action_priorities),
        }
