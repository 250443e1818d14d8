"""
Correlation Layer

Fuses independent vision analyses into postural-chain, inflammation,
compensation and pain-risk assessments.

Usage:
    from wellness_correlation.core.correlation import CorrelationEngine

    engine = CorrelationEngine()
    results = engine.generate_correlations(full_analysis)   # FullAnalysis
"""
from .engine import CorrelationEngine
from .base import (
    ChainType,
    CompensationMap,
    CompensationPattern,
    CorrelationResults,
    InflammationTracking,
    PainLikelihood,
    PainPrediction,
    PostureChainAnalysis,
    RiskLevel,
    Severity,
)

__all__ = [
    "CorrelationEngine",
    "ChainType",
    "CompensationMap",
    "CompensationPattern",
    "CorrelationResults",
    "InflammationTracking",
    "PainLikelihood",
    "PainPrediction",
    "PostureChainAnalysis",
    "RiskLevel",
    "Severity",
]
