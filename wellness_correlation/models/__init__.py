"""
Request and response models for the correlation API.
"""
from .analysis import (
    BackViewAnalysis,
    FacialHealthAnalysis,
    ForwardBendAnalysis,
    FullAnalysis,
    HandsAnalysis,
    IridologyAnalysis,
    PostureAnalysis,
    SeatedPostureAnalysis,
    SideProfileAnalysis,
)
from .api import (
    AnalysisResponse,
    CorrelationResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "BackViewAnalysis",
    "FacialHealthAnalysis",
    "ForwardBendAnalysis",
    "FullAnalysis",
    "HandsAnalysis",
    "IridologyAnalysis",
    "PostureAnalysis",
    "SeatedPostureAnalysis",
    "SideProfileAnalysis",
    "AnalysisResponse",
    "CorrelationResponse",
    "ErrorResponse",
    "HealthResponse",
]
