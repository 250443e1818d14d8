"""
API envelopes returned by the correlation endpoints.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HealthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    version: str
    timestamp: str
    uptime_seconds: float


class CorrelationResponse(BaseModel):
    """Successful correlation run."""
    success: bool = True
    correlations: Dict[str, Any]
    summary: Optional[Dict[str, Any]] = None


class AnalysisResponse(BaseModel):
    """Successful single-component run."""
    success: bool = True
    analysis: Dict[str, Any]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    code: Optional[str] = None
    details: Optional[Any] = None
