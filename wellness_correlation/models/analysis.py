"""
Vision Analysis Records

Shapes of the structured analyses produced upstream by the vision/LLM
analysers. They are validated here, at the API boundary, so the correlation
engine can rely on well-formed optional fields.

Wire format uses camelCase keys (``sideProfile``, ``forwardHeadPosture``);
snake_case names are accepted as well. Unknown keys are ignored.
"""
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _lower(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Categorical labels arrive from an LLM, so casing is normalised first
SeverityValue = Annotated[Literal["none", "mild", "moderate", "severe"], BeforeValidator(_lower)]
FlexibilityValue = Annotated[Literal["excellent", "good", "moderate", "limited"], BeforeValidator(_lower)]


class AnalysisModel(BaseModel):
    """Common config for every upstream analysis record."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class PostureAnalysis(AnalysisModel):
    description: str = ""
    compensation_patterns: List[str] = Field(default_factory=list)
    comparison_to_ideal: str = ""
    corrections: List[str] = Field(default_factory=list)
    rating: Optional[float] = Field(None, ge=0, le=10)
    raw_analysis: str = ""


class ForwardHeadPosture(AnalysisModel):
    severity: SeverityValue
    description: str = ""


class SideProfileAnalysis(AnalysisModel):
    forward_head_posture: ForwardHeadPosture
    neck_curve: str
    upper_back_alignment: str
    health_score: Optional[float] = Field(None, ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)


class Alignment(AnalysisModel):
    symmetrical: bool
    deviation: Optional[str] = None


class BackViewAnalysis(AnalysisModel):
    shoulder_alignment: Alignment
    hip_alignment: Alignment
    scoliosis_indicators: List[str] = Field(default_factory=list)
    health_score: Optional[float] = Field(None, ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)

    @property
    def is_asymmetric(self) -> bool:
        return not self.shoulder_alignment.symmetrical or not self.hip_alignment.symmetrical


class SeatedPostureAnalysis(AnalysisModel):
    work_posture_issues: List[str] = Field(default_factory=list)
    ergonomic_score: Optional[float] = Field(None, ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)


class ForwardBendAnalysis(AnalysisModel):
    hamstring_flexibility: FlexibilityValue
    compensation_patterns: List[str] = Field(default_factory=list)
    spinal_mobility: str = ""
    health_score: Optional[float] = Field(None, ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)

    @property
    def has_tight_hamstrings(self) -> bool:
        return self.hamstring_flexibility in ("limited", "moderate")


class FacialHealthAnalysis(AnalysisModel):
    skin_health: str = ""
    eye_clarity: str = ""
    overall_vitality: str = ""
    concern_areas: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    health_score: Optional[float] = Field(None, ge=0, le=100)


class HandsAnalysis(AnalysisModel):
    inflammation_indicators: List[str] = Field(default_factory=list)
    circulation_score: float = Field(..., ge=0, le=100)
    nail_health: str = ""
    joint_observations: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class EyeObservation(AnalysisModel):
    observations: List[str] = Field(default_factory=list)
    organ_systems: List[str] = Field(default_factory=list)
    concern_areas: List[str] = Field(default_factory=list)


class IridologyAnalysis(AnalysisModel):
    left_eye: EyeObservation = Field(default_factory=EyeObservation)
    right_eye: EyeObservation = Field(default_factory=EyeObservation)
    overall_assessment: str = ""
    recommendations: List[str] = Field(default_factory=list)


class FullAnalysis(AnalysisModel):
    """Every analysis a client may submit for correlation; all optional."""
    posture: Optional[PostureAnalysis] = None
    facial: Optional[FacialHealthAnalysis] = None
    iridology: Optional[IridologyAnalysis] = None
    side_profile: Optional[SideProfileAnalysis] = None
    back_view: Optional[BackViewAnalysis] = None
    seated_posture: Optional[SeatedPostureAnalysis] = None
    hands: Optional[HandsAnalysis] = None
    forward_bend: Optional[ForwardBendAnalysis] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        json_schema_extra={"example": {
            "sideProfile": {
                "forwardHeadPosture": {"severity": "moderate", "description": "Ears ahead of shoulders"},
                "neckCurve": "flattened curve",
                "upperBackAlignment": "mild thoracic kyphosis",
                "healthScore": 55,
            },
            "backView": {
                "shoulderAlignment": {"symmetrical": False, "deviation": "right shoulder elevated"},
                "hipAlignment": {"symmetrical": True},
                "scoliosisIndicators": [],
                "healthScore": 70,
            },
            "hands": {"inflammationIndicators": [], "circulationScore": 72},
        }},
    )

    def supplied(self) -> List[str]:
        """Wire names of the analyses present in this request."""
        return [
            to_camel(name) for name in type(self).model_fields
            if getattr(self, name) is not None
        ]
