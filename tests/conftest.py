"""
Pytest Configuration and Fixtures

Shared fixtures for correlation engine tests. Analysis fixtures are
factories returning wire-format (camelCase) dicts, the same shape the
API receives.
"""
import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from wellness_correlation.core.correlation import CorrelationEngine
from wellness_correlation.models import FullAnalysis


@pytest.fixture
def engine() -> CorrelationEngine:
    return CorrelationEngine()


@pytest.fixture
def build_analysis():
    """Validate a wire-format dict into a FullAnalysis."""
    def _build(**sections) -> FullAnalysis:
        return FullAnalysis.model_validate(sections)
    return _build


@pytest.fixture
def side_profile():
    def _make(severity="none", neck_curve="normal lordosis", upper_back="neutral alignment"):
        return {
            "forwardHeadPosture": {"severity": severity, "description": "x"},
            "neckCurve": neck_curve,
            "upperBackAlignment": upper_back,
            "healthScore": 60,
            "recommendations": [],
        }
    return _make


@pytest.fixture
def back_view():
    def _make(shoulders_symmetrical=True, hips_symmetrical=True, scoliosis=()):
        return {
            "shoulderAlignment": {"symmetrical": shoulders_symmetrical, "deviation": "n/a"},
            "hipAlignment": {"symmetrical": hips_symmetrical, "deviation": "n/a"},
            "scoliosisIndicators": list(scoliosis),
            "healthScore": 50,
        }
    return _make


@pytest.fixture
def forward_bend():
    def _make(flexibility="good", patterns=()):
        return {
            "hamstringFlexibility": flexibility,
            "compensationPatterns": list(patterns),
        }
    return _make


@pytest.fixture
def seated_posture():
    def _make(*issues):
        return {"workPostureIssues": list(issues)}
    return _make


@pytest.fixture
def hands():
    def _make(indicators=(), circulation=80):
        return {
            "inflammationIndicators": list(indicators),
            "circulationScore": circulation,
        }
    return _make


@pytest.fixture
def facial():
    def _make(*concerns):
        return {"concernAreas": list(concerns), "skinHealth": "fair"}
    return _make


@pytest.fixture
def heavy_analysis(side_profile, back_view, forward_bend, seated_posture, hands, facial):
    """Every family firing at once."""
    return {
        "sideProfile": side_profile("severe", "flattened curve", "thoracic kyphosis present"),
        "backView": back_view(False, False, ["rib hump", "uneven waist", "spinal curve"]),
        "forwardBend": forward_bend("limited", ["lumbar flexion"]),
        "seatedPosture": seated_posture("slouching", "crossed legs", "screen too low"),
        "hands": hands(["moderate swelling"], circulation=40),
        "facial": facial("inflammation around eyes"),
    }
