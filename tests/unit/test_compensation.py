"""
Unit Tests for Compensation Map Builder
"""
import pytest

from wellness_correlation.core.correlation import CompensationPattern, RiskLevel, Severity
from wellness_correlation.core.correlation.compensation import (
    build_compensation_map,
    risk_level_for,
)


def _pattern(severity: Severity) -> CompensationPattern:
    return CompensationPattern("p", [], severity)


class TestRiskLevel:

    @pytest.mark.parametrize("severities, expected", [
        ([], RiskLevel.LOW),
        ([Severity.MILD], RiskLevel.LOW),
        ([Severity.MODERATE], RiskLevel.LOW),
        ([Severity.MILD, Severity.MODERATE], RiskLevel.MODERATE),
        ([Severity.MILD, Severity.MILD, Severity.MILD], RiskLevel.HIGH),
        ([Severity.SEVERE], RiskLevel.HIGH),
        ([Severity.SEVERE, Severity.SEVERE], RiskLevel.CRITICAL),
    ])
    def test_risk_level_for(self, severities, expected):
        assert risk_level_for([_pattern(s) for s in severities]) == expected


class TestCompensationMap:

    def test_no_inputs(self, build_analysis):
        result = build_compensation_map(build_analysis())

        assert result.patterns == []
        assert result.total_patterns == 0
        assert result.risk_level == RiskLevel.LOW

    def test_lateral_asymmetry_with_scoliosis(self, build_analysis, back_view):
        result = build_compensation_map(build_analysis(
            backView=back_view(False, False, ["a", "b", "c"])
        ))

        assert result.total_patterns == 1
        pattern = result.patterns[0]
        assert pattern.primary == "Lateral Asymmetry"
        assert pattern.severity == Severity.SEVERE
        assert pattern.compensations == [
            "Unilateral shoulder loading",
            "Pelvic obliquity",
            "Unilateral weight bearing patterns",
        ]
        assert result.risk_level == RiskLevel.HIGH

    @pytest.mark.parametrize("indicators, expected", [
        ([], Severity.MILD),
        (["a"], Severity.MODERATE),
        (["a", "b"], Severity.MODERATE),
    ])
    def test_lateral_asymmetry_tiers(self, build_analysis, back_view, indicators, expected):
        result = build_compensation_map(build_analysis(
            backView=back_view(shoulders_symmetrical=False, scoliosis=indicators)
        ))
        assert result.patterns[0].severity == expected
        assert result.patterns[0].compensations == ["Unilateral shoulder loading"]

    def test_symmetrical_back_view(self, build_analysis, back_view):
        assert build_compensation_map(build_analysis(backView=back_view())).patterns == []

    def test_forward_head_carries_two_posture_patterns(self, build_analysis, side_profile):
        result = build_compensation_map(build_analysis(
            sideProfile=side_profile("moderate", "flattened"),
            posture={"compensationPatterns": ["rounded shoulders", "anterior pelvic tilt", "knee valgus"]},
        ))

        pattern = result.patterns[0]
        assert pattern.primary == "Forward Head Posture"
        assert pattern.severity == Severity.MODERATE
        assert pattern.compensations == [
            "Cervical curve flattening",
            "rounded shoulders",
            "anterior pelvic tilt",
        ]
        assert result.risk_level == RiskLevel.LOW

    def test_posture_without_forward_head(self, build_analysis, side_profile):
        result = build_compensation_map(build_analysis(
            sideProfile=side_profile("none", "flattened", "kyphosis"),
            posture={"compensationPatterns": ["rounded shoulders"]},
        ))
        assert result.patterns == []

    @pytest.mark.parametrize("flexibility, expected", [
        ("limited", Severity.SEVERE),
        ("moderate", Severity.MODERATE),
        ("good", Severity.MILD),
        ("excellent", Severity.MILD),
    ])
    def test_posterior_chain(self, build_analysis, forward_bend, flexibility, expected):
        result = build_compensation_map(build_analysis(
            forwardBend=forward_bend(flexibility, ["lumbar flexion"])
        ))
        assert result.patterns[0].primary == "Posterior Chain Tightness"
        assert result.patterns[0].compensations == ["lumbar flexion"]
        assert result.patterns[0].severity == expected

    def test_posterior_chain_needs_patterns(self, build_analysis, forward_bend):
        result = build_compensation_map(build_analysis(forwardBend=forward_bend("limited")))
        assert result.patterns == []

    def test_seated_requires_more_than_two_issues(self, build_analysis, seated_posture):
        two = build_compensation_map(build_analysis(seatedPosture=seated_posture("a", "b")))
        three = build_compensation_map(build_analysis(seatedPosture=seated_posture("a", "b", "c")))

        assert two.patterns == []
        assert three.patterns[0].primary == "Sustained Seated Posture Dysfunction"
        assert three.patterns[0].severity == Severity.SEVERE

    def test_two_severe_is_critical(self, build_analysis, side_profile, seated_posture):
        result = build_compensation_map(build_analysis(
            sideProfile=side_profile("severe"),
            seatedPosture=seated_posture("a", "b", "c"),
        ))
        assert result.severe_count == 2
        assert result.risk_level == RiskLevel.CRITICAL

    def test_three_mild_is_high(self, build_analysis, side_profile, back_view, forward_bend):
        result = build_compensation_map(build_analysis(
            sideProfile=side_profile("mild"),
            backView=back_view(shoulders_symmetrical=False),
            forwardBend=forward_bend("good", ["lumbar flexion"]),
        ))
        assert [p.severity for p in result.patterns] == [Severity.MILD] * 3
        assert result.risk_level == RiskLevel.HIGH

    def test_to_dict(self, build_analysis, back_view):
        data = build_compensation_map(build_analysis(
            backView=back_view(hips_symmetrical=False)
        )).to_dict()

        assert data == {
            "patterns": [{
                "primary": "Lateral Asymmetry",
                "compensations": ["Pelvic obliquity", "Unilateral weight bearing patterns"],
                "severity": "mild",
            }],
            "totalPatterns": 1,
            "riskLevel": "low",
        }
