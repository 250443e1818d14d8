"""
Unit Tests for Inflammation Tracker
"""
from wellness_correlation.core.correlation import Severity
from wellness_correlation.core.correlation.inflammation import (
    CIRCULATION_RECOMMENDATIONS,
    GENERAL_RECOMMENDATIONS,
    SYSTEMIC_RECOMMENDATIONS,
    analyze_inflammation,
)


class TestInflammation:

    def test_no_inputs(self, build_analysis):
        result = analyze_inflammation(build_analysis())

        assert result.overall_level == Severity.NONE
        assert result.primary_areas == []
        assert result.systemic_indicators is False
        assert result.circulation_issues is False
        assert result.recommendations == []

    def test_severe_hand_swelling(self, build_analysis, hands):
        result = analyze_inflammation(
            build_analysis(hands=hands(["severe swelling"], circulation=50))
        )

        assert result.overall_level == Severity.MODERATE
        assert result.systemic_indicators is True
        assert result.circulation_issues is True
        assert result.primary_areas == ["Hands/extremities", "Circulation (hands)"]
        assert result.recommendations == (
            GENERAL_RECOMMENDATIONS + CIRCULATION_RECOMMENDATIONS + SYSTEMIC_RECOMMENDATIONS
        )

    def test_mild_hand_indicators(self, build_analysis, hands):
        result = analyze_inflammation(build_analysis(hands=hands(["slight puffiness"])))

        assert result.overall_level == Severity.MILD
        assert result.systemic_indicators is False
        assert result.primary_areas == ["Hands/extremities"]
        assert result.recommendations == GENERAL_RECOMMENDATIONS

    def test_hand_terms_are_case_sensitive(self, build_analysis, hands):
        result = analyze_inflammation(build_analysis(hands=hands(["Severe swelling"])))
        assert result.overall_level == Severity.MILD
        assert result.systemic_indicators is False

    def test_circulation_only(self, build_analysis, hands):
        result = analyze_inflammation(build_analysis(hands=hands(circulation=40)))

        assert result.overall_level == Severity.NONE
        assert result.circulation_issues is True
        assert result.recommendations == CIRCULATION_RECOMMENDATIONS

    def test_circulation_boundary(self, build_analysis, hands):
        result = analyze_inflammation(build_analysis(hands=hands(circulation=60)))
        assert result.circulation_issues is False

    def test_facial_redness(self, build_analysis, facial):
        result = analyze_inflammation(build_analysis(facial=facial("Redness around cheeks", "dry skin")))

        assert result.overall_level == Severity.MILD
        assert result.systemic_indicators is True
        assert result.primary_areas == ["Facial tissue"]
        assert result.recommendations == GENERAL_RECOMMENDATIONS + SYSTEMIC_RECOMMENDATIONS

    def test_unrelated_facial_concerns(self, build_analysis, facial):
        result = analyze_inflammation(build_analysis(facial=facial("dark circles")))
        assert result.overall_level == Severity.NONE
        assert result.systemic_indicators is False

    def test_systemic_in_two_areas_escalates(self, build_analysis, hands, facial):
        result = analyze_inflammation(build_analysis(
            hands=hands(["slight puffiness"]),
            facial=facial("skin inflammation"),
        ))

        assert result.primary_areas == ["Hands/extremities", "Facial tissue"]
        assert result.overall_level == Severity.MODERATE
