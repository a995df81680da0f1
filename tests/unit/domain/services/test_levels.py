"""Tests for severity labels and filtering directions."""

import pytest

from ipmilog.constants import Severity
from ipmilog.domain.services.levels import (
    is_enabled,
    is_suppressed,
    level_label,
    severity_name,
)


class TestLevelLabel:
    @pytest.mark.parametrize(
        ("level", "label"),
        [
            (Severity.EMERGENCY, "EMERGENCY"),
            (Severity.ERROR, "ERROR"),
            (Severity.WARNING, "WARN"),
            (Severity.INFO, "INFO"),
        ],
    )
    def test_boundaries_map_to_their_own_label(self, level, label):
        assert level_label(level) == label

    @pytest.mark.parametrize(
        ("level", "label"),
        [
            (-1, "EMERGENCY"),
            (Severity.ALERT, "ERROR"),
            (Severity.CRITICAL, "ERROR"),
            (Severity.NOTICE, "INFO"),
        ],
    )
    def test_between_boundaries_rounds_to_more_severe_bucket(self, level, label):
        assert level_label(level) == label

    @pytest.mark.parametrize("level", [Severity.DEBUG, 8, 100])
    def test_above_info_is_debug(self, level):
        assert level_label(level) == "DEBUG"


class TestFilteringDirections:
    @pytest.mark.parametrize("threshold", range(-1, 9))
    @pytest.mark.parametrize("level", range(-1, 9))
    def test_diagnostic_and_session_directions(self, threshold, level):
        assert is_enabled(threshold, level) is (threshold >= level)
        assert is_suppressed(threshold, level) is (level > threshold)

    def test_same_threshold_passes_both(self):
        assert is_enabled(Severity.INFO, Severity.INFO)
        assert not is_suppressed(Severity.INFO, Severity.INFO)


class TestSeverityName:
    def test_known_level(self):
        assert severity_name(3) == "ERROR"

    def test_unknown_level_falls_back_to_number(self):
        assert severity_name(42) == "42"
