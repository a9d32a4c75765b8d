"""Tests for the vertical classifier."""

import pytest
from structlog.testing import capture_logs

from pagewright.config import PipelineSettings
from pagewright.models.classification import Confidence, Vertical, VerticalClassification
from pagewright.services.vertical_classifier import (
    INDUSTRY_OPTIONS,
    build_weighted_text,
    classify,
    confidence_for,
    confirm_vertical,
    contains_agency_signals,
    option_to_vertical,
    score_verticals,
    vertical_display_name,
)
from pagewright.utils.exceptions import ContractError


class TestWeightedText:
    """Tests for recency weighting."""

    def test_recent_messages_counted_twice(self):
        """Test the last three messages appear twice."""
        text = build_weighted_text(["One", "Two", "Three", "Four"])

        assert text == "one two three four two three four"

    def test_short_history_fully_doubled(self):
        """Test fewer than three messages are all recent."""
        assert build_weighted_text(["A", "B"]) == "a b a b"

    def test_empty_history(self):
        """Test no messages gives empty text."""
        assert build_weighted_text([]) == ""


class TestScoring:
    """Tests for keyword scoring."""

    def test_weight_times_occurrences(self):
        """Test each occurrence adds the keyword weight."""
        scores = score_verticals("plumber plumber residential", False, PipelineSettings())

        local = scores[Vertical.LOCAL_SERVICES]
        assert local.score == 10 * 2 + 8
        assert local.keywords == ["plumber", "residential"]

    def test_agency_bonus_and_penalty(self):
        """Test agency phrasing boosts agency verticals and penalises others."""
        text = build_weighted_text(["we help healthcare founders grow"])
        assert contains_agency_signals(text)

        scores = score_verticals(text, True, PipelineSettings())

        assert scores[Vertical.HEALTHCARE].score == 20 - 8
        assert scores[Vertical.CONSULTING].score == 10
        assert scores[Vertical.CREATIVE].score == 10
        assert scores[Vertical.LEGAL].score == 0
        assert scores[Vertical.DEFAULT].score == 0

    def test_penalty_floors_at_zero(self):
        """Test the penalty never makes a score negative."""
        scores = score_verticals("local", True, PipelineSettings())

        assert scores[Vertical.LOCAL_SERVICES].score == 0

    def test_agency_constants_configurable(self):
        """Test bonus and penalty come from settings."""
        settings = PipelineSettings(agency_bonus=3, agency_penalty=1)

        scores = score_verticals("medical", True, settings)

        assert scores[Vertical.HEALTHCARE].score == 9
        assert scores[Vertical.CONSULTING].score == 3

    @pytest.mark.parametrize(
        ("score", "count", "expected"),
        [
            (20, 3, Confidence.HIGH),
            (36, 2, Confidence.MEDIUM),
            (10, 2, Confidence.MEDIUM),
            (19, 1, Confidence.LOW),
            (5, 5, Confidence.LOW),
        ],
    )
    def test_confidence_bands(self, score, count, expected):
        """Test confidence thresholds."""
        assert confidence_for(score, count) == expected


class TestClassify:
    """Tests for classify."""

    def test_plumber_scenario(self):
        """Test a residential plumber is local services."""
        result = classify(["we need a plumber for our growing business", "mostly residential customers"])

        assert result.vertical == Vertical.LOCAL_SERVICES
        assert result.confidence in (Confidence.MEDIUM, Confidence.HIGH)
        assert "plumber" in result.matched_keywords
        assert "residential" in result.matched_keywords
        assert result.score == 36
        assert result.display_name == "Local Services"

    def test_zero_score_is_default(self):
        """Test unclassifiable text resolves to Default."""
        result = classify(["hello there"])

        assert result.vertical == Vertical.DEFAULT
        assert result.confidence == Confidence.LOW
        assert result.score == 0
        assert result.matched_keywords == []

    def test_score_below_minimum_is_default(self):
        """Test a single weak keyword does not classify."""
        result = classify(["local", "hi", "hi", "hi"])

        assert result.vertical == Vertical.DEFAULT
        assert result.score == 0

    def test_empty_messages(self):
        """Test an empty conversation is Default."""
        assert classify([]).vertical == Vertical.DEFAULT

    def test_tie_goes_to_earlier_vertical(self):
        """Test equal scores resolve by priority order."""
        result = classify(["legal healthcare"])

        assert result.vertical == Vertical.LEGAL
        assert result.score == 20

    def test_display_keywords_capped_by_weight(self):
        """Test at most five keywords are shown, highest weight first."""
        result = classify(["handyman residential plumber electrician hvac roofing roofer"])

        assert result.matched_keywords == ["plumber", "electrician", "hvac", "roofing", "roofer"]
        assert result.confidence == Confidence.HIGH

    def test_display_cap_from_settings(self):
        """Test the display cap is configurable."""
        result = classify(
            ["handyman residential plumber electrician"],
            settings=PipelineSettings(max_display_keywords=2),
        )

        assert result.matched_keywords == ["plumber", "electrician"]

    def test_agency_signal_recorded(self):
        """Test agency phrasing is flagged on the result."""
        result = classify(["we help healthcare founders grow"])

        assert result.agency_signal is True
        assert result.vertical == Vertical.HEALTHCARE
        assert result.score == 12

    def test_deterministic(self):
        """Test identical input gives equal output."""
        messages = ["we build a saas platform", "our software helps startups"]

        assert classify(messages) == classify(messages)

    def test_logs_classification(self):
        """Test a fresh classification is logged."""
        with capture_logs() as logs:
            classify(["plumber plumbing hvac"])

        events = [log for log in logs if log["event"] == "Vertical classified"]
        assert events
        assert events[0]["vertical"] == "local-services"


class TestStability:
    """Tests for manual pins and damping."""

    def test_manual_pin_never_overridden(self):
        """Test a confirmed vertical survives contrary input."""
        pinned = confirm_vertical(Vertical.LEGAL)

        for messages in (["saas platform software"], ["plumber plumber plumber"], []):
            result = classify(messages, pinned)
            assert result is pinned
            assert result.vertical == Vertical.LEGAL
            assert result.confidence == Confidence.HIGH

    def test_damping_returns_previous(self):
        """Test small same-vertical drift returns the previous object."""
        messages = ["we need a plumber for our growing business", "mostly residential customers"]
        previous = classify(messages)

        result = classify(messages + ["thanks"], previous)

        assert result is previous

    def test_large_drift_reclassifies(self):
        """Test a large score change yields a new classification."""
        previous = classify(["we need a plumber"])

        result = classify(["we need a plumber", "hvac and roofing too", "residential homeowners"], previous)

        assert result is not previous
        assert result.vertical == Vertical.LOCAL_SERVICES
        assert result.score > previous.score

    def test_vertical_change_reclassifies(self):
        """Test a different vertical is never damped."""
        previous = VerticalClassification(vertical=Vertical.SAAS, confidence=Confidence.LOW, score=20)

        result = classify(["legal healthcare"], previous)

        assert result.vertical == Vertical.LEGAL

    def test_damping_threshold_configurable(self):
        """Test the damping threshold comes from settings."""
        previous = classify(["we need a plumber"])
        settings = PipelineSettings(damping_threshold=100)

        result = classify(["we need a plumber", "hvac too"], previous, settings=settings)

        assert result is previous


class TestContract:
    """Tests for argument contracts."""

    def test_string_messages_rejected(self):
        """Test a bare string is not a message list."""
        with pytest.raises(ContractError):
            classify("we need a plumber")

    def test_non_string_message_rejected(self):
        """Test every message must be a string."""
        with pytest.raises(ContractError) as exc_info:
            classify(["ok", 42])

        assert exc_info.value.argument == "messages"

    def test_previous_type_checked(self):
        """Test previous must be a classification."""
        with pytest.raises(ContractError):
            classify(["ok"], {"vertical": "saas"})

    def test_contract_error_is_type_error(self):
        """Test contract errors are also TypeErrors."""
        with pytest.raises(TypeError):
            classify(None)


class TestHelpers:
    """Tests for pin and label helpers."""

    def test_confirm_vertical(self):
        """Test manual pin shape."""
        pinned = confirm_vertical("saas")

        assert pinned.vertical == Vertical.SAAS
        assert pinned.manually_confirmed is True
        assert pinned.confidence == Confidence.HIGH
        assert pinned.matched_keywords == []

    def test_option_to_vertical(self):
        """Test correction UI labels map to verticals."""
        assert option_to_vertical("Coaching / Training") == Vertical.CONSULTING
        assert option_to_vertical("  healthcare ") == Vertical.HEALTHCARE
        assert option_to_vertical("Space Tourism") == Vertical.DEFAULT

    def test_every_industry_option_maps(self):
        """Test each correction UI label resolves, with only Other as Default."""
        resolved = {option: option_to_vertical(option) for option in INDUSTRY_OPTIONS}

        assert [o for o, v in resolved.items() if v == Vertical.DEFAULT] == ["Other"]
        assert resolved["Financial Services"] == Vertical.FINANCE
        assert resolved["Real Estate"] == Vertical.CONSULTING

    def test_display_name(self):
        """Test display names with fallback."""
        assert vertical_display_name("ecommerce") == "E-commerce"
        assert vertical_display_name("unknown") == "General"
