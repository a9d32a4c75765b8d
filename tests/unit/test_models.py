"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from pagewright.models.brief import Brief, Headlines, ProofPoints, Tone
from pagewright.models.classification import Confidence, Vertical, VerticalClassification
from pagewright.models.section import AssemblyContext, Section


class TestPipelineModel:
    """Tests for the camelCase base model."""

    def test_accepts_camel_and_snake_case(self):
        """Test both wire and attribute names populate fields."""
        camel = ProofPoints.from_dict({"clientCount": "500+", "otherStats": ["98% uptime"]})
        snake = ProofPoints(client_count="500+", other_stats=["98% uptime"])

        assert camel == snake

    def test_to_dict_uses_camel_case(self):
        """Test serialization to the wire format."""
        data = ProofPoints(client_count="500+").to_dict()

        assert data == {"clientCount": "500+", "otherStats": []}

    def test_models_are_frozen(self):
        """Test values cannot be mutated after creation."""
        headlines = Headlines(option_a="Grow faster")

        with pytest.raises(ValidationError):
            headlines.option_a = "Changed"


class TestBrief:
    """Tests for Brief model."""

    def test_brief_from_wire_format(self, sample_brief_data):
        """Test parsing a generated brief."""
        brief = Brief.from_dict(sample_brief_data)

        assert brief.headlines.option_a == "Ship Features Twice as Fast"
        assert brief.tone == Tone.CONFIDENT
        assert brief.proof_points.client_count == "500+ teams served"
        assert len(brief.process_steps) == 3
        assert brief.page_structure[0] == "hero"

    def test_unknown_tone_falls_back(self, sample_brief_data):
        """Test unknown tone tags become professional."""
        sample_brief_data["tone"] = "sarcastic"

        assert Brief.from_dict(sample_brief_data).tone == Tone.PROFESSIONAL

    def test_requires_a_headline(self):
        """Test a brief without any headline text is invalid."""
        with pytest.raises(ValidationError):
            Headlines(option_a="  ", option_b="")

    def test_requires_cta_text(self, sample_brief_data):
        """Test blank call-to-action text is invalid."""
        sample_brief_data["ctaText"] = "   "

        with pytest.raises(ValidationError):
            Brief.from_dict(sample_brief_data)

    def test_requires_page_structure(self, sample_brief_data):
        """Test the page structure is mandatory."""
        del sample_brief_data["pageStructure"]

        with pytest.raises(ValidationError):
            Brief.from_dict(sample_brief_data)

    def test_optional_sections_default_empty(self):
        """Test a minimal brief has empty optional content."""
        brief = Brief(
            headlines=Headlines(option_a="Grow faster"),
            cta_text="Call Us",
            page_structure=["hero"],
        )

        assert brief.testimonials == []
        assert brief.objections == []
        assert brief.process_steps is None
        assert brief.proof_points.achievements is None


class TestVerticalClassification:
    """Tests for VerticalClassification model."""

    def test_defaults(self):
        """Test the default classification."""
        classification = VerticalClassification()

        assert classification.vertical == Vertical.DEFAULT
        assert classification.confidence == Confidence.LOW
        assert classification.score == 0

    def test_manual_pin_requires_high_confidence(self):
        """Test a manual pin cannot carry low confidence."""
        with pytest.raises(ValidationError):
            VerticalClassification(
                vertical=Vertical.LEGAL,
                confidence=Confidence.LOW,
                manually_confirmed=True,
            )

    def test_wire_values(self):
        """Test enum wire values."""
        data = VerticalClassification(vertical=Vertical.LOCAL_SERVICES).to_dict()

        assert data["vertical"] == "local-services"
        assert data["manuallyConfirmed"] is False


class TestAssemblyContext:
    """Tests for AssemblyContext model."""

    def test_valid_color(self):
        """Test a hex color is kept."""
        context = AssemblyContext(business_name="Acme", primary_color="#1E40AF")

        assert context.primary_color == "#1E40AF"

    def test_invalid_color_dropped(self):
        """Test an invalid color is dropped rather than replaced."""
        context = AssemblyContext(business_name="Acme", primary_color="blue")

        assert context.primary_color is None

    def test_requires_business_name(self):
        """Test business name is mandatory."""
        with pytest.raises(ValidationError):
            AssemblyContext.from_dict({"primaryColor": "#1E40AF"})


class TestSection:
    """Tests for Section model."""

    def test_negative_order_rejected(self):
        """Test order must be non-negative."""
        with pytest.raises(ValidationError):
            Section(type="hero", order=-1)

    def test_visible_by_default(self):
        """Test sections are visible by default."""
        assert Section(type="hero", order=0).visible is True
