"""Tests for the industry style token table."""

import pytest

from pagewright.models.classification import Vertical
from pagewright.services.style_tokens import (
    DEFAULT_STYLE,
    STYLE_TOKENS,
    get_industry_style,
    get_section_header,
    get_tone,
    normalize_vertical,
)


class TestStyleTokens:
    """Tests for style lookups."""

    def test_every_vertical_has_an_entry(self):
        """Test the table covers all verticals."""
        assert set(STYLE_TOKENS) == set(Vertical)

    def test_vertical_specific_header(self):
        """Test a vertical overrides the default copy."""
        header = get_section_header(Vertical.LOCAL_SERVICES, "social-proof")

        assert header.title == "What Our Customers Say"

    def test_falls_back_to_default_entry(self):
        """Test missing section headers come from Default."""
        header = get_section_header(Vertical.SAAS, "problem-solution")

        assert header == DEFAULT_STYLE.section_headers["problem-solution"]

    def test_unknown_section_type(self):
        """Test sections without header copy return None."""
        assert get_section_header(Vertical.SAAS, "hero") is None
        assert get_section_header(Vertical.SAAS, "bogus-type") is None

    def test_final_cta_label(self):
        """Test secondary CTA labels are carried."""
        assert get_section_header(Vertical.SAAS, "final-cta").cta_text == "Book a Demo"
        assert get_section_header(Vertical.DEFAULT, "final-cta").cta_text is None

    def test_tone(self):
        """Test tone tokens per vertical."""
        assert get_tone(Vertical.HEALTHCARE).voice == "caring"
        assert get_tone(None) == DEFAULT_STYLE.tone

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Vertical.LEGAL, Vertical.LEGAL),
            ("saas", Vertical.SAAS),
            (" Local-Services ", Vertical.LOCAL_SERVICES),
            ("Plumbing", Vertical.LOCAL_SERVICES),
            ("fintech", Vertical.FINANCE),
            ("underwater basket weaving", Vertical.DEFAULT),
            ("", Vertical.DEFAULT),
            (None, Vertical.DEFAULT),
        ],
    )
    def test_normalize_vertical(self, value, expected):
        """Test loose labels resolve to verticals."""
        assert normalize_vertical(value) == expected

    def test_unknown_label_uses_default_style(self):
        """Test unknown labels get the Default entry."""
        assert get_industry_style("unknown") == DEFAULT_STYLE

    def test_headers_make_no_numeric_claims(self):
        """Test header copy never contains figures that could be mistaken for facts."""
        for style in STYLE_TOKENS.values():
            for header in style.section_headers.values():
                text = f"{header.title} {header.subtitle} {header.eyebrow or ''} {header.cta_text or ''}"
                assert not any(char.isdigit() for char in text.replace("1-2-3", ""))
