"""Pytest configuration and fixtures."""

import os
import pytest

# Clear settings overrides before imports
os.environ.pop("PAGEWRIGHT_AGENCY_BONUS", None)
os.environ.pop("PAGEWRIGHT_AGENCY_PENALTY", None)
os.environ.pop("PAGEWRIGHT_DAMPING_THRESHOLD", None)
os.environ.pop("PAGEWRIGHT_MAX_DISPLAY_KEYWORDS", None)
os.environ.pop("PAGEWRIGHT_MAX_STATISTICS", None)
os.environ.pop("PAGEWRIGHT_MIN_STATISTICS", None)
os.environ.pop("PAGEWRIGHT_MAX_FAQS", None)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    from pagewright.config import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_brief_data():
    """Raw brief as produced by the generation service."""
    return {
        "headlines": {
            "optionA": "Ship Features Twice as Fast",
            "optionB": "Tired of Slow Release Cycles?",
            "optionC": "Release Every Day With Confidence",
        },
        "subheadline": "Continuous delivery for product teams",
        "messagingPillars": [
            {
                "title": "Automated Pipelines",
                "description": "Every commit is built and tested automatically. No manual steps.",
                "icon": "Zap",
            },
            {
                "title": "Team Visibility",
                "description": "Dashboards show every deploy across teams served.",
                "icon": "Eye",
            },
        ],
        "proofPoints": {
            "clientCount": "500+ teams served",
            "yearsInBusiness": "8 years",
            "achievements": "Processed 2M deployments",
            "otherStats": ["98% uptime", "3x faster releases than manual deploys"],
        },
        "problemStatement": "Release days are stressful and slow.",
        "solutionStatement": "We automate the path to production. Your team ships daily.",
        "tone": "confident",
        "objections": [
            {"question": "How much does it cost?", "answer": "Plans start at $49 per month."},
            {"question": "Is my code secure?", "answer": "Builds run in isolated sandboxes."},
            {"question": "How long does setup take?", "answer": "Most teams are live in a day."},
        ],
        "processSteps": [
            {"step": 1, "title": "Connect", "description": "Link your repository."},
            {"step": 2, "title": "Configure", "description": "Pick a template."},
            {"step": 3, "title": "Ship", "description": "Merge and deploy."},
        ],
        "testimonials": [
            {
                "quote": "Our release time dropped by 60% in the first month.",
                "author": "Dana Lee",
                "title": "VP Engineering, Acme",
            },
            {"quote": "Nice tool.", "author": "", "title": ""},
        ],
        "ctaText": "Start Free Trial",
        "pageStructure": [
            "hero",
            "stats-bar",
            "problem-solution",
            "features",
            "how-it-works",
            "social-proof",
            "faq",
            "final-cta",
        ],
    }


@pytest.fixture
def sample_brief(sample_brief_data):
    """Create a sample brief."""
    from pagewright.models.brief import Brief

    return Brief.from_dict(sample_brief_data)


@pytest.fixture
def sample_context():
    """Create a sample assembly context."""
    from pagewright.models.section import AssemblyContext

    return AssemblyContext(
        business_name="Shipfast",
        hero_image_ref="images/hero.png",
        logo_ref="images/logo.svg",
        primary_color="#3B82F6",
        page_goal="demo",
    )


@pytest.fixture
def saas_classification():
    """Create a SaaS classification."""
    from pagewright.models.classification import Confidence, Vertical, VerticalClassification

    return VerticalClassification(
        vertical=Vertical.SAAS,
        confidence=Confidence.HIGH,
        score=34,
        matched_keywords=["saas", "platform", "startup"],
        display_name="SaaS / Software",
    )


@pytest.fixture
def default_classification():
    """Create a Default classification."""
    from pagewright.models.classification import Confidence, Vertical, VerticalClassification

    return VerticalClassification(
        vertical=Vertical.DEFAULT,
        confidence=Confidence.LOW,
        score=0,
        display_name="General",
    )
