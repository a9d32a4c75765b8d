"""Assembled page section models."""

import re
from enum import Enum
from typing import Any

import structlog
from pydantic import Field, field_validator

from pagewright.models.base import PipelineModel
from pagewright.models.classification import VerticalClassification

logger = structlog.get_logger()

# Hex color validation pattern
HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class SectionType(str, Enum):
    """Section types the rendering layer knows how to draw."""

    HERO = "hero"
    STATS_BAR = "stats-bar"
    PROBLEM_SOLUTION = "problem-solution"
    FEATURES = "features"
    HOW_IT_WORKS = "how-it-works"
    SOCIAL_PROOF = "social-proof"
    FAQ = "faq"
    FINAL_CTA = "final-cta"

    # Pre-launch waitlist variant
    BETA_HERO_TEASER = "beta-hero-teaser"
    BETA_PERKS = "beta-perks"
    WAITLIST_PROOF = "waitlist-proof"
    BETA_FINAL_CTA = "beta-final-cta"


class PageVariant(str, Enum):
    """Alternate page layouts that swap section handlers."""

    STANDARD = "standard"
    BETA_PRELAUNCH = "beta-prelaunch"


class AssemblyContext(PipelineModel):
    """Session facts the assembler needs besides the brief."""

    business_name: str = Field(..., description="Business name shown on the page")
    hero_image_ref: str | None = Field(default=None, description="Hero background image reference")
    logo_ref: str | None = Field(default=None, description="Logo image reference")
    primary_color: str | None = Field(default=None, description="Brand color as #RRGGBB")
    page_goal: str | None = Field(default=None, description="Goal tag, e.g. 'generate-leads'")
    page_variant: str | None = Field(default=None, description="Variant flag, e.g. 'beta-prelaunch'")

    @field_validator("primary_color")
    @classmethod
    def validate_primary_color(cls, v: str | None) -> str | None:
        """Drop colors that are not #RRGGBB rather than inventing one."""
        if v is None or HEX_COLOR_PATTERN.match(v):
            return v
        logger.warning("Ignoring invalid primary color", primary_color=v)
        return None


class Section(PipelineModel):
    """One ordered, typed content block handed to the rendering layer."""

    type: str = Field(..., description="Section type the renderer maps to a component")
    order: int = Field(..., ge=0, description="Dense position among emitted sections")
    visible: bool = Field(default=True)
    content: dict[str, Any] = Field(default_factory=dict)


class AssemblyReport(PipelineModel):
    """Sections plus a record of what was left out and why."""

    sections: list[Section] = Field(default_factory=list)
    omitted: dict[str, str] = Field(
        default_factory=dict, description="Section type -> reason it was not emitted"
    )
    warnings: list[str] = Field(default_factory=list)
    quality_issues: list[str] = Field(
        default_factory=list, description="Copy problems found in the assembled sections"
    )


class CompilationMetadata(PipelineModel):
    """What a full compilation run did."""

    sections_included: list[str] = Field(default_factory=list)
    sections_omitted: dict[str, str] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    quality_issues: list[str] = Field(default_factory=list)
    stages: list[str] = Field(default_factory=list)


class CompiledPage(PipelineModel):
    """Result of running the whole pipeline for one brief."""

    classification: VerticalClassification
    sections: list[Section] = Field(default_factory=list)
    metadata: CompilationMetadata = Field(default_factory=CompilationMetadata)
