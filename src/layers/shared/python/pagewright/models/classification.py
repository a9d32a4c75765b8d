"""Vertical classification models."""

from enum import Enum

from pydantic import Field, model_validator

from pagewright.models.base import PipelineModel


class Vertical(str, Enum):
    """Industry verticals, in classifier priority order (most specific first)."""

    LOCAL_SERVICES = "local-services"
    CREATIVE = "creative"
    CONSULTING = "consulting"
    LEGAL = "legal"
    FINANCE = "finance"
    HEALTHCARE = "healthcare"
    MANUFACTURING = "manufacturing"
    ECOMMERCE = "ecommerce"
    SAAS = "saas"
    DEFAULT = "default"


class Confidence(str, Enum):
    """Confidence band for a classification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


VERTICAL_DISPLAY_NAMES: dict[Vertical, str] = {
    Vertical.LOCAL_SERVICES: "Local Services",
    Vertical.CREATIVE: "Creative Agency",
    Vertical.CONSULTING: "Consulting / Services",
    Vertical.LEGAL: "Legal",
    Vertical.FINANCE: "Financial Services",
    Vertical.HEALTHCARE: "Healthcare",
    Vertical.MANUFACTURING: "Manufacturing",
    Vertical.ECOMMERCE: "E-commerce",
    Vertical.SAAS: "SaaS / Software",
    Vertical.DEFAULT: "General",
}


class VerticalClassification(PipelineModel):
    """Best-guess industry vertical for a conversation.

    Re-fed as ``previous`` on the next classification call. Once
    ``manually_confirmed`` is set the classifier returns it untouched.
    """

    vertical: Vertical = Field(default=Vertical.DEFAULT, description="Detected vertical")
    confidence: Confidence = Field(default=Confidence.LOW, description="Confidence band")
    score: int = Field(default=0, ge=0, description="Winning weighted keyword score")
    matched_keywords: list[str] = Field(
        default_factory=list, description="Matched keywords, highest weight first"
    )
    manually_confirmed: bool = Field(default=False, description="Pinned by the user")
    display_name: str | None = Field(default=None, description="Label for correction UIs")
    agency_signal: bool = Field(
        default=False, description="Whether agency-style phrasing adjusted the scores"
    )

    @model_validator(mode="after")
    def check_manual_pin(self) -> "VerticalClassification":
        """A manual pin is always high confidence."""
        if self.manually_confirmed and self.confidence != Confidence.HIGH:
            raise ValueError("manually confirmed classifications must have high confidence")
        return self
