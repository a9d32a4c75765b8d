"""Extractor output models: selected, ranked and derived brief content."""

from enum import Enum

from pydantic import Field

from pagewright.models.base import PipelineModel
from pagewright.models.classification import Vertical


class SignalType(str, Enum):
    """Kind of credibility claim."""

    STATISTIC = "statistic"
    CREDENTIAL = "credential"
    ACHIEVEMENT = "achievement"
    COMPARISON = "comparison"


class AuthoritySignal(PipelineModel):
    """A single credibility claim derived from proof points.

    Recomputed on every compilation; never persisted.
    """

    type: SignalType
    value: str = Field(..., description="Display value, e.g. '47+' or '98%'")
    label: str = Field(default="", description="What the value counts")
    numbers: list[str] = Field(default_factory=list, description="Every number in the source text")


class HeadlineSelection(PipelineModel):
    """The headline variant chosen for a page goal."""

    primary: str
    secondary: str | None = None
    variant: str = Field(..., description="Which variant was chosen: option_a/b/c")
    reasoning: str = ""


class RankedTestimonial(PipelineModel):
    """A testimonial with its quality score."""

    quote: str
    author: str = ""
    title: str = ""
    score: int = 0


class FAQCategory(str, Enum):
    """Buyer concern a question addresses."""

    PRICING = "pricing"
    PROCESS = "process"
    TRUST = "trust"
    DIFFERENTIATION = "differentiation"
    OTHER = "other"


class OptimizedFAQ(PipelineModel):
    """A deduplicated, categorised FAQ entry."""

    question: str
    answer: str
    category: FAQCategory


class EnhancedPillar(PipelineModel):
    """A messaging pillar with a scannable hook and optional supporting proof."""

    title: str
    description: str = ""
    icon: str = ""
    hook: str | None = None
    proof_point: str | None = None


class ExtractedContent(PipelineModel):
    """Everything the extractor selected from one brief."""

    vertical: Vertical
    headline: HeadlineSelection
    authority_signals: list[AuthoritySignal] = Field(default_factory=list)
    statistics: list[AuthoritySignal] = Field(default_factory=list)
    testimonials: list[RankedTestimonial] = Field(default_factory=list)
    faqs: list[OptimizedFAQ] = Field(default_factory=list)
    pillars: list[EnhancedPillar] = Field(default_factory=list)
