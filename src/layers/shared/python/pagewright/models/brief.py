"""Strategy brief models.

The brief is produced upstream by the AI generation service and is
read-only to the pipeline. Every optional field has an explicit default so
missing data is handled with presence checks, never attribute errors.
"""

from enum import Enum

from pydantic import Field, field_validator, model_validator

from pagewright.models.base import PipelineModel


class Tone(str, Enum):
    """Voice the brief was written in."""

    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    AUTHORITATIVE = "authoritative"
    WARM = "warm"
    CONFIDENT = "confident"


class Headlines(PipelineModel):
    """Two or three headline variants, each written for a different intent.

    option_a leads with the direct benefit, option_b with the problem,
    option_c with the outcome.
    """

    option_a: str = Field(default="", description="Direct benefit variant")
    option_b: str = Field(default="", description="Problem-focused variant")
    option_c: str = Field(default="", description="Outcome-focused variant")

    @model_validator(mode="after")
    def require_one_variant(self) -> "Headlines":
        """At least one variant must carry text."""
        if not any(v.strip() for v in self.variants()):
            raise ValueError("brief must contain at least one non-empty headline")
        return self

    def variants(self) -> list[str]:
        """Return the variants in A, B, C order."""
        return [self.option_a, self.option_b, self.option_c]


class MessagingPillar(PipelineModel):
    """A key message with an icon name for the features grid."""

    title: str
    description: str = ""
    icon: str = ""


class ProofPoints(PipelineModel):
    """Credibility facts gathered during intake."""

    client_count: str | None = None
    years_in_business: str | None = None
    achievements: str | None = None
    other_stats: list[str] = Field(default_factory=list)


class Objection(PipelineModel):
    """A buyer objection and its answer, used for the FAQ."""

    question: str
    answer: str = ""


class ProcessStep(PipelineModel):
    """One step in the how-it-works sequence."""

    step: int = Field(..., ge=0)
    title: str
    description: str = ""


class Testimonial(PipelineModel):
    """Customer quote."""

    quote: str
    author: str = ""
    title: str = ""


class Brief(PipelineModel):
    """Semi-structured strategy brief.

    ``page_structure`` is the single source of truth for which sections
    exist and in what order.
    """

    headlines: Headlines
    subheadline: str = ""
    messaging_pillars: list[MessagingPillar] = Field(default_factory=list)
    proof_points: ProofPoints = Field(default_factory=ProofPoints)
    problem_statement: str = ""
    solution_statement: str = ""
    tone: Tone = Field(default=Tone.PROFESSIONAL)
    objections: list[Objection] = Field(default_factory=list)
    process_steps: list[ProcessStep] | None = None
    testimonials: list[Testimonial] = Field(default_factory=list)
    cta_text: str = Field(..., min_length=1, description="Call-to-action label")
    page_structure: list[str] = Field(..., description="Ordered section types")
    authority_signals: list[str] = Field(
        default_factory=list, description="Externally supplied authority annotations"
    )

    @field_validator("tone", mode="before")
    @classmethod
    def validate_tone(cls, v: object) -> object:
        """Fall back to professional for tone tags we do not know."""
        if isinstance(v, Tone):
            return v
        if isinstance(v, str) and v.strip().lower() in {t.value for t in Tone}:
            return v.strip().lower()
        return Tone.PROFESSIONAL

    @field_validator("cta_text")
    @classmethod
    def validate_cta_text(cls, v: str) -> str:
        """Reject whitespace-only call-to-action labels."""
        if not v.strip():
            raise ValueError("cta_text must not be blank")
        return v
