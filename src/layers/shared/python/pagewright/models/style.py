"""Industry style token models."""

from pydantic import Field

from pagewright.models.base import PipelineModel


class SectionHeader(PipelineModel):
    """Header copy for one section type."""

    title: str
    subtitle: str = ""
    eyebrow: str | None = None
    cta_text: str | None = Field(default=None, description="Secondary call-to-action label")


class ToneTokens(PipelineModel):
    """Voice descriptors for an industry."""

    voice: str
    words: tuple[str, ...] = ()


class IndustryStyle(PipelineModel):
    """Section headers and tone for one vertical."""

    section_headers: dict[str, SectionHeader] = Field(default_factory=dict)
    tone: ToneTokens
