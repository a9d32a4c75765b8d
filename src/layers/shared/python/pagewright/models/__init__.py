"""Pydantic models for the page pipeline."""

from pagewright.models.base import PipelineModel
from pagewright.models.brief import (
    Brief,
    Headlines,
    MessagingPillar,
    Objection,
    ProcessStep,
    ProofPoints,
    Testimonial,
    Tone,
)
from pagewright.models.classification import (
    VERTICAL_DISPLAY_NAMES,
    Confidence,
    Vertical,
    VerticalClassification,
)
from pagewright.models.content import (
    AuthoritySignal,
    EnhancedPillar,
    ExtractedContent,
    FAQCategory,
    HeadlineSelection,
    OptimizedFAQ,
    RankedTestimonial,
    SignalType,
)
from pagewright.models.section import (
    AssemblyContext,
    AssemblyReport,
    CompilationMetadata,
    CompiledPage,
    PageVariant,
    Section,
    SectionType,
)
from pagewright.models.style import IndustryStyle, SectionHeader, ToneTokens

__all__ = [
    "VERTICAL_DISPLAY_NAMES",
    "AssemblyContext",
    "AssemblyReport",
    "AuthoritySignal",
    "Brief",
    "CompilationMetadata",
    "CompiledPage",
    "Confidence",
    "EnhancedPillar",
    "ExtractedContent",
    "FAQCategory",
    "HeadlineSelection",
    "Headlines",
    "IndustryStyle",
    "MessagingPillar",
    "Objection",
    "OptimizedFAQ",
    "PageVariant",
    "PipelineModel",
    "ProcessStep",
    "ProofPoints",
    "RankedTestimonial",
    "Section",
    "SectionHeader",
    "SectionType",
    "SignalType",
    "Testimonial",
    "Tone",
    "ToneTokens",
    "Vertical",
    "VerticalClassification",
]
