"""Page compiler.

Runs the full strategy-to-page pipeline for one session:

1. Classification - conversation text to an industry vertical
2. Assembly - brief plus vertical to ordered, styled sections

Extraction happens inside assembly so that every section reads the same
ranked content. The result carries no ids or timestamps, so compiling the
same inputs twice yields equal pages.
"""

from typing import Any, Mapping, Sequence

import structlog

from pagewright.config import PipelineSettings, get_settings
from pagewright.models.brief import Brief
from pagewright.models.classification import VerticalClassification
from pagewright.models.section import AssemblyContext, CompilationMetadata, CompiledPage
from pagewright.services.section_assembler import compile_sections
from pagewright.services.vertical_classifier import classify

logger = structlog.get_logger()


class PageCompiler:
    """Classify a conversation and assemble the page for its brief."""

    def __init__(self, settings: PipelineSettings | None = None) -> None:
        """Initialize the compiler.

        Args:
            settings: Optional settings; the process-wide settings otherwise.
        """
        self.settings = settings if settings is not None else get_settings()

    def compile(
        self,
        messages: Sequence[str],
        brief: Brief | Mapping[str, Any],
        context: AssemblyContext | Mapping[str, Any],
        previous: VerticalClassification | None = None,
    ) -> CompiledPage:
        """Main entry point for page compilation.

        Args:
            messages: Ordered conversation utterances.
            brief: Strategy brief, or its raw mapping form.
            context: Session facts for the page.
            previous: Classification from the last call, re-fed for stability.

        Returns:
            CompiledPage with the classification, sections and metadata.

        Raises:
            ContractError: If an argument has the wrong shape.
        """
        logger.info("Starting page compilation", has_previous=previous is not None)

        stages_executed: list[str] = []

        # Stage 1: Classification
        logger.debug("Stage 1: Classifying vertical")
        classification = classify(messages, previous, settings=self.settings)
        stages_executed.append("classification")

        # Stage 2: Extraction and assembly
        logger.debug("Stage 2: Assembling sections")
        report = compile_sections(brief, classification, context, settings=self.settings)
        stages_executed.append("assembly")

        metadata = CompilationMetadata(
            sections_included=[section.type for section in report.sections],
            sections_omitted=report.omitted,
            warnings=report.warnings,
        quality_issues=report.quality_issues,
            stages=stages_executed,
        )

        logger.info(
            "Page compilation complete",
            vertical=classification.vertical.value,
            sections_count=len(report.sections),
            omitted_count=len(report.omitted),
        )

        return CompiledPage(
            classification=classification,
            sections=report.sections,
            metadata=metadata,
        )
