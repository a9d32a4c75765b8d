"""Section assembler.

Walks the brief's page structure in order and emits one section per entry
whose mandatory content exists. Section content is built only from the
brief, the extractor output, the style token table and the session
context; a section with nothing real to show is left out, never padded.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

import pydantic
import structlog

from pagewright.config import PipelineSettings, get_settings
from pagewright.models.brief import Brief
from pagewright.models.classification import VerticalClassification
from pagewright.models.content import ExtractedContent
from pagewright.models.section import (
    AssemblyContext,
    AssemblyReport,
    PageVariant,
    Section,
    SectionType,
)
from pagewright.services.content_ranker import extract_content
from pagewright.services.page_quality import validate_page_quality
from pagewright.services.style_tokens import get_section_header
from pagewright.utils.exceptions import ContractError
from pagewright.utils.text import first_sentence, is_placeholder

logger = structlog.get_logger()


@dataclass(frozen=True)
class SectionInputs:
    """Everything a section builder may read."""

    brief: Brief
    classification: VerticalClassification
    context: AssemblyContext
    content: ExtractedContent
    settings: PipelineSettings


SectionBuilder = Callable[[SectionInputs], dict[str, Any] | None]


@dataclass(frozen=True)
class SectionHandler:
    """Builds one section type.

    ``build`` returns the type-specific content, or None when the section's
    mandatory content is missing. ``requirement`` describes that content
    and is recorded as the omission reason.
    """

    section_type: SectionType
    requirement: str
    build: SectionBuilder


def _compact(values: Mapping[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or empty."""
    return {key: value for key, value in values.items() if value not in (None, "", [], {})}


def _real(text: str | None) -> str | None:
    """Return stripped text, or None for empty or template content."""
    if is_placeholder(text):
        return None
    return text.strip()


def _trust_badges(inputs: SectionInputs) -> list[str]:
    proof = inputs.brief.proof_points
    return [
        badge
        for badge in (_real(proof.years_in_business), _real(proof.client_count))
        if badge
    ]


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _build_hero(inputs: SectionInputs) -> dict[str, Any] | None:
    headline = inputs.content.headline
    if not headline.primary:
        return None

    return {
        "headline": headline.primary,
        "secondaryHeadline": headline.secondary,
        "subheadline": _real(inputs.brief.subheadline),
        "ctaText": inputs.brief.cta_text.strip(),
        "businessName": inputs.context.business_name,
        "backgroundImage": inputs.context.hero_image_ref,
        "logoUrl": inputs.context.logo_ref,
        "primaryColor": inputs.context.primary_color,
        "trustBadges": _trust_badges(inputs),
        "tone": inputs.brief.tone.value,
    }


def _build_beta_hero(inputs: SectionInputs) -> dict[str, Any] | None:
    hero = _build_hero(inputs)
    if hero is None:
        return None
    hero.pop("trustBadges")
    return hero


def _build_stats_bar(inputs: SectionInputs) -> dict[str, Any] | None:
    statistics = inputs.content.statistics
    if len(statistics) < inputs.settings.min_statistics:
        return None

    return {
        "statistics": [
            _compact({"value": s.value, "label": s.label, "type": s.type.value})
            for s in statistics
        ],
    }


def _build_problem_solution(inputs: SectionInputs) -> dict[str, Any] | None:
    problem = _real(inputs.brief.problem_statement)
    solution = _real(inputs.brief.solution_statement)
    if not (problem and solution):
        return None
    return {"problem": problem, "solution": solution}


def _pillar_items(inputs: SectionInputs) -> list[dict[str, Any]]:
    return [
        _compact({
            "title": pillar.title,
            "description": pillar.description,
            "icon": pillar.icon,
            "hook": pillar.hook,
            "proofPoint": pillar.proof_point,
        })
        for pillar in inputs.content.pillars
    ]


def _build_features(inputs: SectionInputs) -> dict[str, Any] | None:
    items = _pillar_items(inputs)
    if not items:
        return None
    return {"features": items}


def _build_beta_perks(inputs: SectionInputs) -> dict[str, Any] | None:
    items = _pillar_items(inputs)
    if not items:
        return None
    return {"perks": items}


def _build_how_it_works(inputs: SectionInputs) -> dict[str, Any] | None:
    steps = [
        _compact({
            "number": step.step,
            "title": step.title.strip(),
            "description": _real(step.description),
        })
        for step in inputs.brief.process_steps or []
        if not is_placeholder(step.title)
    ]
    if not steps:
        return None
    return {"steps": steps}


def _build_social_proof(inputs: SectionInputs) -> dict[str, Any] | None:
    testimonials = [
        _compact({"quote": t.quote, "author": t.author, "title": t.title})
        for t in inputs.content.testimonials
    ]
    achievements = _real(inputs.brief.proof_points.achievements)
    if not testimonials and not achievements:
        return None
    return {"testimonials": testimonials, "achievements": achievements}


def _build_faq(inputs: SectionInputs) -> dict[str, Any] | None:
    if not inputs.content.faqs:
        return None
    return {
        "items": [
            {"question": faq.question, "answer": faq.answer, "category": faq.category.value}
            for faq in inputs.content.faqs
        ],
    }


def _build_final_cta(inputs: SectionInputs, section_type: SectionType) -> dict[str, Any]:
    header = get_section_header(inputs.classification.vertical, section_type.value)
    proof = inputs.brief.proof_points
    indicators = _trust_badges(inputs)
    achievements = _real(proof.achievements)
    if achievements:
        indicators.append(achievements)

    return {
        "ctaText": inputs.brief.cta_text.strip(),
        "secondaryCtaText": header.cta_text if header else None,
        "supportingText": first_sentence(_real(inputs.brief.solution_statement)),
        "trustIndicators": indicators,
        "businessName": inputs.context.business_name,
        "primaryColor": inputs.context.primary_color,
    }


SECTION_HANDLERS: dict[str, SectionHandler] = {
    handler.section_type.value: handler
    for handler in (
        SectionHandler(SectionType.HERO, "a headline", _build_hero),
        SectionHandler(
            SectionType.STATS_BAR, "at least the minimum number of statistics", _build_stats_bar
        ),
        SectionHandler(
            SectionType.PROBLEM_SOLUTION,
            "both a problem and a solution statement",
            _build_problem_solution,
        ),
        SectionHandler(SectionType.FEATURES, "at least one messaging pillar", _build_features),
        SectionHandler(SectionType.HOW_IT_WORKS, "at least one process step", _build_how_it_works),
        SectionHandler(
            SectionType.SOCIAL_PROOF,
            "a real testimonial or achievements",
            _build_social_proof,
        ),
        SectionHandler(SectionType.FAQ, "at least one complete FAQ entry", _build_faq),
        SectionHandler(
            SectionType.FINAL_CTA,
            "call-to-action text",
            lambda inputs: _build_final_cta(inputs, SectionType.FINAL_CTA),
        ),
        SectionHandler(SectionType.BETA_HERO_TEASER, "a headline", _build_beta_hero),
        SectionHandler(SectionType.BETA_PERKS, "at least one messaging pillar", _build_beta_perks),
        SectionHandler(
            SectionType.WAITLIST_PROOF,
            "a real testimonial or achievements",
            _build_social_proof,
        ),
        SectionHandler(
            SectionType.BETA_FINAL_CTA,
            "call-to-action text",
            lambda inputs: _build_final_cta(inputs, SectionType.BETA_FINAL_CTA),
        ),
    )
}

# Page-structure entries the pre-launch variant swaps for another handler
VARIANT_SUBSTITUTIONS: dict[PageVariant, dict[str, SectionType]] = {
    PageVariant.STANDARD: {},
    PageVariant.BETA_PRELAUNCH: {
        SectionType.HERO.value: SectionType.BETA_HERO_TEASER,
        SectionType.FEATURES.value: SectionType.BETA_PERKS,
        SectionType.SOCIAL_PROOF.value: SectionType.WAITLIST_PROOF,
        SectionType.FINAL_CTA.value: SectionType.BETA_FINAL_CTA,
    },
}


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _header_fields(classification: VerticalClassification, section_type: SectionType) -> dict[str, Any]:
    header = get_section_header(classification.vertical, section_type.value)
    if header is None:
        return {}
    return {"title": header.title, "subtitle": header.subtitle, "eyebrow": header.eyebrow}


def resolve_variant(page_variant: str | None, warnings: list[str]) -> PageVariant:
    """Resolve the context's variant flag, falling back to standard."""
    if not page_variant or not page_variant.strip():
        return PageVariant.STANDARD
    try:
        return PageVariant(page_variant.strip().lower())
    except ValueError:
        message = f"Unknown page variant '{page_variant}', using standard"
        logger.warning("Unknown page variant", page_variant=page_variant)
        warnings.append(message)
        return PageVariant.STANDARD


def _coerce_brief(brief: Any, warnings: list[str]) -> Brief | None:
    if isinstance(brief, Brief):
        return brief
    if not isinstance(brief, Mapping):
        raise ContractError("brief", "a Brief or a mapping", brief)
    try:
        return Brief.from_dict(brief)
    except pydantic.ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) or "brief" for err in e.errors()})
        logger.warning("Malformed brief", invalid_fields=fields)
        warnings.append(f"Malformed brief: invalid or missing {', '.join(fields)}")
        return None


def _coerce_context(context: Any) -> AssemblyContext:
    if isinstance(context, AssemblyContext):
        return context
    if not isinstance(context, Mapping):
        raise ContractError("context", "an AssemblyContext or a mapping", context)
    try:
        return AssemblyContext.from_dict(context)
    except pydantic.ValidationError as e:
        raise ContractError("context", "an AssemblyContext with a business name", context) from e


def compile_sections(
    brief: Brief | Mapping[str, Any],
    classification: VerticalClassification,
    context: AssemblyContext | Mapping[str, Any],
    settings: PipelineSettings | None = None,
) -> AssemblyReport:
    """Assemble sections and report what was left out.

    Args:
        brief: Strategy brief, or its raw mapping form.
        classification: Vertical classification for styling.
        context: Session facts (business name, images, color, goal, variant).
        settings: Optional settings override.

    Returns:
        AssemblyReport with dense-ordered sections, omission reasons, warnings
        and copy quality issues.

    Raises:
        ContractError: If an argument has the wrong shape.
    """
    if not isinstance(classification, VerticalClassification):
        raise ContractError("classification", "a VerticalClassification", classification)
    context = _coerce_context(context)
    settings = settings if settings is not None else get_settings()

    warnings: list[str] = []
    valid_brief = _coerce_brief(brief, warnings)
    if valid_brief is None:
        return AssemblyReport(warnings=warnings)

    if not valid_brief.page_structure:
        logger.warning("Brief has an empty page structure")
        warnings.append("Brief has an empty page structure")
        return AssemblyReport(warnings=warnings)

    variant = resolve_variant(context.page_variant, warnings)
    substitutions = VARIANT_SUBSTITUTIONS[variant]
    inputs = SectionInputs(
        brief=valid_brief,
        classification=classification,
        context=context,
        content=extract_content(valid_brief, classification, context.page_goal, settings),
        settings=settings,
    )

    sections: list[Section] = []
    omitted: dict[str, str] = {}
    handled: set[SectionType] = set()

    for entry in valid_brief.page_structure:
        name = entry.strip().lower()
        section_type = substitutions.get(name)
        handler = SECTION_HANDLERS.get(section_type.value if section_type else name)

        if handler is None:
            logger.warning("Unknown section type skipped", section_type=entry)
            warnings.append(f"Unknown section type '{entry}' skipped")
            continue

        if handler.section_type in handled:
            logger.warning("Duplicate section type skipped", section_type=entry)
            warnings.append(f"Duplicate section type '{entry}' skipped")
            continue
        handled.add(handler.section_type)

        built = handler.build(inputs)
        if built is None:
            logger.debug(
                "Section omitted", section_type=handler.section_type.value, requires=handler.requirement
            )
            omitted[handler.section_type.value] = f"requires {handler.requirement}"
            continue

        content = _compact({
            "vertical": classification.vertical.value,
            **_header_fields(classification, handler.section_type),
            **built,
        })
        sections.append(
            Section(type=handler.section_type.value, order=len(sections), content=content)
        )

    quality_issues = validate_page_quality(sections)

    logger.info(
        "Sections assembled",
        vertical=classification.vertical.value,
        variant=variant.value,
        sections_count=len(sections),
        omitted_count=len(omitted),
        warnings_count=len(warnings),
        quality_issues_count=len(quality_issues),
    )

    return AssemblyReport(
        sections=sections, omitted=omitted, warnings=warnings, quality_issues=quality_issues
    )


def assemble(
    brief: Brief | Mapping[str, Any],
    classification: VerticalClassification,
    context: AssemblyContext | Mapping[str, Any],
    settings: PipelineSettings | None = None,
) -> list[Section]:
    """Assemble the ordered section list for a brief.

    Data problems shrink the list (down to empty for a malformed brief);
    they never raise.
    """
    return compile_sections(brief, classification, context, settings).sections
