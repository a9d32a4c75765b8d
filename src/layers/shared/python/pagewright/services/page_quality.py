"""Page quality checks.

Inspects assembled section content and reports copy that would look
unfinished on a live page. Checks only report; section content is never
rewritten here.
"""

import re
from typing import Any, Sequence

import structlog

from pagewright.models.section import Section, SectionType

logger = structlog.get_logger()

HEADLINE_MIN_LENGTH = 10
HEADLINE_MAX_LENGTH = 80
STAT_LABEL_MIN_LENGTH = 10
FEATURE_TITLE_MIN_LENGTH = 5
FEATURE_DESCRIPTION_MIN_LENGTH = 20

# Intake answers pasted through without being turned into page copy
RAW_INTAKE_PATTERNS = [
    re.compile(r"they don't", re.IGNORECASE),
    re.compile(r"they can't", re.IGNORECASE),
    re.compile(r"customers don't", re.IGNORECASE),
    re.compile(r"clients can't", re.IGNORECASE),
    re.compile(r"users lack", re.IGNORECASE),
    re.compile(r"^we have", re.IGNORECASE),
    re.compile(r"^we offer", re.IGNORECASE),
    re.compile(r"^our\s+(system|tool|platform)\s+has", re.IGNORECASE),
]

UNIT_CONTEXT_PATTERN = re.compile(r"percent|%|\$|dollar|cost|price", re.IGNORECASE)
RANGE_PATTERN = re.compile(r"\d+-\d+")
FEATURE_FOCUSED_PATTERN = re.compile(r"^(we|our|the system|this tool|this platform)\b", re.IGNORECASE)

BENEFIT_KEYWORDS = (
    "save",
    "increase",
    "reduce",
    "improve",
    "boost",
    "eliminate",
    "automate",
    "simplify",
    "accelerate",
    "maximize",
)

HERO_TYPES = {SectionType.HERO.value, SectionType.BETA_HERO_TEASER.value}
FEATURE_KEYS = {SectionType.FEATURES.value: "features", SectionType.BETA_PERKS.value: "perks"}


def _is_raw_intake(text: str) -> bool:
    return any(pattern.search(text) for pattern in RAW_INTAKE_PATTERNS)


def _has_leftovers(text: str) -> bool:
    return "undefined" in text or "[" in text


def _check_hero(section_type: str, content: dict[str, Any]) -> list[str]:
    issues: list[str] = []
    headline = content.get("headline", "")

    if len(headline) < HEADLINE_MIN_LENGTH:
        issues.append(f"{section_type}: headline is shorter than {HEADLINE_MIN_LENGTH} characters")
    if len(headline) > HEADLINE_MAX_LENGTH:
        issues.append(f"{section_type}: headline is longer than {HEADLINE_MAX_LENGTH} characters")
    if not re.search(r"[A-Z]", headline):
        issues.append(f"{section_type}: headline has no capital letters")
    if _has_leftovers(headline):
        issues.append(f"{section_type}: headline contains unresolved template text")
    if _is_raw_intake(headline):
        issues.append(f"{section_type}: headline reads like raw intake text")
    if _is_raw_intake(content.get("subheadline", "")):
        issues.append(f"{section_type}: subheadline reads like raw intake text")

    return issues


def _check_statistics(section_type: str, content: dict[str, Any]) -> list[str]:
    issues: list[str] = []
    for stat in content.get("statistics", []):
        value = stat.get("value", "")
        label = stat.get("label", "")

        if len(label) < STAT_LABEL_MIN_LENGTH:
            issues.append(
                f"{section_type}: statistic '{value}' has a label shorter than "
                f"{STAT_LABEL_MIN_LENGTH} characters"
            )
        if not re.search(r"[%$]", value) and UNIT_CONTEXT_PATTERN.search(label):
            issues.append(f"{section_type}: statistic '{value}' may be missing its unit")
        if value.isdigit() and RANGE_PATTERN.search(label):
            issues.append(f"{section_type}: statistic '{value}' may be part of a range")

    return issues


def _check_problem_solution(section_type: str, content: dict[str, Any]) -> list[str]:
    return [
        f"{section_type}: {key} reads like raw intake text"
        for key in ("problem", "solution")
        if _is_raw_intake(content.get(key, ""))
    ]


def _check_features(section_type: str, items: list[dict[str, Any]]) -> list[str]:
    issues: list[str] = []
    for item in items:
        title = item.get("title", "")
        description = item.get("description", "")

        if len(title) < FEATURE_TITLE_MIN_LENGTH:
            issues.append(f"{section_type}: feature title '{title}' is too short")
        if len(description) < FEATURE_DESCRIPTION_MIN_LENGTH:
            issues.append(
                f"{section_type}: feature '{title}' description is shorter than "
                f"{FEATURE_DESCRIPTION_MIN_LENGTH} characters"
            )
        if "undefined" in title or "undefined" in description:
            issues.append(f"{section_type}: feature '{title}' contains unresolved template text")
        if FEATURE_FOCUSED_PATTERN.search(description):
            issues.append(f"{section_type}: feature '{title}' describes the product, not the benefit")

    text = " ".join(f"{i.get('title', '')} {i.get('description', '')}" for i in items).lower()
    if items and not any(keyword in text for keyword in BENEFIT_KEYWORDS):
        issues.append(f"{section_type}: no feature uses benefit language")

    return issues


def validate_page_quality(sections: Sequence[Section]) -> list[str]:
    """Report copy problems in assembled sections.

    Checks headline length, capitalization and leftover template text, raw
    intake phrasing in hero and problem/solution copy, statistic labels and
    units, and feature title and description completeness.

    Args:
        sections: Assembled sections, in page order.

    Returns:
        One message per problem, prefixed with the section type. Empty when
        the page passes.
    """
    issues: list[str] = []

    for section in sections:
        content = section.content
        if section.type in HERO_TYPES:
            issues.extend(_check_hero(section.type, content))
        elif section.type == SectionType.STATS_BAR.value:
            issues.extend(_check_statistics(section.type, content))
        elif section.type == SectionType.PROBLEM_SOLUTION.value:
            issues.extend(_check_problem_solution(section.type, content))
        elif section.type in FEATURE_KEYS:
            issues.extend(_check_features(section.type, content.get(FEATURE_KEYS[section.type], [])))

    if issues:
        logger.info("Page quality issues found", issues_count=len(issues))

    return issues
