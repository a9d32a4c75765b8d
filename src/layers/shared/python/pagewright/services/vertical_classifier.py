"""Vertical classifier.

Scores free-text conversation history against weighted keyword tables and
picks the industry vertical the speaker most likely belongs to:

1. Recency weighting - the last three messages are counted twice
2. Keyword scoring - weight x occurrence count per matched keyword
3. Agency disambiguation - "we help healthcare founders" is an agency
   serving healthcare, not a healthcare business
4. Selection - strictly highest score wins, ties go to the earlier vertical
5. Stability - manual pins are never overridden and small same-vertical
   score drift keeps the previous result
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence

import structlog

from pagewright.config import PipelineSettings, get_settings
from pagewright.models.classification import (
    VERTICAL_DISPLAY_NAMES,
    Confidence,
    Vertical,
    VerticalClassification,
)
from pagewright.utils.exceptions import ContractError

logger = structlog.get_logger()

RECENT_MESSAGE_COUNT = 3
MIN_CLASSIFIABLE_SCORE = 5
MANUAL_PIN_SCORE = 100

# Verticals that receive the agency bonus when first/second-person service phrasing appears
AGENCY_VERTICALS = frozenset({Vertical.CONSULTING, Vertical.CREATIVE})

AGENCY_SIGNALS: tuple[str, ...] = (
    "we help",
    "we work with",
    "we serve",
    "our clients are",
    "our clients include",
    "founders who",
    "companies that",
    "businesses that",
    "i help",
    "i work with",
    "helping",
    "partner with",
)


@dataclass(frozen=True)
class KeywordGroup:
    """Keywords that share one weight."""

    keywords: tuple[str, ...]
    weight: int


def _group(weight: int, *keywords: str) -> KeywordGroup:
    return KeywordGroup(keywords=keywords, weight=weight)


KEYWORD_TABLES: Mapping[Vertical, tuple[KeywordGroup, ...]] = MappingProxyType({
    Vertical.LOCAL_SERVICES: (
        _group(10, "plumber", "plumbing", "electrician", "hvac", "roofing", "roofer"),
        _group(9, "home services", "home repair", "contractor", "handyman", "pest control"),
        _group(8, "residential", "homeowner", "homeowners", "landscaping", "lawn care"),
        _group(7, "cleaning service", "maid service", "auto repair", "mechanic", "salon", "barber"),
        _group(6, "service area", "same-day", "emergency repair", "moving company"),
        _group(4, "local", "neighborhood"),
    ),
    # Creative weights sit above consulting so branding agencies are not read as generic consultancies
    Vertical.CREATIVE: (
        _group(20, "creative agency", "branding agency", "brand agency", "design agency"),
        _group(20, "brand consultancy", "branding consultancy"),
        _group(18, "brand strategy", "brand translation", "brand system"),
        _group(18, "visual identity", "brand identity", "brand design"),
        _group(18, "creative studio", "design studio", "creative shop"),
        _group(18, "marketing agency", "advertising agency", "ad agency"),
        _group(16, "rebrand", "rebranding", "brand refresh"),
        _group(15, "creative director", "art director", "design director"),
        _group(15, "logo design", "brand guidelines", "style guide"),
        _group(15, "brands", "branding"),
        _group(12, "brand"),
        _group(10, "visual", "identity"),
        _group(10, "creative"),
        _group(8, "design"),
    ),
    Vertical.CONSULTING: (
        _group(10, "consulting", "consultant", "consultancy"),
        _group(10, "advisory", "advisor", "advisors"),
        _group(10, "coaching", "coach", "executive coach", "leadership coach"),
        _group(10, "leadership development", "executive development", "leadership training"),
        _group(9, "professional services", "b2b services"),
        _group(9, "hr ", " hr", "human resources", "talent", "recruitment", "staffing"),
        _group(8, "training", "facilitation", "facilitator", "workshop"),
        _group(7, "management", "operations consulting", "strategy"),
        _group(7, "workforce", "organizational", "organizational development"),
        _group(7, "executive", "leadership", "c-suite", "cfo", "ceo", "chro"),
        _group(7, "succession", "retention", "turnover", "engagement"),
        _group(3, "services", "service provider"),
    ),
    Vertical.LEGAL: (
        _group(10, "law firm", "legal", "attorney", "lawyer"),
        _group(9, "litigation", "corporate law", "ip law"),
        _group(8, "paralegal", "legal services"),
        _group(5, "contracts", "compliance"),
    ),
    Vertical.FINANCE: (
        _group(10, "financial services", "wealth management", "investment"),
        _group(9, "accounting", "cpa", "bookkeeping"),
        _group(8, "banking", "fintech"),
        _group(7, "insurance", "mortgage", "lending"),
        _group(6, "tax", "audit"),
    ),
    Vertical.HEALTHCARE: (
        _group(10, "healthcare", "health care", "medical"),
        _group(9, "clinic", "hospital", "practice"),
        _group(8, "dental", "therapy", "therapist"),
        _group(7, "wellness", "mental health"),
        _group(6, "patient", "telehealth"),
    ),
    Vertical.MANUFACTURING: (
        _group(10, "manufacturing", "manufacturer"),
        _group(9, "industrial", "factory", "production"),
        _group(7, "supply chain", "logistics"),
        _group(6, "equipment", "machinery"),
    ),
    Vertical.ECOMMERCE: (
        _group(10, "ecommerce", "e-commerce", "online store"),
        _group(9, "shopify", "amazon seller", "retail"),
        _group(8, "dropshipping", "d2c", "dtc"),
        _group(5, "store", "shop", "products"),
    ),
    Vertical.SAAS: (
        _group(10, "saas", "software as a service"),
        _group(7, "software", "platform", "app"),
        _group(7, "tech startup", "startup"),
        _group(6, "cloud", "api"),
        _group(5, "digital product", "subscription"),
    ),
    Vertical.DEFAULT: (),
})

# Compiled once: (vertical, keyword, weight, pattern) in table order
_KEYWORD_PATTERNS: tuple[tuple[Vertical, str, int, re.Pattern[str]], ...] = tuple(
    (vertical, keyword, group.weight, re.compile(re.escape(keyword)))
    for vertical, groups in KEYWORD_TABLES.items()
    for group in groups
    for keyword in group.keywords
)

# Labels offered by the industry correction UI
INDUSTRY_OPTIONS: tuple[str, ...] = (
    "Local Services",
    "SaaS / Software",
    "Consulting / Agency",
    "Creative Agency",
    "Coaching / Training",
    "Healthcare",
    "E-commerce",
    "Manufacturing",
    "Financial Services",
    "Legal",
    "Real Estate",
    "Professional Services",
    "Other",
)

_OPTION_TO_VERTICAL: Mapping[str, Vertical] = MappingProxyType({
    "local services": Vertical.LOCAL_SERVICES,
    "home services": Vertical.LOCAL_SERVICES,
    "saas / software": Vertical.SAAS,
    "consulting / agency": Vertical.CONSULTING,
    "consulting / services": Vertical.CONSULTING,
    "creative agency": Vertical.CREATIVE,
    "coaching / training": Vertical.CONSULTING,
    "healthcare": Vertical.HEALTHCARE,
    "e-commerce": Vertical.ECOMMERCE,
    "manufacturing": Vertical.MANUFACTURING,
    "financial services": Vertical.FINANCE,
    "legal": Vertical.LEGAL,
    "real estate": Vertical.CONSULTING,
    "professional services": Vertical.CONSULTING,
    "other": Vertical.DEFAULT,
    "general": Vertical.DEFAULT,
})


@dataclass
class VerticalScore:
    """Running score for one vertical."""

    vertical: Vertical
    score: int = 0
    # (keyword, weight) in first-match order, deduplicated
    matches: list[tuple[str, int]] = field(default_factory=list)

    @property
    def keywords(self) -> list[str]:
        return [keyword for keyword, _ in self.matches]


def build_weighted_text(messages: Sequence[str]) -> str:
    """Join messages into one lowercase blob with the recent ones counted twice."""
    recent = list(messages[-RECENT_MESSAGE_COUNT:]) if messages else []
    older = list(messages[: len(messages) - len(recent)])
    return " ".join(older + recent + recent).lower()


def contains_agency_signals(text: str) -> bool:
    """Check for first/second-person service phrasing ("we help", "i work with")."""
    lowered = text.lower()
    return any(signal in lowered for signal in AGENCY_SIGNALS)


def score_verticals(
    text: str,
    agency_signal: bool,
    settings: PipelineSettings,
) -> dict[Vertical, VerticalScore]:
    """Score every vertical against the weighted text.

    Args:
        text: Lowercased weighted text from build_weighted_text.
        agency_signal: Whether agency phrasing was found.
        settings: Bonus/penalty constants.

    Returns:
        Scores keyed by vertical, in priority order.
    """
    scores = {vertical: VerticalScore(vertical=vertical) for vertical in Vertical}

    for vertical, keyword, weight, pattern in _KEYWORD_PATTERNS:
        occurrences = len(pattern.findall(text))
        if not occurrences:
            continue
        entry = scores[vertical]
        entry.score += weight * occurrences
        if keyword not in entry.keywords:
            entry.matches.append((keyword, weight))

    if agency_signal:
        for vertical, entry in scores.items():
            if vertical in AGENCY_VERTICALS:
                entry.score += settings.agency_bonus
            elif vertical != Vertical.DEFAULT and entry.score > 0:
                entry.score = max(0, entry.score - settings.agency_penalty)

    return scores


def confidence_for(score: int, keyword_count: int) -> Confidence:
    """Map a score and matched-keyword count to a confidence band."""
    if score >= 20 and keyword_count >= 3:
        return Confidence.HIGH
    if score >= 10 and keyword_count >= 2:
        return Confidence.MEDIUM
    return Confidence.LOW


def _pick_best(scores: dict[Vertical, VerticalScore]) -> VerticalScore:
    best = VerticalScore(vertical=Vertical.DEFAULT)
    for vertical in Vertical:
        entry = scores[vertical]
        if entry.score > best.score:
            best = entry
    return best


def _display_keywords(entry: VerticalScore, limit: int) -> list[str]:
    # sorted() is stable, so equal weights keep first-match order
    ranked = sorted(entry.matches, key=lambda match: -match[1])
    return [keyword for keyword, _ in ranked[:limit]]


def classify(
    messages: Sequence[str],
    previous: VerticalClassification | None = None,
    settings: PipelineSettings | None = None,
) -> VerticalClassification:
    """Classify a conversation into an industry vertical.

    Args:
        messages: Ordered conversation utterances.
        previous: The classification returned by the last call, if any.
        settings: Optional settings override.

    Returns:
        ``previous`` itself when it is manually pinned or the new result is
        the same vertical within the damping threshold, otherwise a fresh
        classification.

    Raises:
        ContractError: If messages is not a sequence of strings or previous
            is not a VerticalClassification.
    """
    if isinstance(messages, str) or not isinstance(messages, (list, tuple)):
        raise ContractError("messages", "a list of strings", messages)
    non_strings = [m for m in messages if not isinstance(m, str)]
    if non_strings:
        raise ContractError("messages", "a list of strings", non_strings[0])
    if previous is not None and not isinstance(previous, VerticalClassification):
        raise ContractError("previous", "a VerticalClassification or None", previous)

    if previous is not None and previous.manually_confirmed:
        logger.debug("Keeping manually confirmed vertical", vertical=previous.vertical.value)
        return previous

    settings = settings or get_settings()

    text = build_weighted_text(messages)
    agency_signal = contains_agency_signals(text)
    scores = score_verticals(text, agency_signal, settings)
    best = _pick_best(scores)

    if best.score < MIN_CLASSIFIABLE_SCORE:
        candidate = VerticalClassification(
            vertical=Vertical.DEFAULT,
            confidence=Confidence.LOW,
            score=0,
            matched_keywords=[],
            display_name=VERTICAL_DISPLAY_NAMES[Vertical.DEFAULT],
            agency_signal=agency_signal,
        )
    else:
        candidate = VerticalClassification(
            vertical=best.vertical,
            confidence=confidence_for(best.score, len(best.matches)),
            score=best.score,
            matched_keywords=_display_keywords(best, settings.max_display_keywords),
            display_name=VERTICAL_DISPLAY_NAMES[best.vertical],
            agency_signal=agency_signal,
        )

    if (
        previous is not None
        and candidate.vertical == previous.vertical
        and abs(candidate.score - previous.score) < settings.damping_threshold
    ):
        logger.debug(
            "Score drift below damping threshold, keeping previous vertical",
            vertical=previous.vertical.value,
            previous_score=previous.score,
            new_score=candidate.score,
        )
        return previous

    logger.info(
        "Vertical classified",
        vertical=candidate.vertical.value,
        confidence=candidate.confidence.value,
        score=candidate.score,
        agency_signal=agency_signal,
        message_count=len(messages),
    )
    return candidate


def confirm_vertical(vertical: Vertical | str) -> VerticalClassification:
    """Build a manual pin for a user-confirmed vertical.

    Args:
        vertical: A Vertical or its wire value.

    Returns:
        A high-confidence classification the classifier will never override.
    """
    resolved = Vertical(vertical)
    return VerticalClassification(
        vertical=resolved,
        confidence=Confidence.HIGH,
        score=MANUAL_PIN_SCORE,
        matched_keywords=[],
        manually_confirmed=True,
        display_name=VERTICAL_DISPLAY_NAMES[resolved],
    )


def option_to_vertical(option: str) -> Vertical:
    """Map an industry correction UI label to a vertical (Default when unknown)."""
    return _OPTION_TO_VERTICAL.get(option.strip().lower(), Vertical.DEFAULT)


def vertical_display_name(vertical: Vertical | str) -> str:
    """Human label for a vertical."""
    try:
        return VERTICAL_DISPLAY_NAMES[Vertical(vertical)]
    except ValueError:
        return VERTICAL_DISPLAY_NAMES[Vertical.DEFAULT]
