"""Content extractor and ranker.

Pure selection over a brief: nothing here writes copy, it only picks,
orders and filters what the brief already says.

1. Headline Selection - pick the variant that matches the page goal
2. Authority Signals - turn proof points into typed, deduplicated claims
3. Statistics - the strongest numeric claims for the stats bar
4. Testimonials - score by specificity and attribution
5. FAQ Optimization - dedupe, categorise, balance across concerns
6. Pillar Enhancement - scannable hooks and matching proof
"""

import re
from typing import Iterable, Sequence

import structlog

from pagewright.config import PipelineSettings, get_settings
from pagewright.models.brief import (
    Brief,
    Headlines,
    MessagingPillar,
    Objection,
    ProofPoints,
    Testimonial,
)
from pagewright.models.classification import VerticalClassification
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
from pagewright.utils.text import (
    LEADING_VALUE_PATTERN,
    clean,
    find_numbers,
    first_sentence,
    is_placeholder,
    normalize_key,
    split_value_label,
    truncate,
)

logger = structlog.get_logger()

VARIANT_NAMES = ("option_a", "option_b", "option_c")

# Page goal -> headline variant index (A direct benefit, B problem, C outcome)
GOAL_VARIANTS: dict[str, int] = {
    "book-meetings": 1,
    "book-consultation": 1,
    "consultation": 1,
    "generate-leads": 0,
    "capture-emails": 0,
    "demo": 0,
    "waitlist": 0,
    "sales": 2,
    "purchase": 2,
}

HOOK_LENGTH = 60

# Lower sorts first in the stats bar
SIGNAL_PRIORITY: dict[SignalType, int] = {
    SignalType.STATISTIC: 0,
    SignalType.COMPARISON: 1,
}

COMPARISON_PATTERN = re.compile(
    r"\b\d+(?:\.\d+)?x\b"
    r"|\bvs\.?(?=\s)"
    r"|\bversus\b"
    r"|\bcompared (?:to|with)\b"
    r"|\b(?:faster|cheaper|quicker|better|lower|higher) than\b"
    r"|\bindustry average\b",
    re.IGNORECASE,
)
_FRAGMENT_SPLIT = re.compile(r";|\n|\.\s+")

# Testimonial rubric
QUOTE_MIN_LENGTH = 40
QUOTE_MAX_LENGTH = 200
SPECIFIC_RESULT_PATTERN = re.compile(r"\d+%|\d+x\b|\$[\d,]+", re.IGNORECASE)
SENIOR_TITLE_PATTERN = re.compile(
    r"\b(?:vp|vice president|director|ceo|cto|cfo|coo|president|chief|head of|founder|owner|partner)\b",
    re.IGNORECASE,
)
TRANSFORMATION_PATTERN = re.compile(
    r"\b(?:transformed|changed|saved|doubled|tripled|increased|reduced|grew|finally|game.changer)\b",
    re.IGNORECASE,
)
ANONYMOUS_AUTHORS = frozenset({"anonymous", "a client", "a customer", "customer", "client"})

# FAQ categories, checked in this order
FAQ_CATEGORY_PATTERNS: tuple[tuple[FAQCategory, re.Pattern[str]], ...] = (
    (
        FAQCategory.PRICING,
        re.compile(
            r"\b(?:price|prices|pricing|cost|costs|afford|affordable|expensive|pay|payment|fees?|"
            r"budget|investment|charge|quote|how much)\b",
            re.IGNORECASE,
        ),
    ),
    (
        FAQCategory.TRUST,
        re.compile(
            r"\b(?:trust|guarantee|guaranteed|risk|safe|secure|licensed|insured|certified|"
            r"reliable|proof|references?|track record|reviews?)\b",
            re.IGNORECASE,
        ),
    ),
    (
        FAQCategory.DIFFERENTIATION,
        re.compile(
            r"^why\b|\b(?:different|difference|differs?|compare|compared|versus|vs|"
            r"competitors?|unique|instead of|better than|stand out)\b",
            re.IGNORECASE,
        ),
    ),
    (
        FAQCategory.PROCESS,
        re.compile(
            r"^(?:how|when|where|what happens)\b|\b(?:process|steps?|timeline|how long|"
            r"onboarding|get started|schedule|turnaround)\b",
            re.IGNORECASE,
        ),
    ),
)


def _settings_or_default(settings: PipelineSettings | None) -> PipelineSettings:
    return settings if settings is not None else get_settings()


# ---------------------------------------------------------------------------
# Headline selection
# ---------------------------------------------------------------------------


def normalize_goal(page_goal: str | None) -> str:
    """Normalize a goal tag: 'Book Consultation' -> 'book-consultation'."""
    if not page_goal:
        return ""
    dashed = re.sub(r"[\s_]+", "-", page_goal.strip().lower())
    return re.sub(r"[^a-z-]", "", dashed)


def select_headline(headlines: Headlines, page_goal: str | None = None) -> HeadlineSelection:
    """Choose the headline variant that fits the page goal.

    Falls back to the first non-empty variant when the goal is unknown or
    the preferred variant is empty.

    Args:
        headlines: The brief's headline variants.
        page_goal: Goal tag such as 'book-meetings'.

    Returns:
        The primary headline plus the next-best variant as secondary.
    """
    variants = headlines.variants()
    non_empty = [i for i, text in enumerate(variants) if text.strip()]
    goal = normalize_goal(page_goal)
    preferred = GOAL_VARIANTS.get(goal)

    if preferred is not None and preferred in non_empty:
        index = preferred
        reasoning = f"Goal '{goal}' prefers {VARIANT_NAMES[index]}"
    else:
        index = non_empty[0]
        if preferred is not None:
            reasoning = f"Preferred {VARIANT_NAMES[preferred]} is empty, using first available"
        elif goal:
            reasoning = f"Unknown goal '{goal}', using first available"
        else:
            reasoning = "No page goal, using first available"

    secondary = next((variants[i].strip() for i in non_empty if i != index), None)

    return HeadlineSelection(
        primary=variants[index].strip(),
        secondary=secondary,
        variant=VARIANT_NAMES[index],
        reasoning=reasoning,
    )


# ---------------------------------------------------------------------------
# Authority signals
# ---------------------------------------------------------------------------


def _numeric_signal(
    text: str | None, signal_type: SignalType, fallback_label: str = ""
) -> AuthoritySignal | None:
    """Build a signal from text that carries a number, or None."""
    if not text or not text.strip():
        return None
    parts = split_value_label(text)
    if parts is None:
        return None
    value, label = parts
    return AuthoritySignal(
        type=signal_type,
        value=value,
        label=label or fallback_label,
        numbers=find_numbers(text),
    )


def _classify_claim(text: str) -> AuthoritySignal | None:
    """Type a free-form numeric claim as a comparison or a statistic."""
    signal_type = SignalType.COMPARISON if COMPARISON_PATTERN.search(text) else SignalType.STATISTIC
    return _numeric_signal(text, signal_type)


def _is_numeric_claim(text: str) -> bool:
    """A claim that leads with its number, or states one with a unit.

    Bare numbers elsewhere in the text are identifiers or years
    ("ISO 9001 certified", "Top 10 agency 2023"), not the claim itself.
    """
    if LEADING_VALUE_PATTERN.match(text):
        return True
    return any(token.startswith("$") or not token[-1].isdigit() for token in find_numbers(text))


def _split_fragments(text: str | None) -> list[str]:
    if not text:
        return []
    return [clean(part) for part in _FRAGMENT_SPLIT.split(text) if clean(part)]


def _is_near_duplicate(a: AuthoritySignal, b: AuthoritySignal) -> bool:
    """Same normalized value and one label contained in the other."""
    if normalize_key(a.value) != normalize_key(b.value):
        return False
    label_a = normalize_key(a.label)
    label_b = normalize_key(b.label)
    return label_a in label_b or label_b in label_a


def extract_authority_signals(
    proof_points: ProofPoints, annotations: Iterable[str] = ()
) -> list[AuthoritySignal]:
    """Turn proof points into typed authority signals.

    Client counts become statistics, years in business a credential, numeric
    achievement fragments achievements, and other stats either comparisons
    or statistics. Externally supplied annotations are classified the same
    way when they lead with a number or state one with a unit; any other
    annotation is kept whole as a credential. Near-duplicates and
    placeholder-bearing signals are dropped. Source order is kept.

    Args:
        proof_points: The brief's proof points.
        annotations: Extra authority claims supplied alongside the brief.

    Returns:
        Deduplicated signals in source order.
    """
    candidates: list[AuthoritySignal | None] = [
        _numeric_signal(proof_points.client_count, SignalType.STATISTIC, "Clients Served"),
        _numeric_signal(proof_points.years_in_business, SignalType.CREDENTIAL, "Years Experience"),
    ]
    candidates.extend(
        _numeric_signal(fragment, SignalType.ACHIEVEMENT)
        for fragment in _split_fragments(proof_points.achievements)
    )
    candidates.extend(_classify_claim(stat) for stat in proof_points.other_stats)

    for annotation in annotations:
        text = clean(annotation)
        if not text:
            continue
        if _is_numeric_claim(text):
            candidates.append(_classify_claim(text))
        else:
            candidates.append(
                AuthoritySignal(type=SignalType.CREDENTIAL, value=text, numbers=find_numbers(text))
            )

    signals: list[AuthoritySignal] = []
    for signal in candidates:
        if signal is None:
            continue
        if is_placeholder(signal.value) or (signal.label and is_placeholder(signal.label)):
            logger.debug("Dropping placeholder authority signal", value=signal.value, label=signal.label)
            continue
        if any(_is_near_duplicate(signal, kept) for kept in signals):
            logger.debug("Dropping duplicate authority signal", value=signal.value, label=signal.label)
            continue
        signals.append(signal)

    return signals


def select_statistics(
    signals: Sequence[AuthoritySignal],
    limit: int | None = None,
    settings: PipelineSettings | None = None,
) -> list[AuthoritySignal]:
    """Pick the strongest signals for the stats bar.

    Statistics come first, then comparisons, then everything else; ties keep
    their source order.
    """
    if limit is None:
        limit = _settings_or_default(settings).max_statistics
    ranked = sorted(signals, key=lambda s: SIGNAL_PRIORITY.get(s.type, 2))
    return ranked[:limit]


# ---------------------------------------------------------------------------
# Testimonials
# ---------------------------------------------------------------------------


def is_placeholder_testimonial(testimonial: Testimonial) -> bool:
    """Check for an empty quote or template text in any field."""
    if is_placeholder(testimonial.quote):
        return True
    return any(
        value.strip() and is_placeholder(value)
        for value in (testimonial.author, testimonial.title)
    )


def score_testimonial(testimonial: Testimonial) -> int:
    """Score a testimonial by length, attribution and specificity."""
    score = 0
    quote = testimonial.quote.strip()
    author = testimonial.author.strip()
    title = testimonial.title.strip()

    if QUOTE_MIN_LENGTH <= len(quote) <= QUOTE_MAX_LENGTH:
        score += 2

    if author and author.lower() not in ANONYMOUS_AUTHORS:
        score += 2

    if title:
        score += 1
        if SENIOR_TITLE_PATTERN.search(title):
            score += 1

    if SPECIFIC_RESULT_PATTERN.search(quote):
        score += 3

    if TRANSFORMATION_PATTERN.search(quote):
        score += 1

    return score


def rank_testimonials(testimonials: Sequence[Testimonial]) -> list[RankedTestimonial]:
    """Drop placeholder testimonials and order the rest by score.

    Returns:
        Testimonials sorted by descending score, ties in source order.
    """
    ranked: list[RankedTestimonial] = []
    for testimonial in testimonials:
        if is_placeholder_testimonial(testimonial):
            logger.debug("Dropping placeholder testimonial", author=testimonial.author)
            continue
        ranked.append(
            RankedTestimonial(
                quote=testimonial.quote.strip(),
                author=testimonial.author.strip(),
                title=testimonial.title.strip(),
                score=score_testimonial(testimonial),
            )
        )

    return sorted(ranked, key=lambda t: -t.score)


# ---------------------------------------------------------------------------
# FAQs
# ---------------------------------------------------------------------------


def categorize_question(question: str) -> FAQCategory:
    """Map a question to the buyer concern it addresses."""
    text = question.strip()
    for category, pattern in FAQ_CATEGORY_PATTERNS:
        if pattern.search(text):
            return category
    return FAQCategory.OTHER


def optimize_faqs(
    objections: Sequence[Objection],
    limit: int | None = None,
    settings: PipelineSettings | None = None,
) -> list[OptimizedFAQ]:
    """Deduplicate, categorise and balance FAQ entries.

    Selection takes one entry per category in turn until the limit is hit,
    so a brief with five pricing questions cannot crowd out trust and
    process. Selected entries come back in brief order.
    """
    if limit is None:
        limit = _settings_or_default(settings).max_faqs

    entries: list[OptimizedFAQ] = []
    seen: set[str] = set()
    for objection in objections:
        if is_placeholder(objection.question) or is_placeholder(objection.answer):
            logger.debug("Dropping incomplete FAQ entry", question=objection.question)
            continue
        key = normalize_key(objection.question)
        if key in seen:
            logger.debug("Dropping duplicate FAQ entry", question=objection.question)
            continue
        seen.add(key)
        question = objection.question.strip()
        entries.append(
            OptimizedFAQ(
                question=question,
                answer=objection.answer.strip(),
                category=categorize_question(question),
            )
        )

    buckets: dict[FAQCategory, list[int]] = {}
    for index, entry in enumerate(entries):
        buckets.setdefault(entry.category, []).append(index)

    selected: set[int] = set()
    depth = 0
    while len(selected) < limit:
        added = False
        for indexes in buckets.values():
            if depth < len(indexes) and len(selected) < limit:
                selected.add(indexes[depth])
                added = True
        if not added:
            break
        depth += 1

    return [entries[i] for i in sorted(selected)]


# ---------------------------------------------------------------------------
# Pillars
# ---------------------------------------------------------------------------


def _significant_words(text: str) -> set[str]:
    return {word for word in normalize_key(text).split() if len(word) > 3}


def enhance_pillars(
    pillars: Sequence[MessagingPillar], signals: Sequence[AuthoritySignal] = ()
) -> list[EnhancedPillar]:
    """Add a short hook and, where one fits, a supporting proof point.

    A signal supports a pillar when a word of its label also appears in the
    pillar's title or description.
    """
    enhanced: list[EnhancedPillar] = []
    for pillar in pillars:
        if is_placeholder(pillar.title):
            logger.debug("Dropping placeholder pillar", title=pillar.title)
            continue

        description = clean(pillar.description)
        if description and is_placeholder(description):
            description = ""

        hook = first_sentence(description).rstrip(".!?")
        pillar_words = _significant_words(f"{pillar.title} {description}")
        proof = next(
            (s for s in signals if s.label and _significant_words(s.label) & pillar_words),
            None,
        )

        enhanced.append(
            EnhancedPillar(
                title=pillar.title.strip(),
                description=description,
                icon=pillar.icon.strip(),
                hook=truncate(hook, HOOK_LENGTH) if hook else None,
                proof_point=f"{proof.value} {proof.label}" if proof else None,
            )
        )

    return enhanced


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------


def extract_content(
    brief: Brief,
    classification: VerticalClassification,
    page_goal: str | None = None,
    settings: PipelineSettings | None = None,
) -> ExtractedContent:
    """Run every extractor over one brief.

    Args:
        brief: Validated strategy brief (not modified).
        classification: Result of the vertical classifier.
        page_goal: Optional goal tag from the session.
        settings: Optional settings override.

    Returns:
        ExtractedContent with the selected and ranked content.
    """
    settings = _settings_or_default(settings)
    signals = extract_authority_signals(brief.proof_points, brief.authority_signals)

    content = ExtractedContent(
        vertical=classification.vertical,
        headline=select_headline(brief.headlines, page_goal),
        authority_signals=signals,
        statistics=select_statistics(signals, settings=settings),
        testimonials=rank_testimonials(brief.testimonials),
        faqs=optimize_faqs(brief.objections, settings=settings),
        pillars=enhance_pillars(brief.messaging_pillars, signals),
    )

    logger.debug(
        "Content extracted",
        vertical=classification.vertical.value,
        headline_variant=content.headline.variant,
        signals_count=len(signals),
        testimonials_count=len(content.testimonials),
        faqs_count=len(content.faqs),
    )

    return content
