"""Text helpers shared by the extractor and assembler."""

import re

# Unresolved template text the brief generator leaves behind when it lacks data
PLACEHOLDER_PATTERNS = [
    re.compile(r"\{\{?[^}]*\}?\}"),  # {{company}} / {metric}
    re.compile(r"[\[\]]"),  # [Client Name], or a stray bracket from a truncated token
    re.compile(r"\bclient name\b", re.IGNORECASE),
    re.compile(r"\bwill be added\b", re.IGNORECASE),
    re.compile(r"\bto be added\b", re.IGNORECASE),
    re.compile(r"\bcoming soon\b", re.IGNORECASE),
    re.compile(r"\btbd\b", re.IGNORECASE),
    re.compile(r"\blorem ipsum\b", re.IGNORECASE),
    re.compile(r"^\s*n/?a\s*$", re.IGNORECASE),
    re.compile(r"\bx{2,}(?:%|\b)", re.IGNORECASE),  # XX% / XXX clients
]

_UNIT = r"(?:%|[xX](?![A-Za-z])|[KMB](?![A-Za-z]))?\+?"
NUMBER_PATTERN = re.compile(r"\$?\d[\d,]*(?:\.\d+)?" + _UNIT)
LEADING_VALUE_PATTERN = re.compile(r"^(\$?\d[\d,]*(?:\.\d+)?" + _UNIT + r")\s*(.*)$")

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?](?=\s|$)")


def is_placeholder(text: str | None) -> bool:
    """Check whether text is empty or unresolved template content."""
    if text is None or not text.strip():
        return True
    return any(pattern.search(text) for pattern in PLACEHOLDER_PATTERNS)


def clean(text: str | None) -> str:
    """Collapse whitespace, returning an empty string for None."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def normalize_key(text: str) -> str:
    """Normalize text for near-duplicate comparison.

    Lowercases, drops punctuation and collapses whitespace, so that
    "How much does it cost?" and "how much does it cost" compare equal.
    """
    return _WHITESPACE.sub(" ", _PUNCTUATION.sub("", text.lower())).strip()


def find_numbers(text: str | None) -> list[str]:
    """Return every numeric token in text, in order of appearance."""
    if not text:
        return []
    return [match.group(0).strip() for match in NUMBER_PATTERN.finditer(text)]


def split_value_label(text: str) -> tuple[str, str] | None:
    """Split "47+ aerospace manufacturers" into ("47+", "Aerospace manufacturers").

    Returns:
        (value, label) when the text starts with a number, the first number
        with the surrounding text as label when it contains one elsewhere,
        or None when there is no number at all.
    """
    cleaned = clean(text)
    match = LEADING_VALUE_PATTERN.match(cleaned)
    if match:
        return match.group(1), capitalize_first(match.group(2))

    numbers = find_numbers(cleaned)
    if not numbers:
        return None
    value = numbers[0]
    label = clean(cleaned.replace(value, "", 1))
    return value, capitalize_first(label)


def capitalize_first(text: str) -> str:
    """Uppercase the first character only."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def first_sentence(text: str | None) -> str:
    """Return the first sentence of text including its terminator."""
    cleaned = clean(text)
    if not cleaned:
        return ""
    match = _SENTENCE_END.search(cleaned)
    if match is None:
        return cleaned
    return cleaned[: match.end()]


def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."
