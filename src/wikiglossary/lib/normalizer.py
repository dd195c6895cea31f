"""Glossary entry validation, canonicalization and deduplication.

Candidates come from markup extraction or straight from a caller with a
curated term list. Malformed candidates are expected noise and are dropped
silently; this module never raises.

Two candidates denote the same term when their canonical keys match:
the English term lowercased and the Korean term whitespace-collapsed. The
first candidate seen for a key wins outright, including its display casing
and its definition.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from wikiglossary.config.defaults import (
    PLACEHOLDER_VALUES,
    TERM_EN_TRAILING_PUNCTUATION,
)
from wikiglossary.models.config import GlossaryConfig
from wikiglossary.models.glossary import CanonicalKey, GlossaryEntry

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# (snake_case, camelCase) names accepted on raw candidates
_FIELD_NAMES: dict[str, tuple[str, ...]] = {
    "term_ko": ("term_ko", "termKo"),
    "term_en": ("term_en", "termEn"),
    "definition": ("definition",),
}


def collapse_whitespace(value: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def canonical_key(term_en: str, term_ko: str) -> CanonicalKey:
    """Build the deduplication key for a term pair."""
    return CanonicalKey(term_en=term_en.lower(), term_ko=collapse_whitespace(term_ko))


def _candidate_field(candidate: Any, field: str) -> str | None:
    """Read a field from a mapping or attribute-style candidate.

    Non-string values count as missing.
    """
    for name in _FIELD_NAMES[field]:
        if isinstance(candidate, Mapping):
            value = candidate.get(name)
        else:
            value = getattr(candidate, name, None)
        if value is not None:
            return value if isinstance(value, str) else None
    return None


def _is_placeholder(value: str) -> bool:
    return value.lower() in PLACEHOLDER_VALUES


def _canonicalize(candidate: Any, drop_placeholders: bool) -> GlossaryEntry | None:
    """Validate and canonicalize one candidate, or return None to drop it."""
    term_ko = collapse_whitespace(_candidate_field(candidate, "term_ko") or "")
    term_en = (_candidate_field(candidate, "term_en") or "").strip()
    term_en = term_en.rstrip(TERM_EN_TRAILING_PUNCTUATION).rstrip()
    definition = (_candidate_field(candidate, "definition") or "").strip()

    fields = {"termKo": term_ko, "termEn": term_en, "definition": definition}
    for name, value in fields.items():
        if not value:
            logger.debug(f"Dropping glossary candidate with empty {name}")
            return None
        if drop_placeholders and _is_placeholder(value):
            logger.debug(f"Dropping glossary candidate with placeholder {name}: {value!r}")
            return None

    return GlossaryEntry(term_ko=term_ko, term_en=term_en, definition=definition)


def normalize_glossary_entries(
    candidates: Iterable[Any],
    config: GlossaryConfig | None = None,
) -> list[GlossaryEntry]:
    """Validate, canonicalize and deduplicate glossary candidates.

    Steps:
    1. Drop candidates whose trimmed termKo, termEn or definition is empty
       (or a placeholder such as "TBD", unless disabled in config)
    2. Collapse whitespace in termKo; trim termEn and definition
    3. Keep the first candidate per canonical key, unchanged

    Args:
        candidates: GlossaryEntryInput/GlossaryEntry objects, mappings with
            camelCase or snake_case keys, or any object with the attributes
        config: Glossary configuration, defaults to GlossaryConfig()

    Returns:
        Entries in first-encountered order, at most one per canonical key.
        Sorting is left to the caller.

    Example:
        >>> entries = normalize_glossary_entries([
        ...     {"termKo": "비동기 큐", "termEn": "Async Queue", "definition": "A"},
        ...     {"termKo": "비동기   큐", "termEn": "async queue", "definition": "B"},
        ... ])
        >>> [(e.term_ko, e.term_en, e.definition) for e in entries]
        [('비동기 큐', 'Async Queue', 'A')]
    """
    config = config or GlossaryConfig()
    canonical_entries: dict[CanonicalKey, GlossaryEntry] = {}
    total = 0
    dropped = 0

    for candidate in candidates:
        total += 1
        entry = _canonicalize(candidate, config.drop_placeholders)
        if entry is None:
            dropped += 1
            continue

        key = canonical_key(entry.term_en, entry.term_ko)
        if key not in canonical_entries:
            canonical_entries[key] = entry

    kept = len(canonical_entries)
    logger.debug(
        f"Normalized {total} glossary candidate(s): {kept} kept, "
        f"{dropped} dropped, {total - dropped - kept} merged"
    )
    return list(canonical_entries.values())
