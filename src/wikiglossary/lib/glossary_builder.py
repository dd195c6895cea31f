"""Glossary construction from a generated documentation draft.

Pipeline:
    draft -> ordered text fields -> term candidates -> normalized entries
          -> sorted glossary

The builder is a pure function of its input and configuration: the same
draft always yields the same entries in the same order. Which occurrence of a
term is "first" (and so supplies display casing and definition) follows the
draft traversal order in ``draft_traversal``.

Usage:
    from wikiglossary.lib.glossary_builder import build_glossary_from_draft

    glossary = build_glossary_from_draft(draft)
    rows = [entry.to_dict() for entry in glossary]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from opentelemetry import trace
from pydantic import ValidationError as PydanticValidationError

from wikiglossary.lib.draft_traversal import collect_draft_text
from wikiglossary.lib.errors import ValidationError
from wikiglossary.lib.normalizer import normalize_glossary_entries
from wikiglossary.lib.term_extractor import extract_candidates_from_text
from wikiglossary.models.config import GlossaryConfig
from wikiglossary.models.draft import GroundedAcceptedOutput, WikiDraft
from wikiglossary.models.glossary import GlossaryEntry, GlossaryEntryInput

logger = logging.getLogger(__name__)

tracer = trace.get_tracer("wikiglossary.glossary_builder")


def sort_glossary_entries(entries: Iterable[GlossaryEntry]) -> list[GlossaryEntry]:
    """Sort entries by English term, case-insensitive ordinal order.

    The sort is stable, so entries with equal English terms keep their
    first-encountered order.
    """
    return sorted(entries, key=lambda entry: entry.term_en.lower())


def _coerce_model(value: Any, model: type[Any], field: str) -> Any:
    """Validate a mapping into ``model``; pass model instances through."""
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError(
            field=field,
            message=f"Cannot build a glossary from {type(value).__name__}",
            expected=f"{model.__name__} or mapping",
            actual=repr(value)[:80],
        )
    try:
        return model.model_validate(value)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(field, model.__name__, e) from e


class GlossaryBuilder:
    """Extracts a deterministic glossary from drafts.

    Holds a GlossaryConfig so repeated builds share the same (cached)
    compiled patterns.

    Example:
        >>> builder = GlossaryBuilder()
        >>> glossary = builder.build({"overviewKo": "캐시 계층(Cache Layer)은 빠릅니다."})
        >>> [(e.term_ko, e.term_en) for e in glossary]
        [('캐시 계층', 'Cache Layer')]
    """

    def __init__(self, config: GlossaryConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Glossary configuration, defaults to GlossaryConfig()
        """
        self.config = config or GlossaryConfig()

    def extract_candidates(self, draft: WikiDraft) -> list[GlossaryEntryInput]:
        """Scan every text field of a draft, in traversal order."""
        pattern = self.config.pattern
        candidates: list[GlossaryEntryInput] = []
        for text_field in collect_draft_text(draft, include_titles=pattern.include_titles):
            found = extract_candidates_from_text(text_field.text, pattern)
            if found:
                logger.debug(f"{text_field.location}: {len(found)} term occurrence(s)")
            candidates.extend(found)
        return candidates

    def build(self, draft: WikiDraft | Mapping[str, Any]) -> list[GlossaryEntry]:
        """Build a sorted glossary from a draft.

        Args:
            draft: WikiDraft or a mapping in the draft's camelCase shape

        Returns:
            Glossary entries sorted by English term; empty when the draft
            contains no bilingual markup

        Raises:
            ValidationError: If ``draft`` is a mapping of the wrong shape
        """
        draft = _coerce_model(draft, WikiDraft, "draft")

        with tracer.start_as_current_span("wikiglossary.build") as span:
            candidates = self.extract_candidates(draft)
            entries = sort_glossary_entries(
                normalize_glossary_entries(candidates, self.config)
            )
            span.set_attribute("glossary.candidate_count", len(candidates))
            span.set_attribute("glossary.entry_count", len(entries))

        logger.debug(
            f"Built glossary with {len(entries)} entr(ies) "
            f"from {len(candidates)} candidate(s)"
        )
        return entries


def build_glossary_from_draft(
    draft: WikiDraft | Mapping[str, Any],
    config: GlossaryConfig | None = None,
) -> list[GlossaryEntry]:
    """Build a sorted glossary from a draft.

    Args:
        draft: WikiDraft or a mapping in the draft's camelCase shape
        config: Glossary configuration, defaults to GlossaryConfig()

    Returns:
        Glossary entries sorted by English term

    Raises:
        ValidationError: If ``draft`` is a mapping of the wrong shape
    """
    return GlossaryBuilder(config).build(draft)


def build_glossary_from_accepted_output(
    accepted_output: GroundedAcceptedOutput | Mapping[str, Any],
    config: GlossaryConfig | None = None,
) -> list[GlossaryEntry]:
    """Build a glossary from the grounding gate's accepted-output envelope."""
    accepted = _coerce_model(accepted_output, GroundedAcceptedOutput, "accepted_output")
    return build_glossary_from_draft(accepted.draft, config)
