"""Pydantic models for glossary entries, drafts and configuration."""

from wikiglossary.models.config import GlossaryConfig, TermPatternConfig
from wikiglossary.models.draft import (
    Citation,
    Claim,
    DraftSection,
    DraftSubsection,
    GroundedAcceptedOutput,
    LineRange,
    WikiDraft,
)
from wikiglossary.models.glossary import GlossaryEntry, GlossaryEntryInput

__all__ = [
    "Citation",
    "Claim",
    "DraftSection",
    "DraftSubsection",
    "GlossaryConfig",
    "GlossaryEntry",
    "GlossaryEntryInput",
    "GroundedAcceptedOutput",
    "LineRange",
    "TermPatternConfig",
    "WikiDraft",
]
