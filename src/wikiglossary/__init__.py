"""wikiglossary - Deterministic bilingual glossary extraction for wiki drafts.

Scans generated Korean documentation drafts for inline ``한국어(English)``
term markup and produces a stable, sorted glossary of
(Korean term, English term, definition) entries.

Main features:
- Markup scanning across overview, sections, claims and citations
- Validation, canonicalization and first-seen deduplication of entries
- Configurable term pattern (YAML + environment overrides)
- Byte-for-byte repeatable output for a fixed draft
"""

from wikiglossary.lib.errors import ConfigError, ValidationError, WikiGlossaryError
from wikiglossary.lib.glossary_builder import (
    GlossaryBuilder,
    build_glossary_from_accepted_output,
    build_glossary_from_draft,
    sort_glossary_entries,
)
from wikiglossary.lib.normalizer import normalize_glossary_entries
from wikiglossary.models.config import GlossaryConfig, TermPatternConfig
from wikiglossary.models.glossary import GlossaryEntry, GlossaryEntryInput

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "GlossaryBuilder",
    "GlossaryConfig",
    "GlossaryEntry",
    "GlossaryEntryInput",
    "TermPatternConfig",
    "ValidationError",
    "WikiGlossaryError",
    "build_glossary_from_accepted_output",
    "build_glossary_from_draft",
    "normalize_glossary_entries",
    "sort_glossary_entries",
]
