"""Glossary entry models.

A glossary is a list of (Korean term, English term, definition) triples.
``GlossaryEntryInput`` is the loose shape produced by extraction or handed in
by callers; ``GlossaryEntry`` is the validated, canonical output unit.

Both models read and write the camelCase wire names (``termKo``, ``termEn``)
used by the documentation pipeline, and also accept snake_case names.
"""

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GlossaryEntryInput(BaseModel):
    """An unvalidated glossary candidate.

    Any field may be missing, empty or whitespace-only. Candidates are
    filtered and canonicalized by the normalizer, never rejected with an error.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    term_ko: str | None = Field(None, description="Korean term as found")
    term_en: str | None = Field(None, description="English term as found")
    definition: str | None = Field(None, description="Context the term was found in")


class GlossaryEntry(BaseModel):
    """A canonical glossary entry.

    Attributes:
        term_ko: Korean term, whitespace-collapsed and trimmed
        term_en: English term, trimmed, display casing of its first occurrence
        definition: Sentence the term was first found in

    Example:
        >>> entry = GlossaryEntry(
        ...     termKo="캐시 계층",
        ...     termEn="Cache Layer",
        ...     definition="캐시 계층(Cache Layer)은 읽기 부하를 줄입니다.",
        ... )
        >>> entry.model_dump(by_alias=True)["termEn"]
        'Cache Layer'
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        str_strip_whitespace=True,
    )

    term_ko: str = Field(..., min_length=1, description="Korean term")
    term_en: str = Field(..., min_length=1, description="English term")
    definition: str = Field(..., min_length=1, description="Term definition")

    def to_dict(self) -> dict[str, str]:
        """Serialize with the camelCase wire names."""
        return self.model_dump(by_alias=True)


class CanonicalKey(NamedTuple):
    """Identity of a glossary term used for deduplication."""

    term_en: str
    term_ko: str
