"""Glossary extraction configuration models.

The bilingual markup convention (a Korean phrase followed by a parenthesised
English phrase) has loose boundaries, so the pieces of the pattern are kept
configurable rather than hard-coded in the extractor.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wikiglossary.config.defaults import (
    DEFAULT_BOUNDARY_SUFFIXES,
    DEFAULT_BOUNDARY_WORDS,
    DEFAULT_ENGLISH_PATTERN,
    DEFAULT_KOREAN_CHARS,
    DEFAULT_MAX_PHRASE_WORDS,
    DEFAULT_NON_TERMINAL_ENDINGS,
    DEFAULT_SENTENCE_TERMINATORS,
)


class TermPatternConfig(BaseModel):
    """Rules for recognising ``한국어 용어(English Term)`` markup.

    Setting ``max_phrase_words`` to None and clearing both boundary lists
    makes the Korean phrase the maximal run of Korean words before the
    parenthesis.

    Attributes:
        korean_chars: Regex character-class body for Korean-script characters
        english_pattern: Regex for the parenthesised English phrase
        max_phrase_words: Keep at most this many trailing Korean words
        boundary_words: Standalone words that end the Korean phrase
        boundary_suffixes: Particles marking a word as outside the phrase
        sentence_terminators: Characters that end a sentence when followed
            by whitespace
        non_terminal_endings: Word endings after which a terminator does not
            end the sentence
        include_reverse_pairs: Also recognise ``English Term(한국어 용어)``
        include_titles: Also scan section and subsection titles
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    korean_chars: str = Field(DEFAULT_KOREAN_CHARS, min_length=1)
    english_pattern: str = Field(DEFAULT_ENGLISH_PATTERN, min_length=1)
    max_phrase_words: int | None = Field(DEFAULT_MAX_PHRASE_WORDS, ge=1)
    boundary_words: tuple[str, ...] = DEFAULT_BOUNDARY_WORDS
    boundary_suffixes: tuple[str, ...] = DEFAULT_BOUNDARY_SUFFIXES
    sentence_terminators: str = DEFAULT_SENTENCE_TERMINATORS
    non_terminal_endings: tuple[str, ...] = DEFAULT_NON_TERMINAL_ENDINGS
    include_reverse_pairs: bool = False
    include_titles: bool = False

    @field_validator("korean_chars")
    @classmethod
    def validate_korean_chars(cls, v: str) -> str:
        """Ensure the value is usable inside a regex character class."""
        try:
            re.compile(f"[{v}]")
        except re.error as e:
            raise ValueError(f"Invalid character class '{v}': {e}") from e
        return v

    @field_validator("english_pattern")
    @classmethod
    def validate_english_pattern(cls, v: str) -> str:
        """Ensure the English phrase pattern compiles and has no groups."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid English pattern '{v}': {e}") from e
        if compiled.groups:
            raise ValueError("English pattern must not contain capturing groups")
        return v


class GlossaryConfig(BaseModel):
    """Top-level glossary extraction configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: TermPatternConfig = Field(default_factory=TermPatternConfig)
    drop_placeholders: bool = Field(
        True, description="Treat values like 'TBD' or '미정' as empty"
    )
