"""Bilingual term markup scanning.

Generated Korean documentation introduces technical terms inline as
``한국어 용어(English Term)``. This module finds those pairs in free text
and turns each occurrence into a glossary candidate whose definition is the
sentence the pair was found in.

Key Features:
- Sentence splitting on line breaks and terminal punctuation
- Configurable Korean/English phrase patterns (see TermPatternConfig)
- Korean phrase boundary trimming (conjunctions, particles, word cap)
- Optional mirrored ``English Term(한국어 용어)`` recognition

Every occurrence becomes a candidate, duplicates included. Deduplication is
the normalizer's job.

Usage:
    from wikiglossary.lib.term_extractor import extract_candidates_from_text

    candidates = extract_candidates_from_text(
        "캐시 계층(Cache Layer)은 읽기 부하를 줄입니다."
    )
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from wikiglossary.models.config import TermPatternConfig
from wikiglossary.models.glossary import GlossaryEntryInput

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CompiledTermPatterns:
    """Regexes derived from a TermPatternConfig.

    Attributes:
        forward: Matches ``Korean(English)``, groups ``ko`` and ``en``
        reverse: Matches ``English(Korean)``, or None when disabled
        sentence_split: Splits a field into sentences
    """

    forward: re.Pattern[str]
    reverse: re.Pattern[str] | None
    sentence_split: re.Pattern[str]


@lru_cache(maxsize=32)
def compile_term_patterns(config: TermPatternConfig) -> CompiledTermPatterns:
    """Compile the markup regexes for a pattern configuration.

    The Korean phrase is a run of Korean-script words separated by single
    spaces; at most one space may sit between it and the opening parenthesis.

    Args:
        config: Pattern configuration (hashable, so results are cached)

    Returns:
        CompiledTermPatterns for the configuration
    """
    korean = f"[{config.korean_chars}]+(?: [{config.korean_chars}]+)*"
    forward = re.compile(
        rf"(?P<ko>{korean}) ?\(\s*(?P<en>{config.english_pattern})\s*\)",
        re.IGNORECASE,
    )

    reverse = None
    if config.include_reverse_pairs:
        reverse = re.compile(
            rf"(?P<en>{config.english_pattern}) ?\(\s*(?P<ko>{korean})\s*\)",
            re.IGNORECASE,
        )

    if config.sentence_terminators:
        terminators = re.escape(config.sentence_terminators)
        exceptions = "".join(
            f"(?<!{re.escape(ending)})"
            for ending in config.non_terminal_endings
            if ending
        )
        sentence_split = re.compile(rf"[\r\n]+|(?<=[{terminators}]){exceptions}\s+")
    else:
        sentence_split = re.compile(r"[\r\n]+")

    return CompiledTermPatterns(
        forward=forward, reverse=reverse, sentence_split=sentence_split
    )


def split_sentences(text: str, config: TermPatternConfig | None = None) -> list[str]:
    """Split a text field into trimmed, non-empty sentences.

    A sentence ends at a line break, or at whitespace after a terminator
    unless the word ends in one of ``non_terminal_endings`` (so the
    comparative "디스크보다" stays inside its sentence). A text with no
    sentence boundary comes back as a single sentence.

    Args:
        text: Field value to split
        config: Pattern configuration providing sentence terminators

    Returns:
        List of trimmed sentences in source order

    Example:
        >>> split_sentences("큐는 작업을 저장합니다. 실행기는 작업을 꺼냅니다.")
        ['큐는 작업을 저장합니다.', '실행기는 작업을 꺼냅니다.']
    """
    if not text:
        return []
    patterns = compile_term_patterns(config or TermPatternConfig())
    pieces = (piece.strip() for piece in patterns.sentence_split.split(text))
    return [piece for piece in pieces if piece]


def _is_boundary_word(word: str, config: TermPatternConfig) -> bool:
    return word in config.boundary_words


def _has_boundary_suffix(word: str, config: TermPatternConfig) -> bool:
    return any(
        len(word) > len(suffix) and word.endswith(suffix)
        for suffix in config.boundary_suffixes
    )


def trim_korean_phrase(run: str, config: TermPatternConfig | None = None) -> str:
    """Cut a run of Korean words down to the term right before the parenthesis.

    Words are taken right to left. Scanning stops at a boundary word, at a
    word ending in a boundary particle (only once a word has been kept), or
    when ``max_phrase_words`` words have been kept.

    Args:
        run: Korean words separated by single spaces
        config: Pattern configuration

    Returns:
        The trimmed phrase, possibly empty

    Example:
        >>> trim_korean_phrase("이 구간은 비동기 큐")
        '비동기 큐'
    """
    config = config or TermPatternConfig()
    kept: list[str] = []
    for word in reversed(run.split()):
        if _is_boundary_word(word, config):
            break
        if kept and _has_boundary_suffix(word, config):
            break
        kept.append(word)
        if config.max_phrase_words is not None and len(kept) >= config.max_phrase_words:
            break
    return " ".join(reversed(kept))


def _trim_english_phrase(phrase: str, config: TermPatternConfig) -> str:
    words = phrase.split()
    if config.max_phrase_words is not None:
        words = words[-config.max_phrase_words :]
    return " ".join(words)


def _scan_sentence(
    sentence: str,
    patterns: CompiledTermPatterns,
    config: TermPatternConfig,
) -> list[GlossaryEntryInput]:
    candidates: list[GlossaryEntryInput] = []

    for match in patterns.forward.finditer(sentence):
        candidates.append(
            GlossaryEntryInput(
                term_ko=trim_korean_phrase(match.group("ko"), config),
                term_en=match.group("en").strip(),
                definition=sentence,
            )
        )

    if patterns.reverse is not None:
        for match in patterns.reverse.finditer(sentence):
            candidates.append(
                GlossaryEntryInput(
                    term_ko=_WHITESPACE_RE.sub(" ", match.group("ko")).strip(),
                    term_en=_trim_english_phrase(match.group("en"), config),
                    definition=sentence,
                )
            )

    return candidates


def extract_candidates_from_text(
    text: str | None,
    config: TermPatternConfig | None = None,
) -> list[GlossaryEntryInput]:
    """Extract glossary candidates from a single text field.

    Args:
        text: Field value; None or blank yields no candidates
        config: Pattern configuration, defaults to TermPatternConfig()

    Returns:
        One candidate per markup occurrence, in source order. Within a
        sentence, forward matches precede mirrored ones.

    Example:
        >>> [c.term_en for c in extract_candidates_from_text(
        ...     "비동기 큐(Async Queue)와 캐시 계층 (cache layer)을 사용합니다."
        ... )]
        ['Async Queue', 'cache layer']
    """
    if not text or not text.strip():
        return []

    config = config or TermPatternConfig()
    patterns = compile_term_patterns(config)

    candidates: list[GlossaryEntryInput] = []
    for sentence in split_sentences(text, config):
        candidates.extend(_scan_sentence(sentence, patterns, config))

    if candidates:
        logger.debug(f"Found {len(candidates)} term occurrence(s) in text field")
    return candidates
