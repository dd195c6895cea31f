"""Default configuration values for glossary extraction."""

# Korean-script characters recognised in a term phrase (regex class body)
DEFAULT_KOREAN_CHARS = "가-힣"

# Parenthesised English phrase: a letter followed by letters, digits,
# spaces, hyphens, underscores or slashes
DEFAULT_ENGLISH_PATTERN = r"[A-Za-z][A-Za-z0-9 \t\-_/]{1,80}"

# Only the last N words of a Korean run form the term
DEFAULT_MAX_PHRASE_WORDS = 3

# Standalone words that end a Korean term phrase (scanning right to left)
DEFAULT_BOUNDARY_WORDS: tuple[str, ...] = (
    "와",
    "과",
    "및",
    "그리고",
    "또는",
    "이",
    "그",
    "해당",
    "등",
    # particles left standing after a closing parenthesis
    "은",
    "는",
    "을",
    "를",
    "의",
    "에",
    "에서",
    "로",
    "으로",
    "가",
    "도",
)

# A word carrying one of these particles belongs to the preceding clause
DEFAULT_BOUNDARY_SUFFIXES: tuple[str, ...] = ("은", "는", "을", "를", "에서", "으로")

# A sentence ends at a line break or at whitespace after one of these
DEFAULT_SENTENCE_TERMINATORS = ".!?다"

# Words ending in a terminator that do not end a sentence ("디스크보다 빠르다")
DEFAULT_NON_TERMINAL_ENDINGS: tuple[str, ...] = ("보다", "마다")

# Values that mean "no value" in upstream extraction output
PLACEHOLDER_VALUES: frozenset[str] = frozenset(
    {"n/a", "na", "none", "null", "tbd", "todo", "미정", "없음", "-", "_"}
)

# Trailing punctuation dropped from English terms
TERM_EN_TRAILING_PUNCTUATION = ".,;:"

# Environment variable overrides for GlossaryConfig fields
ENV_VAR_MAP: dict[str, str] = {
    "max_phrase_words": "WIKIGLOSSARY_MAX_PHRASE_WORDS",
    "include_titles": "WIKIGLOSSARY_INCLUDE_TITLES",
    "include_reverse_pairs": "WIKIGLOSSARY_INCLUDE_REVERSE_PAIRS",
    "drop_placeholders": "WIKIGLOSSARY_DROP_PLACEHOLDERS",
}

LOG_LEVEL_ENV_VAR = "WIKIGLOSSARY_LOG_LEVEL"
