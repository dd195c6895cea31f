"""Draft document models.

The draft is produced by the generation stage and stamped with a grounding
report by the citation gate. Only its Korean text fields matter for glossary
extraction; identifiers and provenance fields are carried for completeness
and are checked for type only.

Models are lenient: absent or null fields default to empty and unknown keys
are ignored, so partially filled drafts still yield a (possibly empty)
glossary. The grounding report is kept as an opaque mapping.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _null_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class _DraftModel(BaseModel):
    """Shared config for camelCase draft payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class LineRange(_DraftModel):
    """Line range of a citation, as reported by the generator."""

    start: int | None = None
    end: int | None = None


class DraftSubsection(_DraftModel):
    """A subsection with its Korean body text."""

    section_id: str | None = None
    subsection_id: str | None = None
    title_ko: str | None = None
    body_ko: str | None = None


class DraftSection(_DraftModel):
    """A top-level section with summary and ordered subsections."""

    section_id: str | None = None
    title_ko: str | None = None
    summary_ko: str | None = None
    subsections: list[DraftSubsection] = Field(default_factory=list)

    @field_validator("subsections", mode="before")
    @classmethod
    def validate_subsections(cls, v: Any) -> Any:
        """Treat null as no subsections."""
        return _null_to_empty_list(v)


class Claim(_DraftModel):
    """A factual claim backed by one or more citations."""

    claim_id: str | None = None
    section_id: str | None = None
    subsection_id: str | None = None
    statement_ko: str | None = None
    citation_ids: list[str] = Field(default_factory=list)

    @field_validator("citation_ids", mode="before")
    @classmethod
    def validate_citation_ids(cls, v: Any) -> Any:
        """Treat null as no citations."""
        return _null_to_empty_list(v)


class Citation(_DraftModel):
    """A source citation pointing into the repository snapshot."""

    citation_id: str | None = None
    evidence_id: str | None = None
    repo_path: str | None = None
    line_range: LineRange | None = None
    commit_sha: str | None = None
    permalink: str | None = None
    rationale: str | None = None


class WikiDraft(_DraftModel):
    """A generated bilingual documentation draft.

    Text-bearing fields are visited in a fixed order during extraction:
    ``overviewKo``, then each section's ``summaryKo`` followed by its
    subsections' ``bodyKo``, then each claim's ``statementKo``, then each
    citation's ``rationale``. ``groundingReport`` is never read.
    """

    artifact_type: str = "wiki-draft"
    repo_full_name: str | None = None
    commit_sha: str | None = None
    generated_at: str | None = None
    overview_ko: str | None = None
    sections: list[DraftSection] = Field(default_factory=list)
    claims: list[Claim] = Field(default_factory=list)
    citations: list[Citation] = Field(default_factory=list)
    grounding_report: dict[str, Any] | None = None

    @field_validator("sections", "claims", "citations", mode="before")
    @classmethod
    def validate_lists(cls, v: Any) -> Any:
        """Treat null as an empty list."""
        return _null_to_empty_list(v)


class GroundedAcceptedOutput(BaseModel):
    """Envelope handed to packaging once a draft passes the grounding gate.

    Uses the snake_case wire names of the accepted-output payload.
    """

    model_config = ConfigDict(extra="ignore")

    ingest_run_id: str | None = None
    repo_ref: str | None = None
    commit_sha: str | None = None
    section_count: int | None = None
    subsection_count: int | None = None
    total_korean_chars: int | None = None
    source_doc_count: int | None = None
    trend_fact_count: int | None = None
    claim_count: int | None = None
    citation_count: int | None = None
    draft: WikiDraft
    grounding_report: dict[str, Any] | None = None
