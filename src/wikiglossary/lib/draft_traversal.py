"""Flatten a draft into an ordered list of text fields.

Traversal order decides which occurrence of a term counts as first, so it is
fixed: overview, then per section its summary followed by each subsection
body, then claim statements, then citation rationales.
"""

from dataclasses import dataclass

from wikiglossary.models.draft import WikiDraft


@dataclass(frozen=True)
class DraftTextField:
    """A text-bearing draft field and where it lives.

    Attributes:
        location: Dotted path in camelCase, e.g. ``sections[0].summaryKo``
        text: Field value
    """

    location: str
    text: str


def collect_draft_text(
    draft: WikiDraft,
    include_titles: bool = False,
) -> list[DraftTextField]:
    """Collect a draft's non-blank text fields in traversal order.

    Args:
        draft: Draft to traverse
        include_titles: Also visit section titles (before each summary) and
            subsection titles (before each body)

    Returns:
        Ordered list of DraftTextField; blank or absent fields are skipped
    """
    fields: list[DraftTextField] = []

    def add(location: str, text: str | None) -> None:
        if text and text.strip():
            fields.append(DraftTextField(location=location, text=text))

    add("overviewKo", draft.overview_ko)

    for i, section in enumerate(draft.sections):
        if include_titles:
            add(f"sections[{i}].titleKo", section.title_ko)
        add(f"sections[{i}].summaryKo", section.summary_ko)
        for j, subsection in enumerate(section.subsections):
            prefix = f"sections[{i}].subsections[{j}]"
            if include_titles:
                add(f"{prefix}.titleKo", subsection.title_ko)
            add(f"{prefix}.bodyKo", subsection.body_ko)

    for i, claim in enumerate(draft.claims):
        add(f"claims[{i}].statementKo", claim.statement_ko)

    for i, citation in enumerate(draft.citations):
        add(f"citations[{i}].rationale", citation.rationale)

    return fields
