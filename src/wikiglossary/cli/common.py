"""Shared helpers for wikiglossary CLI commands."""

import json
import re
from pathlib import Path
from typing import Any

import click

from wikiglossary.config.loader import load_glossary_config
from wikiglossary.lib.errors import WikiGlossaryError
from wikiglossary.models.config import GlossaryConfig
from wikiglossary.models.glossary import GlossaryEntry

OUTPUT_FORMATS = ["json", "table"]

_CELL_BREAK_RE = re.compile(r"[\t\r\n]+")


def read_json_file(path: str) -> Any:
    """Read and parse a JSON input file.

    Raises:
        click.ClickException: If the file is not valid JSON
    """
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"{path} is not valid JSON: {e}") from e


def load_config(config_path: str | None) -> GlossaryConfig:
    """Load glossary config, reporting failures as click errors."""
    try:
        return load_glossary_config(config_path)
    except WikiGlossaryError as e:
        raise click.ClickException(str(e)) from e


def _table_cell(value: str) -> str:
    """Replace tabs and line breaks so a value stays in one table cell."""
    return _CELL_BREAK_RE.sub(" ", value)


def render_entries(entries: list[GlossaryEntry], output_format: str) -> str:
    """Render entries as JSON (camelCase keys) or a tab-separated table."""
    if output_format == "table":
        lines = ["termKo\ttermEn\tdefinition"]
        lines.extend(
            "\t".join(
                _table_cell(value)
                for value in (entry.term_ko, entry.term_en, entry.definition)
            )
            for entry in entries
        )
        return "\n".join(lines)
    return json.dumps(
        [entry.to_dict() for entry in entries], ensure_ascii=False, indent=2
    )
