"""Click command for normalizing a list of glossary candidates."""

import click

from wikiglossary.cli.common import (
    OUTPUT_FORMATS,
    load_config,
    read_json_file,
    render_entries,
)
from wikiglossary.lib.glossary_builder import sort_glossary_entries
from wikiglossary.lib.normalizer import normalize_glossary_entries


@click.command(name="normalize")
@click.argument("entries_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(),
    help="Path to glossary configuration YAML",
)
@click.option(
    "--sort",
    "sort_entries",
    is_flag=True,
    help="Sort entries by English term instead of first-seen order",
)
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default: json)",
)
def normalize(
    entries_file: str,
    config_path: str | None,
    sort_entries: bool,
    output_format: str,
) -> None:
    """Validate and deduplicate the candidates in ENTRIES_FILE.

    ENTRIES_FILE holds a JSON list of objects with termKo, termEn and
    definition. Malformed objects are dropped silently.
    """
    config = load_config(config_path)
    payload = read_json_file(entries_file)
    if not isinstance(payload, list):
        raise click.ClickException(f"{entries_file} must contain a JSON list")

    entries = normalize_glossary_entries(payload, config)
    if sort_entries:
        entries = sort_glossary_entries(entries)

    click.echo(render_entries(entries, output_format))
