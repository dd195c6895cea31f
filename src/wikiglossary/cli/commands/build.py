"""Click command for building a glossary from a draft file.

Implements ``wikiglossary build``, which reads a draft (or a grounded
accepted-output envelope) from JSON and prints the sorted glossary.
"""

import click

from wikiglossary.cli.common import (
    OUTPUT_FORMATS,
    load_config,
    read_json_file,
    render_entries,
)
from wikiglossary.lib.errors import WikiGlossaryError
from wikiglossary.lib.glossary_builder import (
    build_glossary_from_accepted_output,
    build_glossary_from_draft,
)


@click.command(name="build")
@click.argument("draft_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(),
    help="Path to glossary configuration YAML",
)
@click.option(
    "--accepted",
    is_flag=True,
    help="Input is an accepted-output envelope with a 'draft' field",
)
@click.option(
    "--format",
    "output_format",
    default="json",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (default: json)",
)
def build(
    draft_file: str,
    config_path: str | None,
    accepted: bool,
    output_format: str,
) -> None:
    """Build a glossary from DRAFT_FILE.

    \b
    EXAMPLES:

        Print the glossary as JSON:
            wikiglossary build draft.json

        Read an accepted-output envelope and print a table:
            wikiglossary build accepted.json --accepted --format table
    """
    config = load_config(config_path)
    payload = read_json_file(draft_file)

    try:
        if accepted:
            entries = build_glossary_from_accepted_output(payload, config)
        else:
            entries = build_glossary_from_draft(payload, config)
    except WikiGlossaryError as e:
        raise click.ClickException(str(e)) from e

    click.echo(render_entries(entries, output_format))
