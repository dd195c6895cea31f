"""Entry point for the ``wikiglossary`` command."""

import logging
import os

import click

from wikiglossary import __version__
from wikiglossary.cli.commands.build import build
from wikiglossary.cli.commands.normalize import normalize
from wikiglossary.config.defaults import LOG_LEVEL_ENV_VAR


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(__version__, prog_name="wikiglossary")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Extract bilingual glossaries from generated wiki drafts.

    \b
    EXAMPLES:

        Build a glossary from a draft:
            wikiglossary build draft.json

        Normalize a curated term list:
            wikiglossary normalize terms.json --sort
    """
    _configure_logging(verbose)


main.add_command(build)
main.add_command(normalize)


if __name__ == "__main__":  # pragma: no cover
    main()
