"""Command line interface for wikiglossary."""
