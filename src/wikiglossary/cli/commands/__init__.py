"""Click commands for the wikiglossary CLI."""
