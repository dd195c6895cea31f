"""Configuration defaults, loading and validation for glossary extraction.

Main components:
- defaults: Default pattern rules and environment variable names
- loader.load_glossary_config: YAML + environment driven GlossaryConfig
- validator.flatten_pydantic_errors: Readable pydantic error messages
"""
