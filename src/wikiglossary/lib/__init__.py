"""Glossary extraction internals: scanning, normalization and orchestration."""
