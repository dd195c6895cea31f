"""Glossary configuration loading.

Configuration comes from an optional YAML file and from environment
variable overrides, validated into a GlossaryConfig. Precedence, highest
first: environment variables, YAML file, model defaults.

Example YAML:

    drop_placeholders: true
    pattern:
      max_phrase_words: 3
      include_titles: false
      boundary_words: [와, 과, 및]
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from wikiglossary.config.defaults import ENV_VAR_MAP
from wikiglossary.config.validator import flatten_pydantic_errors
from wikiglossary.lib.errors import ConfigError, FileNotFoundError
from wikiglossary.models.config import GlossaryConfig

logger = logging.getLogger(__name__)

# Fields of TermPatternConfig that may be overridden from the environment
_PATTERN_FIELDS = {"max_phrase_words", "include_titles", "include_reverse_pairs"}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value (int, None, or bool)

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "max_phrase_words":
        if value.strip().lower() in ("", "none", "unlimited"):
            return None
        return int(value)
    return value.strip().lower() in ("true", "1", "yes", "on")


def _env_overrides(env_vars: Mapping[str, str]) -> dict[str, Any]:
    """Collect config overrides from environment variables.

    Raises:
        ConfigError: If a set variable cannot be parsed
    """
    overrides: dict[str, Any] = {}
    pattern_overrides: dict[str, Any] = {}

    for field_name, env_var_name in ENV_VAR_MAP.items():
        if env_var_name not in env_vars:
            continue
        try:
            value = _parse_env_value(field_name, env_vars[env_var_name])
        except ValueError as e:
            raise ConfigError(
                env_var_name, f"Invalid value {env_vars[env_var_name]!r}: {e}"
            ) from e
        if field_name in _PATTERN_FIELDS:
            pattern_overrides[field_name] = value
        else:
            overrides[field_name] = value
        logger.debug(f"Config override from {env_var_name}: {field_name}={value!r}")

    if pattern_overrides:
        overrides["pattern"] = pattern_overrides
    return overrides


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigError: If the file is unreadable or not a YAML mapping
    """
    if not path.exists():
        raise FileNotFoundError(
            str(path), "Check the --config path or remove the option to use defaults."
        )
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError("yaml_parse", f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError("file_io", f"Failed to read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(
            "root", f"{path} must contain a YAML mapping, got {type(content).__name__}"
        )
    return content


def _apply_overrides(
    data: dict[str, Any], overrides: dict[str, Any]
) -> dict[str, Any]:
    """Layer environment overrides onto YAML data.

    Pattern overrides update the YAML ``pattern`` section field by field, so
    WIKIGLOSSARY_MAX_PHRASE_WORDS keeps the file's boundary_words.
    """
    merged = dict(data)
    for key, value in overrides.items():
        if key == "pattern" and isinstance(merged.get("pattern"), Mapping):
            merged["pattern"] = {**merged["pattern"], **value}
        else:
            merged[key] = value
    return merged


def load_glossary_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> GlossaryConfig:
    """Load a GlossaryConfig from YAML and environment overrides.

    Args:
        path: Optional YAML file path
        env: Environment mapping, defaults to os.environ

    Returns:
        Validated GlossaryConfig

    Raises:
        FileNotFoundError: If ``path`` does not exist
        ConfigError: If the YAML or any override is invalid
    """
    data: dict[str, Any] = _read_yaml(Path(path)) if path is not None else {}
    data = _apply_overrides(data, _env_overrides(os.environ if env is None else env))

    try:
        config = GlossaryConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError("glossary", "\n".join(flatten_pydantic_errors(e))) from e

    logger.debug(f"Loaded glossary config: {config.model_dump()}")
    return config
