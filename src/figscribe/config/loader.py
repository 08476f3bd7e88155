"""Locate, read and validate figscribe.yaml."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import FigscribeConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG = Path("figscribe.yaml")
USER_CONFIG = Path(".figscribe") / "config.yaml"

# ${NAME} or ${NAME:-fallback}
_ENV_REF = re.compile(r"\$\{(?P<name>\w+)(?::-(?P<default>[^}]*))?\}")


def load_config(cli_path: str | None = None) -> FigscribeConfig:
    """Return the first non-empty config found, or the built-in defaults.

    Lookup order is the ``--config`` path, ``./figscribe.yaml``, then
    ``~/.figscribe/config.yaml``. An explicit path that does not exist is an
    error; the implicit locations are simply skipped.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in _candidate_paths(cli_path):
        raw = _read_config_file(path)
        if raw is None:
            continue
        try:
            config = FigscribeConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    return FigscribeConfig()


def _candidate_paths(cli_path: str | None) -> Iterator[Path]:
    if cli_path:
        yield Path(cli_path)
    yield PROJECT_CONFIG
    yield Path.home() / USER_CONFIG


def _read_config_file(path: Path) -> dict[str, Any] | None:
    """Parsed mapping from ``path``; None when the file is absent or empty."""
    if not path.is_file():
        return None
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return raw


def _expand_env_vars(obj: Any) -> Any:
    """Substitute ``${NAME}`` / ``${NAME:-fallback}`` in every string value.

    As in the shell, the fallback also applies to a variable set to the
    empty string. Unset variables without a fallback become the empty string.
    """
    match obj:
        case str():
            return _ENV_REF.sub(lambda m: os.environ.get(m["name"]) or m["default"] or "", obj)
        case dict():
            return {key: _expand_env_vars(value) for key, value in obj.items()}
        case list():
            return [_expand_env_vars(item) for item in obj]
        case _:
            return obj


# Written by `figscribe config init`
DEFAULT_CONFIG_TEMPLATE = """\
# figscribe.yaml
# String values may reference environment variables as ${NAME} or ${NAME:-fallback}.

render:
  indent_width: 2              # spaces per nesting level, 0-8

prompt:
  default_framework: "React"
  # default_database: "${FIGSCRIBE_DATABASE:-PostgreSQL}"
  no_selection_notice: "No nodes selected."

log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
