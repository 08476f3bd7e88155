"""Load an exported node selection from JSON or YAML."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from .models import Node

logger = logging.getLogger(__name__)

_NODE_LIST = TypeAdapter(list[Node])

_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_nodes(raw: object) -> list[Node]:
    """Validate already-decoded data into a node list.

    Accepts a list of nodes, a single node mapping, or a mapping with a
    ``selection`` (or ``nodes``) key holding the list. Raises
    ``pydantic.ValidationError`` on malformed nodes.
    """
    if isinstance(raw, dict):
        if "selection" in raw:
            raw = raw["selection"]
        elif "nodes" in raw:
            raw = raw["nodes"]
        else:
            raw = [raw]
    if raw is None:
        raw = []
    return _NODE_LIST.validate_python(raw)


def load_nodes(path: str | Path) -> list[Node]:
    """Read a node export file. YAML for .yaml/.yml, JSON otherwise."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
        nodes = parse_nodes(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    except ValidationError as e:
        raise ValueError(f"Invalid nodes in {path}: {e}") from e

    logger.debug("loaded %d top-level nodes from %s", len(nodes), path)
    return nodes
