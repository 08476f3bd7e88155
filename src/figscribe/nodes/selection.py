"""Selection filtering applied before a selection is rendered."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import SUPPORTED_KINDS, Node

logger = logging.getLogger(__name__)


def select_supported(selection: Sequence[Node]) -> list[Node]:
    """Keep only top-level nodes of a kind the renderer describes.

    Order is preserved. Visibility is not considered here; the renderer
    drops invisible nodes itself.
    """
    kept = [node for node in selection if node.type in SUPPORTED_KINDS]
    dropped = len(selection) - len(kept)
    if dropped:
        logger.debug("dropped %d unsupported node(s) from selection", dropped)
    return kept
