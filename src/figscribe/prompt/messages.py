"""Host message handling: one ``generate`` message in, one ``prompt`` message out."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from figscribe.nodes.models import Node
from figscribe.prompt.builder import PromptBuilder
from figscribe.prompt.models import GenerateRequest, PromptResponse

logger = logging.getLogger(__name__)


def handle_message(
    message: GenerateRequest | Mapping[str, Any],
    selection: Sequence[Node],
    builder: PromptBuilder | None = None,
) -> PromptResponse | None:
    """Answer a host message for the current selection.

    Messages whose type is not ``generate`` are ignored and yield None.
    Raises ``pydantic.ValidationError`` for a malformed generate message.
    """
    msg_type = message.type if isinstance(message, GenerateRequest) else message.get("type")
    if msg_type != "generate":
        logger.debug("ignoring message of type %r", msg_type)
        return None

    if isinstance(message, GenerateRequest):
        request = message
    else:
        request = GenerateRequest.model_validate(dict(message))

    builder = builder or PromptBuilder()
    return PromptResponse(prompt=builder.build(selection, request))
