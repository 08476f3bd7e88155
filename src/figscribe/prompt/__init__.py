"""Prompt assembly and host message handling."""

from figscribe.prompt.builder import PromptBuilder, build_prompt
from figscribe.prompt.messages import handle_message
from figscribe.prompt.models import GenerateRequest, PromptResponse

__all__ = [
    "GenerateRequest",
    "PromptBuilder",
    "PromptResponse",
    "build_prompt",
    "handle_message",
]
