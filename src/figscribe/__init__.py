"""figscribe - describe design-tool node trees as text for code-generation prompts."""

from figscribe.config import FigscribeConfig, load_config
from figscribe.nodes import Node, load_nodes, parse_nodes, select_supported
from figscribe.prompt import GenerateRequest, PromptBuilder, PromptResponse, build_prompt, handle_message
from figscribe.render import render_node, render_nodes

__version__ = "0.1.0"

__all__ = [
    "FigscribeConfig",
    "GenerateRequest",
    "Node",
    "PromptBuilder",
    "PromptResponse",
    "build_prompt",
    "handle_message",
    "load_config",
    "load_nodes",
    "parse_nodes",
    "render_node",
    "render_nodes",
    "select_supported",
]
