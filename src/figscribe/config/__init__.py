from .loader import load_config
from .models import (
    FigscribeConfig,
    PromptConfig,
    RenderConfig,
)

__all__ = [
    "FigscribeConfig",
    "PromptConfig",
    "RenderConfig",
    "load_config",
]
