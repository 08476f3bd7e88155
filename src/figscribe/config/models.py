from pydantic import BaseModel, Field
from typing import Literal


class RenderConfig(BaseModel):
    indent_width: int = Field(default=2, ge=0, le=8)


class PromptConfig(BaseModel):
    default_framework: str = Field(default="React", min_length=1)
    default_database: str | None = None
    no_selection_notice: str = "No nodes selected."


class FigscribeConfig(BaseModel):
    render: RenderConfig = Field(default_factory=RenderConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
