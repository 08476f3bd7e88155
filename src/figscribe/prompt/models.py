"""Pydantic models for prompt requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

# Database values the host sends when the user picked no database.
NO_DATABASE_VALUES = frozenset({"", "none", "null"})


class GenerateRequest(BaseModel):
    """A ``generate`` message from the host UI."""

    type: str = "generate"
    framework: str = Field(min_length=1)
    database: str | None = None
    description: str = ""

    @field_validator("framework")
    @classmethod
    def validate_framework(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("framework cannot be empty or whitespace")
        return v.strip()

    @property
    def database_name(self) -> str | None:
        """The requested database, or None when the host sent a no-database value."""
        if self.database is None or self.database.strip().lower() in NO_DATABASE_VALUES:
            return None
        return self.database.strip()


class PromptResponse(BaseModel):
    """The ``prompt`` message posted back to the host UI."""

    type: Literal["prompt"] = "prompt"
    prompt: str
