"""
Agent configuration model.

Defines the AgentConfig Pydantic model for agent definitions
loaded from markdown frontmatter.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class AgentConfig(BaseModel):
	"""Agent configuration loaded from markdown frontmatter."""

	name: str = Field(description="Agent name")
	description: str | None = Field(
	    default=None, description="Short description of the agent")
	model: str | None = Field(default=None, description="Model override")
	color: str | None = Field(default=None, description="Display color")
	tools: list[str] = Field(default_factory=list,
	                         description="Available tools")
	prompt: str = Field(default="", description="Agent prompt body content")
	file_name: str | None = Field(default=None,
	                              description="Source file name")

	@field_validator("name", "description", "model", "color", mode="before")
	@classmethod
	def coerce_str(cls, v: Any) -> Any:
		# YAML turns bare values like `yes` or `4` into non-strings
		if v is None or isinstance(v, str):
			return v
		return str(v)

	@field_validator("tools", mode="before")
	@classmethod
	def split_tools(cls, v: Any) -> list[str]:
		"""Normalize tools to a list regardless of input format."""
		if v is None or v == "":
			return []
		if isinstance(v, (list, tuple)):
			return [str(t).strip() for t in v if str(t).strip()]
		return [t.strip() for t in str(v).split(",") if t.strip()]


__all__ = ["AgentConfig"]
