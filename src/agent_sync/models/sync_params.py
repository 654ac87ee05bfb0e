"""
Sync parameters model.

Defines validated CLI overrides for a sync run. Every field is
optional; unset fields fall back to the environment configuration.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Optional

from pydantic import BaseModel, Field, field_validator

REF_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_./-]*$")


class SyncParams(BaseModel):
	"""Validated CLI overrides for sync/list commands."""

	source: Optional[str] = Field(default=None,
	                              description="Source directory override")
	repo: Optional[str] = Field(default=None,
	                            description="Repository directory override")
	target: Optional[str] = Field(default=None,
	                              description="Tracked directory override")
	branch: Optional[str] = Field(default=None,
	                              description="Branch override")
	remote: Optional[str] = Field(default=None,
	                              description="Remote override")

	@field_validator("branch", "remote")
	@classmethod
	def validate_ref_name(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not REF_NAME_RE.match(v) or ".." in v or v.endswith(
		    (".", "/", ".lock")):
			raise ValueError(f"invalid git name: {v!r}")
		return v

	@field_validator("source", "repo")
	@classmethod
	def validate_non_empty_path(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not v.strip():
			raise ValueError("path must not be empty")
		return v

	@field_validator("target")
	@classmethod
	def validate_relative_target(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		p = PurePath(v)
		if not v.strip() or p.is_absolute() or ".." in p.parts:
			raise ValueError("target must be a relative path inside the repo")
		return v


__all__ = ["SyncParams"]
