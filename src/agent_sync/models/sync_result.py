"""
Sync result model.

Defines the outcome of a single sync run.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class SyncOutcome(str, Enum):
	"""Terminal state of a successful sync run."""

	SYNCED = "synced"
	UP_TO_DATE = "up_to_date"


class SyncResult(BaseModel):
	"""What a sync run did."""

	outcome: SyncOutcome
	copied: list[Path] = Field(default_factory=list,
	                           description="Destination paths written")
	source_count: int = Field(0, description="Direct source entries")
	bootstrapped: bool = Field(False,
	                           description="Initial commit was created")
	pulled: bool = Field(False, description="Remote branch was pulled")
	pushed: bool = Field(False, description="Commit was pushed")
	commit_sha: str | None = Field(default=None,
	                               description="Sync commit, if any")

	@property
	def committed(self) -> bool:
		return self.outcome is SyncOutcome.SYNCED


__all__ = ["SyncOutcome", "SyncResult"]
