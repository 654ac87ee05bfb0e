from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

if TYPE_CHECKING:
	from agent_sync.models.sync_params import SyncParams


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False,
	                                  populate_by_name=True)

	source_dir: str = Field(
	    "~/.claude/agents",
	    alias="AGENT_SYNC_SOURCE_DIR",
	    description="Directory holding the authoritative agent files",
	)
	repo_dir: str = Field(
	    ".",
	    alias="AGENT_SYNC_REPO_DIR",
	    description="Git working tree to sync into",
	)
	target_dir: str = Field(
	    "agents",
	    alias="AGENT_SYNC_TARGET_DIR",
	    description="Tracked directory, relative to repo_dir",
	)
	branch: str = Field(
	    "main",
	    alias="AGENT_SYNC_BRANCH",
	    description="Branch that receives the sync commit",
	)
	remote: str = Field(
	    "origin",
	    alias="AGENT_SYNC_REMOTE",
	    description="Remote to pull from and push to",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Log level for diagnostics")

	@field_validator("source_dir", "repo_dir", "target_dir", "branch",
	                 "remote")
	@classmethod
	def validate_non_empty(cls, v: Any, info: ValidationInfo) -> Any:
		if not str(v).strip():
			raise ValueError(f"{info.field_name} must not be empty")
		return str(v).strip()

	@property
	def source_path(self) -> Path:
		"""Return source_dir with ``~`` expanded."""
		return Path(self.source_dir).expanduser()

	@property
	def repo_path(self) -> Path:
		"""Return repo_dir with ``~`` expanded."""
		return Path(self.repo_dir).expanduser()

	@property
	def target_path(self) -> Path:
		"""Return the tracked directory inside repo_path."""
		return self.repo_path / self.target_dir

	def apply_overrides(self, params: "SyncParams") -> None:
		"""Apply CLI overrides from SyncParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't set.

		Parameters:
			params: Validated sync parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("source", "source_dir"),
		    ("repo", "repo_dir"),
		    ("target", "target_dir"),
		    ("branch", "branch"),
		    ("remote", "remote"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]
