"""
Agent Sync models.

This subpackage contains Pydantic models for configuration, CLI
parameters, agent definitions and sync results.

Key models:
    - Config: Application configuration loaded from environment
    - SyncParams: CLI overrides for a sync run
    - AgentConfig: Agent definition loaded from a markdown file
    - SyncResult: Outcome of a sync run
"""

from .config import Config, load_env
from .sync_params import SyncParams
from .agent_config import AgentConfig
from .sync_result import SyncOutcome, SyncResult

__all__ = [
    "Config",
    "load_env",
    "SyncParams",
    "AgentConfig",
    "SyncOutcome",
    "SyncResult",
]
