"""Core sync logic.

Key modules:
    - git: Subprocess wrapper over the git command line
    - copier: Non-recursive, additive file copy
    - sync: The sync procedure via sync_agents()
"""

from agent_sync.core.git import GitRepo
from agent_sync.core.copier import (
    list_source_entries,
    count_source_entries,
    copy_agent_files,
    compare_entry,
)
from agent_sync.core.sync import sync_agents, build_commit_message

__all__ = [
    # git
    "GitRepo",
    # copier
    "list_source_entries",
    "count_source_entries",
    "copy_agent_files",
    "compare_entry",
    # sync
    "sync_agents",
    "build_commit_message",
]
