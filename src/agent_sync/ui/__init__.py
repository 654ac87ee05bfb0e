"""User interface components.

Key modules:
    - console: Rich-based rendering of sync progress and agent tables
"""

from agent_sync.ui.console import SyncConsole, render_agents_table

__all__ = ["SyncConsole", "render_agents_table"]
