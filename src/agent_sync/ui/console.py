"""
Terminal output for the sync CLI.

Renders progress events from the sync procedure as colored, emoji
prefixed lines and the agent listing as a Rich table.
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from agent_sync.models.agent_config import AgentConfig

# event -> (emoji, style)
_EVENT_STYLES: dict[str, tuple[str, str]] = {
    "sync_started": ("🤖", "blue"),
    "checkout": ("📥", "yellow"),
    "pull": ("📥", "yellow"),
    "remote_missing_branch": ("⚠️ ", "yellow"),
    "no_remote": ("⚠️ ", "yellow"),
    "push_skipped": ("⚠️ ", "yellow"),
    "bootstrap": ("📝", "yellow"),
    "copy": ("📋", "yellow"),
    "commit": ("📝", "yellow"),
    "push": ("🚀", "yellow"),
    "up_to_date": ("✅", "green"),
    "done": ("🎉", "green"),
    "error": ("❌", "red"),
}

_STATE_STYLES = {"new": "green", "modified": "yellow", "synced": "dim"}


def _color_style(name: str | None) -> str:
	"""Return name if Rich knows it as a color, else no style."""
	if not name:
		return ""
	try:
		Color.parse(name)
	except ColorParseError:
		return ""
	return name.lower()


class SyncConsole:
	"""Print sync progress events to a Rich console."""

	def __init__(self, console: Console | None = None) -> None:
		self.console = console or Console(highlight=False, soft_wrap=True)
		self.events: list[tuple[str, str]] = []

	def update(self, event: str, msg: str) -> None:
		"""Render one progress event."""
		self.events.append((event, msg))
		if event in ("copied", "skipped"):
			# per-file lines, like `cp -v`
			style = "dim" if event == "copied" else "yellow"
			self.console.print(Text(f"  {msg}", style=style))
			return
		emoji, style = _EVENT_STYLES.get(event, ("•", "white"))
		self.console.print(Text(f"{emoji} {msg}", style=style))

	def error(self, msg: str) -> None:
		self.update("error", f"Error: {msg}")


def render_agents_table(agents: Sequence[AgentConfig],
                        states: dict[str, str] | None = None) -> Table:
	"""
	Render agent definitions as a table.

	Parameters:
		agents: Loaded agent definitions.
		states: Optional map of file name to "new"/"modified"/"synced".

	Returns:
		Rich Table with one row per agent.
	"""
	states = states or {}
	table = Table(box=box.ROUNDED, expand=True, show_header=True)
	table.add_column("Name", style="bold")
	table.add_column("File")
	table.add_column("Model")
	table.add_column("Color")
	table.add_column("Description")
	table.add_column("State")

	for agent in agents:
		desc = agent.description or ""
		desc = desc[:77] + "..." if len(desc) > 80 else desc
		state = states.get(agent.file_name or "", "-")
		color = Text(agent.color or "-", style=_color_style(agent.color))
		table.add_row(
		    agent.name,
		    agent.file_name or "-",
		    agent.model or "-",
		    color,
		    desc,
		    Text(state, style=_STATE_STYLES.get(state, "")),
		)
	return table


__all__ = ["SyncConsole", "render_agents_table"]
