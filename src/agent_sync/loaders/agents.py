"""
Agent definition loader.

Loads agent definitions from markdown files with YAML frontmatter
carrying the agent's name, description, model and color.
"""

from __future__ import annotations

from pathlib import Path

from agent_sync.core.copier import list_source_entries
from agent_sync.loaders.frontmatter import split_frontmatter
from agent_sync.models.agent_config import AgentConfig

_FIELDS = ("name", "description", "model", "color", "tools")


def load_agent(path: str | Path) -> AgentConfig:
	"""
	Load an agent definition from a markdown file with frontmatter.

	Unknown frontmatter keys are ignored. The file stem is used as the
	name when the frontmatter does not set one.

	Parameters:
		path: Path to the agent markdown file.

	Non-UTF-8 bytes are replaced rather than rejected.

	Returns:
		AgentConfig with parsed metadata and prompt body.
	"""
	path = Path(path)
	# agent files are not validated; undecodable bytes become U+FFFD
	raw = path.read_text(encoding="utf-8", errors="replace")
	meta, body = split_frontmatter(raw)
	fields = {k: meta[k] for k in _FIELDS if k in meta}
	if not fields.get("name"):
		fields["name"] = path.stem
	return AgentConfig(prompt=body, file_name=path.name, **fields)


def load_agents(directory: str | Path) -> list[AgentConfig]:
	"""Load every direct, non-hidden file in a directory, sorted by name."""
	return [
	    load_agent(p) for p in list_source_entries(Path(directory))
	    if p.is_file()
	]


__all__ = ["load_agent", "load_agents"]
