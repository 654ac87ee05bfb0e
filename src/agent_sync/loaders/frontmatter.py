"""
YAML frontmatter parsing utilities.

Agent definition files open with a YAML block between ``---``
delimiters followed by the prompt body.
"""

from __future__ import annotations

from typing import Any

import yaml

from agent_sync.utils.logging import get_logger

logger = get_logger(__name__)


def split_frontmatter(text: str) -> tuple[dict[str, Any], str]:
	"""
	Split YAML frontmatter from markdown body.

	Parameters:
		text: The full markdown file content.

	Returns:
		Tuple of (frontmatter dict, body text). Returns an empty dict
		and the original text if no valid frontmatter is found.
	"""
	lines = text.splitlines()

	# Need at least 3 lines: ---, content, ---
	if len(lines) < 3 or lines[0].strip() != "---":
		return {}, text

	end_idx = -1
	for i, ln in enumerate(lines[1:], start=1):
		if ln.strip() == "---":
			end_idx = i
			break

	if end_idx < 0:
		return {}, text

	fm_text = "\n".join(lines[1:end_idx])
	body = "\n".join(lines[end_idx + 1:])

	try:
		meta = yaml.safe_load(fm_text) or {}
	except yaml.YAMLError as exc:
		logger.warning("invalid frontmatter: %s", exc)
		return {}, text

	if not isinstance(meta, dict):
		return {}, text

	return meta, body.lstrip("\n")


__all__ = ["split_frontmatter"]
