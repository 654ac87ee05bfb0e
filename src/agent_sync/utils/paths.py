"""
Path utilities.

Keeps the tracked directory inside the repository and renders paths
under the user's home directory in their ``~/`` form.
"""

from __future__ import annotations

from pathlib import Path


def ensure_within(base: Path, path: Path) -> Path:
	"""
	Ensure a path is within the specified base directory.

	Parameters:
		base: The allowed base directory.
		path: The path to validate.

	Returns:
		The original path if valid.

	Raises:
		ValueError: If path escapes the base directory.
	"""
	resolved_base = base.resolve()
	resolved_path = path.resolve()
	if resolved_path == resolved_base or resolved_path.is_relative_to(
	    resolved_base):
		return path
	raise ValueError(f"Path {resolved_path} escapes base {resolved_base}")


def display_path(path: Path, home: Path | None = None) -> str:
	"""
	Render a path for messages, abbreviating the home directory as ``~``.

	Parameters:
		path: Path to render.
		home: Home directory; defaults to ``Path.home()``.

	Returns:
		``~/relative/part`` for paths under home, else the path as given.
	"""
	home = home if home is not None else Path.home()
	try:
		rel = path.resolve().relative_to(home.resolve())
	except ValueError:
		return str(path)
	if str(rel) == ".":
		return "~"
	return f"~/{rel.as_posix()}"


__all__ = ["ensure_within", "display_path"]
