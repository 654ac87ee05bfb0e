"""
Copy step of the sync procedure.

Copies the direct files of the source directory into the tracked
directory. The copy is additive: files that exist only in the tracked
directory are left alone.
"""

from __future__ import annotations

import filecmp
import shutil
from pathlib import Path
from typing import Callable, Literal, Optional

from agent_sync.errors import FilesystemError
from agent_sync.utils.logging import get_logger

logger = get_logger(__name__)

ProgressCallback = Callable[[str, str], None]
EntryState = Literal["new", "modified", "synced"]


def list_source_entries(source: Path) -> list[Path]:
	"""
	List the direct, non-hidden entries of a directory, sorted by name.

	Matches what a shell ``*`` glob expands to.
	"""
	return sorted(
	    (p for p in source.iterdir() if not p.name.startswith(".")),
	    key=lambda p: p.name,
	)


def count_source_entries(source: Path) -> int:
	"""Count direct, non-hidden entries, subdirectories included."""
	return len(list_source_entries(source))


def copy_agent_files(
    source: Path,
    target: Path,
    progress_cb: Optional[ProgressCallback] = None,
) -> list[Path]:
	"""
	Copy every direct file of source into target, overwriting.

	Subdirectories are skipped with a warning.

	Parameters:
		source: Directory to copy from.
		target: Tracked directory; created with parents if absent.
		progress_cb: Receives ("copied", msg) per file and
			("skipped", msg) per subdirectory.

	Returns:
		Destination paths written, in source name order.

	Raises:
		FilesystemError: target cannot be created or a copy fails.
	"""
	try:
		target.mkdir(parents=True, exist_ok=True)
	except OSError as exc:
		raise FilesystemError("create directory", target, exc) from exc
	written: list[Path] = []
	for entry in list_source_entries(source):
		if not entry.is_file():
			logger.warning("skipping non-file entry %s", entry)
			if progress_cb:
				progress_cb("skipped", f"{entry.name} (not a regular file)")
			continue
		dest = target / entry.name
		try:
			shutil.copy2(entry, dest)
		except OSError as exc:
			raise FilesystemError("copy to", dest, exc) from exc
		written.append(dest)
		logger.debug("copied %s -> %s", entry, dest)
		if progress_cb:
			progress_cb("copied", f"'{entry}' -> '{dest}'")
	return written


def compare_entry(source_file: Path, target: Path) -> EntryState:
	"""
	Compare a source file with its tracked copy.

	Returns:
		"new" when no tracked copy exists, "synced" when the bytes are
		identical, "modified" otherwise.
	"""
	dest = target / source_file.name
	if not dest.is_file():
		return "new"
	if filecmp.cmp(source_file, dest, shallow=False):
		return "synced"
	return "modified"


__all__ = [
    "ProgressCallback",
    "list_source_entries",
    "count_source_entries",
    "copy_agent_files",
    "compare_entry",
]
