"""
Error types raised by the sync procedure.

Every error is fatal: the CLI reports it and exits with ``exit_code``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class SyncError(Exception):
	"""Base class for all sync failures."""

	exit_code: int = 1


class NotAGitRepositoryError(SyncError):
	"""The working directory is not inside a git work tree."""

	def __init__(self, path: Path) -> None:
		super().__init__(f"Not in a git repository: {path}")
		self.path = path


class SourceDirectoryMissingError(SyncError):
	"""The external source directory does not exist."""

	def __init__(self, path: Path, label: str | None = None) -> None:
		super().__init__(f"{label or path} directory not found")
		self.path = path


class EmptySourceDirectoryError(SyncError):
	"""The external source directory has nothing to copy."""

	def __init__(self, path: Path, label: str | None = None) -> None:
		super().__init__(f"{label or path} contains no agent files")
		self.path = path


class TargetOutsideRepositoryError(SyncError):
	"""The tracked directory resolves outside the repository."""

	def __init__(self, target: Path, repo: Path) -> None:
		super().__init__(
		    f"Target directory {target} is outside repository {repo}")
		self.target = target


class FilesystemError(SyncError):
	"""Reading or writing a file in the source or tracked directory failed."""

	def __init__(self, action: str, path: Path, exc: OSError) -> None:
		super().__init__(f"Could not {action} {path}: {exc.strerror or exc}")
		self.path = path


class GitUnavailableError(SyncError):
	"""The git executable could not be started."""

	exit_code = 127

	def __init__(self, exc: OSError) -> None:
		super().__init__(f"Could not run git: {exc.strerror or exc}")


class GitCommandError(SyncError):
	"""A git command exited with a non-zero status."""

	def __init__(self, args: Sequence[str], returncode: int,
	             stderr: str = "") -> None:
		self.args_list = list(args)
		self.returncode = returncode
		self.stderr = stderr.strip()
		cmd = " ".join(["git", *self.args_list])
		msg = f"'{cmd}' failed with exit status {returncode}"
		if self.stderr:
			msg = f"{msg}: {self.stderr}"
		super().__init__(msg)

	@property
	def exit_code(self) -> int:  # type: ignore[override]
		# killed by a signal: report it the way a shell would
		if self.returncode < 0:
			return 128 - self.returncode
		return self.returncode or 1


__all__ = [
    "SyncError",
    "NotAGitRepositoryError",
    "SourceDirectoryMissingError",
    "EmptySourceDirectoryError",
    "TargetOutsideRepositoryError",
    "FilesystemError",
    "GitUnavailableError",
    "GitCommandError",
]
