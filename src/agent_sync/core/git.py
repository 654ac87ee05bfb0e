"""
Thin wrapper over the git command line.

Each method runs one git command to completion in the repository
directory. Failing commands raise GitCommandError; nothing is retried.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from agent_sync.errors import GitCommandError, GitUnavailableError
from agent_sync.utils.logging import get_logger

logger = get_logger(__name__)


class GitRepo:
	"""A git working tree addressed by directory."""

	def __init__(self, path: str | Path = ".") -> None:
		self.path = Path(path)

	def run(self, *args: str,
	        check: bool = True) -> subprocess.CompletedProcess[str]:
		"""
		Run a git command in the repository directory.

		Parameters:
			args: Arguments after ``git``.
			check: Raise GitCommandError on a non-zero exit status.

		Returns:
			The completed process with decoded stdout/stderr.

		Raises:
			GitCommandError: If check is set and the command fails.
			GitUnavailableError: If git cannot be executed.
		"""
		logger.debug("git %s (cwd=%s)", " ".join(args), self.path)
		try:
			proc = subprocess.run(
			    ["git", *args],
			    cwd=str(self.path),
			    capture_output=True,
			    text=True,
			    errors="replace",
			    env={
			        **os.environ, "GIT_TERMINAL_PROMPT": "0"
			    },
			)
		except OSError as exc:
			raise GitUnavailableError(exc) from exc
		if proc.stdout.strip():
			logger.debug("git stdout: %s", proc.stdout.strip())
		if proc.stderr.strip():
			logger.debug("git stderr: %s", proc.stderr.strip())
		if check and proc.returncode != 0:
			raise GitCommandError(args, proc.returncode, proc.stderr)
		return proc

	def _succeeds(self, *args: str) -> bool:
		return self.run(*args, check=False).returncode == 0

	def is_work_tree(self) -> bool:
		"""Return True when path is inside a git working tree."""
		if not self.path.is_dir():
			return False
		return self._succeeds("rev-parse", "--git-dir")

	def top_level(self) -> Path:
		return Path(self.run("rev-parse", "--show-toplevel").stdout.strip())

	def has_commits(self) -> bool:
		return self._succeeds("rev-parse", "--verify", "HEAD")

	def head_sha(self) -> str:
		return self.run("rev-parse", "HEAD").stdout.strip()

	def checkout(self, branch: str) -> None:
		self.run("checkout", branch)

	def has_remote(self, remote: str) -> bool:
		return self._succeeds("remote", "get-url", remote)

	def remote_has_branch(self, remote: str, branch: str) -> bool:
		"""Return True when the remote advertises refs/heads/<branch>."""
		out = self.run("ls-remote", "--heads", remote, branch).stdout
		ref = f"refs/heads/{branch}"
		return any(
		    line.split()[-1] == ref for line in out.splitlines()
		    if line.strip())

	def pull(self, remote: str, branch: str) -> None:
		self.run("pull", remote, branch)

	def add(self, *paths: str | Path) -> None:
		self.run("add", "--", *(str(p) for p in paths))

	def commit(self, message: str) -> None:
		self.run("commit", "-m", message)

	def has_staged_changes(self) -> bool:
		"""Return True when the index differs from HEAD."""
		proc = self.run("diff", "--cached", "--quiet", check=False)
		if proc.returncode not in (0, 1):
			raise GitCommandError(("diff", "--cached", "--quiet"),
			                      proc.returncode, proc.stderr)
		return proc.returncode == 1

	def push(self, remote: str, branch: str) -> None:
		"""Push the current branch to <remote>/<branch>."""
		self.run("push", remote, f"HEAD:{branch}")


__all__ = ["GitRepo"]
