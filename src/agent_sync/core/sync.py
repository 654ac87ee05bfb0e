"""
The sync procedure.

Brings the tracked directory in line with the source directory and
publishes the result to the remote's main branch. Steps run strictly
in order and the first failure aborts the run; side effects of the
steps that already completed are kept.
"""

from __future__ import annotations

from typing import Optional

from agent_sync.core.copier import (
    ProgressCallback,
    copy_agent_files,
    count_source_entries,
)
from agent_sync.core.git import GitRepo
from agent_sync.errors import (
    EmptySourceDirectoryError,
    FilesystemError,
    NotAGitRepositoryError,
    SourceDirectoryMissingError,
    TargetOutsideRepositoryError,
)
from agent_sync.models.config import Config
from agent_sync.models.sync_result import SyncOutcome, SyncResult
from agent_sync.utils.logging import get_logger
from agent_sync.utils.paths import display_path, ensure_within

logger = get_logger(__name__)

README_NAME = "README.md"
README_CONTENT = ("# Agents\n"
                  "\n"
                  "This repository contains Claude agent configuration files.\n")
INITIAL_COMMIT_MESSAGE = "Initial commit: Add README"

COMMIT_BODY = ("- Automated sync of agent configuration files\n"
               "- Ensures repository has latest agent definitions")
COMMIT_TRAILER = ("🤖 Generated with Claude Code\n"
                  "Co-Authored-By: Claude <noreply@anthropic.com>")


def build_commit_message(count: int, source_label: str) -> str:
	"""
	Build the sync commit message.

	Parameters:
		count: Number of direct entries in the source directory.
		source_label: Source directory as shown to humans.

	Returns:
		Summary line, blank line, fixed body, blank line, trailer.
	"""
	return (f"Sync {count} agent files from {source_label}\n\n"
	        f"{COMMIT_BODY}\n\n{COMMIT_TRAILER}")


def _emit(progress_cb: Optional[ProgressCallback], event: str,
          msg: str) -> None:
	logger.info("%s: %s", event, msg)
	if progress_cb:
		progress_cb(event, msg)


def _bootstrap_readme(repo: GitRepo) -> None:
	readme = repo.path / README_NAME
	try:
		readme.write_text(README_CONTENT, encoding="utf-8")
	except OSError as exc:
		raise FilesystemError("write", readme, exc) from exc
	repo.add(README_NAME)
	repo.commit(INITIAL_COMMIT_MESSAGE)


def sync_agents(
    config: Config,
    repo: GitRepo | None = None,
    progress_cb: Optional[ProgressCallback] = None,
) -> SyncResult:
	"""
	Run one sync of the source directory into the tracked directory.

	Parameters:
		config: Paths, branch and remote to use.
		repo: Git wrapper; defaults to GitRepo(config.repo_path).
		progress_cb: Receives (event, message) for each step.

	Returns:
		SyncResult describing what happened.

	Raises:
		NotAGitRepositoryError: repo_dir is not inside a work tree.
		SourceDirectoryMissingError: source_dir does not exist.
		EmptySourceDirectoryError: source_dir has no entries.
		GitCommandError: Any git command failed.
		GitUnavailableError: git could not be executed.
		FilesystemError: Writing the README or copying a file failed.
		TargetOutsideRepositoryError: target_dir resolves outside repo_dir.
	"""
	repo = repo or GitRepo(config.repo_path)
	source = config.source_path
	source_label = display_path(source)
	branch, remote = config.branch, config.remote

	_emit(progress_cb, "sync_started", "Starting agent files sync...")

	if not repo.is_work_tree():
		raise NotAGitRepositoryError(repo.path)
	if not source.is_dir():
		raise SourceDirectoryMissingError(source, source_label)
	try:
		source_count = count_source_entries(source)
	except OSError as exc:
		raise FilesystemError("read", source, exc) from exc
	if source_count == 0:
		raise EmptySourceDirectoryError(source, source_label)
	try:
		target = ensure_within(repo.path, repo.path / config.target_dir)
	except ValueError as exc:
		raise TargetOutsideRepositoryError(repo.path / config.target_dir,
		                                   repo.path) from exc

	bootstrapped = False
	pulled = False
	if repo.has_commits():
		_emit(progress_cb, "checkout", f"Ensuring we're on {branch} branch...")
		repo.checkout(branch)
		if repo.has_remote(remote):
			if repo.remote_has_branch(remote, branch):
				_emit(progress_cb, "pull",
				      f"Pulling latest changes from {remote}...")
				repo.pull(remote, branch)
				pulled = True
			else:
				_emit(
				    progress_cb, "remote_missing_branch",
				    f"Remote exists but no {branch} branch found - "
				    f"will push {branch} branch later")
		else:
			_emit(
			    progress_cb, "no_remote",
			    f"No {remote} remote found - working with local "
			    "repository only")
	else:
		_emit(progress_cb, "bootstrap",
		      "New repository detected - will create initial commit")
		_bootstrap_readme(repo)
		bootstrapped = True

	_emit(progress_cb, "copy", "Copying agent files...")
	copied = copy_agent_files(source, target, progress_cb=progress_cb)

	repo.add(config.target_dir)
	if not repo.has_staged_changes():
		_emit(progress_cb, "up_to_date",
		      "No changes detected - agents are already up to date")
		return SyncResult(
		    outcome=SyncOutcome.UP_TO_DATE,
		    copied=copied,
		    source_count=source_count,
		    bootstrapped=bootstrapped,
		    pulled=pulled,
		)

	_emit(progress_cb, "commit", "Creating commit...")
	repo.commit(build_commit_message(source_count, source_label))
	commit_sha = repo.head_sha()

	pushed = False
	if repo.has_remote(remote):
		_emit(progress_cb, "push", f"Pushing to {branch}...")
		repo.push(remote, branch)
		pushed = True
		_emit(progress_cb, "done",
		      f"Done! Agent files synced and pushed to {branch} branch.")
	else:
		_emit(progress_cb, "push_skipped",
		      f"No {remote} remote found - skipping push")
		_emit(progress_cb, "done",
		      f"Done! Agent files synced and committed to {branch} locally.")

	return SyncResult(
	    outcome=SyncOutcome.SYNCED,
	    copied=copied,
	    source_count=source_count,
	    bootstrapped=bootstrapped,
	    pulled=pulled,
	    pushed=pushed,
	    commit_sha=commit_sha,
	)


__all__ = [
    "sync_agents",
    "build_commit_message",
    "README_CONTENT",
    "INITIAL_COMMIT_MESSAGE",
]
