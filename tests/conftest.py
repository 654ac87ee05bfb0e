"""Shared fixtures: isolated git environment and throwaway repositories."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

_ENV_VARS = (
    "AGENT_SYNC_SOURCE_DIR",
    "AGENT_SYNC_REPO_DIR",
    "AGENT_SYNC_TARGET_DIR",
    "AGENT_SYNC_BRANCH",
    "AGENT_SYNC_REMOTE",
    "LOG_LEVEL",
)


def git(cwd: Path, *args: str) -> str:
	"""Run git in cwd and return stripped stdout; fail the test on error."""
	proc = subprocess.run(["git", *args], cwd=str(cwd), capture_output=True,
	                      text=True, check=True)
	return proc.stdout.strip()


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
	"""Pin HOME, git identity and config so tests never touch the user's."""
	home_dir = tmp_path / "home"
	home_dir.mkdir()
	monkeypatch.setenv("HOME", str(home_dir))
	monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
	monkeypatch.setenv("GIT_AUTHOR_NAME", "Test Author")
	monkeypatch.setenv("GIT_AUTHOR_EMAIL", "author@example.com")
	monkeypatch.setenv("GIT_COMMITTER_NAME", "Test Author")
	monkeypatch.setenv("GIT_COMMITTER_EMAIL", "author@example.com")
	for name in _ENV_VARS:
		monkeypatch.delenv(name, raising=False)
	return home_dir


@pytest.fixture
def source_dir(home) -> Path:
	"""The default agent source directory, ~/.claude/agents."""
	d = home / ".claude" / "agents"
	d.mkdir(parents=True)
	return d


@pytest.fixture
def make_repo(tmp_path, home):
	"""Factory for empty repositories whose unborn branch is main."""

	def _make(name: str = "repo") -> Path:
		path = tmp_path / name
		path.mkdir()
		git(path, "init", "-q")
		git(path, "symbolic-ref", "HEAD", "refs/heads/main")
		return path

	return _make


@pytest.fixture
def repo(make_repo) -> Path:
	return make_repo()


@pytest.fixture
def bare_remote(tmp_path, home) -> Path:
	"""An empty bare repository to push to."""
	path = tmp_path / "remote.git"
	git(tmp_path, "init", "-q", "--bare", str(path))
	git(path, "symbolic-ref", "HEAD", "refs/heads/main")
	return path


def write_agent(directory: Path, name: str, body: str = "") -> Path:
	"""Write a minimal agent definition file."""
	p = directory / f"{name}.md"
	p.write_text(
	    f"---\nname: {name}\ndescription: {name} agent\nmodel: sonnet\n"
	    f"color: blue\n---\n{body or 'You are ' + name + '.'}\n",
	    encoding="utf-8")
	return p
