from __future__ import annotations

import sys

import typer
from pydantic import ValidationError
from typer.main import get_command

from agent_sync.core.copier import compare_entry, list_source_entries
from agent_sync.core.sync import sync_agents
from agent_sync.errors import (
    FilesystemError,
    SourceDirectoryMissingError,
    SyncError,
)
from agent_sync.loaders.agents import load_agents
from agent_sync.models.config import Config, load_env
from agent_sync.models.sync_params import SyncParams
from agent_sync.ui.console import SyncConsole, render_agents_table
from agent_sync.utils.logging import configure_logging, get_logger
from agent_sync.utils.paths import display_path

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False)


@cli.callback()
def root() -> None:
	"""Sync agent definition files into a git repository."""
	return None


def _load_config(params: SyncParams) -> Config:
	load_env()
	config = Config()
	config.apply_overrides(params)
	configure_logging(config.log_level)
	return config


def sync_impl(
    source: str | None = None,
    repo: str | None = None,
    target: str | None = None,
    branch: str | None = None,
    remote: str | None = None,
) -> None:
	"""
	Copy agent files into the repository, commit and push.

	Exits with status 1 on a precondition failure and with the git
	command's status when git fails.
	"""
	try:
		params = SyncParams(source=source, repo=repo, target=target,
		                    branch=branch, remote=remote)
	except ValidationError as exc:
		raise typer.BadParameter(str(exc))
	config = _load_config(params)
	ui = SyncConsole()
	try:
		sync_agents(config, progress_cb=ui.update)
	except SyncError as exc:
		logger.debug("sync failed", exc_info=True)
		ui.error(str(exc))
		raise typer.Exit(code=exc.exit_code)


def list_impl(
    source: str | None = None,
    repo: str | None = None,
    target: str | None = None,
) -> None:
	"""Show agent definitions in the source directory and their sync state."""
	try:
		params = SyncParams(source=source, repo=repo, target=target)
	except ValidationError as exc:
		raise typer.BadParameter(str(exc))
	config = _load_config(params)
	ui = SyncConsole()
	src = config.source_path
	if not src.is_dir():
		ui.error(str(SourceDirectoryMissingError(src, display_path(src))))
		raise typer.Exit(code=1)

	try:
		agents = load_agents(src)
		states = {
		    p.name: compare_entry(p, config.target_path)
		    for p in list_source_entries(src) if p.is_file()
		}
	except OSError as exc:
		ui.error(str(FilesystemError("read", src, exc)))
		raise typer.Exit(code=1)
	ui.console.print(render_agents_table(agents, states), soft_wrap=False)
	ui.console.print(f"{len(agents)} agent files in {display_path(src)}")


@cli.command()
def sync(
    source: str = typer.Option(None, "--source",
                               help="Override source directory"),
    repo: str = typer.Option(None, "--repo",
                             help="Override repository directory"),
    target: str = typer.Option(None, "--target",
                               help="Override tracked directory"),
    branch: str = typer.Option(None, "--branch",
                               help="Override branch to push to"),
    remote: str = typer.Option(None, "--remote", help="Override remote"),
) -> None:
	"""
	Copy agent files into the tracked directory, commit and push.

	This is the default command when none is given.
	"""
	sync_impl(source, repo, target, branch, remote)


@cli.command("list")
def list_agents(
    source: str = typer.Option(None, "--source",
                               help="Override source directory"),
    repo: str = typer.Option(None, "--repo",
                             help="Override repository directory"),
    target: str = typer.Option(None, "--target",
                               help="Override tracked directory"),
) -> None:
	"""List agent definitions in the source directory."""
	list_impl(source, repo, target)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `sync` when no command is given.

	Allows calling plain 'agent-sync' or 'agent-sync --branch x'
	without spelling out the 'sync' subcommand.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args or (args[0] not in commands and args[0] != "--help"):
		args = ["sync"] + args
	return _click_app.main(
	    args=args,
	    prog_name="agent-sync",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
