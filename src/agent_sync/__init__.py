"""
Agent Sync - publish local agent definitions to a git repository.

This package copies agent definition files (Markdown with YAML front
matter) from a local source directory into a tracked directory of a
git repository, commits the change and pushes it to the main branch.

Main entry points:
    - agent_sync.main: CLI entrypoint
    - agent_sync.core.sync: sync_agents() for a single sync run
    - agent_sync.models.config: Config and load_env()
"""
