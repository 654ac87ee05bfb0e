from agent_sync.loaders.agents import load_agent, load_agents
from agent_sync.loaders.frontmatter import split_frontmatter
from agent_sync.models.agent_config import AgentConfig

SAMPLE = """---
name: code-reviewer
description: Reviews diffs for bugs
model: sonnet
color: purple
tools: Read, Grep, Glob
---
You are a meticulous reviewer.
"""


def test_split_frontmatter():
	"""Test YAML frontmatter extraction from markdown."""
	meta, body = split_frontmatter(SAMPLE)
	assert meta["name"] == "code-reviewer"
	assert meta["color"] == "purple"
	assert body.strip() == "You are a meticulous reviewer."


def test_split_frontmatter_without_block():
	text = "# Just markdown\n"
	assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_unterminated():
	text = "---\nname: x\nno closing\n"
	assert split_frontmatter(text) == ({}, text)


def test_split_frontmatter_invalid_yaml():
	text = "---\nname: [unclosed\n---\nbody\n"
	meta, body = split_frontmatter(text)
	assert meta == {}
	assert body == text


def test_load_agent(tmp_path):
	"""Test loading agent config from markdown file."""
	p = tmp_path / "reviewer.md"
	p.write_text(SAMPLE, encoding="utf-8")
	agent = load_agent(p)
	assert isinstance(agent, AgentConfig)
	assert agent.name == "code-reviewer"
	assert agent.model == "sonnet"
	assert agent.tools == ["Read", "Grep", "Glob"]
	assert agent.file_name == "reviewer.md"
	assert agent.prompt.strip() == "You are a meticulous reviewer."


def test_load_agent_defaults_name_to_stem(tmp_path):
	p = tmp_path / "helper.md"
	p.write_text("plain prompt\n", encoding="utf-8")
	agent = load_agent(p)
	assert agent.name == "helper"
	assert agent.description is None
	assert agent.prompt == "plain prompt\n"


def test_load_agents_skips_dirs_and_hidden(tmp_path):
	(tmp_path / "b.md").write_text(SAMPLE, encoding="utf-8")
	(tmp_path / "a.md").write_text("---\nname: alpha\n---\nx\n",
	                               encoding="utf-8")
	(tmp_path / ".swp").write_text("junk", encoding="utf-8")
	(tmp_path / "nested").mkdir()
	agents = load_agents(tmp_path)
	assert [a.name for a in agents] == ["alpha", "code-reviewer"]


def test_load_agent_replaces_undecodable_bytes(tmp_path):
	p = tmp_path / "latin.md"
	p.write_bytes("---\nname: café\ncolor: red\n---\nbonjour\n".encode("latin-1"))
	agent = load_agent(p)
	assert agent.name == "caf�"
	assert agent.color == "red"
	assert agent.prompt.strip() == "bonjour"
