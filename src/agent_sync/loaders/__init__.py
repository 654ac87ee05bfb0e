"""Agent definition loading.

Key modules:
    - frontmatter: YAML frontmatter parsing
    - agents: Agent definition loading from markdown
"""

from .frontmatter import split_frontmatter
from .agents import load_agent, load_agents

__all__ = [
    "split_frontmatter",
    "load_agent",
    "load_agents",
]
