"""Built-in agents."""

from unoquiz.agents.llm_agent import LLMAgent
from unoquiz.agents.human_agent import HumanAgent
from unoquiz.agents.random_agent import RandomAgent

__all__ = ["LLMAgent", "HumanAgent", "RandomAgent"]
