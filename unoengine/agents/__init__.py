"""Built-in agents."""

from unoengine.agents.human_agent import HumanAgent
from unoengine.agents.llm_agent import LLMAgent, MoveSuggestion
from unoengine.agents.scripted_agent import ScriptedAgent

__all__ = ["LLMAgent", "MoveSuggestion", "HumanAgent", "ScriptedAgent"]
