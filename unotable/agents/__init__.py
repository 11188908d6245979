"""Built-in agents."""

from unotable.agents.scripted_agent import ScriptedAgent
from unotable.agents.human_agent import HumanAgent, HumanMove

__all__ = ["ScriptedAgent", "HumanAgent", "HumanMove"]
