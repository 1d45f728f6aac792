"""
Deep Thought Agents - The agent interface, the per-table event handlers and
the rule-based Deep Thought agent.
"""

from deepthought.agents.base import BaseAgent
from deepthought.agents.handlers import AgentState, handle_event
from deepthought.agents.deep_thought import DeepThoughtAgent

__all__ = ["BaseAgent", "AgentState", "handle_event", "DeepThoughtAgent"]
