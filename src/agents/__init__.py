"""
Agents that play the minefield environment.

- RandomAgent: Baseline random selection over the action mask
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
