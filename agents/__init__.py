"""
Agents that choose moves for Block-U sides.
"""

from .random_agent import RandomAgent

__all__ = ["RandomAgent"]
