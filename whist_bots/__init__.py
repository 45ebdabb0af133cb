"""Bot strategies for partnership Whist."""

from .base import BotStrategy
from .heuristic import HeuristicBot
from .random_bot import RandomBot

__all__ = ["BotStrategy", "HeuristicBot", "RandomBot"]
