"""
Headless simulation core of the Plant Tycoon game.
"""
from .game import TycoonGame
from .results import ErrorKind, Result
from .adapter import PresentationAdapter, ConsoleAdapter

__all__ = ["TycoonGame", "ErrorKind", "Result", "PresentationAdapter", "ConsoleAdapter"]
