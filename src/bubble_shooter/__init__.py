"""Bubble shooter arcade game: simulation engine and pygame front end."""

from .bubbles import Bubble, BubbleStatus, BubbleStore
from .config import BubbleColor, GameConfig
from .game import Game, GameSnapshot, GameState

__all__ = [
    'Bubble',
    'BubbleColor',
    'BubbleStatus',
    'BubbleStore',
    'Game',
    'GameConfig',
    'GameSnapshot',
    'GameState',
]

__version__ = "0.1.0"
