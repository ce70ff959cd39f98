"""
Nokia-style single-player snake on a pygame window.

The game rules live in GameController and are independent of pygame's
display; rendering and sound are injected capabilities.
"""

from .controller import Command, GameController, GamePhase, Snapshot
from .food import BoardFullError, FoodSpawner
from .grid import Cell, Direction, GridModel
from .snake import Snake
from .ticker import Ticker

__all__ = [
    'Cell', 'Direction', 'GridModel',
    'Snake',
    'FoodSpawner', 'BoardFullError',
    'GameController', 'GamePhase', 'Command', 'Snapshot',
    'Ticker',
]
