import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from nokia_snake.controller import GameController
from nokia_snake.food import FoodSpawner
from nokia_snake.grid import GridModel


@pytest.fixture
def grid():
    return GridModel(400, 20)


@pytest.fixture
def controller(grid):
    return GameController(grid, spawner=FoodSpawner(random.Random(7)))
