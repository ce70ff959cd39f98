"""
pygame window and main loop.
"""

import logging

import pygame

from .config import FPS, SAMPLE_RATE, SURFACE_SIZE, TILE_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from .controller import GameController
from .controls import InputAdapter
from .food import FoodSpawner
from .grid import GridModel
from .render import PygameRenderer, StatusBar
from .sound import NullSoundEffects, ToneSoundEffects
from .ticker import Ticker

logger = logging.getLogger(__name__)


def run(mute=False, rng=None):
    """Open the window and play until it is closed or Esc is pressed."""
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Nokia Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    grid = GridModel(SURFACE_SIZE, TILE_SIZE)
    sound = NullSoundEffects() if mute else ToneSoundEffects()
    controller = GameController(
        grid,
        spawner=FoodSpawner(rng),
        sound=sound,
        renderer=PygameRenderer(screen),
    )
    ticker = Ticker(controller)
    keys = InputAdapter(controller)
    status_bar = StatusBar(screen, top=grid.tile_count * grid.tile_size)
    logger.info(f"Started on {grid!r}")

    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return
                    keys.handle_key(event.key)
                elif event.type == pygame.WINDOWEXPOSED:
                    controller.renderer.draw(controller.snapshot())

            ticker.advance(clock.tick(FPS))
            status_bar.draw(controller.score, controller.status, controller.blink, pygame.time.get_ticks())
            pygame.display.flip()
    finally:
        pygame.quit()
