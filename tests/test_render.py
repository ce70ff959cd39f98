import pygame

from nokia_snake.config import BACKGROUND, FOOD_COLOR, FOOD_HIGHLIGHT, GRID_LINE, SNAKE_COLOR
from nokia_snake.controller import GamePhase, Snapshot
from nokia_snake.render import PygameRenderer, blink_visible, tile_rect


def make_snapshot(**overrides):
    fields = dict(
        snake=((10, 10), (9, 10)),
        food=(3, 4),
        grid_size=20,
        tile_count=20,
        score=0,
        phase=GamePhase.RUNNING,
        status="Playing...",
        blink=False,
    )
    fields.update(overrides)
    return Snapshot(**fields)


def test_tile_rect_insets():
    assert tile_rect((2, 3), 20) == pygame.Rect(40, 60, 20, 20)
    assert tile_rect((2, 3), 20, inset=3) == pygame.Rect(43, 63, 14, 14)


def test_draw_paints_board():
    surface = pygame.Surface((400, 448))
    PygameRenderer(surface).draw(make_snapshot())

    assert tuple(surface.get_at((210, 210)))[:3] == SNAKE_COLOR
    assert tuple(surface.get_at((190, 210)))[:3] == SNAKE_COLOR
    assert tuple(surface.get_at((70, 90)))[:3] == FOOD_HIGHLIGHT
    assert tuple(surface.get_at((61, 90)))[:3] == FOOD_COLOR
    assert tuple(surface.get_at((110, 310)))[:3] == BACKGROUND
    assert tuple(surface.get_at((100, 305)))[:3] == GRID_LINE


def test_blink_toggles_every_half_second():
    assert blink_visible(1234, False)
    assert blink_visible(100, True)
    assert not blink_visible(600, True)
    assert blink_visible(1100, True)


def test_draw_without_food_paints_board_only():
    surface = pygame.Surface((400, 448))
    PygameRenderer(surface).draw(make_snapshot(food=None))

    assert tuple(surface.get_at((210, 210)))[:3] == SNAKE_COLOR
    assert tuple(surface.get_at((70, 90)))[:3] == BACKGROUND
