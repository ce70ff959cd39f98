"""
Drawing the playfield and status bar with pygame.
"""

import pygame

from .config import (
    BACKGROUND,
    BLINK_MS,
    FOOD_COLOR,
    FOOD_HIGHLIGHT,
    GRID_LINE,
    SNAKE_COLOR,
    STATUS_BAR_HEIGHT,
    STATUS_BG,
    STATUS_FONT_SIZE,
    STATUS_TEXT,
)


class Renderer:
    """Paints a controller snapshot. Purely presentational."""

    def draw(self, snapshot) -> None:
        raise NotImplementedError


class NullRenderer(Renderer):
    def draw(self, snapshot) -> None:
        pass


def tile_rect(cell, grid_size, inset=0):
    """Return the pixel rectangle of a tile, shrunk by inset on each side."""
    x, y = cell
    return pygame.Rect(
        x * grid_size + inset,
        y * grid_size + inset,
        grid_size - inset * 2,
        grid_size - inset * 2,
    )


class PygameRenderer(Renderer):
    """Nokia-style playfield: flat green board, dark square segments."""

    def __init__(self, surface):
        self.surface = surface

    def draw(self, snapshot) -> None:
        size = snapshot.grid_size * snapshot.tile_count
        self.surface.fill(BACKGROUND, pygame.Rect(0, 0, size, size))
        self._draw_grid(snapshot.grid_size, snapshot.tile_count)

        for segment in snapshot.snake:
            pygame.draw.rect(self.surface, SNAKE_COLOR, tile_rect(segment, snapshot.grid_size, 1))

        if snapshot.food is None:
            return
        pygame.draw.rect(self.surface, FOOD_COLOR, tile_rect(snapshot.food, snapshot.grid_size, 1))
        pygame.draw.rect(self.surface, FOOD_HIGHLIGHT, tile_rect(snapshot.food, snapshot.grid_size, 3))

    def _draw_grid(self, grid_size, tile_count):
        edge = grid_size * tile_count
        for i in range(tile_count + 1):
            offset = i * grid_size
            pygame.draw.line(self.surface, GRID_LINE, (offset, 0), (offset, edge), 1)
            pygame.draw.line(self.surface, GRID_LINE, (0, offset), (edge, offset), 1)


def blink_visible(now_ms, blink):
    """Blinking text is shown for BLINK_MS, then hidden for BLINK_MS."""
    return not blink or (now_ms // BLINK_MS) % 2 == 0


class StatusBar:
    """Score and status line drawn under the playfield every frame."""

    def __init__(self, surface, top):
        self.surface = surface
        self.rect = pygame.Rect(0, top, surface.get_width(), STATUS_BAR_HEIGHT)
        self.font = pygame.font.Font(None, STATUS_FONT_SIZE + 6)

    def draw(self, score, status, blink, now_ms):
        pygame.draw.rect(self.surface, STATUS_BG, self.rect)

        score_text = self.font.render(f"Score: {score}", True, STATUS_TEXT)
        self.surface.blit(score_text, (self.rect.left + 10, self.rect.top + 4))

        if blink_visible(now_ms, blink):
            status_text = self.font.render(status, True, STATUS_TEXT)
            self.surface.blit(
                status_text,
                (self.rect.left + 10, self.rect.bottom - status_text.get_height() - 4),
            )
