"""Scene painter: grid, eat-burst, food, snake and the pause overlay."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .config import (
    BODY_FADE,
    BODY_GAP,
    FONT_NAME,
    FONT_SIZE,
    FOOD_GLOW_PX,
    HEAD_GLOW_PX,
    PALETTE,
)
from .effects import draw_eat_burst, food_pulse_scale

if TYPE_CHECKING:
    from .game import SnakeGame


def segment_alpha(index: int, length: int) -> float:
    """Body opacity: 1.0 at the head fading toward 0.4 at the tail."""
    if length <= 0:
        return 1.0
    return 1.0 - (index / length) * BODY_FADE


def eye_rects(
    direction: str, x: float, y: float, cell_size: float
) -> tuple[pygame.Rect, pygame.Rect]:
    """Place the two eyes on the leading edge of a head at pixel (x, y)."""
    size = cell_size / 6
    offset = cell_size / 4
    near = offset
    far = cell_size - offset - size

    if direction == "up":
        first, second = (x + near, y + near), (x + far, y + near)
    elif direction == "down":
        first, second = (x + near, y + far), (x + far, y + far)
    elif direction == "left":
        first, second = (x + near, y + near), (x + near, y + far)
    else:
        first, second = (x + far, y + near), (x + far, y + far)

    side = max(1, round(size))
    return (
        pygame.Rect(round(first[0]), round(first[1]), side, side),
        pygame.Rect(round(second[0]), round(second[1]), side, side),
    )


class Renderer:
    """Repaints the whole board every frame from the game's current state."""

    def __init__(self, surface_size: int, grid_size: int) -> None:
        self.surface_size = surface_size
        self.grid_size = grid_size
        self.cell_size = surface_size / grid_size
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.background = self._build_background()

    def _build_background(self) -> pygame.Surface:
        """Draw the grid lines once so draw() only has to blit them."""
        surface = pygame.Surface((self.surface_size, self.surface_size))
        surface.fill(PALETTE["bg"])
        for i in range(self.grid_size + 1):
            pos = min(round(i * self.cell_size), self.surface_size - 1)
            size = self.surface_size
            pygame.draw.line(surface, PALETTE["grid"], (pos, 0), (pos, size))
            pygame.draw.line(surface, PALETTE["grid"], (0, pos), (size, pos))
        return surface

    # --- Draw ----------------------------------------------------------

    def draw(self, surface: pygame.Surface, game: SnakeGame) -> None:
        """Render one frame of ``game`` onto ``surface``."""
        surface.blit(self.background, (0, 0))
        draw_eat_burst(surface, game.effects.eat_burst, self.cell_size)
        if game.food is not None:
            self._draw_food(surface, game.food, game.effects.food_pulse)
        self._draw_snake(surface, game)
        if game.is_paused:
            self._draw_pause_overlay(surface)

    def _draw_food(
        self, surface: pygame.Surface, food: tuple[int, int], pulse: float
    ) -> None:
        radius = self.cell_size * food_pulse_scale(pulse) / 2
        center = (
            food[0] * self.cell_size + self.cell_size / 2,
            food[1] * self.cell_size + self.cell_size / 2,
        )

        halo_radius = int(radius + FOOD_GLOW_PX)
        halo = pygame.Surface((halo_radius * 2, halo_radius * 2), pygame.SRCALPHA)
        glow_color = pygame.Color(PALETTE["food"])
        for step in range(FOOD_GLOW_PX, 0, -2):
            glow_color.a = int(70 * (1 - step / FOOD_GLOW_PX)) + 10
            pygame.draw.circle(
                halo, glow_color, (halo_radius, halo_radius), int(radius + step)
            )
        cx, cy = int(center[0]), int(center[1])
        surface.blit(halo, (cx - halo_radius, cy - halo_radius))
        pygame.draw.circle(surface, PALETTE["food"], (cx, cy), max(1, int(radius)))

    def _draw_snake(self, surface: pygame.Surface, game: SnakeGame) -> None:
        length = len(game.snake)
        if not length:
            return

        cell = self.cell_size
        body_size = max(1, int(cell - BODY_GAP * 2))
        body = pygame.Surface((self.surface_size, self.surface_size), pygame.SRCALPHA)
        for idx, (x, y) in enumerate(game.snake[1:], start=1):
            color = pygame.Color(PALETTE["snake"])
            color.a = int(255 * segment_alpha(idx, length))
            rect = pygame.Rect(
                int(x * cell + BODY_GAP), int(y * cell + BODY_GAP), body_size, body_size
            )
            body.fill(color, rect)
        surface.blit(body, (0, 0))

        head_x, head_y = game.snake[0]
        self._draw_head(
            surface,
            head_x * cell,
            head_y * cell,
            game.direction,
            game.effects.glow_intensity,
        )

    def _draw_head(
        self,
        surface: pygame.Surface,
        x: float,
        y: float,
        direction: str,
        glow: float,
    ) -> None:
        cell = self.cell_size
        radius = max(1, int(cell / 4))
        rect = pygame.Rect(int(x), int(y), round(cell), round(cell))

        # Glow: stacked translucent rounded rects, wider when glow is high
        spread = max(1, int(HEAD_GLOW_PX * glow))
        halo = pygame.Surface(
            (rect.width + spread * 2, rect.height + spread * 2), pygame.SRCALPHA
        )
        glow_color = pygame.Color(PALETTE["snake"])
        for step in range(spread, 0, -2):
            glow_color.a = int(60 * glow * (1 - step / (spread + 1))) + 8
            ring = pygame.Rect(0, 0, rect.width + step * 2, rect.height + step * 2)
            ring.center = (halo.get_width() // 2, halo.get_height() // 2)
            pygame.draw.rect(halo, glow_color, ring, border_radius=radius + step)
        surface.blit(halo, (rect.x - spread, rect.y - spread))

        pygame.draw.rect(surface, PALETTE["snake"], rect, border_radius=radius)
        for eye in eye_rects(direction, x, y, cell):
            surface.fill(PALETTE["eye"], eye)

    def _draw_pause_overlay(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(PALETTE["dim"])
        label = self.font.render("PAUSED", True, PALETTE["text"])
        overlay.blit(label, label.get_rect(center=overlay.get_rect().center))
        surface.blit(overlay, (0, 0))
