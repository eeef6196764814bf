"""Cosmetic effect state advanced by the render loop."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import pygame

from .config import (
    EAT_BURST_MS,
    GLOW_MAX,
    GLOW_MIN,
    GLOW_RATE,
    PALETTE,
    PULSE_PERIOD,
    PULSE_RATE,
)


@dataclass(slots=True)
class EatBurst:
    active: bool = False
    elapsed: float = 0.0
    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class EffectState:
    """Glow, food pulse and eat-burst; never touched by the simulation step
    except to arm a new burst."""

    glow_intensity: float = GLOW_MIN
    glow_direction: int = 1
    food_pulse: float = 0.0
    eat_burst: EatBurst = field(default_factory=EatBurst)


def arm_eat_burst(effects: EffectState, x: float, y: float) -> None:
    """Restart the burst ring at pixel ``(x, y)``."""

    effects.eat_burst = EatBurst(active=True, elapsed=0.0, x=x, y=y)


def update_effects(effects: EffectState, delta_ms: float) -> None:
    """Advance every oscillator by one frame delta."""

    if delta_ms <= 0:
        return

    effects.glow_intensity += GLOW_RATE * effects.glow_direction * delta_ms
    if effects.glow_intensity > GLOW_MAX:
        effects.glow_intensity = GLOW_MAX
        effects.glow_direction = -1
    elif effects.glow_intensity < GLOW_MIN:
        effects.glow_intensity = GLOW_MIN
        effects.glow_direction = 1

    effects.food_pulse = (effects.food_pulse + PULSE_RATE * delta_ms) % PULSE_PERIOD

    burst = effects.eat_burst
    if burst.active:
        burst.elapsed += delta_ms
        if burst.elapsed > EAT_BURST_MS:
            burst.active = False


def food_pulse_scale(phase: float) -> float:
    return 0.85 + 0.15 * math.sin(phase)


def burst_ring(burst: EatBurst, cell_size: float) -> tuple[float, float]:
    """Return (radius, alpha) of the expanding ring; alpha fades 1 -> 0."""

    progress = max(0.0, min(1.0, burst.elapsed / EAT_BURST_MS))
    return cell_size * (1.0 + progress), 1.0 - progress


def draw_eat_burst(surface: pygame.Surface, burst: EatBurst, cell_size: float) -> None:
    """Paint the translucent ring left behind by the last eaten food."""

    if not burst.active:
        return
    radius, alpha = burst_ring(burst, cell_size)
    if alpha <= 0 or radius <= 0:
        return

    side = int(radius * 2) + 2
    overlay = pygame.Surface((side, side), pygame.SRCALPHA)
    color = pygame.Color(PALETTE["burst"])
    color.a = int(255 * alpha * 0.5)
    pygame.draw.circle(overlay, color, (side // 2, side // 2), int(radius))
    surface.blit(overlay, (int(burst.x) - side // 2, int(burst.y) - side // 2))
