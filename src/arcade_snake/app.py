"""pygame host shell: window, input, HUD and the two loops."""

from __future__ import annotations

import logging

import pygame

from .clock import FrameClock, PygameTickTimer
from .config import (
    DATA_DIR,
    DOUBLE_TAP_MS,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    GRID_SIZE,
    HUD_FONT_SIZE,
    HUD_HEIGHT,
    LOG_LEVEL,
    KEY_TO_DIRECTION,
    PALETTE,
    PAUSE_KEYS,
    START_KEYS,
    SWIPE_MIN_DISTANCE,
    TITLE_FONT_SIZE,
    WINDOW_SIZE,
)
from .effects import update_effects
from .game import SnakeGame
from .renderer import Renderer
from .storage import FileStore, KeyValueStore

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def swipe_direction(dx: float, dy: float) -> str | None:
    """Map a drag vector to a direction along its dominant axis."""
    if max(abs(dx), abs(dy)) < SWIPE_MIN_DISTANCE:
        return None
    if abs(dx) > abs(dy):
        return "right" if dx > 0 else "left"
    return "down" if dy > 0 else "up"


class SnakeApp:
    """Wires a SnakeGame to a pygame window and keyboard/touch input."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        pygame.init()
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_SIZE + HUD_HEIGHT), pygame.DOUBLEBUF
        )
        pygame.display.set_caption("Snake")
        # Offscreen board, blitted under the HUD strip
        self.board = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE)).convert()

        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self.hud_font = pygame.font.SysFont(FONT_NAME, HUD_FONT_SIZE, bold=True)
        self.title_font = pygame.font.SysFont(FONT_NAME, TITLE_FONT_SIZE, bold=True)

        self.timer = PygameTickTimer(TICK_EVENT)
        self.frame_clock = FrameClock()
        self.game = SnakeGame(
            WINDOW_SIZE,
            GRID_SIZE,
            store=store or FileStore(DATA_DIR),
            timer=self.timer,
        )
        self.game.on_score_change = self.update_score
        self.game.on_game_over = self.show_game_over
        self.renderer = Renderer(WINDOW_SIZE, GRID_SIZE)

        self.score = 0
        self.high_score = self.game.high_score
        self.running = False

        self._press_pos: tuple[int, int] | None = None
        self._press_in_run = False
        self._last_tap_ms = 0

    # --- Notification hooks --------------------------------------------

    def update_score(self, score: int, high_score: int) -> None:
        self.score = score
        self.high_score = high_score

    def show_game_over(self, score: int, high_score: int) -> None:
        self.update_score(score, high_score)
        logger.debug("Showing game over screen")

    # --- Input ---------------------------------------------------------

    def start_game(self) -> None:
        self.game.start()

    def handle_events(self) -> None:
        """Drain the event queue: ticks, keys, swipes and taps."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == TICK_EVENT:
                self.game.tick()
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_press(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._handle_release(event.pos)

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if not self.game.is_running:
            if key in START_KEYS:
                self.start_game()
            return
        if key in PAUSE_KEYS:
            self.game.toggle_pause()
            return
        direction = KEY_TO_DIRECTION.get(key)
        if direction:
            self.game.change_direction(direction)

    def _handle_press(self, pos: tuple[int, int]) -> None:
        self._press_pos = pos
        self._press_in_run = self.game.is_running

    def _handle_release(self, pos: tuple[int, int]) -> None:
        start = self._press_pos
        self._press_pos = None
        if start is None:
            return

        if not self.game.is_running:
            # Only a press made outside a run can start one
            if not self._press_in_run:
                self.start_game()
            return

        direction = swipe_direction(pos[0] - start[0], pos[1] - start[1])
        if direction is not None:
            if not self.game.is_paused:
                self.game.change_direction(direction)
            return

        now = pygame.time.get_ticks()
        if 0 < now - self._last_tap_ms < DOUBLE_TAP_MS:
            self.game.toggle_pause()
            self._last_tap_ms = 0
        else:
            self._last_tap_ms = now

    # --- Draw ----------------------------------------------------------

    def show_score(self) -> None:
        """Render the score strip above the board."""
        hud = pygame.Rect(0, 0, WINDOW_SIZE, HUD_HEIGHT)
        self.window.fill(PALETTE["hud"], hud)
        score = self.hud_font.render(f"SCORE: {self.score}", True, PALETTE["text"])
        high = self.hud_font.render(f"HIGH: {self.high_score}", True, PALETTE["text"])
        self.window.blit(score, score.get_rect(midleft=(12, HUD_HEIGHT // 2)))
        self.window.blit(
            high, high.get_rect(midright=(WINDOW_SIZE - 12, HUD_HEIGHT // 2))
        )

    def _draw_screen(self, title: str, lines: list[str]) -> None:
        overlay = pygame.Surface((WINDOW_SIZE, WINDOW_SIZE), pygame.SRCALPHA)
        overlay.fill(PALETTE["screen"])
        center_x = WINDOW_SIZE // 2
        top = WINDOW_SIZE // 3

        heading = self.title_font.render(title, True, PALETTE["snake"])
        overlay.blit(heading, heading.get_rect(center=(center_x, top)))
        for idx, text in enumerate(lines, start=1):
            surf = self.font.render(text, True, PALETTE["text"])
            rect = surf.get_rect(center=(center_x, top + 20 + idx * (FONT_SIZE + 10)))
            overlay.blit(surf, rect)
        self.board.blit(overlay, (0, 0))

    def draw(self) -> None:
        """Render the board, the HUD and whichever screen applies."""
        self.renderer.draw(self.board, self.game)

        if self.game.state == "ready":
            self._draw_screen(
                "SNAKE",
                [
                    "ENTER to start",
                    "Arrows / WASD to move",
                    "P to pause",
                    "Swipe to steer, double tap to pause",
                ],
            )
        elif self.game.state == "game_over":
            self._draw_screen(
                "GAME OVER",
                [
                    f"Final Score: {self.score}",
                    f"High Score: {self.high_score}",
                    "ENTER to play again",
                ],
            )

        self.show_score()
        self.window.blit(self.board, (0, HUD_HEIGHT))

    # --- Main loop -----------------------------------------------------

    def run(self) -> None:
        """Run the frame loop; simulation ticks arrive as TICK_EVENTs."""
        clock = pygame.time.Clock()
        self.running = True
        logger.debug("Entering frame loop at %d FPS", FPS)

        while self.running:
            clock.tick(FPS)
            self.handle_events()

            delta = self.frame_clock.delta(pygame.time.get_ticks())
            update_effects(self.game.effects, delta)

            self.draw()
            pygame.display.flip()

        self.timer.stop()
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    app = SnakeApp()
    app.run()
