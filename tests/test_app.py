import pygame
import pytest

from arcade_snake.app import TICK_EVENT, SnakeApp, swipe_direction
from arcade_snake.storage import MemoryStore


@pytest.mark.parametrize(
    "dx, dy, expected",
    [
        (40, 5, "right"),
        (-40, 10, "left"),
        (3, 30, "down"),
        (-8, -30, "up"),
        (4, -3, None),
    ],
)
def test_swipe_direction(dx, dy, expected):
    assert swipe_direction(dx, dy) == expected


@pytest.fixture
def app():
    app = SnakeApp(store=MemoryStore({"snakeHighScore": 40}))
    yield app
    app.timer.stop()


def test_hud_starts_with_stored_high_score(app):
    assert app.high_score == 40
    assert app.game.state == "ready"
    app.draw()


def test_enter_starts_and_keys_steer(app):
    app._handle_key(pygame.K_LEFT)
    assert app.game.state == "ready"

    app._handle_key(pygame.K_RETURN)
    assert app.game.state == "running"
    assert (app.score, app.high_score) == (0, 40)

    app._handle_key(pygame.K_LEFT)
    assert app.game.pending_direction == "right"
    app._handle_key(pygame.K_w)
    assert app.game.pending_direction == "up"


def test_pause_key_toggles_pause(app):
    app.start_game()
    app._handle_key(pygame.K_p)
    assert app.game.is_paused
    app.draw()
    app._handle_key(pygame.K_p)
    assert not app.game.is_paused


def test_tick_event_advances_game(app):
    app.start_game()
    app.game.food = (0, 0)
    app.timer.stop()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(TICK_EVENT))
    app.handle_events()
    assert app.game.snake[0] == (11, 10)


def test_swipe_and_double_tap(app, monkeypatch):
    app.start_game()
    app._handle_press((100, 100))
    app._handle_release((100, 160))
    assert app.game.pending_direction == "down"

    ticks = iter([1000, 1100])
    monkeypatch.setattr(pygame.time, "get_ticks", lambda: next(ticks))
    app._handle_press((50, 50))
    app._handle_release((50, 50))
    app._handle_press((50, 50))
    app._handle_release((51, 50))
    assert app.game.is_paused


def test_game_over_screen_and_restart(app):
    app.start_game()
    app.game.snake = [(19, 2)]
    app.game.tick()
    assert app.game.state == "game_over"
    app.draw()

    app._handle_key(pygame.K_SPACE)
    assert app.game.state == "running"
    assert app.game.snake == [(10, 10)]


def test_turn_keyed_while_paused_applies_on_resume(app):
    app.start_game()
    app._handle_key(pygame.K_p)
    app._handle_key(pygame.K_DOWN)
    assert app.game.pending_direction == "down"

    app._handle_key(pygame.K_p)
    app.game.tick()
    assert app.game.direction == "down"


def test_swipe_is_ignored_while_paused(app):
    app.start_game()
    app.game.toggle_pause()
    app._handle_press((100, 100))
    app._handle_release((100, 160))
    assert app.game.pending_direction == "right"


def test_drag_finishing_after_crash_keeps_game_over_screen(app):
    app.start_game()
    app._handle_press((100, 100))
    app.game.snake = [(19, 2)]
    app.game.tick()
    assert app.game.state == "game_over"

    app._handle_release((100, 160))
    assert app.game.state == "game_over"

    app._handle_press((100, 100))
    app._handle_release((100, 100))
    assert app.game.state == "running"


def test_tap_on_start_screen_starts_game(app):
    app._handle_press((200, 200))
    app._handle_release((200, 200))
    assert app.game.state == "running"
