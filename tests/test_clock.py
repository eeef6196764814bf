from arcade_snake.clock import FrameClock, PygameTickTimer, TickTimer


def test_first_frame_delta_is_zero():
    clock = FrameClock()
    assert clock.delta(5000) == 0.0
    assert clock.delta(5016) == 16
    assert clock.delta(5049) == 33


def test_frame_delta_never_negative():
    clock = FrameClock()
    clock.delta(100)
    assert clock.delta(90) == 0.0


def test_restart_replaces_interval():
    timer = TickTimer()
    assert not timer.active
    timer.start(150)
    timer.start(140)
    assert timer.interval_ms == 140
    timer.stop()
    assert not timer.active


def test_pygame_timer_tracks_schedule():
    import pygame

    timer = PygameTickTimer(pygame.USEREVENT + 5)
    timer.start(1000)
    assert timer.active
    assert timer.interval_ms == 1000
    timer.stop()
    assert not timer.active
