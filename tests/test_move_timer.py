from session.move_timer import MoveTimer


def test_counts_down_and_expires_once():
    ticks = []
    expired = []
    timer = MoveTimer(seconds=3, on_tick=ticks.append, on_expire=lambda: expired.append(True))

    timer.start()
    assert timer.tick() == 2
    assert timer.tick() == 1
    assert timer.tick() == 0
    assert ticks == [2, 1, 0]
    assert expired == [True]
    assert not timer.is_running

    # Stopped timers do nothing
    assert timer.tick() == 0
    assert expired == [True]


def test_ticks_before_start_do_nothing():
    timer = MoveTimer(seconds=10)
    assert timer.tick() == 10
    assert not timer.is_running


def test_reset_restores_full_time():
    timer = MoveTimer(seconds=10)
    timer.start()
    timer.tick()
    timer.tick()
    timer.reset()
    assert timer.time_left == 10
    assert timer.is_running


def test_warning_in_last_seconds():
    timer = MoveTimer(seconds=7, warning_seconds=5)
    timer.start()
    assert not timer.is_warning
    timer.tick()
    assert not timer.is_warning
    timer.tick()
    assert timer.is_warning
    timer.stop()
    assert not timer.is_warning
