import asyncio

import pytest

from fokus.app import App, TimerState
from fokus.cli import Settings


def make_app(working=25, breaking=5):
    calls = []
    app = App(Settings(working, breaking), notifier=lambda t, m: calls.append((t, m)))
    return app, calls


async def shutdown(app):
    app.quit()
    await asyncio.sleep(0)


def test_initial_state():
    app, calls = make_app()
    assert app.running is True
    assert app.state is TimerState.WORK
    assert app.remaining == 0
    assert not app.countdown_running
    assert not app.timer_active
    assert app.total_seconds() == app.settings.working_seconds()
    assert calls == []


def test_total_seconds_follows_state():
    app, _ = make_app(30, 10)
    app.skip_session()
    assert app.state is TimerState.BREAK
    assert app.total_seconds() == app.settings.break_seconds()


def test_skip_when_idle_toggles_state():
    app, _ = make_app()
    app.skip_session()
    assert app.state is TimerState.BREAK
    app.skip_session()
    assert app.state is TimerState.WORK


def test_tick_zero_finishes_work_session_once():
    app, calls = make_app()
    app.on_tick(0)
    assert app.state is TimerState.BREAK
    assert app.transition_pending
    assert calls == [("Pomodoro", "Session Finished")]
    app.on_tick(0)
    assert app.state is TimerState.BREAK
    assert len(calls) == 1


def test_tick_zero_finishes_break():
    app, calls = make_app()
    app.skip_session()
    app.on_tick(0)
    assert app.state is TimerState.WORK
    assert calls == [("Pomodoro", "Break Finished")]


def test_nonzero_tick_only_updates_remaining():
    app, calls = make_app()
    app.on_tick(42)
    assert app.remaining == 42
    assert app.state is TimerState.WORK
    assert calls == []


def test_notifier_error_propagates():
    def failing(title, message):
        raise RuntimeError(message)

    app = App(Settings(), notifier=failing)
    with pytest.raises(RuntimeError, match="Session Finished"):
        app.on_tick(0)


def test_pause_when_inactive_does_nothing():
    app, _ = make_app()
    app.pause_timer()
    assert not app.countdown_running
    assert not app.timer_active


@pytest.mark.parametrize(
    "key, ctrl", [("q", False), ("esc", False), ("c", True), ("C", True), ("q", True)]
)
def test_quit_keys(key, ctrl):
    app, _ = make_app()
    app.handle_key(key, ctrl)
    assert app.running is False


def test_plain_c_does_not_quit():
    app, _ = make_app()
    app.handle_key("c")
    assert app.running is True


def test_capital_s_skips():
    app, _ = make_app()
    app.handle_key("S")
    assert app.state is TimerState.BREAK


@pytest.mark.asyncio
async def test_start_timer_sets_session_and_ticks():
    app, _ = make_app()
    app.tick_interval = 0.001
    app.handle_key("s")
    total = app.total_seconds()
    assert app.remaining == total
    assert app.countdown_running and app.timer_active
    first = await asyncio.wait_for(app.ticks.get(), 2)
    assert first == total - 1
    await shutdown(app)


@pytest.mark.asyncio
async def test_pause_and_resume():
    app, _ = make_app()
    app.tick_interval = 0.001
    app.start_timer()
    app.pause_timer()
    assert not app.countdown_running
    assert app.timer_active
    await asyncio.sleep(0.05)
    assert app.ticks.empty()
    app.start_timer()
    assert app.countdown_running
    value = await asyncio.wait_for(app.ticks.get(), 2)
    assert value == app.total_seconds() - 1
    await shutdown(app)


@pytest.mark.asyncio
async def test_reset_ignored_while_running_then_clears_when_paused():
    app, _ = make_app()
    app.start_timer()
    app.reset_timer()
    assert app.timer_active
    assert app.remaining == app.total_seconds()
    app.pause_timer()
    app.reset_timer()
    assert app.remaining == 0
    assert not app.timer_active
    assert not app.countdown_running
    await shutdown(app)


@pytest.mark.asyncio
async def test_skip_while_running_ends_session():
    app, calls = make_app()
    app.start_timer()
    app.skip_session()
    assert app.remaining == 0
    assert not app.timer_active
    assert app.state is TimerState.BREAK
    assert calls == []
    await shutdown(app)


@pytest.mark.asyncio
async def test_full_session_switches_to_break():
    app, calls = make_app(1, 1)
    app.tick_interval = 0.0005
    app.start_timer()
    seen = []
    while app.timer_active:
        value = await asyncio.wait_for(app.ticks.get(), 5)
        seen.append(value)
        app.on_tick(value)
    assert seen == sorted(seen, reverse=True)
    assert seen[-1] == 0
    assert app.state is TimerState.BREAK
    assert app.remaining == 0
    assert calls == [("Pomodoro", "Session Finished")]
    await shutdown(app)