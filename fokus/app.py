"""Session state of the Pomodoro timer and its reaction to keys and ticks."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable, Optional

from .cli import Settings
from .timer import countdown

Notifier = Callable[[str, str], None]

NOTIFICATION_TITLE = "Pomodoro"


class TimerState(Enum):
    """Which kind of session comes next or is under way."""

    WORK = "work"
    BREAK = "break"


class App:
    """Holds the timer state and runs the countdown for the current session."""

    tick_interval: float = 1.0

    def __init__(self, settings: Settings, notifier: Optional[Notifier] = None) -> None:
        self.settings = settings
        self.notifier = notifier
        self.running = True
        self.state = TimerState.WORK
        self.remaining = 0
        self.countdown_running = False
        self.timer_active = False
        self.transition_pending = False
        self.ticks: asyncio.Queue = asyncio.Queue(maxsize=100)
        self._control: Optional[asyncio.Queue] = None
        self._task: Optional[asyncio.Task] = None

    def total_seconds(self) -> int:
        """Length in seconds of a session of the current kind."""
        if self.state is TimerState.WORK:
            return self.settings.working_seconds()
        return self.settings.break_seconds()

    def handle_key(self, key: str, ctrl: bool = False) -> None:
        """React to a key press; ``key`` is a character or ``"esc"``."""
        if key in ("esc", "q") or (ctrl and key in ("c", "C")):
            self.quit()
        elif key == "s":
            self.start_timer()
        elif key == "p":
            self.pause_timer()
        elif key == "r":
            self.reset_timer()
        elif key == "S":
            self.skip_session()

    def start_timer(self) -> None:
        """Start a new session, or resume the one that is paused."""
        if self.timer_active:
            self.resume_timer()
            return

        self._cancel_task()
        self.transition_pending = False

        duration = self.total_seconds()
        self.remaining = duration
        self.countdown_running = True
        self.timer_active = True

        self._control = asyncio.Queue()
        self._signal(True)
        self._task = asyncio.get_running_loop().create_task(
            countdown(duration, self.ticks, self._control, self.tick_interval)
        )

    def resume_timer(self) -> None:
        """Let a paused countdown carry on."""
        if not self.countdown_running:
            self.countdown_running = True
            self._signal(True)

    def pause_timer(self) -> None:
        """Toggle between paused and running while a session is active."""
        if self.timer_active:
            self.countdown_running = not self.countdown_running
            self._signal(self.countdown_running)

    def reset_timer(self) -> None:
        """Drop the current session; ignored while the countdown is running."""
        if self.countdown_running:
            return
        self._stop_session()

    def skip_session(self) -> None:
        """Move on to the other kind of session, ending a running countdown."""
        if self.countdown_running:
            self._stop_session()
        self._advance_state()

    def on_tick(self, remaining: int) -> None:
        """Take a remaining-seconds value from the countdown."""
        self.remaining = remaining
        if remaining != 0 or self.transition_pending:
            return

        self.transition_pending = True
        self.countdown_running = False
        self.timer_active = False

        if self.state is TimerState.WORK:
            summary = "Session Finished"
        else:
            summary = "Break Finished"
        if self.notifier is not None:
            self.notifier(NOTIFICATION_TITLE, summary)

        self._advance_state()

    def quit(self) -> None:
        """Stop the application and any countdown in progress."""
        self.running = False
        self._cancel_task()

    def _stop_session(self) -> None:
        self._cancel_task()
        self.remaining = 0
        self.countdown_running = False
        self.timer_active = False
        self._signal(False)
        self._control = None

    def _advance_state(self) -> None:
        self.state = (
            TimerState.BREAK if self.state is TimerState.WORK else TimerState.WORK
        )

    def _signal(self, running: bool) -> None:
        if self._control is not None:
            self._control.put_nowait(running)

    def _cancel_task(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None