"""Text rendering of the timer screen."""

from __future__ import annotations

import math
import unicodedata

from .app import App, TimerState

TITLE = "Pomodoro"
_GAUGE_PERCENT = 3


def _char_width(ch: str) -> int:
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def _text_width(text: str) -> int:
    return sum(_char_width(ch) for ch in text)


def _fit(text: str, width: int) -> tuple[str, int]:
    kept = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > width:
            break
        kept.append(ch)
        used += w
    return "".join(kept), used


def _center(text: str, width: int) -> str:
    text, used = _fit(text, width)
    left = (width - used) // 2
    return " " * left + text + " " * (width - used - left)


def idle_text(app: App) -> str:
    """The text shown while no session is under way."""
    upcoming = "session" if app.state is TimerState.WORK else "break"
    return (
        f"Work duration: {app.settings.working_time} minutes\n"
        f"Break duration: {app.settings.break_time} minutes\n\n"
        f"Press 's' to start {upcoming}"
    )


def status_text(app: App) -> str:
    """The line showing the remaining time, running or paused."""
    minutes, seconds = divmod(app.remaining, 60)
    if app.countdown_running:
        return f"⏳ Time remaining: {minutes:02}:{seconds:02}"
    return f"⏸ Paused: {minutes:02}:{seconds:02}"


def progress_ratio(app: App) -> float:
    """Fraction of the current session already elapsed, within 0 and 1."""
    ratio = 1.0 - app.remaining / app.total_seconds()
    return min(1.0, max(0.0, ratio))


def _gauge_line(ratio: float, width: int, with_label: bool) -> str:
    filled = math.floor(width * ratio)
    cells = list("█" * filled + " " * (width - filled))
    if with_label:
        label = f"{math.floor(ratio * 100 + 0.5)}%"
        start = max(0, (width - len(label)) // 2)
        for offset, ch in enumerate(label[:width]):
            cells[start + offset] = ch
    return "".join(cells)


def _body(app: App, width: int, height: int) -> list[str]:
    rows = [" " * width for _ in range(height)]
    if app.remaining == 0 and not app.countdown_running:
        block = idle_text(app).split("\n")
        chunk = min(len(block), height)
        top = (height - chunk) // 2
        for offset, line in enumerate(block[:chunk]):
            rows[top + offset] = _center(line, width)
        return rows

    gauge_height = min(height, math.floor(height * _GAUGE_PERCENT / 100 + 0.5))
    available = height - gauge_height
    if available >= 1:
        rows[(available - 1) // 2] = _center(status_text(app), width)
    if gauge_height:
        ratio = progress_ratio(app)
        gauge_top = height - gauge_height
        label_row = gauge_top + gauge_height // 2
        for row in range(gauge_top, height):
            rows[row] = _gauge_line(ratio, width, row == label_row)
    return rows


def render(app: App, width: int, height: int) -> list[str]:
    """Draw the whole screen as ``height`` lines of ``width`` cells."""
    if width <= 0 or height <= 0:
        return []
    if width < 2 or height < 2:
        return [" " * width for _ in range(height)]

    inner_width = width - 2
    inner_height = height - 2
    title, title_width = _fit(TITLE, inner_width)
    top = "╭" + title + "─" * (inner_width - title_width) + "╮"
    bottom = "╰" + "─" * inner_width + "╯"
    middle = ["│" + row + "│" for row in _body(app, inner_width, inner_height)]
    return [top, *middle, bottom]