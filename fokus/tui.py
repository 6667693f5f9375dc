"""Terminal front end: raw keyboard input, drawing and the event loop."""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
import sys
from typing import Iterator, Optional, Sequence

from .app import App
from .cli import parse_args
from .ui import TITLE, render

Key = tuple[str, bool]

_ESC = "\x1b"
_STYLED_TITLE = f"\x1b[1;31m{TITLE}\x1b[0m"


def key_from_code(code: str) -> Optional[Key]:
    """Turn the text of one key press into ``(key, ctrl)``, or None if unknown."""
    if code == _ESC:
        return ("esc", False)
    if len(code) != 1:
        return None
    value = ord(code)
    if 1 <= value <= 26:
        return (chr(value + 96), True)
    if value < 32 or value == 127:
        return None
    return (code, False)


def _split_input(data: str) -> list[str]:
    if data.startswith(_ESC):
        return [data]
    return list(data)


@contextlib.contextmanager
def _terminal() -> Iterator[None]:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    tty.setraw(fd)
    sys.stdout.write("\x1b[?1049h\x1b[?25l\x1b[2J")
    sys.stdout.flush()
    try:
        yield
    finally:
        sys.stdout.write("\x1b[2J\x1b[?25h\x1b[?1049l")
        sys.stdout.flush()
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _notify(title: str, message: str) -> None:
    sys.stdout.write(f"\x1b]9;{title}: {message}\x1b\\\a")
    sys.stdout.flush()


def _draw(app: App) -> None:
    size = os.get_terminal_size(sys.stdout.fileno())
    lines = render(app, size.columns, size.lines)
    if lines:
        lines[0] = lines[0].replace(TITLE, _STYLED_TITLE, 1)
    sys.stdout.write("\x1b[H" + "\r\n".join(lines))
    sys.stdout.flush()


async def _run(app: App) -> None:
    loop = asyncio.get_running_loop()
    events: asyncio.Queue = asyncio.Queue()
    fd = sys.stdin.fileno()

    def on_input() -> None:
        try:
            data = os.read(fd, 64)
        except OSError:
            return
        if not data:
            loop.remove_reader(fd)
            return
        for part in _split_input(data.decode("utf-8", "ignore")):
            key = key_from_code(part)
            if key is not None:
                events.put_nowait(key)

    loop.add_reader(fd, on_input)
    loop.add_signal_handler(signal.SIGWINCH, events.put_nowait, None)
    try:
        while app.running:
            _draw(app)
            event_get = asyncio.ensure_future(events.get())
            tick_get = asyncio.ensure_future(app.ticks.get())
            done, pending = await asyncio.wait(
                {event_get, tick_get}, return_when=asyncio.FIRST_COMPLETED
            )
            for task in pending:
                task.cancel()
            if event_get in done and event_get.result() is not None:
                app.handle_key(*event_get.result())
            if tick_get in done:
                app.on_tick(tick_get.result())
    finally:
        loop.remove_reader(fd)
        loop.remove_signal_handler(signal.SIGWINCH)
        app.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the timer in the terminal."""
    settings = parse_args(argv)
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("fokus: a terminal is required")
    app = App(settings, notifier=_notify)
    with _terminal():
        asyncio.run(_run(app))
    return 0


if __name__ == "__main__":
    sys.exit(main())