# fokus

A small Pomodoro timer that runs in your terminal. It alternates between work
sessions and breaks. It shows a countdown with a progress bar and signals the
end of each session.

## Installation

```
pip install .
```

## Usage

Start the timer with the default lengths. These are 25 minutes of work and 5
minutes of break:

```
fokus
```

Choose your own lengths, in minutes:

```
fokus --working-time 50 --break-time 10
fokus -w 50 -b 10
```

Each length must be a whole number from 1 to 1440 (one day). Any other value is
rejected at startup with an error message. `fokus --version` prints the
version.

`fokus` needs an interactive terminal on a POSIX system. It refuses to start
when standard input or output is not a terminal.

## Keys

| Key                  | Action                                              |
|----------------------|-----------------------------------------------------|
| `s`                  | Start the current session, or resume a paused one   |
| `p`                  | Pause or resume a running session                   |
| `r`                  | Reset the timer (ignored while the countdown runs)  |
| `S`                  | Skip to the next session (work → break → work)      |
| `q`, `Esc`, `Ctrl-C` | Quit                                                |

When a session finishes, the timer stops and switches to the next kind of
session. Press `s` to begin it.

## What it does not do

Notifications are not desktop notifications. At the end of a session the
program writes a terminal notification escape sequence to the terminal, in
the form `Pomodoro: Session Finished` or `Pomodoro: Break Finished`, followed
by a bell. Whether anything appears depends on your terminal emulator. No
sound file is played. The program does not record any history of sessions.

## Using it from Python

The package has these parts:

- `fokus.cli`: `validate_time` and `parse_args`, which returns a `Settings`.
- `fokus.app`: `App` and `TimerState`. The timer is driven by `handle_key`,
  `start_timer`, `pause_timer`, `resume_timer`, `reset_timer`,
  `skip_session`, `on_tick` and `quit`.
- `fokus.timer`: `countdown`, the asynchronous countdown.
- `fokus.ui`: `render`, `status_text`, `idle_text` and `progress_ratio`.

`App.start_timer` starts the countdown as an asyncio task, so it must be
called from inside a running event loop:

```python
import asyncio

from fokus.app import App
from fokus.cli import parse_args
from fokus.ui import render, status_text


async def demo():
    settings = parse_args(["-w", "30", "-b", "5"])
    app = App(settings, notifier=lambda title, message: print(title, message))
    print("\n".join(render(app, 60, 12)))  # idle screen
    app.start_timer()
    app.pause_timer()
    print(status_text(app))  # ⏸ Paused: 30:00
    app.quit()


asyncio.run(demo())
```

`fokus.timer.countdown(seconds, ticks, control, interval)` counts down once
per `interval` seconds and puts each remaining value on the `ticks` queue.
Putting `False` on the `control` queue pauses it, and putting `True` resumes
it. A final `0` is always sent when the count ends.

## Development

```
pip install -e ".[test]"
pytest
```