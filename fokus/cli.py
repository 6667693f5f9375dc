"""Command-line options for the Pomodoro timer."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import Sequence

__version__ = "0.1.7"

MIN_MINUTES = 1
MAX_MINUTES = 1440
_U64_LIMIT = 2**64

_NUMBER = re.compile(r"\+?[0-9]+", re.ASCII)


class TimeValueError(ValueError, argparse.ArgumentTypeError):
    """A duration given on the command line is not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Session lengths, in minutes."""

    working_time: int = 25
    break_time: int = 5

    def working_seconds(self) -> int:
        """Length of a work session in seconds."""
        return self.working_time * 60

    def break_seconds(self) -> int:
        """Length of a break in seconds."""
        return self.break_time * 60


def validate_time(s: str) -> int:
    """Parse a duration in minutes, which must lie between 1 and 1440."""
    if not _NUMBER.fullmatch(s) or int(s) >= _U64_LIMIT:
        raise TimeValueError(f"`{s}` is not a valid number")
    minutes = int(s)
    if not MIN_MINUTES <= minutes <= MAX_MINUTES:
        raise TimeValueError(
            f"Time must be between {MIN_MINUTES} and {MAX_MINUTES} minutes"
        )
    return minutes


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fokus",
        description="A simple Pomodoro timer for the terminal",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-w",
        "--working-time",
        type=validate_time,
        default=Settings.working_time,
        metavar="MINUTES",
        help="length of a work session in minutes (default: %(default)s)",
    )
    parser.add_argument(
        "-b",
        "--break-time",
        type=validate_time,
        default=Settings.break_time,
        metavar="MINUTES",
        help="length of a break in minutes (default: %(default)s)",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Parse command-line arguments into Settings; exits on bad input."""
    namespace = _build_parser().parse_args(argv)
    return Settings(
        working_time=namespace.working_time, break_time=namespace.break_time
    )