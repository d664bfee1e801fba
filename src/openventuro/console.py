"""
openventuro.console - Terminal Output
=====================================

Progress and results are printed with rich. Lines are printed verbatim
(no markup, no highlighting) because they echo user-supplied project
names and paths.

Markers
-------
- ``- <message>``: a step is starting
- ``✔ <message>``: a step finished
- ``✖ <message>``: the run failed
"""

from __future__ import annotations

from rich.console import Console


# stdout for progress, stderr for error details and log records
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def echo(message: str = "") -> None:
    """Print a plain line to stdout."""
    console.print(message, markup=False)


def step(message: str) -> None:
    echo(f"- {message}")


def ok(message: str) -> None:
    echo(f"✔ {message}")


def fail(message: str) -> None:
    echo(f"✖ {message}")


def error(message: str) -> None:
    """Print ``Error: <message>`` to stderr."""
    err_console.print(f"Error: {message}", markup=False)
