"""
openventuro.cli - Command Line Interface
========================================

This module provides the ``openventuro`` command using Typer.

Typer only supplies the entry point and exit handling here: every token
after the program name is handed over unparsed, and the small command
grammar below is dispatched by hand so that bare project names, ``init``
and help all share one command.

Command Grammar
---------------
    openventuro                         init, prompting for everything
    openventuro -h | --help             usage
    openventuro -V | --version          version
    openventuro init [name] [options]   init
    openventuro <name> [options]        init (``init`` may be omitted)
    openventuro -<anything else>        usage, then error

State Machine
-------------
    Start -> ParsingArgs -> ResolvingInputs -> Preflight -> Writing -> Done
    (any step) -> Failed

``Failed`` prints ``✖ Operation failed.`` on stdout and ``Error: <message>``
on stderr, then exits with status 1. Nothing is retried or rolled back.

Usage Examples
--------------
    $ openventuro
    $ openventuro init my-app --deploy-target cloudflare-worker
    $ openventuro my-app -d

See Also
--------
- arguments.py: ``init`` argument parser
- prompts.py: Interactive resolution
- generator.py: Preflight and file writing
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import typer

from openventuro import __version__
from openventuro.arguments import HELP_FLAGS, USAGE, parse_init_args
from openventuro.config import get_settings
from openventuro.console import console, echo, error, fail, step
from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.generator import GenerationResult, create_project
from openventuro.log import configure_logging
from openventuro.prompts import resolve_request


if TYPE_CHECKING:
    from collections.abc import Sequence

    from openventuro.prompts import AskFn


logger = logging.getLogger(__name__)


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="openventuro",
    help="Scaffold a pnpm + turbo monorepo with a Next.js web app and a Hono API.",
    add_completion=False,
    rich_markup_mode="rich",
)

VERSION_FLAGS = frozenset({"-V", "--version"})
INIT_COMMAND = "init"


# =============================================================================
# Output Helpers
# =============================================================================

def print_usage() -> None:
    console.print(USAGE, markup=False, end="")


def print_summary(result: GenerationResult) -> None:
    """Print the success message and next steps."""
    echo()
    echo(f"Success! Project initialized in {result.display_path}")
    echo()
    echo("Next steps:")
    echo(f"  cd {result.display_path}")
    echo("  pnpm install")
    echo("  pnpm dev")
    echo()
    echo(f"Deployment target selected: {result.deploy_target.value}")


# =============================================================================
# Init Flow
# =============================================================================

def run_init(
    tokens: Sequence[str],
    *,
    ask: AskFn | None = None,
) -> GenerationResult | None:
    """
    Run ``init`` with the given arguments.

    Parameters
    ----------
    tokens : Sequence[str]
        Arguments after ``init``.

    ask : Callable[[str], str] | None
        Question backend, passed to :func:`resolve_request`.

    Returns
    -------
    GenerationResult | None
        ``None`` when only help was printed.

    Raises
    ------
    OpenVenturoError
        On any failure.
    """
    try:
        request = parse_init_args(tokens)
    except OpenVenturoError:
        # Argument errors belong to the preflight step
        step("Preflight checks.")
        raise

    if request.show_help:
        print_usage()
        return None

    step("Preflight checks.")
    config = resolve_request(request, ask)

    result = create_project(config, cwd=Path.cwd())
    print_summary(result)
    return result


def dispatch(
    tokens: Sequence[str],
    *,
    ask: AskFn | None = None,
) -> None:
    """
    Route the raw command line to help, version or ``init``.

    Raises
    ------
    OpenVenturoError
        ``UNKNOWN_COMMAND`` for an unrecognized leading option, or anything
        raised by :func:`run_init`.
    """
    if not tokens:
        run_init([], ask=ask)
        return

    command = tokens[0]

    if command in HELP_FLAGS:
        print_usage()
        return

    if command in VERSION_FLAGS:
        echo(f"openventuro {__version__}")
        return

    if command == INIT_COMMAND:
        run_init(tokens[1:], ask=ask)
        return

    if command.startswith("-"):
        print_usage()
        raise OpenVenturoError(
            ErrorKind.UNKNOWN_COMMAND,
            f"Unknown command or option: {command}",
        )

    run_init(tokens, ask=ask)


# =============================================================================
# Main Command
# =============================================================================

@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def main(ctx: typer.Context) -> None:
    """
    Create a new openventuro project.

    [bold]Examples:[/]

        openventuro
        openventuro init my-app --deploy-target cloudflare-worker
        openventuro init -d
    """
    try:
        settings = get_settings()
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)

    configure_logging(settings.log_level)
    logger.debug("Arguments: %r", ctx.args)

    try:
        dispatch(list(ctx.args))
    except OpenVenturoError as e:
        fail("Operation failed.")
        error(e.message)
        raise typer.Exit(1)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
