"""
openventuro.arguments - Init Argument Parser
============================================

Turns the tokens after ``openventuro init`` into an :class:`InitRequest`.

The parser is a small index-based scanner rather than a declarative option
parser: the accepted grammar is tiny, and its error messages are part of
the command's contract.

Grammar
-------
    init [project-name] [options]

    -d, --defaults, --yes        use defaults instead of prompts
    --deploy-target <target>     vercel | cloudflare-worker
    --deploy-target=<target>     same, single token; empty means unset
    -h, --help                   print usage

Examples
--------
>>> parse_init_args(["acme", "--deploy-target=vercel"]).deploy_target
'vercel'
>>> parse_init_args(["-d"]).use_defaults
True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.models import InitRequest


if TYPE_CHECKING:
    from collections.abc import Sequence


logger = logging.getLogger(__name__)


USAGE = """\
Usage: openventuro init [project-name] [options]

Options:
  -d, --defaults                 Use defaults (name + vercel)
  --deploy-target <target>       vercel | cloudflare-worker
  -h, --help                     Show help
"""

DEFAULTS_FLAGS = frozenset({"-d", "--defaults", "--yes"})
HELP_FLAGS = frozenset({"-h", "--help"})
DEPLOY_TARGET_FLAG = "--deploy-target"


def parse_init_args(tokens: Sequence[str]) -> InitRequest:
    """
    Parse ``init`` arguments.

    Parameters
    ----------
    tokens : Sequence[str]
        Raw arguments following the program name and subcommand.

    Returns
    -------
    InitRequest
        The request; fields not given on the command line are left unset.
        If help was requested, scanning stops and ``show_help`` is set.

    Raises
    ------
    OpenVenturoError
        ``UNKNOWN_OPTION``, ``MISSING_VALUE`` or ``UNEXPECTED_ARGUMENT``.
    """
    project_name: str | None = None
    use_defaults = False
    deploy_target: str | None = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token in HELP_FLAGS:
            return InitRequest(
                project_name=project_name,
                use_defaults=use_defaults,
                deploy_target=deploy_target,
                show_help=True,
            )

        if token in DEFAULTS_FLAGS:
            use_defaults = True
            continue

        if token == DEPLOY_TARGET_FLAG:
            value = tokens[i] if i < len(tokens) else ""
            if not value:
                raise OpenVenturoError(
                    ErrorKind.MISSING_VALUE,
                    f"Missing value for {DEPLOY_TARGET_FLAG}",
                )
            deploy_target = value
            i += 1
            continue

        if token.startswith(f"{DEPLOY_TARGET_FLAG}="):
            # An empty value means "not given": defaults or the menu decide
            _, _, value = token.partition("=")
            deploy_target = value or None
            continue

        if token.startswith("-"):
            raise OpenVenturoError(ErrorKind.UNKNOWN_OPTION, f"Unknown option: {token}")

        # An empty positional does not count as a name
        if not project_name:
            project_name = token
            continue

        raise OpenVenturoError(
            ErrorKind.UNEXPECTED_ARGUMENT, f"Unexpected argument: {token}"
        )

    request = InitRequest(
        project_name=project_name or None,
        use_defaults=use_defaults,
        deploy_target=deploy_target,
    )
    logger.debug("Parsed init request: %r", request)
    return request
