"""
openventuro.prompts - Interactive Input Resolution
==================================================

Fills in whatever an :class:`InitRequest` is missing and returns a
:class:`ResolvedConfig`.

Resolution Rules
----------------
Project name:
    given on the command line -> used as is
    ``--defaults``            -> ``openventuro-app``, no prompt
    otherwise                 -> prompt; empty answer means the default

Deploy target:
    given on the command line -> must be a supported target
    ``--defaults``            -> ``vercel``, no prompt
    otherwise                 -> numbered menu, re-asked until valid

Every question goes through a single ``ask(message) -> str`` callable.
The default one uses questionary; tests pass their own.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import questionary

from openventuro.console import echo
from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.models import (
    DEFAULT_DEPLOY_TARGET,
    DEFAULT_PROJECT_NAME,
    DeployTarget,
    InitRequest,
    ResolvedConfig,
)


if TYPE_CHECKING:
    from collections.abc import Callable

    AskFn = Callable[[str], str]


logger = logging.getLogger(__name__)


PROJECT_NAME_PROMPT = f"Project name (default: {DEFAULT_PROJECT_NAME}):"
DEPLOY_TARGET_PROMPT = "Select 1 or 2 (default: 1):"
INVALID_CHOICE_MESSAGE = "Invalid choice. Please select 1 or 2."

# Menu answers -> target; an empty answer picks choice 1
MENU_CHOICES: dict[str, DeployTarget] = {
    "": DEFAULT_DEPLOY_TARGET,
    **{str(i): target for i, target in enumerate(DeployTarget, 1)},
}


# =============================================================================
# Prompt Backend
# =============================================================================

def ask_text(message: str) -> str:
    """
    Ask a single free-text question on the terminal.

    Raises
    ------
    OpenVenturoError
        ``ABORTED`` if the user cancels (Ctrl-C / Ctrl-D).
    """
    answer = questionary.text(message).ask()

    if answer is None:
        raise OpenVenturoError(ErrorKind.ABORTED, "Prompt cancelled")

    return answer


# =============================================================================
# Field Resolution
# =============================================================================

def validate_deploy_target(value: str) -> DeployTarget:
    """
    Convert a command-line deploy target into a :class:`DeployTarget`.

    Only the exact lowercase values are accepted.

    Raises
    ------
    OpenVenturoError
        ``INVALID_DEPLOY_TARGET`` naming the rejected value.
    """
    try:
        return DeployTarget(value)
    except ValueError:
        raise OpenVenturoError(
            ErrorKind.INVALID_DEPLOY_TARGET,
            f"Invalid deployment target: {value}",
        ) from None


def resolve_project_name(request: InitRequest, ask: AskFn) -> str:
    if request.project_name:
        return request.project_name

    if request.use_defaults:
        return DEFAULT_PROJECT_NAME

    answer = ask(PROJECT_NAME_PROMPT).strip()
    return answer or DEFAULT_PROJECT_NAME


def prompt_deploy_target(ask: AskFn) -> DeployTarget:
    """
    Show the numbered deploy target menu and read a choice.

    Invalid answers print a notice and ask again, with no limit on the
    number of attempts.
    """
    echo()
    echo("Where are we deploying?")
    for number, target in enumerate(DeployTarget, 1):
        echo(f"{number}) {target.value}")
    echo()

    while True:
        choice = ask(DEPLOY_TARGET_PROMPT).strip()
        if choice in MENU_CHOICES:
            return MENU_CHOICES[choice]
        echo(INVALID_CHOICE_MESSAGE)


def resolve_deploy_target(request: InitRequest, ask: AskFn) -> DeployTarget:
    if request.deploy_target:
        return validate_deploy_target(request.deploy_target)

    if request.use_defaults:
        return DEFAULT_DEPLOY_TARGET

    return prompt_deploy_target(ask)


def resolve_request(
    request: InitRequest,
    ask: AskFn | None = None,
) -> ResolvedConfig:
    """
    Resolve every missing field of ``request``.

    The project name is settled before the deploy target, so an invalid
    ``--deploy-target`` is only reported after the name question.

    Parameters
    ----------
    request : InitRequest
        Parsed command-line request.

    ask : Callable[[str], str] | None
        Question backend. Defaults to :func:`ask_text`.

    Returns
    -------
    ResolvedConfig
        Complete, validated inputs.

    Raises
    ------
    OpenVenturoError
        ``INVALID_DEPLOY_TARGET`` or ``ABORTED``.
    """
    ask = ask or ask_text

    project_name = resolve_project_name(request, ask)
    deploy_target = resolve_deploy_target(request, ask)

    logger.debug(
        "Resolved project_name=%r deploy_target=%s",
        project_name,
        deploy_target.value,
    )
    return ResolvedConfig(project_name=project_name, deploy_target=deploy_target)
