"""
openventuro.models - Pydantic Models for Scaffold Inputs
=======================================================

This module defines the data models that flow through an ``init`` run:

    InitRequest      (parsed from the command line, may have gaps)
        │  prompts fill the gaps
        ▼
    ResolvedConfig   (complete and validated)
        │  generator renders templates
        ▼
    FileSet          (relative POSIX path -> file text)

Both models are frozen. An ``InitRequest`` is built once by the argument
parser and a ``ResolvedConfig`` once by the prompt flow; neither changes
afterwards.

Usage Example
-------------
>>> from openventuro.models import DeployTarget, ResolvedConfig
>>> config = ResolvedConfig(project_name="acme", deploy_target=DeployTarget.VERCEL)
>>> config.display_path(Path("/work"))
'acme'
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PROJECT_NAME = "openventuro-app"

# Ordered mapping of relative POSIX path -> file content
FileSet = dict[str, str]


# =============================================================================
# Enumerations
# =============================================================================

class DeployTarget(str, Enum):
    """
    Hosting platforms a scaffold can be prepared for.

    The selected target is written into the generated ``.env.example``
    as ``DEPLOY_TARGET=<value>``. Declaration order is the order of the
    interactive menu, so ``VERCEL`` is choice 1.

    Examples
    --------
    >>> DeployTarget("cloudflare-worker") is DeployTarget.CLOUDFLARE_WORKER
    True
    """

    VERCEL = "vercel"
    CLOUDFLARE_WORKER = "cloudflare-worker"


DEFAULT_DEPLOY_TARGET = DeployTarget.VERCEL


# =============================================================================
# Request Models
# =============================================================================

class InitRequest(BaseModel):
    """
    What the user asked for on the command line.

    Any field may be missing; the prompt flow fills the gaps. The deploy
    target is kept as the raw string that was typed so that validation
    (and its error message) happens in one place during resolution.

    Attributes
    ----------
    project_name : str | None
        First positional argument, if any.

    use_defaults : bool
        Set by ``-d``, ``--defaults`` or ``--yes``. Missing values are
        filled with defaults instead of prompts.

    deploy_target : str | None
        Raw value of ``--deploy-target``.

    show_help : bool
        Set by ``-h`` or ``--help``. No scaffold is written.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str | None = Field(
        default=None,
        description="Project directory name or path",
    )
    use_defaults: bool = Field(
        default=False,
        description="Skip prompts and apply defaults",
    )
    deploy_target: str | None = Field(
        default=None,
        description="Unvalidated deploy target from the command line",
    )
    show_help: bool = Field(
        default=False,
        description="Print usage instead of scaffolding",
    )


class ResolvedConfig(BaseModel):
    """
    Complete inputs for a scaffold run.

    Attributes
    ----------
    project_name : str
        Directory name (or path) of the new project. Embedded into the
        generated ``package.json`` and ``README.md``.

    deploy_target : DeployTarget
        Always one of the supported targets.

    Examples
    --------
    >>> config = ResolvedConfig(project_name="/srv/acme", deploy_target="vercel")
    >>> config.display_path(Path("/work"))
    '/srv/acme'
    """

    model_config = ConfigDict(frozen=True)

    project_name: Annotated[str, Field(
        description="Project directory name or path",
        min_length=1,
    )]
    deploy_target: DeployTarget = Field(
        default=DEFAULT_DEPLOY_TARGET,
        description="Hosting platform for the generated project",
    )

    # -------------------------------------------------------------------------
    # Computed Paths
    # -------------------------------------------------------------------------

    def target_dir(self, cwd: Path) -> Path:
        """
        Absolute path of the project directory.

        The project name is joined onto ``cwd`` (an absolute name replaces
        it) and ``..`` segments are collapsed. Symlinks are not resolved,
        so the path stays comparable with ``cwd``.

        Parameters
        ----------
        cwd : Path
            Directory the command was invoked from.

        Returns
        -------
        Path
            Normalized absolute path.
        """
        return Path(os.path.abspath(os.path.join(cwd, self.project_name)))

    def display_path(self, cwd: Path) -> str:
        """
        Path shown in the success summary.

        Relative project names are reported relative to ``cwd`` (``.`` when
        the project is ``cwd`` itself). Absolute project names are reported
        as the absolute target. Either way every backslash is shown as a
        forward slash, including one that is part of a POSIX file name.
        """
        target = self.target_dir(cwd)
        if os.path.isabs(self.project_name):
            shown = str(target)
        else:
            shown = os.path.relpath(target, os.path.abspath(cwd)) or "."
        return shown.replace("\\", "/")
