"""
openventuro.generator - Scaffold Generation
===========================================

This module turns a :class:`ResolvedConfig` into files on disk.

Architecture
------------
The generator is a short pipeline:

    1. Preflight: the target directory must be missing or empty
    2. Create the target directory
    3. Render every template with Jinja2 into a FileSet
    4. Write the files, one at a time, in FileSet order

Writes are not transactional. If writing fails partway through, files
already written stay on disk and the error is reported; there is no
cleanup. The preflight check is the only collision check: individual
files are not re-checked before they are written.

Template System
---------------
Templates are Jinja2 files in the ``templates/`` package. Each template
receives:

    - project_name: Project name exactly as resolved
    - deploy_target: Selected target value (``vercel`` ...)
    - package: Workspace package name (workspace package templates only)

Usage Example
-------------
>>> from openventuro.generator import create_project
>>> from openventuro.models import ResolvedConfig
>>> result = create_project(ResolvedConfig(project_name="acme"))
>>> result.display_path
'acme'
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from openventuro.console import ok, step
from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.models import DeployTarget, FileSet, ResolvedConfig


logger = logging.getLogger(__name__)


# =============================================================================
# Template Mappings
# =============================================================================

# Internal packages under packages/, each with a manifest and an empty entry
WORKSPACE_PACKAGES: tuple[str, ...] = ("shared", "i18n", "ui", "db", "trpc")

# Output path -> (template_name, extra context). Order is write order.
TEMPLATE_MAPPINGS: dict[str, tuple[str, dict[str, str]]] = {
    # Monorepo root
    "package.json": ("package.json.j2", {}),
    "pnpm-workspace.yaml": ("pnpm-workspace.yaml.j2", {}),
    "turbo.json": ("turbo.json.j2", {}),
    "tsconfig.base.json": ("tsconfig.base.json.j2", {}),
    ".gitignore": ("gitignore.j2", {}),
    ".env.example": ("env.example.j2", {}),
    "README.md": ("README.md.j2", {}),
    "scripts/cloud-init.yaml": ("scripts/cloud-init.yaml.j2", {}),
    # API app (Hono)
    "apps/api/package.json": ("api/package.json.j2", {}),
    "apps/api/tsconfig.json": ("api/tsconfig.json.j2", {}),
    "apps/api/src/index.ts": ("api/index.ts.j2", {}),
    # Web app (Next.js + shadcn base setup)
    "apps/Web/package.json": ("web/package.json.j2", {}),
    "apps/Web/tsconfig.json": ("web/tsconfig.json.j2", {}),
    "apps/Web/next-env.d.ts": ("web/next-env.d.ts.j2", {}),
    "apps/Web/next.config.ts": ("web/next.config.ts.j2", {}),
    "apps/Web/postcss.config.js": ("web/postcss.config.js.j2", {}),
    "apps/Web/tailwind.config.ts": ("web/tailwind.config.ts.j2", {}),
    "apps/Web/components.json": ("web/components.json.j2", {}),
    "apps/Web/lib/utils.ts": ("web/utils.ts.j2", {}),
    "apps/Web/app/layout.tsx": ("web/layout.tsx.j2", {}),
    "apps/Web/app/page.tsx": ("web/page.tsx.j2", {}),
    "apps/Web/app/globals.css": ("web/globals.css.j2", {}),
}

for _package in WORKSPACE_PACKAGES:
    TEMPLATE_MAPPINGS[f"packages/{_package}/package.json"] = (
        "packages/package.json.j2",
        {"package": _package},
    )
    TEMPLATE_MAPPINGS[f"packages/{_package}/src/index.ts"] = (
        "packages/index.ts.j2",
        {},
    )
del _package


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class GenerationResult:
    """
    Outcome of a scaffold run.

    Attributes
    ----------
    success : bool
        Whether every file was written.

    project_path : Path
        Absolute path of the project directory.

    display_path : str
        Path as shown to the user (see ``ResolvedConfig.display_path``).

    deploy_target : DeployTarget
        Target embedded into the scaffold.

    files_created : list[Path]
        Absolute paths of written files, in write order.
    """

    success: bool
    project_path: Path
    display_path: str
    deploy_target: DeployTarget
    files_created: list[Path] = field(default_factory=list)


# =============================================================================
# Template Engine Setup
# =============================================================================


def json_string(value: str) -> str:
    """Encode ``value`` as a JSON string literal, leaving non-ASCII as is."""
    return json.dumps(value, ensure_ascii=False)


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for the scaffold templates.

    Autoescaping is off because the output is source and config files,
    not HTML. Trailing newlines are kept so rendered files match the
    templates byte for byte.
    """
    env = Environment(
        loader=PackageLoader("openventuro", "templates"),
        autoescape=select_autoescape([]),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["json_string"] = json_string
    return env


# =============================================================================
# Template Rendering
# =============================================================================


def render_template(
    env: Environment,
    template_name: str,
    config: ResolvedConfig,
    **extra: str,
) -> str:
    """
    Render one template.

    Raises
    ------
    jinja2.TemplateNotFound
        If the template file doesn't exist.
    """
    template = env.get_template(template_name)

    context = {
        "project_name": config.project_name,
        "deploy_target": config.deploy_target.value,
        **extra,
    }

    return template.render(**context)


def render_all_templates(config: ResolvedConfig) -> FileSet:
    """
    Render the complete scaffold.

    Parameters
    ----------
    config : ResolvedConfig
        Resolved inputs.

    Returns
    -------
    FileSet
        Relative POSIX path -> content, in ``TEMPLATE_MAPPINGS`` order.
    """
    env = create_jinja_env()
    rendered: FileSet = {}

    for output_path, (template_name, extra) in TEMPLATE_MAPPINGS.items():
        rendered[output_path] = render_template(env, template_name, config, **extra)

    return rendered


# =============================================================================
# Preflight
# =============================================================================


def ensure_empty_or_missing(target_dir: Path) -> None:
    """
    Check that ``target_dir`` can receive a new scaffold.

    A missing directory or an empty one is accepted.

    Raises
    ------
    OpenVenturoError
        ``TARGET_NOT_EMPTY`` if the directory has any entry, or
        ``TARGET_NOT_DIRECTORY`` if the path is something else.
    """
    if not target_dir.exists():
        return

    if not target_dir.is_dir():
        raise OpenVenturoError(
            ErrorKind.TARGET_NOT_DIRECTORY,
            f"Target path is not a directory: {target_dir}",
        )

    if any(target_dir.iterdir()):
        raise OpenVenturoError(
            ErrorKind.TARGET_NOT_EMPTY,
            f"Target directory is not empty: {target_dir}",
        )


# =============================================================================
# File Writing
# =============================================================================


def write_files(project_dir: Path, files: FileSet) -> list[Path]:
    """
    Write rendered files under ``project_dir``.

    Parent directories are created as needed. Existing files are not
    checked for; the caller is expected to have run the preflight.

    Returns
    -------
    list[Path]
        Absolute paths of the written files.

    Raises
    ------
    OpenVenturoError
        ``WRITE_FAILED`` naming the file that could not be written. Files
        written before it are left in place.
    """
    created_files: list[Path] = []

    for relative_path, content in files.items():
        full_path = project_dir / relative_path

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OpenVenturoError(
                ErrorKind.WRITE_FAILED,
                f"Failed to write {relative_path}: {e.strerror or e}",
            ) from e

        logger.debug("Wrote %s", full_path)
        created_files.append(full_path)

    return created_files


# =============================================================================
# Main Generation Function
# =============================================================================


def create_project(
    config: ResolvedConfig,
    *,
    cwd: Path | None = None,
    verbose: bool = True,
) -> GenerationResult:
    """
    Create a new scaffold from ``config``.

    Parameters
    ----------
    config : ResolvedConfig
        Resolved inputs.

    cwd : Path | None
        Directory relative project names are resolved against. Defaults
        to the current working directory.

    verbose : bool, default=True
        Print progress markers.

    Returns
    -------
    GenerationResult
        Where the project went and what was written.

    Raises
    ------
    OpenVenturoError
        From the preflight (nothing is written) or from writing (partial
        output stays on disk).
    """
    cwd = cwd or Path.cwd()
    project_dir = config.target_dir(cwd)
    logger.debug("Target directory: %s", project_dir)

    ensure_empty_or_missing(project_dir)

    if verbose:
        ok("Preflight checks.")
        step("Scaffolding project.")

    try:
        project_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OpenVenturoError(
            ErrorKind.WRITE_FAILED,
            f"Failed to create {project_dir}: {e.strerror or e}",
        ) from e

    files = render_all_templates(config)
    written = write_files(project_dir, files)

    if verbose:
        ok("Scaffolding project.")
        ok("Included shadcn base setup (no extra init required).")

    return GenerationResult(
        success=True,
        project_path=project_dir,
        display_path=config.display_path(cwd),
        deploy_target=config.deploy_target,
        files_created=written,
    )
