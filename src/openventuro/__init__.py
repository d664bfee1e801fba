"""
openventuro - Monorepo Project Scaffolder
=========================================

A CLI tool that asks for a project name and a deployment target, then
writes a pnpm + turbo monorepo with a Next.js web app, a Hono API and a
set of empty shared packages.

Quick Start
-----------
```bash
# Answer the prompts
openventuro

# Or skip them
openventuro init my-app --deploy-target cloudflare-worker
openventuro init -d
```

Example
-------
>>> from openventuro import ResolvedConfig, create_project
>>> create_project(ResolvedConfig(project_name="my-app"))

Architecture
------------
- ``cli``: Typer entry point and top-level dispatch
- ``arguments``: ``init`` argument parser
- ``prompts``: Interactive resolution of missing inputs
- ``generator``: Preflight, template rendering and file writing
- ``templates``: Jinja2 templates for generated files
- ``models``: Pydantic models for requests and resolved inputs
- ``errors``: The single error type
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from openventuro.arguments import parse_init_args
from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.generator import create_project, render_all_templates
from openventuro.models import DeployTarget, InitRequest, ResolvedConfig
from openventuro.prompts import resolve_request


__all__ = [
    "DeployTarget",
    "ErrorKind",
    "InitRequest",
    "OpenVenturoError",
    "ResolvedConfig",
    "__version__",
    "create_project",
    "parse_init_args",
    "render_all_templates",
    "resolve_request",
]
