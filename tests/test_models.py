"""
Tests for openventuro.models and openventuro.errors
===================================================

Test Organization
-----------------
- TestDeployTarget: Tests for the DeployTarget enum
- TestInitRequest: Tests for the parsed request model
- TestResolvedConfig: Tests for validation and computed paths
- TestOpenVenturoError: Tests for the error type
"""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from openventuro.errors import ErrorKind, OpenVenturoError
from openventuro.models import (
    DEFAULT_DEPLOY_TARGET,
    DEFAULT_PROJECT_NAME,
    DeployTarget,
    InitRequest,
    ResolvedConfig,
)


# =============================================================================
# DeployTarget Tests
# =============================================================================

class TestDeployTarget:
    """Tests for the DeployTarget enumeration."""

    def test_values(self) -> None:
        """Exactly two targets, in menu order."""
        assert [t.value for t in DeployTarget] == ["vercel", "cloudflare-worker"]

    def test_default_is_vercel(self) -> None:
        """Vercel is the default target."""
        assert DEFAULT_DEPLOY_TARGET is DeployTarget.VERCEL

    def test_from_string(self) -> None:
        """Targets can be built from their values."""
        assert DeployTarget("cloudflare-worker") is DeployTarget.CLOUDFLARE_WORKER

    @pytest.mark.parametrize("value", ["Vercel", "cloudflare", "netlify", ""])
    def test_invalid_value_raises(self, value: str) -> None:
        """Anything but the exact values is rejected."""
        with pytest.raises(ValueError):
            DeployTarget(value)


# =============================================================================
# InitRequest Tests
# =============================================================================

class TestInitRequest:
    """Tests for the InitRequest model."""

    def test_defaults(self) -> None:
        """An empty request has nothing set."""
        request = InitRequest()

        assert request.project_name is None
        assert request.use_defaults is False
        assert request.deploy_target is None
        assert request.show_help is False

    def test_is_frozen(self) -> None:
        """Requests cannot be changed after construction."""
        request = InitRequest(project_name="acme")

        with pytest.raises(ValidationError):
            request.project_name = "other"

    def test_keeps_raw_deploy_target(self) -> None:
        """The deploy target is not validated at this stage."""
        request = InitRequest(deploy_target="netlify")
        assert request.deploy_target == "netlify"


# =============================================================================
# ResolvedConfig Tests
# =============================================================================

class TestResolvedConfig:
    """Tests for the ResolvedConfig model."""

    def test_minimal_config(self) -> None:
        """Deploy target defaults to vercel."""
        config = ResolvedConfig(project_name=DEFAULT_PROJECT_NAME)
        assert config.deploy_target is DeployTarget.VERCEL

    def test_accepts_target_string(self) -> None:
        """A valid target string is coerced to the enum."""
        config = ResolvedConfig(project_name="acme", deploy_target="cloudflare-worker")
        assert config.deploy_target is DeployTarget.CLOUDFLARE_WORKER

    def test_empty_name_rejected(self) -> None:
        """The project name must not be empty."""
        with pytest.raises(ValidationError):
            ResolvedConfig(project_name="")

    def test_invalid_target_rejected(self) -> None:
        """Unknown targets cannot reach a resolved config."""
        with pytest.raises(ValidationError):
            ResolvedConfig(project_name="acme", deploy_target="heroku")

    def test_is_frozen(self) -> None:
        """Resolved configs cannot be changed."""
        config = ResolvedConfig(project_name="acme")

        with pytest.raises(ValidationError):
            config.deploy_target = DeployTarget.CLOUDFLARE_WORKER

    def test_target_dir_relative(self, tmp_path: Path) -> None:
        """Relative names are joined onto the working directory."""
        config = ResolvedConfig(project_name="acme")
        assert config.target_dir(tmp_path) == tmp_path / "acme"

    def test_target_dir_normalizes(self, tmp_path: Path) -> None:
        """Parent references are collapsed."""
        config = ResolvedConfig(project_name="nested/../acme")
        assert config.target_dir(tmp_path) == tmp_path / "acme"

    def test_target_dir_absolute(self, tmp_path: Path) -> None:
        """Absolute names ignore the working directory."""
        target = tmp_path / "elsewhere" / "acme"
        config = ResolvedConfig(project_name=str(target))

        assert config.target_dir(tmp_path / "work") == target

    def test_display_path_relative(self, tmp_path: Path) -> None:
        """Relative names are displayed relative to the working directory."""
        config = ResolvedConfig(project_name="apps/acme")
        assert config.display_path(tmp_path) == "apps/acme"

    def test_display_path_current_directory(self, tmp_path: Path) -> None:
        """Scaffolding into the working directory displays as '.'."""
        config = ResolvedConfig(project_name=".")
        assert config.display_path(tmp_path) == "."

    def test_display_path_parent(self, tmp_path: Path) -> None:
        """Targets outside the working directory keep their '..' prefix."""
        config = ResolvedConfig(project_name="../sibling")
        assert config.display_path(tmp_path / "work") == "../sibling"

    def test_display_path_absolute(self, tmp_path: Path) -> None:
        """Absolute names are displayed as absolute POSIX paths."""
        target = tmp_path / "acme"
        config = ResolvedConfig(project_name=str(target))

        display = config.display_path(tmp_path / "work")

        assert os.path.isabs(display) or display.startswith("/")
        assert display == target.as_posix()

    def test_display_path_backslashes_become_slashes(self, tmp_path: Path) -> None:
        """Backslashes are always shown as forward slashes."""
        config = ResolvedConfig(project_name="we\\ird")
        assert config.display_path(tmp_path) == "we/ird"


# =============================================================================
# Error Tests
# =============================================================================

class TestOpenVenturoError:
    """Tests for the single error type."""

    def test_carries_kind_and_message(self) -> None:
        """Kind and message are both available."""
        error = OpenVenturoError(ErrorKind.TARGET_NOT_EMPTY, "Target directory is not empty: x")

        assert error.kind is ErrorKind.TARGET_NOT_EMPTY
        assert error.message == "Target directory is not empty: x"
        assert str(error) == error.message

    def test_repr(self) -> None:
        """The repr names the kind."""
        error = OpenVenturoError(ErrorKind.ABORTED, "Prompt cancelled")
        assert "aborted" in repr(error)
