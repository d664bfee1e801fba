"""
pytest configuration and shared fixtures for openventuro tests.

Fixtures
--------
project_cwd : Path
    A temporary directory that is also the current working directory.

scripted_ask : callable
    Factory for a fake question backend that replays canned answers.

expected_scaffold : dict[str, str]
    Known-good scaffold contents for
    ``acme-app`` / ``cloudflare-worker``.
"""

import json
from pathlib import Path

import pytest

from openventuro.config import get_settings


FIXTURES_DIR = Path(__file__).parent / "fixtures"


class ScriptedAsk:
    """
    Question backend that replays answers in order.

    Every message asked is recorded in ``prompts`` so tests can check
    how many questions were issued and which ones.
    """

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers.pop(0)


@pytest.fixture
def project_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Run the test inside a fresh temporary directory.

    Returns
    -------
    Path
        The temporary directory, which is now the working directory.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def scripted_ask():
    """Return the :class:`ScriptedAsk` factory."""
    return ScriptedAsk


@pytest.fixture
def expected_scaffold() -> dict[str, str]:
    """Load the reference scaffold (relative path -> exact content)."""
    with (FIXTURES_DIR / "acme-app.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Make every test read settings from a clean environment."""
    monkeypatch.delenv("OPENVENTURO_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
