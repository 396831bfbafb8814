"""Shared test fixtures."""

import os
from pathlib import Path

import pytest

from jcc.models import RunContext
from jcc.settings import JccSettings


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the runner's own INPUT_*/GITHUB_* variables and any .env out of the tests."""
    for name in list(os.environ):
        if name.startswith(("INPUT_", "GITHUB_")):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> JccSettings:
    return JccSettings(
        email="a@b.com",
        token="t0k",
        url="https://jira.example.com",
        success="Build passed",
        failed="Build failed",
        label="wip",
        status="success",
    )  # type: ignore[call-arg]


@pytest.fixture
def run_context() -> RunContext:
    return RunContext(branch="feature/ABC-123-fix", labels=["backend"])
