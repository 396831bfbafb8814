"""GitHub Actions runtime: event context in, workflow commands out."""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from jcc.models import RunContext

BRANCH_REF_PREFIX = "refs/heads/"


def _event_labels(event_path: str | None) -> list[str]:
    if not event_path or not Path(event_path).exists():
        return []
    payload = json.loads(Path(event_path).read_text())
    pull_request = payload.get("pull_request")
    if not pull_request:
        return []
    return [label["name"] for label in pull_request.get("labels") or []]


def load_run_context(environ: Mapping[str, str] = os.environ) -> RunContext:
    """Build the RunContext from GITHUB_REF and the event payload at GITHUB_EVENT_PATH."""
    ref = environ.get("GITHUB_REF", "")
    return RunContext(
        branch=ref.removeprefix(BRANCH_REF_PREFIX),
        labels=_event_labels(environ.get("GITHUB_EVENT_PATH")),
    )


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def workflow_command(command: str, message: str) -> str:
    """Format a workflow command line, e.g. ::error::Request error: timed out"""
    return f"::{command}::{_escape_data(message)}"
