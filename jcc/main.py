"""JCC CLI — all commands."""

import asyncio
from typing import Annotated

import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from jcc.github import load_run_context, workflow_command
from jcc.jira import JiraClient, build_comment
from jcc.models import Report
from jcc.notify import extract_issue_key, notify
from jcc.settings import get_settings

app = typer.Typer(help="jira-ci-commenter: post CI step status to the Jira issue named in the branch", no_args_is_help=True)


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def emit_report(report: Report) -> None:
    """Translate a Report into Actions output; failures exit non-zero."""
    match report.outcome:
        case "skipped_no_key":
            typer.echo(workflow_command("warning", report.detail))
        case "failed":
            typer.echo(workflow_command("error", report.detail))
            raise typer.Exit(1)
        case _:
            typer.echo(report.detail)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("run")
def run_cmd(
    branch: Annotated[
        str | None,
        typer.Option("--branch", "-b", help="Branch name (default: GITHUB_REF without refs/heads/)"),
    ] = None,
    labels: Annotated[
        list[str] | None,
        typer.Option("--label", "-l", help="Pull request label (repeatable, default: from the event payload)"),
    ] = None,
) -> None:
    """Comment on the Jira issue for this CI run."""
    try:
        settings = get_settings()
        context = load_run_context()
        overrides: dict = {}
        if branch is not None:
            overrides["branch"] = branch
        if labels:
            overrides["labels"] = labels
        if overrides:
            context = context.model_copy(update=overrides)
        report = asyncio.run(notify(settings, context, JiraClient(settings)))
    except Exception as exc:
        report = Report(outcome="failed", detail=str(exc))

    emit_report(report)


@app.command("issue-key")
def issue_key_cmd(
    branch: Annotated[str, typer.Argument(help="Branch name, e.g. feature/ABC-123-fix")],
) -> None:
    """Print the issue key found in a branch name (no trailing newline)."""
    key = extract_issue_key(branch)
    if not key:
        rprint(f"[yellow]No issue key in '{escape(branch)}'[/yellow]")
        raise typer.Exit(1)
    # No trailing newline — designed for shell substitution: $(jcc issue-key "$BRANCH")
    typer.echo(key, nl=False)


@app.command("render")
def render_cmd(
    message: Annotated[str, typer.Argument(help="Comment text")],
) -> None:
    """Print the comment body that would be posted for a message."""
    typer.echo(build_comment(message).model_dump_json(indent=2))


@app.command("config-show")
def config_show() -> None:
    """Show resolved inputs (masks the API token)."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        rprint(f"[red]Invalid inputs ({exc.error_count()} error(s)):[/red]")
        for error in exc.errors():
            name = f"INPUT_{str(error['loc'][0]).upper()}" if error["loc"] else "inputs"
            rprint(f"  {name}: {escape(error['msg'])}")
        raise typer.Exit(1)

    def mask(val: str) -> str:
        if len(val) <= 5:
            return "***"
        return f"...{val[-5:]}"

    def show(val: str) -> str:
        return val or "[dim](empty)[/dim]"

    table = Table(title="JCC Inputs")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("email", settings.email)
    table.add_row("token", mask(settings.token.get_secret_value()))
    table.add_row("url", settings.url)
    table.add_row("success", show(settings.success))
    table.add_row("failed", show(settings.failed))
    table.add_row("label", show(settings.label))
    table.add_row("status", show(settings.status))

    rprint(table)
