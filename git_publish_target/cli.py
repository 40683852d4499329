"""Typer-based CLI for git-publish-target."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import load_settings
from .exceptions import PublishTargetError
from .git import GitCli
from .models import Project
from .repository import LocalRepo

app = typer.Typer(
    help="Resolve which remote and hosted project a publish should target",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass(slots=True)
class AppState:
    repo: LocalRepo
    console: Console
    verbose: bool = False


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-publish-target {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Path to the repository to inspect (defaults to current working directory).",
        dir_okay=True,
        file_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-publish-target version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    cwd = repo.expanduser() if repo else Path.cwd()
    local_repo = LocalRepo(GitCli(cwd), load_settings())
    ctx.obj = AppState(repo=local_repo, console=Console(), verbose=verbose)


def _require_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if not isinstance(state, AppState):  # pragma: no cover
        raise typer.Exit(1)
    return state


@app.command(help="Show the branch and project a publish would target")
def target(
    ctx: typer.Context,
    owner: str = typer.Option("", "--owner", "-o", help="Prefer remotes whose project belongs to this owner."),
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    state = _require_state(ctx)
    try:
        branch, project = state.repo.remote_branch_and_project(owner)
    except PublishTargetError as err:
        _fail(str(err))
    if as_json:
        data = {"branch": branch.ref, "remote": branch.remote_name or None, "project": _project_dict(project)}
        typer.echo(json.dumps(data, indent=2))
        return
    state.console.print(f"Branch:  {branch.ref}")
    state.console.print(f"Project: {project.slug}")
    state.console.print(f"URL:     {project.web_url}")


@app.command(help="Show the current, upstream or main project")
def project(
    ctx: typer.Context,
    upstream: bool = typer.Option(False, "--upstream", help="Resolve through the tracking branch only."),
    main_only: bool = typer.Option(False, "--main", help="Resolve from the origin remote only."),
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    state = _require_state(ctx)
    if upstream and main_only:
        _fail("--upstream and --main are mutually exclusive.")
    try:
        if upstream:
            resolved = state.repo.upstream_project()
        elif main_only:
            resolved = state.repo.main_project()
        else:
            resolved = state.repo.current_project()
    except PublishTargetError as err:
        _fail(str(err))
    if as_json:
        typer.echo(json.dumps(_project_dict(resolved), indent=2))
        return
    state.console.print(resolved.slug)


@app.command(help="List publish candidate remotes in priority order")
def remotes(
    ctx: typer.Context,
    owner: str = typer.Option("", "--owner", "-o", help="Also consider remotes whose project belongs to this owner."),
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    state = _require_state(ctx)
    candidates = state.repo.remotes_for_publish(owner)
    if as_json:
        typer.echo(json.dumps([{"name": r.name, "url": r.url} for r in candidates], indent=2))
        return
    if not candidates:
        state.console.print("No publish candidates found.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("#")
    table.add_column("Remote")
    table.add_column("URL")
    for index, remote in enumerate(candidates, start=1):
        table.add_row(str(index), remote.name, remote.url)
    state.console.print(table)


@app.command("default-branch", help="Show the branch origin/HEAD points at")
def default_branch(ctx: typer.Context) -> None:
    state = _require_state(ctx)
    try:
        branch = state.repo.master_branch()
    except PublishTargetError as err:
        _fail(str(err))
    typer.echo(branch.ref)


def _project_dict(project: Project) -> dict[str, str]:
    return {"owner": project.owner, "name": project.name, "host": project.host, "url": project.web_url}


def _fail(message: str, code: int = 1) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


if __name__ == "__main__":
    app()
