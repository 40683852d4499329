"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import BackendQueryError, DetachedHeadError, NoUpstreamError

logger = logging.getLogger(__name__)

_REMOTE_LINE_RE = re.compile(
    r"^(?P<name>\S+)\s+(?P<url>.+?)\s+\((?P<kind>fetch|push)\)(?:\s+\[[^\]]*\])?$"
)


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    raise_on_error: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise BackendQueryError(cmd, -1, stderr=str(exc)) from exc
    if raise_on_error and proc.returncode != 0:
        raise BackendQueryError(cmd, proc.returncode, stderr=proc.stderr)
    return proc


def parse_remote_lines(output: str) -> list[tuple[str, str]]:
    """Parse ``git remote -v`` output, keeping first-seen order.

    The fetch URL wins over the push URL when both are listed.
    """

    urls: dict[str, str] = {}
    fetch_seen: set[str] = set()
    for raw in output.splitlines():
        match = _REMOTE_LINE_RE.match(raw.rstrip())
        if not match:
            continue
        name = match.group("name")
        if name in fetch_seen:
            continue
        if match.group("kind") == "fetch":
            urls[name] = match.group("url")
            fetch_seen.add(name)
        elif name not in urls:
            urls[name] = match.group("url")
    return list(urls.items())


class GitCli:
    """GitBackend implementation that shells out to the git binary."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd or Path.cwd()

    def list_remotes(self) -> list[tuple[str, str]]:
        proc = run_git(["remote", "-v"], cwd=self.cwd)
        return parse_remote_lines(proc.stdout)

    def read_head(self) -> str:
        proc = run_git(["symbolic-ref", "-q", "HEAD"], cwd=self.cwd, raise_on_error=False)
        ref = proc.stdout.strip()
        # exit 1 means HEAD is not a symbolic ref
        if proc.returncode == 1 or (proc.returncode == 0 and not ref):
            raise DetachedHeadError()
        if proc.returncode != 0:
            raise BackendQueryError(["git", "symbolic-ref", "-q", "HEAD"], proc.returncode, stderr=proc.stderr)
        return ref

    def read_tracking_ref(self, ref: str) -> str:
        # @{upstream} only accepts the short branch name
        branch = ref.removeprefix("refs/heads/")
        proc = run_git(
            ["rev-parse", "--symbolic-full-name", f"{branch}@{{upstream}}"],
            cwd=self.cwd,
            raise_on_error=False,
        )
        upstream = proc.stdout.strip()
        if proc.returncode != 0 or not upstream:
            raise NoUpstreamError(branch)
        return upstream

    def read_config(self, key: str) -> str | None:
        proc = run_git(["config", "--get", key], cwd=self.cwd, raise_on_error=False)
        # exit 1 means the key is unset
        if proc.returncode == 1:
            return None
        if proc.returncode != 0:
            raise BackendQueryError(["git", "config", "--get", key], proc.returncode, stderr=proc.stderr)
        return proc.stdout.strip() or None

    def ref_exists(self, remote: str, short_name: str) -> bool:
        proc = run_git(
            ["show-ref", "--verify", "--quiet", f"refs/remotes/{remote}/{short_name}"],
            cwd=self.cwd,
            raise_on_error=False,
        )
        return proc.returncode == 0

    def read_symbolic_ref(self, ref: str) -> str | None:
        proc = run_git(["symbolic-ref", "-q", ref], cwd=self.cwd, raise_on_error=False)
        if proc.returncode == 0:
            return proc.stdout.strip() or None
        return None

