"""Custom error hierarchy for git-publish-target."""

from __future__ import annotations


class PublishTargetError(RuntimeError):
    """Base error for all resolution failures."""


class BackendQueryError(PublishTargetError):
    """Raised when an underlying git query fails unexpectedly."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class RemoteNotFoundError(PublishTargetError):
    """Raised when no configured remote carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No git remote with name {name}")


class DetachedHeadError(PublishTargetError):
    """Raised when HEAD does not point at a named branch."""

    def __init__(self, message: str = "Aborted: not currently on any branch."):
        super().__init__(message)


class NoUpstreamError(PublishTargetError):
    """Raised when a local branch has no tracking branch configured."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"No upstream configured for branch {branch}")


class NoOriginProjectError(PublishTargetError):
    """Raised when the origin remote is missing or not a hosted project.

    ``reason`` is ``"missing"`` or ``"unparsable"``; both share this kind.
    """

    MISSING = "missing"
    UNPARSABLE = "unparsable"

    def __init__(self, reason: str = MISSING):
        self.reason = reason
        super().__init__("Aborted: the origin remote doesn't point to a GitHub repository.")


class UnrecognizedHostError(PublishTargetError):
    """Raised when a remote URL does not match a known hosting pattern."""

    def __init__(self, url: str, detail: str | None = None):
        self.url = url
        message = f"Remote URL does not point to a recognized host: {url}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


__all__ = [
    "PublishTargetError",
    "BackendQueryError",
    "RemoteNotFoundError",
    "DetachedHeadError",
    "NoUpstreamError",
    "NoOriginProjectError",
    "UnrecognizedHostError",
]
