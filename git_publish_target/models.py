"""Dataclasses shared across modules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from .config import DEFAULT_HOST

if TYPE_CHECKING:
    from .protocol import GitBackend

_SHORT_NAME_RE = re.compile(r"^refs/(remotes/)?.+?/")
_REMOTE_NAME_RE = re.compile(r"^refs/remotes/([^/]+)")

REMOTE_PREFIX = "refs/remotes/"


@dataclass(frozen=True)
class Project:
    """A hosted repository identity."""

    owner: str
    name: str
    host: str = DEFAULT_HOST

    @property
    def slug(self) -> str:
        return f"{self.host}/{self.owner}/{self.name}"

    @property
    def web_url(self) -> str:
        return f"https://{self.host}/{self.owner}/{self.name}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class Remote:
    """A named remote as configured in the local repository."""

    name: str
    url: str
    known_hosts: tuple[str, ...] = field(default=(DEFAULT_HOST,), compare=False, repr=False)

    def project(self) -> Project:
        """Parse the remote URL; raises UnrecognizedHostError when it does not match."""

        from .urls import parse_project

        return parse_project(self.url, self.known_hosts)


@dataclass(frozen=True)
class Branch:
    """A fully qualified ref, either ``refs/heads/...`` or ``refs/remotes/...``."""

    ref: str

    @property
    def short_name(self) -> str:
        return _SHORT_NAME_RE.sub("", self.ref, count=1)

    @property
    def is_remote(self) -> bool:
        return self.ref.startswith(REMOTE_PREFIX)

    @property
    def remote_name(self) -> str:
        match = _REMOTE_NAME_RE.match(self.ref)
        if match:
            return match.group(1)
        return ""

    def upstream(self, backend: GitBackend) -> Branch:
        """Return the configured tracking branch; raises NoUpstreamError when unset."""

        return Branch(backend.read_tracking_ref(self.ref))

    @classmethod
    def remote(cls, remote_name: str, short_name: str) -> Branch:
        return cls(f"{REMOTE_PREFIX}{remote_name}/{short_name}")

    def __str__(self) -> str:
        return self.ref


class PublishTarget(NamedTuple):
    """Branch and project a publish operation should use."""

    branch: Branch
    project: Project
