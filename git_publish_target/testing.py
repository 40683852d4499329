"""In-memory git backend for tests.

Usage:
    from git_publish_target.testing import FakeGitBackend

    backend = FakeGitBackend(
        remotes=[("origin", "git@github.com:me/proj.git")],
        head="refs/heads/feature",
        remote_refs={"origin": ["feature"]},
    )
    repo = LocalRepo(backend)
"""

from __future__ import annotations

from typing import Iterable, Mapping

from .exceptions import BackendQueryError, DetachedHeadError, NoUpstreamError


class FakeGitBackend:
    """GitBackend whose state lives in plain dicts.

    State:
    - remotes: list[tuple[str, str]] - (name, url) in reported order
    - head: str | None - full ref of HEAD, None when detached
    - tracking: dict[str, str] - local ref -> upstream ref
    - config: dict[str, str] - git config values
    - remote_refs: dict[str, list[str]] - remote -> short names present locally
    - symbolic_refs: dict[str, str] - symbolic ref -> target ref

    Call tracking:
    - list_remotes_calls: int
    - ref_exists_calls: list[tuple[str, str]]
    """

    def __init__(
        self,
        *,
        remotes: Iterable[tuple[str, str]] = (),
        head: str | None = "refs/heads/master",
        tracking: Mapping[str, str] | None = None,
        config: Mapping[str, str] | None = None,
        remote_refs: Mapping[str, Iterable[str]] | None = None,
        symbolic_refs: Mapping[str, str] | None = None,
        fail_list_remotes: int = 0,
    ) -> None:
        self.remotes = list(remotes)
        self.head = head
        self.tracking = dict(tracking or {})
        self.config = dict(config or {})
        self.remote_refs = {name: list(refs) for name, refs in (remote_refs or {}).items()}
        self.symbolic_refs = dict(symbolic_refs or {})
        self._failures_left = fail_list_remotes

        self.list_remotes_calls = 0
        self.ref_exists_calls: list[tuple[str, str]] = []

    def list_remotes(self) -> list[tuple[str, str]]:
        self.list_remotes_calls += 1
        if self._failures_left > 0:
            self._failures_left -= 1
            raise BackendQueryError(["git", "remote", "-v"], 128, stderr="fatal: simulated failure")
        return list(self.remotes)

    def read_head(self) -> str:
        if self.head is None:
            raise DetachedHeadError()
        return self.head

    def read_tracking_ref(self, ref: str) -> str:
        try:
            return self.tracking[ref]
        except KeyError:
            raise NoUpstreamError(ref.removeprefix("refs/heads/")) from None

    def read_config(self, key: str) -> str | None:
        return self.config.get(key)

    def ref_exists(self, remote: str, short_name: str) -> bool:
        self.ref_exists_calls.append((remote, short_name))
        return short_name in self.remote_refs.get(remote, [])

    def read_symbolic_ref(self, ref: str) -> str | None:
        return self.symbolic_refs.get(ref)
