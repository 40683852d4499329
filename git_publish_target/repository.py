"""Resolution session tying remotes, branches and projects together."""

from __future__ import annotations

import logging

from .catalog import RemoteCatalog
from .config import PUSH_DEFAULT_KEY, TRACKING_PUSH_DEFAULTS, Settings
from .exceptions import (
    NoOriginProjectError,
    PublishTargetError,
    RemoteNotFoundError,
    UnrecognizedHostError,
)
from .models import Branch, Project, PublishTarget, Remote
from .protocol import GitBackend
from .ranking import remotes_for_publish

logger = logging.getLogger(__name__)

ORIGIN = "origin"
DEFAULT_MASTER_REF = "refs/heads/master"


class LocalRepo:
    """One resolution session against a local working copy.

    Create one per command invocation; the remote list is cached for the
    lifetime of the instance and never reloaded.
    """

    def __init__(self, backend: GitBackend, settings: Settings | None = None):
        self.backend = backend
        self.settings = settings or Settings()
        self.catalog = RemoteCatalog(backend, known_hosts=self.settings.known_hosts)

    def remote_by_name(self, name: str) -> Remote:
        return self.catalog.remote_by_name(name)

    def remotes_for_publish(self, owner: str = "") -> list[Remote]:
        return remotes_for_publish(self.catalog, owner, self.settings.remote_precedence)

    def current_branch(self) -> Branch:
        return Branch(self.backend.read_head())

    def master_branch(self) -> Branch:
        """Return the branch origin/HEAD points at, or ``refs/heads/master``."""

        name = None
        try:
            origin = self.catalog.remote_by_name(ORIGIN)
        except PublishTargetError as exc:
            logger.debug("No origin for default branch lookup: %s", exc)
        else:
            name = self.backend.read_symbolic_ref(f"refs/remotes/{origin.name}/HEAD")
        return Branch(name or DEFAULT_MASTER_REF)

    def main_project(self) -> Project:
        try:
            origin = self.catalog.remote_by_name(ORIGIN)
        except RemoteNotFoundError as exc:
            raise NoOriginProjectError(NoOriginProjectError.MISSING) from exc
        try:
            return origin.project()
        except UnrecognizedHostError as exc:
            raise NoOriginProjectError(NoOriginProjectError.UNPARSABLE) from exc

    def upstream_project(self) -> Project:
        upstream = self.current_branch().upstream(self.backend)
        remote = self.catalog.remote_by_name(upstream.remote_name)
        return remote.project()

    def current_project(self) -> Project:
        try:
            return self.upstream_project()
        except PublishTargetError as exc:
            logger.debug("Falling back to origin project: %s", exc)
        return self.main_project()

    def remote_branch_and_project(self, owner: str = "") -> PublishTarget:
        """Resolve the branch and project a publish operation should target.

        With ``push.default`` set to ``upstream`` or ``tracking`` the current
        branch's tracking branch is required. Otherwise the first publish
        candidate that has ``<remote>/<branch>`` locally wins, and the local
        branch is kept when none does. A remote branch then re-derives the
        project from its remote, if that remote is still configured.
        """

        project = self.main_project()
        branch = self.current_branch()

        push_default = self.backend.read_config(PUSH_DEFAULT_KEY)
        if push_default in TRACKING_PUSH_DEFAULTS:
            logger.debug("push.default=%s; using tracking branch of %s", push_default, branch)
            branch = branch.upstream(self.backend)
        else:
            short_name = branch.short_name
            for remote in self.remotes_for_publish(owner):
                if self.backend.ref_exists(remote.name, short_name):
                    branch = Branch.remote(remote.name, short_name)
                    break
            else:
                logger.debug("No remote has %s; keeping local branch", short_name)

        if branch.is_remote:
            remote = self.catalog.find(branch.remote_name)
            if remote is not None:
                project = remote.project()
            else:
                logger.debug("Remote %s is not configured; keeping %s", branch.remote_name, project)

        return PublishTarget(branch, project)
