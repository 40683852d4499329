"""Lazily loaded list of configured remotes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import DEFAULT_HOST
from .exceptions import RemoteNotFoundError
from .models import Remote
from .protocol import GitBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unloaded:
    pass


@dataclass(frozen=True)
class Loaded:
    remotes: tuple[Remote, ...]


class RemoteCatalog:
    """Remotes of one resolution session, loaded at most once.

    A failed load leaves the catalog unloaded so a later access retries.
    """

    def __init__(self, backend: GitBackend, known_hosts: tuple[str, ...] = (DEFAULT_HOST,)):
        self.backend = backend
        self.known_hosts = known_hosts
        self._state: Unloaded | Loaded = Unloaded()

    @property
    def is_loaded(self) -> bool:
        return isinstance(self._state, Loaded)

    def load_remotes(self) -> tuple[Remote, ...]:
        if isinstance(self._state, Loaded):
            return self._state.remotes
        pairs = self.backend.list_remotes()
        remotes = tuple(Remote(name, url, known_hosts=self.known_hosts) for name, url in pairs)
        self._state = Loaded(remotes)
        logger.debug("Loaded %d remote(s): %s", len(remotes), ", ".join(r.name for r in remotes))
        return remotes

    @property
    def remotes(self) -> tuple[Remote, ...]:
        return self.load_remotes()

    def find(self, name: str) -> Remote | None:
        for remote in self.load_remotes():
            if remote.name == name:
                return remote
        return None

    def remote_by_name(self, name: str) -> Remote:
        remote = self.find(name)
        if remote is None:
            raise RemoteNotFoundError(name)
        return remote
