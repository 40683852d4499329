"""Ordering of candidate remotes for publish operations."""

from __future__ import annotations

import logging
from typing import Sequence

from .catalog import RemoteCatalog
from .config import DEFAULT_REMOTE_PRECEDENCE
from .exceptions import BackendQueryError, RemoteNotFoundError, UnrecognizedHostError
from .models import Remote

logger = logging.getLogger(__name__)


def remotes_for_publish(
    catalog: RemoteCatalog,
    owner: str = "",
    precedence: Sequence[str] = DEFAULT_REMOTE_PRECEDENCE,
) -> list[Remote]:
    """Return publish candidates, highest priority first.

    Remotes whose project belongs to ``owner`` are collected first, then each
    name in ``precedence`` that resolves. Precedence names come out in
    precedence order. Every other owner match is then inserted at the front,
    one by one, so those remotes outrank the precedence names and end up in
    reverse catalog order among themselves.
    """

    try:
        remotes = catalog.load_remotes()
    except BackendQueryError as exc:
        logger.warning("Unable to list remotes: %s", exc)
        return []

    by_name: dict[str, Remote] = {}
    if owner:
        for remote in remotes:
            try:
                project = remote.project()
            except UnrecognizedHostError:
                continue
            if project.owner == owner:
                by_name[remote.name] = remote

    for name in precedence:
        if name in by_name:
            continue
        try:
            by_name[name] = catalog.remote_by_name(name)
        except RemoteNotFoundError:
            continue

    ordered: list[Remote] = []
    for name in precedence:
        if name in by_name:
            ordered.append(by_name.pop(name))

    # anything outside the precedence list has higher priority
    for remote in by_name.values():
        ordered.insert(0, remote)

    logger.debug("Publish candidates for owner %r: %s", owner, [r.name for r in ordered])
    return ordered


__all__ = ["DEFAULT_REMOTE_PRECEDENCE", "remotes_for_publish"]
