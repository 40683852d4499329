"""Turn remote URLs into hosted project identities."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlparse

from .config import DEFAULT_HOST
from .exceptions import UnrecognizedHostError
from .models import Project

_SCP_RE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^/:]+):(?P<path>[^/].*)$")
_HOST_ALIASES = {"ssh.github.com": "github.com"}


def parse_project(url: str, known_hosts: Iterable[str] = (DEFAULT_HOST,)) -> Project:
    """Parse ``url`` into a Project when it points at one of ``known_hosts``.

    Accepts https, http, git and ssh URLs as well as the scp-like
    ``git@host:owner/name.git`` form.
    """

    host, path = _split_url(url.strip())
    if not host:
        raise UnrecognizedHostError(url, "no host")
    host = _HOST_ALIASES.get(host.lower(), host.lower())
    hosts = {h.lower() for h in known_hosts}
    if host not in hosts:
        raise UnrecognizedHostError(url, f"unknown host {host}")
    parts = [part for part in path.strip("/").split("/") if part]
    if len(parts) < 2:
        raise UnrecognizedHostError(url, "expected <owner>/<name>")
    owner = parts[-2]
    name = parts[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        raise UnrecognizedHostError(url, "expected <owner>/<name>")
    return Project(owner=owner, name=name, host=host)


def _split_url(url: str) -> tuple[str, str]:
    if "://" in url:
        parsed = urlparse(url)
        return parsed.hostname or "", parsed.path
    match = _SCP_RE.match(url)
    if match:
        return match.group("host"), match.group("path")
    return "", url


__all__ = ["parse_project"]
