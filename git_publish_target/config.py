"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_HOST = "github.com"
DEFAULT_REMOTE_PRECEDENCE: tuple[str, ...] = ("origin", "github", "upstream")

PUSH_DEFAULT_KEY = "push.default"
TRACKING_PUSH_DEFAULTS = frozenset({"upstream", "tracking"})


@dataclass(frozen=True)
class Settings:
    """Knobs that shape a resolution session."""

    known_hosts: tuple[str, ...] = (DEFAULT_HOST,)
    remote_precedence: tuple[str, ...] = field(default=DEFAULT_REMOTE_PRECEDENCE)


def load_settings() -> Settings:
    return Settings(
        known_hosts=get_known_hosts(),
        remote_precedence=get_remote_precedence(),
    )


def get_known_hosts() -> tuple[str, ...]:
    """Hosts accepted when parsing remote URLs, github.com always first."""
    hosts = [DEFAULT_HOST]
    for host in _split_env("GITHUB_HOST"):
        host = host.lower()
        if host not in hosts:
            hosts.append(host)
    return tuple(hosts)


def get_remote_precedence() -> tuple[str, ...]:
    names = _split_env("GIT_PUBLISH_REMOTES")
    if names:
        return tuple(names)
    return DEFAULT_REMOTE_PRECEDENCE


def _split_env(var: str) -> list[str]:
    raw = os.environ.get(var, "")
    return [part.strip() for part in raw.split(",") if part.strip()]


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_REMOTE_PRECEDENCE",
    "PUSH_DEFAULT_KEY",
    "TRACKING_PUSH_DEFAULTS",
    "Settings",
    "load_settings",
    "get_known_hosts",
    "get_remote_precedence",
]
