"""Protocol definition for git backends."""

from typing import Protocol


class GitBackend(Protocol):
    """Primitive queries the resolvers need from the version-control system."""

    def list_remotes(self) -> list[tuple[str, str]]:
        """Return ``(name, url)`` pairs in the order git reports them.

        Raises:
            BackendQueryError: If git cannot be queried
        """
        ...

    def read_head(self) -> str:
        """Return the full ref HEAD points at.

        Raises:
            DetachedHeadError: If HEAD is not on a named branch
        """
        ...

    def read_tracking_ref(self, ref: str) -> str:
        """Return the full ref of the tracking branch for local ``ref``.

        Raises:
            NoUpstreamError: If no tracking branch is configured
        """
        ...

    def read_config(self, key: str) -> str | None:
        """Return a git config value, or None when unset."""
        ...

    def ref_exists(self, remote: str, short_name: str) -> bool:
        """Check whether ``refs/remotes/<remote>/<short_name>`` exists locally."""
        ...

    def read_symbolic_ref(self, ref: str) -> str | None:
        """Return what a symbolic ref points at, or None when it is unset."""
        ...
