"""Top-level package for git-publish-target."""

from importlib import metadata

from .models import Branch, Project, PublishTarget, Remote
from .repository import LocalRepo


try:  # pragma: no cover - best effort metadata lookup
    __version__ = metadata.version("git-publish-target")
except metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "Branch", "LocalRepo", "Project", "PublishTarget", "Remote"]
