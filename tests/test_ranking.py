"""Tests for publish remote ordering."""

from __future__ import annotations

import unittest

from git_publish_target.catalog import RemoteCatalog
from git_publish_target.ranking import DEFAULT_REMOTE_PRECEDENCE, remotes_for_publish
from git_publish_target.testing import FakeGitBackend


def _names(remotes) -> list[str]:
    return [remote.name for remote in remotes]


class RemotesForPublishTests(unittest.TestCase):
    def _catalog(self, *remotes: tuple[str, str], **kwargs) -> RemoteCatalog:
        return RemoteCatalog(FakeGitBackend(remotes=remotes, **kwargs))

    def test_default_precedence(self) -> None:
        self.assertEqual(DEFAULT_REMOTE_PRECEDENCE, ("origin", "github", "upstream"))

    def test_without_owner_only_precedence_names(self) -> None:
        catalog = self._catalog(
            ("origin", "git@github.com:x/proj.git"),
            ("b", "git@github.com:y/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog, "")), ["origin"])

    def test_precedence_order_ignores_catalog_order(self) -> None:
        catalog = self._catalog(
            ("upstream", "git@github.com:core/proj.git"),
            ("github", "git@github.com:me/proj.git"),
            ("origin", "git@github.com:mirror/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog)), ["origin", "github", "upstream"])

    def test_owner_matches_are_prepended_in_reverse(self) -> None:
        catalog = self._catalog(
            ("origin", "git@github.com:A/proj.git"),
            ("fork1", "git@github.com:B/proj.git"),
            ("fork2", "git@github.com:B/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog, "B")), ["fork2", "fork1", "origin"])

    def test_owner_matching_precedence_name_keeps_its_slot(self) -> None:
        catalog = self._catalog(
            ("origin", "git@github.com:core/proj.git"),
            ("upstream", "git@github.com:B/proj.git"),
            ("mine", "git@github.com:B/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog, "B")), ["mine", "origin", "upstream"])

    def test_owner_match_is_case_sensitive(self) -> None:
        catalog = self._catalog(
            ("origin", "git@github.com:core/proj.git"),
            ("fork", "git@github.com:Me/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog, "me")), ["origin"])

    def test_unparsable_remotes_are_skipped(self) -> None:
        catalog = self._catalog(
            ("origin", "/srv/git/proj.git"),
            ("lab", "git@gitlab.com:B/proj.git"),
            ("fork", "git@github.com:B/proj.git"),
        )

        self.assertEqual(_names(remotes_for_publish(catalog, "B")), ["fork", "origin"])

    def test_no_remotes(self) -> None:
        self.assertEqual(remotes_for_publish(self._catalog(), "B"), [])

    def test_custom_precedence(self) -> None:
        catalog = self._catalog(
            ("origin", "git@github.com:core/proj.git"),
            ("mine", "git@github.com:me/proj.git"),
        )

        result = remotes_for_publish(catalog, "", precedence=("mine", "origin"))

        self.assertEqual(_names(result), ["mine", "origin"])

    def test_backend_failure_gives_no_candidates(self) -> None:
        catalog = self._catalog(("origin", "git@github.com:core/proj.git"), fail_list_remotes=1)

        with self.assertLogs("git_publish_target.ranking", level="WARNING"):
            self.assertEqual(remotes_for_publish(catalog), [])


if __name__ == "__main__":
    unittest.main()
