"""Tests for remote URL parsing."""

from __future__ import annotations

import unittest

from git_publish_target.exceptions import UnrecognizedHostError
from git_publish_target.models import Project
from git_publish_target.urls import parse_project


class ParseProjectTests(unittest.TestCase):
    def test_supported_url_forms(self) -> None:
        expected = Project("octo", "widgets", "github.com")
        urls = [
            "git@github.com:octo/widgets.git",
            "git@github.com:octo/widgets",
            "https://github.com/octo/widgets.git",
            "https://github.com/octo/widgets/",
            "http://github.com/octo/widgets",
            "git://github.com/octo/widgets.git",
            "ssh://git@github.com/octo/widgets.git",
            "ssh://git@ssh.github.com:443/octo/widgets.git",
            "https://GitHub.com/octo/widgets",
        ]
        for url in urls:
            with self.subTest(url=url):
                self.assertEqual(parse_project(url), expected)

    def test_extra_known_host(self) -> None:
        project = parse_project("https://ghe.example.com/team/app.git", ("github.com", "ghe.example.com"))

        self.assertEqual(project, Project("team", "app", "ghe.example.com"))

    def test_unknown_host_is_rejected(self) -> None:
        with self.assertRaises(UnrecognizedHostError) as ctx:
            parse_project("https://gitlab.com/octo/widgets.git")
        self.assertEqual(ctx.exception.url, "https://gitlab.com/octo/widgets.git")

    def test_local_paths_are_rejected(self) -> None:
        for url in ("/srv/git/widgets.git", "../widgets", "file:///srv/git/widgets.git"):
            with self.subTest(url=url):
                with self.assertRaises(UnrecognizedHostError):
                    parse_project(url)

    def test_missing_owner_is_rejected(self) -> None:
        with self.assertRaises(UnrecognizedHostError):
            parse_project("https://github.com/widgets")


if __name__ == "__main__":
    unittest.main()
