"""Tests for environment-driven settings."""

from __future__ import annotations

import os
import unittest
from unittest import mock

from git_publish_target.config import DEFAULT_REMOTE_PRECEDENCE, Settings, load_settings


class LoadSettingsTests(unittest.TestCase):
    @mock.patch.dict(os.environ, {}, clear=True)
    def test_defaults(self) -> None:
        self.assertEqual(load_settings(), Settings())
        self.assertEqual(load_settings().remote_precedence, DEFAULT_REMOTE_PRECEDENCE)

    @mock.patch.dict(os.environ, {"GITHUB_HOST": "GHE.example.com, github.com"}, clear=True)
    def test_extra_hosts(self) -> None:
        self.assertEqual(load_settings().known_hosts, ("github.com", "ghe.example.com"))

    @mock.patch.dict(os.environ, {"GIT_PUBLISH_REMOTES": "mine, origin"}, clear=True)
    def test_remote_precedence_override(self) -> None:
        self.assertEqual(load_settings().remote_precedence, ("mine", "origin"))


if __name__ == "__main__":
    unittest.main()
