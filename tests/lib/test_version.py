# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import json
import unittest
import unittest.mock
from importlib import metadata

from scriptctl.lib.core.version import (
    _get_pep610_revision,
    format_version_string,
    get_version_info,
)


def _dist_with(direct_url: str | None) -> unittest.mock.Mock:
    dist = unittest.mock.Mock()
    dist.read_text.return_value = direct_url
    return dist


class FormatVersionStringTests(unittest.TestCase):
    def test_release(self) -> None:
        self.assertEqual(format_version_string("0.1.0", None), "0.1.0\nLicense: Apache-2.0")

    def test_with_revision(self) -> None:
        self.assertEqual(
            format_version_string("0.1.0", "main"), "0.1.0 [main]\nLicense: Apache-2.0"
        )


class Pep610Tests(unittest.TestCase):
    def _revision(self, direct_url: str | None) -> str | None:
        with unittest.mock.patch(
            "scriptctl.lib.core.version.metadata.distribution",
            return_value=_dist_with(direct_url),
        ):
            return _get_pep610_revision()

    def test_requested_revision_preferred(self) -> None:
        payload = {"vcs_info": {"vcs": "git", "requested_revision": " dev ", "commit_id": "abc"}}
        self.assertEqual(self._revision(json.dumps(payload)), "dev")

    def test_commit_id_fallback(self) -> None:
        payload = {"vcs_info": {"vcs": "git", "commit_id": "abc123"}}
        self.assertEqual(self._revision(json.dumps(payload)), "abc123")

    def test_local_install(self) -> None:
        payload = {"url": "file:///src/scriptctl", "dir_info": {"editable": True}}
        self.assertIsNone(self._revision(json.dumps(payload)))

    def test_missing_or_broken_metadata(self) -> None:
        self.assertIsNone(self._revision(None))
        self.assertIsNone(self._revision("{not json"))

    def test_not_installed(self) -> None:
        with unittest.mock.patch(
            "scriptctl.lib.core.version.metadata.distribution",
            side_effect=metadata.PackageNotFoundError("scriptctl"),
        ):
            self.assertIsNone(_get_pep610_revision())

    def test_get_version_info(self) -> None:
        with (
            unittest.mock.patch("scriptctl.__version__", "9.9.9"),
            unittest.mock.patch(
                "scriptctl.lib.core.version._get_pep610_revision", return_value=None
            ),
        ):
            self.assertEqual(get_version_info(), ("9.9.9", None))
