import json
import unittest
import unittest.mock
from importlib import metadata

from tbsctl.lib.core.version import _get_pep610_revision, format_version_string, get_version_info


class VersionTests(unittest.TestCase):
    def test_format_release(self) -> None:
        self.assertEqual(format_version_string("0.2.0", None), "0.2.0")

    def test_format_with_revision(self) -> None:
        self.assertEqual(format_version_string("0.2.0", "main"), "0.2.0 [main]")

    def test_get_version_info_returns_strings(self) -> None:
        version, _revision = get_version_info()
        self.assertIsInstance(version, str)

    def test_pep610_requested_revision(self) -> None:
        dist = unittest.mock.Mock()
        dist.read_text.return_value = json.dumps(
            {"url": "https://example.invalid/tbsctl.git", "vcs_info": {"requested_revision": "dev"}}
        )
        with unittest.mock.patch(
            "tbsctl.lib.core.version.metadata.distribution", return_value=dist
        ):
            self.assertEqual(_get_pep610_revision(), "dev")

    def test_pep610_missing_distribution(self) -> None:
        with unittest.mock.patch(
            "tbsctl.lib.core.version.metadata.distribution",
            side_effect=metadata.PackageNotFoundError("tbsctl"),
        ):
            self.assertIsNone(_get_pep610_revision())
