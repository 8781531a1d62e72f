import unittest
import unittest.mock

from tbsctl.lib.opener import open_invocation
from test_utils import config_env


class OpenInvocationTests(unittest.TestCase):
    def test_linux(self) -> None:
        with config_env(), unittest.mock.patch("tbsctl.lib.opener.sys.platform", "linux"):
            self.assertEqual(open_invocation("config.json").argv, ["xdg-open", "config.json"])

    def test_macos(self) -> None:
        with config_env(), unittest.mock.patch("tbsctl.lib.opener.sys.platform", "darwin"):
            self.assertEqual(open_invocation("config.json").argv, ["open", "config.json"])

    def test_windows(self) -> None:
        with config_env(), unittest.mock.patch("tbsctl.lib.opener.sys.platform", "win32"):
            self.assertEqual(
                open_invocation("config.json").argv,
                ["cmd", "/c", "start", "", "config.json"],
            )

    def test_configured_command_wins(self) -> None:
        with config_env("open:\n  command: code -r\n"):
            self.assertEqual(open_invocation("config.json").argv, ["code", "-r", "config.json"])
