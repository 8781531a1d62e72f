from __future__ import annotations

import os
import tempfile
import unittest
import unittest.mock
from pathlib import Path

from tbsctl.lib.core import config as cfg
from test_utils import config_env


class ConfigPathTests(unittest.TestCase):
    def test_global_config_search_paths_env_override(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            cfg_path = Path(td) / "config.yml"
            with unittest.mock.patch.dict(os.environ, {"TBSCTL_CONFIG_FILE": str(cfg_path)}):
                paths = cfg.global_config_search_paths()
                self.assertEqual(paths, [cfg_path.expanduser().resolve()])
                # explicit override wins even when missing
                self.assertEqual(cfg.global_config_path(), cfg_path.resolve())

    def test_global_config_path_prefers_xdg(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            xdg = Path(td)
            config_file = xdg / "tbsctl" / "config.yml"
            config_file.parent.mkdir(parents=True, exist_ok=True)
            config_file.write_text("sensor:\n  dui: 30\n", encoding="utf-8")
            with unittest.mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(xdg)}):
                os.environ.pop("TBSCTL_CONFIG_FILE", None)
                os.environ.pop("TBSCTL_CONFIG_DIR", None)
                self.assertEqual(cfg.global_config_path(), config_file.resolve())

    def test_missing_file_is_empty_config(self) -> None:
        with config_env():
            self.assertEqual(cfg.load_global_config(), {})


class ConfigValueTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with config_env():
            self.assertEqual(cfg.get_bridge_executable(), "adb")
            self.assertIsNone(cfg.get_bridge_serial())
            self.assertEqual(cfg.get_device_root(), "/sdcard/TBS")
            self.assertEqual(cfg.get_config_file_name(), "config.json")
            self.assertEqual(cfg.get_log_dir_name(), "Log")
            self.assertEqual(cfg.get_sensor_defaults(), {"dui": 32, "address": 1, "signal": 5})
            self.assertIsNone(cfg.get_open_command())

    def test_values_from_config(self) -> None:
        yaml_text = (
            "bridge:\n"
            "  executable: /opt/android/adb\n"
            "  serial: emulator-5554\n"
            "device:\n"
            "  root: /sdcard/Other/\n"
            "sensor:\n"
            "  dui: 30\n"
            "open:\n"
            "  command: code -r\n"
        )
        with config_env(yaml_text):
            self.assertEqual(cfg.get_bridge_executable(), "/opt/android/adb")
            self.assertEqual(cfg.get_bridge_serial(), "emulator-5554")
            self.assertEqual(cfg.get_device_root(), "/sdcard/Other")
            self.assertEqual(cfg.get_sensor_defaults(), {"dui": 30, "address": 1, "signal": 5})
            self.assertEqual(cfg.get_open_command(), ["code", "-r"])

    def test_open_command_as_list(self) -> None:
        with config_env("open:\n  command: [gedit, --new-window]\n"):
            self.assertEqual(cfg.get_open_command(), ["gedit", "--new-window"])

    def test_env_overrides_bridge_executable(self) -> None:
        with config_env(
            "bridge:\n  executable: from-config\n", extra_env={"TBSCTL_ADB": "from-env"}
        ):
            self.assertEqual(cfg.get_bridge_executable(), "from-env")

    def test_non_dict_section_is_ignored(self) -> None:
        with config_env("sensor: 5\n"):
            self.assertEqual(cfg.get_global_section("sensor"), {})
            self.assertEqual(cfg.get_sensor_defaults()["dui"], 32)

    def test_non_integer_sensor_value_is_error(self) -> None:
        with config_env("sensor:\n  signal: strong\n"):
            with self.assertRaises(cfg.ConfigurationError) as ctx:
                cfg.get_sensor_defaults()
            self.assertIn("sensor.signal", str(ctx.exception))

    def test_invalid_yaml_is_error(self) -> None:
        with config_env("bridge: [unclosed\n"):
            with self.assertRaises(cfg.ConfigurationError):
                cfg.load_global_config()

    def test_top_level_list_is_error(self) -> None:
        with config_env("- a\n- b\n"):
            with self.assertRaises(cfg.ConfigurationError):
                cfg.load_global_config()

    def test_config_file_with_directory_is_error(self) -> None:
        with config_env("device:\n  config_file: conf/config.json\n"):
            with self.assertRaises(cfg.ConfigurationError) as ctx:
                cfg.get_config_file_name()
            self.assertIn("device.config_file", str(ctx.exception))

    def test_log_dir_with_directory_is_error(self) -> None:
        with config_env("device:\n  log_dir: ../Log\n"):
            with self.assertRaises(cfg.ConfigurationError):
                cfg.get_log_dir_name()
