"""Informational CLI commands: configuration overview."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib._util.ansi import gray as _gray, supports_color as _supports_color, yes_no as _yes_no
from ...lib.core.config import (
    get_bridge_executable as _get_bridge_executable,
    get_bridge_serial as _get_bridge_serial,
    get_config_file_name as _get_config_file_name,
    get_device_root as _get_device_root,
    get_log_dir_name as _get_log_dir_name,
    get_open_command as _get_open_command,
    get_sensor_defaults as _get_sensor_defaults,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
)
from ...lib.core.paths import state_root as _state_root
from ...lib.opener import open_invocation


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config)."""
    subparsers.add_parser("config", help="Show configuration paths and effective values")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the config command.  Returns True if handled."""
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _print_config() -> None:
    """Display configuration sources and the values in effect."""
    color_enabled = _supports_color()

    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    paths = _global_config_search_paths()
    if len(paths) > 1:
        print("- Global config search order:")
        for p in paths:
            exists = Path(p).is_file()
            print(f"  • {_gray(str(p), color_enabled)} (exists: {_yes_no(exists, color_enabled)})")

    print("Bridge:")
    print(f"- Executable: {_get_bridge_executable()}")
    print(f"- Serial: {_get_bridge_serial() or '-'}")

    root = _get_device_root()
    print("Device:")
    print(f"- Config file: {root}/{_get_config_file_name()}")
    print(f"- Log dir: {root}/{_get_log_dir_name()}")

    sensor = _get_sensor_defaults()
    print("Sensor defaults (am rx):")
    for key in ("dui", "address", "signal"):
        print(f"- {key}: {sensor[key]}")

    opener = open_invocation(_get_config_file_name())
    source = "config" if _get_open_command() else "platform default"
    print(f"File opener: {_gray(opener.program, color_enabled)} ({source})")

    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- Debug log: {_gray(str(sroot / 'tbsctl.log'), color_enabled)} "
        f"(state root exists: {_yes_no(Path(sroot).is_dir(), color_enabled)})"
    )

    print("Environment overrides (if set):")
    for var in (
        "TBSCTL_CONFIG_FILE",
        "TBSCTL_CONFIG_DIR",
        "TBSCTL_STATE_DIR",
        "TBSCTL_ADB",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")
