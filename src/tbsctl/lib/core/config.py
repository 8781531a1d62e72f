import os
import shlex
import sys
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root

# ---------- Defaults ----------

DEFAULT_BRIDGE = "adb"
DEFAULT_DEVICE_ROOT = "/sdcard/TBS"
DEFAULT_CONFIG_FILE = "config.json"
DEFAULT_LOG_DIR = "Log"
DEFAULT_SENSOR = {"dui": 32, "address": 1, "signal": 5}


class ConfigurationError(SystemExit):
    """Fatal configuration problem detected before any process is spawned.

    Subclasses ``SystemExit`` so an unhandled instance ends the CLI with the
    message on stderr and a non-zero exit code.
    """


# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    - If TBSCTL_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) config_root()/config.yml (TBSCTL_CONFIG_DIR, XDG_CONFIG_HOME or ~/.config)
        2) sys.prefix/etc/tbsctl/config.yml
        3) /etc/tbsctl/config.yml
    """
    env_file = os.environ.get("TBSCTL_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    user_cfg = _config_root() / "config.yml"
    sp_cfg = Path(sys.prefix) / "etc" / "tbsctl" / "config.yml"
    etc_cfg = Path("/etc/tbsctl/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit TBSCTL_CONFIG_FILE is returned even if missing to make intent
    visible to the user. If nothing exists, return the last search path.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    try:
        data = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read config file {cfg_path}: {exc}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {cfg_path} must contain a mapping at top level")
    return data


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote ``sensor: 5``),
    returns ``{}`` to avoid ``AttributeError`` in callers that expect ``.get()``.
    """
    value = load_global_config().get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Bridge ----------


def get_bridge_executable() -> str:
    """Return the bridge executable.

    Precedence: TBSCTL_ADB env var, ``bridge.executable`` in config, ``adb``.
    """
    env = os.environ.get("TBSCTL_ADB")
    if env:
        return env
    return str(get_global_section("bridge").get("executable") or DEFAULT_BRIDGE)


def get_bridge_serial() -> str | None:
    """Return ``bridge.serial`` from config, or None to let adb pick the device."""
    serial = get_global_section("bridge").get("serial")
    return str(serial) if serial else None


# ---------- Device layout ----------


def get_device_root() -> str:
    """Return the remote application directory (default ``/sdcard/TBS``)."""
    root = str(get_global_section("device").get("root") or DEFAULT_DEVICE_ROOT)
    return root.rstrip("/") or "/"


def _plain_name(key: str, default: str) -> str:
    """Return ``device.<key>``, rejecting values that contain directories."""
    name = str(get_global_section("device").get(key) or default)
    if "/" in name or "\\" in name or name in (".", ".."):
        raise ConfigurationError(
            f"device.{key} must be a plain name without directories, got {name!r}"
        )
    return name


def get_config_file_name() -> str:
    """Return the config file name used on both sides (default ``config.json``)."""
    return _plain_name("config_file", DEFAULT_CONFIG_FILE)


def get_log_dir_name() -> str:
    """Return the log directory name used on both sides (default ``Log``)."""
    return _plain_name("log_dir", DEFAULT_LOG_DIR)


# ---------- Sensor simulation ----------


def get_sensor_defaults() -> dict[str, int]:
    """Return default ``dui``/``address``/``signal`` values for ``am rx``.

    Values from the ``sensor`` config section override the built-in defaults.
    Non-integer values are a configuration error.
    """
    section = get_global_section("sensor")
    result = dict(DEFAULT_SENSOR)
    for key in DEFAULT_SENSOR:
        if key not in section or section[key] is None:
            continue
        try:
            result[key] = int(section[key])
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"sensor.{key} must be an integer, got {section[key]!r}"
            )
    return result


# ---------- File opener ----------


def get_open_command() -> list[str] | None:
    """Return the configured ``open.command`` as an argument list, or None.

    Accepts either a YAML list or a shell-like string (``"code -r"``).
    """
    value = get_global_section("open").get("command")
    if not value:
        return None
    if isinstance(value, list):
        return [str(v) for v in value]
    return shlex.split(str(value))
