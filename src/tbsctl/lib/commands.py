# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Command values and the planner that turns them into ordered steps.

Every command is a small frozen dataclass.  :func:`plan` resolves
configuration, validates parameters and returns the complete list of steps
before anything is executed, so a configuration error never leaves a
command half-run.
"""

from __future__ import annotations

import shlex
import shutil
from dataclasses import dataclass
from pathlib import Path

from ._util.logging_utils import _log_debug
from .bridge import Bridge, Intent, int_extra, string_extra
from .core.config import (
    ConfigurationError,
    get_config_file_name,
    get_device_root,
    get_log_dir_name,
    get_sensor_defaults,
)
from .executor import LocalStep, Step
from .opener import open_invocation

# ---------- Device-side components ----------

CONFIG_UPDATED_ACTION = "com.mobilehelp.action.config.updated"

REGISTER_COMPONENT = "com.mobilehelp.alert/.ui.registration.WelcomeActivity"
REGISTER_ACTION = "com.mobilehelp.auto.register"

SENSOR_COMPONENT = "com.mobilehelp.stub.i2c/.services.I2CService"
SENSOR_ACTION = "fake"

CALL_COMPONENT = "com.mobilehelp.alert/.ui.call.CallLauncherActivity"
CALL_CATEGORY = "android.intent.category.DEFAULT"
VIDYO_ACTION = "com.mobilehelp.action.call.vidyo"
ZOOM_ACTION = "com.mobilehelp.action.call.zoom"


# ---------- Commands ----------


@dataclass(frozen=True)
class PullConfig:
    """Fetch the device config file and open it locally."""


@dataclass(frozen=True)
class PullLog:
    """Replace the local log directory with the device logs."""


@dataclass(frozen=True)
class PushConfig:
    """Upload the local config file and notify the app."""


@dataclass(frozen=True)
class ClearLog:
    """Remove all logs on the device."""


@dataclass(frozen=True)
class Register:
    phone: str
    token: str


@dataclass(frozen=True)
class SimulateSensor:
    """Fake a received 433 MHz packet.  ``None`` fields use configured defaults."""

    dui: int | None = None
    address: int | None = None
    signal: int | None = None


@dataclass(frozen=True)
class VidyoCall:
    room: str
    pin: str | None = None
    display_name: str | None = None
    host: str | None = None


@dataclass(frozen=True)
class ZoomCall:
    link: str | None = None
    number: str | None = None
    password: str | None = None


Command = (
    PullConfig
    | PullLog
    | PushConfig
    | ClearLog
    | Register
    | SimulateSensor
    | VidyoCall
    | ZoomCall
)


# ---------- Local actions ----------


def reset_local_dir(path: Path) -> None:
    """Delete *path* if present and recreate it empty.  Errors are ignored.

    A symlink or regular file at *path* is removed rather than followed.
    """
    if path.is_symlink() or path.is_file():
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            _log_debug(f"could not remove {path}: {e}")
    shutil.rmtree(path, ignore_errors=True)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        _log_debug(f"could not create {path}: {e}")


# ---------- Planning ----------


def resolve_sensor(command: SimulateSensor) -> dict[str, int]:
    """Return the effective dui/address/signal for *command*."""
    values = get_sensor_defaults()
    for key in ("dui", "address", "signal"):
        value = getattr(command, key)
        if value is not None:
            values[key] = int(value)
    return values


def zoom_extras(command: ZoomCall) -> tuple:
    """Validate *command* and return its intent extras.

    A meeting link is passed on its own.  Without a link both the meeting
    number and the password are required.
    """
    if command.link:
        return (string_extra("link", command.link),)
    missing = [
        flag
        for flag, value in (("--number", command.number), ("--password", command.password))
        if not value
    ]
    if missing:
        raise ConfigurationError(
            "Zoom call needs either --link or both --number and --password "
            f"(missing: {', '.join(missing)})"
        )
    return (
        string_extra("meetingNumber", command.number),
        string_extra("password", command.password),
    )


def vidyo_extras(command: VidyoCall) -> tuple:
    if not command.room:
        raise ConfigurationError("Vidyo call needs a room")
    extras = [string_extra("room", command.room)]
    if command.pin:
        extras.append(string_extra("pin", command.pin))
    if command.display_name:
        extras.append(string_extra("displayName", command.display_name))
    if command.host:
        extras.append(string_extra("host", command.host))
    return tuple(extras)


def _call_intent(action: str, extras: tuple) -> Intent:
    return Intent(
        component=CALL_COMPONENT,
        action=action,
        category=CALL_CATEGORY,
        single_top=True,
        extras=extras,
    )


def plan(command: Command, bridge: Bridge | None = None) -> list[Step]:
    """Return the ordered steps that carry out *command*.

    Raises :class:`ConfigurationError` for missing parameters or bad config;
    nothing has been executed at that point.
    """
    if bridge is None:
        bridge = Bridge.from_config()
    root = get_device_root()

    if isinstance(command, PullConfig):
        name = get_config_file_name()
        return [bridge.pull(f"{root}/{name}"), open_invocation(name)]

    if isinstance(command, PullLog):
        log_dir = get_log_dir_name()
        local = Path(log_dir)
        return [
            LocalStep(f"reset local {log_dir}/", lambda: reset_local_dir(local)),
            bridge.pull(f"{root}/{log_dir}", "."),
        ]

    if isinstance(command, PushConfig):
        return [
            bridge.push(get_config_file_name(), f"{root}/"),
            bridge.am_broadcast(Intent(action=CONFIG_UPDATED_ACTION)),
        ]

    if isinstance(command, ClearLog):
        # The trailing glob must reach the remote shell unquoted.
        remote_log = f"{root}/{get_log_dir_name()}"
        return [bridge.shell_line(f"rm -rf {shlex.quote(remote_log)}/*")]

    if isinstance(command, Register):
        intent = Intent(
            component=REGISTER_COMPONENT,
            action=REGISTER_ACTION,
            extras=(string_extra("phone", command.phone), string_extra("token", command.token)),
        )
        return [bridge.am_start(intent)]

    if isinstance(command, SimulateSensor):
        values = resolve_sensor(command)
        intent = Intent(
            component=SENSOR_COMPONENT,
            action=SENSOR_ACTION,
            extras=tuple(int_extra(k, values[k]) for k in ("dui", "address", "signal")),
        )
        return [bridge.am_startservice(intent)]

    if isinstance(command, VidyoCall):
        return [bridge.am_start(_call_intent(VIDYO_ACTION, vidyo_extras(command)))]

    if isinstance(command, ZoomCall):
        return [bridge.am_start(_call_intent(ZOOM_ACTION, zoom_extras(command)))]

    raise TypeError(f"Unknown command: {command!r}")
