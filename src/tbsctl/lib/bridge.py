# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Invocation builders for the Android device bridge (adb).

Argument vectors are always built as lists.  ``adb shell`` joins its
arguments with spaces and hands the result to the remote shell, so every
remote word is quoted with :func:`shlex.quote` to keep values containing
whitespace as single arguments on the device.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass

from .core.config import get_bridge_executable, get_bridge_serial
from .executor import Invocation


@dataclass(frozen=True)
class Extra:
    """A typed intent extra: ``--es`` (string) or ``--ei`` (integer)."""

    key: str
    value: str
    flag: str = "--es"

    def am_args(self) -> list[str]:
        return [self.flag, self.key, self.value]


def string_extra(key: str, value: str) -> Extra:
    return Extra(key, str(value), "--es")


def int_extra(key: str, value: int) -> Extra:
    return Extra(key, str(int(value)), "--ei")


@dataclass(frozen=True)
class Intent:
    """Activity manager intent arguments.

    Rendered in the order ``-n COMPONENT -a ACTION [-c CATEGORY]
    [--activity-single-top] [extras...]``.
    """

    component: str | None = None
    action: str | None = None
    category: str | None = None
    single_top: bool = False
    extras: tuple[Extra, ...] = ()

    def am_args(self) -> list[str]:
        args: list[str] = []
        if self.component:
            args += ["-n", self.component]
        if self.action:
            args += ["-a", self.action]
        if self.category:
            args += ["-c", self.category]
        if self.single_top:
            args.append("--activity-single-top")
        for extra in self.extras:
            args += extra.am_args()
        return args


class Bridge:
    """Builds bridge invocations for one executable / device serial."""

    def __init__(self, executable: str = "adb", serial: str | None = None) -> None:
        self.executable = executable
        self.serial = serial

    @classmethod
    def from_config(cls) -> Bridge:
        return cls(get_bridge_executable(), get_bridge_serial())

    def invocation(self, *args: str) -> Invocation:
        prefix = ("-s", self.serial) if self.serial else ()
        return Invocation(self.executable, (*prefix, *args))

    def pull(self, remote: str, local: str | None = None) -> Invocation:
        """``adb pull REMOTE [LOCAL]``; without *local* adb writes to the cwd."""
        if local is None:
            return self.invocation("pull", remote)
        return self.invocation("pull", remote, local)

    def push(self, local: str, remote: str) -> Invocation:
        return self.invocation("push", local, remote)

    def shell(self, *words: str) -> Invocation:
        """Run *words* as one remote command, each word quoted for the remote shell."""
        return self.invocation("shell", *(shlex.quote(w) for w in words))

    def shell_line(self, command: str) -> Invocation:
        """Run *command* verbatim in the remote shell (caller handles quoting)."""
        return self.invocation("shell", command)

    def am_start(self, intent: Intent) -> Invocation:
        return self.shell("am", "start", *intent.am_args())

    def am_startservice(self, intent: Intent) -> Invocation:
        return self.shell("am", "startservice", *intent.am_args())

    def am_broadcast(self, intent: Intent) -> Invocation:
        return self.shell("am", "broadcast", *intent.am_args())
