# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Sequential execution of planned steps.

A plan is an ordered list of steps.  Each step is either an
:class:`Invocation` (an external program spawned as a direct child, no shell)
or a :class:`LocalStep` (an in-process filesystem action).  Steps run in
order and the first failing step aborts the rest of the plan.
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from ._util.ansi import gray, red, supports_color
from ._util.logging_utils import _log_debug


@dataclass(frozen=True)
class Invocation:
    """An external program and its argument vector."""

    program: str
    args: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return " ".join(shlex.quote(a) for a in self.argv)


@dataclass(frozen=True)
class LocalStep:
    """A named in-process action.  Its callable must not raise."""

    description: str
    action: Callable[[], None] = field(compare=False)

    def __str__(self) -> str:
        return f"({self.description})"


Step = Invocation | LocalStep


def run_invocation(invocation: Invocation) -> bool:
    """Spawn *invocation*, wait for it and return True iff it exited with 0.

    A spawn failure (missing or non-executable program) is reported on stderr
    as ``<program>: <error>`` and returns False instead of raising.
    """
    try:
        result = subprocess.run(invocation.argv)  # noqa: S603
    except OSError as e:
        print(red(f"{invocation.program}: {e}", supports_color()), file=sys.stderr)
        _log_debug(f"spawn failed: {invocation} ({e})")
        return False
    if result.returncode != 0:
        _log_debug(f"exit {result.returncode}: {invocation}")
        return False
    _log_debug(f"ok: {invocation}")
    return True


def run_step(step: Step) -> bool:
    if isinstance(step, LocalStep):
        step.action()
        _log_debug(f"local: {step.description}")
        return True
    return run_invocation(step)


def run_plan(steps: Iterable[Step], *, dry_run: bool = False, echo: bool = False) -> bool:
    """Run *steps* in order, stopping at the first failure.

    With *dry_run* each step is printed instead of executed and the plan
    counts as successful.  With *echo* each step is printed before it runs.
    """
    color_enabled = supports_color()
    for step in steps:
        if dry_run or echo:
            print(gray(f"$ {step}", color_enabled))
        if dry_run:
            continue
        if not run_step(step):
            print(red(f"Failed: {step}", color_enabled), file=sys.stderr)
            return False
    return True
