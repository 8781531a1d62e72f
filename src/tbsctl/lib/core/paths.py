# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "tbsctl"


def config_root() -> Path:
    """
    Base directory for user configuration (config.yml).

    Priority:
      1. TBSCTL_CONFIG_DIR
      2. XDG_CONFIG_HOME/tbsctl
      3. platformdirs user config dir
    """
    env = os.getenv("TBSCTL_CONFIG_DIR")
    if env:
        return Path(env).expanduser()

    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. TBSCTL_STATE_DIR
      2. platformdirs user data dir (``~/.local/share/tbsctl`` on Linux)
    """
    env = os.getenv("TBSCTL_STATE_DIR")
    if env:
        return Path(env).expanduser()
    return Path(user_data_dir(APP_NAME))
