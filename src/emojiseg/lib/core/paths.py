# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import os
from pathlib import Path

try:
    from platformdirs import (
        user_config_dir as _user_config_dir,
        user_data_dir as _user_data_dir,
    )
except ImportError:  # optional dependency
    _user_config_dir = _user_data_dir = None  # type: ignore[assignment]


APP_NAME = "emojiseg"


def config_root() -> Path:
    """
    Base directory for configuration (config.yml).

    Priority:
      1. EMOJISEG_CONFIG_DIR
      2. platformdirs user config dir
      3. ${XDG_CONFIG_HOME:-~/.config}/emojiseg
    """
    env = os.getenv("EMOJISEG_CONFIG_DIR")
    if env:
        return Path(env).expanduser()

    if _user_config_dir is not None:
        return Path(_user_config_dir(APP_NAME))
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. EMOJISEG_STATE_DIR
      2. platformdirs user data dir
      3. ${XDG_DATA_HOME:-~/.local/share}/emojiseg
    """
    env = os.getenv("EMOJISEG_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _user_data_dir is not None:
        return Path(_user_data_dir(APP_NAME))

    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME
