# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for the state directory."""

import getpass
import os
from pathlib import Path

from platformdirs import user_state_dir

APP_NAME = "scriptctl"


def _is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. SCRIPTCTL_STATE_DIR
      2. if root   → /var/lib/scriptctl
         else      → platformdirs user state dir (~/.local/state/scriptctl)
    """
    env = os.getenv("SCRIPTCTL_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/var/lib") / APP_NAME

    return Path(user_state_dir(APP_NAME))


def log_path() -> Path:
    """Location of the debug log written by ``_log_debug``."""
    return state_root() / f"{APP_NAME}.log"
