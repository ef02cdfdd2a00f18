# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for logging."""

import time


def _log_debug(message: str) -> None:
    """Append a simple debug line to the scriptctl log.

    Writes timestamped lines to ``state_root()/scriptctl.log``. Fully
    exception-safe: any IO error is silently ignored so this function never
    raises or affects the report printed on stdout.
    """
    try:
        from ..core.paths import log_path

        path = log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        with open(path, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except Exception:
        pass
