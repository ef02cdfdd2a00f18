# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Nearest-ancestor lookup of ``package.json``."""

import os
from collections.abc import Iterator
from pathlib import Path

from .._util.logging_utils import _log_debug

MANIFEST_NAME = "package.json"


def iter_ancestors(start: Path) -> Iterator[Path]:
    """Yield *start* (made absolute) and then each parent up to the root."""
    start = start.absolute()
    yield start
    yield from start.parents


def _is_file(path: Path) -> bool:
    """Existence probe that treats OS errors as "not there"."""
    try:
        return path.is_file()
    except OSError as e:
        _log_debug(f"probe failed for {path}: {e}")
        return False


def _has_exact_name(path: Path) -> bool:
    """Check the entry name case-sensitively.

    On case-insensitive filesystems ``is_file`` also accepts ``PACKAGE.JSON``.
    When the directory cannot be listed the ``is_file`` answer stands.
    """
    try:
        return path.name in os.listdir(path.parent)
    except OSError as e:
        _log_debug(f"listing failed for {path.parent}: {e}")
        return True


def find_manifest(start: Path) -> Path | None:
    """Return the nearest ``package.json`` at or above *start*, or None.

    Only the top level of each directory is checked; the walk stops at the
    first hit.
    """
    for directory in iter_ancestors(start):
        candidate = directory / MANIFEST_NAME
        if _is_file(candidate) and _has_exact_name(candidate):
            return candidate
    return None
