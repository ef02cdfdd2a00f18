# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Package manager detection from lockfiles next to ``package.json``."""

from enum import Enum
from pathlib import Path

from .._util.logging_utils import _log_debug


class PackageManagerKind(Enum):
    """Package managers recognised by their lockfile.

    Declaration order is the detection priority.
    """

    NPM = ("package-lock.json", "NPM")
    YARN = ("yarn.lock", "Yarn")
    PNPM = ("pnpm-lock.yaml", "PNPM")

    def __init__(self, lockfile: str, display_name: str) -> None:
        self.lockfile = lockfile
        self.display_name = display_name

    def __str__(self) -> str:
        return self.display_name


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as e:
        _log_debug(f"probe failed for {path}: {e}")
        return False


def detect_package_manager(manifest_path: Path) -> PackageManagerKind | None:
    """Return the package manager whose lockfile sits beside *manifest_path*.

    When several lockfiles are present the first one in declaration order
    (NPM, Yarn, PNPM) wins. Lockfiles are only checked for existence.
    """
    for kind in PackageManagerKind:
        if _exists(manifest_path.with_name(kind.lockfile)):
            return kind
    return None
