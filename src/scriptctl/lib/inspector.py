# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Combine manifest lookup, lockfile detection and parsing into one report."""

from dataclasses import dataclass
from pathlib import Path

from ._util.logging_utils import _log_debug
from .manifest import (
    Manifest,
    ManifestParseError,
    ManifestReadError,
    PackageManagerKind,
    detect_package_manager,
    find_manifest,
    load_manifest,
)


@dataclass(frozen=True)
class InspectionReport:
    """Everything the CLI prints about one ``package.json``.

    Exactly one of ``manifest``, ``read_error`` and ``parse_error`` is set.
    """

    manifest_path: Path
    package_manager: PackageManagerKind | None
    manifest: Manifest | None = None
    read_error: ManifestReadError | None = None
    parse_error: ManifestParseError | None = None

    @property
    def project_dir(self) -> Path:
        return self.manifest_path.parent


def inspect_directory(start: Path) -> InspectionReport | None:
    """Inspect the project containing *start*.

    Returns None when no ``package.json`` exists in *start* or any of its
    ancestors. Read and parse failures are captured on the report instead of
    being raised.
    """
    _log_debug(f"inspect: start={start}")
    manifest_path = find_manifest(start)
    if manifest_path is None:
        _log_debug("inspect: no package.json found")
        return None

    package_manager = detect_package_manager(manifest_path)
    _log_debug(f"inspect: manifest={manifest_path} package_manager={package_manager}")

    try:
        manifest = load_manifest(manifest_path)
    except ManifestReadError as e:
        _log_debug(f"inspect: read failed: {e}")
        return InspectionReport(manifest_path, package_manager, read_error=e)
    except ManifestParseError as e:
        _log_debug(f"inspect: parse failed: {e}")
        return InspectionReport(manifest_path, package_manager, parse_error=e)

    return InspectionReport(manifest_path, package_manager, manifest=manifest)
