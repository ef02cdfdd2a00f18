# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Locating, classifying and loading ``package.json`` manifests."""

from .model import (
    Manifest,
    ManifestError,
    ManifestParseError,
    ManifestReadError,
    dump_manifest,
    load_manifest,
    parse_manifest,
)
from .package_manager import PackageManagerKind, detect_package_manager
from .search import MANIFEST_NAME, find_manifest, iter_ancestors

__all__ = [
    "MANIFEST_NAME",
    "Manifest",
    "ManifestError",
    "ManifestParseError",
    "ManifestReadError",
    "PackageManagerKind",
    "detect_package_manager",
    "dump_manifest",
    "find_manifest",
    "iter_ancestors",
    "load_manifest",
    "parse_manifest",
]
