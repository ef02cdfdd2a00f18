#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
from pathlib import Path

from ..lib.core.version import format_version_string, get_version_info
from ..lib.inspector import inspect_directory
from ..ui_utils.terminal import Palette, supports_color as _supports_color
from .report import print_report


def _build_parser() -> argparse.ArgumentParser:
    version, revision = get_version_info()
    parser = argparse.ArgumentParser(
        prog="scriptctl",
        description="scriptctl – show the scripts of the nearest package.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Looks for package.json in the current directory and its parents,\n"
            "reports the package manager (from package-lock.json, yarn.lock or\n"
            "pnpm-lock.yaml) and lists the scripts it declares.\n"
            "\n"
            "Set NO_COLOR to disable colors, FORCE_COLOR to force them."
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {format_version_string(version, revision)}",
    )
    return parser


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        raise SystemExit(f"Could not determine the current directory: {e}")


def main(argv: list[str] | None = None) -> None:
    _build_parser().parse_args(argv)

    cwd = _current_dir()
    report = inspect_directory(cwd)
    print_report(report, Palette(_supports_color()))


if __name__ == "__main__":
    main()
