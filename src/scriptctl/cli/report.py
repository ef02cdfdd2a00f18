# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Rendering of an ``InspectionReport`` as terminal lines."""

from ..lib.inspector import InspectionReport
from ..ui_utils.terminal import Palette


def format_report(report: InspectionReport | None, palette: Palette) -> list[str]:
    """Return the output lines for *report* (None means nothing was found)."""
    if report is None:
        return [palette.warning("No package.json found")]

    lines = [palette.location(str(report.project_dir))]

    if report.package_manager is not None:
        lines.append(palette.info(f"{report.package_manager.display_name} lockfile found"))
    else:
        lines.append(palette.info("No package manager found"))

    if report.read_error is not None:
        lines.append(palette.failure("package.json could not be read"))
    elif report.parse_error is not None:
        lines.append(palette.failure("package.json is not valid JSON"))
        lines.append(palette.detail(str(report.parse_error)))
    elif report.manifest is not None and report.manifest.scripts:
        lines.append(palette.success("Available Commands"))
        for name, command in report.manifest.scripts.items():
            lines.append(f"{palette.script_name(name)} {palette.script_command(command)}")
    else:
        lines.append(palette.failure("No commands found"))

    return lines


def print_report(report: InspectionReport | None, palette: Palette) -> None:
    for line in format_report(report, palette):
        print(line)
