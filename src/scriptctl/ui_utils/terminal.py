# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Terminal ANSI formatting helpers.

Core color functions are defined in ``scriptctl.lib._util.ansi``. This module
re-exports ``supports_color`` and adds ``Palette``, which maps the semantic
styles used by the CLI report onto concrete colors.
"""

from scriptctl.lib._util.ansi import (  # noqa: F401  -- re-exports
    black,
    blue,
    color,
    cyan,
    green,
    red,
    supports_color,
    violet,
    yellow,
)


class Palette:
    """Semantic text styles for CLI output.

    With *enabled* False every method returns its input unchanged, so callers
    never branch on color support themselves.
    """

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def location(self, text: str) -> str:
        return black(text, self.enabled, bold=True)

    def warning(self, text: str) -> str:
        return yellow(text, self.enabled)

    def info(self, text: str) -> str:
        return blue(text, self.enabled, bold=True)

    def success(self, text: str) -> str:
        return green(text, self.enabled, bold=True)

    def failure(self, text: str) -> str:
        return red(text, self.enabled, bold=True)

    def detail(self, text: str) -> str:
        """Non-bold error text, used for diagnostics under a failure line."""
        return red(text, self.enabled)

    def script_name(self, text: str) -> str:
        return cyan(text, self.enabled, bold=True)

    def script_command(self, text: str) -> str:
        return violet(text, self.enabled, bold=True)
