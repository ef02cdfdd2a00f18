# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Pure ANSI color utilities.

The presentation layer (``ui_utils.terminal``) builds its semantic
``Palette`` on top of these helpers.
"""

import os
import sys

BOLD = "1"


def supports_color() -> bool:
    """Check if stdout supports color output.

    Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions.
    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when stdout is not a TTY. Otherwise falls back to ``isatty()``;
    a stream that cannot answer (closed, replaced, detached) means no color.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError, OSError):
        return False


def color(text: str, code: str, enabled: bool, bold: bool = False) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True.

    Args:
        text: The string to colorize.
        code: ANSI SGR parameter (e.g. ``"31"`` for red).
        enabled: When False the original *text* is returned unchanged.
        bold: Prefix the bold attribute to *code*.
    """
    if not enabled:
        return text
    if bold:
        code = f"{BOLD};{code}"
    return f"\x1b[{code}m{text}\x1b[0m"


def black(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in black (ANSI 30) when *enabled*."""
    return color(text, "30", enabled, bold)


def red(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in red (ANSI 31) when *enabled*."""
    return color(text, "31", enabled, bold)


def green(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in green (ANSI 32) when *enabled*."""
    return color(text, "32", enabled, bold)


def yellow(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in yellow (ANSI 33) when *enabled*."""
    return color(text, "33", enabled, bold)


def blue(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in blue (ANSI 34) when *enabled*."""
    return color(text, "34", enabled, bold)


def violet(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in violet (ANSI 35) when *enabled*."""
    return color(text, "35", enabled, bold)


def cyan(text: str, enabled: bool, bold: bool = False) -> str:
    """Return *text* in cyan (ANSI 36) when *enabled*."""
    return color(text, "36", enabled, bold)
