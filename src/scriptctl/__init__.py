"""scriptctl package.

Modules:
- scriptctl.cli: CLI entry point package (scriptctl)
- scriptctl.lib.manifest: package.json lookup, lockfile detection, parsing
- scriptctl.lib.inspector: one-shot inspection report
- scriptctl.lib.core: State paths and version info
- scriptctl.lib._util: Internal helpers (ANSI colors, logging)
- scriptctl.ui_utils: Presentation helpers (semantic color palette)
"""

__all__ = [
    "cli",
    "lib",
    "ui_utils",
]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("scriptctl")
except Exception:
    # Fallback for development mode when package is not installed
    try:
        import tomllib
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
                __version__ = pyproject_data["project"]["version"]
        else:
            __version__ = "unknown"
    except Exception:
        __version__ = "unknown"
