# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version information for scriptctl, shown by ``scriptctl --version``."""

import json
from importlib import metadata
from typing import Any

LICENSE = "Apache-2.0"


def get_version_info() -> tuple[str, str | None]:
    """Get the version and, for VCS installs, the requested revision.

    The version comes from the installed ``scriptctl`` package (see
    ``scriptctl.__version__``). The revision is read from PEP 610
    ``direct_url.json`` metadata, which pip records when installing from a
    VCS URL (``pip install git+https://...``). Releases and local installs
    have no revision.

    Returns:
        tuple: (version_string, revision) where revision may be None
    """
    try:
        from scriptctl import __version__

        version = __version__
    except (ImportError, AttributeError):
        version = "unknown"

    return version, _get_pep610_revision()


def _get_pep610_revision(dist_name: str = "scriptctl") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        dist = metadata.distribution(dist_name)
        direct_url = dist.read_text("direct_url.json")
    except (metadata.PackageNotFoundError, UnicodeDecodeError, OSError):
        return None

    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info") if isinstance(data, dict) else None
    if not isinstance(vcs_info, dict):
        return None

    def validate_and_strip(value: Any) -> str | None:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
        return None

    # requested_revision (branch/tag) reads better than a bare commit id
    if result := validate_and_strip(vcs_info.get("requested_revision")):
        return result
    return validate_and_strip(vcs_info.get("commit_id"))


def format_version_string(version: str, revision: str | None) -> str:
    """Format version and revision into a display string.

    Returns:
        Formatted string like "0.1.0" or "0.1.0 [main]", followed by a
        license line.
    """
    base_version = version
    if revision:
        base_version = f"{version} [{revision}]"
    return f"{base_version}\nLicense: {LICENSE}"
