# SPDX-FileCopyrightText: 2025-2026 tbsctl contributors
# SPDX-License-Identifier: Apache-2.0

"""Version information for ``tbs --version``."""

import json
from importlib import metadata
from typing import Any


def get_version_info() -> tuple[str, str | None]:
    """Return ``(version, revision)``.

    The revision comes from PEP 610 metadata (``direct_url.json``) and is only
    present when the package was installed from a VCS URL, e.g.
    ``pipx install git+https://...@branch``.  Releases return None.
    """
    try:
        from tbsctl import __version__

        version = __version__
    except (ImportError, AttributeError):
        version = "unknown"
    return version, _get_pep610_revision()


def _get_pep610_revision(dist_name: str = "tbsctl") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        dist = metadata.distribution(dist_name)
        direct_url = dist.read_text("direct_url.json")
    except (metadata.PackageNotFoundError, OSError, UnicodeDecodeError):
        return None

    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info")
    if not isinstance(vcs_info, dict):
        return None

    def validate_and_strip(value: Any) -> str | None:
        if isinstance(value, str):
            stripped = value.strip()
            if stripped:
                return stripped
        return None

    # Try requested_revision first, then commit_id
    if result := validate_and_strip(vcs_info.get("requested_revision")):
        return result
    return validate_and_strip(vcs_info.get("commit_id"))


def format_version_string(version: str, revision: str | None) -> str:
    """Format like ``"0.2.0"`` or ``"0.2.0 [main]"``."""
    if revision:
        return f"{version} [{revision}]"
    return version
