"""
Version and build information.

The installed version comes from package metadata. When the package was
built from a git checkout, setup.py also writes a `_build_info` module with
the commit it was built from.
"""

from __future__ import annotations

import importlib
import importlib.util
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

PACKAGE_NAME = "termdemo"


@dataclass(frozen=True)
class BuildInfo:
    """Commit details captured at build time."""

    commit: str
    commit_full: str
    build_time: str = ""
    modified: bool = False

    @classmethod
    def load(cls, module_name: str = f"{PACKAGE_NAME}._build_info") -> BuildInfo | None:
        """Read the generated build-info module, or None if it was not generated."""
        if importlib.util.find_spec(module_name) is None:
            return None
        module = importlib.import_module(module_name)
        commit_full = getattr(module, "COMMIT_HASH", "")
        if not commit_full:
            return None
        return cls(
            commit=getattr(module, "COMMIT_SHORT", "") or commit_full[:7],
            commit_full=commit_full,
            build_time=getattr(module, "BUILD_TIME", ""),
            modified=bool(getattr(module, "MODIFIED", False)),
        )


def package_version() -> str:
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        # Running from a source tree without installation
        return "0.1.0-dev"


def version_string(build: BuildInfo | None = None) -> str:
    """
    Format the version line shown by --version.

    Examples:
        termdemo 0.1.0
        termdemo 0.1.0 (commit a1b2c3d, modified)
    """
    line = f"{PACKAGE_NAME} {package_version()}"
    if build is None:
        return line
    details = f"commit {build.commit}"
    if build.modified:
        details += ", modified"
    return f"{line} ({details})"
