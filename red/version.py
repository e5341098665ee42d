from __future__ import annotations

import importlib.metadata
import os
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

DISTRIBUTION_NAME = "red-viewer"


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Optional[str] = None) -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", *args], cwd=cwd or os.getcwd(), stderr=subprocess.DEVNULL
        )
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _package_version() -> str:
    # Version is fixed at build time by the packaging metadata
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _package_version()


def _from_embedded_file() -> Optional[BuildInfo]:
    # Generated at build time by hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    commit = getattr(_build_info, "COMMIT", None)
    date = getattr(_build_info, "DATE", None)
    if commit or date:
        return BuildInfo(commit=commit, date=date, dirty=False)
    return None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=str(here))
    if not root:
        return None

    commit = _run_git(["rev-parse", "HEAD"], cwd=root)
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=root)
    status = _run_git(["status", "--porcelain"], cwd=root)
    return BuildInfo(commit=commit, date=date, dirty=bool(status))


def get_build_info() -> BuildInfo:
    # Priority: embedded file -> live git repo -> unknowns
    for getter in (_from_embedded_file, _from_git_repo):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_version_string() -> str:
    """Return e.g. ``red 0.1.0 (1a2b3c4-dirty 2026-10-19T12:00:00+02:00)``."""
    info = get_build_info()
    if not (info.commit or info.date):
        return f"red {__version__}"
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes when available
    commit = info.commit[:7] if info.commit else "unknown"
    date = info.date or "unknown"
    return f"red {__version__} ({commit}{dirty_suffix} {date})"
