"""Hatchling hook: record the version and git revision red was built from."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Optional

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_MODULE = Path("red") / "_build_info.py"

GIT_QUERIES = {
    "COMMIT": ("rev-parse", "HEAD"),
    "DATE": ("show", "-s", "--format=%cI", "HEAD"),
}


def git_output(root: Path, *args: str) -> Optional[str]:
    """Return stripped git output, or None outside a checkout or without git."""
    try:
        result = subprocess.run(
            ("git", *args), cwd=root, capture_output=True, text=True, check=True
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return result.stdout.strip() or None


def render_build_info(values: dict[str, Optional[str]]) -> str:
    body = "".join(f"{name} = {value!r}\n" for name, value in values.items())
    return "# Generated by hatch_build.py; do not edit.\n" + body


class CustomBuildHook(BuildHookInterface):
    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        values = {name: git_output(root, *args) for name, args in GIT_QUERIES.items()}
        values["BUILD_TARGET"] = version
        (root / BUILD_INFO_MODULE).write_text(render_build_info(values), encoding="utf-8")
        build_data.setdefault("artifacts", []).append(BUILD_INFO_MODULE.as_posix())
