"""GitHub CLI wrappers for release management.

Authentication is left to gh's own session (``gh auth login``).
"""

from __future__ import annotations

import shutil
from pathlib import Path

from gop.core.result import Err, Ok, Result
from gop.platform.process import ProcessError, run_streamed
from gop.services.errors import ToolMissing


def ensure_gh_available() -> Result[None, ToolMissing]:
    if shutil.which("gh") is None:
        return Err(ToolMissing(tool="gh", hint="Install GitHub CLI: https://cli.github.com/"))
    return Ok(None)


def create_release(
    *,
    root: Path,
    version: str,
    notes_file: Path,
    prerelease: bool,
) -> Result[None, ProcessError]:
    cmd = ["gh", "release", "create", version, "-t", version, "-F", str(notes_file)]
    if prerelease:
        cmd.append("-p")
    return run_streamed(cmd, cwd=root)


def upload_assets(*, root: Path, version: str, assets: list[Path]) -> Result[None, ProcessError]:
    """Upload every asset in a single gh call."""
    return run_streamed(["gh", "release", "upload", version, *map(str, assets)], cwd=root)


def delete_release(*, root: Path, version: str) -> Result[None, ProcessError]:
    return run_streamed(["gh", "release", "delete", version, "--yes"], cwd=root)
