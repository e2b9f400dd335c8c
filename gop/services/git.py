from __future__ import annotations

from pathlib import Path

from gop.core.result import Result
from gop.platform.process import ProcessError, run_streamed


def delete_remote_tag(*, root: Path, remote: str, tag: str) -> Result[None, ProcessError]:
    """Remove ``tag`` from ``remote``; the local tag, if any, is kept."""
    return run_streamed(["git", "push", remote, "--delete", tag], cwd=root)
