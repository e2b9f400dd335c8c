"""Filesystem helpers."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

__all__ = ["recreate_dir", "write_temp_text", "list_files"]


def recreate_dir(path: Path) -> None:
    """Create ``path`` as an empty directory, wiping anything already there."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()
    path.mkdir(parents=True)


def write_temp_text(
    directory: Path,
    content: str,
    *,
    prefix: str = "temp",
    suffix: str = ".md",
    encoding: str = "utf-8",
) -> Path:
    """Write ``content`` to a new uniquely named file in ``directory``.

    The caller owns the returned file and must remove it.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=str(directory))
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return tmp_path


def list_files(directory: Path) -> list[Path]:
    """Regular files directly inside ``directory``, sorted by name."""
    return sorted(p for p in directory.iterdir() if p.is_file())
