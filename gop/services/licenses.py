"""License and notice collection.

Two passes feed one mapping from in-archive name to source file:

- the vendor tree, walked recursively; each match is named
  ``<grandparent>-<parent>-<filename>`` so that licenses of different modules
  never share a name (``vendor/github.com/pkg/errors/LICENSE`` becomes
  ``pkg-errors-license``);
- the project root, non-recursively; the first match is named
  ``<project>-<filename>``.

When two vendor files produce the same name the one visited last wins.
Directories are visited in sorted order so the outcome is stable across runs.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from gop.core.config import WALK_EXCLUDES
from gop.core.result import Err, Ok, Result
from gop.services.errors import FileIOFailed
from gop.services.model import LicenseFile, LicenseSet

LICENSE_NAMES = frozenset({"license", "copying", "notice"})


@dataclass(frozen=True, slots=True)
class LicenseCollection:
    files: LicenseSet
    project_license: Path | None


def is_license(filename: str) -> bool:
    stem, _ = os.path.splitext(filename)
    return stem.lower() in LICENSE_NAMES


def is_excluded(name: str, excludes: frozenset[str] = WALK_EXCLUDES) -> bool:
    _, ext = os.path.splitext(name)
    return name in excludes or (bool(ext) and ext in excludes)


def vendor_target_name(path: Path) -> str:
    parent = path.parent
    return "-".join((parent.parent.name, parent.name, path.name.lower()))


def project_target_name(project_name: str, path: Path) -> str:
    return f"{project_name}-{path.name.lower()}"


def collect_vendor_licenses(
    root: Path,
    *,
    excludes: frozenset[str] = WALK_EXCLUDES,
) -> Result[dict[str, Path], FileIOFailed]:
    """Walk ``root`` and map target names to license files found below it.

    A missing ``root`` yields an empty mapping.
    """
    found: dict[str, Path] = {}
    if not root.is_dir():
        return Ok(found)

    walk_errors: list[OSError] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=walk_errors.append):
        dirnames[:] = sorted(d for d in dirnames if not is_excluded(d, excludes))
        for name in sorted(filenames):
            if is_excluded(name, excludes) or not is_license(name):
                continue
            path = Path(dirpath) / name
            found[vendor_target_name(path)] = path

    if walk_errors:
        error = walk_errors[0]
        return Err(FileIOFailed(Path(error.filename or root), error.strerror or str(error)))
    return Ok(found)


def find_project_license(root: Path) -> Result[Path | None, FileIOFailed]:
    """Return the first license-like file directly in ``root``, if any."""
    try:
        entries: Iterable[Path] = sorted(root.iterdir())
    except OSError as e:
        return Err(FileIOFailed(root, e.strerror or str(e)))

    for entry in entries:
        if entry.is_file() and is_license(entry.name):
            return Ok(entry)
    return Ok(None)


def collect_licenses(
    *,
    vendor_root: Path,
    project_root: Path,
    project_name: str,
) -> Result[LicenseCollection, FileIOFailed]:
    """Run both passes and freeze the result.

    The returned ``files`` are sorted by target name and never change after
    this call, so archive workers can read them concurrently.
    """
    vendor = collect_vendor_licenses(vendor_root)
    if isinstance(vendor, Err):
        return vendor
    mapping = vendor.value

    own = find_project_license(project_root)
    if isinstance(own, Err):
        return own
    if own.value is not None:
        mapping[project_target_name(project_name, own.value)] = own.value

    files = tuple(
        LicenseFile(target_name=name, source_path=path) for name, path in sorted(mapping.items())
    )
    return Ok(LicenseCollection(files=files, project_license=own.value))
