"""Packaging pipeline: cross-compile, collect licenses, zip per platform."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gop.core.config import Settings
from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol
from gop.platform.files import list_files, recreate_dir
from gop.services.archive import build_archives, render_readme
from gop.services.errors import (
    ArchiveFailed,
    FileIOFailed,
    ToolMissing,
    VendorFailed,
)
from gop.services.licenses import collect_licenses
from gop.services.model import LicenseSet, ProjectInfo
from gop.services.toolchain import cross_compile, find_gox, vendor_dependencies

PackageError = FileIOFailed | ToolMissing | VendorFailed | ArchiveFailed


@dataclass(frozen=True, slots=True)
class PackageReport:
    archives: tuple[Path, ...]
    licenses: LicenseSet
    all_targets_built: bool


def _prepare(path: Path) -> Result[None, FileIOFailed]:
    try:
        recreate_dir(path)
    except OSError as e:
        return Err(FileIOFailed(path, e.strerror or str(e)))
    return Ok(None)


def package(
    *,
    root: Path,
    settings: Settings,
    project: ProjectInfo,
    console: ConsoleProtocol,
) -> Result[PackageReport, PackageError]:
    """Build release archives for every platform gox can target.

    ``dist`` and ``bin`` are recreated before anything runs concurrently.
    """
    dist_dir = root / settings.dist_dir
    bin_dir = root / settings.bin_dir
    for directory in (dist_dir, bin_dir):
        prepared = _prepare(directory)
        if isinstance(prepared, Err):
            return prepared

    gox = find_gox(root)
    if isinstance(gox, Err):
        return gox
    all_built = cross_compile(gox.value, bin_dir=bin_dir, cwd=root, console=console)

    try:
        binaries = list_files(bin_dir)
    except OSError as e:
        return Err(FileIOFailed(bin_dir, e.strerror or str(e)))

    vendored = vendor_dependencies(root)
    if isinstance(vendored, Err):
        return vendored

    collected = collect_licenses(
        vendor_root=root / settings.vendor_dir,
        project_root=root,
        project_name=project.project_name,
    )
    if isinstance(collected, Err):
        return collected
    licenses = collected.value
    if licenses.project_license is None:
        console.warning(f"Packaging {project.project_name} without license")

    console.header("Packaging:")
    archives = build_archives(
        binaries,
        dist_dir=dist_dir,
        project=project,
        licenses=licenses.files,
        readme=render_readme(project),
        console=console,
    )
    if isinstance(archives, Err):
        return archives

    return Ok(
        PackageReport(
            archives=tuple(archives.value),
            licenses=licenses.files,
            all_targets_built=all_built,
        )
    )
