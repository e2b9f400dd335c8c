"""Per-platform zip assembly.

Each cross-compiled binary gets its own archive in the dist directory:

    <dist>/repo-windows-amd64.zip
        readme.txt
        repo.exe
        licenses-and-notices/<target-name>...

Archives are built concurrently, one worker per binary. The readme text and
license set are immutable and shared; each worker owns its output file.
The first failure sets a shared cancellation event, every worker removes its
own output when it stops early, and already finished archives are removed
before the error is returned, so an error never leaves a partial dist set.
"""

from __future__ import annotations

import os
import re
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

from gop.core.config import LICENSE_DIR, PROTOCOL, README_NAME
from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol
from gop.services.errors import ArchiveFailed
from gop.services.model import LicenseSet, ProjectInfo

_WORD_START = re.compile(r"(?<!\w)\w")


class _Cancelled(Exception):
    """Raised inside a worker after a sibling failed."""


@dataclass(frozen=True, slots=True)
class ArchiveJob:
    """Everything one worker needs; shared fields are read-only."""

    artifact: Path
    dist_dir: Path
    project_name: str
    readme: str
    licenses: LicenseSet

    @property
    def base_name(self) -> str:
        return os.path.splitext(self.artifact.name)[0]

    @property
    def extension(self) -> str:
        return os.path.splitext(self.artifact.name)[1]

    @property
    def archive_path(self) -> Path:
        return self.dist_dir / f"{self.base_name}.zip"

    @property
    def binary_entry(self) -> str:
        return f"{self.project_name}{self.extension}"


def title_case(name: str) -> str:
    """Uppercase the first letter of every word, leaving the rest as is."""
    return _WORD_START.sub(lambda m: m.group(0).upper(), name)


def render_readme(project: ProjectInfo) -> str:
    return (
        f"Thank you for downloading {title_case(project.project_name)}\n"
        "If you would like to contribute and/or download the source code, visit:\n"
        f"{PROTOCOL}{project.module_path}\n"
    )


def license_entry(target_name: str) -> str:
    return f"{LICENSE_DIR}/{target_name}"


def _check(cancel: threading.Event) -> None:
    if cancel.is_set():
        raise _Cancelled()


def build_archive(job: ArchiveJob, cancel: threading.Event) -> Path:
    """Write one archive; raises OSError on I/O failure.

    On any failure or cancellation the partial archive is removed and the
    cancellation event is set for the other workers.
    """
    out = job.archive_path
    try:
        _check(cancel)
        # Build outputs may carry mtime=0, which ZIP cannot represent.
        with ZipFile(out, "w", compression=ZIP_DEFLATED, strict_timestamps=False) as zf:
            zf.writestr(README_NAME, job.readme)
            _check(cancel)
            zf.write(job.artifact, arcname=job.binary_entry)
            for lic in job.licenses:
                _check(cancel)
                zf.write(lic.source_path, arcname=license_entry(lic.target_name))
    except BaseException:
        cancel.set()
        out.unlink(missing_ok=True)
        raise
    return out


def build_archives(
    artifacts: list[Path],
    *,
    dist_dir: Path,
    project: ProjectInfo,
    licenses: LicenseSet,
    readme: str,
    console: ConsoleProtocol,
) -> Result[list[Path], ArchiveFailed]:
    """Build one archive per artifact and wait for all of them.

    Returns the archive paths in artifact order.
    """
    if not artifacts:
        return Ok([])

    jobs = [
        ArchiveJob(
            artifact=artifact,
            dist_dir=dist_dir,
            project_name=project.project_name,
            readme=readme,
            licenses=licenses,
        )
        for artifact in artifacts
    ]
    cancel = threading.Event()
    failure: ArchiveFailed | None = None
    built: list[Path] = []

    with ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="archive") as executor:
        futures = {executor.submit(build_archive, job, cancel): job for job in jobs}
        for future in as_completed(futures):
            job = futures[future]
            try:
                built.append(future.result())
            except _Cancelled:
                continue
            except OSError as e:
                if failure is None:
                    failure = ArchiveFailed(job.archive_path.name, e.strerror or str(e))
                continue
            console.print(f"  {job.archive_path.name}")

    if failure is not None:
        for path in built:
            path.unlink(missing_ok=True)
        return Err(failure)

    return Ok([job.archive_path for job in jobs])
