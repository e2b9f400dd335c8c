"""Release publishing with best-effort rollback.

States:

    IDLE --create--> CREATED --upload--> UPLOADED
                        |
                        +--upload fails--> rollback: delete release, delete tag

Creation failure leaves nothing to undo. A failed upload triggers the two
compensating steps in order; if one fails the next is not attempted and the
error says which step failed. No step is retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from gop.core.result import Err, Ok, Result
from gop.output.console import ConsoleProtocol
from gop.platform.files import list_files, write_temp_text
from gop.services.errors import (
    FileIOFailed,
    NoAssets,
    ReleaseCreateFailed,
    RollbackFailed,
    ToolMissing,
    UploadFailed,
)
from gop.services.gh import create_release, delete_release, ensure_gh_available, upload_assets
from gop.services.git import delete_remote_tag
from gop.services.model import ReleaseInfo

ReleaseError = (
    FileIOFailed | NoAssets | ToolMissing | ReleaseCreateFailed | UploadFailed | RollbackFailed
)


class ReleaseState(Enum):
    IDLE = auto()
    CREATED = auto()
    UPLOADED = auto()

    def __str__(self) -> str:
        return self.name.lower()


def _no_assets() -> tuple[Path, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    version: str
    state: ReleaseState
    assets: tuple[Path, ...] = field(default_factory=_no_assets)


def list_assets(dist_dir: Path) -> Result[list[Path], FileIOFailed | NoAssets]:
    """Files to upload; an empty directory is reported as ``NoAssets``."""
    try:
        assets = list_files(dist_dir)
    except OSError as e:
        return Err(FileIOFailed(dist_dir, e.strerror or str(e)))
    if not assets:
        return Err(NoAssets(dist_dir))
    return Ok(assets)


def _rollback(
    *,
    root: Path,
    version: str,
    remote: str,
    reason: str,
    console: ConsoleProtocol,
) -> Err[UploadFailed | RollbackFailed]:
    console.warning(f"Could not upload assets: {version}")

    console.print("Deleting release...")
    deleted = delete_release(root=root, version=version)
    if isinstance(deleted, Err):
        return Err(RollbackFailed(version, "delete_release", deleted.error.detail, remote))
    console.success("Release deleted")

    console.print("Deleting remote tag...")
    untagged = delete_remote_tag(root=root, remote=remote, tag=version)
    if isinstance(untagged, Err):
        return Err(RollbackFailed(version, "delete_tag", untagged.error.detail, remote))
    console.success("Remote tag deleted")

    return Err(UploadFailed(version, reason))


def publish_release(
    *,
    root: Path,
    release: ReleaseInfo,
    dist_dir: Path | None,
    prerelease: bool,
    remote: str,
    console: ConsoleProtocol,
) -> Result[ReleaseOutcome, ReleaseError]:
    """Create the release for ``release.version`` and upload ``dist_dir``.

    ``dist_dir`` is None when nothing was packaged; the release is then
    created without assets. The notes file is written next to the project
    and removed again whatever happens.
    """
    assets: list[Path] = []
    if dist_dir is not None:
        listed = list_assets(dist_dir)
        if isinstance(listed, Err):
            return listed
        assets = listed.value

    available = ensure_gh_available()
    if isinstance(available, Err):
        return available

    console.header("Releasing:")
    try:
        notes_file = write_temp_text(root, release.notes)
    except OSError as e:
        return Err(FileIOFailed(root, e.strerror or str(e)))

    console.print(f"  {release.version}")
    try:
        created = create_release(
            root=root,
            version=release.version,
            notes_file=notes_file,
            prerelease=prerelease,
        )
    finally:
        notes_file.unlink(missing_ok=True)
    if isinstance(created, Err):
        return Err(ReleaseCreateFailed(release.version, created.error.detail))

    if not assets:
        return Ok(ReleaseOutcome(version=release.version, state=ReleaseState.CREATED))

    console.header("Uploading assets:")
    for asset in assets:
        console.print(f"  {asset.name}")
    uploaded = upload_assets(root=root, version=release.version, assets=assets)
    if isinstance(uploaded, Err):
        return _rollback(
            root=root,
            version=release.version,
            remote=remote,
            reason=uploaded.error.detail,
            console=console,
        )

    return Ok(
        ReleaseOutcome(version=release.version, state=ReleaseState.UPLOADED, assets=tuple(assets))
    )
