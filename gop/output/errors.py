"""Error presentation.

Single place where error kinds become console lines and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gop.core.errors import ErrorCode
from gop.output.console import Style
from gop.services.errors import (
    ArchiveFailed,
    ChangelogMalformed,
    ChangelogMissing,
    FileIOFailed,
    GopError,
    ManifestMalformed,
    ManifestMissing,
    NoAssets,
    ReleaseCreateFailed,
    RollbackFailed,
    ToolMissing,
    UploadFailed,
    VendorFailed,
)

if TYPE_CHECKING:
    from gop.output.console import ConsoleProtocol

__all__ = ["print_error", "error_exit_code"]


def print_error(error: GopError, console: ConsoleProtocol) -> None:
    match error:
        case ManifestMissing(path=path, hint=hint):
            console.error(f"{path.name} not found")
            console.print(f"hint: {hint}", Style.DIM)
        case ManifestMalformed(path=path):
            console.error(f"{path.name} has no 'module <path>' line")
        case ChangelogMissing(path=path):
            console.error(f"{path.name} not found")
            console.print(f"hint: add {path.name} with a '# <version>' heading", Style.DIM)
        case ChangelogMalformed(path=path):
            console.error(f"{path.name} has no '# <version>' heading")
        case ToolMissing(tool=tool, hint=hint):
            console.error(f"{tool}: missing")
            console.print(f"hint: {hint}", Style.DIM)
        case FileIOFailed(path=path, reason=reason):
            console.error(f"{path}: {reason}")
        case VendorFailed(reason=reason):
            console.error(f"go mod vendor failed: {reason}")
        case ArchiveFailed(archive=archive, reason=reason):
            console.error(f"could not build {archive}: {reason}")
        case NoAssets(directory=directory):
            console.warning(f"No assets in {directory.name} directory")
        case ReleaseCreateFailed(version=version, reason=reason):
            console.error(f"could not create release {version}: {reason}")
        case UploadFailed(version=version, reason=reason):
            console.error(f"could not upload assets for {version}: {reason}")
            console.print("release and remote tag were removed", Style.DIM)
        case RollbackFailed(version=version, step=step, reason=reason, remote=remote):
            what = "release" if step == "delete_release" else "remote tag"
            console.error(f"could not delete {what}: {version} ({reason})")
            if step == "delete_release":
                console.print(f"hint: gh release delete {version} --yes", Style.DIM)
            console.print(f"hint: git push {remote} --delete {version}", Style.DIM)


def error_exit_code(error: GopError) -> int:
    match error:
        case NoAssets():
            return int(ErrorCode.OK)
        case ManifestMissing() | ManifestMalformed():
            return int(ErrorCode.USER_ERROR)
        case ChangelogMissing() | ChangelogMalformed():
            return int(ErrorCode.USER_ERROR)
        case ToolMissing():
            return int(ErrorCode.ENV_ERROR)
        case VendorFailed() | ArchiveFailed():
            return int(ErrorCode.BUILD_ERROR)
        case FileIOFailed():
            return int(ErrorCode.IO_ERROR)
        case ReleaseCreateFailed() | UploadFailed() | RollbackFailed():
            return int(ErrorCode.PUBLISH_ERROR)
    return int(ErrorCode.USER_ERROR)
