from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal


@dataclass(frozen=True, slots=True)
class ManifestMissing:
    path: Path
    hint: str = "Generate it with: go mod init <path>"


@dataclass(frozen=True, slots=True)
class ManifestMalformed:
    path: Path


@dataclass(frozen=True, slots=True)
class ChangelogMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class ChangelogMalformed:
    path: Path


@dataclass(frozen=True, slots=True)
class ToolMissing:
    tool: str
    hint: str


@dataclass(frozen=True, slots=True)
class FileIOFailed:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class VendorFailed:
    reason: str


@dataclass(frozen=True, slots=True)
class ArchiveFailed:
    archive: str
    reason: str


@dataclass(frozen=True, slots=True)
class NoAssets:
    directory: Path


@dataclass(frozen=True, slots=True)
class ReleaseCreateFailed:
    version: str
    reason: str


@dataclass(frozen=True, slots=True)
class UploadFailed:
    """Upload failed; the release and its tag were rolled back."""

    version: str
    reason: str


@dataclass(frozen=True, slots=True)
class RollbackFailed:
    """Upload failed and a compensating step failed too.

    ``step`` names the step that failed; later steps were not attempted.
    """

    version: str
    step: Literal["delete_release", "delete_tag"]
    reason: str
    remote: str = "origin"


GopError = (
    ManifestMissing
    | ManifestMalformed
    | ChangelogMissing
    | ChangelogMalformed
    | ToolMissing
    | FileIOFailed
    | VendorFailed
    | ArchiveFailed
    | NoAssets
    | ReleaseCreateFailed
    | UploadFailed
    | RollbackFailed
)
