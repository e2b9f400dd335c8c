from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Identity of the Go module being released.

    Attributes:
        module_path: Module path from the manifest, e.g. ``github.com/owner/repo``.
        project_name: Last ``/`` segment of the module path.
    """

    module_path: str
    project_name: str


@dataclass(frozen=True, slots=True)
class ReleaseInfo:
    """Topmost changelog entry.

    Attributes:
        version: Heading text, used as tag and title.
        notes: Lines between the first and second heading.
    """

    version: str
    notes: str


@dataclass(frozen=True, slots=True)
class LicenseFile:
    target_name: str
    source_path: Path


type LicenseSet = tuple[LicenseFile, ...]
